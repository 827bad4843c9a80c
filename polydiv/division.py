"""Polynomial long division over coefficient vectors.

Responsibilities:
- Divide a dividend vector by a divisor vector into quotient and remainder.
- Guard the numeric edge cases: absent operands, zero divisor, short
  dividend, and non-finite quotient terms or remainders.

Vectors are ascending-power (`index == power`). The routine works on private
copies and never mutates caller data.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import math

from .errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    MissingOperandError,
)
from .models.datatypes import DivisionResult, Polynomial, coefficient_list


def subtract_coefficients(
    minuend: Sequence[float], subtrahend: Sequence[float]
) -> list[float]:
    """Subtract two coefficient vectors element-wise by power.

    The shorter vector is treated as zero-padded at its high end, so the result
    has the length of the longer input.

    Example:
        `[9, 8, 7] - [2, 3, 4, 5] == [7, 5, 3, -5]`
    """

    length = max(len(minuend), len(subtrahend))
    return [
        (minuend[index] if index < len(minuend) else 0.0)
        - (subtrahend[index] if index < len(subtrahend) else 0.0)
        for index in range(length)
    ]


def _drop_high_zeros(coefficients: list[float]) -> list[float]:
    """Return the vector without zero coefficients above its leading term."""

    end = len(coefficients)
    while end > 1 and coefficients[end - 1] == 0:
        end -= 1
    return coefficients[:end]


def divide(
    dividend: Polynomial | Iterable[float] | None,
    divisor: Polynomial | Iterable[float] | None,
) -> DivisionResult:
    """Divide `dividend` by `divisor` using coefficient-array long division.

    The result satisfies `dividend == divisor * quotient + remainder` with the
    remainder either zero or of lower degree than the divisor. A dividend
    shorter than the divisor yields a zero quotient and the dividend itself as
    remainder.

    Args:
        dividend: Ascending-power dividend coefficients or a `Polynomial`.
        divisor: Ascending-power divisor coefficients or a `Polynomial`.

    Raises:
        MissingOperandError: If either operand is `None` (divisor is checked first).
        DivisionByZeroError: If every divisor coefficient is zero.
        ArithmeticOverflowError: If a quotient term or a remainder coefficient
            becomes infinite or NaN.
    """

    if divisor is None:
        raise MissingOperandError("divisor")
    if dividend is None:
        raise MissingOperandError("dividend")

    divisor_values = coefficient_list(divisor)
    dividend_values = coefficient_list(dividend)

    if all(value == 0 for value in divisor_values):
        raise DivisionByZeroError(divisor_values)
    if all(value == 0 for value in dividend_values):
        return DivisionResult(Polynomial([0.0]), Polynomial([0.0]))

    # The leading divisor coefficient must be non-zero for the loop below.
    divisor_values = _drop_high_zeros(divisor_values)
    if len(dividend_values) < len(divisor_values):
        return DivisionResult(Polynomial([0.0]), Polynomial(dividend_values))

    working = list(dividend_values)
    divisor_last = len(divisor_values) - 1
    dividend_pointer = len(working) - 1
    quotient_descending: list[float] = []

    while dividend_pointer >= divisor_last:
        leading = working[dividend_pointer]
        term = leading / divisor_values[divisor_last]
        if math.isinf(term) or math.isnan(term):
            raise ArithmeticOverflowError(
                dividend=dividend_values,
                divisor=divisor_values,
                dividend_index=dividend_pointer,
                divisor_index=divisor_last,
                dividend_value=leading,
                divisor_value=divisor_values[divisor_last],
                term=term,
            )
        quotient_descending.append(term)

        subtrahend = [0.0] * (dividend_pointer + 1)
        offset = dividend_pointer - divisor_last
        for divisor_pointer in range(divisor_last, -1, -1):
            subtrahend[offset + divisor_pointer] = divisor_values[divisor_pointer] * term

        working = subtract_coefficients(working, subtrahend)
        if not all(math.isfinite(value) for value in working):
            raise ArithmeticOverflowError(
                dividend=dividend_values,
                divisor=divisor_values,
                dividend_index=dividend_pointer,
                divisor_index=divisor_last,
                dividend_value=leading,
                divisor_value=divisor_values[divisor_last],
                term=term,
                remainder=working,
            )
        dividend_pointer -= 1

    remainder = working[: max(dividend_pointer, 0) + 1]
    return DivisionResult(
        Polynomial(list(reversed(quotient_descending))),
        Polynomial(remainder),
    )
