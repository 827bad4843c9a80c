"""Domain exceptions for polynomial parsing, division, and CLI diagnostics.

Core errors derive from `PolynomialError` and from the matching builtin
exception, so callers may catch either the domain type or the builtin one.
"""

from __future__ import annotations

from collections.abc import Sequence


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class PolynomialError(Exception):
    """Base class for errors raised by the computational core."""


class GrammarError(PolynomialError, ValueError):
    """Raised when text does not match the polynomial or term grammar."""

    def __init__(self, text: str | None) -> None:
        """Keep the rejected text for diagnostics."""

        super().__init__(f"Invalid polynomial: {text!r}")
        self.text = text


class MissingOperandError(PolynomialError, TypeError):
    """Raised when a required coefficient vector is absent."""

    def __init__(self, operand: str) -> None:
        """Name the operand that was `None`."""

        super().__init__(f"Missing operand: `{operand}` must not be None.")
        self.operand = operand


class TextOperandError(PolynomialError, TypeError):
    """Raised when polynomial text is passed where coefficients are expected."""

    def __init__(self, text: str) -> None:
        """Keep the text that was passed as coefficients."""

        super().__init__(
            f"Expected a coefficient sequence, got text {text!r}; "
            "parse polynomial text with `normalize` first."
        )
        self.text = text


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    """Raised when the divisor has only zero coefficients."""

    def __init__(self, divisor: Sequence[float]) -> None:
        """Keep a copy of the all-zero divisor."""

        super().__init__(
            f"Division by the zero polynomial {format_coefficients(divisor)}."
        )
        self.divisor = list(divisor)


class ArithmeticOverflowError(PolynomialError, ArithmeticError):
    """Raised when a quotient term or the running remainder stops being finite."""

    def __init__(
        self,
        *,
        dividend: Sequence[float],
        divisor: Sequence[float],
        dividend_index: int,
        divisor_index: int,
        dividend_value: float,
        divisor_value: float,
        term: float,
        remainder: Sequence[float] | None = None,
    ) -> None:
        """Record both operands and the division step that overflowed."""

        subject = "Quotient term" if remainder is None else "Remainder"
        super().__init__(
            f"{subject} is not finite: "
            f"dividend={format_coefficients(dividend)} "
            f"divisor={format_coefficients(divisor)} "
            f"dividend[{dividend_index}]={dividend_value!r} / "
            f"divisor[{divisor_index}]={divisor_value!r} = {term!r}."
            + ("" if remainder is None else f" remainder={format_coefficients(remainder)}.")
        )
        self.dividend = list(dividend)
        self.divisor = list(divisor)
        self.dividend_index = dividend_index
        self.divisor_index = divisor_index
        self.dividend_value = dividend_value
        self.divisor_value = divisor_value
        self.term = term
        self.remainder = None if remainder is None else list(remainder)


class CoefficientIndexError(PolynomialError, IndexError):
    """Raised on coefficient access outside `[0, length)`."""

    def __init__(self, index: int, length: int) -> None:
        """Record the rejected index and the vector length."""

        super().__init__(
            f"Coefficient index {index} is out of range for length {length}."
        )
        self.index = index
        self.length = length


class RangeError(PolynomialError, ValueError):
    """Raised for unsatisfiable random generator bounds."""


def format_coefficients(coefficients: Sequence[float]) -> str:
    """Render a coefficient vector as `{a0, a1, ...}` for diagnostics."""

    return "{" + ", ".join(repr(float(value)) for value in coefficients) + "}"
