"""Core datatypes shared across polydiv modules.

Responsibilities:
- Represent coefficient vectors as a bounds-checked polynomial value type.
- Provide immutable records for division results and rendered reports.

Key types:
- `Polynomial`, `DivisionResult`, and `DivisionReport`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..errors import CoefficientIndexError, TextOperandError
from ..formatter import format_polynomial


def _zero_coefficients() -> list[float]:
    """Return the coefficient vector of the zero polynomial."""

    return [0.0]


@dataclass(slots=True)
class Polynomial:
    """A single-variable polynomial stored as a coefficient vector.

    Index `i` holds the coefficient of `x^i`. Trailing zero coefficients are
    allowed; the degree is derived from the highest non-zero entry.

    Attributes:
        coefficients: Ascending-power coefficients, at least one entry.
    """

    coefficients: list[float] = field(default_factory=_zero_coefficients)

    def __post_init__(self) -> None:
        """Copy the input vector into a float list and enforce a non-empty vector."""

        self.coefficients = coefficient_list(self.coefficients)
        if not self.coefficients:
            raise ValueError("A polynomial needs at least one coefficient.")

    @classmethod
    def of(cls, *coefficients: float) -> Polynomial:
        """Build a polynomial from ascending-power positional coefficients."""

        return cls(list(coefficients) or [0.0])

    @property
    def degree(self) -> int:
        """Highest power with a non-zero coefficient, `0` for the zero polynomial."""

        index = len(self.coefficients) - 1
        while index > 0 and self.coefficients[index] == 0:
            index -= 1
        return index

    @property
    def is_zero(self) -> bool:
        """Whether every coefficient is zero."""

        return all(value == 0 for value in self.coefficients)

    def to_text(self, stretched: bool = False) -> str:
        """Render canonical text, optionally with spaces around operators."""

        return format_polynomial(self.coefficients, stretched=stretched)

    def _check_index(self, index: int) -> None:
        """Raise `CoefficientIndexError` unless index addresses a stored coefficient."""

        if not 0 <= index < len(self.coefficients):
            raise CoefficientIndexError(index, len(self.coefficients))

    def __getitem__(self, index: int) -> float:
        """Return the coefficient of `x^index`."""

        self._check_index(index)
        return self.coefficients[index]

    def __setitem__(self, index: int, value: float) -> None:
        """Replace the coefficient of `x^index`."""

        self._check_index(index)
        self.coefficients[index] = float(value)

    def __len__(self) -> int:
        """Return the number of stored coefficients, trailing zeros included."""

        return len(self.coefficients)

    def __iter__(self) -> Iterator[float]:
        """Iterate coefficients in ascending power order."""

        return iter(self.coefficients)

    def __str__(self) -> str:
        """Return compact canonical text."""

        return self.to_text()


def coefficient_list(values: Polynomial | Iterable[float]) -> list[float]:
    """Return a fresh float list from a polynomial or any coefficient iterable.

    Raises:
        TextOperandError: If values is a string; polynomial text must go through
            `normalize` instead of being read character by character.
    """

    if isinstance(values, str):
        raise TextOperandError(values)

    return [float(value) for value in values]


@dataclass(frozen=True, slots=True)
class DivisionResult:
    """Quotient and remainder of a polynomial long division.

    Both fields are unset only in the default construction; `divide` always
    sets both.
    """

    quotient: Polynomial | None = None
    remainder: Polynomial | None = None


@dataclass(frozen=True, slots=True)
class DivisionReport:
    """Division operands, result, and their rendered text for display.

    Attributes:
        dividend: Parsed dividend polynomial.
        divisor: Parsed divisor polynomial.
        result: Division result for the operands.
        dividend_text: Rendered dividend.
        divisor_text: Rendered divisor.
        quotient_text: Rendered quotient.
        remainder_text: Rendered remainder.
        identity_text: Compact `dividend = (divisor)*(quotient) + (remainder)` line.
    """

    dividend: Polynomial
    divisor: Polynomial
    result: DivisionResult
    dividend_text: str
    divisor_text: str
    quotient_text: str
    remainder_text: str
    identity_text: str
