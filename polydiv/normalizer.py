"""Polynomial text normalization.

Responsibilities:
- Validate free-form polynomial text against the term grammar.
- Group same-power terms into one canonical coefficient vector.

Example of the preprocessing rewrite applied before grouping:
`"(3x^2 + 2x - x^2 - 6)"` becomes `"+3x^2+2x+-1x^2+-6"`.
"""

from __future__ import annotations

from .errors import GrammarError
from .grammar import (
    TERM_PATTERN,
    is_valid_polynomial,
    strip_outer_parentheses,
)
from .models.datatypes import Polynomial

MAX_POWER = 10_000


def validate(text: str | None) -> bool:
    """Return whether text is a grammar-valid polynomial."""

    return is_valid_polynomial(text)


def preprocess(text: str) -> str:
    """Rewrite text so that every term starts with an explicit `+` separator.

    Outer parentheses and whitespace are removed, every `-` becomes `+-`, and
    a bare `x` after a sign gets an explicit unit coefficient.
    """

    return (
        "+"
        + strip_outer_parentheses(text)
    ).replace("-", "+-").replace("+x", "+1x").replace("-x", "-1x")


def _term_power(variable: str | None, power: str | None, source: str) -> int:
    """Return the exponent of a matched term: 0 without `x`, 1 for a bare `x`.

    Powers above `MAX_POWER` raise `GrammarError`.
    """

    if variable is None:
        return 0
    if power is None:
        return 1
    digits = power.lstrip("0") or "0"
    if len(digits) > len(str(MAX_POWER)) or int(digits) > MAX_POWER:
        raise GrammarError(source)
    return int(digits)


def _term_coefficient(raw: str, has_variable: bool, source: str) -> float:
    """Return the numeric coefficient, treating a bare sign before `x` as unit."""

    if raw in {"", "+", "-"}:
        if not has_variable:
            raise GrammarError(source)
        return -1.0 if raw == "-" else 1.0
    return float(raw.replace(",", "."))


def parse_coefficients(text: str | None) -> list[float]:
    """Parse polynomial text into an ascending-power coefficient list.

    Terms sharing a power are summed, and the list length is the highest power
    seen plus one.

    Raises:
        GrammarError: If text is `None`, empty, not grammar-valid, or has a
            power above `MAX_POWER`.
    """

    if not text:
        raise GrammarError(text)

    rewritten = preprocess(text)
    if not is_valid_polynomial(rewritten):
        raise GrammarError(text)

    grouped: dict[int, float] = {}
    for term in rewritten.split("+"):
        if not term:
            continue
        match = TERM_PATTERN.fullmatch(term)
        if match is None:
            raise GrammarError(text)
        variable = match.group("variable")
        power = _term_power(variable, match.group("power"), text)
        coefficient = _term_coefficient(match.group("coeff"), variable is not None, text)
        grouped[power] = grouped.get(power, 0.0) + coefficient

    if not grouped:
        raise GrammarError(text)

    coefficients = [0.0] * (max(grouped) + 1)
    for power, coefficient in grouped.items():
        coefficients[power] = coefficient
    return coefficients


def normalize(text: str | None) -> Polynomial:
    """Parse polynomial text into a grouped `Polynomial`.

    Example:
        `normalize("3x^2 + 2x - 4x^2 + 7x^3 - 6 + 8x")` has coefficients
        `[-6.0, 10.0, -1.0, 7.0]`.
    """

    return Polynomial(parse_coefficients(text))
