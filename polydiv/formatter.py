"""Canonical text rendering for coefficient vectors.

Responsibilities:
- Render coefficient vectors as compact descending-power text.
- Provide the spaced ("stretched") presentation form.
- Parenthesize rendered polynomials for composed expressions.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import MissingOperandError
from .grammar import is_single_term, remove_whitespace


def format_coefficient(value: float) -> str:
    """Format a coefficient with at most two fraction digits and no trailing zeros."""

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _power_suffix(power: int) -> str:
    """Return the `x` suffix for a power: `x^n`, `x`, or nothing for constants."""

    if power > 1:
        return f"x^{power}"
    if power == 1:
        return "x"
    return ""


def format_polynomial(
    coefficients: Iterable[float] | None, stretched: bool = False
) -> str:
    """Render ascending-power coefficients as canonical polynomial text.

    Terms are emitted from the highest power down. Coefficients that are zero
    at display precision are omitted, a unit coefficient is elided in front of
    `x`, and the zero polynomial renders as `0`.

    Args:
        coefficients: Ascending-power coefficients (a `Polynomial` works too).
        stretched: Insert single spaces around `+` and `-` operators.

    Raises:
        MissingOperandError: If `coefficients` is `None`.
    """

    if coefficients is None:
        raise MissingOperandError("coefficients")

    values = list(coefficients)
    parts: list[str] = []
    for power in range(len(values) - 1, -1, -1):
        if values[power] == 0:
            continue
        numeral = format_coefficient(values[power])
        if numeral == "0":
            continue
        parts.append(f"+{numeral}{_power_suffix(power)}")

    if not parts:
        return "0"

    text = (
        "".join(parts)
        .replace("+-", "-")
        .replace("+1x", "+x")
        .replace("-1x", "-x")
        .lstrip("+")
    )
    return stretch_polynomial(text) if stretched else text


def stretch_polynomial(text: str) -> str:
    """Put exactly one space around every `+` and `-` operator."""

    return remove_whitespace(text).replace("+", " + ").replace("-", " - ").strip()


def parenthesize(text: str) -> str:
    """Wrap text in parentheses unless it is a single non-negative term."""

    if not is_single_term(text) or text.startswith("-"):
        return f"({text})"
    return text
