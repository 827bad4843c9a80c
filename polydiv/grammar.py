"""Regular-expression grammar for single-variable polynomial text.

Responsibilities:
- Define the full-polynomial, single-term, and term-extraction patterns.
- Provide validation predicates shared by the normalizer and formatter.

All patterns expect whitespace to be removed beforehand. Digits are ASCII-only.
"""

from __future__ import annotations

import re

# Each repetition consumes one maximal term and never backtracks into it.
POLYNOMIAL_PATTERN = re.compile(
    r"^(?>[+-]?\d*(?:[,.]\d+)?(?:x(?:\^\d+)?)?)+$", re.ASCII
)
SINGLE_TERM_PATTERN = re.compile(r"^[+-]?\d*(?:[,.]\d+)?(?:x(?:\^\d+)?)?$", re.ASCII)
TERM_PATTERN = re.compile(
    r"^(?P<coeff>[+-]?\d*(?:[,.]\d+)?)(?:(?P<variable>x)(?:\^(?P<power>\d+))?)?$",
    re.ASCII,
)

_WHITESPACE_PATTERN = re.compile(r"\s+")


def remove_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""

    return _WHITESPACE_PATTERN.sub("", text)


def strip_outer_parentheses(text: str) -> str:
    """Remove whitespace and any surrounding parenthesis characters."""

    return remove_whitespace(text).strip("()")


def is_valid_polynomial(text: str | None) -> bool:
    """Return whether text fully matches the polynomial grammar.

    Surrounding parentheses and all whitespace are ignored. `None` and empty
    text are never valid.
    """

    if not text:
        return False
    candidate = strip_outer_parentheses(text)
    if not candidate:
        return False
    return POLYNOMIAL_PATTERN.fullmatch(candidate) is not None


def is_single_term(text: str | None) -> bool:
    """Return whether text is exactly one signed monomial."""

    if not text:
        return False
    return SINGLE_TERM_PATTERN.fullmatch(text.strip()) is not None
