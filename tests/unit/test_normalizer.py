"""Unit tests for polynomial text validation and term grouping."""

from __future__ import annotations

import pytest

from polydiv.errors import GrammarError
from polydiv.normalizer import (
    MAX_POWER,
    normalize,
    parse_coefficients,
    preprocess,
    validate,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", [1.0]),
        ("2x + 1", [1.0, 2.0]),
        ("x", [0.0, 1.0]),
        ("3x^2 - 4x^5", [0.0, 0.0, 3.0, 0.0, 0.0, -4.0]),
        ("-3x^2 - 1", [-1.0, 0.0, -3.0]),
        ("3x^2 + 2x - 4x^2 + 7x^3 - 6 + 8x", [-6.0, 10.0, -1.0, 7.0]),
        ("0", [0.0]),
        ("0x + 1 + 2 + 3", [6.0, 0.0]),
    ],
)
def test_normalize_groups_terms_by_power(text: str, expected: list[float]) -> None:
    """Terms of equal power should be summed into one ascending vector."""

    assert normalize(text).coefficients == expected


def test_normalize_sums_repeated_powers_instead_of_failing() -> None:
    """Repeated powers should be additive rather than a grammar error."""

    assert normalize("3x^2 - 4x^2").coefficients == [0.0, 0.0, -1.0]


def test_normalize_accepts_comma_and_dot_decimal_separators() -> None:
    """Both `,` and `.` should parse as decimal separators."""

    assert normalize("1,5x - .25").coefficients == [-0.25, 1.5]
    assert normalize("2.5x^2").coefficients == [0.0, 0.0, 2.5]


def test_normalize_strips_outer_parentheses_and_whitespace() -> None:
    """Outer parentheses, spaces, and tabs should be ignored."""

    assert normalize(" ( x^2\t-  1 ) ").coefficients == [-1.0, 0.0, 1.0]


def test_normalize_reads_multi_digit_exponents() -> None:
    """Exponents with more than one digit should set the matching power."""

    polynomial = normalize("x^12 + 1")

    assert len(polynomial) == 13
    assert polynomial[12] == 1.0
    assert polynomial.degree == 12


def test_normalize_keeps_sign_of_bare_variable_terms() -> None:
    """Bare `x` terms should get a unit coefficient with their own sign."""

    assert normalize("-x^3 + x - x^2").coefficients == [0.0, 1.0, -1.0, -1.0]


def test_normalize_accepts_powers_up_to_the_limit() -> None:
    """The highest allowed power should still build a full vector."""

    polynomial = normalize(f"x^{MAX_POWER} + 1")

    assert len(polynomial) == MAX_POWER + 1
    assert polynomial.degree == MAX_POWER


@pytest.mark.parametrize(
    "text",
    [f"x^{MAX_POWER + 1}", "x^999999999", "2x^" + "9" * 5000, "1 - x^" + "0" * 20 + "10001"],
    ids=["one-above", "huge", "many-digits", "leading-zeros"],
)
def test_normalize_rejects_powers_above_the_limit(text: str) -> None:
    """Oversized exponents should fail as grammar errors before any allocation."""

    with pytest.raises(GrammarError) as exc_info:
        normalize(text)

    assert exc_info.value.text == text


@pytest.mark.parametrize("text", [None, "", "   ", "hello", "xxx", "x^x", "2^x", "3-", "+"])
def test_normalize_rejects_invalid_text(text: str | None) -> None:
    """Invalid, empty, and absent input should raise `GrammarError`."""

    with pytest.raises(GrammarError) as exc_info:
        normalize(text)

    assert exc_info.value.text == text


def test_grammar_error_is_a_value_error() -> None:
    """Grammar failures should also be catchable as `ValueError`."""

    with pytest.raises(ValueError, match="Invalid polynomial"):
        parse_coefficients("2^x")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("8x^3 + 18x^2 - 15x - 16", True),
        ("(4x^2 + 3x - 12)", True),
        ("x", True),
        ("-,5", True),
        ("xxx", True),
        ("x^x", False),
        ("2^x", False),
        ("hello", False),
        ("", False),
        (None, False),
        ("1" * 40 + "a", False),
    ],
)
def test_validate_matches_polynomial_grammar(text: str | None, expected: bool) -> None:
    """Validation should be a pure grammar check on whitespace-free text."""

    assert validate(text) is expected


def test_preprocess_makes_every_term_explicitly_signed() -> None:
    """Preprocessing should rewrite subtraction and bare variables."""

    assert preprocess("(3x^2 + 2x - x^2 + 7x^3 - 6 + 8x)") == "+3x^2+2x+-1x^2+7x^3+-6+8x"
