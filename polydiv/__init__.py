"""Top-level package for polydiv.

This package parses single-variable polynomial text into coefficient vectors,
renders vectors as canonical text, and divides polynomials by long division.
The main entry points are `normalize`, `format_polynomial`, and `divide`.
"""

from .division import divide, subtract_coefficients
from .errors import (
    ArithmeticOverflowError,
    CoefficientIndexError,
    DivisionByZeroError,
    GrammarError,
    MissingOperandError,
    PolynomialError,
    RangeError,
    TextOperandError,
)
from .formatter import format_polynomial, parenthesize, stretch_polynomial
from .generator import RandomPolynomialGenerator
from .models.datatypes import DivisionResult, Polynomial
from .normalizer import normalize, validate

__all__ = [
    "Polynomial",
    "DivisionResult",
    "RandomPolynomialGenerator",
    "normalize",
    "validate",
    "format_polynomial",
    "stretch_polynomial",
    "parenthesize",
    "divide",
    "subtract_coefficients",
    "PolynomialError",
    "GrammarError",
    "MissingOperandError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
    "CoefficientIndexError",
    "RangeError",
    "TextOperandError",
    "__version__",
]

__version__ = "0.1.0"
