"""Typed models used by polydiv components."""

from .datatypes import DivisionReport, DivisionResult, Polynomial, coefficient_list

__all__ = [
    "Polynomial",
    "DivisionResult",
    "DivisionReport",
    "coefficient_list",
]
