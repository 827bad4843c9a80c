"""Division pipeline orchestration package."""

from .orchestrator import GRAMMAR_HINT, PolynomialDivisionPipeline

__all__ = ["GRAMMAR_HINT", "PolynomialDivisionPipeline"]
