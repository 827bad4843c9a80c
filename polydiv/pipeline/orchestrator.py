"""Pipeline orchestration for polynomial division.

Responsibilities:
- Define the stage order for the divide-from-text flow.
- Convert core failures into stage-scoped errors with user hints.
- Assemble rendered output into a `DivisionReport`.

Key types:
- `PolynomialDivisionPipeline`: orchestration facade.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..division import divide
from ..errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    GrammarError,
    MissingOperandError,
    PipelineStageError,
)
from ..formatter import format_polynomial, parenthesize
from ..models.datatypes import (
    DivisionReport,
    DivisionResult,
    Polynomial,
    coefficient_list,
)
from ..normalizer import normalize
from ..telemetry.logger import RunLogger
from .telemetry import PipelineTelemetryMixin, StageProgressCallback

GRAMMAR_HINT = (
    "Write terms like `3x^2`, `-x`, `4.5` or `4,5`, joined by `+` or `-`."
)


class PolynomialDivisionPipeline(PipelineTelemetryMixin):
    """Run parse, divide, and format stages for one division."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: StageProgressCallback | None = None,
    ) -> None:
        """Initialize optional telemetry hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(
        self, dividend_text: str | None, divisor_text: str | None, stretched: bool = False
    ) -> DivisionReport:
        """Parse both operands from text, divide them, and render the report."""

        dividend = self._run_stage(
            "parse-dividend",
            lambda: self._parse("dividend", dividend_text),
            self._describe_polynomial,
        )
        divisor = self._run_stage(
            "parse-divisor",
            lambda: self._parse("divisor", divisor_text),
            self._describe_polynomial,
        )
        return self._divide_and_render(dividend, divisor, stretched)

    def run_coefficients(
        self,
        dividend: Polynomial | Iterable[float],
        divisor: Polynomial | Iterable[float],
        stretched: bool = False,
    ) -> DivisionReport:
        """Divide coefficient vectors directly, skipping the parse stages."""

        return self._divide_and_render(
            Polynomial(coefficient_list(dividend)),
            Polynomial(coefficient_list(divisor)),
            stretched,
        )

    def _divide_and_render(
        self, dividend: Polynomial, divisor: Polynomial, stretched: bool
    ) -> DivisionReport:
        """Run the divide and format stages for parsed operands."""

        result = self._run_stage(
            "divide",
            lambda: self._divide(dividend, divisor),
            lambda value: {
                "quotient_degree": value.quotient.degree,
                "remainder_degree": value.remainder.degree,
            },
        )
        return self._run_stage(
            "format", lambda: self._render(dividend, divisor, result, stretched)
        )

    @staticmethod
    def _describe_polynomial(polynomial: Polynomial) -> dict[str, object]:
        """Return parse-stage log context for one operand."""

        return {"degree": polynomial.degree, "terms": len(polynomial)}

    @staticmethod
    def _parse(role: str, text: str | None) -> Polynomial:
        """Normalize one operand and map grammar failures to stage errors."""

        try:
            return normalize(text)
        except GrammarError as exc:
            raise PipelineStageError(
                stage=f"parse-{role}",
                detail=f"Invalid {role}: {text!r} is not a polynomial in `x`.",
                hint=GRAMMAR_HINT,
            ) from exc

    @staticmethod
    def _divide(dividend: Polynomial, divisor: Polynomial) -> DivisionResult:
        """Divide operands and map core failures to stage errors."""

        try:
            return divide(dividend, divisor)
        except DivisionByZeroError as exc:
            raise PipelineStageError(
                stage="divide",
                detail="Cannot divide by the zero polynomial.",
                hint="Provide a divisor with at least one non-zero coefficient.",
            ) from exc
        except ArithmeticOverflowError as exc:
            raise PipelineStageError(
                stage="divide",
                detail=str(exc),
                hint="Scale the coefficients into a smaller range and retry.",
            ) from exc
        except MissingOperandError as exc:
            raise PipelineStageError(stage="divide", detail=str(exc)) from exc

    @staticmethod
    def _render(
        dividend: Polynomial,
        divisor: Polynomial,
        result: DivisionResult,
        stretched: bool,
    ) -> DivisionReport:
        """Render operands and result, plus the compact division identity line."""

        quotient = format_polynomial(result.quotient)
        remainder = format_polynomial(result.remainder)
        dividend_compact = format_polynomial(dividend)
        divisor_compact = format_polynomial(divisor)
        identity = (
            f"{dividend_compact} = {parenthesize(divisor_compact)}*"
            f"{parenthesize(quotient)} + {parenthesize(remainder)}"
        )
        return DivisionReport(
            dividend=dividend,
            divisor=divisor,
            result=result,
            dividend_text=format_polynomial(dividend, stretched=stretched),
            divisor_text=format_polynomial(divisor, stretched=stretched),
            quotient_text=format_polynomial(result.quotient, stretched=stretched),
            remainder_text=format_polynomial(result.remainder, stretched=stretched),
            identity_text=identity,
        )
