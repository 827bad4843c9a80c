"""Command-line interface for polydiv.

Responsibilities:
- Expose user-facing commands for polynomial normalization and division.
- Resolve `PolydivConfig` from YAML/environment defaults and CLI overrides.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.

Operands that start with `-` must follow a `--` separator, for example
`polydiv divide -- -x^2+1 x-1`.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import random
from typing import Annotated

import typer

from .cli_rendering import (
    echo_command_error,
    echo_division_report,
    echo_normalized_polynomial,
    echo_title,
    exit_with_command_error,
)
from .config import ConfigLoader, PolydivConfig
from .errors import GrammarError, PipelineStageError
from .generator import RandomPolynomialGenerator
from .normalizer import normalize
from .pipeline import GRAMMAR_HINT, PolynomialDivisionPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="polydiv",
    no_args_is_help=True,
    help="Polynomial long division CLI.",
)

ConfigFileOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
StretchOption = Annotated[
    bool | None,
    typer.Option(
        "--stretch/--compact",
        help="Print polynomials with or without spaces around operators.",
    ),
]


def _load_base_config(config_path: Path | None) -> PolydivConfig:
    """Load YAML config when requested, else environment defaults, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `POLYDIV_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    stretch: bool | None = None,
    identity: bool | None = None,
    log_phases: bool | None = None,
) -> PolydivConfig:
    """Resolve effective command config from file defaults and explicit CLI overrides."""

    config = _load_base_config(config_file)
    overrides: dict[str, bool] = {}
    if stretch is not None:
        overrides["stretch_output"] = stretch
    if identity is not None:
        overrides["show_identity"] = identity
    if log_phases is not None:
        overrides["log_phases"] = log_phases
    return replace(config, **overrides)


def _build_pipeline(config: PolydivConfig) -> PolynomialDivisionPipeline:
    """Create a pipeline with phase logging enabled when configured."""

    run_logger = RunLogger() if config.log_phases else None
    return PolynomialDivisionPipeline(run_logger=run_logger)


@app.command("divide")
def divide_command(
    dividend: Annotated[
        str, typer.Argument(help="Dividend polynomial, e.g. `8x^3+18x^2-15x-16`.")
    ],
    divisor: Annotated[
        str, typer.Argument(help="Divisor polynomial, e.g. `4x^2+3x-12`.")
    ],
    config_file: ConfigFileOption = None,
    stretch: StretchOption = None,
    identity: Annotated[
        bool | None,
        typer.Option(
            "--identity/--no-identity",
            help="Print the `dividend = (divisor)*(quotient) + (remainder)` line.",
        ),
    ] = None,
    log_phases: Annotated[
        bool | None,
        typer.Option("--log-phases/--no-log-phases", help="Emit structured stage logs."),
    ] = None,
) -> None:
    """Divide two polynomials and print quotient and remainder."""

    try:
        config = _resolve_config(config_file, stretch, identity, log_phases)
        pipeline = _build_pipeline(config)
        report = pipeline.run(dividend, divisor, stretched=config.stretch_output)
    except Exception as exc:
        exit_with_command_error("divide", exc)

    echo_division_report(report, show_identity=config.show_identity)


@app.command("normalize")
def normalize_command(
    expression: Annotated[str, typer.Argument(help="Polynomial to group and normalize.")],
    config_file: ConfigFileOption = None,
    stretch: StretchOption = None,
) -> None:
    """Group same-power terms and print the canonical polynomial."""

    try:
        config = _resolve_config(config_file, stretch)
        try:
            polynomial = normalize(expression)
        except GrammarError as exc:
            raise PipelineStageError(
                stage="normalize",
                detail=f"Invalid polynomial: {expression!r}.",
                hint=GRAMMAR_HINT,
            ) from exc
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    echo_normalized_polynomial(polynomial, stretched=config.stretch_output)


@app.command("random")
def random_command(
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for reproducible operands (overrides config)."),
    ] = None,
    config_file: ConfigFileOption = None,
    stretch: StretchOption = None,
) -> None:
    """Generate a random dividend and non-zero divisor and divide them."""

    try:
        config = _resolve_config(config_file, stretch)
        generator = RandomPolynomialGenerator(
            random.Random(seed if seed is not None else config.random_seed)
        )
        bounds = {
            "min_terms": config.random_min_terms,
            "max_terms": config.random_max_terms,
            "min_value": config.random_min_value,
            "max_value": config.random_max_value,
        }
        dividend = generator.polynomial(**bounds)
        divisor = generator.polynomial(**bounds, allow_all_zero=False)
        report = _build_pipeline(config).run_coefficients(
            dividend, divisor, stretched=config.stretch_output
        )
    except Exception as exc:
        exit_with_command_error("random", exc)

    echo_division_report(report, show_identity=config.show_identity)


@app.command("interactive")
def interactive_command(config_file: ConfigFileOption = None) -> None:
    """Repeatedly prompt for a dividend and divisor until the user stops."""

    try:
        config = _resolve_config(config_file)
    except Exception as exc:
        exit_with_command_error("interactive", exc)

    pipeline = _build_pipeline(config)
    echo_title("Polynomial Division")
    while True:
        dividend = typer.prompt("Dividend")
        divisor = typer.prompt("Divisor ")
        try:
            report = pipeline.run(dividend, divisor, stretched=config.stretch_output)
        except PipelineStageError as exc:
            echo_command_error("division", exc)
        else:
            typer.echo("")
            echo_division_report(report, show_identity=config.show_identity)
        if not typer.confirm("New division?", default=False):
            break


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
