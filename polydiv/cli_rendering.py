"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
division reports, and normalized polynomial summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .formatter import format_coefficient
from .models.datatypes import DivisionReport, Polynomial


def echo_command_error(command_name: str, exc: Exception) -> None:
    """Print concise red diagnostics for a failed command."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    echo_command_error(command_name, exc)
    raise typer.Exit(code=1) from exc


def echo_title(title: str) -> None:
    """Print a title line underlined with dashes."""

    typer.echo(f"{title}:")
    typer.echo("-" * (len(title) + 1))


def echo_division_report(report: DivisionReport, show_identity: bool) -> None:
    """Print division operands, quotient, remainder, and the identity line."""

    typer.echo(f"Dividend : {report.dividend_text}")
    typer.echo(f"Divisor  : {report.divisor_text}")
    typer.echo(f"Quotient : {report.quotient_text}")
    typer.echo(f"Remainder: {report.remainder_text}")
    if show_identity:
        typer.echo("")
        typer.echo(report.identity_text)


def echo_normalized_polynomial(polynomial: Polynomial, stretched: bool) -> None:
    """Print canonical text, coefficient vector, and degree of a polynomial."""

    coefficients = ", ".join(format_coefficient(value) for value in polynomial)
    typer.echo(f"Polynomial  : {polynomial.to_text(stretched=stretched)}")
    typer.echo(f"Coefficients: [{coefficients}]")
    typer.echo(f"Degree      : {polynomial.degree}")
