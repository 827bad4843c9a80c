"""Integration tests for the `divide` CLI command."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from polydiv.cli import app


def test_divide_command_prints_stretched_report_with_identity() -> None:
    """Default output should be stretched and include the identity line."""

    runner = CliRunner()

    result = runner.invoke(app, ["divide", "8x^3 + 18x^2 - 15x - 16", "4x^2 + 3x - 12"])

    assert result.exit_code == 0, result.output
    assert "Dividend : 8x^3 + 18x^2 - 15x - 16" in result.output
    assert "Divisor  : 4x^2 + 3x - 12" in result.output
    assert "Quotient : 2x + 3" in result.output
    assert "Remainder: 20" in result.output
    assert "8x^3+18x^2-15x-16 = (4x^2+3x-12)*(2x+3) + 20" in result.output


def test_divide_command_compact_without_identity() -> None:
    """CLI flags should switch to compact output and hide the identity line."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["divide", "6x + 4", "2", "--compact", "--no-identity"]
    )

    assert result.exit_code == 0, result.output
    assert "Quotient : 3x+2" in result.output
    assert "Remainder: 0" in result.output
    assert " = " not in result.output


def test_divide_command_accepts_negative_leading_operand_after_separator() -> None:
    """Operands starting with `-` should be passed after `--`."""

    runner = CliRunner()

    result = runner.invoke(app, ["divide", "--compact", "--", "-x^2+1", "x-1"])

    assert result.exit_code == 0, result.output
    assert "Quotient : -x-1" in result.output
    assert "Remainder: 0" in result.output


def test_divide_command_reads_defaults_from_config_file(tmp_path: Path) -> None:
    """YAML config should set output defaults for the command."""

    config_path = tmp_path / "polydiv.yml"
    config_path.write_text("stretch_output: false\nshow_identity: false\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app, ["divide", "x^2 - 1", "x - 1", "--config", str(config_path)]
    )

    assert result.exit_code == 0, result.output
    assert "Dividend : x^2-1" in result.output
    assert " = " not in result.output


def test_divide_command_cli_flag_overrides_config_file(tmp_path: Path) -> None:
    """Explicit flags should win over config file values."""

    config_path = tmp_path / "polydiv.yml"
    config_path.write_text("stretch_output: false\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["divide", "x^2 - 1", "x - 1", "--config", str(config_path), "--stretch"],
    )

    assert result.exit_code == 0, result.output
    assert "Dividend : x^2 - 1" in result.output


def test_divide_command_emits_phase_logs_when_requested() -> None:
    """`--log-phases` should print structured stage events."""

    runner = CliRunner()

    result = runner.invoke(app, ["divide", "x^2 - 1", "x - 1", "--log-phases"])

    assert result.exit_code == 0, result.output
    assert "[phase] level=INFO stage=parse-dividend event=start" in result.output
    assert "[phase] level=INFO stage=divide event=complete" in result.output
    assert "[phase] level=INFO stage=format event=complete" in result.output
