"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from polydiv.config import ConfigLoader, PolydivConfig


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "polydiv.yml"
    config_path.write_text(
        """
stretch_output: " no "
show_identity: false
log_phases: "on"
random_seed: " 42 "
random_min_terms: 1
random_max_terms: "4"
random_min_value: -3
random_max_value: 3
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config == PolydivConfig(
        stretch_output=False,
        show_identity=False,
        log_phases=True,
        random_seed=42,
        random_min_terms=1,
        random_max_terms=4,
        random_min_value=-3,
        random_max_value=3,
    )


def test_config_loader_from_yaml_uses_defaults_for_empty_file(tmp_path: Path) -> None:
    """An empty YAML document should produce the default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == PolydivConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """Unknown keys should fail with the offending key names."""

    config_path = tmp_path / "unknown.yml"
    config_path.write_text("stretch_output: true\nprecision: 4\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): precision"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    """A YAML list root should be rejected."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- stretch_output\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_malformed_yaml(tmp_path: Path) -> None:
    """YAML syntax errors should surface as `ValueError`."""

    config_path = tmp_path / "broken.yml"
    config_path.write_text("stretch_output: [true\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid YAML"):
        ConfigLoader.from_yaml(config_path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("show_identity: maybe\n", r"field `show_identity` must be a boolean value"),
        ("random_seed: seven\n", r"field `random_seed` must be an integer"),
        ("random_max_terms: true\n", r"field `random_max_terms` must be an integer"),
        ("random_min_terms: -2\n", r"`random_min_terms` cannot be negative"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_values(
    tmp_path: Path, payload: str, message: str
) -> None:
    """Invalid booleans, integers, and negative counts should be rejected."""

    config_path = tmp_path / "invalid.yml"
    config_path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader should read `POLYDIV_*` values and ignore others."""

    config = ConfigLoader.from_env(
        {
            "POLYDIV_STRETCH_OUTPUT": "false",
            "POLYDIV_LOG_PHASES": "1",
            "POLYDIV_RANDOM_SEED": "9",
            "POLYDIV_RANDOM_MAX_VALUE": "20",
            "UNRELATED": "value",
        }
    )

    assert config.stretch_output is False
    assert config.show_identity is True
    assert config.log_phases is True
    assert config.random_seed == 9
    assert config.random_max_value == 20
    assert config.random_min_value == -10


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Environment values should use the same validation as YAML values."""

    with pytest.raises(ValueError, match="Environment field `show_identity`"):
        ConfigLoader.from_env({"POLYDIV_SHOW_IDENTITY": "sometimes"})


def test_config_loader_from_env_defaults_without_variables() -> None:
    """Without variables the environment loader should return defaults."""

    assert ConfigLoader.from_env({}) == PolydivConfig()
