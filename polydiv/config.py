"""Configuration model and loaders for polydiv.

Responsibilities:
- Define CLI output and random-generator settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `PolydivConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `PolydivConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .generator import (
    DEFAULT_MAX_TERMS,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_TERMS,
    DEFAULT_MIN_VALUE,
)
from .parsing import parse_optional_integer, parse_permissive_boolean


@dataclass(slots=True)
class PolydivConfig:
    """Settings for one polydiv CLI invocation.

    Attributes:
        stretch_output: Render polynomials with spaces around operators.
        show_identity: Print the `dividend = (divisor)*(quotient) + (remainder)` line.
        log_phases: Emit structured phase logs for division stages.
        random_seed: Optional seed for the `random` command.
        random_min_terms: Lower bound of generated coefficient counts.
        random_max_terms: Upper bound of generated coefficient counts.
        random_min_value: Lower bound of generated coefficient values.
        random_max_value: Upper bound of generated coefficient values.
    """

    stretch_output: bool = True
    show_identity: bool = True
    log_phases: bool = False
    random_seed: int | None = None
    random_min_terms: int = DEFAULT_MIN_TERMS
    random_max_terms: int = DEFAULT_MAX_TERMS
    random_min_value: int = DEFAULT_MIN_VALUE
    random_max_value: int = DEFAULT_MAX_VALUE

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.random_min_terms < 0:
            raise ValueError("`random_min_terms` cannot be negative.")
        if self.random_max_terms < 0:
            raise ValueError("`random_max_terms` cannot be negative.")


class ConfigLoader:
    """Factory methods for creating `PolydivConfig` from external sources."""

    _BOOLEAN_KEYS = ("stretch_output", "show_identity", "log_phases")
    _INTEGER_KEYS = (
        "random_min_terms",
        "random_max_terms",
        "random_min_value",
        "random_max_value",
    )
    _SUPPORTED_YAML_KEYS = frozenset(
        {*_BOOLEAN_KEYS, *_INTEGER_KEYS, "random_seed"}
    )
    _ENV_PREFIX = "POLYDIV_"

    @staticmethod
    def from_yaml(path: Path) -> PolydivConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PolydivConfig:
        """Create a validated config from `POLYDIV_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[ConfigLoader._ENV_PREFIX + key.upper()]
            for key in sorted(ConfigLoader._SUPPORTED_YAML_KEYS)
            if ConfigLoader._ENV_PREFIX + key.upper() in env_map
        }
        return ConfigLoader._build_config_from_mapping(payload, source_label="Environment")

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> PolydivConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = PolydivConfig()
        values: dict[str, Any] = {}
        for key in ConfigLoader._BOOLEAN_KEYS:
            values[key] = ConfigLoader._optional_boolean(
                payload, key, source_label, getattr(defaults, key)
            )
        for key in ConfigLoader._INTEGER_KEYS:
            parsed = ConfigLoader._optional_integer(payload, key, source_label)
            values[key] = getattr(defaults, key) if parsed is None else parsed
        values["random_seed"] = ConfigLoader._optional_integer(
            payload, "random_seed", source_label
        )

        config = PolydivConfig(**values)
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_integer(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> int | None:
        """Read and validate an optional integer field from a payload."""

        if key not in payload:
            return None
        try:
            return parse_optional_integer(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc
