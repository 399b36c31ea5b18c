"""Configuration model and loaders for apinormalizer.

Responsibilities:
- Define normalization settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Resolve effective settings with deterministic precedence.

Key types:
- `NormalizerConfig`: normalized settings for one normalization run.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_newline, parse_required_boolean


_DEFAULT_NEWLINE = "lf"
_DEFAULT_ENCODING = "utf-8"
_SUPPORTED_KEYS = frozenset({"newline", "strict", "encoding"})

ENV_NEWLINE = "APINORMALIZER_NEWLINE"
ENV_STRICT = "APINORMALIZER_STRICT"
ENV_ENCODING = "APINORMALIZER_ENCODING"


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Settings for one normalization run.

    Attributes:
        newline: Canonical line-ending token (`lf`, `crlf` or `native`).
        strict: Whether surviving marker tokens fail the run.
        encoding: Text encoding for reading and writing files.
    """

    newline: str = _DEFAULT_NEWLINE
    strict: bool = True
    encoding: str = _DEFAULT_ENCODING

    @property
    def newline_sequence(self) -> str:
        """Return the newline characters for `newline`."""

        return parse_newline(self.newline, "newline")

    def validate(self) -> None:
        """Validate configuration values before normalization."""

        parse_newline(self.newline, "newline")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc


class ConfigLoader:
    """Factory helpers for constructing `NormalizerConfig`."""

    @staticmethod
    def from_yaml(path: Path) -> NormalizerConfig:
        """Load config from a YAML mapping file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload has unknown keys or invalid values.
        """

        _, config = ConfigLoader._load_yaml_file(path)
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizerConfig:
        """Load config from `APINORMALIZER_*` environment variables."""

        runtime_env = env if env is not None else os.environ
        payload: dict[str, Any] = {}
        for key, env_key in (
            ("newline", ENV_NEWLINE),
            ("strict", ENV_STRICT),
            ("encoding", ENV_ENCODING),
        ):
            value = normalize_optional_string(runtime_env.get(env_key))
            if value is not None:
                payload[key] = value
        return ConfigLoader._build_config_from_mapping(payload, "Environment")

    @staticmethod
    def resolve(
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
        *,
        newline: str | None = None,
        strict: bool | None = None,
        encoding: str | None = None,
    ) -> NormalizerConfig:
        """Resolve effective config.

        Precedence for each key is: explicit argument > YAML file > environment > default.
        """

        config = ConfigLoader.from_env(env)
        if config_path is not None:
            payload, file_config = ConfigLoader._load_yaml_file(config_path)
            file_keys = [key for key, value in payload.items() if value is not None]
            config = replace(
                config,
                **{key: getattr(file_config, key) for key in file_keys},
            )
        overrides: dict[str, Any] = {}
        if newline is not None:
            overrides["newline"] = newline
        if strict is not None:
            overrides["strict"] = strict
        if encoding is not None:
            overrides["encoding"] = encoding
        config = replace(config, **overrides)
        config.validate()
        return config

    @staticmethod
    def _load_yaml_file(path: Path) -> tuple[Mapping[str, Any], NormalizerConfig]:
        """Parse a YAML config file once, returning its raw payload and built config."""

        payload = ConfigLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return payload, ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

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
    ) -> NormalizerConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in payload if key not in _SUPPORTED_KEYS)
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        newline = normalize_optional_string(payload.get("newline")) or _DEFAULT_NEWLINE
        parse_newline(newline, "newline")

        strict_value = payload.get("strict")
        strict = (
            True
            if normalize_optional_string(strict_value) is None and not isinstance(strict_value, bool)
            else parse_required_boolean(strict_value, "strict")
        )
        encoding = normalize_optional_string(payload.get("encoding")) or _DEFAULT_ENCODING

        config = NormalizerConfig(newline=newline.lower(), strict=strict, encoding=encoding)
        config.validate()
        return config
