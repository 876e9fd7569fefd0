"""Configuration model and loaders for corpusclean.

Responsibilities:
- Define run configuration as a typed dataclass.
- Load command defaults from a YAML file.

Key types:
- `CleanConfig`: input/output locations for one cleaning run.
- `ConfigLoader`: static construction helpers for `CleanConfig`.

The normalization rule chain itself is fixed and has no configuration keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_path
from .pipeline import default_output_path


@dataclass(frozen=True, slots=True)
class CleanConfig:
    """Locations for a single corpus cleaning run.

    Attributes:
        input_path: Raw corpus text file.
        output_path: Destination file, or `None` to derive it from `input_path`.
    """

    input_path: Path
    output_path: Path | None = None

    def validate(self) -> None:
        """Validate path values and raise `ValueError` when invalid."""

        if not str(self.input_path).strip():
            raise ValueError("input_path must be a non-empty path.")
        if (
            self.output_path is not None
            and self.output_path.resolve() == self.input_path.resolve()
        ):
            raise ValueError("output_path must differ from input_path.")

    def resolved_output_path(self) -> Path:
        """Return the explicit output path or the one derived from the input."""

        if self.output_path is not None:
            return self.output_path
        return default_output_path(self.input_path)


class ConfigLoader:
    """Factory methods for creating `CleanConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path"})
    _SUPPORTED_YAML_KEYS = frozenset({"input_path", "output_path"})

    @staticmethod
    def from_yaml(path: Path) -> CleanConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(raw_text, path)
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "config") -> CleanConfig:
        """Create a validated config from an already-parsed mapping."""

        ConfigLoader._validate_keys(payload, source_label)

        input_path = normalize_optional_path(payload["input_path"])
        if input_path is None:
            raise ValueError(f"{source_label} requires non-empty `input_path`.")
        output_path = normalize_optional_path(payload.get("output_path"))

        config = CleanConfig(input_path=input_path, output_path=output_path)
        config.validate()
        return config

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
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload)
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")
