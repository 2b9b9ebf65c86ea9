from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .exceptions import InvalidConfiguration
from .validation import ResponseShape, validate_response_shape, validate_thread_number


@dataclass(slots=True)
class SpellCheckConfig:
    """Configuration options for the suggestion engine."""

    encoding: str = "en_GB.utf8"
    dictionary: str = "en_GB"
    response_shape: ResponseShape = ResponseShape.JSON
    max_workers: int = 1
    min_words_per_worker: int = 1
    parallel_enabled: bool = True
    executable: str = "hunspell"
    timeout: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the configuration."""
        data = dict(asdict(self))
        data["response_shape"] = self.response_shape.value
        return data


def validate_config(config: SpellCheckConfig) -> SpellCheckConfig:
    """Normalize loosely typed values in place and return the config."""
    config.response_shape = validate_response_shape(config.response_shape)
    config.max_workers = validate_thread_number(config.max_workers)
    config.min_words_per_worker = validate_thread_number(config.min_words_per_worker)
    if config.timeout is not None:
        try:
            config.timeout = float(config.timeout)
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(
                f"Timeout must be a number of seconds, got {config.timeout!r}"
            ) from exc
        if config.timeout <= 0:
            raise InvalidConfiguration("Timeout must be positive")
    return config


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(SpellCheckConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> SpellCheckConfig:
    """Build a validated SpellCheckConfig from a dictionary-like input."""
    if data is None:
        return SpellCheckConfig()
    return validate_config(SpellCheckConfig(**_build_kwargs(data)))


def config_from_yaml(path: str | Path) -> SpellCheckConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise InvalidConfiguration("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SpellCheckConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SpellCheckConfig()
    return config_from_yaml(path)
