"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from creational_patterns.config.domain.config import DemoConfig
from creational_patterns.config.domain.observer import ConfigObserver
from creational_patterns.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns a DemoConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> DemoConfig:
        """
        Load and validate a DemoConfig. Sections left out of the file keep
        their defaults; an empty file yields the default config.

        Raises:
            ConfigLoadError: if the file does not exist.
            ConfigValidationError: if the file is not valid YAML, is not a
                mapping at the top level, or violates the schema.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> DemoConfig:
    if raw is None:
        return DemoConfig()
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level value must be a mapping")
    try:
        return DemoConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
