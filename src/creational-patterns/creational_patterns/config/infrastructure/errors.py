"""Error types raised by config infrastructure."""

from pathlib import Path

from creational_patterns.core.errors import CreationalPatternsError


class ConfigValidationError(CreationalPatternsError):
    """Raised when the loaded config is not valid YAML or violates the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(CreationalPatternsError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to load config: file not found: {path}")
