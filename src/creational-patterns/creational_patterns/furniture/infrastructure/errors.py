"""Error types raised by furniture infrastructure."""

from creational_patterns.core.errors import CreationalPatternsError


class FurnitureStyleNotSupportedError(CreationalPatternsError):
    """Raised when no furniture factory is registered for the requested style."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(
            f"Failed to create furniture factory: unsupported style: {style}"
        )
