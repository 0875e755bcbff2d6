"""Error types raised by shape infrastructure."""

from creational_patterns.core.errors import CreationalPatternsError


class UnknownShapeError(CreationalPatternsError):
    """Raised by the naive constructor when a shape tag is not recognized."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Failed to create shape: unknown shape: {tag}")
