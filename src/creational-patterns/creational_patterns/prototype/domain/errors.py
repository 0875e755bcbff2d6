"""Error types raised by the prototype domain."""

from creational_patterns.core.errors import CreationalPatternsError


class CloneNotSupportedError(CreationalPatternsError):
    """Raised by a prototype type that does not provide a copy operation."""

    def __init__(self, prototype: str) -> None:
        self.prototype = prototype
        super().__init__(f"Failed to clone {prototype}: copying is not supported")
