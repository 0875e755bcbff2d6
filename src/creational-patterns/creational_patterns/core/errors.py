"""Base exception class for all creational-patterns errors."""


class CreationalPatternsError(Exception):
    """Base class for all creational-patterns errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
