"""Shape Protocol and the closed set of shape kinds."""

from enum import StrEnum
from typing import Protocol


class ShapeKind(StrEnum):
    """Every shape variant the factory knows how to build."""

    CIRCLE = "CIRCLE"
    RECTANGLE = "RECTANGLE"
    TRIANGLE = "TRIANGLE"


class Shape(Protocol):
    """Structural interface satisfied by every drawable shape."""

    @property
    def kind(self) -> ShapeKind: ...

    def draw(self) -> str: ...
