"""Concrete shape variants. Stateless, so one frozen dataclass each."""

from dataclasses import dataclass, field

from creational_patterns.shape.domain.shape import ShapeKind


@dataclass(frozen=True)
class Circle:
    kind: ShapeKind = field(default=ShapeKind.CIRCLE, init=False)

    def draw(self) -> str:
        return "Drawing a Circle"


@dataclass(frozen=True)
class Rectangle:
    kind: ShapeKind = field(default=ShapeKind.RECTANGLE, init=False)

    def draw(self) -> str:
        return "Drawing a Rectangle"


@dataclass(frozen=True)
class Triangle:
    kind: ShapeKind = field(default=ShapeKind.TRIANGLE, init=False)

    def draw(self) -> str:
        return "Drawing a Triangle"
