"""Shape creation without a factory: exact tags, hard failure on anything else."""

from creational_patterns.shape.domain.shape import Shape
from creational_patterns.shape.infrastructure.errors import UnknownShapeError
from creational_patterns.shape.infrastructure.shapes import (
    Circle,
    Rectangle,
    Triangle,
)


def create_shape_naive(tag: str) -> Shape:
    """Build a shape with an if/elif chain that the caller has to keep in sync.

    Raises:
        UnknownShapeError: if tag is not exactly CIRCLE, RECTANGLE or TRIANGLE.
    """
    if tag == "CIRCLE":
        return Circle()
    elif tag == "RECTANGLE":
        return Rectangle()
    elif tag == "TRIANGLE":
        return Triangle()
    raise UnknownShapeError(tag=tag)
