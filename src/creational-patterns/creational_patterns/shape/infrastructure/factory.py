"""ShapeFactory — resolves a case-insensitive tag to a shape, or None."""

from collections.abc import Callable

from creational_patterns.shape.domain.observer import ShapeObserver
from creational_patterns.shape.domain.shape import Shape, ShapeKind
from creational_patterns.shape.infrastructure.shapes import (
    Circle,
    Rectangle,
    Triangle,
)

_CONSTRUCTORS: dict[ShapeKind, Callable[[], Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.TRIANGLE: Triangle,
}


class ShapeFactory:
    """Centralizes shape creation so callers never name a concrete class."""

    def __init__(self, observer: ShapeObserver) -> None:
        self._observer = observer

    def create_shape(self, tag: str | None) -> Shape | None:
        """Return a new shape for tag, matched case-insensitively.

        Unrecognized or missing tags yield None rather than raising; callers
        must check the result before use.
        """
        kind = _resolve_kind(tag=tag)
        if kind is None:
            self._observer.shape_unrecognized(tag=tag)
            return None

        self._observer.shape_created(kind=kind.value)
        return _CONSTRUCTORS[kind]()


def _resolve_kind(tag: str | None) -> ShapeKind | None:
    if tag is None:
        return None
    try:
        return ShapeKind(tag.upper())
    except ValueError:
        return None
