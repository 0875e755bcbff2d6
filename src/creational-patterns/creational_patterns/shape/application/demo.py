"""Shape demonstration — naive if/elif creation versus ShapeFactory."""

from collections.abc import Callable

from creational_patterns.config.domain.shape import ShapeDemoConfig
from creational_patterns.shape.domain.observer import ShapeObserver
from creational_patterns.shape.infrastructure.factory import ShapeFactory
from creational_patterns.shape.infrastructure.naive import create_shape_naive


def run_shape_demo(
    config: ShapeDemoConfig,
    observer: ShapeObserver,
    echo: Callable[[str], None],
) -> None:
    """Narrate both creation styles.

    Raises:
        UnknownShapeError: if the naive tag is not an exact upper-case match.
    """
    echo("=== Bad Implementation ===")
    echo(create_shape_naive(tag=config.naive_tag).draw())

    echo("")
    echo("=== Good Implementation ===")
    factory = ShapeFactory(observer=observer)
    for tag in config.tags:
        shape = factory.create_shape(tag=tag)
        if shape is None:
            echo(f"No shape available for {tag!r}")
            continue
        echo(shape.draw())
