"""Furniture demonstration — naive client versus abstract factory."""

from collections.abc import Callable

from creational_patterns.config.domain.furniture import FurnitureDemoConfig
from creational_patterns.furniture.application.client import furnish
from creational_patterns.furniture.domain.observer import FurnitureObserver
from creational_patterns.furniture.infrastructure.naive import furnish_naive
from creational_patterns.furniture.infrastructure.registry import (
    create_furniture_factory,
)


def run_furniture_demo(
    config: FurnitureDemoConfig,
    observer: FurnitureObserver,
    echo: Callable[[str], None],
) -> None:
    """Narrate the naive client, then one abstract-factory set per style.

    Raises:
        FurnitureStyleNotSupportedError: if a configured style has no factory.
    """
    echo("=== Without Abstract Factory (Bad approach) ===")
    for line in furnish_naive(style=config.naive_style):
        echo(line)

    for style in config.styles:
        factory = create_furniture_factory(style=style)
        furniture = furnish(factory=factory, observer=observer)
        echo("")
        echo(f"=== With Abstract Factory ({furniture.chair.style.value}) ===")
        echo(furniture.chair.sit_on())
        echo(furniture.table.put_on())
