"""Furniture client — written against FurnitureFactory only."""

from creational_patterns.furniture.domain.factory import FurnitureFactory
from creational_patterns.furniture.domain.furniture_set import FurnitureSet
from creational_patterns.furniture.domain.observer import FurnitureObserver


def furnish(factory: FurnitureFactory, observer: FurnitureObserver) -> FurnitureSet:
    """Build one chair and one table from the same factory.

    Never names a concrete style, so new styles need no change here.
    """
    chair = factory.create_chair()
    table = factory.create_table()
    observer.furniture_set_created(
        chair_style=chair.style.value, table_style=table.style.value
    )
    return FurnitureSet(chair=chair, table=table)
