"""FurnitureFactoryRegistry — maps a style name to the matching FurnitureFactory."""

from collections.abc import Callable

from creational_patterns.furniture.domain.factory import FurnitureFactory
from creational_patterns.furniture.domain.style import FurnitureStyle
from creational_patterns.furniture.infrastructure.errors import (
    FurnitureStyleNotSupportedError,
)
from creational_patterns.furniture.infrastructure.modern import ModernFurnitureFactory
from creational_patterns.furniture.infrastructure.victorian import (
    VictorianFurnitureFactory,
)

_FACTORIES: dict[FurnitureStyle, Callable[[], FurnitureFactory]] = {
    FurnitureStyle.MODERN: ModernFurnitureFactory,
    FurnitureStyle.VICTORIAN: VictorianFurnitureFactory,
}


def create_furniture_factory(style: str) -> FurnitureFactory:
    """Return the FurnitureFactory for style, matched case-insensitively.

    Raises:
        FurnitureStyleNotSupportedError: if style is not a known furniture style.
    """
    for known, factory in _FACTORIES.items():
        if known.value.lower() == style.lower():
            return factory()

    raise FurnitureStyleNotSupportedError(style=style)
