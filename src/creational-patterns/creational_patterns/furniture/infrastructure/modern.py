"""Modern furniture products and the factory that builds them."""

from dataclasses import dataclass, field

from creational_patterns.furniture.domain.products import Chair, Table
from creational_patterns.furniture.domain.style import FurnitureStyle


@dataclass(frozen=True)
class ModernChair:
    style: FurnitureStyle = field(default=FurnitureStyle.MODERN, init=False)

    def sit_on(self) -> str:
        return "Sitting on Modern Chair"


@dataclass(frozen=True)
class ModernTable:
    style: FurnitureStyle = field(default=FurnitureStyle.MODERN, init=False)

    def put_on(self) -> str:
        return "Putting items on Modern Table"


class ModernFurnitureFactory:
    """Satisfies the FurnitureFactory protocol for the Modern style."""

    def create_chair(self) -> Chair:
        return ModernChair()

    def create_table(self) -> Table:
        return ModernTable()
