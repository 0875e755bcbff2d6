"""Victorian furniture products and the factory that builds them."""

from dataclasses import dataclass, field

from creational_patterns.furniture.domain.products import Chair, Table
from creational_patterns.furniture.domain.style import FurnitureStyle


@dataclass(frozen=True)
class VictorianChair:
    style: FurnitureStyle = field(default=FurnitureStyle.VICTORIAN, init=False)

    def sit_on(self) -> str:
        return "Sitting on Victorian Chair"


@dataclass(frozen=True)
class VictorianTable:
    style: FurnitureStyle = field(default=FurnitureStyle.VICTORIAN, init=False)

    def put_on(self) -> str:
        return "Putting items on Victorian Table"


class VictorianFurnitureFactory:
    """Satisfies the FurnitureFactory protocol for the Victorian style."""

    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_table(self) -> Table:
        return VictorianTable()
