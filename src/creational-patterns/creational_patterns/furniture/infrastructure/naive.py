"""Furnishing without an abstract factory: the client names every concrete class.

Nothing stops a caller from pairing a ModernChair with a VictorianTable, and
adding a style means editing this function.
"""

from creational_patterns.furniture.infrastructure.modern import (
    ModernChair,
    ModernTable,
)
from creational_patterns.furniture.infrastructure.victorian import (
    VictorianChair,
    VictorianTable,
)


def furnish_naive(style: str) -> list[str]:
    """Return the narration for one set, or nothing for an unknown style."""
    if style == "modern":
        modern_chair = ModernChair()
        modern_table = ModernTable()
        return [modern_chair.sit_on(), modern_table.put_on()]
    elif style == "victorian":
        victorian_chair = VictorianChair()
        victorian_table = VictorianTable()
        return [victorian_chair.sit_on(), victorian_table.put_on()]
    return []
