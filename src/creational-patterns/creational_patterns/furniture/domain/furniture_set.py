"""FurnitureSet value object — one chair and one table furnished together."""

from dataclasses import dataclass

from creational_patterns.furniture.domain.products import Chair, Table


@dataclass(frozen=True)
class FurnitureSet:
    chair: Chair
    table: Table
