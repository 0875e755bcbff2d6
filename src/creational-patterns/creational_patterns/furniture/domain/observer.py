"""FurnitureObserver port — domain events emitted while furnishing a room."""

from typing import Protocol


class FurnitureObserver(Protocol):
    def furniture_set_created(self, chair_style: str, table_style: str) -> None: ...
