"""Abstract furniture products — Chair and Table Protocols."""

from typing import Protocol

from creational_patterns.furniture.domain.style import FurnitureStyle


class Chair(Protocol):
    @property
    def style(self) -> FurnitureStyle: ...

    def sit_on(self) -> str: ...


class Table(Protocol):
    @property
    def style(self) -> FurnitureStyle: ...

    def put_on(self) -> str: ...
