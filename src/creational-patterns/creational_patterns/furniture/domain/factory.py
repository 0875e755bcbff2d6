"""FurnitureFactory Protocol — structural interface for building a matched set."""

from typing import Protocol

from creational_patterns.furniture.domain.products import Chair, Table


class FurnitureFactory(Protocol):
    """Creates a Chair and a Table that always share one style.

    The pairing is structural: each implementation can only construct its
    own style's products.
    """

    def create_chair(self) -> Chair: ...

    def create_table(self) -> Table: ...
