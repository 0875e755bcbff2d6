"""ShapeObserver port — domain events emitted while creating shapes."""

from typing import Protocol


class ShapeObserver(Protocol):
    """Observer port for shape domain events.

    Implementations may log to structlog or record for tests.
    """

    def shape_created(self, kind: str) -> None: ...

    def shape_unrecognized(self, tag: str | None) -> None: ...
