"""Structlog implementation of the ShapeObserver port."""

import structlog


class StructlogShapeObserver:
    """Delegates shape domain events to structlog.

    Satisfies the ShapeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def shape_created(self, kind: str) -> None:
        self._log.info("shape.created", kind=kind)

    def shape_unrecognized(self, tag: str | None) -> None:
        self._log.warning("shape.unrecognized", tag=tag)
