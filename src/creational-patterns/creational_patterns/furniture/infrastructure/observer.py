"""Structlog implementation of the FurnitureObserver port."""

import structlog


class StructlogFurnitureObserver:
    """Delegates furniture domain events to structlog.

    Satisfies the FurnitureObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def furniture_set_created(self, chair_style: str, table_style: str) -> None:
        self._log.info(
            "furniture.set_created",
            chair_style=chair_style,
            table_style=table_style,
        )
