"""Structlog implementation of the ConnectionObserver port."""

import structlog


class StructlogConnectionObserver:
    """Delegates connection domain events to structlog.

    Satisfies the ConnectionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def connection_opened(self, url: str, variant: str) -> None:
        self._log.info("singleton.connection_opened", url=url, variant=variant)
