"""ConnectionObserver port — domain events emitted by connection holders."""

from typing import Protocol


class ConnectionObserver(Protocol):
    """Observer port for connection domain events.

    connection_opened fires once per construction, from inside the
    constructor and before the instance is marked open.
    """

    def connection_opened(self, url: str, variant: str) -> None: ...
