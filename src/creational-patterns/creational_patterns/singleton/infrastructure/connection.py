"""DatabaseConnection — a plain holder that opens a connection per instance."""

from creational_patterns.singleton.domain.observer import ConnectionObserver


class DatabaseConnection:
    """Opens a new (simulated, expensive) connection every time it is constructed."""

    variant = "plain"
    _description = "connection"

    def __init__(self, url: str, observer: ConnectionObserver) -> None:
        self._is_open = False
        self._url = url
        observer.connection_opened(url=url, variant=self.variant)
        self._is_open = True

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_open(self) -> bool:
        return self._is_open

    def execute_query(self, query: str) -> str:
        return f"Executing query: {query} on {self._description}: {self._url}"
