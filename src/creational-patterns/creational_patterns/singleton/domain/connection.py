"""Connection Protocol — what every database connection holder offers."""

from typing import Protocol


class Connection(Protocol):
    @property
    def url(self) -> str: ...

    @property
    def is_open(self) -> bool: ...

    def execute_query(self, query: str) -> str: ...
