"""CompositeConnectionObserver — fans out all events to a list of observers."""

from creational_patterns.singleton.domain.observer import ConnectionObserver


class CompositeConnectionObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from ConnectionObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[ConnectionObserver]) -> None:
        self._observers = observers

    def connection_opened(self, url: str, variant: str) -> None:
        for obs in self._observers:
            obs.connection_opened(url=url, variant=variant)
