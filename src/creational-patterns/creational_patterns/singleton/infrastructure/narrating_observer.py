"""NarratingConnectionObserver — echoes a sentence for every opened connection."""

from collections.abc import Callable

_OPENING_SENTENCES: dict[str, str] = {
    "plain": "Creating a new database connection to: {url}",
    "singleton": "Creating the singleton database connection to: {url}",
    "thread_safe": "Creating the thread-safe singleton connection to: {url}",
}


class NarratingConnectionObserver:
    """Satisfies the ConnectionObserver protocol by writing narration via echo."""

    def __init__(self, echo: Callable[[str], None]) -> None:
        self._echo = echo

    def connection_opened(self, url: str, variant: str) -> None:
        sentence = _OPENING_SENTENCES.get(variant, "Creating a connection to: {url}")
        self._echo(sentence.format(url=url))
