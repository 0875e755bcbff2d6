"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[str] = []

    def config_loaded(self, path: str) -> None:
        self.loaded.append(path)
