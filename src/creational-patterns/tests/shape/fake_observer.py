"""FakeShapeObserver — records shape domain events for assertion in tests."""


class FakeShapeObserver:
    def __init__(self) -> None:
        self.created: list[str] = []
        self.unrecognized: list[str | None] = []

    def shape_created(self, kind: str) -> None:
        self.created.append(kind)

    def shape_unrecognized(self, tag: str | None) -> None:
        self.unrecognized.append(tag)
