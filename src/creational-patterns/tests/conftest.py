"""Shared fixtures. Every test starts with no process-wide connection holders."""

import pytest

from creational_patterns.singleton.infrastructure.singleton import (
    SingletonDatabaseConnection,
    ThreadSafeSingletonDatabaseConnection,
)


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(SingletonDatabaseConnection, "_instance", None)
    monkeypatch.setattr(ThreadSafeSingletonDatabaseConnection, "_instance", None)
