"""Process-wide connection holders, unsynchronized and thread-safe.

Both accessors capture the URL from the first call only. Later calls return
the original instance and ignore their url argument. There is no teardown.
"""

import threading
from typing import ClassVar

from creational_patterns.singleton.domain.observer import ConnectionObserver
from creational_patterns.singleton.infrastructure.connection import (
    DatabaseConnection,
)


class SingletonDatabaseConnection(DatabaseConnection):
    """Lazily constructed on first access. Only correct for single-threaded use.

    Two threads that both see no instance will each construct one; the last
    assignment wins and the other caller keeps a stray connection.

    Callers must go through get_instance; calling the class directly builds an
    extra connection that is never shared.
    """

    variant = "singleton"
    _description = "singleton connection"
    _instance: ClassVar["SingletonDatabaseConnection | None"] = None

    @classmethod
    def get_instance(
        cls, url: str, observer: ConnectionObserver
    ) -> "SingletonDatabaseConnection":
        if cls._instance is None:
            cls._instance = cls(url=url, observer=observer)
        return cls._instance


class ThreadSafeSingletonDatabaseConnection(DatabaseConnection):
    """Lazily constructed on first access, at most once under concurrent access.

    Double-checked locking: a lock-free read serves every call after the first,
    and only callers that observe no instance take the lock and re-check. The
    instance is bound to the class only after its constructor has returned, so
    no caller can see a half-built connection.

    Callers must go through get_instance; direct construction bypasses the lock.
    """

    variant = "thread_safe"
    _description = "thread-safe singleton connection"
    _instance: ClassVar["ThreadSafeSingletonDatabaseConnection | None"] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(
        cls, url: str, observer: ConnectionObserver
    ) -> "ThreadSafeSingletonDatabaseConnection":
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    instance = cls(url=url, observer=observer)
                    cls._instance = instance
        return instance
