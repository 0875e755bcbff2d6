"""Singleton demonstration — one connection per call versus one per process."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from creational_patterns.config.domain.singleton import SingletonDemoConfig
from creational_patterns.singleton.domain.connection import Connection
from creational_patterns.singleton.domain.observer import ConnectionObserver
from creational_patterns.singleton.infrastructure.connection import (
    DatabaseConnection,
)
from creational_patterns.singleton.infrastructure.singleton import (
    SingletonDatabaseConnection,
    ThreadSafeSingletonDatabaseConnection,
)


def _run_queries(
    connections: Sequence[Connection],
    queries: Sequence[str],
    echo: Callable[[str], None],
) -> None:
    for connection, query in zip(connections, queries, strict=True):
        echo(connection.execute_query(query=query))


def run_singleton_demo(
    config: SingletonDemoConfig,
    observer: ConnectionObserver,
    echo: Callable[[str], None],
) -> None:
    """Narrate all three connection holders.

    observer should narrate connection_opened itself (see
    NarratingConnectionObserver); this function only echoes query results.
    """
    echo("")
    echo("----- Bad Example (Non-Singleton) -----")
    connections: list[Connection] = [
        DatabaseConnection(url=config.url, observer=observer) for _ in config.queries
    ]
    _run_queries(connections=connections, queries=config.queries, echo=echo)
    echo(f"Are connections the same object? {connections[0] is connections[-1]}")

    echo("")
    echo("----- Good Example (Singleton) -----")
    singletons: list[Connection] = [
        SingletonDatabaseConnection.get_instance(url=config.url, observer=observer)
        for _ in config.queries
    ]
    _run_queries(connections=singletons, queries=config.queries, echo=echo)
    same = singletons[0] is singletons[-1]
    echo(f"Are singleton connections the same object? {same}")

    late = SingletonDatabaseConnection.get_instance(
        url=config.other_url, observer=observer
    )
    echo(f"Requested {config.other_url}, still connected to: {late.url}")

    echo("")
    echo("----- Thread-Safe Singleton -----")
    with ThreadPoolExecutor(max_workers=config.concurrent_callers) as pool:
        futures = [
            pool.submit(
                ThreadSafeSingletonDatabaseConnection.get_instance,
                url=config.url,
                observer=observer,
            )
            for _ in range(config.concurrent_callers)
        ]
        shared: list[Connection] = [future.result() for future in futures]
    distinct = len({id(connection) for connection in shared})
    echo(f"Distinct instances across {len(shared)} concurrent callers: {distinct}")
    echo(shared[0].execute_query(query=config.queries[0]))
