"""CLI entrypoint for creational-patterns — typer app with one command per demo."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import structlog
import typer
from rich.console import Console
from rich.table import Table

from creational_patterns.config.domain.config import DemoConfig
from creational_patterns.config.infrastructure.observer import StructlogConfigObserver
from creational_patterns.config.infrastructure.yaml_loader import YamlConfigLoader
from creational_patterns.core.errors import CreationalPatternsError
from creational_patterns.furniture.application.demo import run_furniture_demo
from creational_patterns.furniture.infrastructure.observer import (
    StructlogFurnitureObserver,
)
from creational_patterns.pizza.application.demo import run_pizza_demo
from creational_patterns.pizza.infrastructure.observer import StructlogPizzaObserver
from creational_patterns.prototype.application.demo import run_prototype_demo
from creational_patterns.prototype.infrastructure.composite_observer import (
    CompositePrototypeObserver,
)
from creational_patterns.prototype.infrastructure.narrating_observer import (
    NarratingPrototypeObserver,
)
from creational_patterns.prototype.infrastructure.observer import (
    StructlogPrototypeObserver,
)
from creational_patterns.shape.application.demo import run_shape_demo
from creational_patterns.shape.infrastructure.observer import StructlogShapeObserver
from creational_patterns.singleton.application.demo import run_singleton_demo
from creational_patterns.singleton.infrastructure.composite_observer import (
    CompositeConnectionObserver,
)
from creational_patterns.singleton.infrastructure.narrating_observer import (
    NarratingConnectionObserver,
)
from creational_patterns.singleton.infrastructure.observer import (
    StructlogConnectionObserver,
)

app = typer.Typer(add_completion=False, no_args_is_help=True)

DemoRunner: TypeAlias = Callable[[DemoConfig], None]


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so the narration on stdout reads cleanly.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> DemoConfig:
    if config_path is None:
        return DemoConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _shape(config: DemoConfig) -> None:
    run_shape_demo(
        config=config.shape, observer=StructlogShapeObserver(), echo=typer.echo
    )


def _furniture(config: DemoConfig) -> None:
    run_furniture_demo(
        config=config.furniture,
        observer=StructlogFurnitureObserver(),
        echo=typer.echo,
    )


def _pizza(config: DemoConfig) -> None:
    run_pizza_demo(
        config=config.pizza, observer=StructlogPizzaObserver(), echo=typer.echo
    )


def _singleton(config: DemoConfig) -> None:
    observer = CompositeConnectionObserver(
        observers=[
            StructlogConnectionObserver(),
            NarratingConnectionObserver(echo=typer.echo),
        ]
    )
    run_singleton_demo(config=config.singleton, observer=observer, echo=typer.echo)


def _prototype(config: DemoConfig) -> None:
    observer = CompositePrototypeObserver(
        observers=[
            StructlogPrototypeObserver(),
            NarratingPrototypeObserver(echo=typer.echo),
        ]
    )
    run_prototype_demo(config=config.prototype, observer=observer, echo=typer.echo)


# name -> (pattern, what it shows, runner)
_DEMOS: dict[str, tuple[str, str, DemoRunner]] = {
    "factory": (
        "Factory",
        "Resolve a shape tag to a drawable shape",
        _shape,
    ),
    "abstract-factory": (
        "Abstract Factory",
        "Build a chair and table that always share one style",
        _furniture,
    ),
    "builder": (
        "Builder",
        "Configure an immutable pizza with chained setters",
        _pizza,
    ),
    "singleton": (
        "Singleton",
        "Share one database connection per process",
        _singleton,
    ),
    "prototype": (
        "Prototype",
        "Clone pre-configured employee templates",
        _prototype,
    ),
}


def _run(names: list[str], config_path: Path | None, log_format: str) -> None:
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        for position, name in enumerate(names):
            if position:
                typer.echo("")
            _pattern, _summary, runner = _DEMOS[name]
            runner(config)
    except CreationalPatternsError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Optional YAML file overriding demo inputs"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


@app.command()
def factory(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Factory: naive shape creation versus ShapeFactory."""
    _run(names=["factory"], config_path=config_path, log_format=log_format)


@app.command("abstract-factory")
def abstract_factory(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Abstract Factory: matched furniture sets per style."""
    _run(names=["abstract-factory"], config_path=config_path, log_format=log_format)


@app.command()
def builder(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Builder: telescoping constructor versus PizzaBuilder."""
    _run(names=["builder"], config_path=config_path, log_format=log_format)


@app.command()
def singleton(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Singleton: plain, lazy and thread-safe connection holders."""
    _run(names=["singleton"], config_path=config_path, log_format=log_format)


@app.command()
def prototype(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Prototype: building every employee versus cloning templates."""
    _run(names=["prototype"], config_path=config_path, log_format=log_format)


@app.command("all")
def run_all(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Run every demonstration in order."""
    _run(names=list(_DEMOS), config_path=config_path, log_format=log_format)


@app.command("list")
def list_demos() -> None:
    """Show the available demonstrations."""
    table = Table(title="Creational patterns")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Pattern", style="green")
    table.add_column("Shows")
    for name, (pattern, summary, _runner) in _DEMOS.items():
        table.add_row(name, pattern, summary)
    Console().print(table)


if __name__ == "__main__":
    app()
