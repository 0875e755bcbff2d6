"""Tests for the creational-patterns CLI."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from creational_patterns.cli.main import app

FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestDemoCommands:
    """Each command runs with no arguments and exits 0."""

    def test_factory(self) -> None:
        result = runner.invoke(app, ["factory"])

        assert result.exit_code == 0
        assert "=== Good Implementation ===" in result.stdout
        assert "Drawing a Triangle" in result.stdout
        assert "No shape available for 'hexagon'" in result.stdout

    def test_abstract_factory(self) -> None:
        result = runner.invoke(app, ["abstract-factory"])

        assert result.exit_code == 0
        assert "Sitting on Victorian Chair" in result.stdout
        assert "Putting items on Modern Table" in result.stdout

    def test_builder(self) -> None:
        result = runner.invoke(app, ["builder"])

        assert result.exit_code == 0
        assert "=== GOOD EXAMPLE (With Builder Pattern) ===" in result.stdout
        assert "Pizza [crust=Thick, sauce=White Sauce, cheese=Cheddar" in result.stdout

    def test_singleton(self) -> None:
        result = runner.invoke(app, ["singleton"])

        assert result.exit_code == 0
        assert "Are connections the same object? False" in result.stdout
        assert "Are singleton connections the same object? True" in result.stdout
        assert "Distinct instances across 4 concurrent callers: 1" in result.stdout

    def test_prototype(self) -> None:
        result = runner.invoke(app, ["prototype"])

        assert result.exit_code == 0
        assert "Creating Manager prototype (done once)" in result.stdout
        assert "Jane - Manager in Default" in result.stdout

    def test_all_runs_every_demo_in_order(self) -> None:
        result = runner.invoke(app, ["all"])

        assert result.exit_code == 0
        markers = [
            "=== Bad Implementation ===",
            "=== Without Abstract Factory (Bad approach) ===",
            "=== Builder Pattern Example ===",
            "----- Bad Example (Non-Singleton) -----",
            "Creating actual employees by cloning:",
        ]
        positions = [result.stdout.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_json_log_format(self) -> None:
        result = runner.invoke(app, ["factory", "--log-format", "json"])

        assert result.exit_code == 0
        assert "Drawing a Circle" in result.stdout


class TestConfigOption:
    def test_config_overrides_inputs(self) -> None:
        result = runner.invoke(
            app, ["factory", "--config", str(FIXTURES / "custom_config.yaml")]
        )

        assert result.exit_code == 0
        assert "Drawing a Triangle" in result.stdout
        assert "No shape available for 'octagon'" in result.stdout

    def test_missing_config_exits_1(self) -> None:
        result = runner.invoke(
            app, ["builder", "--config", str(FIXTURES / "does_not_exist.yaml")]
        )

        assert result.exit_code == 1
        assert "Failed to load config" in result.stdout

    def test_naive_failure_exits_1(self) -> None:
        result = runner.invoke(
            app, ["factory", "-c", str(FIXTURES / "bad_naive_tag_config.yaml")]
        )

        assert result.exit_code == 1
        assert "Failed to create shape: unknown shape: circle" in result.stdout


class TestMisc:
    def test_invalid_log_format_exits_1(self) -> None:
        result = runner.invoke(app, ["factory", "--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.stdout

    def test_list_shows_every_command(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        commands = ["factory", "abstract-factory", "builder", "singleton", "prototype"]
        for name in commands:
            assert name in result.stdout
