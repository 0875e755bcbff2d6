"""Tests for run_prototype_demo narration."""

from creational_patterns.config.domain.prototype import (
    EmployeeHire,
    PrototypeDemoConfig,
)
from creational_patterns.prototype.application.demo import run_prototype_demo
from creational_patterns.prototype.infrastructure.narrating_observer import (
    NarratingPrototypeObserver,
)


class TestRunPrototypeDemo:
    def test_default_narration(self) -> None:
        lines: list[str] = []

        run_prototype_demo(
            config=PrototypeDemoConfig(),
            observer=NarratingPrototypeObserver(echo=lines.append),
            echo=lines.append,
        )

        scratch = [
            "Creating employee from scratch (expensive operation)",
            "  - Setting up default permissions for {role}",
            "  - Generating email signature with company logo",
        ]
        template = [
            "Creating {role} prototype (done once)",
            "  - Setting up default permissions for {role}",
            "  - Generating email signature with company logo",
        ]
        assert lines == [
            "----- Bad Example -----",
            *[line.format(role="Manager") for line in scratch],
            *[line.format(role="Manager") for line in scratch],
            *[line.format(role="Developer") for line in scratch],
            "John - Manager in Sales",
            "Jane - Manager in Marketing",
            "Bob - Developer in IT",
            "",
            "----- Good Example -----",
            *[line.format(role="Manager") for line in template],
            *[line.format(role="Developer") for line in template],
            "",
            "Creating actual employees by cloning:",
            "Cloning Manager (fast operation)",
            "Cloning Manager (fast operation)",
            "Cloning Developer (fast operation)",
            "John - Manager in Default",
            "Jane - Manager in Default",
            "Bob - Developer in Default",
        ]

    def test_unregistered_role_is_skipped(self) -> None:
        lines: list[str] = []
        config = PrototypeDemoConfig(
            naive_hires=[],
            hires=[
                EmployeeHire(name="Ann", role="Designer"),
                EmployeeHire(name="Bob", role="Developer"),
            ],
        )

        run_prototype_demo(
            config=config,
            observer=NarratingPrototypeObserver(echo=lines.append),
            echo=lines.append,
        )

        assert "No prototype registered for role 'Designer'" in lines
        assert lines[-1] == "Bob - Developer in Default"
        assert not any(line.startswith("Ann") for line in lines)
