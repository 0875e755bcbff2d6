"""Tests for EmployeePrototypeRegistry."""

from creational_patterns.prototype.infrastructure.registry import (
    EmployeePrototypeRegistry,
)
from tests.prototype.fake_observer import FakePrototypeObserver


def _make_registry() -> tuple[EmployeePrototypeRegistry, FakePrototypeObserver]:
    observer = FakePrototypeObserver()
    registry = EmployeePrototypeRegistry(observer=observer)
    registry.register(role="Manager", department="Default")
    registry.register(role="Developer", department="Default")
    return registry, observer


class TestEmployeePrototypeRegistry:
    def test_register_builds_one_template_per_role(self) -> None:
        _, observer = _make_registry()

        assert observer.templates_created == [
            ("Manager", "Default"),
            ("Developer", "Default"),
        ]

    def test_hire_clones_and_names(self) -> None:
        registry, observer = _make_registry()

        john = registry.hire(role="Manager", name="John")
        bob = registry.hire(role="Developer", name="Bob")

        assert john is not None and bob is not None
        assert john.display() == "John - Manager in Default"
        assert bob.display() == "Bob - Developer in Default"
        assert observer.cloned == ["Manager", "Developer"]

    def test_hiring_never_reruns_setup(self) -> None:
        registry, observer = _make_registry()

        for name in ["John", "Jane", "Joe"]:
            registry.hire(role="Manager", name=name)

        assert len(observer.permissions_configured_events) == 2
        assert len(observer.templates_created) == 2

    def test_hire_leaves_template_untouched(self) -> None:
        observer = FakePrototypeObserver()
        registry = EmployeePrototypeRegistry(observer=observer)
        template = registry.register(role="Manager", department="Sales")

        registry.hire(role="Manager", name="John")

        assert template.name == "Default"
        assert template.email_signature == "Default | Manager | Sales Department"

    def test_unregistered_role_returns_none(self) -> None:
        registry, observer = _make_registry()

        assert registry.hire(role="Designer", name="Ann") is None
        assert observer.missing_templates == ["Designer"]

    def test_register_replaces_template(self) -> None:
        registry, _ = _make_registry()

        registry.register(role="Manager", department="Sales")
        employee = registry.hire(role="Manager", name="John")

        assert employee is not None
        assert employee.department == "Sales"
