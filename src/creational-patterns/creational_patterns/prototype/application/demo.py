"""Prototype demonstration — building every employee versus cloning templates."""

from collections.abc import Callable

from creational_patterns.config.domain.prototype import PrototypeDemoConfig
from creational_patterns.prototype.domain.employee import Employee
from creational_patterns.prototype.domain.observer import PrototypeObserver
from creational_patterns.prototype.infrastructure.naive import (
    EmployeeWithoutPrototype,
)
from creational_patterns.prototype.infrastructure.registry import (
    EmployeePrototypeRegistry,
)


def run_prototype_demo(
    config: PrototypeDemoConfig,
    observer: PrototypeObserver,
    echo: Callable[[str], None],
) -> None:
    """Narrate both approaches.

    observer should narrate the setup steps itself (see
    NarratingPrototypeObserver); this function echoes headings and results.
    """
    echo("----- Bad Example -----")
    built = [
        EmployeeWithoutPrototype(
            name=hire.name,
            role=hire.role,
            department=hire.department,
            observer=observer,
        )
        for hire in config.naive_hires
    ]
    for employee in built:
        echo(employee.display())

    echo("")
    echo("----- Good Example -----")
    registry = EmployeePrototypeRegistry(observer=observer)
    for role in config.roles:
        registry.register(role=role, department=config.department)

    echo("")
    echo("Creating actual employees by cloning:")
    hired: list[Employee] = []
    for hire in config.hires:
        employee = registry.hire(role=hire.role, name=hire.name)
        if employee is not None:
            hired.append(employee)
    for employee in hired:
        echo(employee.display())
