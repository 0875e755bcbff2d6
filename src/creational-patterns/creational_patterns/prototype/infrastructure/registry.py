"""EmployeePrototypeRegistry — one template per role, cloned for every hire."""

from creational_patterns.prototype.domain.employee import Employee
from creational_patterns.prototype.domain.observer import PrototypeObserver


class EmployeePrototypeRegistry:
    """Holds a long-lived Employee template per role.

    Registering a role runs the expensive setup; hiring only copies.
    """

    def __init__(self, observer: PrototypeObserver) -> None:
        self._observer = observer
        self._templates: dict[str, Employee] = {}

    def register(self, role: str, department: str) -> Employee:
        """Build and keep the template for role, replacing any previous one."""
        template = Employee.create_template(
            role=role, department=department, observer=self._observer
        )
        self._templates[role] = template
        return template

    def hire(self, role: str, name: str) -> Employee | None:
        """Clone the role's template and name the copy.

        Returns None when no template is registered for role or the template
        cannot be cloned.
        """
        template = self._templates.get(role)
        if template is None:
            self._observer.template_missing(role=role)
            return None

        employee = template.clone()
        if employee is None:
            return None

        employee.set_name(name)
        return employee
