"""EmployeeWithoutPrototype — repeats the full setup for every employee."""

from creational_patterns.prototype.domain.observer import PrototypeObserver
from creational_patterns.prototype.domain.permissions import (
    build_email_signature,
    permissions_for,
)


class EmployeeWithoutPrototype:
    def __init__(
        self, name: str, role: str, department: str, observer: PrototypeObserver
    ) -> None:
        observer.employee_built_from_scratch(name=name, role=role)
        self.name = name
        self.role = role
        self.department = department

        self.permissions = permissions_for(role=role)
        observer.permissions_configured(role=role, permissions=list(self.permissions))

        self.email_signature = build_email_signature(
            name=name, role=role, department=department
        )
        observer.signature_generated(signature=self.email_signature)

    def display(self) -> str:
        return f"{self.name} - {self.role} in {self.department}"
