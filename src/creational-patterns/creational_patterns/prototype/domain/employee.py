"""Employee — a prototype built once per role and cloned per hire."""

from typing import Self

from creational_patterns.prototype.domain.observer import PrototypeObserver
from creational_patterns.prototype.domain.permissions import (
    build_email_signature,
    permissions_for,
)
from creational_patterns.prototype.domain.prototype import Prototype

TEMPLATE_NAME = "Default"


class Employee(Prototype):
    """A fully configured employee.

    Use create_template() to run the expensive setup once for a role, then
    clone() the template and set_name() on each copy. The constructor only
    stores fields; it never derives anything.
    """

    def __init__(
        self,
        name: str,
        role: str,
        department: str,
        permissions: list[str],
        email_signature: str,
        observer: PrototypeObserver,
    ) -> None:
        super().__init__(observer=observer)
        self._name = name
        self._role = role
        self._department = department
        self._permissions = permissions
        self._email_signature = email_signature

    @classmethod
    def create_template(
        cls, role: str, department: str, observer: PrototypeObserver
    ) -> "Employee":
        """Build the template for role. Unknown roles get no permissions."""
        observer.template_created(role=role, department=department)

        permissions = permissions_for(role=role)
        observer.permissions_configured(role=role, permissions=list(permissions))

        signature = build_email_signature(
            name=TEMPLATE_NAME, role=role, department=department
        )
        observer.signature_generated(signature=signature)

        return cls(
            name=TEMPLATE_NAME,
            role=role,
            department=department,
            permissions=permissions,
            email_signature=signature,
            observer=observer,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> str:
        return self._role

    @property
    def department(self) -> str:
        return self._department

    @property
    def permissions(self) -> list[str]:
        return self._permissions

    @property
    def email_signature(self) -> str:
        return self._email_signature

    def set_name(self, name: str) -> None:
        """Rename this employee and rebuild its signature from its own fields."""
        self._name = name
        self._email_signature = build_email_signature(
            name=name, role=self._role, department=self._department
        )

    def display(self) -> str:
        return f"{self._name} - {self._role} in {self._department}"

    def _copy(self) -> Self:
        self._observer.employee_cloned(role=self._role)
        return type(self)(
            name=self._name,
            role=self._role,
            department=self._department,
            permissions=list(self._permissions),
            email_signature=self._email_signature,
            observer=self._observer,
        )
