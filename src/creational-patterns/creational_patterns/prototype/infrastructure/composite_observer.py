"""CompositePrototypeObserver — fans out all events to a list of observers."""

from creational_patterns.prototype.domain.observer import PrototypeObserver


class CompositePrototypeObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from PrototypeObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[PrototypeObserver]) -> None:
        self._observers = observers

    def employee_built_from_scratch(self, name: str, role: str) -> None:
        for obs in self._observers:
            obs.employee_built_from_scratch(name=name, role=role)

    def template_created(self, role: str, department: str) -> None:
        for obs in self._observers:
            obs.template_created(role=role, department=department)

    def permissions_configured(self, role: str, permissions: list[str]) -> None:
        for obs in self._observers:
            obs.permissions_configured(role=role, permissions=permissions)

    def signature_generated(self, signature: str) -> None:
        for obs in self._observers:
            obs.signature_generated(signature=signature)

    def employee_cloned(self, role: str) -> None:
        for obs in self._observers:
            obs.employee_cloned(role=role)

    def clone_failed(self, prototype: str, reason: str) -> None:
        for obs in self._observers:
            obs.clone_failed(prototype=prototype, reason=reason)

    def template_missing(self, role: str) -> None:
        for obs in self._observers:
            obs.template_missing(role=role)
