"""Structlog implementation of the PrototypeObserver port."""

import structlog


class StructlogPrototypeObserver:
    """Delegates prototype domain events to structlog.

    Satisfies the PrototypeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def employee_built_from_scratch(self, name: str, role: str) -> None:
        self._log.info("prototype.employee_built_from_scratch", name=name, role=role)

    def template_created(self, role: str, department: str) -> None:
        self._log.info("prototype.template_created", role=role, department=department)

    def permissions_configured(self, role: str, permissions: list[str]) -> None:
        self._log.debug(
            "prototype.permissions_configured", role=role, permissions=permissions
        )

    def signature_generated(self, signature: str) -> None:
        self._log.debug("prototype.signature_generated", signature=signature)

    def employee_cloned(self, role: str) -> None:
        self._log.info("prototype.employee_cloned", role=role)

    def clone_failed(self, prototype: str, reason: str) -> None:
        self._log.error("prototype.clone_failed", prototype=prototype, reason=reason)

    def template_missing(self, role: str) -> None:
        self._log.warning("prototype.template_missing", role=role)
