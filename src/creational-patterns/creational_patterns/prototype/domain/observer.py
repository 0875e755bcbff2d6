"""PrototypeObserver port — domain events emitted while building employees."""

from typing import Protocol


class PrototypeObserver(Protocol):
    """Observer port for prototype domain events.

    permissions_configured and signature_generated mark the expensive setup
    steps; counting them shows whether a copy re-ran the setup.
    """

    def employee_built_from_scratch(self, name: str, role: str) -> None: ...

    def template_created(self, role: str, department: str) -> None: ...

    def permissions_configured(self, role: str, permissions: list[str]) -> None: ...

    def signature_generated(self, signature: str) -> None: ...

    def employee_cloned(self, role: str) -> None: ...

    def clone_failed(self, prototype: str, reason: str) -> None: ...

    def template_missing(self, role: str) -> None: ...
