"""NarratingPrototypeObserver — echoes each setup and cloning step."""

from collections.abc import Callable


class NarratingPrototypeObserver:
    """Satisfies the PrototypeObserver protocol by writing narration via echo."""

    def __init__(self, echo: Callable[[str], None]) -> None:
        self._echo = echo

    def employee_built_from_scratch(self, name: str, role: str) -> None:
        self._echo("Creating employee from scratch (expensive operation)")

    def template_created(self, role: str, department: str) -> None:
        self._echo(f"Creating {role} prototype (done once)")

    def permissions_configured(self, role: str, permissions: list[str]) -> None:
        self._echo(f"  - Setting up default permissions for {role}")

    def signature_generated(self, signature: str) -> None:
        self._echo("  - Generating email signature with company logo")

    def employee_cloned(self, role: str) -> None:
        self._echo(f"Cloning {role} (fast operation)")

    def clone_failed(self, prototype: str, reason: str) -> None:
        self._echo(f"Could not clone {prototype}: {reason}")

    def template_missing(self, role: str) -> None:
        self._echo(f"No prototype registered for role {role!r}")
