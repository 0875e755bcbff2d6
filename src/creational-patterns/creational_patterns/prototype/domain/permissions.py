"""Role permissions and email signatures — the expensive employee setup."""

ROLE_PERMISSIONS: dict[str, tuple[str, ...]] = {
    "Manager": ("READ", "WRITE", "UPDATE", "DELETE", "APPROVE"),
    "Developer": ("READ", "WRITE", "UPDATE"),
}


def permissions_for(role: str) -> list[str]:
    """Return a fresh list of permissions for role; empty for unknown roles."""
    return list(ROLE_PERMISSIONS.get(role, ()))


def build_email_signature(name: str, role: str, department: str) -> str:
    return f"{name} | {role} | {department} Department"
