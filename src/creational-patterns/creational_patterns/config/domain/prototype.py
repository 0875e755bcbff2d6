"""Prototype demonstration configuration models."""

from pydantic import BaseModel, Field


class EmployeeHire(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    department: str = "Default"


def _default_naive_hires() -> list[EmployeeHire]:
    return [
        EmployeeHire(name="John", role="Manager", department="Sales"),
        EmployeeHire(name="Jane", role="Manager", department="Marketing"),
        EmployeeHire(name="Bob", role="Developer", department="IT"),
    ]


def _default_hires() -> list[EmployeeHire]:
    return [
        EmployeeHire(name="John", role="Manager"),
        EmployeeHire(name="Jane", role="Manager"),
        EmployeeHire(name="Bob", role="Developer"),
    ]


class PrototypeDemoConfig(BaseModel, frozen=True):
    department: str = "Default"
    roles: list[str] = Field(
        default_factory=lambda: ["Manager", "Developer"], min_length=1
    )
    naive_hires: list[EmployeeHire] = Field(default_factory=_default_naive_hires)
    hires: list[EmployeeHire] = Field(default_factory=_default_hires)
