"""Singleton demonstration configuration model."""

from pydantic import BaseModel, Field


class SingletonDemoConfig(BaseModel, frozen=True):
    url: str = Field(default="jdbc:mysql://localhost/db", min_length=1)
    other_url: str = Field(default="jdbc:postgresql://localhost/other", min_length=1)
    queries: list[str] = Field(
        default_factory=lambda: ["SELECT * FROM users", "SELECT * FROM products"],
        min_length=2,
    )
    concurrent_callers: int = Field(default=4, ge=1)
