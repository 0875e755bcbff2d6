"""Shape demonstration configuration model."""

from pydantic import BaseModel, Field


class ShapeDemoConfig(BaseModel, frozen=True):
    naive_tag: str = "CIRCLE"
    tags: list[str] = Field(
        default_factory=lambda: ["CIRCLE", "RECTANGLE", "triangle", "hexagon"]
    )
