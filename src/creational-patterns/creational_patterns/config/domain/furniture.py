"""Furniture demonstration configuration model."""

from pydantic import BaseModel, Field


class FurnitureDemoConfig(BaseModel, frozen=True):
    naive_style: str = "modern"
    styles: list[str] = Field(
        default_factory=lambda: ["modern", "victorian"], min_length=1
    )
