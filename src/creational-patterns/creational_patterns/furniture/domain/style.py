"""FurnitureStyle — the closed set of furniture styles."""

from enum import StrEnum


class FurnitureStyle(StrEnum):
    MODERN = "Modern"
    VICTORIAN = "Victorian"
