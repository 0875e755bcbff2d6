"""Pizza demonstration configuration models."""

from pydantic import BaseModel, Field


class PizzaOrder(BaseModel, frozen=True):
    """One pizza to build. Unset optional fields fall back to builder defaults."""

    crust: str = Field(min_length=1)
    sauce: str | None = None
    cheese: str | None = None
    pepperoni: bool | None = None
    mushroom: bool | None = None
    olive: bool | None = None
    onion: bool | None = None


def _default_orders() -> list[PizzaOrder]:
    return [
        PizzaOrder(
            crust="Thin",
            sauce="Tomato",
            cheese="Mozzarella",
            pepperoni=True,
            mushroom=True,
            olive=False,
            onion=True,
        ),
        PizzaOrder(
            crust="Thick",
            sauce="White Sauce",
            cheese="Cheddar",
            mushroom=True,
            olive=True,
        ),
    ]


class PizzaDemoConfig(BaseModel, frozen=True):
    orders: list[PizzaOrder] = Field(default_factory=_default_orders, min_length=1)
