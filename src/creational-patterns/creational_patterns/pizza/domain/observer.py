"""PizzaObserver port — domain events emitted while preparing pizzas."""

from typing import Protocol


class PizzaObserver(Protocol):
    def pizza_built(self, crust: str, toppings: list[str]) -> None: ...
