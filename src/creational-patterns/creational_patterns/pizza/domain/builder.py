"""PizzaBuilder — fluent, order-independent configuration of a Pizza."""

from typing import Self

from creational_patterns.pizza.domain.pizza import (
    DEFAULT_CHEESE,
    DEFAULT_SAUCE,
    Pizza,
)


class PizzaBuilder:
    """Accumulates pizza configuration; every setter returns the same builder.

    Only the crust is required. Each setter overwrites exactly one field and
    performs no validation, so the order of calls never affects the result.
    build() may be called repeatedly; each call snapshots the current state
    into a new immutable Pizza.
    """

    def __init__(self, crust: str) -> None:
        self._crust = crust
        self._sauce = DEFAULT_SAUCE
        self._cheese = DEFAULT_CHEESE
        self._pepperoni = False
        self._mushroom = False
        self._olive = False
        self._onion = False

    def sauce(self, sauce: str) -> Self:
        self._sauce = sauce
        return self

    def cheese(self, cheese: str) -> Self:
        self._cheese = cheese
        return self

    def pepperoni(self, pepperoni: bool) -> Self:
        self._pepperoni = pepperoni
        return self

    def mushroom(self, mushroom: bool) -> Self:
        self._mushroom = mushroom
        return self

    def olive(self, olive: bool) -> Self:
        self._olive = olive
        return self

    def onion(self, onion: bool) -> Self:
        self._onion = onion
        return self

    def build(self) -> Pizza:
        # model_construct skips validation; the setters accept any value.
        return Pizza.model_construct(
            crust=self._crust,
            sauce=self._sauce,
            cheese=self._cheese,
            pepperoni=self._pepperoni,
            mushroom=self._mushroom,
            olive=self._olive,
            onion=self._onion,
        )
