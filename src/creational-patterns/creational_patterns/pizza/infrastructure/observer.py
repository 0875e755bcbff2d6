"""Structlog implementation of the PizzaObserver port."""

import structlog


class StructlogPizzaObserver:
    """Delegates pizza domain events to structlog.

    Satisfies the PizzaObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def pizza_built(self, crust: str, toppings: list[str]) -> None:
        self._log.info("pizza.built", crust=crust, toppings=toppings)
