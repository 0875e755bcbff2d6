"""Pizza demonstration — telescoping constructor versus PizzaBuilder."""

from collections.abc import Callable

from creational_patterns.config.domain.pizza import PizzaDemoConfig, PizzaOrder
from creational_patterns.pizza.domain.builder import PizzaBuilder
from creational_patterns.pizza.domain.observer import PizzaObserver
from creational_patterns.pizza.domain.pizza import DEFAULT_CHEESE, DEFAULT_SAUCE, Pizza
from creational_patterns.pizza.infrastructure.naive import PizzaWithoutBuilder

_TOPPINGS = ("pepperoni", "mushroom", "olive", "onion")


def run_pizza_demo(
    config: PizzaDemoConfig,
    observer: PizzaObserver,
    echo: Callable[[str], None],
) -> None:
    echo("=== Builder Pattern Example ===")

    echo("")
    echo("=== BAD EXAMPLE (Without Builder Pattern) ===")
    for order in config.orders:
        echo(str(_order_without_builder(order=order)))

    echo("")
    echo("=== GOOD EXAMPLE (With Builder Pattern) ===")
    for order in config.orders:
        pizza = order_with_builder(order=order)
        observer.pizza_built(
            crust=pizza.crust,
            toppings=[name for name in _TOPPINGS if getattr(pizza, name)],
        )
        echo(str(pizza))


def order_with_builder(order: PizzaOrder) -> Pizza:
    """Apply only the setters the order mentions; the rest keep builder defaults."""
    builder = PizzaBuilder(crust=order.crust)
    if order.sauce is not None:
        builder.sauce(order.sauce)
    if order.cheese is not None:
        builder.cheese(order.cheese)
    if order.pepperoni is not None:
        builder.pepperoni(order.pepperoni)
    if order.mushroom is not None:
        builder.mushroom(order.mushroom)
    if order.olive is not None:
        builder.olive(order.olive)
    if order.onion is not None:
        builder.onion(order.onion)
    return builder.build()


def _order_without_builder(order: PizzaOrder) -> PizzaWithoutBuilder:
    # Without a builder every field has to be spelled out.
    return PizzaWithoutBuilder(
        order.crust,
        order.sauce if order.sauce is not None else DEFAULT_SAUCE,
        order.cheese if order.cheese is not None else DEFAULT_CHEESE,
        bool(order.pepperoni),
        bool(order.mushroom),
        bool(order.olive),
        bool(order.onion),
    )
