"""Tests for PizzaWithoutBuilder."""

from creational_patterns.pizza.domain.builder import PizzaBuilder
from creational_patterns.pizza.infrastructure.naive import PizzaWithoutBuilder


class TestPizzaWithoutBuilder:
    def test_positional_fields(self) -> None:
        pizza = PizzaWithoutBuilder(
            "Thin", "Tomato", "Mozzarella", True, True, False, True
        )

        assert pizza.crust == "Thin"
        assert pizza.pepperoni is True
        assert pizza.olive is False

    def test_renders_like_built_pizza(self) -> None:
        naive = PizzaWithoutBuilder(
            "Thick", "White Sauce", "Cheddar", False, True, True, False
        )
        built = (
            PizzaBuilder("Thick")
            .sauce("White Sauce")
            .cheese("Cheddar")
            .mushroom(True)
            .olive(True)
            .build()
        )

        assert str(naive) == str(built)
