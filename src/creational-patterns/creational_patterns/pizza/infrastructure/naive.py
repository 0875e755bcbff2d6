"""PizzaWithoutBuilder — every field is a required positional argument."""

from creational_patterns.pizza.domain.pizza import describe_pizza


class PizzaWithoutBuilder:
    """Telescoping constructor: callers must remember all seven positions."""

    def __init__(
        self,
        crust: str,
        sauce: str,
        cheese: str,
        pepperoni: bool,
        mushroom: bool,
        olive: bool,
        onion: bool,
    ) -> None:
        self.crust = crust
        self.sauce = sauce
        self.cheese = cheese
        self.pepperoni = pepperoni
        self.mushroom = mushroom
        self.olive = olive
        self.onion = onion

    def __str__(self) -> str:
        return describe_pizza(fields=vars(self))
