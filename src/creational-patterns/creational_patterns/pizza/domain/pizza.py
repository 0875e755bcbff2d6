"""Pizza value object — the immutable result of PizzaBuilder.build()."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

DEFAULT_SAUCE = "Tomato"
DEFAULT_CHEESE = "Mozzarella"


def describe_pizza(fields: Mapping[str, object]) -> str:
    """Render pizza fields as ``Pizza [crust=..., sauce=..., ...]``."""
    body = ", ".join(f"{name}={value}" for name, value in fields.items())
    return f"Pizza [{body}]"


class Pizza(BaseModel):
    """Immutable pizza. Construct through PizzaBuilder rather than directly."""

    model_config = ConfigDict(frozen=True)

    crust: str
    sauce: str = DEFAULT_SAUCE
    cheese: str = DEFAULT_CHEESE
    pepperoni: bool = False
    mushroom: bool = False
    olive: bool = False
    onion: bool = False

    def __str__(self) -> str:
        return describe_pizza(
            fields={name: getattr(self, name) for name in type(self).model_fields}
        )
