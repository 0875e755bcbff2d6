"""Top-level DemoConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from creational_patterns.config.domain.furniture import FurnitureDemoConfig
from creational_patterns.config.domain.pizza import PizzaDemoConfig
from creational_patterns.config.domain.prototype import PrototypeDemoConfig
from creational_patterns.config.domain.shape import ShapeDemoConfig
from creational_patterns.config.domain.singleton import SingletonDemoConfig


class DemoConfig(BaseModel, frozen=True):
    """Inputs for every demonstration. The defaults reproduce the stock narration."""

    shape: ShapeDemoConfig = Field(default_factory=ShapeDemoConfig)
    furniture: FurnitureDemoConfig = Field(default_factory=FurnitureDemoConfig)
    pizza: PizzaDemoConfig = Field(default_factory=PizzaDemoConfig)
    singleton: SingletonDemoConfig = Field(default_factory=SingletonDemoConfig)
    prototype: PrototypeDemoConfig = Field(default_factory=PrototypeDemoConfig)
