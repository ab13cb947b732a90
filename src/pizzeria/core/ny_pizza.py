from __future__ import annotations

import logging
from enum import Enum

from .errors import InvalidArgument
from .pizza import Pizza, PizzaBuilder

logger = logging.getLogger(__name__)


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, name: str) -> "Size":
        if isinstance(name, cls):
            return name
        if not isinstance(name, str) or name.strip().upper() not in cls.__members__:
            valid = ", ".join(s.value for s in cls)
            raise InvalidArgument("size", name, f"unknown size (valid: {valid})")
        return cls[name.strip().upper()]


class NyPizza(Pizza):
    """New York style pizza; size is required."""

    size: Size

    def describe(self) -> str:
        return f"New York pizza ({self.size.value}) with {self.topping_names()}"


class NyPizzaBuilder(PizzaBuilder["NyPizzaBuilder"]):
    def __init__(self, size: Size) -> None:
        if size is None:
            raise InvalidArgument("size", size, "size must not be None")
        if not isinstance(size, Size):
            raise InvalidArgument("size", size, "expected a Size")
        super().__init__()
        self.size = size

    def build(self) -> NyPizza:
        pizza = NyPizza(size=self.size, toppings=self._snapshot())
        logger.debug("Built %s", pizza.describe())
        return pizza

    def _self(self) -> "NyPizzaBuilder":
        return self


__all__ = ["Size", "NyPizza", "NyPizzaBuilder"]
