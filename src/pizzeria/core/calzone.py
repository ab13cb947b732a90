from __future__ import annotations

import logging

from .pizza import Pizza, PizzaBuilder

logger = logging.getLogger(__name__)


class Calzone(Pizza):
    """Folded pizza; sauce goes outside unless the builder asks otherwise."""

    sauce_inside: bool = False

    def describe(self) -> str:
        where = "inside" if self.sauce_inside else "outside"
        return f"Calzone (sauce {where}) with {self.topping_names()}"


class CalzoneBuilder(PizzaBuilder["CalzoneBuilder"]):
    def __init__(self) -> None:
        super().__init__()
        self._sauce_inside = False

    def sauce_inside(self) -> "CalzoneBuilder":
        self._sauce_inside = True
        return self._self()

    def build(self) -> Calzone:
        calzone = Calzone(sauce_inside=self._sauce_inside, toppings=self._snapshot())
        logger.debug("Built %s", calzone.describe())
        return calzone

    def _self(self) -> "CalzoneBuilder":
        return self


__all__ = ["Calzone", "CalzoneBuilder"]
