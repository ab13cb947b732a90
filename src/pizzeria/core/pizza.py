from __future__ import annotations

"""Immutable pizza product and the self-typed builder shared by every pizza kind."""

import logging
from abc import ABC, abstractmethod
from typing import FrozenSet, Generic, Set, Tuple, TypeVar

from pydantic import BaseModel, Field

from .errors import InvalidArgument
from .toppings import Topping, ordered

logger = logging.getLogger(__name__)


class Pizza(BaseModel, ABC):
    """Base class for all pizzas. Instances are frozen once built."""

    toppings: FrozenSet[Topping] = Field(default_factory=frozenset)

    model_config = {"frozen": True}

    @property
    def ordered_toppings(self) -> Tuple[Topping, ...]:
        return ordered(self.toppings)

    def topping_names(self) -> str:
        if not self.toppings:
            return "no toppings"
        return ", ".join(t.value for t in self.ordered_toppings)

    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError


B = TypeVar("B", bound="PizzaBuilder")


def _require_topping(topping: object) -> Topping:
    if topping is None:
        raise InvalidArgument("topping", topping, "topping must not be None")
    if not isinstance(topping, Topping):
        raise InvalidArgument("topping", topping, "expected a Topping")
    return topping


class PizzaBuilder(ABC, Generic[B]):
    """Accumulates toppings before building an immutable pizza.

    ``B`` is the concrete builder subclass. Every chaining method returns
    ``self._self()`` typed as ``B``, so a subclass can mix its own chain
    methods with the ones declared here in any order.

    Subclasses must implement ``build`` and ``_self``; ``_self`` returns
    ``self``.
    """

    def __init__(self) -> None:
        self._toppings: Set[Topping] = set()

    @property
    def toppings(self) -> FrozenSet[Topping]:
        """Snapshot of the toppings added so far."""
        return frozenset(self._toppings)

    def add_topping(self, topping: Topping) -> B:
        self._toppings.add(_require_topping(topping))
        logger.debug("%s added topping %s", type(self).__name__, topping.value)
        return self._self()

    def add_toppings(self, *toppings: Topping) -> B:
        """Add several toppings; nothing is added unless all of them are valid."""
        checked = [_require_topping(t) for t in toppings]
        for topping in checked:
            self.add_topping(topping)
        return self._self()

    def _snapshot(self) -> FrozenSet[Topping]:
        # Built pizzas never share storage with the builder.
        return frozenset(self._toppings)

    @abstractmethod
    def build(self) -> Pizza:
        raise NotImplementedError

    @abstractmethod
    def _self(self) -> B:
        raise NotImplementedError


__all__ = ["Pizza", "PizzaBuilder"]
