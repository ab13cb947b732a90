from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidArgument


class Topping(str, Enum):
    """Fixed set of toppings a builder can add."""

    HAM = "ham"
    MUSHROOM = "mushroom"
    ONION = "onion"
    PEPPER = "pepper"
    SAUSAGE = "sausage"

    @classmethod
    def parse(cls, name: str) -> "Topping":
        """Look up a topping by member name or value, ignoring case."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("topping", name, "topping name must be a non-empty string")
        key = name.strip().upper()
        if key not in cls.__members__:
            valid = ", ".join(t.value for t in cls)
            raise InvalidArgument("topping", name, f"unknown topping (valid: {valid})")
        return cls[key]


_DECLARATION_INDEX = {topping: idx for idx, topping in enumerate(Topping)}


def ordered(toppings: Iterable[Topping]) -> Tuple[Topping, ...]:
    """Return distinct toppings in declaration order."""
    return tuple(sorted(set(toppings), key=_DECLARATION_INDEX.__getitem__))


__all__ = ["Topping", "ordered"]
