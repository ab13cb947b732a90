from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, Field

from .calzone import CalzoneBuilder
from .errors import InvalidArgument
from .ny_pizza import NyPizzaBuilder, Size
from .pizza import PizzaBuilder

T = TypeVar("T")

BuilderFactory = Callable[..., Any]


class NameRegistry(BaseModel, Generic[T]):
    items: Dict[str, T] = Field(default_factory=dict)

    def register(self, name: str, item: T) -> None:
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        self.items[name] = item

    def get(self, name: str) -> T:
        if name not in self.items:
            available = ", ".join(sorted(self.items.keys()))
            raise KeyError(f"Unknown: {name}. Available: {available}")
        return self.items[name]

    def __contains__(self, name: object) -> bool:
        return name in self.items

    def names(self) -> Iterable[str]:
        return sorted(self.items.keys())


class BuilderRegistry(NameRegistry[BuilderFactory]):
    """Pizza kind name -> factory returning a fresh builder.

    Factories take keyword options ``size`` and ``sauce_inside`` and raise
    :class:`InvalidArgument` for options their kind does not support.
    """

    def new_builder(self, kind: str, *, size: Optional[Size] = None, sauce_inside: bool = False) -> PizzaBuilder:
        try:
            factory = self.get(kind)
        except KeyError as exc:
            raise InvalidArgument("kind", kind, f"unknown pizza kind (valid: {', '.join(self.names())})") from exc
        return factory(size=size, sauce_inside=sauce_inside)


def _ny_builder(*, size: Optional[Size] = None, sauce_inside: bool = False) -> NyPizzaBuilder:
    if sauce_inside:
        raise InvalidArgument("sauce_inside", sauce_inside, "only a calzone takes sauce inside")
    return NyPizzaBuilder(size)  # type: ignore[arg-type]


def _calzone_builder(*, size: Optional[Size] = None, sauce_inside: bool = False) -> CalzoneBuilder:
    if size is not None:
        raise InvalidArgument("size", size, "a calzone has no size")
    builder = CalzoneBuilder()
    return builder.sauce_inside() if sauce_inside else builder


def default_registry() -> BuilderRegistry:
    registry = BuilderRegistry()
    registry.register("ny", _ny_builder)
    registry.register("calzone", _calzone_builder)
    return registry


__all__ = ["NameRegistry", "BuilderRegistry", "BuilderFactory", "default_registry"]
