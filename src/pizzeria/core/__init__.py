from .calzone import Calzone, CalzoneBuilder
from .errors import InvalidArgument
from .ny_pizza import NyPizza, NyPizzaBuilder, Size
from .pizza import Pizza, PizzaBuilder
from .registry import BuilderRegistry, NameRegistry, default_registry
from .toppings import Topping, ordered

__all__ = [
    "Topping",
    "ordered",
    "InvalidArgument",
    "Pizza",
    "PizzaBuilder",
    "Size",
    "NyPizza",
    "NyPizzaBuilder",
    "Calzone",
    "CalzoneBuilder",
    "NameRegistry",
    "BuilderRegistry",
    "default_registry",
]
