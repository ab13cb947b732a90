from __future__ import annotations

"""Rich table builders for CLI output."""

from typing import Iterable

from rich.table import Table

from pizzeria.core import Calzone, NyPizza, Pizza, Size, Topping
from pizzeria.core.registry import BuilderRegistry


def _kind_of(pizza: Pizza) -> str:
    if isinstance(pizza, NyPizza):
        return "ny"
    if isinstance(pizza, Calzone):
        return "calzone"
    return type(pizza).__name__


def _options_of(pizza: Pizza) -> str:
    if isinstance(pizza, NyPizza):
        return f"size={pizza.size.value}"
    if isinstance(pizza, Calzone):
        return "sauce inside" if pizza.sauce_inside else "sauce outside"
    return ""


def build_menu_table(registry: BuilderRegistry) -> Table:
    table = Table(title="Menu")
    table.add_column("Category")
    table.add_column("Choices")
    table.add_row("kinds", ", ".join(registry.names()))
    table.add_row("toppings", ", ".join(t.value for t in Topping))
    table.add_row("sizes (ny)", ", ".join(s.value for s in Size))
    return table


def build_pizzas_table(pizzas: Iterable[Pizza], title: str = "Pizzas") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Options")
    table.add_column("Toppings")
    for idx, pizza in enumerate(pizzas, start=1):
        table.add_row(str(idx), _kind_of(pizza), _options_of(pizza), pizza.topping_names())
    return table


__all__ = ["build_menu_table", "build_pizzas_table"]
