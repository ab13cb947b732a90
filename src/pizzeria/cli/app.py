"""
Pizzeria CLI: show the menu, build a single pizza, or load orders from YAML.
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console

from pizzeria.cli.formatters import build_menu_table, build_pizzas_table
from pizzeria.cli.load_helpers import build_or_exit, load_or_exit
from pizzeria.cli.paths import orders_path
from pizzeria.core import Pizza, Size, Topping, default_registry
from pizzeria.io.loaders import load_orders
from pizzeria.utils.logging import configure

app = typer.Typer(help="Pizzeria CLI: show the menu, build a pizza, or load orders from YAML.")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    try:
        configure(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


@app.command()
def menu() -> None:
    """List pizza kinds, toppings and sizes."""
    console.print(build_menu_table(default_registry()))


@app.command()
def build(
    kind: str = typer.Argument(..., help="Pizza kind: 'ny' or 'calzone'"),
    toppings: Optional[List[str]] = typer.Option(None, "--topping", "-t", help="Topping to add (repeatable)"),
    size: Optional[str] = typer.Option(None, help="Size for a New York pizza"),
    sauce_inside: bool = typer.Option(False, "--sauce-inside", help="Put the sauce inside a calzone"),
) -> None:
    """Build one pizza from command-line options."""
    registry = default_registry()

    def _build() -> Pizza:
        size_value = Size.parse(size) if size is not None else None
        builder = registry.new_builder(kind, size=size_value, sauce_inside=sauce_inside)
        return builder.add_toppings(*(Topping.parse(t) for t in toppings or [])).build()

    pizza = build_or_exit(_build, console=console)
    console.print(f"[green]Built[/green] {pizza.describe()}")


@app.command()
def load(
    path: Optional[str] = typer.Argument(None, help="Order YAML file or folder (default: ./orders)"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Build every order in a YAML file or folder."""
    pizzas = load_or_exit(load_orders, orders_path(path), console=console, verbose_errors=verbose)
    if not pizzas:
        console.print("[dim]No orders found[/dim]")
        return
    console.print(build_pizzas_table(pizzas, title=f"Orders ({len(pizzas)})"))


if __name__ == "__main__":
    app()
