from __future__ import annotations

"""Run loaders and builders, turning their errors into CLI exits."""

from pathlib import Path
from typing import Any, Callable, TypeVar

import typer
from rich.console import Console

from pizzeria.core import InvalidArgument
from pizzeria.io.loaders import LoaderError

R = TypeVar("R")


def load_or_exit(
    loader_fn: Callable[..., R],
    path: str,
    *args: Any,
    console: Console,
    verbose_errors: bool = False,
    **kwargs: Any,
) -> R:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {path}")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path, *args, **kwargs)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load orders:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load orders:[/red] {err}")
        raise typer.Exit(code=1)


def build_or_exit(build_fn: Callable[[], R], *, console: Console) -> R:
    try:
        return build_fn()
    except InvalidArgument as err:
        console.print(f"[red]Cannot build pizza:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit", "build_or_exit"]
