from __future__ import annotations

"""Default locations resolved against the working directory."""

from pathlib import Path


def orders_path(path: str | None) -> str:
    return path or str(Path.cwd() / "orders")


__all__ = ["orders_path"]
