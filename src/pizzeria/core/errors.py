from __future__ import annotations

"""Domain error raised when a builder receives an unusable argument."""

from typing import Any


class InvalidArgument(ValueError):
    """Raised before any state change when an argument is missing or of the wrong kind."""

    def __init__(self, name: str, value: Any, message: str | None = None):
        self.name = name
        self.value = value
        self.message = message or "invalid value"
        super().__init__(f"{self.message} for {name}: {value!r}")


__all__ = ["InvalidArgument"]
