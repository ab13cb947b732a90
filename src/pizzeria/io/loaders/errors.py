from __future__ import annotations

"""Errors raised while loading order files."""

import os
from typing import Iterable, Optional

from pydantic import ValidationError

_MAX_DETAILS = 3


class LoaderError(RuntimeError):
    """Order file failure carrying the file path and, when known, the order index."""

    def __init__(
        self,
        file_path: str,
        message: str,
        *,
        index: Optional[int] = None,
        cause: Exception | None = None,
    ):
        self.file_path = file_path
        self.message = message
        self.index = index
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        where = os.path.relpath(self.file_path) if os.path.isabs(self.file_path) else self.file_path
        if self.index is not None:
            where = f"{where}, orders[{self.index}]"
        base = f"{self.message} ({where})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._validation_details(self.cause.errors())}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _validation_details(errors: Iterable[dict]) -> str:
        errors = list(errors)
        parts = []
        for err in errors[:_MAX_DETAILS]:
            loc = ".".join(str(entry) for entry in err.get("loc", ())) or "<root>"
            parts.append(f"{loc}: {err.get('msg') or err.get('type') or 'validation error'}")
        if len(errors) > _MAX_DETAILS:
            parts.append(f"... ({len(errors) - _MAX_DETAILS} more)")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["LoaderError"]
