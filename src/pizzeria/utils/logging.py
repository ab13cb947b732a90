from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable


def _summarize(result: Any) -> str:
    if isinstance(result, (list, tuple, set, frozenset)):
        return f"{type(result).__name__}[{len(result)}]"
    return repr(result)


def log_calls(
    logger_name: str | None = None, *, level: int = logging.DEBUG
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls, results and failures at ``level``; failures are re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.log(level, "Calling %s args=%s kwargs=%s", func.__name__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.log(level, "%s failed: %s", func.__name__, e)
                raise
            logger.log(level, "%s returned %s", func.__name__, _summarize(result))
            return result

        return _wrapper

    return _decorator


def configure(level: str = "WARNING") -> None:
    """Configure root logging for command-line use."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")
