from __future__ import annotations

import glob
import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from pizzeria.core import InvalidArgument, Pizza
from pizzeria.core.registry import BuilderRegistry, default_registry
from pizzeria.io.loaders.errors import LoaderError
from pizzeria.io.loaders.order_spec import OrderFileSpec
from pizzeria.utils.logging import log_calls

logger = logging.getLogger(__name__)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    except (UnicodeDecodeError, OSError) as exc:
        raise LoaderError(path, "Unreadable order file", cause=exc) from exc


def _order_files(path: str) -> List[str]:
    if os.path.isdir(path):
        return sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    if os.path.isfile(path):
        return [path]
    raise LoaderError(path, "Order path not found")


def load_order_file(path: str, registry: BuilderRegistry) -> List[Pizza]:
    """Build every order in one YAML file.

    Expected format:
    orders:
      - kind: ny
        size: small
        toppings: [sausage, onion]
      - kind: calzone
        sauce_inside: true
        toppings: [ham]
    """
    data = _read_yaml_file(path)
    try:
        spec = OrderFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid order file", cause=exc) from exc
    pizzas = []
    for idx, order in enumerate(spec.orders):
        try:
            pizzas.append(order.build(registry))
        except InvalidArgument as exc:
            raise LoaderError(path, "Invalid order", index=idx, cause=exc) from exc
    return pizzas


@log_calls()
def load_orders(path: str, registry: Optional[BuilderRegistry] = None) -> List[Pizza]:
    """Load orders from a YAML file or from every ``*.yaml`` under a directory."""
    registry = registry or default_registry()
    files = _order_files(path)
    pizzas: List[Pizza] = []
    for fp in files:
        pizzas.extend(load_order_file(fp, registry))
    logger.info("Loaded %d order(s) from %d file(s)", len(pizzas), len(files))
    return pizzas
