from .errors import LoaderError
from .order_loader import load_order_file, load_orders

__all__ = ["load_orders", "load_order_file", "LoaderError"]
