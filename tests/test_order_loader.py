import logging
import textwrap

import pytest

from pizzeria.core import Calzone, NyPizza, Size, Topping
from pizzeria.io.loaders import LoaderError, load_order_file, load_orders
from pizzeria.core.registry import default_registry


def _write(path, content: str) -> None:
    path.write_text(textwrap.dedent(content), encoding="utf-8")


VALID_ORDERS = """
    orders:
      - kind: ny
        size: small
        toppings: [sausage, onion, sausage]
      - kind: calzone
        sauce_inside: true
        toppings: [ham]
    """


def test_load_orders_from_file(tmp_path):
    path = tmp_path / "orders.yaml"
    _write(path, VALID_ORDERS)

    ny, calzone = load_orders(str(path))

    assert isinstance(ny, NyPizza)
    assert ny.size is Size.SMALL
    assert ny.toppings == frozenset({Topping.SAUSAGE, Topping.ONION})
    assert isinstance(calzone, Calzone)
    assert calzone.sauce_inside is True
    assert calzone.toppings == frozenset({Topping.HAM})


def test_load_orders_from_directory_is_sorted(tmp_path):
    _write(tmp_path / "b.yaml", "orders:\n  - kind: calzone\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    _write(nested / "a.yaml", "orders:\n  - kind: ny\n    size: large\n")

    pizzas = load_orders(str(tmp_path))

    assert [type(p) for p in pizzas] == [Calzone, NyPizza]


def test_empty_file_has_no_orders(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_order_file(str(path), default_registry()) == []


def test_missing_path(tmp_path):
    with pytest.raises(LoaderError, match="Order path not found"):
        load_orders(str(tmp_path / "missing.yaml"))


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("orders: [kind: ny\n", encoding="utf-8")

    with pytest.raises(LoaderError, match="Malformed YAML"):
        load_orders(str(path))


def test_unknown_topping_is_schema_error(tmp_path):
    path = tmp_path / "orders.yaml"
    _write(
        path,
        """
        orders:
          - kind: calzone
            toppings: [pineapple]
        """,
    )

    with pytest.raises(LoaderError) as exc_info:
        load_orders(str(path))

    message = str(exc_info.value)
    assert "Invalid order file" in message
    assert "orders.0.toppings" in message


def test_unknown_field_rejected(tmp_path):
    path = tmp_path / "orders.yaml"
    _write(
        path,
        """
        orders:
          - kind: calzone
            crust: thin
        """,
    )

    with pytest.raises(LoaderError, match="Invalid order file"):
        load_orders(str(path))


def test_invalid_order_reports_index(tmp_path):
    path = tmp_path / "orders.yaml"
    _write(
        path,
        """
        orders:
          - kind: calzone
          - kind: deep_dish
        """,
    )

    with pytest.raises(LoaderError) as exc_info:
        load_orders(str(path))

    err = exc_info.value
    assert err.index == 1
    assert "orders[1]" in str(err)
    assert "deep_dish" in str(err)


def test_ny_order_without_size(tmp_path):
    path = tmp_path / "orders.yaml"
    _write(path, "orders:\n  - kind: ny\n    toppings: [ham]\n")

    with pytest.raises(LoaderError, match="Invalid order"):
        load_orders(str(path))


def test_load_orders_logs_summary(tmp_path, caplog):
    path = tmp_path / "orders.yaml"
    _write(path, VALID_ORDERS)

    with caplog.at_level(logging.DEBUG, logger="pizzeria"):
        load_orders(str(path))

    assert "Loaded 2 order(s) from 1 file(s)" in caplog.text
    assert "load_orders returned list[2]" in caplog.text


def test_non_utf8_file_is_loader_error(tmp_path):
    path = tmp_path / "orders.yaml"
    path.write_bytes(b"orders:\n  - kind: \xff\xfe\n")

    with pytest.raises(LoaderError, match="Unreadable order file") as exc_info:
        load_orders(str(path))

    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_unreadable_entry_is_loader_error(tmp_path):
    (tmp_path / "folder.yaml").mkdir()

    with pytest.raises(LoaderError, match="Unreadable order file") as exc_info:
        load_orders(str(tmp_path))

    assert isinstance(exc_info.value.cause, OSError)


def test_failed_load_is_not_logged_at_warning(tmp_path, caplog):
    path = tmp_path / "orders.yaml"
    _write(path, "orders:\n  - kind: deep_dish\n")

    with caplog.at_level(logging.WARNING, logger="pizzeria"):
        with pytest.raises(LoaderError):
            load_orders(str(path))

    assert [r for r in caplog.records if r.name.startswith("pizzeria")] == []
