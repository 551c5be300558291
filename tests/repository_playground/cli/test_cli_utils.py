"""Tests for repository_playground.cli.utils module."""

from decimal import Decimal
from unittest.mock import patch

import pytest
import typer

from repository_playground.cli.utils import format_order, load_db_connection, parse_price


def test_format_order(order_summary: dict) -> None:
    text = format_order(order_summary)

    lines = text.splitlines()
    assert lines[0] == "Order #7  2024-05-01 10:30:00  John Doe <john@example.com>  total=1220.00"
    assert lines[1] == "  - Laptop  x1  @ 1200.00"
    assert lines[2] == "  - Mouse  x1  @ 20.00"


def test_format_order_without_customer(order_summary: dict) -> None:
    order_summary.update(customer_name=None, customer_email=None, order_date=None, items=[])

    assert format_order(order_summary) == "Order #7  -  - <->  total=1220.00"


def test_parse_price() -> None:
    assert parse_price("1000.50") == Decimal("1000.50")


def test_parse_price_rejects_garbage() -> None:
    with pytest.raises(typer.BadParameter):
        parse_price("cheap")


@patch("repository_playground.orm.connection.DBConnection.from_config", side_effect=FileNotFoundError)
def test_load_db_connection_exits_without_config(_) -> None:
    with pytest.raises(typer.Exit) as exc_info:
        load_db_connection()

    assert exc_info.value.exit_code == 1
