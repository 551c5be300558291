"""Tests for repository_playground.cli.commands.orders module."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from repository_playground.cli.app import app
from tests.util import service_context

ORDER_SERVICE = "repository_playground.cli.commands.orders.order_service"


def test_orders_since(cli_runner: CliRunner, order_summary: dict) -> None:
    service = MagicMock()
    service.orders_since.return_value = [order_summary]

    with patch(ORDER_SERVICE, service_context(service)):
        result = cli_runner.invoke(app, ["orders", "since", "2024-05-01"])

    assert result.exit_code == 0
    service.orders_since.assert_called_once_with(datetime(2024, 5, 1))
    assert "Order #7" in result.stdout
    assert "Laptop" in result.stdout


def test_orders_since_empty(cli_runner: CliRunner) -> None:
    service = MagicMock()
    service.orders_since.return_value = []

    with patch(ORDER_SERVICE, service_context(service)):
        result = cli_runner.invoke(app, ["orders", "since", "2099-01-01"])

    assert result.exit_code == 0
    assert "No orders found." in result.stdout


def test_orders_expensive(cli_runner: CliRunner, order_summary: dict) -> None:
    service = MagicMock()
    service.expensive_orders.return_value = [order_summary]

    with patch(ORDER_SERVICE, service_context(service)):
        result = cli_runner.invoke(
            app, ["orders", "expensive", "--email", "john@example.com", "--min-price", "1000.00"]
        )

    assert result.exit_code == 0
    service.expensive_orders.assert_called_once_with("john@example.com", Decimal("1000.00"))
    assert "total=1220.00" in result.stdout


def test_orders_expensive_rejects_bad_price(cli_runner: CliRunner) -> None:
    service = MagicMock()

    with patch(ORDER_SERVICE, service_context(service)):
        result = cli_runner.invoke(app, ["orders", "expensive", "--email", "john@example.com", "--min-price", "cheap"])

    assert result.exit_code != 0
    service.expensive_orders.assert_not_called()
