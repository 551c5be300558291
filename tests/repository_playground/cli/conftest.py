"""Shared fixtures for CLI tests."""

from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
from typer.testing import CliRunner

import repository_playground.cli as cli


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CliRunner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Set cli.CONFIG_PATH to a temp directory and return it."""
    monkeypatch.setattr(cli, "CONFIG_PATH", tmp_path)
    return tmp_path


@pytest.fixture
def order_summary() -> dict:
    """Return an order summary as produced by OrderService."""
    return {
        "id": 7,
        "order_date": datetime(2024, 5, 1, 10, 30, 0),
        "customer_name": "John Doe",
        "customer_email": "john@example.com",
        "items": [
            {"id": 1, "product_name": "Laptop", "price": Decimal("1200.00"), "quantity": 1},
            {"id": 2, "product_name": "Mouse", "price": Decimal("20.00"), "quantity": 1},
        ],
        "total": Decimal("1220.00"),
    }
