"""Tests for repository_playground.cli.commands.stats module."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from repository_playground.cli.app import app
from tests.util import service_context


def test_stats_prints_counts(cli_runner: CliRunner) -> None:
    service = MagicMock()
    service.table_counts.return_value = {"customers": 1, "orders": 2, "order_items": 3}

    with patch("repository_playground.cli.commands.stats.order_service", service_context(service)):
        result = cli_runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "Customers:   1" in result.stdout
    assert "Orders:      2" in result.stdout
    assert "Order items: 3" in result.stdout


@patch("repository_playground.orm.connection.DBConnection.from_config", side_effect=FileNotFoundError)
def test_stats_without_config(_: MagicMock, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["stats"])

    assert result.exit_code == 1
    assert "Config file not found" in result.stderr


def test_stats_with_config_missing_user(cli_runner: CliRunner, mock_config_path: Path) -> None:
    (mock_config_path / "db.yaml").write_text("host: localhost\nport: 5432\npassword: secret\ndatabase: shop\n")

    result = cli_runner.invoke(app, ["--config-path", str(mock_config_path), "stats"])

    assert result.exit_code == 1
    assert "Invalid database config: Database user not found in config." in result.stderr
