"""CLI utility functions."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from typing import Any

import typer
from sqlalchemy.orm import sessionmaker

from repository_playground.orm.connection import DBConnection
from repository_playground.orm.service import OrderService

logger = logging.getLogger("Repository-Playground")

CONFIG_NOT_FOUND_MESSAGE = "Config file not found. Run 'repository-playground init' first."


def load_db_connection() -> DBConnection:
    """Load the database connection from ``db.yaml``, exiting with a hint when it is missing."""
    try:
        return DBConnection.from_config()
    except FileNotFoundError:
        typer.echo(CONFIG_NOT_FOUND_MESSAGE, err=True)
        raise typer.Exit(1) from None
    except (TypeError, ValueError) as e:
        typer.echo(f"Invalid database config: {e}", err=True)
        raise typer.Exit(1) from None


@contextmanager
def order_service() -> Iterator[OrderService]:
    """Yield an OrderService bound to the configured database and dispose the engine afterwards."""
    db_conn = load_db_connection()
    engine = db_conn.get_engine()
    try:
        yield OrderService(sessionmaker(bind=engine))
    finally:
        engine.dispose()


def format_order(summary: dict[str, Any]) -> str:
    """Render an order summary as an indented block of text."""
    order_date = summary["order_date"].isoformat(sep=" ", timespec="seconds") if summary["order_date"] else "-"
    lines = [
        f"Order #{summary['id']}  {order_date}  "
        f"{summary['customer_name'] or '-'} <{summary['customer_email'] or '-'}>  total={summary['total']}"
    ]
    for item in summary["items"]:
        lines.append(f"  - {item['product_name']}  x{item['quantity']}  @ {item['price']}")
    return "\n".join(lines)


def parse_price(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"'{value}' is not a valid price") from None
