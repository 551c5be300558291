"""orders commands - List orders through the eager-loading queries."""

from datetime import datetime
from typing import Annotated

import typer

from repository_playground.cli.utils import format_order, order_service, parse_price

orders_app = typer.Typer(
    name="orders",
    help="List orders with their customer and items.",
    no_args_is_help=True,
)


def _print_orders(summaries: list[dict]) -> None:
    if not summaries:
        typer.echo("No orders found.")
        return
    for summary in summaries:
        typer.echo(format_order(summary))


@orders_app.command(name="since")
def since_cmd(
    start_date: Annotated[datetime, typer.Argument(help="Inclusive lower bound on the order date")],
) -> None:
    """List orders placed on or after START_DATE.

    Examples:
      repository-playground orders since 2024-01-01
      repository-playground orders since "2024-01-01 12:00:00"
    """
    with order_service() as service:
        summaries = service.orders_since(start_date)
    _print_orders(summaries)


@orders_app.command(name="expensive")
def expensive_cmd(
    email: Annotated[str, typer.Option("--email", help="Customer email address")],
    min_price: Annotated[
        str,
        typer.Option("--min-price", help="Only orders with an item priced above this"),
    ],
) -> None:
    """List a customer's orders that contain an item above a price.

    Examples:
      repository-playground orders expensive --email john@example.com --min-price 1000
    """
    price = parse_price(min_price)
    with order_service() as service:
        summaries = service.expensive_orders(email, price)
    _print_orders(summaries)
