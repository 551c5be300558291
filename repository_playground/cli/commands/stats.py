"""stats command - Show row counts of the order tables."""

import typer

from repository_playground.cli.utils import order_service


def stats() -> None:
    """Show how many customers, orders and order items are stored.

    Examples:
      repository-playground stats
    """
    with order_service() as service:
        counts = service.table_counts()

    typer.echo(f"Customers:   {counts['customers']}")
    typer.echo(f"Orders:      {counts['orders']}")
    typer.echo(f"Order items: {counts['order_items']}")
