from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy import Connection, event

from repository_playground.orm.schema import Customer, Order, OrderItem


@contextmanager
def count_statements(connection: Connection) -> Iterator[list[str]]:
    """Collect every SQL statement sent through ``connection`` inside the block."""
    statements: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(connection, "before_cursor_execute", _record)
    try:
        yield statements
    finally:
        event.remove(connection, "before_cursor_execute", _record)


def make_order(
    name: str,
    email: str,
    items: list[tuple[str, str, int]],
    order_date: datetime | None = None,
) -> Order:
    """Build a transient customer + order + items graph."""
    customer = Customer(name=name, email=email)
    order = Order(order_date=order_date or datetime.now(), customer=customer)
    for product_name, price, quantity in items:
        order.add_item(OrderItem(product_name=product_name, price=Decimal(price), quantity=quantity))
    return order


def service_context(service: MagicMock) -> MagicMock:
    """Wrap a mocked OrderService in a mocked ``order_service()`` context manager factory."""
    factory = MagicMock()
    factory.return_value.__enter__.return_value = service
    factory.return_value.__exit__.return_value = False
    return factory
