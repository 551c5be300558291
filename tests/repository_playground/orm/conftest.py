"""Shared fixtures for ORM tests: one customer with one two-item order."""

import pytest
from sqlalchemy.orm import Session

from repository_playground.orm.repository.customer import CustomerRepository
from repository_playground.orm.repository.order import OrderRepository
from tests.util import make_order


@pytest.fixture
def order_repository(db_session: Session) -> OrderRepository:
    return OrderRepository(db_session)


@pytest.fixture
def customer_repository(db_session: Session) -> CustomerRepository:
    return CustomerRepository(db_session)


@pytest.fixture
def seeded_order_id(db_session: Session, order_repository: OrderRepository, customer_repository) -> int:
    """Seed John Doe's order with a Laptop (1200.00) and a Mouse (20.00).

    The session is flushed and cleared afterwards, so tests read from the database.
    """
    order_repository.delete_all()
    customer_repository.delete_all()

    order = make_order(
        "John Doe",
        "john@example.com",
        [("Laptop", "1200.00", 1), ("Mouse", "20.00", 1)],
    )
    order_repository.save(order)
    order_id = order.id

    db_session.flush()
    db_session.expunge_all()
    return order_id
