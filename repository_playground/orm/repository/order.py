"""Order repository for repository-playground.

Besides CRUD, provides the two fetch-join queries that load orders together
with their customer and items in a single SELECT, so walking the aggregate
afterwards does not issue one query per order (the N+1 pattern).
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, contains_eager, joinedload

from repository_playground.orm.repository.base import GenericRepository


class OrderRepository(GenericRepository):
    """Repository for Order entity with eager-loading queries."""

    def __init__(self, session: Session, model_cls: type | None = None):
        """Initialize order repository.

        Args:
            session: SQLAlchemy session for database operations.
            model_cls: The Order model class. If None, uses the default schema.
        """
        if model_cls is None:
            from repository_playground.orm.schema import Order

            model_cls = Order
        super().__init__(session, model_cls)

    def _related_cls(self, attribute: str) -> type:
        return getattr(self.model_cls, attribute).property.mapper.class_

    def find_orders_with_details_after_date(self, start_date: datetime) -> list[Any]:
        """Retrieve orders placed on or after a date, with customer and items loaded.

        Both relations are LEFT OUTER JOINed, so orders without items or without
        a customer are still returned. Each order appears once.

        Args:
            start_date: Inclusive lower bound on ``order_date``.

        Returns:
            List of orders ordered by id; empty if none match.
        """
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.order_date >= start_date)
            .options(
                joinedload(self.model_cls.customer),
                joinedload(self.model_cls.items),
            )
            .order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).unique().scalars().all())

    def find_customer_orders_with_expensive_items(self, email: str, min_price: Decimal) -> list[Any]:
        """Retrieve a customer's orders that contain at least one item above a price.

        Customer and items are INNER JOINed and the price filter applies to the
        joined items, so ``order.items`` holds only the items above ``min_price``
        and orders without items never match. Each order is returned once.

        The filtered collection replaces whatever was already loaded for the
        order in this session; do not flush collection changes made on it.

        Args:
            email: The customer's email address.
            min_price: Exclusive lower bound on the item price.

        Returns:
            List of matching orders ordered by id; empty if none match.
        """
        customer_cls = self._related_cls("customer")
        item_cls = self._related_cls("items")

        stmt = (
            select(self.model_cls)
            .join(self.model_cls.customer)
            .join(self.model_cls.items)
            .where(customer_cls.email == email)
            .where(item_cls.price > min_price)
            .options(
                contains_eager(self.model_cls.customer),
                contains_eager(self.model_cls.items),
            )
            .order_by(self.model_cls.id, item_cls.id)
            .execution_options(populate_existing=True)
        )
        return list(self.session.execute(stmt).unique().scalars().all())

    def get_with_details(self, order_id: int) -> Any | None:
        """Retrieve a single order with customer and items eagerly loaded.

        Args:
            order_id: The order ID.

        Returns:
            The order if found, None otherwise.
        """
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.id == order_id)
            .options(
                joinedload(self.model_cls.customer),
                joinedload(self.model_cls.items),
            )
        )
        return self.session.execute(stmt).unique().scalar_one_or_none()

    def find_by_customer_email(self, email: str) -> list[Any]:
        """Retrieve all orders of the customer(s) registered with an email.

        Args:
            email: The customer's email address.

        Returns:
            List of orders ordered by id.
        """
        customer_cls = self._related_cls("customer")
        stmt = (
            select(self.model_cls)
            .join(self.model_cls.customer)
            .where(customer_cls.email == email)
            .order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).scalars().all())
