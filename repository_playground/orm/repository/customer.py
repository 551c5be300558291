"""Customer repository for repository-playground."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from repository_playground.orm.repository.base import GenericRepository


class CustomerRepository(GenericRepository):
    """Repository for Customer entity with lookup by email."""

    def __init__(self, session: Session, model_cls: type | None = None):
        if model_cls is None:
            from repository_playground.orm.schema import Customer

            model_cls = Customer
        super().__init__(session, model_cls)

    def get_by_email(self, email: str) -> Any | None:
        """Retrieve the first customer registered with an email address.

        Args:
            email: The email to search for.

        Returns:
            The customer if found, None otherwise.
        """
        stmt = select(self.model_cls).where(self.model_cls.email == email).order_by(self.model_cls.id).limit(1)
        return self.session.execute(stmt).scalars().first()

    def get_with_orders(self, customer_id: int) -> Any | None:
        """Retrieve a customer with its orders eagerly loaded.

        Args:
            customer_id: The customer ID.

        Returns:
            The customer with orders loaded, None if not found.
        """
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.id == customer_id)
            .options(selectinload(self.model_cls.orders))
        )
        return self.session.execute(stmt).scalar_one_or_none()
