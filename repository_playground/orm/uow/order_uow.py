"""Order Unit of Work for repository-playground.

Groups the Customer, Order and OrderItem repositories under one session so a
whole aggregate change commits or rolls back together.
"""

from typing import ClassVar

from sqlalchemy.orm import Session, sessionmaker

from repository_playground.orm.repository.customer import CustomerRepository
from repository_playground.orm.repository.order import OrderRepository
from repository_playground.orm.repository.order_item import OrderItemRepository
from repository_playground.orm.schema import Customer, Order, OrderItem
from repository_playground.orm.uow.base import BaseUnitOfWork


class OrderUnitOfWork(BaseUnitOfWork):
    """Unit of Work for customer and order transactions.

    Provides lazy-initialized repositories that share the UoW session.

    Example:
        >>> with OrderUnitOfWork(session_factory) as uow:
        ...     order = uow.orders.get_by_id(1)
        ...     order.order_date = datetime.now()
        ...     uow.commit()
    """

    REPOSITORIES: ClassVar[tuple[str, ...]] = ("customers", "orders", "order_items")

    def __init__(self, session_factory: sessionmaker[Session]):
        super().__init__(session_factory)
        self._customer_repo: CustomerRepository | None = None
        self._order_repo: OrderRepository | None = None
        self._order_item_repo: OrderItemRepository | None = None

    def _reset_repositories(self) -> None:
        """Reset all repository references to None."""
        self._customer_repo = None
        self._order_repo = None
        self._order_item_repo = None

    @property
    def customers(self) -> CustomerRepository:
        """Get the Customer repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_customer_repo", CustomerRepository, Customer)

    @property
    def orders(self) -> OrderRepository:
        """Get the Order repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_order_repo", OrderRepository, Order)

    @property
    def order_items(self) -> OrderItemRepository:
        """Get the OrderItem repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_order_item_repo", OrderItemRepository, OrderItem)
