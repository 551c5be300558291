"""Order service for repository-playground.

Transactional use cases over the Customer -< Order -< OrderItem aggregate.
Every public method runs in its own OrderUnitOfWork and returns primary keys
or plain dictionaries, so callers never hold ORM instances whose session is
already closed.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

from repository_playground.exceptions import CustomerNotFoundError, OrderNotFoundError, SessionNotSetError
from repository_playground.orm.schema import Customer, Order, OrderItem
from repository_playground.orm.service.base import BaseService
from repository_playground.orm.uow import OrderUnitOfWork

logger = logging.getLogger("Repository-Playground")


def summarize_order(order: Any) -> dict[str, Any]:
    """Flatten a loaded order into a dictionary.

    The order's customer and items must be loaded (or loadable) when this is called.
    """
    customer = order.customer
    return {
        "id": order.id,
        "order_date": order.order_date,
        "customer_name": customer.name if customer else None,
        "customer_email": customer.email if customer else None,
        "items": [
            {
                "id": item.id,
                "product_name": item.product_name,
                "price": item.price,
                "quantity": item.quantity,
            }
            for item in order.items
        ],
        "total": order.total,
    }


class OrderService(BaseService):
    """Service for placing, reading and editing orders.

    Example:
        >>> service = OrderService(db_conn.get_session_factory())
        >>> customer_id = service.register_customer("John Doe", "john@example.com")
        >>> order_id = service.place_order(
        ...     customer_id,
        ...     [{"product_name": "Laptop", "price": Decimal("1200.00"), "quantity": 1}],
        ... )
        >>> service.get_order_summary(order_id)["total"]
        Decimal('1200.00')
    """

    def _create_uow(self) -> OrderUnitOfWork:
        return OrderUnitOfWork(self.session_factory)

    def register_customer(self, name: str, email: str) -> int:
        customer_id = self._add([{"name": name, "email": email}], Customer, "customers")[0]
        logger.info(f"Registered customer {customer_id} <{email}>")
        return customer_id

    def place_order(
        self,
        customer_id: int,
        items: list[dict[str, Any]],
        order_date: datetime | None = None,
    ) -> int:
        """Create an order with its items for an existing customer.

        Args:
            customer_id: The customer placing the order.
            items: Dicts with ``product_name``, ``price`` and ``quantity``.
            order_date: When the order was placed. Defaults to now.

        Returns:
            The new order id.

        Raises:
            CustomerNotFoundError: If the customer does not exist.
        """
        with self._create_uow() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)

            order = Order(order_date=order_date or datetime.now(), customer=customer)
            for item in items:
                order.add_item(
                    OrderItem(
                        product_name=item["product_name"],
                        price=Decimal(str(item["price"])),
                        quantity=item.get("quantity", 1),
                    )
                )
            uow.orders.save(order)
            order_id = order.id
            uow.commit()

        logger.info(f"Placed order {order_id} with {len(items)} item(s) for customer {customer_id}")
        return order_id

    def get_order_summary(self, order_id: int) -> dict[str, Any]:
        """Read one order with its customer and items.

        Raises:
            OrderNotFoundError: If the order does not exist.
        """
        with self._create_uow() as uow:
            order = uow.orders.get_with_details(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            return summarize_order(order)

    def orders_since(self, start_date: datetime) -> list[dict[str, Any]]:
        with self._create_uow() as uow:
            return [summarize_order(order) for order in uow.orders.find_orders_with_details_after_date(start_date)]

    def expensive_orders(self, email: str, min_price: Decimal) -> list[dict[str, Any]]:
        with self._create_uow() as uow:
            orders = uow.orders.find_customer_orders_with_expensive_items(email, min_price)
            return [summarize_order(order) for order in orders]

    def change_order_date(self, order_id: int, new_date: datetime) -> None:
        with self._create_uow() as uow:
            order = self._require_order(uow, order_id)
            order.order_date = new_date
            uow.commit()
        logger.info(f"Changed date of order {order_id} to {new_date.isoformat()}")

    def add_item(self, order_id: int, product_name: str, price: Decimal, quantity: int = 1) -> int:
        with self._create_uow() as uow:
            order = self._require_order(uow, order_id)
            item = order.add_item(
                OrderItem(product_name=product_name, price=Decimal(str(price)), quantity=quantity)
            )
            uow.flush()
            item_id = item.id
            uow.commit()
        logger.info(f"Added '{product_name}' to order {order_id}")
        return item_id

    def remove_item(self, order_id: int, product_name: str) -> bool:
        """Remove the first item with ``product_name`` from an order.

        Returns:
            True if an item was removed, False if the order has no such item.
        """
        with self._create_uow() as uow:
            order = self._require_order(uow, order_id)
            item = next((i for i in order.items if i.product_name == product_name), None)
            if item is None:
                return False
            order.remove_item(item)
            uow.commit()
        logger.info(f"Removed '{product_name}' from order {order_id}")
        return True

    def update_item_price(self, order_id: int, product_name: str, new_price: Decimal) -> bool:
        with self._create_uow() as uow:
            order = self._require_order(uow, order_id)
            item = next((i for i in order.items if i.product_name == product_name), None)
            if item is None:
                return False
            old_price = item.price
            item.price = Decimal(str(new_price))
            uow.commit()
        logger.info(f"Changed price of '{product_name}' in order {order_id} from {old_price} to {new_price}")
        return True

    def delete_order(self, order_id: int) -> bool:
        with self._create_uow() as uow:
            deleted = uow.orders.delete_by_id(order_id)
            uow.commit()
        if deleted:
            logger.info(f"Deleted order {order_id}")
        return deleted

    def table_counts(self) -> dict[str, int]:
        """Row counts of the three tables."""
        with self._create_uow() as uow:
            if uow.session is None:
                raise SessionNotSetError
            return {
                "customers": uow.customers.count(),
                "orders": uow.orders.count(),
                "order_items": uow.order_items.count(),
            }

    @staticmethod
    def _require_order(uow: OrderUnitOfWork, order_id: int) -> Any:
        order = uow.orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
