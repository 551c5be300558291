"""ORM Schema definitions for repository-playground.

The aggregate is Customer (1) -< Order (1) -< OrderItem. Orders own their
items: items are saved with the order, deleted with it, and deleted when
removed from ``Order.items``.

Example:
    from repository_playground.orm.schema import Customer, Order, OrderItem

    customer = Customer(name="John Doe", email="john@example.com")
    order = Order(order_date=datetime.now(), customer=customer)
    order.add_item(OrderItem(product_name="Laptop", price=Decimal("1200.00"), quantity=1))
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from repository_playground.exceptions import ItemNotInOrderError


class Base(DeclarativeBase):
    pass


def make_pk_column():
    """Create a bigint primary key column with auto-increment"""
    return mapped_column(BigInteger, primary_key=True, autoincrement=True)


def make_fk_column(ref_table: str, ref_column: str = "id", nullable: bool = True, **kwargs):
    """Create a bigint foreign key column"""
    return mapped_column(
        BigInteger,
        ForeignKey(f"{ref_table}.{ref_column}", ondelete="CASCADE"),
        nullable=nullable,
        **kwargs,
    )


class Customer(Base):
    """Customer table"""

    __tablename__ = "customers"

    id: Mapped[int] = make_pk_column()
    name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255), index=True)

    # Relationships
    # deleting a customer never nulls orders.customer_id; ON DELETE CASCADE removes the orders
    orders: Mapped[list["Order"]] = relationship(back_populates="customer", order_by="Order.id", passive_deletes="all")

    def add_order(self, order: "Order") -> "Order":
        if order not in self.orders:
            self.orders.append(order)
        return order

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, name={self.name!r}, email={self.email!r})"


class Order(Base):
    """Order header table"""

    __tablename__ = "orders"

    id: Mapped[int] = make_pk_column()
    order_date: Mapped[datetime | None] = mapped_column(DateTime)
    customer_id: Mapped[int | None] = make_fk_column("customers", index=True)

    # Relationships
    customer: Mapped[Optional["Customer"]] = relationship(back_populates="orders")
    items: Mapped[list["OrderItem"]] = relationship(
        back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )

    def add_item(self, item: "OrderItem") -> "OrderItem":
        """Attach an item to this order, keeping both sides of the association in sync.

        Adding an item that is already part of the order is a no-op.

        Args:
            item: The order item to attach.

        Returns:
            The attached item.
        """
        if item not in self.items:
            self.items.append(item)
        return item

    def remove_item(self, item: "OrderItem") -> None:
        """Detach an item from this order.

        The item is deleted on the next flush because order items are orphan-removed.

        Args:
            item: The order item to detach.

        Raises:
            ItemNotInOrderError: If the item does not belong to this order.
        """
        if item not in self.items:
            raise ItemNotInOrderError(item.product_name, self.id)
        self.items.remove(item)

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, order_date={self.order_date!r}, customer_id={self.customer_id!r})"


class OrderItem(Base):
    """Order line table"""

    __tablename__ = "order_items"

    id: Mapped[int] = make_pk_column()
    product_name: Mapped[str | None] = mapped_column(String(255))
    price: Mapped[Decimal | None] = mapped_column(Numeric(19, 2))
    quantity: Mapped[int | None] = mapped_column(Integer)
    order_id: Mapped[int | None] = make_fk_column("orders", index=True)

    # Relationships
    order: Mapped[Optional["Order"]] = relationship(back_populates="items")

    def set_order(self, order: Optional["Order"]) -> None:
        # the backref moves the item out of the previous order's collection
        self.order = order

    @property
    def subtotal(self) -> Decimal:
        if self.price is None or self.quantity is None:
            return Decimal("0")
        return Decimal(self.price) * self.quantity

    def __repr__(self) -> str:
        return (
            f"OrderItem(id={self.id!r}, product_name={self.product_name!r}, "
            f"price={self.price!r}, quantity={self.quantity!r})"
        )


__all__ = [
    "Base",
    "Customer",
    "Order",
    "OrderItem",
]
