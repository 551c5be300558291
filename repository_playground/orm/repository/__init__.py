"""Repository module for repository-playground ORM.

This module provides repository classes for data access layer operations.
"""

from repository_playground.orm.repository.base import GenericRepository, create_repository
from repository_playground.orm.repository.customer import CustomerRepository
from repository_playground.orm.repository.order import OrderRepository
from repository_playground.orm.repository.order_item import OrderItemRepository

__all__ = [
    "CustomerRepository",
    "GenericRepository",
    "OrderItemRepository",
    "OrderRepository",
    "create_repository",
]
