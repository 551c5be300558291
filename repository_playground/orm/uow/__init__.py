"""Unit of Work (UoW) pattern implementations for repository-playground.

Provides transaction management and repository coordination:
- BaseUnitOfWork: Abstract base class with common patterns
- OrderUnitOfWork: Customer, Order and OrderItem repositories in one transaction
"""

from repository_playground.orm.uow.base import BaseUnitOfWork
from repository_playground.orm.uow.order_uow import OrderUnitOfWork

__all__ = [
    "BaseUnitOfWork",
    "OrderUnitOfWork",
]
