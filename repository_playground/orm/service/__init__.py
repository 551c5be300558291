from .base import BaseService
from .order_service import OrderService

__all__ = [
    "BaseService",
    "OrderService",
]
