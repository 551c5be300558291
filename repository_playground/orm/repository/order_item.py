"""OrderItem repository for repository-playground."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from repository_playground.orm.repository.base import GenericRepository


class OrderItemRepository(GenericRepository):
    """Repository for OrderItem entity."""

    def __init__(self, session: Session, model_cls: type | None = None):
        if model_cls is None:
            from repository_playground.orm.schema import OrderItem

            model_cls = OrderItem
        super().__init__(session, model_cls)

    def get_by_order_id(self, order_id: int) -> list[Any]:
        stmt = select(self.model_cls).where(self.model_cls.order_id == order_id).order_by(self.model_cls.id)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_product_name(self, product_name: str) -> list[Any]:
        stmt = (
            select(self.model_cls).where(self.model_cls.product_name == product_name).order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).scalars().all())
