"""Repository layer for repository-playground.

Implements the Generic Repository pattern for CRUD operations with SQLAlchemy.
Transactions are owned by the Unit of Work (see ``repository_playground.orm.uow``),
never by a repository.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

T = TypeVar("T")


class GenericRepository(Generic[T]):
    """Generic repository implementing common CRUD operations.

    This base class provides reusable database operations that can be
    extended by specific repositories for custom queries.
    """

    def __init__(self, session: Session, model_cls: type[T]):
        """Initialize repository with a session and model class.

        Args:
            session: SQLAlchemy session for database operations.
            model_cls: The SQLAlchemy model class this repository manages.
        """
        self.session = session
        self.model_cls = model_cls

    def add(self, entity: T) -> T:
        """Add a new entity to the session.

        Args:
            entity: The entity instance to add.

        Returns:
            The added entity.
        """
        self.session.add(entity)
        return entity

    def add_all(self, entities: list[T]) -> list[T]:
        """Add multiple entities to the session.

        Args:
            entities: List of entity instances to add.

        Returns:
            The added entities.
        """
        self.session.add_all(entities)
        return entities

    def save(self, entity: T) -> T:
        """Add an entity and flush so its primary key is populated.

        Cascades reach related objects (an order's items are saved with it).

        Args:
            entity: A new or already persistent entity.

        Returns:
            The same entity, now with its identity assigned.
        """
        self.session.add(entity)
        self.session.flush()
        return entity

    def get_by_id(self, _id: Any) -> T | None:
        """Retrieve an entity by its primary key.

        Args:
            _id: The primary key value.

        Returns:
            The entity if found, None otherwise.
        """
        return self.session.get(self.model_cls, _id)

    def get_all(self, limit: int | None = None, offset: int | None = None) -> list[T]:
        """Retrieve all entities of this type ordered by primary key.

        Args:
            limit: Maximum number of results to return.
            offset: Number of results to skip.

        Returns:
            List of all entities.
        """
        stmt = select(self.model_cls).order_by(self.model_cls.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def update(self, entity: T) -> T:
        """Merge a (possibly detached) entity into the session.

        Args:
            entity: The entity instance to update.

        Returns:
            The persistent instance attached to the session.
        """
        return self.session.merge(entity)

    def delete(self, entity: T) -> None:
        """Delete an entity from the database.

        Args:
            entity: The entity instance to delete.
        """
        self.session.delete(entity)

    def delete_by_id(self, _id: Any) -> bool:
        """Delete an entity by its primary key.

        Args:
            _id: The primary key value.

        Returns:
            True if entity was deleted, False if not found.
        """
        entity = self.get_by_id(_id)
        if entity:
            self.delete(entity)
            return True
        return False

    def delete_all(self) -> int:
        """Delete every entity of this type through the ORM so cascades run.

        Returns:
            Number of deleted entities.
        """
        entities = self.get_all()
        for entity in entities:
            self.session.delete(entity)
        self.session.flush()
        return len(entities)

    def count(self) -> int:
        """Count total number of entities.

        Returns:
            Total count of entities.
        """
        stmt = select(func.count()).select_from(self.model_cls)
        return int(self.session.execute(stmt).scalar_one())

    def exists(self, _id: Any) -> bool:
        """Check if an entity exists by its primary key.

        Args:
            _id: The primary key value.

        Returns:
            True if entity exists, False otherwise.
        """
        return self.get_by_id(_id) is not None


def create_repository(session: Session, model_cls: type[T]) -> GenericRepository[T]:
    """Factory function to create a repository instance.

    Args:
        session: SQLAlchemy session.
        model_cls: The model class for the repository.

    Returns:
        A new GenericRepository instance.

    Example:
        >>> session = SessionFactory()
        >>> customer_repo = create_repository(session, Customer)
        >>> customer = customer_repo.get_by_id(1)
    """
    return GenericRepository(session, model_cls)
