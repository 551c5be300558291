from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from repository_playground.exceptions import SessionNotSetError


class BaseService(ABC):
    """Abstract base class for all service implementations.

    Provides common patterns for all services:
    - Session factory management
    - Abstract method for UoW creation
    - Helper method for adding rows to a repository in one transaction
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """Initialize the service.

        Args:
            session_factory: SQLAlchemy sessionmaker for database connections.
        """
        self.session_factory = session_factory

    @abstractmethod
    def _create_uow(self) -> Any:
        """Create a new Unit of Work instance.

        Subclasses must implement this to return their specific UoW type.
        """
        ...

    def _add(self, obj: list[dict], model_cls: type, repository_property: str) -> list[int]:
        """
        Add objects to the table mapped by ``model_cls``.

        Args:
            obj: List of dictionaries representing the records to insert.
            model_cls: The ORM class to instantiate for each record.
            repository_property: The repository property name in the UoW (e.g. "customers").

        Returns:
            The ids of the added rows, in input order.
        """
        with self._create_uow() as uow:
            if uow.session is None:
                raise SessionNotSetError
            entities = [model_cls(**item) for item in obj]
            getattr(uow, repository_property).add_all(entities)
            uow.flush()
            ids = [entity.id for entity in entities]
            uow.commit()
            return ids
