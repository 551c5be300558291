"""Base Unit of Work for repository-playground.

Provides the abstract base class with the session lifecycle and lazy
repository caching shared by every Unit of Work.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from sqlalchemy.orm import Session, sessionmaker
from typing_extensions import Self

from repository_playground.exceptions import SessionNotSetError


class BaseUnitOfWork(ABC):
    """Abstract base class for Unit of Work pattern.

    Provides common functionality for managing database transactions:
    - Session lifecycle management (context manager)
    - Transaction operations (commit, rollback, flush, clear)
    - Lazy repository initialization helper

    Subclasses must implement:
    - `_reset_repositories()`: Drop cached repositories on exit
    - Repository properties using `_get_repository()` helper, listed in `REPOSITORIES`
    """

    REPOSITORIES: ClassVar[tuple[str, ...]] = ()

    def __init__(self, session_factory: sessionmaker[Session]):
        """Initialize Unit of Work with a session factory.

        Args:
            session_factory: SQLAlchemy sessionmaker instance.
        """
        self.session_factory = session_factory
        self.session: Session | None = None

    def __enter__(self) -> Self:
        """Enter the context manager and create a new session.

        Returns:
            Self for method chaining.
        """
        self.session = self.session_factory()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context manager and clean up session.

        Automatically rolls back if an exception occurred.
        """
        if exc_type is not None:
            self.rollback()
        if self.session:
            self.session.close()
            self.session = None
        self._reset_repositories()

    @abstractmethod
    def _reset_repositories(self) -> None:
        """Reset all repository references to None.

        Called during cleanup to ensure repositories are recreated on next access.
        """
        ...

    def _get_repository(self, repo_attr: str, repo_class: type, model_cls: type) -> Any:
        """Helper method for lazy repository initialization.

        Args:
            repo_attr: Name of the private repository attribute (e.g., "_order_repo").
            repo_class: Repository class to instantiate.
            model_cls: The ORM model class handed to the repository.

        Returns:
            Repository instance.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        if self.session is None:
            raise SessionNotSetError

        cached_repo = getattr(self, repo_attr, None)
        if cached_repo is not None:
            return cached_repo

        repo = repo_class(self.session, model_cls)
        setattr(self, repo_attr, repo)
        return repo

    @classmethod
    def available_repositories(cls) -> list[str]:
        """Names of the repository properties this UoW exposes."""
        return list(cls.REPOSITORIES)

    def commit(self) -> None:
        """Commit the current transaction."""
        if self.session:
            self.session.commit()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if self.session:
            self.session.rollback()

    def flush(self) -> None:
        """Flush pending changes without committing."""
        if self.session:
            self.session.flush()

    def clear(self) -> None:
        """Detach every instance from the session so later reads hit the database."""
        if self.session:
            self.session.expunge_all()
