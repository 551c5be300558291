import os
from collections.abc import Generator
from typing import Any

import pytest
from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from repository_playground.exceptions import EnvNotFoundError
from repository_playground.orm.schema import Base
from repository_playground.orm.util import create_database


@pytest.fixture(scope="session")
def db_engine() -> Generator[Engine, Any, None]:
    """Create a database engine for the test session.

    Expects POSTGRES_HOST, POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_PORT, TEST_DB_NAME environment variable to be set.
    The test database is created if missing, and the tables are created in it.
    """
    host = os.getenv("POSTGRES_HOST")
    user = os.getenv("POSTGRES_USER")
    pwd = os.getenv("POSTGRES_PASSWORD")
    port = int(os.getenv("POSTGRES_PORT", "5432"))
    db_name = os.getenv("TEST_DB_NAME")
    if not all([host, user, pwd, port, db_name]):
        raise EnvNotFoundError(  # noqa: TRY003
            "POSTGRES_HOST, POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_PORT, and TEST_DB_NAME must be set"
        )

    create_database(host=host, user=user, password=pwd, database=db_name, port=port)

    engine = create_engine(
        f"postgresql+psycopg://{user}:{pwd}@{host}:{port}/{db_name}",
        pool_pre_ping=True,
    )
    Base.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def connection(db_engine: Engine) -> Generator[Connection, Any, None]:
    """Open a connection with an outer transaction that is rolled back after the test.

    Everything a test writes, including commits made through a Unit of Work, stays
    inside this transaction, so the database is unchanged afterwards.
    """
    with db_engine.connect() as conn:
        transaction = conn.begin()
        yield conn
        transaction.rollback()


@pytest.fixture
def session_factory(connection: Connection) -> sessionmaker[Session]:
    """Session factory whose sessions turn commit/rollback into SAVEPOINT operations."""
    return sessionmaker(bind=connection, join_transaction_mode="create_savepoint")


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, Any, None]:
    """Create a new database session for each test."""
    session = session_factory()

    yield session

    session.close()
