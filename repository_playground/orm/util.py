"""Database lifecycle helpers for repository-playground.

These talk to the ``postgres`` maintenance database through psycopg directly,
because CREATE/DROP DATABASE cannot run inside the transaction SQLAlchemy opens.
"""

import logging

import psycopg
from psycopg import Connection, sql

logger = logging.getLogger("Repository-Playground")

MAINTENANCE_DB = "postgres"


def _admin_connect(host: str, port: int, user: str, password: str) -> Connection:
    return psycopg.connect(
        host=host,
        port=port,
        user=user,
        password=password,
        dbname=MAINTENANCE_DB,
        autocommit=True,
    )


def _database_exists(conn: Connection, database: str) -> bool:
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1 FROM pg_database WHERE datname = %s", (database,))
        return cursor.fetchone() is not None


def create_database(
    host: str,
    user: str,
    password: str,
    database: str,
    port: int = 5432,
    template: str = "template0",
    encoding: str = "UTF8",
) -> bool:
    """Create a PostgreSQL database if it does not exist yet.

    Args:
        host: PostgreSQL server host.
        user: PostgreSQL user with CREATE DATABASE privileges.
        password: User password.
        database: Name of the database to create.
        port: PostgreSQL server port (default: 5432).
        template: Template database to copy (default: template0).
        encoding: Database encoding (default: UTF8).

    Returns:
        True if the database was created, False if it already existed.

    Raises:
        psycopg.Error: If the connection or the statement fails.
    """
    with _admin_connect(host, port, user, password) as conn:
        if _database_exists(conn, database):
            logger.info(f"Database '{database}' already exists")
            return False

        with conn.cursor() as cursor:
            cursor.execute(
                sql.SQL("CREATE DATABASE {} ENCODING %s TEMPLATE {}").format(
                    sql.Identifier(database),
                    sql.Identifier(template),
                ),
                (encoding,),
            )

    logger.info(f"Database '{database}' created")
    return True


def drop_database(
    host: str,
    user: str,
    password: str,
    database: str,
    port: int = 5432,
) -> bool:
    """Drop a PostgreSQL database.

    DROP DATABASE fails while other sessions are connected; terminate them first.

    Args:
        host: PostgreSQL server host.
        user: PostgreSQL user with DROP DATABASE privileges.
        password: User password.
        database: Name of the database to drop.
        port: PostgreSQL server port (default: 5432).

    Returns:
        True if the database was dropped, False if it did not exist.
    """
    with _admin_connect(host, port, user, password) as conn:
        if not _database_exists(conn, database):
            logger.info(f"Database '{database}' does not exist")
            return False

        with conn.cursor() as cursor:
            cursor.execute(sql.SQL("DROP DATABASE {}").format(sql.Identifier(database)))

    logger.info(f"Database '{database}' dropped")
    return True
