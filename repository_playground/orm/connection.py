import logging
import os
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy import Engine, inspect, text
from sqlalchemy.orm import Session, sessionmaker

from repository_playground.exceptions import MissingDBNameError

logger = logging.getLogger("Repository-Playground")


@dataclass
class DBConnection:
    """Database connection configuration."""

    host: str
    port: int
    username: str
    password: str
    database: str | None = None

    @property
    def db_url(self) -> str:
        """Construct the SQLAlchemy database URL."""
        if self.database is None:
            return f"postgresql+psycopg://{self.username}:{self.password}@{self.host}:{self.port}"
        return f"postgresql+psycopg://{self.username}:{self.password}@{self.host}:{self.port}/{self.database}"

    def get_engine(self, **kwargs) -> Engine:
        """Create a SQLAlchemy engine using the connection configuration."""
        from sqlalchemy import create_engine

        return create_engine(self.db_url, **kwargs)

    def get_session_factory(self) -> sessionmaker[Session]:
        """Create a SQLAlchemy session factory using the connection configuration."""
        return sessionmaker(bind=self.get_engine())

    def create_schema(self) -> None:
        """Create the customers, orders and order_items tables if they are missing."""
        from repository_playground.orm.schema import Base

        engine = self.get_engine()
        try:
            Base.metadata.create_all(engine)
        finally:
            engine.dispose()
        logger.info(f"Tables created in database '{self.database}'.")

    def drop_schema(self) -> None:
        from repository_playground.orm.schema import Base

        engine = self.get_engine()
        try:
            Base.metadata.drop_all(engine)
        finally:
            engine.dispose()
        logger.info(f"Tables dropped from database '{self.database}'.")

    def table_exists(self, table_name: str) -> bool:
        engine = self.get_engine()
        try:
            return inspect(engine).has_table(table_name)
        finally:
            engine.dispose()

    def get_database_names(self) -> list[str]:
        engine = self.get_engine()
        try:
            with engine.connect() as conn:
                result = conn.execute(
                    text("SELECT datname FROM pg_database WHERE datistemplate = false ORDER BY datname")
                )
                return [row[0] for row in result]
        finally:
            engine.dispose()

    def create_database(self) -> None:
        if self.database is None:
            raise MissingDBNameError

        from repository_playground.orm.util import create_database

        create_database(
            host=self.host,
            port=self.port,
            user=self.username,
            password=self.password,
            database=self.database,
        )

    def terminate_connections(self) -> None:
        """Terminate all connections to this database except the current one.

        DROP DATABASE fails while other sessions are connected, so call this first.
        """
        if self.database is None:
            raise MissingDBNameError

        admin_conn = DBConnection(
            host=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            database="postgres",
        )
        engine = admin_conn.get_engine()
        try:
            with engine.connect() as conn:
                conn.execute(
                    text(
                        """
                        SELECT pg_terminate_backend(pid)
                        FROM pg_stat_activity
                        WHERE datname = :dbname AND pid <> pg_backend_pid()
                        """
                    ),
                    {"dbname": self.database},
                )
                conn.commit()
            logger.info(f"Terminated all connections to database '{self.database}'.")
        finally:
            engine.dispose()

    def drop_database(self) -> None:
        if self.database is None:
            raise MissingDBNameError

        from repository_playground.orm.util import drop_database

        drop_database(
            host=self.host,
            port=self.port,
            user=self.username,
            password=self.password,
            database=self.database,
        )

    @classmethod
    def from_config(cls, config_path: Path | None = None) -> "DBConnection":
        """Load database connection configuration from a YAML file.

        Args:
            config_path: Directory holding ``db.yaml``. If None, uses the CLI config path.

        Returns:
            DBConnection instance with loaded configuration.

        Raises:
            FileNotFoundError: If ``db.yaml`` does not exist.
            TypeError: If ``db.yaml`` is not a mapping.
            ValueError: If no user or no password is configured.
        """
        from omegaconf import DictConfig, OmegaConf

        from repository_playground import cli

        resolved_path = config_path or cli.CONFIG_PATH
        if resolved_path is None:
            raise ValueError("Config path not provided and CONFIG_PATH is not set.")  # noqa: TRY003

        cfg = OmegaConf.load(Path(resolved_path) / "db.yaml")
        if not isinstance(cfg, DictConfig):
            raise TypeError("db.yaml must be a YAML mapping.")  # noqa: TRY003

        username = cfg.get("user")
        if username is None:
            raise ValueError("Database user not found in config.")  # noqa: TRY003

        password = os.environ.get("POSTGRES_PASSWORD", cfg.get("password"))
        if password is None:
            raise ValueError("Database password not found in config or POSTGRES_PASSWORD env variable.")  # noqa: TRY003

        return cls(
            host=cfg.get("host", "localhost"),
            port=int(cfg.get("port", 5432)),
            username=str(username),
            password=str(password),
            database=cfg.get("database"),
        )

    @classmethod
    def from_env(cls) -> "DBConnection":
        """Load database connection configuration from environment variables.

        Returns:
            DBConnection instance with loaded configuration.
        """
        host = os.getenv("POSTGRES_HOST", "localhost")
        port = int(os.getenv("POSTGRES_PORT", "5432"))
        username = os.getenv("POSTGRES_USER")
        password = os.getenv("POSTGRES_PASSWORD")
        database = os.getenv("POSTGRES_DB", None)

        if not all([host, port, username, password]):
            raise ValueError("Missing required database environment variables.")  # noqa: TRY003

        return cls(
            host=host,
            port=port,
            username=str(username),
            password=str(password),
            database=database,
        )
