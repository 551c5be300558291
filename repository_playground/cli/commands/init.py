"""init command - Write a default database configuration file."""

import logging
from pathlib import Path

from omegaconf import OmegaConf

logger = logging.getLogger("Repository-Playground")

DEFAULT_DB_CONFIG = {
    "host": "localhost",
    "port": 5432,
    "user": "postgres",
    "password": "${oc.env:POSTGRES_PASSWORD,postgres}",
    "database": "repository_playground",
}


def init() -> None:
    """Write a default db.yaml to the configured directory.

    An existing db.yaml is never overwritten.

    Examples:
      repository-playground init
      repository-playground --config-path=/my/configs init
    """
    import repository_playground.cli as cli

    config_dir = cli.CONFIG_PATH or Path.cwd() / "configs"
    config_file = config_dir / "db.yaml"

    if config_file.exists():
        logger.info(f"  [skip] {config_file} (already exists)")
        return

    config_dir.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(OmegaConf.create(DEFAULT_DB_CONFIG), config_file)
    logger.info(
        f"  [ok] {config_file}"
        "\nNext steps:"
        "\n  1. Edit db.yaml with your database credentials"
        "\n  2. Create the tables: repository-playground db create --with-database"
    )
