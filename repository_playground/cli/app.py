"""Typer-based CLI application for repository-playground."""

import logging
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated

import typer

import repository_playground.cli as cli
from repository_playground.cli.commands.db import db_app
from repository_playground.cli.commands.init import init
from repository_playground.cli.commands.orders import orders_app
from repository_playground.cli.commands.stats import stats

# Configure logging for CLI output
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"repository-playground {get_version('repository-playground')}")
        raise typer.Exit()


app = typer.Typer(
    name="repository-playground",
    help="repository-playground CLI - customers, orders and order items on PostgreSQL.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config-path",
            "-cp",
            help="Path to configuration directory",
            envvar="REPOSITORY_PLAYGROUND_CONFIG_PATH",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """repository-playground CLI.

    Global options are processed before any command.
    """
    cli.CONFIG_PATH = (config_path or Path.cwd() / "configs").resolve()


app.add_typer(db_app, name="db")
app.add_typer(orders_app, name="orders")

app.command(name="init")(init)
app.command(name="stats")(stats)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
