"""db commands - Create tables and drop PostgreSQL databases."""

from typing import Annotated

import typer

from repository_playground.cli.utils import CONFIG_NOT_FOUND_MESSAGE, load_db_connection

SYSTEM_DATABASES = {"postgres", "template0", "template1"}

db_app = typer.Typer(
    name="db",
    help="Create and drop the repository-playground database.",
    no_args_is_help=True,
)


@db_app.command(name="create")
def create_cmd(
    with_database: Annotated[
        bool,
        typer.Option("--with-database", help="Create the database itself before the tables"),
    ] = False,
    recreate: Annotated[
        bool,
        typer.Option("--recreate", help="Drop the tables (and their rows) before creating them"),
    ] = False,
) -> None:
    """Create the customers, orders and order_items tables.

    Examples:
        repository-playground db create
        repository-playground db create --with-database
        repository-playground db create --recreate
    """
    db_conn = load_db_connection()
    try:
        if with_database:
            db_conn.create_database()
        if recreate:
            db_conn.drop_schema()
        db_conn.create_schema()
    except (RuntimeError, ValueError) as e:
        typer.echo(f"Create failed: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Tables ready in database '{db_conn.database}'.")


@db_app.command(name="drop")
def drop_cmd(
    db_name: Annotated[str, typer.Option("--db-name", help="Database name to drop")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompts"),
    ] = False,
) -> None:
    """Drop a PostgreSQL database.

    Examples:
        repository-playground db drop --db-name=playground_test
        repository-playground db drop --db-name=playground_test --yes
    """
    from repository_playground.orm.connection import DBConnection

    if db_name in SYSTEM_DATABASES:
        typer.echo(f"Refusing to drop protected system database '{db_name}'.", err=True)
        raise typer.Exit(1)

    if not yes:
        confirm = typer.confirm(f"This will permanently DROP database '{db_name}'. Continue?")
        if not confirm:
            typer.echo("Aborted.")
            raise typer.Exit(0)

    try:
        db_conn = DBConnection.from_config()
        db_conn.database = db_name
        db_conn.terminate_connections()
        db_conn.drop_database()
    except FileNotFoundError:
        typer.echo(CONFIG_NOT_FOUND_MESSAGE, err=True)
        raise typer.Exit(1) from None
    except (RuntimeError, ValueError) as e:
        typer.echo(f"Drop failed: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Database '{db_name}' dropped successfully.")
