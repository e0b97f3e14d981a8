"""Main CLI entry point."""

import click
from categorytree.database.factories import create_sqlite_database
from categorytree.domain.spreadsheet_export import MAX_FILE_SIZE
from categorytree.logger import setup_logging

# Import and register all commands at module level
from categorytree.cli.commands import category, spreadsheet


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CATEGORYTREE_DB_PATH environment variable)",
    envvar="CATEGORYTREE_DB_PATH",
)
@click.option(
    "--max-file-size",
    type=click.IntRange(min=1),
    default=MAX_FILE_SIZE,
    show_default=True,
    help="Largest spreadsheet accepted or produced, in bytes",
    envvar="CATEGORYTREE_MAX_FILE_SIZE",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
    envvar="CATEGORYTREE_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, max_file_size: int, log_level: str):
    """Categorytree - manage a tree of named categories.

    Categories form a forest in which every name is unique. The whole tree
    can be exported to, and merged back from, an .xlsx spreadsheet.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)
    ctx.obj["max_file_size"] = max_file_size

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
spreadsheet.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
