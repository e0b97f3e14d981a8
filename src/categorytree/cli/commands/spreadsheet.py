"""Spreadsheet export and import commands."""

import click
from categorytree.cli.error_handling import handle_domain_error, handle_unexpected_error
from categorytree.domain.errors import DomainError, TransferError
from categorytree.domain.spreadsheet_export import SpreadsheetExporter
from categorytree.domain.spreadsheet_import import SpreadsheetImporter


@click.command("export")
@click.argument("xlsx_file", type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def export_spreadsheet(ctx, xlsx_file: str):
    """Export all categories to an .xlsx file."""
    db = ctx.obj["db"]
    service = SpreadsheetExporter(db, max_file_size=ctx.obj["max_file_size"])

    try:
        try:
            count = service.export_file(xlsx_file)
        except OSError as e:
            raise TransferError(f"Could not write '{xlsx_file}': {e.strerror or e}") from e
        click.echo(f"Exported {count} categories to {xlsx_file}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except Exception as e:
        handle_unexpected_error(ctx, e, "exporting categories")


@click.command("import")
@click.argument("xlsx_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_spreadsheet(ctx, xlsx_file: str):
    """Merge categories from an .xlsx file into the tree.

    The sheet must have the columns id, name, parent_id. Categories that
    already exist are matched by name and never duplicated.
    """
    db = ctx.obj["db"]
    service = SpreadsheetImporter(db, max_file_size=ctx.obj["max_file_size"])

    try:
        try:
            result = service.import_file(xlsx_file)
        except OSError as e:
            raise TransferError(f"Could not read '{xlsx_file}': {e.strerror or e}") from e
        click.echo("\nImport complete:")
        click.echo(f"  Created: {result['created']} categories")
        click.echo(f"  Reused: {result['reused']} existing categories")
        click.echo(f"  Parent links set: {result['relinked']}")
        if result["demoted"]:
            ids = ", ".join(str(row_id) for row_id in result["demoted"])
            click.echo(f"  Imported as roots (parent row missing): {ids}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except Exception as e:
        handle_unexpected_error(ctx, e, "importing categories")


def register_commands(cli):
    """Register spreadsheet commands with main CLI."""
    cli.add_command(export_spreadsheet)
    cli.add_command(import_spreadsheet)
