"""Category management commands."""

import click
from categorytree.cli.error_handling import handle_domain_error, handle_unexpected_error
from categorytree.domain.category import CategoryService
from categorytree.domain.errors import DomainError
from categorytree.domain.tree import TreeRenderer


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("add")
@click.argument("name")
@click.option("--parent", help="Name of the parent category (omit to add a root)")
@click.pass_context
def add_category(ctx, name: str, parent: str | None):
    """Add a category.

    Names are unique across the whole tree.

    Examples:
        categorytree category add "Food"
        categorytree category add "Groceries" --parent "Food"
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        if parent is None:
            category = service.add_root(name)
            click.echo(f"Added root category '{category.name}' (ID: {category.id})")
        else:
            category = service.add_child(parent, name)
            click.echo(
                f"Added category '{category.name}' under '{parent.strip()}' (ID: {category.id})"
            )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except Exception as e:
        handle_unexpected_error(ctx, e, "adding the category")


@category_group.command("remove")
@click.argument("name")
@click.pass_context
def remove_category(ctx, name: str):
    """Remove a category and everything below it."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        removed = service.remove(name)
        descendants = removed - 1
        suffix = (
            f" and {descendants} descendant{'s' if descendants != 1 else ''}"
            if descendants
            else ""
        )
        click.echo(f"Removed category '{name}'{suffix}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except Exception as e:
        handle_unexpected_error(ctx, e, "removing the category")


@category_group.command("tree")
@click.pass_context
def view_tree(ctx):
    """Show the whole category tree."""
    db = ctx.obj["db"]
    renderer = TreeRenderer(db)

    try:
        click.echo(renderer.render_tree(), nl=False)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except Exception as e:
        handle_unexpected_error(ctx, e, "rendering the category tree")


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories with their IDs."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_all()
    if not categories:
        click.echo("No categories found. Use 'category add' to create one.")
        return

    names_by_id = {cat.id: cat.name for cat in categories}
    click.echo("\nCategories:")
    click.echo("-" * 60)
    for cat in categories:
        parent = names_by_id.get(cat.parent_id, "-")
        click.echo(f"ID: {cat.id:3d} | {cat.name:25s} | Parent: {parent}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
