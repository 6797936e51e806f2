"""Category management commands."""

import click
from spendtrack.cli.error_handling import handle_domain_error
from spendtrack.domain.category import CategoryService
from spendtrack.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Use 'category add NAME' to create one.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} (ID: {cat.id})")


@category_group.command("add")
@click.argument("name")
@click.pass_context
def add_category(ctx, name: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name)
        db.commit()
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete a category. Expenses keep their category reference."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.delete_category(category_id)
        db.commit()
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
