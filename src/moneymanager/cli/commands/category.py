"""Category management commands."""

import click
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.category import DEFAULT_ICON, CategoryService
from moneymanager.domain.entities import TransactionType
from moneymanager.domain.errors import DomainError

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--type", "category_type", type=TYPE_CHOICE, help="Only show one type")
@click.pass_context
def list_categories(ctx, category_type: str | None):
    """List categories grouped by type."""
    service = CategoryService(ctx.obj["db"])

    selected = TransactionType(category_type.upper()) if category_type else None
    categories = service.list_categories(category_type=selected)
    if not categories:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    for txn_type in TransactionType:
        group = [cat for cat in categories if cat.type == txn_type]
        if not group:
            continue
        click.echo(f"\n{txn_type.value.title()} categories:")
        for cat in group:
            click.echo(f"  {cat.name:<20} (ID: {cat.id}, icon: {cat.icon})")


@category_group.command("create")
@click.argument("name")
@click.option("--type", "category_type", type=TYPE_CHOICE, default="EXPENSE", help="Category type (default: EXPENSE)")
@click.option("--icon", default=DEFAULT_ICON, show_default=True, help="Icon name")
@click.option("--id", "category_id", help="Explicit ID; derived from the name if omitted")
@click.pass_context
def create_category(ctx, name: str, category_type: str, icon: str, category_id: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"])

    try:
        new_id = service.create_category(
            name=name,
            category_type=TransactionType(category_type.upper()),
            icon=icon,
            category_id=category_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name}' (ID: {new_id})")


@category_group.command("delete")
@click.argument("category")
@click.pass_context
def delete_category(ctx, category: str):
    """Delete a category no transaction uses.

    CATEGORY can be a category ID or name.
    """
    service = CategoryService(ctx.obj["db"])

    try:
        category_obj = service.require_category(category)
        service.delete_category(category_obj.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted category '{category_obj.name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
