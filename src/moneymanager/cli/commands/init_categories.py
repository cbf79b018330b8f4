"""Initialize default categories."""

import click
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.category import CategoryService
from moneymanager.domain.entities import TransactionType
from moneymanager.domain.errors import DomainError

EXPENSE = TransactionType.EXPENSE
INCOME = TransactionType.INCOME

# (id, name, icon, type)
INITIAL_CATEGORIES = [
    ("fuel", "Fuel", "Fuel", EXPENSE),
    ("movie", "Movie", "Film", EXPENSE),
    ("food", "Food", "UtensilsCrossed", EXPENSE),
    ("loan", "Loan", "Landmark", EXPENSE),
    ("medical", "Medical", "Stethoscope", EXPENSE),
    ("shopping", "Shopping", "ShoppingBag", EXPENSE),
    ("transport", "Transport", "Car", EXPENSE),
    ("utilities", "Utilities", "Zap", EXPENSE),
    ("entertainment", "Entertainment", "Gamepad2", EXPENSE),
    ("education", "Education", "GraduationCap", EXPENSE),
    ("other-expense", "Other Expense", "Receipt", EXPENSE),
    ("salary", "Salary", "Briefcase", INCOME),
    ("freelance", "Freelance", "Laptop", INCOME),
    ("investment", "Investment", "TrendingUp", INCOME),
    ("bonus", "Bonus", "Gift", INCOME),
    ("rental", "Rental Income", "Home", INCOME),
    ("other-income", "Other Income", "Coins", INCOME),
]


@click.command("init-categories")
@click.pass_context
def init_categories(ctx):
    """Create the default income and expense categories.

    Categories whose ID already exists are left untouched, so running this
    again only fills in what is missing.
    """
    service = CategoryService(ctx.obj["db"])

    created = 0
    for category_id, name, icon, category_type in INITIAL_CATEGORIES:
        if service.get_category(category_id) is not None:
            continue
        try:
            service.create_category(
                name=name, category_type=category_type, icon=icon, category_id=category_id
            )
        except DomainError as e:
            handle_domain_error(ctx, e)
        created += 1

    if created == 0:
        click.echo("Default categories already exist.")
    else:
        click.echo(f"Successfully created {created} categories.")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
