"""Expense listing command."""

import click
from spendtrack.cli.error_handling import format_amount
from spendtrack.domain.category import CategoryService
from spendtrack.domain.expense import ExpenseService
from spendtrack.utils.date_parser import parse_month


@click.command("list")
@click.argument("category_id", type=int, required=False)
@click.option("--month", help="Month to show (YYYY-MM or relative like 'this month')")
@click.pass_context
def list_expenses(ctx, category_id: int | None, month: str | None):
    """List expenses, optionally only those in CATEGORY_ID."""
    db = ctx.obj["db"]
    service = ExpenseService(db)
    category_service = CategoryService(db)

    try:
        month_key = parse_month(month)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    expenses = service.list_expenses(category_id=category_id, month=month_key)
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Amount':>12}  {'Category':<25} {'Description':<30}")
    click.echo("-" * 90)

    for expense in expenses:
        category_name = category_service.format_category(expense.category_id)
        click.echo(
            f"{expense.id:<6} {str(expense.date):<12} {format_amount(expense.amount):>12}  "
            f"{category_name[:25]:<25} {expense.description[:30]:<30}"
        )


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_expenses)
