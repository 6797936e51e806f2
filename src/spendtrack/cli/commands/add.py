"""Add expense command."""

import click
from spendtrack.cli.error_handling import format_amount, handle_domain_error
from spendtrack.domain.category import CategoryService
from spendtrack.domain.entities import LimitStatus
from spendtrack.domain.errors import DomainError
from spendtrack.domain.expense import ExpenseService
from spendtrack.domain.limit import LimitService
from spendtrack.utils.amount_parser import parse_amount
from spendtrack.utils.date_parser import parse_date


def warn_if_limit_exceeded(db) -> None:
    """Print a warning when this month's spending is over the limit."""
    report = LimitService(db).check_month()
    if report is not None and report.status is LimitStatus.EXCEEDED:
        click.echo(
            f"Warning: spending for {report.month} is {format_amount(report.total)}, "
            f"over the limit of {format_amount(report.limit)} "
            f"by {format_amount(-report.remaining)}",
            err=True,
        )


@click.command("add")
@click.argument("description")
@click.argument("amount")
@click.argument("category_id", type=int, required=False)
@click.option(
    "--date",
    "date_str",
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday'). Defaults to today.",
)
@click.pass_context
def add_expense(
    ctx,
    description: str,
    amount: str,
    category_id: int | None,
    date_str: str | None,
):
    """Add an expense.

    Examples:
        spendtrack add "Lunch" 20.00
        spendtrack add "Coffee" 5.00 1 --date yesterday
    """
    db = ctx.obj["db"]
    expense_service = ExpenseService(db)
    category_service = CategoryService(db)

    # Parse amount
    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    # Parse date
    expense_date = None
    if date_str:
        try:
            expense_date = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        expense_id = expense_service.create_expense(
            description=description,
            amount=expense_amount,
            category_id=category_id,
            date=expense_date,
        )
        db.commit()
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    expense = expense_service.get_expense(expense_id)
    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")
    click.echo(f"  Description: {expense.description}")
    if category_id is not None:
        click.echo(f"  Category: {category_service.format_category(category_id)}")

    warn_if_limit_exceeded(db)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)
