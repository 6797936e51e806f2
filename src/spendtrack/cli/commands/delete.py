"""Delete expense command."""

import click
from spendtrack.cli.error_handling import handle_domain_error
from spendtrack.domain.errors import DomainError
from spendtrack.domain.expense import ExpenseService


@click.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense by ID."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    try:
        service.delete_expense(expense_id)
        db.commit()
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register delete command with main CLI."""
    cli.add_command(delete_expense)
