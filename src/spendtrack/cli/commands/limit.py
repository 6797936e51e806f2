"""Spending limit command."""

import click
from spendtrack.cli.error_handling import format_amount, handle_domain_error
from spendtrack.domain.entities import LimitStatus
from spendtrack.domain.errors import DomainError
from spendtrack.domain.limit import LimitService
from spendtrack.utils.amount_parser import parse_amount


@click.command("limit")
@click.argument("amount")
@click.pass_context
def set_limit(ctx, amount: str):
    """Set the monthly spending limit. Use 0 to remove it."""
    db = ctx.obj["db"]
    service = LimitService(db)

    try:
        limit_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        limit = service.set_limit(limit_amount)
        db.commit()
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    if limit is None:
        click.echo("Removed spending limit")
        return

    click.echo(f"Set monthly spending limit to {format_amount(limit)}")
    report = service.check_month()
    if report.status is LimitStatus.EXCEEDED:
        click.echo(
            f"Warning: spending for {report.month} is {format_amount(report.total)}, "
            f"already over the limit by {format_amount(-report.remaining)}",
            err=True,
        )
    else:
        click.echo(
            f"Spent {format_amount(report.total)} in {report.month}, "
            f"{format_amount(report.remaining)} remaining"
        )


def register_commands(cli):
    """Register limit command with main CLI."""
    cli.add_command(set_limit)
