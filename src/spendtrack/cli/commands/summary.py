"""Summary command."""

import click
from spendtrack.cli.error_handling import format_amount
from spendtrack.domain.category import CategoryService
from spendtrack.domain.entities import LimitStatus
from spendtrack.domain.limit import LimitService
from spendtrack.domain.summary import SummaryService
from spendtrack.utils.date_parser import OVERALL, parse_month


@click.command("summary")
@click.argument("month", default=OVERALL)
@click.argument("category_id", type=int, required=False)
@click.pass_context
def summary(ctx, month: str, category_id: int | None):
    """Show total spending for MONTH (YYYY-MM) or overall.

    Optionally restrict the summary to CATEGORY_ID.

    Examples:
        spendtrack summary
        spendtrack summary 2024-03
        spendtrack summary "this month" 2
    """
    db = ctx.obj["db"]
    summary_service = SummaryService(db)
    category_service = CategoryService(db)

    try:
        month_key = parse_month(month)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    report = summary_service.build_summary_report(month=month_key, category_id=category_id)

    title = f"Summary for {month_key}" if month_key else "Overall summary"
    if category_id is not None:
        title += f" ({category_service.format_category(category_id)})"
    click.echo(f"\n{title}")
    click.echo("-" * 40)

    for day, amount in report.daily_totals.items():
        click.echo(f"{day:<20} {format_amount(amount):>19}")
    if report.daily_totals:
        click.echo("-" * 40)

    click.echo(f"{'Total':<20} {format_amount(report.total):>19}")
    click.echo(f"{report.count} expense(s)")

    if category_id is None and report.count:
        click.echo("\nBy category:")
        for cat_id, amount in summary_service.category_breakdown(month=month_key).items():
            name = category_service.format_category(cat_id) or "Uncategorized"
            click.echo(f"{name[:20]:<20} {format_amount(amount):>19}")

    # Limit is monthly, so only compare a whole month across all categories
    if month_key is not None and category_id is None:
        limit_report = LimitService(db).check_month(month_key)
        if limit_report is not None:
            if limit_report.status is LimitStatus.EXCEEDED:
                click.echo(
                    f"Warning: over the limit of {format_amount(limit_report.limit)} "
                    f"by {format_amount(-limit_report.remaining)}",
                    err=True,
                )
            else:
                click.echo(
                    f"Limit: {format_amount(limit_report.limit)} "
                    f"(remaining {format_amount(limit_report.remaining)})"
                )


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
