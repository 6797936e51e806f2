"""CSV export command."""

import click
from spendtrack.cli.error_handling import handle_domain_error
from spendtrack.domain.csv_export import CSVExportService


@click.command("export")
@click.argument("csv_file", type=click.Path(dir_okay=False))
@click.pass_context
def export_csv(ctx, csv_file: str):
    """Export all expenses to a CSV file."""
    db = ctx.obj["db"]
    service = CSVExportService(db)

    try:
        count = service.export(csv_file)
    except OSError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Exported {count} expense(s) to {csv_file}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_csv)
