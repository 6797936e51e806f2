"""Main CLI entry point."""

import logging

import click
from spendtrack.cli.error_handling import handle_domain_error
from spendtrack.database.factories import DATA_PATH_ENV, create_json_database
from spendtrack.domain.errors import DomainError

# Import and register all commands at module level
from spendtrack.cli.commands import (
    add,
    delete,
    list_cmd,
    category,
    summary,
    limit,
    export,
)


@click.group()
@click.option(
    "--data-path",
    type=click.Path(dir_okay=False),
    help=f"Path to data file (overrides {DATA_PATH_ENV} environment variable)",
    envvar=DATA_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_path: str | None, verbose: bool):
    """Spendtrack - Personal expense tracker.

    Record expenses, group them into categories, summarize spending by month
    and get warned when a monthly spending limit is exceeded.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load the data file only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_json_database(data_path=data_path)
        try:
            db.connect()
        except (DomainError, OSError) as e:
            handle_domain_error(ctx, e)
        ctx.obj["db"] = db


# Register all commands
add.register_commands(cli)
delete.register_commands(cli)
list_cmd.register_commands(cli)
category.register_commands(cli)
summary.register_commands(cli)
limit.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
