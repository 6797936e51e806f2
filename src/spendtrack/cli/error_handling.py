"""CLI error handling helpers."""

import click

from spendtrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | OSError) -> None:
    """Render a domain or file error and exit with failure."""
    if isinstance(error, OSError) and error.filename and error.strerror:
        message = f"{error.strerror}: {error.filename}"
    else:
        message = str(error)
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def format_amount(amount) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"{amount:,.2f}"
