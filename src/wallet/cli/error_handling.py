"""CLI error handling helpers."""

import click

from wallet.domain.errors import DomainError, StorageError


def handle_domain_error(ctx: click.Context, error: DomainError | StorageError | ValueError) -> None:
    """Render a domain or storage error and exit with failure."""
    prefix = "Storage error" if isinstance(error, StorageError) else "Error"
    click.echo(f"{prefix}: {error}", err=True)
    ctx.exit(1)
