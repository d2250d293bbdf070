"""Main CLI entry point."""

import logging

import click
from wallet.database.factories import create_sqlite_database
from wallet.domain.errors import DomainError
from wallet.domain.money import Currency

# Import and register all commands at module level
from wallet.cli.commands import (
    account,
    add,
    balance,
    init_accounts,
    transaction,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WALLET_DB_PATH environment variable)",
    envvar="WALLET_DB_PATH",
)
@click.option(
    "--currency",
    default="EUR",
    show_default=True,
    envvar="WALLET_CURRENCY",
    help="Default currency for new root accounts and reports",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="WALLET_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, currency: str, log_level: str):
    """Wallet - double-entry personal finance ledger.

    Keep a hierarchical chart of accounts and record balanced transactions
    in a local database file.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx.obj["currency"] = Currency.from_code(currency)
    except DomainError as e:
        raise click.BadParameter(str(e), param_hint="--currency") from e

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_accounts.register_commands(cli)
account.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
balance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
