"""Add transaction command."""

import click
from wallet.cli.account_resolution import resolve_account_or_exit
from wallet.cli.commands.transaction import echo_transaction
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.errors import DomainError, StorageError
from wallet.domain.transaction import TransactionService
from wallet.utils.amount_parser import parse_money
from wallet.utils.date_parser import parse_date


@click.command("add")
@click.option("--from", "from_account", required=True, help="Account the money comes from (credited)")
@click.option("--to", "to_account", required=True, help="Account the money goes to (debited)")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45)")
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--reference", help="External reference")
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--notes", help="Notes")
@click.pass_context
def add_transaction(
    ctx,
    from_account: str,
    to_account: str,
    amount: str,
    description: str,
    date: str,
    reference: str | None,
    tags: tuple[str, ...],
    notes: str | None,
):
    """Record a simple transfer between two accounts.

    Examples:
        wallet add --from "Income > Salaire" --to "Assets > BoursoBank > Compte Courant" \\
            --amount 2500 --description "Salaire juin"
        wallet add --from "Compte Courant" --to "Alimentation" --amount 45.20 \\
            --description "Courses" --date yesterday
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    transaction_service = TransactionService(db)

    source = resolve_account_or_exit(ctx, account_service, from_account)
    destination = resolve_account_or_exit(ctx, account_service, to_account)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_money(amount, source.currency)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = transaction_service.create_simple_transaction(
            description=description,
            transaction_date=txn_date,
            amount=txn_amount,
            from_account_id=source.id,
            to_account_id=destination.id,
            reference=reference,
            tags=list(tags) or None,
            notes=notes,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo("Created transaction")
    echo_transaction(account_service, txn)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
