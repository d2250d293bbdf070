"""Transaction commands."""

import click
from wallet.cli.account_resolution import resolve_account_or_exit
from wallet.cli.date_filters import resolve_cli_date_range
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.entities import EntryType, Transaction, TransactionEntryInput
from wallet.domain.errors import DomainError, StorageError
from wallet.domain.transaction import TransactionService
from wallet.utils.amount_parser import parse_money
from wallet.utils.date_parser import parse_date


def echo_transaction(account_service: AccountService, txn: Transaction, verbose: bool = True) -> None:
    """Print a transaction and its entries."""
    click.echo(f"Transaction {txn.id} | {txn.transaction_date} | {txn.description}")
    if not verbose:
        return
    if txn.reference:
        click.echo(f"  Reference: {txn.reference}")
    if txn.tags:
        click.echo(f"  Tags: {', '.join(txn.tags)}")
    if txn.notes:
        click.echo(f"  Notes: {txn.notes}")
    for entry in txn.entries:
        label = "Dr" if entry.entry_type is EntryType.DEBIT else "Cr"
        path = account_service.get_account_path(entry.account_id)
        click.echo(f"  {label} {entry.amount.format():>15s}  {path}")


def _parse_leg(ctx, account_service: AccountService, leg: str, entry_type: EntryType) -> TransactionEntryInput:
    """Turn 'ACCOUNT=AMOUNT' into an entry in the account's currency."""
    if "=" not in leg:
        click.echo(f"Error: Expected ACCOUNT=AMOUNT, got '{leg}'", err=True)
        ctx.exit(1)
    reference, amount_str = leg.rsplit("=", 1)
    account = resolve_account_or_exit(ctx, account_service, reference.strip())
    try:
        amount = parse_money(amount_str, account.currency)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
    return TransactionEntryInput(account_id=account.id, amount=amount, entry_type=entry_type)


@click.group()
def transaction_group():
    """Record and inspect transactions."""
    pass


@transaction_group.command("create")
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--debit", "debits", multiple=True, metavar="ACCOUNT=AMOUNT", help="Debit entry (repeatable)")
@click.option("--credit", "credits", multiple=True, metavar="ACCOUNT=AMOUNT", help="Credit entry (repeatable)")
@click.option("--reference", help="External reference")
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--notes", help="Notes")
@click.pass_context
def create_transaction(
    ctx,
    description: str,
    date_str: str,
    debits: tuple[str, ...],
    credits: tuple[str, ...],
    reference: str | None,
    tags: tuple[str, ...],
    notes: str | None,
):
    """Record a transaction with any number of debit and credit entries.

    Total debits must equal total credits.

    Examples:
        wallet transaction create --description "Courses" \\
            --debit "Expenses > Alimentation=45.20" \\
            --credit "Assets > BoursoBank > Compte Courant=45.20"
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = TransactionService(db)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    entries = [_parse_leg(ctx, account_service, leg, EntryType.DEBIT) for leg in debits]
    entries += [_parse_leg(ctx, account_service, leg, EntryType.CREDIT) for leg in credits]

    try:
        txn = service.create_transaction(
            description=description,
            transaction_date=txn_date,
            entries=entries,
            reference=reference,
            tags=list(tags) or None,
            notes=notes,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo("Created transaction")
    echo_transaction(account_service, txn)


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--this-month", is_flag=True, help="Only this month")
@click.option("--last-month", is_flag=True, help="Only last month")
@click.option("--this-year", is_flag=True, help="Only this year")
@click.option("--last-year", is_flag=True, help="Only last year")
@click.option("--account", help="Account ID, path or name")
@click.option("--limit", type=click.IntRange(min=0), help="Maximum number of transactions")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Skip this many transactions")
@click.option("--verbose", "-v", is_flag=True, help="Show entries, reference, tags and notes")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    account: str | None,
    limit: int | None,
    offset: int,
    verbose: bool,
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )
    account_id = resolve_account_or_exit(ctx, account_service, account).id if account else None

    try:
        transactions = service.list_transactions(
            start_date=start, end_date=end, account_id=account_id, limit=limit, offset=offset
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    for txn in transactions:
        echo_transaction(account_service, txn, verbose=verbose)


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show a transaction with all of its entries."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.get_transaction(transaction_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    echo_transaction(AccountService(db), txn)


@transaction_group.command("reverse")
@click.argument("transaction_id", type=int)
@click.option("--date", "date_str", default="today", show_default=True, help="Date of the reversal")
@click.option("--description", help="Description (defaults to 'Reversal of #ID: ...')")
@click.pass_context
def reverse_transaction(ctx, transaction_id: int, date_str: str, description: str | None):
    """Record a transaction that cancels TRANSACTION_ID.

    Transactions are never edited or deleted; reversing is how mistakes are fixed.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        reversal = service.create_reversal(
            transaction_id, transaction_date=txn_date, description=description
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo("Created reversal")
    echo_transaction(AccountService(db), reversal)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
