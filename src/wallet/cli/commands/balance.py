"""Balance and summary commands."""

from datetime import date

import click
from wallet.cli.account_resolution import resolve_account_or_exit
from wallet.cli.commands.transaction import echo_transaction
from wallet.cli.date_filters import resolve_cli_date_range
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.balance import BalanceService
from wallet.domain.errors import DomainError, StorageError
from wallet.domain.report import ReportService


@click.command("balance")
@click.argument("account", metavar="ACCOUNT")
@click.option("--direct", is_flag=True, help="Exclude sub-accounts")
@click.option("--start-date", help="Only transactions on or after this date")
@click.option("--end-date", help="Only transactions on or before this date")
@click.option("--this-month", is_flag=True, help="Only this month")
@click.option("--last-month", is_flag=True, help="Only last month")
@click.option("--this-year", is_flag=True, help="Only this year")
@click.option("--last-year", is_flag=True, help="Only last year")
@click.pass_context
def show_balance(
    ctx,
    account: str,
    direct: bool,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
):
    """Show the balance of ACCOUNT, including its sub-accounts by default.

    ACCOUNT can be an account ID, path or name.
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    balance_service = BalanceService(db, account_service)

    target = resolve_account_or_exit(ctx, account_service, account)
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

    try:
        if direct:
            balance = balance_service.calculate_direct_balance(target.id, start, end)
        else:
            balance = balance_service.calculate_hierarchical_balance(target.id, start, end)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"{account_service.get_account_path(target.id)}: {balance.format()}")


@click.command("summary")
@click.option("--recent", type=click.IntRange(min=0), default=5, show_default=True, help="Number of recent transactions")
@click.pass_context
def show_summary(ctx, recent: int):
    """Show net worth, this month's income and expenses, and recent transactions."""
    db = ctx.obj["db"]
    service = ReportService(db, currency=ctx.obj["currency"])

    try:
        total_assets = service.get_total_assets()
        total_liabilities = service.get_total_liabilities()
        net_worth = service.get_net_worth()
        income = service.get_current_month_income()
        expenses = service.get_current_month_expenses()
        transactions = service.get_recent_transactions(limit=recent) if recent else []
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    today = date.today()
    click.echo(f"Total assets:      {total_assets.format():>15s}")
    click.echo(f"Total liabilities: {total_liabilities.format():>15s}")
    click.echo(f"Net worth:         {net_worth.format():>15s}")
    click.echo(f"\n{today:%B %Y}")
    click.echo(f"  Income:          {income.format():>15s}")
    click.echo(f"  Expenses:        {expenses.format():>15s}")

    if transactions:
        click.echo("\nRecent transactions:")
        for txn in transactions:
            echo_transaction(service.account_service, txn, verbose=False)


def register_commands(cli):
    """Register balance and summary commands with main CLI."""
    cli.add_command(show_balance)
    cli.add_command(show_summary)
