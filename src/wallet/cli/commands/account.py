"""Account management commands."""

import click
from wallet.cli.account_resolution import resolve_account_or_exit
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.balance import BalanceService
from wallet.domain.entities import AccountType
from wallet.domain.errors import DomainError, StorageError
from wallet.domain.money import Currency

ACCOUNT_TYPE_CHOICES = [member.value for member in AccountType]


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(ACCOUNT_TYPE_CHOICES, case_sensitive=False),
    help="Account type (defaults to the parent's type)",
)
@click.option("--parent", help="Parent account ID, path or name")
@click.option("--currency", help="Currency code (defaults to the parent's currency)")
@click.option("--description", help="Account description")
@click.pass_context
def create_account(
    ctx,
    name: str,
    account_type: str | None,
    parent: str | None,
    currency: str | None,
    description: str | None,
):
    """Create a new account.

    Examples:
        wallet account create "BoursoBank" --parent Assets
        wallet account create "Compte Courant" --parent "Assets > BoursoBank"
        wallet account create "Savings" --type asset --currency USD
    """
    db = ctx.obj["db"]
    service = AccountService(db, default_currency=ctx.obj["currency"])

    parent_account = resolve_account_or_exit(ctx, service, parent) if parent is not None else None

    if account_type is not None:
        resolved_type = AccountType(account_type.lower())
    elif parent_account is not None:
        resolved_type = parent_account.account_type
    else:
        click.echo("Error: --type is required for root accounts", err=True)
        ctx.exit(1)

    try:
        account_currency = Currency.from_code(currency) if currency else None
        account = service.create_account(
            name=name,
            account_type=resolved_type,
            parent_id=parent_account.id if parent_account else None,
            currency=account_currency,
            description=description,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created account '{service.get_account_path(account.id)}' (ID: {account.id})")


@account_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive accounts")
@click.pass_context
def list_accounts(ctx, include_inactive: bool):
    """List accounts as a tree."""
    db = ctx.obj["db"]
    service = AccountService(db)

    nodes = service.get_account_tree(include_inactive=include_inactive)
    if not nodes:
        click.echo("No accounts found. Run 'wallet init' to create the root accounts.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for node in nodes:
        acc = node.account
        indent = "    " * node.level
        status = "" if acc.is_active else " [inactive]"
        click.echo(
            f"ID: {acc.id:3d} | {indent}{acc.name} ({acc.account_type.value}, {acc.currency.code}){status}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show an account with its balances.

    ACCOUNT can be an account ID, path or name.
    """
    db = ctx.obj["db"]
    service = AccountService(db)
    balance_service = BalanceService(db, service)

    acc = resolve_account_or_exit(ctx, service, account)
    try:
        direct = balance_service.calculate_direct_balance(acc.id)
        total = balance_service.calculate_hierarchical_balance(acc.id)
        children = service.get_children(acc.id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Account: {service.get_account_path(acc.id)}")
    click.echo(f"  ID: {acc.id}")
    click.echo(f"  Type: {acc.account_type.value}")
    click.echo(f"  Currency: {acc.currency.code}")
    click.echo(f"  Active: {'yes' if acc.is_active else 'no'}")
    if acc.description:
        click.echo(f"  Description: {acc.description}")
    click.echo(f"  Balance: {direct.format()}")
    if children:
        click.echo(f"  Balance incl. sub-accounts: {total.format()}")
        click.echo(f"  Sub-accounts: {', '.join(child.name for child in children)}")


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--description", help="New description (empty string clears it)")
@click.pass_context
def update_account(ctx, account: str, name: str | None, description: str | None) -> None:
    """Rename an account or change its description.

    ACCOUNT can be an account ID, path or name. The type and parent of an
    account cannot be changed.

    Examples:
        wallet account update "Assets > BoursoBank" --name "Boursorama"
        wallet account update 7 --description "Joint account"
    """
    if name is None and description is None:
        click.echo("Error: Nothing to update. Use --name and/or --description.", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    service = AccountService(db)
    target = resolve_account_or_exit(ctx, service, account)

    try:
        updated = service.update_account(target.id, name=name, description=description)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated account '{service.get_account_path(updated.id)}'")


@account_group.command("deactivate")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", "assume_yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def deactivate_account(ctx, account: str, assume_yes: bool) -> None:
    """Deactivate an account.

    ACCOUNT can be an account ID, path or name.

    The account must not have active sub-accounts. Its past transactions are
    kept and still count in balances.
    """
    db = ctx.obj["db"]
    service = AccountService(db)
    target = resolve_account_or_exit(ctx, service, account)
    path = service.get_account_path(target.id)

    if not assume_yes and not click.confirm(f"Deactivate account '{path}' (ID: {target.id})?"):
        click.echo("Deactivation cancelled.")
        return

    try:
        service.deactivate_account(target.id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deactivated account '{path}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
