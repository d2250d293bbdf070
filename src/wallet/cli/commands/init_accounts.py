"""Initialize the chart of accounts."""

import click
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.errors import DomainError, StorageError


# Optional starter accounts: (name, parent path)
EXAMPLE_ACCOUNTS = [
    ("BoursoBank", "Assets"),
    ("Compte Courant", "Assets > BoursoBank"),
    ("Livret A", "Assets > BoursoBank"),
    ("Crédit Agricole", "Assets"),
    ("Carte de crédit", "Liabilities"),
    ("Capital initial", "Equity"),
    ("Salaire", "Income"),
    ("Primes", "Income"),
    ("Alimentation", "Expenses"),
    ("Transport", "Expenses"),
    ("Logement", "Expenses"),
]


@click.command("init")
@click.option("--with-examples", is_flag=True, help="Also create a starter set of sub-accounts")
@click.pass_context
def init_accounts(ctx, with_examples: bool):
    """Create the five root accounts (Assets, Liabilities, Equity, Income, Expenses).

    Running it again is harmless: existing roots are kept.
    """
    db = ctx.obj["db"]
    service = AccountService(db, default_currency=ctx.obj["currency"])

    try:
        roots = service.initialize_root_accounts()
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo("Root accounts:")
    for root in roots:
        click.echo(f"  {root.name:12s} ({root.account_type.value}, ID: {root.id})")

    if not with_examples:
        return

    created = 0
    errors = 0
    for name, parent_path in EXAMPLE_ACCOUNTS:
        parent = service.get_account_by_path(parent_path)
        if parent is None:
            click.echo(f"Warning: Parent '{parent_path}' not found for '{name}'", err=True)
            errors += 1
            continue
        if db.find_active_account(name, parent.id) is not None:
            continue
        try:
            service.create_account(name, parent.account_type, parent_id=parent.id)
            created += 1
        except DomainError as e:
            click.echo(f"Warning: Could not create account '{name}': {e}", err=True)
            errors += 1

    if errors == 0:
        click.echo(f"Successfully created {created} example accounts.")
    else:
        click.echo(f"Created {created} example accounts with {errors} errors.")


def register_commands(cli):
    """Register init command with main CLI."""
    cli.add_command(init_accounts)
