"""Turning ACCOUNT arguments typed on the command line into accounts."""

import click
from wallet.cli.error_handling import handle_domain_error
from wallet.domain.account import AccountService
from wallet.domain.entities import Account
from wallet.domain.errors import StorageError
from wallet.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, reference: str
) -> Account:
    """Look up an account by ID, "Assets > BoursoBank" path or unique name.

    Exits with status 1 when nothing, or more than one account, matches.
    """
    try:
        return account_service.get_account(resolve_account(account_service, reference))
    except (ValueError, StorageError) as exc:
        handle_domain_error(ctx, exc)
