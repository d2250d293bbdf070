"""Utility for resolving account references to IDs."""

from wallet.domain.account import AccountService
from wallet.domain.errors import AccountNotFoundError, NotFoundError, ValidationError, account_path_not_found


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve an account ID, breadcrumb path or name to an account ID.

    Args:
        account_service: AccountService instance
        account: ID (int or digit string), path ("Assets > BoursoBank") or the
            name of exactly one active account. A digit string that is not an
            existing ID is looked up as a name.

    Returns:
        Account ID

    Raises:
        NotFoundError: If nothing matches
        ValidationError: If a bare name matches several active accounts
    """
    reference = str(account).strip()
    if isinstance(account, int) or reference.isdigit():
        account_id = int(reference)
        if account_service.find_account(account_id) is not None:
            return account_id
        if isinstance(account, int):
            raise AccountNotFoundError(account_id)
        # Digit-only names such as "2024" are still reachable by name

    if ">" in reference:
        found = account_service.get_account_by_path(reference)
        if found is None:
            raise NotFoundError(account_path_not_found(reference))
        return found.id

    matches = [acc for acc in account_service.list_accounts() if acc.name == reference]
    if not matches:
        if reference.isdigit():
            raise AccountNotFoundError(int(reference))
        raise NotFoundError(account_path_not_found(reference))
    if len(matches) > 1:
        paths = ", ".join(account_service.get_account_path(acc.id) for acc in matches)
        raise ValidationError(f"Account name '{reference}' is ambiguous: {paths}")
    return matches[0].id
