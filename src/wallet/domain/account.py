"""Account domain service: the chart of accounts."""

import logging
from typing import Optional

from wallet.database.base import Database
from wallet.domain.entities import Account, AccountTreeNode, AccountType
from wallet.domain.errors import (
    AccountHasActiveChildrenError,
    AccountNotFoundError,
    DuplicateAccountNameError,
    InvalidAccountNameError,
    ParentAccountNotFoundError,
)
from wallet.domain.hierarchy import (
    PATH_SEPARATOR,
    account_path,
    build_tree,
    collect_descendant_ids,
    placement_depth,
)
from wallet.domain.money import Currency

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255

ROOT_ACCOUNTS: list[tuple[str, AccountType]] = [
    ("Assets", AccountType.ASSET),
    ("Liabilities", AccountType.LIABILITY),
    ("Equity", AccountType.EQUITY),
    ("Income", AccountType.INCOME),
    ("Expenses", AccountType.EXPENSE),
]


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidAccountNameError(name, "name must not be empty")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise InvalidAccountNameError(
            cleaned[:20] + "...", f"name must be at most {MAX_NAME_LENGTH} characters"
        )
    if PATH_SEPARATOR.strip() in cleaned:
        raise InvalidAccountNameError(cleaned, f"name must not contain '{PATH_SEPARATOR.strip()}'")
    return cleaned


class AccountService:
    """Service for managing the account hierarchy."""

    def __init__(self, db: Database, default_currency: Optional[Currency] = None):
        """Initialize account service.

        Args:
            db: Database instance
            default_currency: Currency for new root accounts (EUR if omitted)
        """
        self.db = db
        self.default_currency = default_currency or Currency.eur()

    def _accounts_by_id(self) -> dict[int, Account]:
        return {acc.id: acc for acc in self.db.list_accounts(include_inactive=True)}

    def create_account(
        self,
        name: str,
        account_type: AccountType,
        parent_id: Optional[int] = None,
        currency: Optional[Currency] = None,
        description: Optional[str] = None,
    ) -> Account:
        """Create a new account.

        Args:
            name: Account name, unique among active siblings
            account_type: Account classification, fixed for the account's lifetime
            parent_id: Optional parent account ID (None creates a root)
            currency: Account currency; defaults to the parent's currency, or the
                service default for roots
            description: Optional description

        Returns:
            The persisted account

        Raises:
            InvalidAccountNameError: If the name is empty, too long or contains '>'
            ParentAccountNotFoundError: If the parent does not exist or is inactive
            HierarchyTooDeepError: If the account would sit deeper than 5 levels
            CircularReferenceError: If the parent chain loops
            DuplicateAccountNameError: If an active sibling has the same name
            InvalidCurrencyError: If the currency is not a known currency code
        """
        name = _clean_name(name)
        if not isinstance(account_type, AccountType):
            raise TypeError(f"account_type must be an AccountType, got {account_type!r}")

        if parent_id is not None:
            accounts = self._accounts_by_id()
            parent = accounts.get(parent_id)
            if parent is None or not parent.is_active:
                raise ParentAccountNotFoundError(parent_id)
            placement_depth(accounts, parent_id)
            if currency is None:
                currency = parent.currency

        if self.db.find_active_account(name, parent_id) is not None:
            raise DuplicateAccountNameError(name, parent_id)

        # Only registry currencies can be read back from storage
        currency = Currency.from_code((currency or self.default_currency).code)
        account_id = self.db.create_account(
            name=name,
            account_type=account_type,
            parent_id=parent_id,
            currency_code=currency.code,
            description=description,
        )
        logger.info("Created %s account %s '%s' under %s", account_type.value, account_id, name, parent_id)
        return self.get_account(account_id)

    def initialize_root_accounts(self, currency: Optional[Currency] = None) -> list[Account]:
        """Create the five root accounts, one per account type, when missing.

        Returns:
            The root accounts in ROOT_ACCOUNTS order
        """
        roots = []
        for name, account_type in ROOT_ACCOUNTS:
            existing = self.db.find_active_account(name, None)
            if existing is None:
                existing = self.create_account(name, account_type, currency=currency)
            roots.append(existing)
        return roots

    def get_account(self, account_id: int) -> Account:
        """Get account by ID.

        Raises:
            AccountNotFoundError: If no account has this ID
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def find_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, or None if it does not exist."""
        return self.db.get_account(account_id)

    def list_accounts(self, include_inactive: bool = False) -> list[Account]:
        """List accounts ordered by name."""
        return self.db.list_accounts(include_inactive=include_inactive)

    def get_children(self, parent_id: int, include_inactive: bool = False) -> list[Account]:
        """List direct children of an account, ordered by name."""
        self.get_account(parent_id)
        return self.db.list_child_accounts(parent_id, include_inactive=include_inactive)

    def get_root_accounts(
        self, account_type: Optional[AccountType] = None, include_inactive: bool = False
    ) -> list[Account]:
        """List root accounts, optionally of one type.

        Args:
            account_type: Only roots of this type
            include_inactive: Also list deactivated roots
        """
        roots = self.db.list_child_accounts(None, include_inactive=include_inactive)
        if account_type is not None:
            roots = [root for root in roots if root.account_type is account_type]
        return roots

    def get_account_tree(self, include_inactive: bool = False) -> list[AccountTreeNode]:
        """Get the whole forest in pre-order, children ordered by name.

        Args:
            include_inactive: Also list inactive accounts and their subtrees

        Returns:
            Nodes carrying the account, its 0-indexed level and its breadcrumb path
        """
        return build_tree(self.db.list_accounts(include_inactive=True), include_inactive)

    def get_descendant_ids(self, account_id: int) -> list[int]:
        """Get the account ID followed by all descendant IDs, inactive ones included."""
        self.get_account(account_id)
        return collect_descendant_ids(self.db.list_accounts(include_inactive=True), account_id)

    def get_account_path(self, account_id: int) -> str:
        """Get the breadcrumb for an account (e.g. "Assets > BoursoBank")."""
        self.get_account(account_id)
        return account_path(self._accounts_by_id(), account_id)

    def get_account_by_path(self, path: str) -> Optional[Account]:
        """Find an active account by breadcrumb path.

        Args:
            path: Names from the root, separated by '>' (e.g. "Assets > BoursoBank")

        Returns:
            Account or None if any segment is missing
        """
        parts = [part.strip() for part in path.split(PATH_SEPARATOR.strip())]
        if not parts or any(not part for part in parts):
            return None

        current: Optional[Account] = None
        for part in parts:
            current = self.db.find_active_account(part, current.id if current else None)
            if current is None:
                return None
        return current

    def update_account(
        self,
        account_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Account:
        """Update the mutable fields of an account.

        Type and parent cannot be changed once an account exists.

        Args:
            account_id: Account ID to update
            name: New name (None keeps the current name)
            description: New description (None keeps the current description,
                an empty string clears it)

        Raises:
            AccountNotFoundError: If the account does not exist
            InvalidAccountNameError: If the new name is invalid
            DuplicateAccountNameError: If an active sibling already has the new name
        """
        account = self.get_account(account_id)

        new_name = account.name if name is None else _clean_name(name)
        if new_name != account.name and account.is_active:
            existing = self.db.find_active_account(new_name, account.parent_id)
            if existing is not None and existing.id != account_id:
                raise DuplicateAccountNameError(new_name, account.parent_id)

        new_description = account.description
        if description is not None:
            new_description = description or None

        self.db.update_account(account_id, name=new_name, description=new_description)
        logger.info("Updated account %s", account_id)
        return self.get_account(account_id)

    def deactivate_account(self, account_id: int) -> None:
        """Soft-delete an account.

        Historical entries are untouched and keep counting in balances.

        Raises:
            AccountNotFoundError: If the account does not exist
            AccountHasActiveChildrenError: If any active account has it as parent
        """
        self.get_account(account_id)
        active_children = self.db.list_child_accounts(account_id, include_inactive=False)
        if active_children:
            raise AccountHasActiveChildrenError(account_id, len(active_children))

        self.db.deactivate_account(account_id)
        logger.info("Deactivated account %s", account_id)
