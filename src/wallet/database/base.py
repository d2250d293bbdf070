"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from wallet.domain.entities import (
    Account,
    AccountType,
    Transaction,
    TransactionEntry,
    TransactionEntryInput,
)


class Database(ABC):
    """Abstract database interface for the ledger.

    The interface has no operation that updates or deletes a transaction or
    an entry: transactions are immutable once written.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        account_type: AccountType,
        parent_id: Optional[int],
        currency_code: str,
        description: Optional[str] = None,
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, include_inactive: bool = True) -> list[Account]:
        """List accounts ordered by name."""
        pass

    @abstractmethod
    def list_child_accounts(
        self, parent_id: Optional[int], include_inactive: bool = False
    ) -> list[Account]:
        """List direct children of an account (roots when parent_id is None)."""
        pass

    @abstractmethod
    def find_active_account(self, name: str, parent_id: Optional[int]) -> Optional[Account]:
        """Find the active account with this name under this parent."""
        pass

    @abstractmethod
    def update_account(
        self, account_id: int, name: str, description: Optional[str]
    ) -> None:
        """Update account name and description, bumping updated_at."""
        pass

    @abstractmethod
    def deactivate_account(self, account_id: int) -> None:
        """Mark an account inactive, bumping updated_at."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        description: str,
        transaction_date: date,
        entries: Sequence[TransactionEntryInput],
        reference: Optional[str] = None,
        tags: Optional[list[str]] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Write a transaction header and all of its entries atomically.

        Returns transaction ID. Nothing is visible unless every row was written.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction (with entries) by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions, newest transaction_date first.

        Args:
            start_date: Inclusive lower bound on transaction_date
            end_date: Inclusive upper bound on transaction_date
            account_id: Only transactions with at least one entry on this account
            limit: Maximum number of transactions
            offset: Number of transactions to skip
        """
        pass

    @abstractmethod
    def list_entries(
        self,
        account_ids: Sequence[int],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntry]:
        """List entries posted to any of the given accounts.

        Date bounds are inclusive and apply to the owning transaction's date.
        """
        pass
