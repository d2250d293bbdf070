"""Domain model entities for the ledger.

These are pure data classes representing business concepts, independent of
database schema. Enumerations are closed sets; their storage representation
is converted explicitly in the database mappers.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from enum import Enum
from typing import Optional

from wallet.domain.money import Currency, Money


class EntryType(Enum):
    """Direction of a transaction entry."""

    DEBIT = "debit"
    CREDIT = "credit"

    def opposite(self) -> "EntryType":
        return EntryType.CREDIT if self is EntryType.DEBIT else EntryType.DEBIT


class AccountType(Enum):
    """Account classification; decides the sign of debits and credits."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def normal_balance(self) -> EntryType:
        """Entry type that increases a balance of this type."""
        if self in (AccountType.ASSET, AccountType.EXPENSE):
            return EntryType.DEBIT
        return EntryType.CREDIT

    def signed_amount(self, entry_type: EntryType, amount_minor: int) -> int:
        """Apply the sign convention to a positive entry amount.

        | account type              | debit   | credit  |
        |---------------------------|---------|---------|
        | asset, expense            | +amount | -amount |
        | liability, equity, income | -amount | +amount |
        """
        if entry_type is self.normal_balance:
            return amount_minor
        return -amount_minor


@dataclass(frozen=True)
class Account:
    """Node of the chart of accounts."""

    id: Optional[int]
    name: str
    account_type: AccountType
    parent_id: Optional[int]
    currency: Currency
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True)
class AccountTreeNode:
    """Account positioned in the pre-order tree listing."""

    account: Account
    level: int
    path: str


@dataclass(frozen=True)
class TransactionEntryInput:
    """One leg of a transaction before it is persisted."""

    account_id: int
    amount: Money
    entry_type: EntryType
    description: Optional[str] = None


@dataclass(frozen=True)
class TransactionEntry:
    """Persisted transaction leg. The amount is always positive."""

    id: Optional[int]
    transaction_id: int
    account_id: int
    amount: Money
    entry_type: EntryType
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger transaction with two or more entries."""

    id: Optional[int]
    description: str
    reference: Optional[str]
    transaction_date: date
    created_at: datetime
    tags: Optional[tuple[str, ...]]
    notes: Optional[str]
    entries: tuple[TransactionEntry, ...] = field(default_factory=tuple)

    def entries_for_account(self, account_id: int) -> list[TransactionEntry]:
        return [entry for entry in self.entries if entry.account_id == account_id]
