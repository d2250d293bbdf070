"""Mapper functions to convert between domain models and SQLAlchemy models.

Enumerations are stored as lowercase strings; the conversions below are the
only place those strings are read or written.
"""

from datetime import datetime, UTC
from typing import Optional

from wallet.domain import entities as domain
from wallet.domain.money import Currency, Money
from wallet.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    TransactionEntry as ORMTransactionEntry,
)

_ACCOUNT_TYPES = {member.value: member for member in domain.AccountType}
_ENTRY_TYPES = {member.value: member for member in domain.EntryType}


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; timestamps are always written in UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def account_type_to_storage(account_type: domain.AccountType) -> str:
    return account_type.value


def account_type_from_storage(value: str) -> domain.AccountType:
    try:
        return _ACCOUNT_TYPES[value]
    except KeyError:
        raise ValueError(f"Unknown account type in storage: {value!r}") from None


def entry_type_to_storage(entry_type: domain.EntryType) -> str:
    return entry_type.value


def entry_type_from_storage(value: str) -> domain.EntryType:
    try:
        return _ENTRY_TYPES[value]
    except KeyError:
        raise ValueError(f"Unknown entry type in storage: {value!r}") from None


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=account_type_from_storage(orm_account.account_type),
        parent_id=orm_account.parent_id,
        currency=Currency.from_code(orm_account.currency),
        description=orm_account.description,
        is_active=bool(orm_account.is_active),
        created_at=_as_utc(orm_account.created_at),
        updated_at=_as_utc(orm_account.updated_at),
    )


def entry_to_domain(orm_entry: ORMTransactionEntry) -> domain.TransactionEntry:
    """Convert SQLAlchemy TransactionEntry model to domain TransactionEntry entity."""
    return domain.TransactionEntry(
        id=orm_entry.id,
        transaction_id=orm_entry.transaction_id,
        account_id=orm_entry.account_id,
        amount=Money.from_minor_units(
            orm_entry.amount_minor, Currency.from_code(orm_entry.currency)
        ),
        entry_type=entry_type_from_storage(orm_entry.entry_type),
        description=orm_entry.description,
        created_at=_as_utc(orm_entry.created_at),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model (with entries) to domain Transaction entity."""
    tags = orm_transaction.tags
    return domain.Transaction(
        id=orm_transaction.id,
        description=orm_transaction.description,
        reference=orm_transaction.reference,
        transaction_date=orm_transaction.transaction_date,
        created_at=_as_utc(orm_transaction.created_at),
        tags=tuple(tags) if tags is not None else None,
        notes=orm_transaction.notes,
        entries=tuple(entry_to_domain(entry) for entry in orm_transaction.entries),
    )
