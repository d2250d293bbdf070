"""Tests for database mappers."""

import pytest
from datetime import datetime, date, UTC

from wallet.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    TransactionEntry as ORMTransactionEntry,
)
from wallet.database.mappers import (
    account_to_domain,
    account_type_from_storage,
    entry_type_from_storage,
    transaction_to_domain,
)
from wallet.domain.entities import Account, AccountType, EntryType, Transaction


class TestAccountMapper:
    def test_account_to_domain(self):
        """Test converting ORM Account to domain Account."""
        now = datetime.now(UTC)
        orm_account = ORMAccount(
            id=3,
            name="Livret A",
            account_type="asset",
            parent_id=2,
            currency="EUR",
            description="Épargne",
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        account = account_to_domain(orm_account)

        assert isinstance(account, Account)
        assert account.id == 3
        assert account.account_type is AccountType.ASSET
        assert account.parent_id == 2
        assert account.currency.code == "EUR"
        assert account.description == "Épargne"
        assert account.is_root is False
        assert account.created_at == now

    def test_naive_timestamps_become_utc(self):
        naive = datetime(2024, 6, 1, 12, 0, 0)
        orm_account = ORMAccount(
            id=1,
            name="Assets",
            account_type="asset",
            parent_id=None,
            currency="EUR",
            is_active=False,
            created_at=naive,
            updated_at=naive,
        )
        account = account_to_domain(orm_account)
        assert account.created_at == naive.replace(tzinfo=UTC)
        assert account.is_active is False
        assert account.is_root is True


class TestTransactionMapper:
    def test_transaction_with_entries(self):
        now = datetime.now(UTC)
        orm_txn = ORMTransaction(
            id=10,
            description="Salaire",
            reference="VIR-1",
            transaction_date=date(2024, 6, 28),
            created_at=now,
            tags=["salary"],
            notes=None,
        )
        orm_txn.entries = [
            ORMTransactionEntry(
                id=1,
                transaction_id=10,
                account_id=5,
                amount_minor=250000,
                currency="EUR",
                entry_type="debit",
                created_at=now,
            ),
            ORMTransactionEntry(
                id=2,
                transaction_id=10,
                account_id=8,
                amount_minor=250000,
                currency="EUR",
                entry_type="credit",
                created_at=now,
            ),
        ]
        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, Transaction)
        assert txn.tags == ("salary",)
        assert [e.entry_type for e in txn.entries] == [EntryType.DEBIT, EntryType.CREDIT]
        assert txn.entries[0].amount.amount_minor == 250000
        assert txn.entries_for_account(8)[0].id == 2

    def test_no_tags(self):
        orm_txn = ORMTransaction(
            id=1,
            description="Sans tags",
            transaction_date=date(2024, 1, 1),
            created_at=datetime.now(UTC),
            tags=None,
        )
        assert transaction_to_domain(orm_txn).tags is None


class TestEnumConversions:
    def test_all_account_types_round_trip(self):
        for account_type in AccountType:
            assert account_type_from_storage(account_type.value) is account_type

    def test_unknown_values_rejected(self):
        with pytest.raises(ValueError):
            account_type_from_storage("revenue")
        with pytest.raises(ValueError):
            entry_type_from_storage("DEBIT")
