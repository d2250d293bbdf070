"""Tests for the SQLAlchemy storage layer."""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from conftest import credit, debit
from wallet.database.base import Database
from wallet.database.factories import DB_PATH_ENV_VAR, create_sqlite_database, default_database_path
from wallet.database.models import Account as ORMAccount, Transaction as ORMTransaction, TransactionEntry as ORMEntry
from wallet.domain.entities import Account, AccountType, Transaction
from wallet.domain.errors import AccountNotFoundError, StorageError


def test_database_implements_interface(temp_db):
    assert isinstance(temp_db, Database)


def test_accounts_are_domain_entities(temp_db):
    account_id = temp_db.create_account("Assets", AccountType.ASSET, None, "EUR")
    account = temp_db.get_account(account_id)
    assert isinstance(account, Account)
    assert account.account_type is AccountType.ASSET
    assert account.currency.code == "EUR"
    assert temp_db.get_account(account_id + 1) is None


def test_list_child_accounts_roots(temp_db):
    assets = temp_db.create_account("Assets", AccountType.ASSET, None, "EUR")
    temp_db.create_account("Bank", AccountType.ASSET, assets, "EUR")
    roots = temp_db.list_child_accounts(None)
    assert [a.name for a in roots] == ["Assets"]


def test_update_missing_account(temp_db):
    with pytest.raises(AccountNotFoundError):
        temp_db.update_account(42, "Ghost", None)


def test_duplicate_active_sibling_is_storage_error(temp_db):
    assets = temp_db.create_account("Assets", AccountType.ASSET, None, "EUR")
    temp_db.create_account("Cash", AccountType.ASSET, assets, "EUR")
    with pytest.raises(StorageError):
        temp_db.create_account("Cash", AccountType.ASSET, assets, "EUR")
    # Session is usable after the failure
    assert len(temp_db.list_accounts()) == 2


def test_transaction_round_trip(temp_db, transaction_service, salary_transaction):
    txn = temp_db.get_transaction(salary_transaction.id)
    assert isinstance(txn, Transaction)
    assert txn == salary_transaction
    assert temp_db.get_transaction(salary_transaction.id + 100) is None


def test_failed_entry_rolls_back_whole_transaction(temp_db, sample_accounts):
    with pytest.raises(StorageError):
        temp_db.create_transaction(
            description="Half written",
            transaction_date=date(2024, 6, 1),
            entries=[
                debit(sample_accounts["Compte Courant"], 100),
                credit(sample_accounts["Salaire"], -100),
            ],
        )
    assert temp_db.list_transactions() == []
    assert temp_db.list_entries([sample_accounts["Compte Courant"].id]) == []


def test_deleting_transaction_cascades_to_entries(temp_db, sample_accounts, salary_transaction):
    session = temp_db._get_session()
    session.delete(session.get(ORMTransaction, salary_transaction.id))
    session.commit()
    assert session.query(ORMEntry).count() == 0


def test_account_with_entries_cannot_be_deleted(temp_db, sample_accounts, salary_transaction):
    session = temp_db._get_session()
    session.delete(session.get(ORMAccount, sample_accounts["Salaire"].id))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()
    assert temp_db.get_account(sample_accounts["Salaire"].id) is not None


def test_list_entries_date_filter(temp_db, sample_accounts, salary_transaction):
    account_ids = [sample_accounts["Compte Courant"].id]
    assert len(temp_db.list_entries(account_ids)) == 1
    assert temp_db.list_entries(account_ids, start_date=date(2024, 7, 1)) == []
    assert temp_db.list_entries([]) == []


class TestFactories:
    def test_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv(DB_PATH_ENV_VAR, str(tmp_path / "env.db"))
        db = create_sqlite_database()
        assert db.database_url == f"sqlite:///{tmp_path / 'env.db'}"

    def test_default_path_in_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_database_path() == tmp_path / ".wallet" / "wallet.db"
        assert (tmp_path / ".wallet").is_dir()

    def test_in_memory_database(self):
        db = create_sqlite_database(":memory:")
        try:
            account_id = db.create_account("Assets", AccountType.ASSET, None, "EUR")
            assert db.get_account(account_id).name == "Assets"
        finally:
            db.disconnect()
