"""Shared pytest fixtures for wallet tests."""

import tempfile
import os
from datetime import date
import pytest

from wallet.database.factories import create_sqlite_database
from wallet.domain.account import AccountService
from wallet.domain.balance import BalanceService
from wallet.domain.entities import AccountType, EntryType, TransactionEntryInput
from wallet.domain.money import Currency, Money
from wallet.domain.report import ReportService
from wallet.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def eur():
    return Currency.eur()


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def balance_service(temp_db, account_service):
    """Create a BalanceService with a temporary database."""
    return BalanceService(temp_db, account_service)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def root_accounts(account_service):
    """Seed the five root accounts and return them keyed by type."""
    roots = account_service.initialize_root_accounts()
    return {root.account_type: root for root in roots}


@pytest.fixture
def sample_accounts(account_service, root_accounts):
    """Create a small chart of accounts and return accounts keyed by name."""
    assets = root_accounts[AccountType.ASSET]
    bank = account_service.create_account("BoursoBank", AccountType.ASSET, parent_id=assets.id)
    checking = account_service.create_account("Compte Courant", AccountType.ASSET, parent_id=bank.id)
    savings = account_service.create_account("Livret A", AccountType.ASSET, parent_id=bank.id)
    card = account_service.create_account(
        "Carte", AccountType.LIABILITY, parent_id=root_accounts[AccountType.LIABILITY].id
    )
    capital = account_service.create_account(
        "Capital initial", AccountType.EQUITY, parent_id=root_accounts[AccountType.EQUITY].id
    )
    salary = account_service.create_account(
        "Salaire", AccountType.INCOME, parent_id=root_accounts[AccountType.INCOME].id
    )
    groceries = account_service.create_account(
        "Alimentation", AccountType.EXPENSE, parent_id=root_accounts[AccountType.EXPENSE].id
    )
    return {
        "Assets": assets,
        "BoursoBank": bank,
        "Compte Courant": checking,
        "Livret A": savings,
        "Carte": card,
        "Capital initial": capital,
        "Salaire": salary,
        "Alimentation": groceries,
    }


def entry(account, amount_minor, entry_type, currency=None):
    """Build a TransactionEntryInput for an account."""
    return TransactionEntryInput(
        account_id=account.id,
        amount=Money.from_minor_units(amount_minor, currency or account.currency),
        entry_type=entry_type,
    )


def debit(account, amount_minor, currency=None):
    return entry(account, amount_minor, EntryType.DEBIT, currency)


def credit(account, amount_minor, currency=None):
    return entry(account, amount_minor, EntryType.CREDIT, currency)


@pytest.fixture
def salary_transaction(transaction_service, sample_accounts):
    """Record a €2,500.00 salary into the checking account."""
    return transaction_service.create_transaction(
        description="Salaire juin",
        transaction_date=date(2024, 6, 28),
        entries=[
            debit(sample_accounts["Compte Courant"], 250000),
            credit(sample_accounts["Salaire"], 250000),
        ],
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
