"""Tests for reporting queries."""

from datetime import date

from conftest import credit, debit
from wallet.domain.entities import AccountType
from wallet.domain.money import Currency, Money


def eur(amount_minor):
    return Money.from_minor_units(amount_minor, Currency.eur())


def test_empty_ledger(report_service, root_accounts):
    assert report_service.get_total_assets() == eur(0)
    assert report_service.get_total_liabilities() == eur(0)
    assert report_service.get_net_worth() == eur(0)
    assert report_service.get_recent_transactions() == []


def test_totals_without_any_accounts(report_service):
    assert report_service.get_net_worth() == eur(0)


def test_net_worth(report_service, transaction_service, sample_accounts, salary_transaction):
    transaction_service.create_transaction(
        description="Restaurant",
        transaction_date=date(2024, 6, 29),
        entries=[
            debit(sample_accounts["Alimentation"], 6000),
            credit(sample_accounts["Carte"], 6000),
        ],
    )
    assert report_service.get_total_assets() == eur(250000)
    assert report_service.get_total_liabilities() == eur(6000)
    assert report_service.get_net_worth() == eur(244000)


def test_monthly_income_and_expenses(report_service, transaction_service, sample_accounts, salary_transaction):
    transaction_service.create_transaction(
        description="Courses mai",
        transaction_date=date(2024, 5, 31),
        entries=[
            debit(sample_accounts["Alimentation"], 1500),
            credit(sample_accounts["Compte Courant"], 1500),
        ],
    )
    transaction_service.create_transaction(
        description="Courses juin",
        transaction_date=date(2024, 6, 1),
        entries=[
            debit(sample_accounts["Alimentation"], 4200),
            credit(sample_accounts["Compte Courant"], 4200),
        ],
    )
    assert report_service.get_monthly_income(2024, 6) == eur(250000)
    assert report_service.get_monthly_expenses(2024, 6) == eur(4200)
    assert report_service.get_monthly_expenses(2024, 5) == eur(1500)
    assert report_service.get_monthly_income(2024, 5) == eur(0)


def test_current_month(report_service, sample_accounts, salary_transaction):
    today = date(2024, 6, 30)
    assert report_service.get_current_month_income(today=today) == eur(250000)
    assert report_service.get_current_month_expenses(today=today) == eur(0)
    assert report_service.get_current_month_income(today=date(2024, 7, 1)) == eur(0)


def test_recent_and_monthly_transactions(report_service, transaction_service, sample_accounts, salary_transaction):
    for day in range(1, 4):
        transaction_service.create_transaction(
            description=f"Café {day}",
            transaction_date=date(2024, 7, day),
            entries=[
                debit(sample_accounts["Alimentation"], 250),
                credit(sample_accounts["Compte Courant"], 250),
            ],
        )
    recent = report_service.get_recent_transactions(limit=2)
    assert [t.description for t in recent] == ["Café 3", "Café 2"]

    june = report_service.get_monthly_transactions(2024, 6)
    assert [t.id for t in june] == [salary_transaction.id]


def test_totals_include_deactivated_roots(
    report_service, account_service, transaction_service, sample_accounts, salary_transaction
):
    old_bank = account_service.create_account("Old Bank", AccountType.ASSET)
    transaction_service.create_transaction(
        description="Prime",
        transaction_date=date(2024, 6, 30),
        entries=[
            debit(old_bank, 10000),
            credit(sample_accounts["Salaire"], 10000),
        ],
    )
    account_service.deactivate_account(old_bank.id)

    assert report_service.get_total_assets() == eur(260000)
    assert report_service.get_net_worth() == eur(260000)
    assert report_service.get_monthly_income(2024, 6) == eur(260000)

    totals = {
        account_type: sum(
            report_service.balance_service.calculate_hierarchical_balance(root.id).amount_minor
            for root in account_service.get_root_accounts(account_type, include_inactive=True)
        )
        for account_type in AccountType
    }
    assert totals[AccountType.ASSET] == (
        totals[AccountType.LIABILITY]
        + totals[AccountType.EQUITY]
        + totals[AccountType.INCOME]
        - totals[AccountType.EXPENSE]
    )
