"""Reporting queries derived from balances."""

from datetime import date
from typing import Optional

from wallet.database.base import Database
from wallet.domain.account import AccountService
from wallet.domain.balance import BalanceService
from wallet.domain.entities import AccountType, Transaction
from wallet.domain.money import Currency, Money
from wallet.domain.transaction import TransactionService
from wallet.utils.date_parser import month_range


class ReportService:
    """Net worth, totals by account type and monthly income/expenses."""

    def __init__(self, db: Database, currency: Optional[Currency] = None):
        """Initialize report service.

        Args:
            db: Database instance
            currency: Currency totals are reported in (EUR if omitted). Root
                accounts in another currency make the totals fail.
        """
        self.db = db
        self.currency = currency or Currency.eur()
        self.account_service = AccountService(db, default_currency=self.currency)
        self.balance_service = BalanceService(db, self.account_service)
        self.transaction_service = TransactionService(db)

    def _total_by_type(
        self,
        account_type: AccountType,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Money:
        roots = self.account_service.get_root_accounts(account_type, include_inactive=True)
        return Money.sum(
            (
                self.balance_service.calculate_hierarchical_balance(
                    root.id, start_date=start_date, end_date=end_date
                )
                for root in roots
            ),
            self.currency,
        )

    def get_total_assets(self) -> Money:
        """Sum of hierarchical balances of every asset root."""
        return self._total_by_type(AccountType.ASSET)

    def get_total_liabilities(self) -> Money:
        """Sum of hierarchical balances of every liability root."""
        return self._total_by_type(AccountType.LIABILITY)

    def get_net_worth(self) -> Money:
        """Total assets minus total liabilities."""
        return self.get_total_assets() - self.get_total_liabilities()

    def get_monthly_income(self, year: int, month: int) -> Money:
        start, end = month_range(year, month)
        return self._total_by_type(AccountType.INCOME, start_date=start, end_date=end)

    def get_monthly_expenses(self, year: int, month: int) -> Money:
        start, end = month_range(year, month)
        return self._total_by_type(AccountType.EXPENSE, start_date=start, end_date=end)

    def get_current_month_income(self, today: Optional[date] = None) -> Money:
        today = today or date.today()
        return self.get_monthly_income(today.year, today.month)

    def get_current_month_expenses(self, today: Optional[date] = None) -> Money:
        today = today or date.today()
        return self.get_monthly_expenses(today.year, today.month)

    def get_recent_transactions(self, limit: int = 10) -> list[Transaction]:
        return self.transaction_service.list_transactions(limit=limit)

    def get_monthly_transactions(self, year: int, month: int) -> list[Transaction]:
        start, end = month_range(year, month)
        return self.transaction_service.list_transactions(start_date=start, end_date=end)
