"""Balance aggregation over the account hierarchy."""

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from wallet.database.base import Database
from wallet.domain.account import AccountService
from wallet.domain.entities import Account, TransactionEntry
from wallet.domain.errors import CurrencyMismatchError
from wallet.domain.money import Money

logger = logging.getLogger(__name__)


def fold_entries(account: Account, entries: Iterable[TransactionEntry]) -> Money:
    """Fold entries into a balance using the sign rule of ``account``'s type.

    Starts from zero in the account's currency, so no entries gives zero.
    """
    total = 0
    for entry in entries:
        if entry.amount.currency != account.currency:
            raise CurrencyMismatchError(account.currency.code, entry.amount.currency.code)
        total += account.account_type.signed_amount(entry.entry_type, entry.amount.amount_minor)
    return Money.from_minor_units(total, account.currency)


class BalanceService:
    """Computes direct and hierarchical account balances.

    Balances are derived from entries regardless of whether the account is
    still active.
    """

    def __init__(self, db: Database, account_service: Optional[AccountService] = None):
        self.db = db
        self.account_service = account_service or AccountService(db)

    def calculate_direct_balance(
        self,
        account_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Money:
        """Balance of the entries posted directly to an account.

        Args:
            account_id: Account ID
            start_date: Optional inclusive start on the transaction date
            end_date: Optional inclusive end on the transaction date

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        account = self.account_service.get_account(account_id)
        entries = self.db.list_entries([account_id], start_date=start_date, end_date=end_date)
        return fold_entries(account, entries)

    def calculate_hierarchical_balance(
        self,
        account_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Money:
        """Balance of an account plus all of its descendants.

        Raises:
            AccountNotFoundError: If the account does not exist
            CurrencyMismatchError: If a descendant uses another currency
        """
        root = self.account_service.get_account(account_id)
        subtree_ids = self.account_service.get_descendant_ids(account_id)
        accounts = {acc_id: self.account_service.get_account(acc_id) for acc_id in subtree_ids}

        for account in accounts.values():
            if account.currency != root.currency:
                raise CurrencyMismatchError(root.currency.code, account.currency.code)

        by_account: dict[int, list[TransactionEntry]] = defaultdict(list)
        for entry in self.db.list_entries(subtree_ids, start_date=start_date, end_date=end_date):
            by_account[entry.account_id].append(entry)

        balances = [fold_entries(accounts[acc_id], by_account[acc_id]) for acc_id in subtree_ids]
        total = Money.sum(balances, root.currency)
        logger.debug("Hierarchical balance of %s over %d accounts: %s", account_id, len(subtree_ids), total)
        return total
