"""Double-entry validation.

Pure functions of their input: no database access, no hidden state.
"""

from typing import Sequence

from wallet.domain.entities import EntryType, TransactionEntryInput
from wallet.domain.errors import (
    InsufficientEntriesError,
    MixedCurrenciesError,
    NegativeAmountError,
    UnbalancedTransactionError,
)

MIN_ENTRIES = 2


def validate_transaction_entries(entries: Sequence[TransactionEntryInput]) -> None:
    """Check that a set of entries forms a valid double-entry transaction.

    Rules, in order:
        1. at least two entries
        2. every amount strictly positive (direction lives in entry_type)
        3. a single currency across all entries
        4. per currency, total debits equal total credits

    Raises:
        InsufficientEntriesError, NegativeAmountError, MixedCurrenciesError,
        UnbalancedTransactionError
    """
    if len(entries) < MIN_ENTRIES:
        raise InsufficientEntriesError(len(entries))

    for entry in entries:
        if entry.amount.amount_minor <= 0:
            raise NegativeAmountError(entry.amount.amount_minor)

    # Totals per currency; more than one currency is rejected below.
    totals: dict[str, dict[EntryType, int]] = {}
    for entry in entries:
        group = totals.setdefault(
            entry.amount.currency.code, {EntryType.DEBIT: 0, EntryType.CREDIT: 0}
        )
        group[entry.entry_type] += entry.amount.amount_minor

    if len(totals) > 1:
        raise MixedCurrenciesError(sorted(totals))

    for code, group in totals.items():
        debits = group[EntryType.DEBIT]
        credits = group[EntryType.CREDIT]
        if debits != credits:
            raise UnbalancedTransactionError(debits=debits, credits=credits, currency=code)
