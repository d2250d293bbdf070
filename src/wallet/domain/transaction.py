"""Transaction domain service: the immutable ledger."""

import logging
from datetime import date
from typing import Optional, Sequence

from wallet.database.base import Database
from wallet.domain.entities import EntryType, Transaction, TransactionEntryInput
from wallet.domain.errors import (
    CurrencyMismatchError,
    InvalidAccountError,
    InvalidDescriptionError,
    TransactionNotFoundError,
    ValidationError,
)
from wallet.domain.money import Money
from wallet.domain.validation import validate_transaction_entries

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for recording and reading transactions.

    Transactions are never updated or deleted. A mistake is
    corrected by recording a reversal.
    """

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        description: str,
        transaction_date: date,
        entries: Sequence[TransactionEntryInput],
        reference: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        """Record a balanced transaction.

        Args:
            description: Non-empty description
            transaction_date: Calendar date of the transaction
            entries: Two or more debit/credit legs
            reference: Optional external reference
            tags: Optional list of tags
            notes: Optional notes

        Returns:
            The persisted transaction with assigned IDs

        Raises:
            InvalidDescriptionError: If the description is blank
            InsufficientEntriesError, NegativeAmountError, MixedCurrenciesError,
            UnbalancedTransactionError: If the entries do not balance
            InvalidAccountError: If an entry references a missing or inactive account
            CurrencyMismatchError: If an entry's currency differs from its account's
        """
        description = (description or "").strip()
        if not description:
            raise InvalidDescriptionError()

        entries = list(entries)
        try:
            validate_transaction_entries(entries)
        except ValidationError as exc:
            logger.debug("Rejected transaction '%s': %s", description, exc)
            raise

        for entry in entries:
            account = self.db.get_account(entry.account_id)
            if account is None or not account.is_active:
                raise InvalidAccountError(entry.account_id)
            if account.currency != entry.amount.currency:
                raise CurrencyMismatchError(account.currency.code, entry.amount.currency.code)

        transaction_id = self.db.create_transaction(
            description=description,
            transaction_date=transaction_date,
            entries=entries,
            reference=reference,
            tags=list(tags) if tags is not None else None,
            notes=notes,
        )
        logger.info(
            "Recorded transaction %s '%s' on %s with %d entries",
            transaction_id,
            description,
            transaction_date,
            len(entries),
        )
        return self.get_transaction(transaction_id)

    def create_simple_transaction(
        self,
        description: str,
        transaction_date: date,
        amount: Money,
        from_account_id: int,
        to_account_id: int,
        reference: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        """Record a two-leg transaction moving ``amount`` between accounts.

        The source account is credited and the destination account is debited.
        """
        entries = [
            TransactionEntryInput(
                account_id=from_account_id, amount=amount, entry_type=EntryType.CREDIT
            ),
            TransactionEntryInput(
                account_id=to_account_id, amount=amount, entry_type=EntryType.DEBIT
            ),
        ]
        return self.create_transaction(
            description=description,
            transaction_date=transaction_date,
            entries=entries,
            reference=reference,
            tags=tags,
            notes=notes,
        )

    def create_reversal(
        self,
        transaction_id: int,
        transaction_date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> Transaction:
        """Record a compensating transaction that cancels another one.

        Every entry is copied with its direction swapped.

        Args:
            transaction_id: Transaction to reverse
            transaction_date: Date of the reversal (defaults to today)
            description: Description (defaults to "Reversal of #<id>: <original>")
        """
        original = self.get_transaction(transaction_id)
        entries = [
            TransactionEntryInput(
                account_id=entry.account_id,
                amount=entry.amount,
                entry_type=entry.entry_type.opposite(),
                description=entry.description,
            )
            for entry in original.entries
        ]
        return self.create_transaction(
            description=description or f"Reversal of #{original.id}: {original.description}",
            transaction_date=transaction_date or date.today(),
            entries=entries,
            reference=f"reversal:{original.id}",
            tags=original.tags,
        )

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID.

        Raises:
            TransactionNotFoundError: If no transaction has this ID
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise TransactionNotFoundError(transaction_id)
        return txn

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions, newest first. All filters combine with AND.

        Args:
            start_date: Inclusive start date
            end_date: Inclusive end date
            account_id: Only transactions touching this account
            limit: Maximum number of results
            offset: Number of results to skip

        Raises:
            ValidationError: If limit or offset is negative
        """
        if limit is not None and limit < 0:
            raise ValidationError(f"limit must not be negative (got {limit})")
        if offset is not None and offset < 0:
            raise ValidationError(f"offset must not be negative (got {offset})")
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
            limit=limit,
            offset=offset,
        )
