"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class MoneyError(DomainError):
    """Arithmetic on money values could not be performed."""


class StorageError(Exception):
    """The persistence layer failed.

    Deliberately not a DomainError: callers can tell "your input was invalid"
    apart from "the system failed".
    """


# Money


class InvalidCurrencyError(ValidationError):
    """Currency code or scale is not acceptable."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid currency code: {code}")


class CurrencyMismatchError(MoneyError):
    """Two money values with different currencies were combined."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"Currency mismatch: {left} vs {right}")


class MoneyOverflowError(MoneyError, OverflowError):
    """Amount does not fit in a signed 64-bit count of minor units."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Amount {value} exceeds the supported range")


# Transactions


class InsufficientEntriesError(ValidationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Transaction must have at least 2 entries (got {count})")


class NegativeAmountError(ValidationError):
    def __init__(self, amount_minor: int):
        self.amount_minor = amount_minor
        super().__init__(f"All transaction amounts must be positive (got {amount_minor})")


class MixedCurrenciesError(ValidationError):
    def __init__(self, currencies: list[str]):
        self.currencies = currencies
        super().__init__(
            f"Multi-currency transactions are not supported: {', '.join(currencies)}"
        )


class UnbalancedTransactionError(ValidationError):
    def __init__(self, debits: int, credits: int, currency: str):
        self.debits = debits
        self.credits = credits
        self.currency = currency
        super().__init__(
            f"Transaction is not balanced: debits={debits}, credits={credits} ({currency})"
        )


class InvalidDescriptionError(ValidationError):
    def __init__(self):
        super().__init__("Transaction description must not be empty")


class InvalidAccountError(ValidationError):
    """Entry references a missing or inactive account."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} does not exist or is inactive")


class TransactionNotFoundError(NotFoundError):
    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


# Accounts


class AccountNotFoundError(NotFoundError):
    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(account_not_found(account_id))


class InvalidAccountNameError(ValidationError):
    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Invalid account name '{name}': {reason}")


class DuplicateAccountNameError(ConflictError):
    def __init__(self, name: str, parent_id):
        self.name = name
        self.parent_id = parent_id
        where = "at root level" if parent_id is None else f"under account {parent_id}"
        super().__init__(f"An active account named '{name}' already exists {where}")


class ParentAccountNotFoundError(ValidationError):
    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent account {parent_id} does not exist or is inactive")


class HierarchyTooDeepError(ValidationError):
    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Account hierarchy would be {depth} levels deep (maximum is {max_depth})"
        )


class CircularReferenceError(ValidationError):
    def __init__(self, account_id):
        self.account_id = account_id
        super().__init__(f"Account hierarchy contains a cycle at account {account_id}")


class AccountHasActiveChildrenError(DependencyError):
    def __init__(self, account_id: int, child_count: int):
        self.account_id = account_id
        self.child_count = child_count
        super().__init__(
            f"Cannot deactivate account {account_id}: it has {child_count} "
            f"active child account{'s' if child_count != 1 else ''}"
        )


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_path_not_found(path: str) -> str:
    """Return message for missing account by path."""
    return f"Account '{path}' not found"
