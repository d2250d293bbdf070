"""Currency and Money value types.

Amounts are integer counts of minor units (cents for EUR); no floating point
is involved anywhere.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
from functools import total_ordering
from typing import Iterable, Union

from wallet.domain.errors import (
    CurrencyMismatchError,
    InvalidCurrencyError,
    MoneyOverflowError,
)

MIN_AMOUNT_MINOR = -(2**63)
MAX_AMOUNT_MINOR = 2**63 - 1


@dataclass(frozen=True, eq=False)
class Currency:
    """Currency descriptor, compared by code."""

    code: str
    minor_unit_scale: int
    symbol: str

    def __post_init__(self):
        if len(self.code) != 3 or not self.code.isalpha():
            raise InvalidCurrencyError(self.code)
        if self.minor_unit_scale < 0:
            raise InvalidCurrencyError(self.code)
        object.__setattr__(self, "code", self.code.upper())

    def __eq__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self):
        return hash(self.code)

    def __str__(self):
        return self.code

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """Look up a known currency by its code (case-insensitive)."""
        try:
            return KNOWN_CURRENCIES[code.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidCurrencyError(code) from None

    @classmethod
    def eur(cls) -> "Currency":
        return KNOWN_CURRENCIES["EUR"]


KNOWN_CURRENCIES: dict[str, Currency] = {
    c.code: c
    for c in (
        Currency("EUR", 2, "€"),
        Currency("USD", 2, "$"),
        Currency("GBP", 2, "£"),
        Currency("CHF", 2, "CHF"),
        Currency("JPY", 0, "¥"),
        Currency("BTC", 8, "₿"),
    )
}


def _check_range(amount_minor: int) -> int:
    if not MIN_AMOUNT_MINOR <= amount_minor <= MAX_AMOUNT_MINOR:
        raise MoneyOverflowError(amount_minor)
    return amount_minor


@total_ordering
@dataclass(frozen=True)
class Money:
    """Exact amount in a single currency.

    Equal iff both ``amount_minor`` and ``currency`` match. Arithmetic and
    ordering between different currencies raise CurrencyMismatchError.
    """

    amount_minor: int
    currency: Currency

    def __post_init__(self):
        if isinstance(self.amount_minor, bool) or not isinstance(self.amount_minor, int):
            raise TypeError(f"amount_minor must be an int, got {type(self.amount_minor).__name__}")
        _check_range(self.amount_minor)

    @classmethod
    def from_decimal(cls, amount: Union[Decimal, str, int], currency: Currency) -> "Money":
        """Build from a decimal amount, rounding half-to-even to the nearest minor unit."""
        scaled = Decimal(amount).scaleb(currency.minor_unit_scale)
        if not scaled.is_finite():
            raise MoneyOverflowError(amount)
        minor = int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_EVEN))
        return cls(_check_range(minor), currency)

    @classmethod
    def from_minor_units(cls, amount_minor: int, currency: Currency) -> "Money":
        return cls(amount_minor, currency)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(0, currency)

    @classmethod
    def sum(cls, values: Iterable["Money"], currency: Currency) -> "Money":
        """Add up values, starting from zero in ``currency``."""
        total = cls.zero(currency)
        for value in values:
            total = total + value
        return total

    def to_decimal(self) -> Decimal:
        return Decimal(self.amount_minor).scaleb(-self.currency.minor_unit_scale)

    def is_zero(self) -> bool:
        return self.amount_minor == 0

    def _require_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return Money(_check_range(self.amount_minor + other.amount_minor), self.currency)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return Money(_check_range(self.amount_minor - other.amount_minor), self.currency)

    def __neg__(self):
        return Money(_check_range(-self.amount_minor), self.currency)

    def __abs__(self):
        return Money(_check_range(abs(self.amount_minor)), self.currency)

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return self.amount_minor < other.amount_minor

    def format(self) -> str:
        """Render for display, e.g. ``€2,500.00`` or ``-€12.30``."""
        scale = self.currency.minor_unit_scale
        value = abs(self.to_decimal())
        sign = "-" if self.amount_minor < 0 else ""
        return f"{sign}{self.currency.symbol}{value:,.{scale}f}"

    def __str__(self):
        return self.format()
