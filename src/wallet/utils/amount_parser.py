"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from wallet.domain.money import Currency, Money

_AMOUNT_RE = re.compile(r"^\d+(\.\d+)?$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a positive amount string into a Decimal.

    Handles "123.45", "€123.45", "1,234.56" and "1 234,56" style input.
    Entry direction is given by debit/credit, so signs are rejected.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = re.sub(r"[$€£¥₿\s]", "", amount_str.strip())
    if text.startswith(("-", "+", "(")):
        raise ValueError(f"Amount must be given without a sign: '{amount_str}'")

    if "," in text and "." not in text and re.fullmatch(r"\d+,\d{1,2}", text):
        # Decimal comma
        text = text.replace(",", ".")
    else:
        text = text.replace(",", "")

    if not _AMOUNT_RE.match(text):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}") from e


def parse_money(amount_str: str, currency: Currency) -> Money:
    """Parse an amount string into Money, rounding to the currency's minor unit."""
    return Money.from_decimal(parse_amount(amount_str), currency)
