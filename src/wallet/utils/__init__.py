"""Utility functions for wallet."""

from wallet.utils.date_parser import parse_date, month_range
from wallet.utils.amount_parser import parse_amount, parse_money

__all__ = ["parse_date", "month_range", "parse_amount", "parse_money"]
