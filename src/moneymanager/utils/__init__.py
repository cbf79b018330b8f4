"""Utility functions for moneymanager."""

from moneymanager.utils.date_parser import parse_date, parse_datetime
from moneymanager.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_datetime", "parse_amount"]
