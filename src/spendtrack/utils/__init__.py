"""Utility functions for spendtrack."""

from spendtrack.utils.date_parser import parse_date, parse_month
from spendtrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_month", "parse_amount"]
