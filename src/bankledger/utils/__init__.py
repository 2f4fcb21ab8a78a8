"""Utility functions for bankledger."""

from bankledger.utils.date_parser import parse_history_bound
from bankledger.utils.amount_parser import parse_amount, format_amount

__all__ = ["parse_history_bound", "parse_amount", "format_amount"]
