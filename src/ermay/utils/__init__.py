"""Utility functions for ermay."""

from ermay.utils.date_parser import parse_date
from ermay.utils.amount_parser import parse_amount
from ermay.utils.formatting import format_money, format_record_date

__all__ = ["parse_date", "parse_amount", "format_money", "format_record_date"]
