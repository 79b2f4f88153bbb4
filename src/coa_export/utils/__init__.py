"""Utility functions for coa_export."""

from coa_export.utils.date_parser import parse_date, parse_iso_date
from coa_export.utils.amount_parser import parse_amount, format_amount
from coa_export.utils.escaping import escape_delimited, escape_tabbed

__all__ = [
    "parse_date",
    "parse_iso_date",
    "parse_amount",
    "format_amount",
    "escape_delimited",
    "escape_tabbed",
]
