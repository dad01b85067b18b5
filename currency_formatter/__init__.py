"""
Currency Formatter — locale-aware display of monetary amounts.

Styles: standard ("$1,234.56"), compact ("$1.2K"), minor units
("$1,234 56 cents") and detailed ("1 thousand 234 dollars 56 cents").
"""

from .currencies import (
    currencies_for_country,
    is_supported_currency,
    list_currencies,
    lookup_currency,
)
from .decompose import decompose
from .exceptions import CurrencyFormatError, InvalidFormatArgument
from .formatter import (
    format_amount,
    format_compact,
    format_detailed,
    format_standard,
    format_with_minor_units,
)
from .models import AmountDecomposition, CurrencyInfo, FormatStyle

__version__ = "1.0.0"

__all__ = [
    "AmountDecomposition",
    "CurrencyFormatError",
    "CurrencyInfo",
    "FormatStyle",
    "InvalidFormatArgument",
    "currencies_for_country",
    "decompose",
    "format_amount",
    "format_compact",
    "format_detailed",
    "format_standard",
    "format_with_minor_units",
    "is_supported_currency",
    "list_currencies",
    "lookup_currency",
]
