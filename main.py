#!/usr/bin/env python3
"""
Currency Formatter — Demo
=========================

Prints every formatting style for a handful of sample amounts.

Usage:
    python main.py
    CURRENCY_FORMATTER_LOG_LEVEL=DEBUG python main.py    # show lookup fallbacks
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal

from dotenv import load_dotenv

from currency_formatter.currencies import lookup_currency
from currency_formatter.formatter import (
    format_compact,
    format_detailed,
    format_standard,
    format_with_minor_units,
)

load_dotenv()


# ─── Sample Data ────────────────────────────────────────────────────

SAMPLE_AMOUNTS = [
    Decimal("1234.56"),
    Decimal("1000000"),
    Decimal("1500000000"),
    Decimal("0.75"),
    Decimal("42"),
]

DETAILED_AMOUNTS = [
    Decimal("10123.23"),
    Decimal("1234567.89"),
    Decimal("5000000.45"),
    Decimal("123.56"),
    Decimal("50000"),
]

STANDARD_PAIRS = [
    ("USD", "en-US"),
    ("EUR", "de-DE"),
    ("TRY", "tr-TR"),
    ("AZN", "az"),
    ("GBP", "en-GB"),
]

DETAILED_PAIRS = [
    ("AZN", "az"),
    ("USD", "en-US"),
    ("TRY", "tr-TR"),
    ("EUR", "de-DE"),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_section(title: str) -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {title}{_RESET}")
    print(f"{'=' * _WIDTH}")


def _print_currency_info(code: str) -> None:
    info = lookup_currency(code)
    if info is None:
        return
    minor = ", ".join(f"{lang}:{name}" for lang, name in info.minor_unit_names.items())
    print(f"  {_BOLD}{info.code}{_RESET} - {info.name}")
    print(f"    Symbol:     {info.symbol}")
    print(f"    Decimals:   {info.decimal_places}")
    print(f"    Countries:  {', '.join(info.countries)}")
    print(f"    Minor:      {_DIM}{minor}{_RESET}")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Print each formatting style for the sample amounts."""
    logging.basicConfig(
        level=os.environ.get("CURRENCY_FORMATTER_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    _print_section("STANDARD")
    for amount in SAMPLE_AMOUNTS:
        print(f"  {_DIM}{amount:,.2f}{_RESET}")
        for code, locale in STANDARD_PAIRS:
            print(f"    {code} ({locale}): {format_standard(amount, code, locale)}")

    _print_section("COMPACT")
    for amount in SAMPLE_AMOUNTS:
        print(f"  {amount:>20,.2f}  →  {format_compact(amount, 'USD', 'en-US')}")

    _print_section("WITH MINOR UNITS")
    for amount in SAMPLE_AMOUNTS:
        print(f"  {amount:>20,.2f}  →  {format_with_minor_units(amount, 'USD', 'en-US')}")

    _print_section("DETAILED")
    for amount in DETAILED_AMOUNTS:
        print(f"  {_DIM}{amount:,.2f}{_RESET}")
        for code, locale in DETAILED_PAIRS:
            print(f"    {code} ({locale}): {format_detailed(amount, code, locale)}")

    _print_section("REFERENCE DATA")
    for code in ("USD", "EUR", "TRY", "AZN", "JPY", "GBP"):
        _print_currency_info(code)

    print()


if __name__ == "__main__":
    main()
