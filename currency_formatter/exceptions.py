"""
Exception hierarchy for currency formatting.

Only the formatters can fail. Lexicon and unit-name lookups are total and
never raise, and the magnitude decomposer signals misuse with a plain
ValueError (a caller bug, not a formatting failure).
"""

from __future__ import annotations


class CurrencyFormatError(Exception):
    """Base exception for all currency formatting failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidFormatArgument(CurrencyFormatError):
    """The currency code is unknown or the locale cannot be resolved."""

    def __init__(
        self,
        message: str,
        currency_code: str | None = None,
        language: str | None = None,
        details: dict | None = None,
    ):
        self.currency_code = currency_code
        self.language = language
        merged = {"currency_code": currency_code, "language": language}
        merged.update(details or {})
        super().__init__("INVALID_FORMAT_ARGUMENT", message, merged)
