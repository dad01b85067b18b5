"""
Currency formatters.

Four styles, all locale-aware:

    format_standard(1234.56, "USD", "en-US")          → "$1,234.56"
    format_compact(1234567, "USD", "en-US")           → "$1.2M"
    format_with_minor_units(1234.56, "USD", "en-US")  → "$1,234 56 cents"
    format_detailed(10123.23, "AZN", "az-AZ")         → "10 min 123 manat 23 qəpik"

The first three defer grouping, separators and symbol placement to Babel.
The detailed style spells the amount out by scale (million / thousand /
unit) using the lexicon and the currency's unit names, the way the amount is
read aloud rather than how its digits are grouped.

Every formatter either returns a complete string or raises
InvalidFormatArgument; nothing is partially formatted.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from babel import Locale
from babel.numbers import format_currency, parse_pattern

from .currencies import lookup_currency, major_unit_name, minor_unit_name
from .decompose import split_amount
from .exceptions import InvalidFormatArgument
from .lexicon import localized_word
from .locales import resolve_locale
from .models import CurrencyInfo, FormatStyle

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str

_COMPACT_SCALES: tuple[tuple[Decimal, str], ...] = (
    (Decimal(1_000_000_000_000), "T"),
    (Decimal(1_000_000_000), "B"),
    (Decimal(1_000_000), "M"),
    (Decimal(1_000), "K"),
)


# ─── Detailed (spelled-out) Format ──────────────────────────────────


def format_detailed(
    amount: Amount, currency_code: str, locale: str | None = None
) -> str:
    """Spell out an amount by scale, e.g. "10 thousand 123 manat 23 qəpik".

    Args:
        amount: The amount; floats are read through str() so 10123.23 is exact.
        currency_code: ISO 4217 code, any case.
        locale: Locale tag such as "az", "az-AZ" or "de_DE". Only the
            language subtag selects words. None means the process default.

    Raises:
        InvalidFormatArgument: Unknown currency, unresolvable locale or a
            non-numeric amount.

    Fragments, in order:
        - "negative" word if the amount is below zero
        - "<n> million", then "<n> thousand" when non-zero
        - "<n> <major unit>"; when the amount is 1,000 or more and the
          units group is zero, the bare unit name instead, so the
          currency is always named once
        - "<n> <minor unit>" when the rounded hundredths are non-zero
    An amount that rounds to nothing reads "0 <major unit>".
    """
    currency, resolved = _resolve(currency_code, locale)
    value = _to_decimal(amount, currency_code, locale)
    language = resolved.language
    parts = split_amount(value)

    fragments: list[str] = []

    if parts.is_negative:
        fragments.append(localized_word("negative", language))

    if parts.major_amount > 0:
        unit = major_unit_name(currency, language)

        if parts.millions > 0:
            fragments.append(f"{parts.millions} {localized_word('million', language)}")
            if parts.thousands > 0:
                fragments.append(
                    f"{parts.thousands} {localized_word('thousand', language)}"
                )
            fragments.append(f"{parts.remainder} {unit}" if parts.remainder else unit)
        elif parts.thousands > 0:
            fragments.append(f"{parts.thousands} {localized_word('thousand', language)}")
            fragments.append(f"{parts.remainder} {unit}" if parts.remainder else unit)
        else:
            fragments.append(f"{parts.remainder} {unit}")

    if parts.minor_units > 0:
        fragments.append(f"{parts.minor_units} {minor_unit_name(currency, language)}")

    if fragments:
        return " ".join(fragments)
    return f"0 {major_unit_name(currency, language)}"


# ─── Babel-backed Formats ───────────────────────────────────────────


def format_standard(
    amount: Amount, currency_code: str, locale: str | None = None
) -> str:
    """Locale-aware currency string, e.g. "$1,234.56" or "1.234,56 €"."""
    currency, resolved = _resolve(currency_code, locale)
    value = _to_decimal(amount, currency_code, locale)
    return _babel_format(value, currency, resolved, locale)


def format_compact(
    amount: Amount,
    currency_code: str,
    locale: str | None = None,
    precision: int = 1,
) -> str:
    """Scale by K/M/B/T and format with a fixed number of fraction digits.

    1234567 USD en-US → "$1.2M"; amounts under 1,000 get no suffix.
    """
    if precision < 0:
        raise InvalidFormatArgument(
            f"Precision must be non-negative, got {precision}",
            currency_code=currency_code,
            language=locale,
            details={"precision": precision},
        )

    currency, resolved = _resolve(currency_code, locale)
    value = _to_decimal(amount, currency_code, locale)

    scaled, suffix = _compact_notation(value)
    return _format_fixed(scaled, currency, resolved, precision, locale) + suffix


def format_with_minor_units(
    amount: Amount,
    currency_code: str,
    locale: str | None = None,
    show_minor_units: bool = True,
) -> str:
    """Whole major units plus a separate minor-unit count: "$1,234 56 cents".

    The sign stays on the major part: -5.5 EUR en → "-€5 50 cents".
    """
    if not show_minor_units:
        return format_standard(amount, currency_code, locale)

    currency, resolved = _resolve(currency_code, locale)
    value = _to_decimal(amount, currency_code, locale)
    parts = split_amount(value)

    major = Decimal(parts.major_amount)
    if parts.is_negative:
        major = -major
    formatted = _format_fixed(major, currency, resolved, 0, locale)

    if parts.minor_units > 0:
        unit = minor_unit_name(currency, resolved.language)
        return f"{formatted} {parts.minor_units:02d} {unit}"
    return formatted


def format_amount(
    amount: Amount,
    currency_code: str,
    locale: str | None = None,
    style: FormatStyle | str = FormatStyle.STANDARD,
    precision: int = 1,
) -> str:
    """Format in the given style. `precision` only applies to compact."""
    try:
        style = FormatStyle(style)
    except ValueError as exc:
        raise InvalidFormatArgument(
            f"Unknown format style '{style}'",
            currency_code=currency_code,
            language=locale,
            details={"style": str(style)},
        ) from exc

    logger.debug("Formatting %r %s as %s (locale=%r)", amount, currency_code, style.value, locale)

    if style is FormatStyle.COMPACT:
        return format_compact(amount, currency_code, locale, precision)
    if style is FormatStyle.MINOR_UNITS:
        return format_with_minor_units(amount, currency_code, locale)
    if style is FormatStyle.DETAILED:
        return format_detailed(amount, currency_code, locale)
    return format_standard(amount, currency_code, locale)


# ─── Internal Helpers ────────────────────────────────────────────────


def _resolve(currency_code: str, locale: str | None) -> tuple[CurrencyInfo, Locale]:
    """Resolve the locale first, then the currency; either failure raises."""
    resolved = resolve_locale(locale, currency_code)

    if not isinstance(currency_code, str):
        raise InvalidFormatArgument(
            f"Currency code must be a string, got {currency_code!r}",
            currency_code=currency_code,
            language=locale,
        )

    currency = lookup_currency(currency_code)
    if currency is None:
        logger.warning("Unknown currency code %r", currency_code)
        raise InvalidFormatArgument(
            f"Invalid currency code '{currency_code}'",
            currency_code=currency_code,
            language=locale,
        )
    return currency, resolved


def _to_decimal(amount: Amount, currency_code: str, locale: str | None) -> Decimal:
    """Coerce an amount to a finite Decimal."""
    if isinstance(amount, bool):
        value = None
    elif isinstance(amount, Decimal):
        value = amount
    else:
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            value = None

    if value is None or not value.is_finite():
        raise InvalidFormatArgument(
            f"Amount must be a finite number, got {amount!r}",
            currency_code=currency_code,
            language=locale,
            details={"amount": str(amount)},
        )
    return value


def _compact_notation(value: Decimal) -> tuple[Decimal, str]:
    """Divide by the largest K/M/B/T scale that |value| reaches."""
    absolute = abs(value)
    for scale, suffix in _COMPACT_SCALES:
        if absolute >= scale:
            return value / scale, suffix
    return value, ""


def _format_fixed(
    value: Decimal, currency: CurrencyInfo, locale: Locale, digits: int, tag: str | None
) -> str:
    """Format with the locale's currency pattern but exactly `digits` decimals."""
    pattern = parse_pattern(locale.currency_formats["standard"].pattern)
    pattern.frac_prec = (digits, digits)
    return _babel_format(value, currency, locale, tag, format=pattern, currency_digits=False)


def _babel_format(
    value: Decimal, currency: CurrencyInfo, locale: Locale, tag: str | None, **options
) -> str:
    """Babel format_currency; amounts past the decimal context precision are rejected."""
    try:
        return format_currency(value, currency.code, locale=locale, **options)
    except InvalidOperation as exc:
        logger.warning("Cannot format %s %s in %s", value, currency.code, locale)
        raise InvalidFormatArgument(
            f"Amount {value} exceeds the decimal precision available for formatting",
            currency_code=currency.code,
            language=tag,
            details={"amount": str(value)},
        ) from exc
