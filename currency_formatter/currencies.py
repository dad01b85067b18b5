"""
Currency reference table.

Loaded once from the packaged currencies.json when the module is imported and
never written to afterwards, so concurrent readers need no locking.
Currency and country codes are matched case-insensitively.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .lexicon import DEFAULT_MAJOR_UNIT_NAMES, DEFAULT_MINOR_UNIT_NAME, lookup
from .models import CurrencyInfo

logger = logging.getLogger(__name__)

_DATA_PATH = Path(__file__).parent / "data" / "currencies.json"


# ─── Loading ────────────────────────────────────────────────────────


def load_currencies(path: str | Path | None = None) -> dict[str, CurrencyInfo]:
    """Load currency reference data from a JSON file, keyed by uppercase code.

    Args:
        path: Path to a currencies JSON file. Defaults to the packaged data.
    """
    resolved = _DATA_PATH if path is None else Path(path)

    with resolved.open(encoding="utf-8") as f:
        raw: list[dict] = json.load(f)

    table: dict[str, CurrencyInfo] = {}
    for entry in raw:
        info = CurrencyInfo.model_validate(entry)
        table[info.code.upper()] = info

    logger.debug("Loaded %d currencies from %s", len(table), resolved)
    return table


CURRENCIES: dict[str, CurrencyInfo] = load_currencies()


# ─── Public API ──────────────────────────────────────────────────────


def lookup_currency(code: str) -> CurrencyInfo | None:
    """Return the currency for an ISO 4217 code, or None if unknown."""
    return CURRENCIES.get(code.strip().upper())


def is_supported_currency(code: str) -> bool:
    """True if the code is in the reference table."""
    return lookup_currency(code) is not None


def list_currencies() -> list[CurrencyInfo]:
    """All supported currencies, sorted by code."""
    return [CURRENCIES[code] for code in sorted(CURRENCIES)]


def currencies_for_country(country_code: str) -> list[CurrencyInfo]:
    """Currencies in use in an ISO 3166-1 alpha-2 country (e.g. "DE" → [EUR])."""
    country = country_code.strip().upper()
    return [info for info in list_currencies() if country in info.countries]


# ─── Unit Names ─────────────────────────────────────────────────────


def major_unit_name(currency: CurrencyInfo, language: str) -> str:
    """Localized major-unit word, e.g. "dollars" or "manat"."""
    code = currency.code.lower()
    default = DEFAULT_MAJOR_UNIT_NAMES.get(code, code)
    return lookup(currency.major_unit_names, language, default)


def minor_unit_name(currency: CurrencyInfo, language: str) -> str:
    """Localized minor-unit word, e.g. "cents" or "qəpik"."""
    return lookup(currency.minor_unit_names, language, DEFAULT_MINOR_UNIT_NAME)
