"""
Localized words used when spelling out amounts.

Every lookup in the package goes through lookup(): exact language → English →
a caller-supplied default. Lookups are total; they never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

# ─── Structural Words ───────────────────────────────────────────────

LEXICON: dict[str, dict[str, str]] = {
    "negative": {
        "en": "negative",
        "tr": "eksi",
        "az": "mənfi",
        "de": "negativ",
        "fr": "négatif",
        "es": "negativo",
        "it": "negativo",
        "ru": "отрицательный",
    },
    "million": {
        "en": "million",
        "tr": "milyon",
        "az": "milyon",
        "de": "Million",
        "fr": "million",
        "es": "millón",
        "it": "milione",
        "ru": "миллион",
    },
    "thousand": {
        "en": "thousand",
        "tr": "bin",
        "az": "min",
        "de": "Tausend",
        "fr": "mille",
        "es": "mil",
        "it": "mila",
        "ru": "тысяча",
    },
}

# Used when a currency has no major-unit name at all, not even in English.
DEFAULT_MAJOR_UNIT_NAMES: dict[str, str] = {
    "usd": "dollars",
    "eur": "euros",
    "try": "lira",
    "azn": "manat",
    "gbp": "pounds",
    "jpy": "yen",
}

DEFAULT_MINOR_UNIT_NAME = "cents"


# ─── Lookup ─────────────────────────────────────────────────────────


def language_subtag(tag: str) -> str:
    """Reduce "en-US", "az_Latn_AZ" or "DE" to the lowercase primary subtag."""
    return tag.replace("-", "_").split("_", 1)[0].strip().lower()


def lookup(table: Mapping[str, str] | None, language: str, default: str) -> str:
    """Return table[language], else table["en"], else default."""
    if table:
        language = language_subtag(language)
        if language in table:
            return table[language]
        if FALLBACK_LANGUAGE in table:
            logger.debug("No %r entry, falling back to English", language)
            return table[FALLBACK_LANGUAGE]
    return default


def localized_word(concept: str, language: str) -> str:
    """Localized "negative", "thousand" or "million"; unknown concepts echo back."""
    return lookup(LEXICON.get(concept), language, concept)
