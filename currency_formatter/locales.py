"""
Locale resolution on top of Babel's CLDR data.

Tags may use "-" or "_" ("de-DE", "de_DE", "de"). When no tag is given the
process default applies: $CURRENCY_FORMATTER_LOCALE, then the POSIX locale
environment, then en_US.
"""

from __future__ import annotations

import logging
import os

from babel import Locale, UnknownLocaleError, default_locale

from .exceptions import InvalidFormatArgument

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "CURRENCY_FORMATTER_LOCALE"
FALLBACK_LOCALE = "en_US"


def default_locale_tag() -> str:
    """The locale used when a caller passes none."""
    configured = os.environ.get(LOCALE_ENV_VAR)
    if configured:
        return configured
    return default_locale("LC_MONETARY") or FALLBACK_LOCALE


def resolve_locale(tag: str | None, currency_code: str | None = None) -> Locale:
    """Parse a locale tag into a Babel Locale.

    Raises:
        InvalidFormatArgument: If Babel has no data for the tag.
    """
    requested = tag if tag is not None else default_locale_tag()
    try:
        return Locale.parse(requested.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Cannot resolve locale %r", requested)
        raise InvalidFormatArgument(
            f"Invalid culture '{requested}'",
            currency_code=currency_code,
            language=requested,
        ) from exc
