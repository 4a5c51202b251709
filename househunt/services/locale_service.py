"""Locale service for currency formatting and parsing of monetary input.

Single source of truth for how amounts are shown to, and read back from,
the user. Uses babel.

Configuration:
    LOCALE setting (default: en_GB) - determines currency and separators

Example:
    >>> from househunt.services.locale_service import format_amount
    >>> format_amount(Decimal("7500"))
    '£7,500.00'
"""

import logging
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    format_currency as babel_format_currency,
)
from babel.numbers import (
    get_currency_symbol as babel_get_currency_symbol,
)
from babel.numbers import (
    get_territory_currencies,
)
from babel.numbers import (
    parse_decimal as babel_parse_decimal,
)

from househunt.config import settings

logger = logging.getLogger(__name__)

# Default locale if the configured one is invalid
DEFAULT_LOCALE = "en_GB"
DEFAULT_CURRENCY = "GBP"


def _get_locale() -> str:
    """Get locale from settings with validation and fallback.

    Returns:
        Valid locale string (e.g., 'en_GB')
    """
    locale_str = settings.locale
    try:
        Locale.parse(locale_str)
        return locale_str
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Invalid LOCALE '{locale_str}': {e}. Falling back to '{DEFAULT_LOCALE}'")
        return DEFAULT_LOCALE


def _get_currency_from_locale(locale_str: str) -> str:
    """Derive currency code from locale territory.

    Args:
        locale_str: Locale string (e.g., 'en_GB')

    Returns:
        Currency code (e.g., 'GBP')
    """
    try:
        locale = Locale.parse(locale_str)
        if locale.territory:
            currencies = get_territory_currencies(locale.territory)
            if currencies:
                return currencies[0]
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Could not derive currency from locale '{locale_str}': {e}")

    return DEFAULT_CURRENCY


# Module-level constants (computed once at import)
LOCALE = _get_locale()
CURRENCY = _get_currency_from_locale(LOCALE)


def get_currency_symbol() -> str:
    """Get currency symbol for current locale (e.g., '£')."""
    return babel_get_currency_symbol(CURRENCY, locale=LOCALE)


def format_amount(amount: Decimal) -> str:
    """Format monetary amount according to locale.

    Example:
        >>> format_amount(Decimal("36250"))
        '£36,250.00'
    """
    return babel_format_currency(amount, CURRENCY, locale=LOCALE)


def parse_decimal(value: str) -> Decimal:
    """Parse a locale-formatted number string, ignoring the currency symbol.

    Raises:
        NumberFormatError: If value cannot be parsed (a ValueError subclass)

    Example:
        >>> parse_decimal('£350,000')
        Decimal('350000')
    """
    cleaned = value.replace(get_currency_symbol(), "").replace(" ", "").strip()
    return babel_parse_decimal(cleaned, locale=LOCALE)


__all__ = [
    "LOCALE",
    "CURRENCY",
    "get_currency_symbol",
    "format_amount",
    "parse_decimal",
]
