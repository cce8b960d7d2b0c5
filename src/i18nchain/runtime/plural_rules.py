"""CLDR plural rules implementation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from decimal import Decimal

from babel.core import UnknownLocaleError

from i18nchain.enums import PluralCategory
from i18nchain.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]

logger = logging.getLogger(__name__)


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(0, "lv")
        'zero'
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(42, "ja")
        'other'

    If the locale is unknown to Babel, falls back to the one/other rule
    shared by most languages.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s' for plural rules: %s", locale, e)
        return PluralCategory.ONE if abs(n) == 1 else PluralCategory.OTHER

    return locale_obj.plural_form(n)
