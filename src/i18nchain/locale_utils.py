"""Locale utilities for validation and BCP-47 to POSIX conversion.

Centralizes locale format handling so that plural rule selection gets
consistent Babel cache keys, and callers get one validation rule.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from i18nchain.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def validate_locale(locale: object) -> str:
    """Check that a locale code is a non-empty alphanumeric code.

    Underscore and hyphen separators are allowed ("en", "en_US", "zh-Hans-CN").

    Args:
        locale: Candidate locale code

    Returns:
        The locale, unchanged

    Raises:
        InvalidLocaleError: If locale is not a string, is empty, or has
            characters other than letters, digits, "_" and "-"
    """
    if not isinstance(locale, str) or not locale:
        raise InvalidLocaleError(locale)
    if not locale.replace("_", "").replace("-", "").isalnum():
        raise InvalidLocaleError(locale)
    return locale


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, which keeps
    pluralized lookups cheap.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
