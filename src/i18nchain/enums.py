"""Enumerations for i18nchain type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be used directly as
keys into translation mappings.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    The value doubles as the key under which a plural form is stored:
    ``{"one": "%{count} item", "other": "%{count} items"}``.
    """

    ZERO = "zero"
    """Explicit zero form. Chosen for count == 0 whenever the entry has it."""

    ONE = "one"

    TWO = "two"

    FEW = "few"

    MANY = "many"

    OTHER = "other"
    """Catch-all form. Used when the locale's category is not in the entry."""


__all__ = [
    "PluralCategory",
]
