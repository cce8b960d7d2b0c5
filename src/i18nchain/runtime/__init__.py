"""Runtime helpers used while rendering a resolved translation.

Exports:
    select_plural_category: CLDR plural category via Babel
    interpolate: %{name} substitution
    deep_interpolate: interpolation through nested values
    RWLock: readers-writer lock for backend stores

Python 3.13+.
"""

from .interpolation import MissingArgumentHandler, deep_interpolate, interpolate
from .plural_rules import select_plural_category
from .rwlock import RWLock

__all__ = [
    "MissingArgumentHandler",
    "RWLock",
    "deep_interpolate",
    "interpolate",
    "select_plural_category",
]
