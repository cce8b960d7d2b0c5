"""Type aliases for the translation domain.

Provides semantic type aliases used throughout i18nchain and by user code
when annotating backend implementations and Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

__all__ = [
    "KeyPath",
    "LocaleCode",
    "StoreOptions",
    "TranslationData",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""Locale code (e.g., 'en', 'lv', 'pt-BR')."""

TranslationKey: TypeAlias = str | Sequence[str]
"""Dotted key ('formats.short') or an explicit sequence of key segments."""

KeyPath: TypeAlias = tuple[str, ...]
"""Normalized key segments, locale first: ('en', 'formats', 'short')."""

TranslationData: TypeAlias = Mapping[str, object]
"""Nested translation tree for one locale."""

StoreOptions: TypeAlias = Mapping[str, object]
"""Backend-specific options accepted by store_translations()."""
