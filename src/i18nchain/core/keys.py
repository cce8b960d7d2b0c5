"""Translation key normalization.

Turns the many spellings of a key ("formats.short", ["formats", "short"],
scope + key) into one canonical tuple of segments, and produces the flat
dotted form used by key-value stores.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from i18nchain.constants import (
    DEFAULT_SEPARATOR,
    FLATTEN_SEPARATOR,
    KEY_CACHE_SIZE,
    SEPARATOR_ESCAPE_CHAR,
)
from i18nchain.types import KeyPath

__all__ = [
    "escape_default_separator",
    "normalize_flat_keys",
    "normalize_key",
    "normalize_keys",
    "stringify_keys",
]


@functools.lru_cache(maxsize=KEY_CACHE_SIZE)
def _split_key(key: str, separator: str) -> KeyPath:
    # Empty segments ("a..b", ".a") are dropped
    return tuple(segment for segment in key.split(separator) if segment)


def normalize_key(key: object, separator: str = DEFAULT_SEPARATOR) -> KeyPath:
    """Split one key (or nested sequence of keys) into segments.

    Args:
        key: Dotted string, sequence of keys, None, or any object
            (converted with str())
        separator: Segment separator

    Returns:
        Tuple of non-empty segments

    Example:
        >>> normalize_key("formats.short")
        ('formats', 'short')
        >>> normalize_key(["formats", "date.short"])
        ('formats', 'date', 'short')
        >>> normalize_key(None)
        ()
    """
    match key:
        case None:
            return ()
        case str():
            return _split_key(key, separator)
        case Sequence():
            return tuple(segment for part in key for segment in normalize_key(part, separator))
        case _:
            return _split_key(str(key), separator)


def normalize_keys(
    locale: str | None,
    key: object,
    scope: object = None,
    separator: str | None = None,
) -> KeyPath:
    """Build the full lookup path: locale, then scope, then key.

    Args:
        locale: Locale code (first segment)
        key: Key to look up
        scope: Optional scope prefix (dotted string or sequence)
        separator: Segment separator (default ".")

    Returns:
        Normalized key path

    Example:
        >>> normalize_keys("en", "short", scope="formats")
        ('en', 'formats', 'short')
        >>> normalize_keys("en", "a|b", separator="|")
        ('en', 'a', 'b')
    """
    separator = separator or DEFAULT_SEPARATOR
    return (
        *normalize_key(locale, separator),
        *normalize_key(scope, separator),
        *normalize_key(key, separator),
    )


def _flatten(parts: object) -> Iterator[str]:
    match parts:
        case None:
            return
        case str():
            yield parts
        case Sequence():
            for part in parts:
                yield from _flatten(part)
        case _:
            yield str(parts)


def normalize_flat_keys(
    key: object,
    scope: object = None,
    separator: str | None = None,
) -> str:
    """Build the flat dotted key (without locale) used by key-value stores.

    Flat stores always use "." between segments. When the caller uses a
    different separator, literal dots inside segments are escaped and the
    caller's separator is rewritten to ".".

    Args:
        key: Key to look up
        scope: Optional scope prefix
        separator: Caller's segment separator (default ".")

    Returns:
        Flat key such as "formats.short"

    Example:
        >>> normalize_flat_keys("short", scope="formats")
        'formats.short'
        >>> normalize_flat_keys("v1.2|name", separator="|")
        'v1\\x012.name'
    """
    separator = separator or DEFAULT_SEPARATOR
    parts = list(_flatten((scope, key)))
    if separator != FLATTEN_SEPARATOR:
        parts = [
            part.replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR).replace(
                separator, FLATTEN_SEPARATOR
            )
            for part in parts
        ]
    return FLATTEN_SEPARATOR.join(parts)


def escape_default_separator(segment: str) -> str:
    """Escape flat separators inside a single key segment.

    Example:
        >>> escape_default_separator("v1.2")
        'v1\\x012'
    """
    return segment.replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR)


def stringify_keys(data: Mapping[Any, Any]) -> dict[str, Any]:
    """Copy a translation tree, converting every mapping key to str.

    YAML happily produces int or bool keys (``1: one``, ``yes: Yes``);
    lookups always use string segments.

    Example:
        >>> stringify_keys({1: "one", "nested": {True: "yes"}})
        {'1': 'one', 'nested': {'True': 'yes'}}
    """
    return {
        str(key): stringify_keys(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }
