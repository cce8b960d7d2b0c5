"""Placeholder interpolation for resolved translation strings.

Supported syntax:
    %{name}         replaced with str(values["name"])
    %<name>.2f      replaced with printf-style formatting of values["name"]
    %%              a literal "%"

Placeholders naming a reserved translate() option (scope, default, ...)
are rejected, since those names never reach the bindings.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from i18nchain.constants import RESERVED_KEYS
from i18nchain.diagnostics import (
    MissingInterpolationArgumentError,
    ReservedInterpolationKeyError,
)

__all__ = [
    "MissingArgumentHandler",
    "deep_interpolate",
    "interpolate",
]

MissingArgumentHandler: TypeAlias = Callable[[str, Mapping[str, Any], str], object]
"""Called as handler(name, values, string) for a placeholder without binding."""

_INTERPOLATION_PATTERN = re.compile(
    r"%%"
    r"|%\{(\w+)\}"
    r"|%<(\w+)>([^\d%]*?\d*\.?\d*[diouxXeEfFgGcrs])"
)

_RESERVED_PATTERN = re.compile(
    r"%\{(" + "|".join(sorted(RESERVED_KEYS)) + r")\}"
)


def interpolate(
    string: str,
    values: Mapping[str, Any],
    *,
    on_missing: MissingArgumentHandler | None = None,
) -> str:
    """Substitute placeholders in string with values.

    Args:
        string: Template text
        values: Bindings by placeholder name. Callable values are called
            with the full bindings mapping.
        on_missing: Produces a replacement for unbound placeholders.
            Default: raise MissingInterpolationArgumentError.

    Returns:
        Interpolated string

    Raises:
        ReservedInterpolationKeyError: If string uses a reserved name
        MissingInterpolationArgumentError: If a placeholder has no binding
            and no on_missing handler was given

    Example:
        >>> interpolate("Hello %{name}!", {"name": "Anna"})
        'Hello Anna!'
        >>> interpolate("%<total>.2f%% done", {"total": 12.5})
        '12.50% done'
    """
    reserved = _RESERVED_PATTERN.search(string)
    if reserved is not None:
        raise ReservedInterpolationKeyError(reserved.group(1), string)

    def replace(match: re.Match[str]) -> str:
        if match.group(0) == "%%":
            return "%"
        name = match.group(1) or match.group(2)
        if name in values:
            value = values[name]
        elif on_missing is not None:
            value = on_missing(name, values, string)
        else:
            raise MissingInterpolationArgumentError(name, values, string)
        if callable(value):
            value = value(values)
        spec = match.group(3)
        if spec:
            return f"%{spec}" % (value,)
        return str(value)

    return _INTERPOLATION_PATTERN.sub(replace, string)


def deep_interpolate(
    value: object,
    values: Mapping[str, Any],
    *,
    on_missing: MissingArgumentHandler | None = None,
) -> object:
    """Interpolate every string inside a (possibly nested) value.

    Mappings come back as new dicts and lists as new lists; other values
    are returned unchanged.

    Example:
        >>> deep_interpolate({"a": "%{x}", "b": ["%{x}!", 3]}, {"x": "X"})
        {'a': 'X', 'b': ['X!', 3]}
    """
    match value:
        case str():
            return interpolate(value, values, on_missing=on_missing)
        case Mapping():
            return {
                key: deep_interpolate(item, values, on_missing=on_missing)
                for key, item in value.items()
            }
        case list() | tuple():
            return [deep_interpolate(item, values, on_missing=on_missing) for item in value]
        case _:
            return value
