"""Merge engine: combine per-backend results for one key.

Pure functions over generic mappings, independent of any backend type:

- deep_merge: recursive union with PRIORITY (earliest mapping wins)
- deep_update: in-place recursive update where the NEW data wins
- merge_results: one key's per-backend outcomes -> one logical result

Priority rules:
    Mappings returned by several backends are unioned recursively. On a
    leaf collision the earliest backend's value is kept. A None leaf is
    "present but unset" and never shadows a later value. If any backend
    returns a mapping for a key, the mapping wins over scalar outcomes for
    that key.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any, Final, Literal

__all__ = [
    "ABSENT",
    "Absent",
    "deep_merge",
    "deep_update",
    "is_absent",
    "merge_results",
]


class Absent(Enum):
    """Sentinel type for "not found" (distinct from a stored None)."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> Literal[False]:
        return False


ABSENT: Final = Absent.ABSENT


def is_absent(value: object) -> bool:
    """True for ABSENT and None, the two spellings of "no translation"."""
    return value is ABSENT or value is None


def _copy_value(value: object) -> object:
    if isinstance(value, Mapping):
        return deep_merge(value)
    return value


def _weaker(existing: object, value: object) -> bool:
    # "" yields to any later non-empty value, as in merge_results()
    return isinstance(existing, str) and existing == "" and not is_absent(value) and value != ""


def deep_merge(*mappings: Mapping[str, Any]) -> dict[str, Any]:
    """Merge mappings recursively, earliest mapping taking priority.

    Never mutates or aliases its inputs: nested mappings in the result are
    fresh dicts.

    Args:
        *mappings: Mappings in priority order (highest first)

    Returns:
        New dict holding the union of all keys

    Example:
        >>> deep_merge(
        ...     {"a": "A", "sub": {"x": 1}},
        ...     {"a": "B", "b": "B", "sub": {"x": 2, "y": 2}},
        ... )
        {'a': 'A', 'sub': {'x': 1, 'y': 2}, 'b': 'B'}
        >>> deep_merge({"k": None}, {"k": "later"})
        {'k': 'later'}
        >>> deep_merge({"k": ""}, {"k": "later"})
        {'k': 'later'}
        >>> deep_merge()
        {}
    """
    merged: dict[str, Any] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            existing = merged.get(key)
            if key not in merged or existing is None or _weaker(existing, value):
                merged[key] = _copy_value(value)
                continue
            if isinstance(existing, dict) and isinstance(value, Mapping):
                merged[key] = deep_merge(existing, value)
    return merged


def deep_update(
    target: MutableMapping[str, Any],
    source: Mapping[str, Any],
) -> MutableMapping[str, Any]:
    """Update target in place with source, recursing into mappings.

    Source wins on leaf collisions. Used by backends to accumulate
    successive store_translations() calls. Nested mappings taken from
    source are copied, so later changes to source never leak into target.

    Args:
        target: Mapping to update
        source: New data

    Returns:
        target (for chaining)

    Example:
        >>> tree = {"formats": {"short": "s"}}
        >>> deep_update(tree, {"formats": {"long": "l"}, "foo": "Foo"})
        {'formats': {'short': 's', 'long': 'l'}, 'foo': 'Foo'}
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
            deep_update(existing, value)
        else:
            target[key] = _copy_value(value)
    return target


def merge_results(
    outcomes: Sequence[object],
    *,
    namespaces: bool = True,
) -> object:
    """Combine one key's per-backend outcomes into one logical result.

    Args:
        outcomes: One outcome per backend, in priority order. ABSENT or None
            marks a backend that did not resolve the key.
        namespaces: Treat mapping outcomes as namespaces to deep-merge.
            False when the lookup is pluralized: a mapping is then an
            ordinary value.

    Returns:
        The merged mapping if any outcome is a mapping (namespaces=True);
        otherwise the first non-absent, non-empty value; otherwise the
        first empty string; otherwise ABSENT.

    Example:
        >>> merge_results([ABSENT, "Bar"])
        'Bar'
        >>> merge_results([{"short": "s"}, ABSENT, {"long": "l"}])
        {'short': 's', 'long': 'l'}
        >>> merge_results(["", "Y"])
        'Y'
        >>> merge_results([ABSENT, None])
        ABSENT
    """
    if namespaces:
        found = [outcome for outcome in outcomes if isinstance(outcome, Mapping)]
        if found:
            return deep_merge(*found)

    weak: object = ABSENT
    for outcome in outcomes:
        if is_absent(outcome):
            continue
        if outcome == "":
            # Present but empty: a later backend may still supply text
            if weak is ABSENT:
                weak = outcome
            continue
        return outcome
    return weak
