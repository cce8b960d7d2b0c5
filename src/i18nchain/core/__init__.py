"""Core utilities shared by backends and the chain resolver.

This package holds the pure, I/O-free building blocks that every other
layer depends on:

    core <- runtime <- backend <- translator

Exports:
    Ref: Symbolic reference to another key
    ABSENT: Sentinel for "not found"
    deep_merge: Priority deep merge (earliest wins)
    deep_update: In-place deep update (new data wins)
    merge_results: Combine per-backend outcomes for one key
    normalize_keys: Canonical key path
    normalize_flat_keys: Flat dotted key for key-value stores

Python 3.13+.
"""

from .keys import (
    escape_default_separator,
    normalize_flat_keys,
    normalize_key,
    normalize_keys,
    stringify_keys,
)
from .merge import ABSENT, Absent, deep_merge, deep_update, is_absent, merge_results
from .reference import Ref

__all__ = [
    "ABSENT",
    "Absent",
    "Ref",
    "deep_merge",
    "deep_update",
    "escape_default_separator",
    "is_absent",
    "merge_results",
    "normalize_flat_keys",
    "normalize_key",
    "normalize_keys",
    "stringify_keys",
]
