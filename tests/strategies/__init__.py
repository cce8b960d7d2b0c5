"""Hypothesis strategies for i18nchain property-based testing.

Usage:
    from tests.strategies import translation_trees, backend_outcomes
"""

from .translations import (
    backend_outcomes,
    key_segments,
    leaf_values,
    locales,
    namespaces,
    translation_trees,
)

__all__ = [
    "backend_outcomes",
    "key_segments",
    "leaf_values",
    "locales",
    "namespaces",
    "translation_trees",
]
