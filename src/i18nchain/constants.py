"""Shared constants for i18nchain.

Centralizes separators, reserved option names and limits used by the key
normalization, interpolation and backend layers. Placing them here keeps
the import graph acyclic and gives one source of truth.

Constants are grouped by domain:
- Keys: separators used to split and flatten translation keys
- Options: option names with meaning to the translate pipeline
- Limits: recursion protection for reference links
- Messages: user-visible fallback strings

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Keys
    "DEFAULT_SEPARATOR",
    "FLATTEN_SEPARATOR",
    "SEPARATOR_ESCAPE_CHAR",
    # Options
    "RESERVED_KEYS",
    # Limits
    "MAX_LINK_DEPTH",
    "KEY_CACHE_SIZE",
    # Messages
    "MISSING_TRANSLATION_PREFIX",
    "NO_KEY_MARKER",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# KEYS
# ============================================================================

# Separator between key segments in dotted keys: "formats.short".
DEFAULT_SEPARATOR: str = "."

# Separator used by flat key-value stores. Always ".", independent of the
# separator a caller chooses for lookups.
FLATTEN_SEPARATOR: str = "."

# Replaces FLATTEN_SEPARATOR inside a single key segment so that a segment
# such as "v1.2" survives flattening as one segment.
SEPARATOR_ESCAPE_CHAR: str = "\x01"

# ============================================================================
# OPTIONS
# ============================================================================

# Option names consumed by the translate pipeline. Every other option is an
# interpolation binding. "count" is deliberately absent: it selects the
# plural form AND is interpolated as %{count}.
RESERVED_KEYS: frozenset[str] = frozenset(
    (
        "scope",
        "default",
        "separator",
        "resolve",
        "object",
        "deep_interpolation",
        "resolver",
        "link_path",
    )
)

# ============================================================================
# LIMITS
# ============================================================================

# Maximum length of a Ref link chain (a -> b -> c ...). Cycles are reported
# as soon as a key repeats; this bounds long acyclic chains.
MAX_LINK_DEPTH: int = 32

# Maximum cached (key, separator) splits. Translation keys are a small,
# closed set in real applications.
KEY_CACHE_SIZE: int = 1024

# ============================================================================
# MESSAGES
# ============================================================================

# Prefix of MissingTranslationError messages: "Translation missing: en.foo".
MISSING_TRANSLATION_PREFIX: str = "Translation missing"

# Appended to the key path when a lookup had no key (default-only lookups).
NO_KEY_MARKER: str = "no key"

# Maximum characters of a translated value written to debug logs.
LOG_TRUNCATE: int = 50
