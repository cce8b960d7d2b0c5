"""Pytest configuration for the i18nchain test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures build the two-backend chain used throughout the chain
tests: a first backend with "foo", and a second with "bar", overlapping
on the "formats", "dates" and "fallback_bar" namespaces.
"""

import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from i18nchain import ChainBackend, SimpleBackend

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED BACKEND DATA
# =============================================================================

FIRST_DATA: dict[str, Any] = {
    "foo": "Foo",
    "formats": {
        "short": "short",
        "subformats": {"short": "short"},
    },
    "plural_1": {"one": "%{count}"},
    "dates": {"a": "A"},
    "fallback_bar": None,
}

SECOND_DATA: dict[str, Any] = {
    "bar": "Bar",
    "formats": {
        "long": "long",
        "subformats": {"long": "long"},
    },
    "plural_2": {"one": "one"},
    "dates": {"a": "B", "b": "B"},
    "fallback_bar": "Bar",
}


def make_simple(locale: str = "en", data: dict[str, Any] | None = None) -> SimpleBackend:
    """SimpleBackend holding data for locale."""
    backend = SimpleBackend()
    if data is not None:
        backend.store_translations(locale, data)
    return backend


@pytest.fixture
def first() -> SimpleBackend:
    return make_simple("en", FIRST_DATA)


@pytest.fixture
def second() -> SimpleBackend:
    return make_simple("en", SECOND_DATA)


@pytest.fixture
def chain(first: SimpleBackend, second: SimpleBackend) -> ChainBackend:
    return ChainBackend(first, second)
