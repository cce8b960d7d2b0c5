"""i18nchain - chained translation backends with priority merging.

Combines several translation stores into one logical backend. Backends are
queried in order; scalar results from earlier backends win, namespace
mappings are deep-merged across backends, and defaults apply only once,
after every backend missed.

Public API:
    Translator - Application-facing facade (locale checks, miss handling)
    I18nConfig - Immutable translator settings
    ChainBackend - Ordered combination of backends
    SimpleBackend - In-memory nested dict backend
    KeyValueBackend - Flat JSON values in any MutableMapping
    Backend - Protocol for custom backends
    Ref - Reference to another key (links and defaults)

Exceptions:
    I18nError - Base exception class
    MissingTranslationError - No backend resolved a key
    InvalidLocaleError - Malformed or unavailable locale

Submodules:
    i18nchain.core - Merge engine and key normalization
    i18nchain.runtime - Interpolation, plural rules, locking
    i18nchain.diagnostics - Error types and diagnostic codes
"""

from .backend import Backend, BaseBackend, ChainBackend, KeyValueBackend, SimpleBackend
from .config import I18nConfig
from .core import Ref
from .diagnostics import I18nError, InvalidLocaleError, MissingTranslationError
from .translator import Translator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nchain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Backend",
    "BaseBackend",
    "ChainBackend",
    "I18nConfig",
    "I18nError",
    "InvalidLocaleError",
    "KeyValueBackend",
    "MissingTranslationError",
    "Ref",
    "SimpleBackend",
    "Translator",
    "__version__",
]
