"""Shared translate pipeline for concrete backends.

BaseBackend implements everything between "the caller asked for a key"
and "the store returned a raw value": default resolution, Ref links,
pluralization, interpolation, bulk keys and lazy initialization from a
load path. Concrete backends implement only storage: lookup(),
store_translations() and translations().

Pipeline (translate):
    1. lookup(locale, key, scope)            -> raw entry or None
    2. missing + default                     -> default(...)
       present                               -> resolve_entry(...)
    3. still None                            -> MissingTranslationError
    4. count given                           -> pluralize(...)
    5. interpolation bindings given          -> interpolate(...)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from i18nchain.constants import LOG_TRUNCATE, MAX_LINK_DEPTH, RESERVED_KEYS
from i18nchain.core import ABSENT, Ref
from i18nchain.diagnostics import (
    CyclicReferenceError,
    InvalidLocaleError,
    InvalidPluralizationDataError,
    MissingTranslationError,
)
from i18nchain.enums import PluralCategory
from i18nchain.runtime import (
    MissingArgumentHandler,
    deep_interpolate,
    interpolate,
    select_plural_category,
)

from .loading import expand_load_path, load_file

if TYPE_CHECKING:
    from i18nchain.types import LocaleCode, StoreOptions, TranslationData

__all__ = ["BaseBackend"]

logger = logging.getLogger(__name__)


class BaseBackend:
    """Translate pipeline shared by SimpleBackend and KeyValueBackend.

    Subclasses must implement lookup(), store_translations() and
    translations(). Everything else has a working default.

    Attributes:
        load_path: Files (or directories of files) loaded on initialization
    """

    __slots__ = ("_initialized", "_load_path", "_on_missing_interpolation")

    def __init__(
        self,
        load_path: Iterable[str | Path] = (),
        *,
        on_missing_interpolation: MissingArgumentHandler | None = None,
    ) -> None:
        """Initialize backend state.

        Args:
            load_path: Locale files or directories, loaded in order by
                init_translations()
            on_missing_interpolation: Replacement producer for placeholders
                without a binding (default: raise)
        """
        self._load_path: tuple[str | Path, ...] = tuple(load_path)
        self._initialized = False
        self._on_missing_interpolation = on_missing_interpolation

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initialized={self._initialized})"

    # ------------------------------------------------------------------
    # Storage (subclass responsibility)
    # ------------------------------------------------------------------

    def lookup(
        self,
        locale: LocaleCode,
        key: Any,
        scope: Any = None,
        **options: Any,
    ) -> Any:
        """Return the raw stored value for key, or None if absent."""
        raise NotImplementedError

    def store_translations(
        self,
        locale: LocaleCode,
        data: TranslationData,
        options: StoreOptions | None = None,
    ) -> None:
        """Add or replace translations for locale."""
        raise NotImplementedError

    def translations(self, *, do_init: bool = False) -> dict[str, Any]:
        """Full translation tree, keyed by locale."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def load_path(self) -> tuple[str | Path, ...]:
        return self._load_path

    @property
    def initialized(self) -> bool:
        """True once init_translations() has run since the last reload()."""
        return self._initialized

    @property
    def subtrees(self) -> bool:
        """True if lookups can return whole namespaces (nested mappings)."""
        return True

    def init_translations(self) -> None:
        """Load the load path and mark the backend initialized."""
        self.load_translations()
        self._initialized = True

    def load_translations(self, *filenames: str | Path) -> None:
        """Load locale files into this backend.

        Args:
            *filenames: Files or directories to load. Defaults to the
                backend's load path.

        Raises:
            UnknownFileTypeError: If a file has an unsupported extension
            InvalidLocaleDataError: If a file does not decode to a mapping
            OSError: If a file cannot be read
        """
        for path in expand_load_path(filenames or self._load_path):
            for locale, data in load_file(path).items():
                self.store_translations(str(locale), data or {})

    def eager_load(self) -> None:
        """Initialize now instead of on the first lookup."""
        if not self._initialized:
            self.init_translations()

    def reload(self) -> None:
        """Mark the backend uninitialized; the next use loads again."""
        self._initialized = False
        logger.info("%s reloaded", type(self).__name__)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.init_translations()

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales holding at least one translation."""
        return tuple(
            locale for locale, data in self.translations(do_init=True).items() if data
        )

    def exists(self, locale: LocaleCode, key: Any, **options: Any) -> bool:
        """True if key has a stored (non-None) translation."""
        scope = options.pop("scope", None)
        return self.lookup(locale, key, scope, **options) is not None

    # ------------------------------------------------------------------
    # Translate pipeline
    # ------------------------------------------------------------------

    def translate(self, locale: LocaleCode, key: Any, /, **options: Any) -> Any:
        """Resolve key for locale.

        Args:
            locale: Locale code
            key: Dotted key, sequence of segments, None (default-only
                lookup), or a list/tuple of keys for a bulk lookup
            **options: scope, default, count, separator, resolve,
                deep_interpolation, and interpolation bindings

        Returns:
            Resolved value; a list of values for a bulk lookup; None for
            a key of None without default, or an explicit default=None

        Raises:
            InvalidLocaleError: If locale is empty
            MissingTranslationError: If unresolved and no usable default
            InvalidPluralizationDataError: If the plural form is missing
        """
        if not locale:
            raise InvalidLocaleError(locale)

        if isinstance(key, (list, tuple)):
            return [self.translate(locale, item, **options) for item in key]

        if key is None and "default" not in options:
            return None

        entry = None
        if key is not None:
            lookup_options = {name: value for name, value in options.items() if name != "scope"}
            entry = self.lookup(locale, key, options.get("scope"), **lookup_options)

        if entry is None and "default" in options:
            logger.debug("Key %r missing in %s for %s, using default", key, self, locale)
            entry = self.default(locale, key, options["default"], options)
        else:
            entry = self.resolve_entry(locale, key, entry, options)

        if entry is None:
            if options.get("default", ABSENT) is None:
                return None
            raise MissingTranslationError(locale, key, options)

        count = options.get("count")
        if count is not None:
            entry = self.pluralize(locale, entry, count)
            if entry is None:
                raise MissingTranslationError(locale, key, options)

        values = {name: value for name, value in options.items() if name not in RESERVED_KEYS}
        if values:
            if options.get("deep_interpolation"):
                entry = deep_interpolate(entry, values, on_missing=self._on_missing_interpolation)
            elif isinstance(entry, str):
                entry = interpolate(entry, values, on_missing=self._on_missing_interpolation)

        logger.debug("Resolved %s.%s: %s", locale, key, str(entry)[:LOG_TRUNCATE])
        return entry

    def default(
        self,
        locale: LocaleCode,
        key: Any,
        subject: Any,
        options: Mapping[str, Any],
    ) -> Any:
        """Evaluate a default.

        A list or tuple is tried in order and the first non-None result
        wins. Each candidate is evaluated by resolve().
        """
        options = {name: value for name, value in options.items() if name != "default"}
        if isinstance(subject, (list, tuple)):
            for item in subject:
                result = self.resolve(locale, key, item, options)
                if result is not None:
                    return result
            return None
        return self.resolve(locale, key, subject, options)

    def resolve(
        self,
        locale: LocaleCode,
        key: Any,
        subject: Any,
        options: Mapping[str, Any],
    ) -> Any:
        """Turn a Ref or callable into a value; anything else is literal.

        Ref: translate the referenced key with the same options through
        options["resolver"] (the enclosing chain) or this backend. A miss
        yields None.

        Callable: called as subject(options.get("object", key), **options)
        and its result resolved again.
        """
        if options.get("resolve", True) is False:
            return subject
        match subject:
            case Ref():
                return self._follow(locale, subject, options)
            case _ if callable(subject):
                target = options.get("object", key)
                call_options = {name: value for name, value in options.items() if name != "object"}
                return self.resolve(locale, key, subject(target, **call_options), options)
            case _:
                return subject

    def resolve_entry(
        self,
        locale: LocaleCode,
        key: Any,
        entry: Any,
        options: Mapping[str, Any],
    ) -> Any:
        """Resolve a looked-up entry (a stored Ref or callable)."""
        if entry is None:
            return None
        return self.resolve(locale, key, entry, options)

    def resolve_link(
        self,
        locale: LocaleCode,
        ref: Ref,
        options: Mapping[str, Any],
    ) -> Any:
        """Follow a Ref stored as data.

        The target is an absolute key: scope and count do not apply to it.
        It comes back uninterpolated; the calling translate() applies the
        bindings once.
        """
        link_options = {
            name: value
            for name, value in options.items()
            if name in RESERVED_KEYS and name not in ("scope", "default")
        }
        return self._follow(locale, ref, link_options)

    def _follow(self, locale: LocaleCode, ref: Ref, options: Mapping[str, Any]) -> Any:
        link_path: tuple[str, ...] = options.get("link_path", ())
        if ref.key in link_path or len(link_path) >= MAX_LINK_DEPTH:
            raise CyclicReferenceError((*link_path, ref.key), locale)

        resolver = options.get("resolver", self)
        follow_options = {**options, "link_path": (*link_path, ref.key)}
        try:
            return resolver.translate(locale, ref.key, **follow_options)
        except MissingTranslationError:
            logger.debug("Reference %s.%s did not resolve", locale, ref.key)
            return None

    def pluralize(self, locale: LocaleCode, entry: Any, count: Any) -> Any:
        """Pick the plural form of entry for count.

        Non-mapping entries are returned unchanged.

        Raises:
            InvalidPluralizationDataError: If the selected form is missing
        """
        if not isinstance(entry, Mapping):
            return entry
        key = self.pluralization_key(locale, entry, count)
        if key not in entry:
            raise InvalidPluralizationDataError(entry, count, key)
        return entry[key]

    def pluralization_key(self, locale: LocaleCode, entry: Mapping[str, Any], count: Any) -> str:
        """Select the plural key: explicit zero, then CLDR category, then other."""
        if count == 0 and PluralCategory.ZERO in entry:
            return PluralCategory.ZERO
        category = select_plural_category(count, locale)
        if category in entry:
            return category
        return PluralCategory.OTHER
