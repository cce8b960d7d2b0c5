"""Chain resolver: one logical backend over an ordered list of backends.

Backends are queried in order, every one of them, for every key:

- A scalar result from an earlier backend wins over later ones.
- Mapping results (namespaces) from all backends are deep-merged, earlier
  backends winning on leaf collisions.
- A stored None or an empty string lets a later backend supply the text.
- A default is only evaluated by the LAST backend, and only when no
  earlier backend had anything. Defaults are never applied per backend.

Lifecycle calls (store, reload, eager load) fan out to every backend in
order and stop at the first exception.

Typical use is a writable, fast store in front of read-only files:

    >>> chain = ChainBackend(KeyValueBackend(cache), SimpleBackend(["locales/"]))
    >>> chain.translate("en", "greeting", name="Ada")

Thread Safety:
    The chain holds no mutable state beyond its immutable backend tuple and
    takes no locks. Concurrency is governed by the member backends.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from i18nchain.constants import LOG_TRUNCATE
from i18nchain.core import ABSENT, deep_merge, merge_results
from i18nchain.diagnostics import MissingTranslationError

if TYPE_CHECKING:
    from i18nchain.types import LocaleCode, StoreOptions, TranslationData

    from .protocol import Backend

__all__ = ["ChainBackend"]

logger = logging.getLogger(__name__)


class ChainBackend:
    """Backend that combines several backends in priority order.

    The chain satisfies the Backend protocol itself, so chains nest.

    Attributes:
        backends: Member backends, highest priority first
    """

    __slots__ = ("_backends",)

    def __init__(self, *backends: Backend) -> None:
        """Create a chain.

        Args:
            *backends: Backends in priority order (at least one)

        Raises:
            ValueError: If no backend is given
        """
        if not backends:
            msg = "ChainBackend needs at least one backend"
            raise ValueError(msg)
        self._backends: tuple[Backend, ...] = backends

    def __repr__(self) -> str:
        names = ", ".join(type(backend).__name__ for backend in self._backends)
        return f"ChainBackend({names})"

    @property
    def backends(self) -> tuple[Backend, ...]:
        return self._backends

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        """True if every backend is initialized."""
        states = [backend.initialized for backend in self._backends]
        return all(states)

    def reload(self) -> None:
        """Reload every backend in order."""
        for backend in self._backends:
            backend.reload()
        logger.info("Reloaded %d backends", len(self._backends))

    def eager_load(self) -> None:
        """Eager load every backend in order."""
        for backend in self._backends:
            backend.eager_load()

    def store_translations(
        self,
        locale: LocaleCode,
        data: TranslationData,
        options: StoreOptions | None = None,
    ) -> None:
        """Store the same translations (and options) in every backend."""
        for backend in self._backends:
            backend.store_translations(locale, data, options)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Union of the backends' locales, in first-seen order."""
        locales: dict[LocaleCode, None] = {}
        for backend in self._backends:
            locales.update(dict.fromkeys(backend.available_locales()))
        return tuple(locales)

    def translations(self, *, do_init: bool = False) -> dict[str, Any]:
        """All backends' trees deep-merged, earlier backends winning."""
        return deep_merge(*(backend.translations(do_init=do_init) for backend in self._backends))

    def exists(self, locale: LocaleCode, key: Any, **options: Any) -> bool:
        """True if any backend holds the key."""
        return any(backend.exists(locale, key, **options) for backend in self._backends)

    def lookup(
        self,
        locale: LocaleCode,
        key: Any,
        scope: Any = None,
        **options: Any,
    ) -> Any:
        """Raw lookup merged across backends (no defaults or pluralization).

        Returns:
            Merged mapping for a namespace, the winning value, or None
        """
        outcomes = [backend.lookup(locale, key, scope, **options) for backend in self._backends]
        result = merge_results(outcomes, namespaces="count" not in options)
        return None if result is ABSENT else result

    def translate(self, locale: LocaleCode, key: Any, /, **options: Any) -> Any:
        """Resolve key across all backends.

        Args:
            locale: Locale code
            key: Key, None (default-only lookup), or a list/tuple of keys
            **options: scope, default, count, separator, resolve,
                deep_interpolation, and interpolation bindings

        Returns:
            Resolved value, merged namespace mapping, or a list of those for
            a bulk lookup; None for an explicit default=None

        Raises:
            MissingTranslationError: If no backend resolved the key and no
                usable default was given
        """
        if isinstance(key, (list, tuple)):
            return [self.translate(locale, item, **options) for item in key]

        options.setdefault("resolver", self)
        namespaces = "count" not in options
        has_default = "default" in options
        without_default = {name: value for name, value in options.items() if name != "default"}

        last = len(self._backends) - 1
        outcomes: list[Any] = []
        for index, backend in enumerate(self._backends):
            found_earlier = any(outcome is not ABSENT for outcome in outcomes)
            if index == last and has_default and not found_earlier:
                backend_options = options
            else:
                backend_options = without_default
            outcomes.append(self._query(backend, locale, key, backend_options))

        result = merge_results(outcomes, namespaces=namespaces)
        if result is not ABSENT:
            if isinstance(result, Mapping) and namespaces:
                logger.debug("Merged namespace %s.%s from %d backends", locale, key, len(outcomes))
            return result

        if has_default and options["default"] is None:
            return None
        raise MissingTranslationError(locale, key, options)

    @staticmethod
    def _query(backend: Backend, locale: LocaleCode, key: Any, options: dict[str, Any]) -> Any:
        try:
            value = backend.translate(locale, key, **options)
        except MissingTranslationError:
            logger.debug("%r has no %s.%s", backend, locale, key)
            return ABSENT
        if value is None:
            return ABSENT
        logger.debug("%r resolved %s.%s: %s", backend, locale, key, str(value)[:LOG_TRUNCATE])
        return value
