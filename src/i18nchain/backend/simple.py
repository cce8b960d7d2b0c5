"""In-memory nested-dict backend.

Translations live in one dict per locale, exactly as loaded:

    {"en": {"formats": {"short": "short"}, "foo": "Foo"}}

Thread Safety:
    Lookups hold the read lock, so any number of threads may translate
    concurrently. store_translations() and reload() hold the write lock.
    Lazy initialization runs before the read lock is taken (it stores, and
    storing needs the write lock).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from i18nchain.core import Ref, deep_merge, deep_update, normalize_keys, stringify_keys
from i18nchain.runtime import MissingArgumentHandler, RWLock

from .base import BaseBackend

if TYPE_CHECKING:
    from i18nchain.types import LocaleCode, StoreOptions, TranslationData

__all__ = ["SimpleBackend"]

logger = logging.getLogger(__name__)


class SimpleBackend(BaseBackend):
    """Backend keeping a nested translation tree in memory.

    Example:
        >>> backend = SimpleBackend()
        >>> backend.store_translations("en", {"greeting": "Hello %{name}"})
        >>> backend.translate("en", "greeting", name="Ada")
        'Hello Ada'
    """

    __slots__ = ("_lock", "_translations")

    def __init__(
        self,
        load_path: Iterable[str | Path] = (),
        *,
        on_missing_interpolation: MissingArgumentHandler | None = None,
    ) -> None:
        super().__init__(load_path, on_missing_interpolation=on_missing_interpolation)
        self._translations: dict[str, dict[str, Any]] = {}
        self._lock = RWLock()

    def store_translations(
        self,
        locale: LocaleCode,
        data: TranslationData,
        options: StoreOptions | None = None,
    ) -> None:
        """Deep-merge data into the locale's tree; new values win.

        Args:
            locale: Locale code
            data: Nested translation tree
            options: skip_normalization=True stores mapping keys as given
                instead of converting them to str
        """
        options = options or {}
        if not options.get("skip_normalization", False):
            data = stringify_keys(data)
        locale = str(locale)
        with self._lock.write():
            deep_update(self._translations.setdefault(locale, {}), data)
        logger.debug("Stored %d top-level keys for %s", len(data), locale)

    def reload(self) -> None:
        """Drop all stored translations; the next lookup loads again."""
        with self._lock.write():
            self._translations.clear()
        super().reload()

    def translations(self, *, do_init: bool = False) -> dict[str, Any]:
        """Copy of the full tree, keyed by locale."""
        if do_init:
            self._ensure_initialized()
        with self._lock.read():
            return deep_merge(self._translations)

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales holding at least one translation, without copying the tree."""
        self._ensure_initialized()
        with self._lock.read():
            return tuple(locale for locale, data in self._translations.items() if data)

    def lookup(
        self,
        locale: LocaleCode,
        key: Any,
        scope: Any = None,
        **options: Any,
    ) -> Any:
        """Walk the key path; stored None and missing segments are absent.

        A Ref met on the way is followed before walking on, so
        ``{"alias": Ref("formats")}`` makes "alias.short" resolve.
        """
        self._ensure_initialized()
        node: Any = self._translations
        for segment in normalize_keys(locale, key, scope, options.get("separator")):
            with self._lock.read():
                if not isinstance(node, Mapping):
                    return None
                node = node.get(segment)
            if isinstance(node, Ref):
                logger.debug("Following link %s -> %s", segment, node.key)
                node = self.resolve_link(locale, node, options)
            if node is None:
                return None
        if isinstance(node, Mapping):
            with self._lock.read():
                return deep_merge(node)
        return node
