"""Backend over a flat key-value store.

Any MutableMapping[str, str] works as the store: a dict, a shelve, or a
client wrapper for an external cache. Values are JSON encoded and keys
are "<locale>.<flat.key>":

    en.formats.short   -> "\"short\""
    en.formats         -> "{\"short\": \"short\"}"   (subtrees=True only)

With subtrees=True every intermediate mapping is stored too, so namespace
lookups ("formats") work at the cost of duplicated data. With
subtrees=False only leaves are stored; a pluralized lookup then returns a
SubtreeProxy that reads plural forms from the store on demand.

Ref values are not stored as data. They are recorded as links and applied
to lookup keys by prefix: after storing {"alias": Ref("formats")},
"alias.short" is looked up as "formats.short".

The store itself is shared state outside this object: reload() never
clears it.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from i18nchain.constants import FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR
from i18nchain.core import (
    Ref,
    deep_update,
    escape_default_separator,
    normalize_flat_keys,
    stringify_keys,
)
from i18nchain.enums import PluralCategory
from i18nchain.runtime import MissingArgumentHandler, RWLock

from .base import BaseBackend

if TYPE_CHECKING:
    from i18nchain.types import LocaleCode, StoreOptions, TranslationData

__all__ = ["KeyValueBackend", "SubtreeProxy"]

logger = logging.getLogger(__name__)


def _decode(raw: str | bytes | None) -> Any:
    if raw is None:
        return None
    return json.loads(raw)


def _encodable(value: Any) -> Any:
    # Refs live in the link table; drop them from stored subtrees
    if isinstance(value, Mapping):
        return {k: _encodable(v) for k, v in value.items() if not isinstance(v, Ref)}
    return value


class SubtreeProxy(Mapping[str, Any]):
    """Read-only view of the plural forms stored below one flat key.

    Used when subtrees are disabled: "en.inbox" is not stored, but
    "en.inbox.one" and "en.inbox.other" are. Values are fetched on first
    access and cached on the proxy.
    """

    __slots__ = ("_master_key", "_store", "_subtree")

    def __init__(self, master_key: str, store: Mapping[str, Any]) -> None:
        self._master_key = master_key
        self._store = store
        self._subtree: dict[str, Any] = {}

    def __getitem__(self, key: str) -> Any:
        if key in self._subtree:
            return self._subtree[key]
        raw = self._store.get(f"{self._master_key}{FLATTEN_SEPARATOR}{key}")
        if raw is None:
            raise KeyError(key)
        value = self._subtree[key] = _decode(raw)
        return value

    def __iter__(self) -> Iterator[str]:
        for category in PluralCategory:
            if category in self:
                yield category.value

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"SubtreeProxy({self._master_key!r}, fetched={self._subtree!r})"


class KeyValueBackend(BaseBackend):
    """Backend storing flattened, JSON-encoded translations.

    Example:
        >>> backend = KeyValueBackend({}, subtrees=False)
        >>> backend.store_translations("en", {"inbox": {"one": "One", "other": "%{count}"}})
        >>> backend.translate("en", "inbox", count=3)
        '3'
    """

    __slots__ = ("_links", "_lock", "_store", "_subtrees")

    def __init__(
        self,
        store: MutableMapping[str, Any] | None = None,
        subtrees: bool = True,
        *,
        load_path: Iterable[str | Path] = (),
        on_missing_interpolation: MissingArgumentHandler | None = None,
    ) -> None:
        """Initialize over a store.

        Args:
            store: Flat key-value store (default: a new dict)
            subtrees: Also store intermediate mappings so namespace
                lookups work
            load_path: Locale files or directories loaded on initialization
            on_missing_interpolation: Replacement producer for placeholders
                without a binding (default: raise)
        """
        super().__init__(load_path, on_missing_interpolation=on_missing_interpolation)
        self._store: MutableMapping[str, Any] = {} if store is None else store
        self._subtrees = subtrees
        # locale -> {flat source key: flat target key}
        self._links: dict[str, dict[str, str]] = {}
        self._lock = RWLock()

    @property
    def store(self) -> MutableMapping[str, Any]:
        return self._store

    @property
    def subtrees(self) -> bool:
        return self._subtrees

    # ------------------------------------------------------------------
    # Storing
    # ------------------------------------------------------------------

    def store_translations(
        self,
        locale: LocaleCode,
        data: TranslationData,
        options: StoreOptions | None = None,
    ) -> None:
        """Flatten data into the store.

        Args:
            locale: Locale code
            data: Nested translation tree
            options: escape=False keeps dots inside key segments as
                separators instead of escaping them

        Raises:
            TypeError: If data holds a callable
        """
        options = options or {}
        escape = options.get("escape", True)
        locale = str(locale)
        with self._lock.write():
            for flat_key, value in self._flatten(locale, stringify_keys(data), (), escape):
                key = f"{locale}{FLATTEN_SEPARATOR}{flat_key}"
                if isinstance(value, Mapping):
                    old = _decode(self._store.get(key))
                    if isinstance(old, dict):
                        value = deep_update(old, value)
                self._store[key] = json.dumps(_encodable(value), ensure_ascii=False)
        logger.debug("Stored %d top-level keys for %s", len(data), locale)

    def _flatten(
        self,
        locale: str,
        data: Mapping[str, Any],
        prefix: tuple[str, ...],
        escape: bool,
    ) -> Iterator[tuple[str, Any]]:
        for segment, value in data.items():
            path = (*prefix, escape_default_separator(segment) if escape else segment)
            flat_key = FLATTEN_SEPARATOR.join(path)
            match value:
                case Ref():
                    self._links.setdefault(locale, {})[flat_key] = normalize_flat_keys(value.key)
                case Mapping():
                    if self._subtrees:
                        yield flat_key, value
                    yield from self._flatten(locale, value, path, escape)
                case _ if callable(value):
                    msg = f"Key-value stores cannot hold callables (key {flat_key!r})"
                    raise TypeError(msg)
                case _:
                    yield flat_key, value

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def _resolve_flat_link(self, locale: str, flat_key: str) -> str:
        links = self._links.get(locale)
        if not links:
            return flat_key
        if flat_key in links:
            return links[flat_key]
        for source, target in links.items():
            if flat_key.startswith(f"{source}{FLATTEN_SEPARATOR}"):
                return f"{target}{flat_key[len(source):]}"
        return flat_key

    def lookup(
        self,
        locale: LocaleCode,
        key: Any,
        scope: Any = None,
        **options: Any,
    ) -> Any:
        """Fetch and decode one flat key.

        Without subtrees, a pluralized lookup of a key that is not stored
        returns a SubtreeProxy over its plural forms (None if it has none).
        """
        self._ensure_initialized()
        flat_key = normalize_flat_keys(key, scope, options.get("separator"))
        with self._lock.read():
            flat_key = self._resolve_flat_link(locale, flat_key)
            master_key = f"{locale}{FLATTEN_SEPARATOR}{flat_key}"
            value = _decode(self._store.get(master_key))
        if value is not None:
            return value
        if not self._subtrees and options.get("count") is not None:
            proxy = SubtreeProxy(master_key, self._store)
            return proxy or None
        return None

    def pluralize(self, locale: LocaleCode, entry: Any, count: Any) -> Any:
        """Without subtrees a missing plural form is a miss, not bad data."""
        if self._subtrees or not isinstance(entry, Mapping):
            return super().pluralize(locale, entry, count)
        return entry.get(self.pluralization_key(locale, entry, count))

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales found as the first segment of stored keys."""
        locales: dict[str, None] = {}
        for key in list(self._store.keys()):
            locale, sep, _ = str(key).partition(FLATTEN_SEPARATOR)
            if sep:
                locales[locale] = None
        return tuple(locales)

    def translations(self, *, do_init: bool = False) -> dict[str, Any]:
        """Rebuild the nested tree from leaf keys (escaped dots restored)."""
        if do_init:
            self._ensure_initialized()
        tree: dict[str, Any] = {}
        with self._lock.read():
            items = [(str(k), _decode(v)) for k, v in self._store.items()]
        for key, value in items:
            if isinstance(value, dict):
                continue
            *parents, leaf = (
                segment.replace(SEPARATOR_ESCAPE_CHAR, FLATTEN_SEPARATOR)
                for segment in key.split(FLATTEN_SEPARATOR)
            )
            node = tree
            for parent in parents:
                child = node.get(parent)
                if not isinstance(child, dict):
                    child = node[parent] = {}
                node = child
            node[leaf] = value
        return tree
