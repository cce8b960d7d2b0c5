"""Backend capability interface.

Any translation store the chain resolver can query. This is a Protocol
(structural typing) rather than an ABC: a backend needs no common base
class, only these methods. BaseBackend is an optional shared
implementation of the translate pipeline.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from i18nchain.types import LocaleCode, StoreOptions, TranslationData

__all__ = ["Backend"]


@runtime_checkable
class Backend(Protocol):
    """Protocol for translation stores.

    Example:
        >>> class EnvBackend:
        ...     def translate(self, locale, key, /, **options):
        ...         ...
        ...     # lookup, store_translations, initialized, reload, ...
        >>> chain = ChainBackend(EnvBackend(), SimpleBackend())
    """

    def translate(self, locale: LocaleCode, key: Any, /, **options: Any) -> Any:
        """Resolve key: lookup, defaults, pluralization, interpolation.

        A list or tuple of keys returns a list of results in the same order.

        Raises:
            MissingTranslationError: If unresolved and no usable default
        """
        ...

    def lookup(
        self,
        locale: LocaleCode,
        key: Any,
        scope: Any = None,
        **options: Any,
    ) -> Any:
        """Return the raw stored value for key, or None if absent."""
        ...

    def store_translations(
        self,
        locale: LocaleCode,
        data: TranslationData,
        options: StoreOptions | None = None,
    ) -> None:
        """Add or replace translations for locale."""
        ...

    @property
    def initialized(self) -> bool:
        """True once the backend's translations are loaded."""
        ...

    def reload(self) -> None:
        """Forget loaded state; the next use loads again."""
        ...

    def eager_load(self) -> None:
        """Load now instead of on first lookup."""
        ...

    def exists(self, locale: LocaleCode, key: Any, **options: Any) -> bool:
        """True if key has a stored translation."""
        ...

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales this backend holds translations for."""
        ...

    def translations(self, *, do_init: bool = False) -> dict[str, Any]:
        """Full translation tree, keyed by locale."""
        ...
