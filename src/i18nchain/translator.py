"""Translator facade: the application-facing entry point.

A Translator binds one backend (usually a ChainBackend) to one
I18nConfig and a current locale. It validates locales, applies the
configured separator, and decides what a miss looks like to the caller:
the "Translation missing: en.key" text by default, an exception with
raise_on_missing=True or translate_strict().

There is no module-level "current translator". Pass the instance (or a
per-request one from for_locale()) to the code that needs it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from i18nchain.config import I18nConfig
from i18nchain.constants import DEFAULT_SEPARATOR
from i18nchain.diagnostics import InvalidLocaleError, MissingTranslationError
from i18nchain.locale_utils import validate_locale

if TYPE_CHECKING:
    from i18nchain.backend import Backend
    from i18nchain.types import LocaleCode

__all__ = ["Translator"]

logger = logging.getLogger(__name__)


class Translator:
    """Translate keys through a backend under one configuration.

    Example:
        >>> backend = SimpleBackend()
        >>> backend.store_translations("en", {"hello": "Hello %{name}"})
        >>> i18n = Translator(backend)
        >>> i18n.t("hello", name="Ada")
        'Hello Ada'
        >>> i18n.t("nope")
        'Translation missing: en.nope'

    Attributes:
        backend: Backend queried for every key
        config: Immutable settings
        locale: Locale used when a call does not name one
    """

    __slots__ = ("_backend", "_config", "_locale")

    def __init__(
        self,
        backend: Backend,
        config: I18nConfig | None = None,
        *,
        locale: LocaleCode | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            backend: Backend to query
            config: Settings (default: I18nConfig())
            locale: Current locale (default: config.default_locale)

        Raises:
            InvalidLocaleError: If locale is malformed or unavailable
        """
        self._backend = backend
        self._config = config or I18nConfig()
        self._locale = self._check_locale(locale or self._config.default_locale)

    def __repr__(self) -> str:
        return f"Translator(locale={self._locale!r}, backend={self._backend!r})"

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def config(self) -> I18nConfig:
        return self._config

    @property
    def locale(self) -> LocaleCode:
        return self._locale

    def for_locale(self, locale: LocaleCode) -> Translator:
        """New translator sharing backend and config, with another locale."""
        return Translator(self._backend, self._config, locale=locale)

    # ------------------------------------------------------------------
    # Locales
    # ------------------------------------------------------------------

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Configured locales, or the backend's when none are configured."""
        if self._config.available_locales is not None:
            return self._config.available_locales
        return self._backend.available_locales()

    def locale_available(self, locale: LocaleCode) -> bool:
        return locale in self.available_locales()

    def _check_locale(self, locale: object) -> LocaleCode:
        locale = validate_locale(locale)
        if not self._config.enforce_available_locales:
            return locale
        available = self.available_locales()
        if locale not in available:
            # An empty backend has not loaded yet; nothing to enforce against
            if self._config.available_locales is not None or available:
                raise InvalidLocaleError(locale, unavailable=True)
        return locale

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate(
        self,
        key: Any = None,
        /,
        *,
        locale: LocaleCode | None = None,
        **options: Any,
    ) -> Any:
        """Translate key.

        Args:
            key: Dotted key, or a list/tuple of keys for a bulk lookup;
                None requires a default
            locale: Locale for this call (default: the translator's)
            **options: scope, default, count, separator, resolve,
                deep_interpolation, and interpolation bindings

        Returns:
            Translation; for a miss the "Translation missing: ..." text
            unless config.raise_on_missing

        Raises:
            ValueError: If key is empty, or None without a default
            InvalidLocaleError: If locale is malformed or unavailable
            MissingTranslationError: If missing and config.raise_on_missing
        """
        return self._translate(key, locale, options, strict=self._config.raise_on_missing)

    t = translate

    def translate_strict(
        self,
        key: Any = None,
        /,
        *,
        locale: LocaleCode | None = None,
        **options: Any,
    ) -> Any:
        """Like translate(), but a miss always raises MissingTranslationError."""
        return self._translate(key, locale, options, strict=True)

    def exists(self, key: Any, /, *, locale: LocaleCode | None = None, **options: Any) -> bool:
        """True if the backend holds key for locale.

        Raises:
            ValueError: If key is empty or None
            InvalidLocaleError: If locale is malformed or unavailable
        """
        if key is None or key == "":
            msg = "exists() needs a non-empty key"
            raise ValueError(msg)
        locale = self._check_locale(locale) if locale else self._locale
        self._apply_separator(options)
        return self._backend.exists(locale, key, **options)

    def _apply_separator(self, options: dict[str, Any]) -> None:
        if self._config.default_separator != DEFAULT_SEPARATOR:
            options.setdefault("separator", self._config.default_separator)

    def _translate(
        self,
        key: Any,
        locale: LocaleCode | None,
        options: dict[str, Any],
        *,
        strict: bool,
    ) -> Any:
        if key == "" or (key is None and "default" not in options):
            msg = "translate() needs a non-empty key or a default"
            raise ValueError(msg)
        locale = self._check_locale(locale) if locale else self._locale
        self._apply_separator(options)

        if isinstance(key, (list, tuple)):
            return [self._translate_key(item, locale, options, strict=strict) for item in key]
        return self._translate_key(key, locale, options, strict=strict)

    def _translate_key(
        self,
        key: Any,
        locale: LocaleCode,
        options: dict[str, Any],
        *,
        strict: bool,
    ) -> Any:
        try:
            return self._backend.translate(locale, key, **options)
        except MissingTranslationError as e:
            if strict:
                raise
            logger.debug("%s", e)
            return str(e)
