"""Translator configuration.

One frozen dataclass holding the settings that a global i18n module would
otherwise keep as process-wide state. A Translator carries its own
config, so two translators in one process never interfere.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nchain.constants import DEFAULT_SEPARATOR
from i18nchain.locale_utils import validate_locale

__all__ = ["I18nConfig"]


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable settings for a Translator.

    Attributes:
        default_locale: Locale used when translate() gets none (default: "en").
        available_locales: Locales the application accepts. None means
            "whatever the backend holds" (default: None).
        enforce_available_locales: Reject locales outside the available
            ones with InvalidLocaleError (default: True).
        default_separator: Key segment separator (default: ".").
        raise_on_missing: Raise MissingTranslationError instead of
            returning the "Translation missing: ..." text (default: False).

    Example:
        >>> config = I18nConfig(default_locale="lv", available_locales=("lv", "en"))
        >>> translator = Translator(backend, config)
    """

    default_locale: str = "en"
    available_locales: tuple[str, ...] | None = None
    enforce_available_locales: bool = True
    default_separator: str = DEFAULT_SEPARATOR
    raise_on_missing: bool = False

    def __post_init__(self) -> None:
        """Validate settings at construction time.

        Raises:
            InvalidLocaleError: If default_locale or an available locale is
                malformed
            ValueError: If default_separator is empty, or default_locale is
                not among non-None available_locales
        """
        validate_locale(self.default_locale)
        if not self.default_separator:
            msg = "default_separator must not be empty"
            raise ValueError(msg)
        if self.available_locales is not None:
            # Lists are accepted and frozen into a tuple
            object.__setattr__(self, "available_locales", tuple(self.available_locales))
            for locale in self.available_locales:
                validate_locale(locale)
            if self.enforce_available_locales and self.default_locale not in self.available_locales:
                msg = (
                    f"default_locale {self.default_locale!r} is not in "
                    f"available_locales {self.available_locales!r}"
                )
                raise ValueError(msg)
