"""i18nchain exception hierarchy with structured diagnostics.

Every exception stores a Diagnostic. MissingTranslationError is the normal
"nothing found" outcome of a lookup and is the only error the chain
resolver catches; everything else propagates to the caller.

Hierarchy:
    I18nError
    ├─ MissingTranslationError
    ├─ CyclicReferenceError
    ├─ InvalidLocaleError
    ├─ InvalidPluralizationDataError
    ├─ MissingInterpolationArgumentError
    ├─ ReservedInterpolationKeyError
    ├─ UnknownFileTypeError
    └─ InvalidLocaleDataError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from i18nchain.constants import MISSING_TRANSLATION_PREFIX, NO_KEY_MARKER
from i18nchain.core.keys import normalize_keys
from i18nchain.diagnostics.codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from i18nchain.types import KeyPath

__all__ = [
    "CyclicReferenceError",
    "I18nError",
    "InvalidLocaleDataError",
    "InvalidLocaleError",
    "InvalidPluralizationDataError",
    "MissingInterpolationArgumentError",
    "MissingTranslationError",
    "ReservedInterpolationKeyError",
    "UnknownFileTypeError",
]


class I18nError(Exception):
    """Base exception for all i18nchain errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MissingTranslationError(I18nError):
    """No backend resolved the key and no usable default was supplied.

    This is an expected outcome, not a system failure. Backends raise it,
    the chain catches it per backend, and the Translator turns it into a
    visible placeholder unless configured to raise.

    Attributes:
        locale: Locale of the failed lookup
        key: Key as passed by the caller (None for default-only lookups)
        options: Options of the failed lookup
        keys: Normalized key path, locale first
    """

    def __init__(
        self,
        locale: str,
        key: object,
        options: Mapping[str, object] | None = None,
    ) -> None:
        self.locale = locale
        self.key = key
        self.options: Mapping[str, object] = dict(options) if options else {}
        separator = self.options.get("separator")
        keys: KeyPath = normalize_keys(
            locale,
            key,  # type: ignore[arg-type]
            self.options.get("scope"),  # type: ignore[arg-type]
            separator if isinstance(separator, str) else None,
        )
        if len(keys) < 2:
            keys = (*keys, NO_KEY_MARKER)
        self.keys = keys
        diagnostic = Diagnostic(
            code=DiagnosticCode.TRANSLATION_MISSING,
            message=f"{MISSING_TRANSLATION_PREFIX}: {'.'.join(keys)}",
            hint="Store the key in at least one backend or pass a default",
            locale=locale,
            key=".".join(keys[1:]),
        )
        super().__init__(diagnostic)


class CyclicReferenceError(I18nError):
    """A chain of Ref links revisits a key.

    Example:
        {"a": Ref("b"), "b": Ref("a")}

    Attributes:
        path: Keys visited before the cycle closed, in order
    """

    def __init__(self, path: tuple[str, ...], locale: str | None = None) -> None:
        self.path = path
        diagnostic = Diagnostic(
            code=DiagnosticCode.REFERENCE_CYCLE,
            message=f"Cyclic reference: {' -> '.join(path)}",
            hint="Point at least one reference at a concrete translation",
            locale=locale,
            key=path[0] if path else None,
        )
        super().__init__(diagnostic)


class InvalidLocaleError(I18nError):
    """Locale is empty, malformed, or not in the available locales.

    Attributes:
        locale: The offending locale value
    """

    def __init__(self, locale: object, *, unavailable: bool = False) -> None:
        self.locale = locale
        if unavailable:
            diagnostic = Diagnostic(
                code=DiagnosticCode.LOCALE_UNAVAILABLE,
                message=f"{locale!r} is not a valid locale",
                hint="Add the locale to I18nConfig.available_locales",
                locale=str(locale),
            )
        else:
            diagnostic = Diagnostic(
                code=DiagnosticCode.LOCALE_INVALID,
                message=f"Invalid locale code: {locale!r}",
                hint="Use a code such as 'en', 'lv' or 'pt-BR'",
            )
        super().__init__(diagnostic)


class InvalidPluralizationDataError(I18nError):
    """Plural mapping has no entry for the selected category.

    Attributes:
        entry: The plural mapping
        count: Count that drove the selection
        key: Selected category
    """

    def __init__(self, entry: Mapping[str, object], count: object, key: str) -> None:
        self.entry = entry
        self.count = count
        self.key = key
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLURALIZATION_DATA_INVALID,
            message=(
                f"Translation data {dict(entry)!r} can not be used with "
                f"count={count!r}: key {key!r} is missing."
            ),
            hint="Provide the category or an 'other' fallback form",
        )
        super().__init__(diagnostic)


class MissingInterpolationArgumentError(I18nError):
    """A %{name} placeholder has no binding.

    Attributes:
        key: Placeholder name
        values: Bindings that were supplied
        string: The string being interpolated
    """

    def __init__(self, key: str, values: Mapping[str, object], string: str) -> None:
        self.key = key
        self.values = values
        self.string = string
        diagnostic = Diagnostic(
            code=DiagnosticCode.INTERPOLATION_ARGUMENT_MISSING,
            message=f"missing interpolation argument {key!r} in {string!r} ({dict(values)!r} given)",
            hint=f"Pass {key}=... to translate()",
        )
        super().__init__(diagnostic)


class ReservedInterpolationKeyError(I18nError):
    """A string interpolates a name reserved for translate() options.

    Attributes:
        key: Reserved name
        string: The string being interpolated
    """

    def __init__(self, key: str, string: str) -> None:
        self.key = key
        self.string = string
        diagnostic = Diagnostic(
            code=DiagnosticCode.INTERPOLATION_KEY_RESERVED,
            message=f"reserved key {key!r} used in {string!r}",
            hint="Rename the placeholder",
        )
        super().__init__(diagnostic)


class UnknownFileTypeError(I18nError):
    """Locale file extension has no registered loader.

    Attributes:
        file_type: Extension without the dot
        filename: Path of the file
    """

    def __init__(self, file_type: str, filename: str) -> None:
        self.file_type = file_type
        self.filename = filename
        diagnostic = Diagnostic(
            code=DiagnosticCode.FILE_TYPE_UNKNOWN,
            message=f"can not load translations from {filename}, the file type {file_type} is not known",
            hint="Use .json, .yml or .yaml",
        )
        super().__init__(diagnostic)


class InvalidLocaleDataError(I18nError):
    """Locale file could not be decoded into a mapping.

    Attributes:
        filename: Path of the file
        reason: What was wrong with it
    """

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_INVALID,
            message=f"can not load translations from {filename}: {reason}",
        )
        super().__init__(diagnostic)
