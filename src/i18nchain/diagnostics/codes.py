"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
i18nchain exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing translations, reference cycles)
        2000-2999: Rendering errors (pluralization, interpolation)
        3000-3999: Locale errors
        4000-4999: Loading errors (locale data files)
    """

    # Lookup errors (1000-1999)
    TRANSLATION_MISSING = 1001
    REFERENCE_CYCLE = 1002

    # Rendering errors (2000-2999)
    PLURALIZATION_DATA_INVALID = 2001
    INTERPOLATION_ARGUMENT_MISSING = 2002
    INTERPOLATION_KEY_RESERVED = 2003

    # Locale errors (3000-3999)
    LOCALE_INVALID = 3001
    LOCALE_UNAVAILABLE = 3002

    # Loading errors (4000-4999)
    FILE_TYPE_UNKNOWN = 4001
    LOCALE_DATA_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale involved, if any
        key: Translation key (dotted) involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with code, context and hint lines.

        Example output:
            error[TRANSLATION_MISSING]: Translation missing: en.greeting
              = locale: en
              = key: greeting
              = help: Store the key in at least one backend or pass a default

        Control characters in the message are escaped so that keys taken
        from user input cannot forge extra log lines.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.locale is not None:
            lines.append(f"  = locale: {_escape(self.locale)}")
        if self.key is not None:
            lines.append(f"  = key: {_escape(self.key)}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
