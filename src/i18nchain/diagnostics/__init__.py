"""Diagnostic system for i18nchain errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CyclicReferenceError,
    I18nError,
    InvalidLocaleDataError,
    InvalidLocaleError,
    InvalidPluralizationDataError,
    MissingInterpolationArgumentError,
    MissingTranslationError,
    ReservedInterpolationKeyError,
    UnknownFileTypeError,
)

__all__ = [
    "CyclicReferenceError",
    "Diagnostic",
    "DiagnosticCode",
    "I18nError",
    "InvalidLocaleDataError",
    "InvalidLocaleError",
    "InvalidPluralizationDataError",
    "MissingInterpolationArgumentError",
    "MissingTranslationError",
    "ReservedInterpolationKeyError",
    "UnknownFileTypeError",
]
