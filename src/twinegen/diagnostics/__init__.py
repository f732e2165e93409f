"""Diagnostic system for catalog compiler errors.

Provides structured error diagnostics with codes, source locations and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    KeyCollisionError,
    MalformedCatalogError,
    MalformedLocaleTagError,
    MalformedPlaceholderError,
    MissingTranslationError,
    PlaceholderMismatchError,
    ReferenceSourceError,
    TwineError,
    UnknownLocaleOnDecodeError,
    UnresolvedKeyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "KeyCollisionError",
    "MalformedCatalogError",
    "MalformedLocaleTagError",
    "MalformedPlaceholderError",
    "MissingTranslationError",
    "OutputFormat",
    "PlaceholderMismatchError",
    "ReferenceSourceError",
    "SourceSpan",
    "TwineError",
    "UnknownLocaleOnDecodeError",
    "UnresolvedKeyError",
]
