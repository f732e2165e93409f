"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Catalog source errors (reader, locale tags, placeholders)
        2000-2999: Catalog consistency errors (keys, arity, language coverage)
        3000-3999: Caller reference errors
        4000-4999: Locale codec errors
    """

    # Catalog source errors (1000-1999)
    KEY_VALUE_OUTSIDE_SECTION = 1001
    SOURCE_UNREADABLE = 1002
    LOCALE_TAG_INVALID = 1003
    PLACEHOLDER_UNSUPPORTED = 1004
    KEY_NOT_IDENTIFIER = 1005
    CATALOG_EMPTY = 1006
    SECTION_EMPTY = 1007

    # Catalog consistency errors (2000-2999)
    KEY_COLLISION = 2001
    PLACEHOLDER_MISMATCH = 2002
    TRANSLATION_MISSING = 2003

    # Caller reference errors (3000-3999)
    KEY_UNRESOLVED = 3001
    REFERENCE_SOURCE_UNREADABLE = 3002

    # Locale codec errors (4000-4999)
    LOCALE_UNKNOWN_LANGUAGE = 4001
    LOCALE_UNKNOWN_REGION = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Attributes:
        source: File path or fragment name (e.g. ``<string #1>``)
        line: Line number (1-indexed), None when the error concerns the
            whole source
    """

    source: str
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed).
        """
        if self.line is not None and self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.line is None:
            return self.source
        return f"{self.source}:{self.line}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no single location applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[KEY_VALUE_OUTSIDE_SECTION]: Key-value line outside of any section
              --> translations.ini:3
              = help: Add a [section] header before the first translation

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
