"""Twine compiler exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error is fatal to the compilation run; no partial output is written.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "KeyCollisionError",
    "MalformedCatalogError",
    "MalformedLocaleTagError",
    "MalformedPlaceholderError",
    "MissingTranslationError",
    "PlaceholderMismatchError",
    "ReferenceSourceError",
    "TwineError",
    "UnknownLocaleOnDecodeError",
    "UnresolvedKeyError",
]


class TwineError(Exception):
    """Base exception for all catalog compiler errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TwineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedCatalogError(TwineError):
    """Catalog source cannot be compiled.

    Raised for key-value lines outside of any section, unreadable sources,
    keys that do not normalize to an identifier and empty catalogs.
    """


class MalformedLocaleTagError(TwineError):
    """Locale tag does not match ``language`` or ``language-region``."""


class MalformedPlaceholderError(TwineError):
    """Recognized printf placeholder with no ``str.format`` equivalent.

    Example:
        ``%.3d`` (minimum digit count on an integer conversion)
    """


class KeyCollisionError(TwineError):
    """Two distinct catalog keys normalize to the same identifier."""


class PlaceholderMismatchError(TwineError):
    """Translations of one key disagree on their number of placeholders."""


class MissingTranslationError(TwineError):
    """A key lacks a translation for a language used elsewhere in the catalog."""


class UnresolvedKeyError(TwineError):
    """Caller references a key absent from the compiled catalog.

    Attributes:
        names: Every unresolved identifier, in order of first reference
    """

    def __init__(self, message: str | Diagnostic, *, names: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.names = names


class ReferenceSourceError(TwineError):
    """Caller source given to reference checking cannot be read."""


class UnknownLocaleOnDecodeError(TwineError, ValueError):
    """Locale string names a language or region the catalog does not know.

    Attributes:
        value: The string that failed to decode
    """

    def __init__(self, message: str | Diagnostic, *, value: str = "") -> None:
        super().__init__(message)
        self.value = value
