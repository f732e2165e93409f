"""Enumerations for twinegen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class Conversion(StrEnum):
    """Conversion category of a printf placeholder.

    Values are the printf directive letters.
    """

    DECIMAL = "d"
    """Signed decimal integer: %d"""

    INTEGER = "i"
    """Integer: %i"""

    STRING = "s"
    """String: %s"""

    OBJECT = "@"
    """Object description (Objective-C style): %@"""

    HEX_LOWER = "x"
    """Lowercase hexadecimal integer: %x"""

    HEX_UPPER = "X"
    """Uppercase hexadecimal integer: %X"""

    FLOAT = "f"
    """Fixed-point floating number: %f"""

    @property
    def is_integer(self) -> bool:
        """True for conversions that take an integer argument."""
        return self in _INTEGER_CONVERSIONS

    @property
    def is_text(self) -> bool:
        """True for conversions that stringify their argument."""
        return self in (Conversion.STRING, Conversion.OBJECT)


_INTEGER_CONVERSIONS = frozenset(
    {Conversion.DECIMAL, Conversion.INTEGER, Conversion.HEX_LOWER, Conversion.HEX_UPPER}
)


class FallbackPolicy(StrEnum):
    """Dispatch policy for a locale with no exact translation.

    StrEnum provides automatic string conversion: str(FallbackPolicy.FIRST_LISTED) == "first-listed"
    """

    FIRST_LISTED = "first-listed"
    """Region-less translation of the language, else the key's first translation."""

    SAME_LANGUAGE = "same-language"
    """Like FIRST_LISTED, but a language that only has regional translations
    falls back to its own first-listed regional translation first."""


__all__ = [
    "Conversion",
    "FallbackPolicy",
]
