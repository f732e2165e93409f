"""Catalog key normalization.

Section names become generated function names:

    "band_tool"      -> "band_tool"
    "bandTheDoors"   -> "band_the_doors"
    "HTTPError"      -> "http_error"
    "menu.file.open" -> "menu__file__open"

Word boundaries are non-alphanumeric characters, lower-to-upper transitions,
digit-to-upper transitions and the end of an acronym ("HTTPError"). Dots keep
their namespacing as a double underscore after flattening.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import keyword
import re

from twinegen.constants import RESERVED_NAMES
from twinegen.diagnostics import ErrorTemplate, MalformedCatalogError, SourceSpan

__all__ = [
    "is_valid_identifier",
    "normalize_key",
    "to_camel_case",
    "to_snake_case",
    "validate_identifier",
]

_SEPARATOR_PATTERN: re.Pattern[str] = re.compile(r"[\W_]+")

_NAMESPACE_SEPARATOR: str = "."
_NAMESPACE_JOINER: str = "__"


def _split_words(text: str) -> list[str]:
    words: list[str] = []
    for chunk in _SEPARATOR_PATTERN.split(text):
        if not chunk:
            continue
        start = 0
        for i in range(1, len(chunk)):
            prev, cur = chunk[i - 1], chunk[i]
            if not cur.isupper():
                continue
            following = chunk[i + 1] if i + 1 < len(chunk) else ""
            if prev.islower() or prev.isdigit() or (prev.isupper() and following.islower()):
                words.append(chunk[start:i])
                start = i
        words.append(chunk[start:])
    return words


def to_snake_case(text: str) -> str:
    """Lowercase words joined by underscores.

    Example:
        >>> to_snake_case("RageAgainstTheMachine")
        'rage_against_the_machine'
        >>> to_snake_case("the-jackson 5")
        'the_jackson_5'
    """
    return "_".join(word.lower() for word in _split_words(text))


def to_camel_case(text: str) -> str:
    """Capitalized words joined together.

    Example:
        >>> to_camel_case("en")
        'En'
        >>> to_camel_case("zh_hans")
        'ZhHans'
    """
    return "".join(word[:1].upper() + word[1:].lower() for word in _split_words(text))


def normalize_key(key: str) -> str:
    """Convert a raw catalog key into a snake_case identifier.

    Each dot-separated part is snake-cased on its own and the parts are
    joined with a double underscore.

    Args:
        key: Raw section name

    Returns:
        Normalized identifier (not validated, see is_valid_identifier)
    """
    return _NAMESPACE_JOINER.join(
        to_snake_case(part) for part in key.split(_NAMESPACE_SEPARATOR)
    )


def is_valid_identifier(identifier: str) -> bool:
    """Check that a normalized key can name a generated function.

    Example:
        >>> is_valid_identifier("band_tool")
        True
        >>> is_valid_identifier("5_stars")
        False
        >>> is_valid_identifier("class")
        False
    """
    return identifier.isidentifier() and not keyword.iskeyword(identifier)


def validate_identifier(identifier: str, key: str, *, span: SourceSpan | None = None) -> None:
    """Reject identifiers the generated module cannot define.

    Keywords, non-identifiers and names the generated module already uses
    for itself are all rejected.

    Args:
        identifier: Normalized key
        key: Raw section name, for the error message
        span: Location of the section for diagnostics

    Raises:
        MalformedCatalogError: If the identifier cannot name a function
    """
    if not is_valid_identifier(identifier) or identifier in RESERVED_NAMES:
        raise MalformedCatalogError(ErrorTemplate.key_not_identifier(key, identifier, span))
