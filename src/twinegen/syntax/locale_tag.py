"""Locale tag parsing.

A catalog locale tag is a language optionally followed by a hyphen and a
region: ``en``, ``en-gb``. The language is made of ASCII word characters
(``zh_hans``), the region of ASCII letters and digits only, so the
``language_REGION`` codec form splits unambiguously on its last underscore.
Both parts are lowercased. The language doubles as the dispatch variant
tag (``En``), the region is only ever associated data.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from twinegen.diagnostics import ErrorTemplate, MalformedLocaleTagError, SourceSpan
from twinegen.syntax.keys import to_camel_case

__all__ = [
    "LocaleTag",
    "parse_locale_tag",
]

_LOCALE_TAG_PATTERN: re.Pattern[str] = re.compile(r"(\w+)(?:-([A-Za-z0-9]+))?", re.ASCII)


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Parsed locale tag.

    Ordering is lexicographic on (language, region presence, region): a
    language without region sorts before the same language with any region.

    Attributes:
        language: Lowercase language (e.g. "en")
        region: Lowercase region (e.g. "gb"), None when absent

    Example:
        >>> sorted([LocaleTag("fr"), LocaleTag("en", "gb"), LocaleTag("en")])
        [LocaleTag(language='en', region=None), LocaleTag(language='en', region='gb'), LocaleTag(language='fr', region=None)]
    """

    language: str
    region: str | None = None

    @property
    def sort_key(self) -> tuple[str, bool, str]:
        """Total order key: language, then region-less first, then region."""
        return (self.language, self.region is not None, self.region or "")

    @property
    def variant(self) -> str:
        """CamelCase variant tag used by generated constructors ("en" -> "En")."""
        return to_camel_case(self.language)

    def __lt__(self, other: LocaleTag) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: LocaleTag) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: LocaleTag) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: LocaleTag) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        if self.region is None:
            return self.language
        return f"{self.language}-{self.region}"


def parse_locale_tag(text: str, *, span: SourceSpan | None = None) -> LocaleTag:
    """Parse ``language`` or ``language-region``.

    The whole tag must match; trailing garbage such as ``en-gb-x`` is rejected
    rather than silently ignored.

    Args:
        text: Locale tag as written in the catalog
        span: Location of the tag for diagnostics

    Returns:
        LocaleTag with lowercased parts

    Raises:
        MalformedLocaleTagError: If the tag does not match

    Example:
        >>> parse_locale_tag("en-GB")
        LocaleTag(language='en', region='gb')
    """
    match = _LOCALE_TAG_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedLocaleTagError(ErrorTemplate.locale_tag_invalid(text, span))
    language, region = match.groups()
    return LocaleTag(language.lower(), region.lower() if region is not None else None)
