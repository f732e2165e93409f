"""Catalog-wide locale enumeration.

LocaleSet collects every locale tag seen in a catalog. It is built once, after
all entries are parsed, by sorting a deduplicated set: iteration order never
depends on insertion order or hash seeds, which keeps generated output
byte-identical across runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from twinegen.core.babel_compat import get_locale_class, get_unknown_locale_error
from twinegen.syntax.locale_tag import LocaleTag

__all__ = [
    "LocaleSet",
    "describe_locale",
    "describe_locales",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleSet:
    """Sorted, deduplicated set of locale tags.

    Order: language, then "no region" before "has region", then region.
    The first tag is the default locale.

    Attributes:
        tags: Locale tags in sorted order, without duplicates

    Example:
        >>> locales = LocaleSet.from_tags([LocaleTag("fr"), LocaleTag("en", "gb"), LocaleTag("en")])
        >>> [str(tag) for tag in locales]
        ['en', 'en-gb', 'fr']
        >>> locales.default
        LocaleTag(language='en', region=None)
    """

    tags: tuple[LocaleTag, ...] = ()

    def __post_init__(self) -> None:
        """Sort and deduplicate whatever order the tags were given in."""
        object.__setattr__(self, "tags", tuple(sorted(set(self.tags))))

    @classmethod
    def from_tags(cls, tags: Iterable[LocaleTag]) -> LocaleSet:
        """Build a LocaleSet from tags in any order."""
        return cls(tuple(tags))

    @property
    def default(self) -> LocaleTag:
        """Smallest tag under the locale order.

        Raises:
            ValueError: If the set is empty
        """
        if not self.tags:
            msg = "empty LocaleSet has no default locale"
            raise ValueError(msg)
        return self.tags[0]

    @property
    def languages(self) -> tuple[str, ...]:
        """Distinct languages in sorted order."""
        return tuple(sorted({tag.language for tag in self.tags}))

    @property
    def regions(self) -> tuple[str, ...]:
        """Distinct regions (any language) in sorted order."""
        return tuple(sorted({tag.region for tag in self.tags if tag.region is not None}))

    def __iter__(self) -> Iterator[LocaleTag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags


def describe_locale(tag: LocaleTag) -> str | None:
    """English display name of a locale from CLDR.

    Args:
        tag: Locale tag

    Returns:
        Display name (e.g. "English (United Kingdom)"), or None when CLDR
        does not know the locale

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> describe_locale(LocaleTag("en", "gb"))
        'English (United Kingdom)'
    """
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    territory = tag.region.upper() if tag.region is not None else None
    try:
        locale = locale_class(tag.language, territory=territory)
    except (unknown_locale_error, ValueError) as e:
        logger.debug("No CLDR data for locale %s: %s", tag, e)
        return None
    return locale.english_name


def describe_locales(locales: LocaleSet) -> dict[LocaleTag, str | None]:
    """Display names for every tag of a LocaleSet, in sorted order.

    Tags unknown to CLDR are logged as warnings: they usually point at a typo
    in the catalog.

    Raises:
        BabelImportError: If Babel is not installed
    """
    names: dict[LocaleTag, str | None] = {}
    for tag in locales:
        names[tag] = describe_locale(tag)
        if names[tag] is None:
            logger.warning("Locale '%s' is not known to CLDR", tag)
    return names
