"""Raw catalog to compiled catalog.

Architecture:
    - compile_catalog(): Main entry point, orchestrates the passes
    - _compile_entry(): Pass 1 - Parse locale tags and templates per key,
      check key identifiers and placeholder arity
    - LocaleSet.from_tags(): Pass 2 - Catalog-wide locale enumeration
    - _check_languages(): Pass 3 - Every key covers every catalog language

Keys are processed in sorted order so that the first reported error is the
same on every run.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from twinegen.catalog.dispatch import DispatchTable, build_dispatch
from twinegen.catalog.locales import LocaleSet
from twinegen.catalog.model import CatalogEntry, Translation
from twinegen.config import CompilerConfig
from twinegen.diagnostics import (
    ErrorTemplate,
    KeyCollisionError,
    MalformedCatalogError,
    MissingTranslationError,
    PlaceholderMismatchError,
    UnresolvedKeyError,
)
from twinegen.enums import FallbackPolicy
from twinegen.syntax.keys import normalize_key, validate_identifier
from twinegen.syntax.locale_tag import LocaleTag, parse_locale_tag
from twinegen.syntax.printf import parse_format
from twinegen.syntax.reader import RawTranslation

__all__ = [
    "CompiledCatalog",
    "compile_catalog",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledCatalog:
    """Validated catalog ready for emission.

    Attributes:
        entries: Entries sorted by identifier
        locales: Catalog-wide LocaleSet
        fallback: Dispatch fallback policy

    Example:
        >>> catalog = compile_catalog(read_catalog(["[band_tool]", "en = Tool", "fr = Outil"]))
        >>> catalog.format("band_tool", LocaleTag("fr"))
        'Outil'
    """

    entries: tuple[CatalogEntry, ...]
    locales: LocaleSet
    fallback: FallbackPolicy = FallbackPolicy.FIRST_LISTED
    _index: dict[str, CatalogEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Index entries by identifier."""
        ordered = tuple(sorted(self.entries, key=lambda entry: entry.identifier))
        object.__setattr__(self, "entries", ordered)
        object.__setattr__(self, "_index", {entry.identifier: entry for entry in ordered})

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Generated function names in sorted order."""
        return tuple(entry.identifier for entry in self.entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._lookup(name) is not None

    def _lookup(self, name: str) -> CatalogEntry | None:
        entry = self._index.get(name)
        if entry is None:
            entry = self._index.get(normalize_key(name))
        return entry

    def resolve(self, name: str) -> CatalogEntry:
        """Find an entry by identifier or raw key.

        Raises:
            UnresolvedKeyError: If no entry matches
        """
        entry = self._lookup(name)
        if entry is None:
            raise UnresolvedKeyError(ErrorTemplate.key_unresolved((name,), None), names=(name,))
        return entry

    def dispatch(self, name: str) -> DispatchTable:
        """Dispatch table of one key.

        Raises:
            UnresolvedKeyError: If no entry matches
        """
        return build_dispatch(self.resolve(name), self.fallback)

    def format(self, name: str, locale: LocaleTag | str, *args: object) -> str:
        """Resolve and render a key the way the generated module does.

        Args:
            name: Identifier or raw key
            locale: Runtime locale, as LocaleTag or tag text ("en-gb")
            *args: Positional formatting arguments

        Raises:
            UnresolvedKeyError: If no entry matches
            TypeError: If the argument count does not match the key's arity
        """
        tag = parse_locale_tag(locale) if isinstance(locale, str) else locale
        return self.dispatch(name).select(tag).format(*args)


def _compile_entry(key: str, raw: Sequence[RawTranslation]) -> CatalogEntry:
    if not raw:
        raise MalformedCatalogError(ErrorTemplate.section_empty(key))

    identifier = normalize_key(key)
    validate_identifier(identifier, key, span=raw[0].span)

    translations: list[Translation] = []
    for item in raw:
        tag = parse_locale_tag(item.locale_tag, span=item.span)
        template = parse_format(item.text, span=item.span)
        if translations and template.arity != translations[0].template.arity:
            raise PlaceholderMismatchError(
                ErrorTemplate.placeholder_mismatch(
                    key,
                    translations[0].template.arity,
                    template.arity,
                    item.locale_tag,
                    item.span,
                )
            )
        translations.append(Translation(tag=tag, template=template, span=item.span))

    return CatalogEntry(key=key, identifier=identifier, translations=tuple(translations))


def _check_languages(entries: Sequence[CatalogEntry], locales: LocaleSet) -> None:
    expected = frozenset(locales.languages)
    for entry in entries:
        missing = expected - entry.languages
        if missing:
            raise MissingTranslationError(
                ErrorTemplate.translation_missing(entry.key, sorted(missing))
            )


def compile_catalog(
    raw: Mapping[str, Sequence[RawTranslation]],
    config: CompilerConfig | None = None,
) -> CompiledCatalog:
    """Compile a raw catalog.

    Args:
        raw: Section name -> translations in source order
        config: Compiler configuration (defaults to CompilerConfig())

    Returns:
        CompiledCatalog

    Raises:
        MalformedCatalogError: Empty catalog, empty section, or a key that
            does not normalize to an identifier
        MalformedLocaleTagError: A locale tag does not parse
        MalformedPlaceholderError: A placeholder has no format equivalent
        KeyCollisionError: Two keys normalize to the same identifier
        PlaceholderMismatchError: Translations of a key disagree on arity
        MissingTranslationError: A key lacks a catalog language
    """
    config = config or CompilerConfig()

    entries: dict[str, CatalogEntry] = {}
    for key in sorted(raw):
        entry = _compile_entry(key, raw[key])
        if (existing := entries.get(entry.identifier)) is not None:
            raise KeyCollisionError(
                ErrorTemplate.key_collision(entry.identifier, existing.key, key)
            )
        entries[entry.identifier] = entry

    if not entries:
        raise MalformedCatalogError(ErrorTemplate.catalog_empty())

    locales = LocaleSet.from_tags(
        t.tag for entry in entries.values() for t in entry.translations
    )

    ordered = sorted(entries.values(), key=lambda entry: entry.identifier)
    if config.require_all_languages:
        _check_languages(ordered, locales)

    logger.debug(
        "Compiled %d key(s) across %d locale(s), default %s",
        len(ordered),
        len(locales),
        locales.default,
    )
    return CompiledCatalog(entries=tuple(ordered), locales=locales, fallback=config.fallback)
