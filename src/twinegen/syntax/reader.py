"""Twine INI catalog reader.

Line-oriented scan of Twine INI sources into a RawCatalog:

    [section_key]
        locale_tag = translation text

A section header opens a new current section; key-value lines append to it.
Every other line (comments, blank lines) is ignored.

Merge Semantics:
    When several sources define the same section, the later source's whole
    translation list replaces the earlier one. Sources are read sequentially
    in caller order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, TextIO, TypeAlias

from twinegen.diagnostics import ErrorTemplate, MalformedCatalogError, SourceSpan

__all__ = [
    "CatalogSource",
    "RawCatalog",
    "RawTranslation",
    "merge_catalogs",
    "read_catalog",
    "read_source",
    "read_sources",
]

logger = logging.getLogger(__name__)

_SECTION_PATTERN: re.Pattern[str] = re.compile(r"^\s*\[([^\]]+)\]")
_KEY_VALUE_PATTERN: re.Pattern[str] = re.compile(r"^\s*([^\s=;#]+)\s*=\s*(.+?)\s*$")


@dataclass(frozen=True, slots=True)
class RawTranslation:
    """One ``locale_tag = text`` line of a section.

    Attributes:
        locale_tag: Locale tag as written (e.g. "en-gb")
        text: Translation text, trimmed of surrounding whitespace
        line: Line number (1-indexed)
        source: Source name (file path or fragment name)
    """

    locale_tag: str
    text: str
    line: int
    source: str

    @property
    def span(self) -> SourceSpan:
        """Location of this line for diagnostics."""
        return SourceSpan(self.source, self.line)


RawCatalog: TypeAlias = dict[str, list[RawTranslation]]
"""Section name -> translations in source order."""

CatalogSource: TypeAlias = str | Path | TextIO | BinaryIO
"""Catalog text, path to a catalog file, or an open text or binary stream.

Binary streams are decoded as UTF-8."""


def read_catalog(lines: Iterable[str], *, source: str = "<string>") -> RawCatalog:
    """Read one catalog source.

    Args:
        lines: Source lines (line endings are tolerated)
        source: Source name used in diagnostics

    Returns:
        RawCatalog in source order

    Raises:
        MalformedCatalogError: If a key-value line precedes every section header

    Example:
        >>> catalog = read_catalog(["[band_tool]", "  en = Tool", "  fr = Outil"])
        >>> [(t.locale_tag, t.text) for t in catalog["band_tool"]]
        [('en', 'Tool'), ('fr', 'Outil')]
    """
    catalog: RawCatalog = {}
    section: list[RawTranslation] | None = None

    for number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if match := _SECTION_PATTERN.match(line):
            section = catalog.setdefault(match.group(1), [])
        # "[a]b = c" is both a header and a key-value line.
        if match := _KEY_VALUE_PATTERN.match(line):
            if section is None:
                raise MalformedCatalogError(
                    ErrorTemplate.key_value_outside_section(source, number)
                )
            section.append(
                RawTranslation(
                    locale_tag=match.group(1),
                    text=match.group(2),
                    line=number,
                    source=source,
                )
            )

    logger.debug("Read %d section(s) from %s", len(catalog), source)
    return catalog


def merge_catalogs(catalogs: Iterable[Mapping[str, list[RawTranslation]]]) -> RawCatalog:
    """Merge catalogs by whole-key override.

    Args:
        catalogs: Catalogs in precedence order (later wins)

    Returns:
        New RawCatalog; a key defined again replaces the whole earlier list
    """
    merged: RawCatalog = {}
    for catalog in catalogs:
        for key, translations in catalog.items():
            if key in merged:
                logger.debug("Section [%s] overridden by a later source", key)
            merged[key] = list(translations)
    return merged


def read_source(source: CatalogSource, *, name: str | None = None) -> RawCatalog:
    """Read a catalog from text, a file path, or a stream.

    Args:
        source: Catalog text (``str``), path (``Path``) or open stream; bytes
            read from a binary stream are decoded as UTF-8
        name: Source name for diagnostics (defaults to the path, the stream's
            ``name`` attribute, or ``<string>``)

    Returns:
        RawCatalog of this source

    Raises:
        MalformedCatalogError: If the source cannot be read or is malformed
    """
    match source:
        case Path():
            label = name or str(source)
            try:
                text = source.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise MalformedCatalogError(
                    ErrorTemplate.source_unreadable(label, str(e))
                ) from e
            return read_catalog(io.StringIO(text), source=label)
        case str():
            return read_catalog(io.StringIO(source), source=name or "<string>")
        case _:
            label = name or str(getattr(source, "name", "<stream>"))
            try:
                content = source.read()
                text = content.decode("utf-8") if isinstance(content, bytes) else content
            except (OSError, UnicodeDecodeError) as e:
                raise MalformedCatalogError(
                    ErrorTemplate.source_unreadable(label, str(e))
                ) from e
            return read_catalog(io.StringIO(text), source=label)


def read_sources(sources: Iterable[CatalogSource]) -> RawCatalog:
    """Read several sources sequentially and merge them by whole-key override.

    Unnamed text sources are labelled ``<string #N>`` (1-based position).

    Args:
        sources: Catalog sources in precedence order

    Returns:
        Merged RawCatalog

    Raises:
        MalformedCatalogError: If any source cannot be read or is malformed
    """
    catalogs: list[RawCatalog] = []
    for index, source in enumerate(sources, start=1):
        name = f"<string #{index}>" if isinstance(source, str) else None
        catalogs.append(read_source(source, name=name))
    return merge_catalogs(catalogs)
