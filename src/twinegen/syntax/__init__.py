"""Twine catalog syntax package.

Provides the catalog reader, locale tag parser, key normalizer and printf
placeholder transcompiler. Separate from the catalog layer so tooling can
inspect sources without compiling them.

Python 3.13+.
"""

from .keys import (
    is_valid_identifier,
    normalize_key,
    to_camel_case,
    to_snake_case,
    validate_identifier,
)
from .locale_tag import LocaleTag, parse_locale_tag
from .printf import FormatTemplate, Literal, Placeholder, Segment, parse_format
from .reader import (
    CatalogSource,
    RawCatalog,
    RawTranslation,
    merge_catalogs,
    read_catalog,
    read_source,
    read_sources,
)

__all__ = [
    "CatalogSource",
    "FormatTemplate",
    "Literal",
    "LocaleTag",
    "Placeholder",
    "RawCatalog",
    "RawTranslation",
    "Segment",
    "is_valid_identifier",
    "merge_catalogs",
    "normalize_key",
    "parse_format",
    "parse_locale_tag",
    "read_catalog",
    "read_source",
    "read_sources",
    "to_camel_case",
    "to_snake_case",
    "validate_identifier",
]
