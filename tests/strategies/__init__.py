"""Hypothesis strategies for twinegen property-based testing.

Strategies are organized by domain:

- catalog: Locale tags, catalog keys and complete compilable catalogs
- printf: printf directives with matching values and mixed templates

Usage:
    from tests.strategies import twine_catalogs, printf_cases
    from tests.strategies.catalog import catalog_keys, locale_tag_texts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - twine_catalogs, printf_cases, printf_templates
"""

from .catalog import (
    LANGUAGES,
    REGIONS,
    GeneratedCatalog,
    catalog_keys,
    languages,
    locale_tag_texts,
    regions,
    render_catalog,
    translation_texts,
    twine_catalogs,
)
from .printf import (
    flags,
    float_values,
    integer_values,
    numeric_widths,
    plain_text,
    precisions,
    printf_cases,
    printf_templates,
    text_widths,
)

__all__ = [
    "LANGUAGES",
    "REGIONS",
    "GeneratedCatalog",
    "catalog_keys",
    "flags",
    "float_values",
    "integer_values",
    "languages",
    "locale_tag_texts",
    "numeric_widths",
    "plain_text",
    "precisions",
    "printf_cases",
    "printf_templates",
    "regions",
    "render_catalog",
    "text_widths",
    "translation_texts",
    "twine_catalogs",
]
