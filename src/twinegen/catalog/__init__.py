"""Catalog compilation package.

Turns a RawCatalog into a validated CompiledCatalog: per-key entries, the
catalog-wide LocaleSet, and per-key dispatch tables.

Python 3.13+.
"""

from .compiler import CompiledCatalog, compile_catalog
from .dispatch import DispatchArm, DispatchTable, build_dispatch
from .locales import LocaleSet, describe_locale, describe_locales
from .model import CatalogEntry, Translation

__all__ = [
    "CatalogEntry",
    "CompiledCatalog",
    "DispatchArm",
    "DispatchTable",
    "LocaleSet",
    "Translation",
    "build_dispatch",
    "compile_catalog",
    "describe_locale",
    "describe_locales",
]
