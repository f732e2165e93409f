"""twinegen - Twine INI catalogs compiled to Python dispatch modules.

Reads line-oriented multi-locale catalogs, validates keys, locale tags and
printf placeholders, and emits a module with one function per key that
resolves a runtime locale to a formatted string. Unknown keys are caught at
build time by check_references().

Public API:
    compile_sources - Catalog sources to generated module text
    build_translations - Catalog files to a generated module on disk
    build_translations_from_str - In-memory catalog text to a module on disk
    build_translations_from_readers - Text streams to a module on disk
    load_catalog - Catalog sources to a CompiledCatalog
    check_references - Reject caller references to unknown keys
    LocaleCodec - "en_GB" strings to locale tags and back
    CompilerConfig - Options of a compilation run

Exceptions:
    TwineError - Base exception class
    MalformedCatalogError - Unreadable source or line outside any section
    MalformedLocaleTagError - Locale tag does not parse
    KeyCollisionError - Two keys normalize to the same identifier
    UnresolvedKeyError - Caller references an unknown key
    ReferenceSourceError - Caller file given to check_references is unreadable
    UnknownLocaleOnDecodeError - Codec met an unknown language or region

Submodules:
    twinegen.syntax - Reader, locale tags, key normalization, printf templates
    twinegen.catalog - Compilation, locale enumeration, dispatch tables
    twinegen.emit - Generated module emission
    twinegen.analysis - Reference checking of caller sources
    twinegen.diagnostics - Error types, codes and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .build import (
    build_translations,
    build_translations_from_readers,
    build_translations_from_str,
    check_references,
    compile_sources,
    load_catalog,
)
from .catalog import CompiledCatalog, LocaleSet
from .codec import LocaleCodec
from .config import CompilerConfig
from .diagnostics import (
    KeyCollisionError,
    MalformedCatalogError,
    MalformedLocaleTagError,
    MalformedPlaceholderError,
    MissingTranslationError,
    PlaceholderMismatchError,
    ReferenceSourceError,
    TwineError,
    UnknownLocaleOnDecodeError,
    UnresolvedKeyError,
)
from .enums import FallbackPolicy
from .syntax import LocaleTag

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("twinegen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompiledCatalog",
    "CompilerConfig",
    "FallbackPolicy",
    "KeyCollisionError",
    "LocaleCodec",
    "LocaleSet",
    "LocaleTag",
    "MalformedCatalogError",
    "MalformedLocaleTagError",
    "MalformedPlaceholderError",
    "MissingTranslationError",
    "PlaceholderMismatchError",
    "ReferenceSourceError",
    "TwineError",
    "UnknownLocaleOnDecodeError",
    "UnresolvedKeyError",
    "__version__",
    "build_translations",
    "build_translations_from_readers",
    "build_translations_from_str",
    "check_references",
    "compile_sources",
    "load_catalog",
]
