"""Core utilities shared across the syntax, catalog and emitter layers.

Exports:
    BabelImportError: Raised when an optional Babel feature is used without Babel
    CodeWriter: Indentation-aware line accumulator for generated source
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast when Babel is missing
    string_literal: Python string literal for arbitrary text

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .writer import CodeWriter, string_literal

__all__ = [
    "BabelImportError",
    "CodeWriter",
    "is_babel_available",
    "require_babel",
    "string_literal",
]
