"""Shared constants for twinegen.

Centralized names used by the emitter, the codec and the reference checker.
Placing them here keeps the generated module layout and its consumers in sync.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Output
    "DEFAULT_INDENT",
    "DEFAULT_MODULE_DOCSTRING",
    "GENERATED_HEADER",
    "OUT_DIR_ENV",
    # Generated names
    "LANG_CLASS",
    "ALL_LANGUAGES_NAME",
    "DEFAULT_LANG_NAME",
    "CODEC_ERROR_NAME",
    "RESERVED_NAMES",
    # Codec
    "REGION_SEPARATOR",
]

# ============================================================================
# OUTPUT
# ============================================================================

DEFAULT_INDENT: str = "    "

DEFAULT_MODULE_DOCSTRING: str = "Translations compiled from Twine INI catalogs."

# First line of every generated module.
GENERATED_HEADER: str = "# Generated by twinegen. Do not edit."

# Relative output paths resolve against this directory when set.
OUT_DIR_ENV: str = "TWINEGEN_OUT_DIR"

# ============================================================================
# GENERATED NAMES
# ============================================================================

LANG_CLASS: str = "Lang"
ALL_LANGUAGES_NAME: str = "ALL_LANGUAGES"
DEFAULT_LANG_NAME: str = "DEFAULT_LANG"
CODEC_ERROR_NAME: str = "UnknownLocaleOnDecode"

# Module attributes of a generated module that are not translation keys.
RESERVED_NAMES: frozenset[str] = frozenset(
    {
        LANG_CLASS,
        ALL_LANGUAGES_NAME,
        DEFAULT_LANG_NAME,
        CODEC_ERROR_NAME,
        "dataclasses",
        "__all__",
        "__doc__",
        "__file__",
        "__name__",
    }
)

# ============================================================================
# CODEC
# ============================================================================

# Joins language and uppercased region: "en_GB".
REGION_SEPARATOR: str = "_"
