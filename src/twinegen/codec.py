"""Locale codec: ``language`` / ``language_REGION`` strings.

The codec is an optional layer over LocaleSet. LocaleCodec performs the
conversion in-process; emit_codec_error() and emit_codec_methods() write the
same logic into a generated module when ``CompilerConfig.emit_codec`` is set.
Both use the catalog's sorted language and region tables, so a string that
decodes here decodes identically in the generated module.

Decoding:
    1. The text is lowercased.
    2. A known language on its own decodes with no region.
    3. Otherwise the text splits on its last ``_`` into language and region.
    4. Unknown regions, then unknown languages, are rejected.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from twinegen.catalog.locales import LocaleSet
from twinegen.constants import CODEC_ERROR_NAME, LANG_CLASS, REGION_SEPARATOR
from twinegen.core.writer import CodeWriter, string_literal
from twinegen.diagnostics import ErrorTemplate, UnknownLocaleOnDecodeError
from twinegen.syntax.locale_tag import LocaleTag

__all__ = [
    "LocaleCodec",
    "emit_codec_error",
    "emit_codec_methods",
]


@dataclass(frozen=True, slots=True)
class LocaleCodec:
    """Encode and decode locale tags of one catalog.

    Attributes:
        locales: Catalog locales; decoding accepts any of their languages
            combined with any of their regions

    Example:
        >>> codec = LocaleCodec(LocaleSet.from_tags([LocaleTag("en"), LocaleTag("en", "gb")]))
        >>> codec.encode(LocaleTag("en", "gb"))
        'en_GB'
        >>> codec.decode("EN")
        LocaleTag(language='en', region=None)
    """

    locales: LocaleSet

    def __post_init__(self) -> None:
        for region in self.locales.regions:
            if REGION_SEPARATOR in region:
                msg = f"region {region!r} contains {REGION_SEPARATOR!r} and cannot be decoded"
                raise ValueError(msg)

    def encode(self, tag: LocaleTag) -> str:
        """Canonical string of a locale tag: ``en`` or ``en_GB``."""
        if not tag.region:
            return tag.language
        return f"{tag.language}{REGION_SEPARATOR}{tag.region.upper()}"

    def decode(self, value: str) -> LocaleTag:
        """Parse a canonical (or differently cased) locale string.

        Args:
            value: Text such as ``en``, ``en_GB`` or ``EN_gb``

        Returns:
            LocaleTag with lowercased parts

        Raises:
            UnknownLocaleOnDecodeError: If the language or region is not
                used by the catalog
        """
        lowered = value.lower()
        languages = self.locales.languages
        if lowered in languages:
            return LocaleTag(lowered)

        language, separator, region = lowered.rpartition(REGION_SEPARATOR)
        if not separator:
            language, region = lowered, ""
        if region and region not in self.locales.regions:
            raise UnknownLocaleOnDecodeError(
                ErrorTemplate.locale_unknown_region(value, region), value=value
            )
        if language not in languages:
            raise UnknownLocaleOnDecodeError(
                ErrorTemplate.locale_unknown_language(value, language), value=value
            )
        return LocaleTag(language, region or None)


def emit_codec_error(writer: CodeWriter) -> None:
    """Write the generated module's decode error class."""
    writer.line(f"class {CODEC_ERROR_NAME}(ValueError):")
    with writer.indented():
        writer.line(f'"""{LANG_CLASS}.decode() met a language or region the catalog lacks."""')


def emit_codec_methods(writer: CodeWriter) -> None:
    """Write ``encode()``, ``__str__`` and ``decode()`` into the Lang class body.

    The generated code reads the module-level ``_LANGUAGES`` and ``_REGIONS``
    tables, which the emitter writes ahead of the class.
    """
    separator = string_literal(REGION_SEPARATOR)
    writer.line("def encode(self) -> str:")
    with writer.indented():
        writer.lines(
            '"""Canonical locale string: "en" or "en_GB"."""',
            "if not self.region:",
        )
        with writer.indented():
            writer.line("return self.language")
        writer.line(f"return self.language + {separator} + self.region.upper()")
    writer.blank()
    writer.line("def __str__(self) -> str:")
    with writer.indented():
        writer.line("return self.encode()")
    writer.blank()
    writer.line("@classmethod")
    writer.line("def decode(cls, value: str) -> Self:")
    with writer.indented():
        writer.lines(
            '"""Parse "en", "en_GB" or any casing of them.',
            "",
            "Raises:",
            f"{writer.unit}{CODEC_ERROR_NAME}: If the language or region is unknown",
            '"""',
            "lowered = value.lower()",
            "if lowered in _LANGUAGES:",
        )
        with writer.indented():
            writer.line("return cls(lowered)")
        writer.line(f"language, separator, region = lowered.rpartition({separator})")
        writer.line("if not separator:")
        with writer.indented():
            writer.line('language, region = lowered, ""')
        writer.line("if region and region not in _REGIONS:")
        with writer.indented():
            writer.line(
                f'raise {CODEC_ERROR_NAME}(f"Unknown region {{region!r}} in locale {{value!r}}")'
            )
        writer.line("if language not in _LANGUAGES:")
        with writer.indented():
            writer.line(
                f"raise {CODEC_ERROR_NAME}("
                'f"Unknown language {language!r} in locale {value!r}")'
            )
        writer.line("return cls(language, region)")
