"""Generated module emission.

Architecture:
    - emit_module(): Main entry point, writes the sections in fixed order
    - _emit_tables(): Sorted language (and region) tables
    - _emit_lang_class(): The ``Lang`` locale dataclass
    - _emit_locales(): ``ALL_LANGUAGES`` and ``DEFAULT_LANG``
    - _emit_function(): One dispatch function per catalog key

Every collection is emitted from an already sorted sequence (LocaleSet,
CompiledCatalog.entries, DispatchTable.arms), so the same catalog always
yields byte-identical text.

Python 3.13+.
"""

from __future__ import annotations

import logging

from twinegen.catalog.compiler import CompiledCatalog
from twinegen.catalog.dispatch import DispatchTable, build_dispatch
from twinegen.catalog.locales import LocaleSet, describe_locales
from twinegen.codec import emit_codec_error, emit_codec_methods
from twinegen.config import CompilerConfig
from twinegen.constants import (
    ALL_LANGUAGES_NAME,
    CODEC_ERROR_NAME,
    DEFAULT_LANG_NAME,
    GENERATED_HEADER,
    LANG_CLASS,
)
from twinegen.core.babel_compat import require_babel
from twinegen.core.writer import CodeWriter, string_literal
from twinegen.syntax.keys import is_valid_identifier
from twinegen.syntax.locale_tag import LocaleTag
from twinegen.syntax.printf import FormatTemplate

__all__ = ["emit_module"]

logger = logging.getLogger(__name__)


def _tuple_literal(items: list[str]) -> str:
    match len(items):
        case 0:
            return "()"
        case 1:
            return f"({items[0]},)"
        case _:
            return f"({', '.join(items)})"


def _lang_literal(tag: LocaleTag) -> str:
    return f"{LANG_CLASS}({string_literal(tag.language)}, {string_literal(tag.region or '')})"


def _return_statement(template: FormatTemplate, args: list[str]) -> str:
    if not template.arity:
        return f"return {string_literal(template.text)}"
    values = (
        placeholder.argument(arg)
        for placeholder, arg in zip(template.placeholders, args, strict=True)
    )
    return f"return {string_literal(template.to_format_string())}.format({', '.join(values)})"


def _emit_tables(writer: CodeWriter, locales: LocaleSet, *, codec: bool) -> None:
    languages = [string_literal(language) for language in locales.languages]
    writer.line(f"_LANGUAGES: tuple[str, ...] = {_tuple_literal(languages)}")
    if codec:
        regions = [string_literal(region) for region in locales.regions]
        writer.line(f"_REGIONS: tuple[str, ...] = {_tuple_literal(regions)}")
    writer.line("_set_field = object.__setattr__")


def _variants(locales: LocaleSet) -> list[tuple[str, str]]:
    """(variant, language) pairs for the constructor classmethods."""
    variants: dict[str, str] = {}
    for language in locales.languages:
        variant = LocaleTag(language).variant
        if not is_valid_identifier(variant):
            logger.debug(
                "Language '%s' gets no constructor: '%s' is not an identifier",
                language,
                variant,
            )
            continue
        if variant in variants:
            logger.debug(
                "Languages '%s' and '%s' share constructor '%s'; keeping the first",
                variants[variant],
                language,
                variant,
            )
            continue
        variants[variant] = language
    return list(variants.items())


def _emit_lang_class(writer: CodeWriter, locales: LocaleSet, *, codec: bool) -> None:
    writer.line("@dataclasses.dataclass(frozen=True, slots=True)")
    writer.line(f"class {LANG_CLASS}:")
    with writer.indented():
        writer.lines(
            '"""Locale of a translation lookup.',
            "",
            "Attributes:",
            f"{writer.unit}language: One of the catalog languages",
            f'{writer.unit}region: Region ("" when absent), stored lowercase',
            '"""',
        )
        writer.blank()
        writer.lines("language: str", 'region: str = ""')
        writer.blank()

        writer.line("def __post_init__(self) -> None:")
        with writer.indented():
            writer.line("if self.language not in _LANGUAGES:")
            with writer.indented():
                writer.line('raise ValueError(f"Unknown language {self.language!r}")')
            writer.line('_set_field(self, "region", self.region.lower())')

        for variant, language in _variants(locales):
            writer.blank()
            writer.line("@classmethod")
            writer.line(f'def {variant}(cls, region: str = "") -> Self:')
            with writer.indented():
                writer.line(f"return cls({string_literal(language)}, region)")

        writer.blank()
        writer.line("@classmethod")
        writer.line("def all_languages(cls) -> tuple[Self, ...]:")
        with writer.indented():
            writer.line('"""Every locale of the catalog, in sorted order."""')
            writer.line(f"return {ALL_LANGUAGES_NAME}")
        writer.blank()
        writer.line("@classmethod")
        writer.line("def default(cls) -> Self:")
        with writer.indented():
            writer.line('"""Smallest locale of the catalog."""')
            writer.line(f"return {DEFAULT_LANG_NAME}")

        if codec:
            writer.blank()
            emit_codec_methods(writer)


def _emit_locales(
    writer: CodeWriter, locales: LocaleSet, names: dict[LocaleTag, str | None]
) -> None:
    writer.line(f"{ALL_LANGUAGES_NAME}: tuple[{LANG_CLASS}, ...] = (")
    with writer.indented():
        for tag in locales:
            name = names.get(tag)
            comment = f"  # {name}" if name else ""
            writer.line(f"{_lang_literal(tag)},{comment}")
    writer.line(")")
    writer.line(f"{DEFAULT_LANG_NAME}: {LANG_CLASS} = {_lang_literal(locales.default)}")


def _emit_function(writer: CodeWriter, key: str, table: DispatchTable) -> None:
    args = [f"arg{index}" for index in range(table.arity)]
    params = ", ".join([f"lang: {LANG_CLASS}", *(f"{arg}: object" for arg in args), "/"])
    writer.line(f"def {table.identifier}({params}) -> str:")
    with writer.indented():
        writer.line(string_literal(f"Translation of [{key}]."))
        writer.line("match lang:")
        with writer.indented():
            for arm in table.arms:
                region = string_literal(arm.region) if arm.region is not None else "_"
                writer.line(f"case {LANG_CLASS}({string_literal(arm.language)}, {region}):")
                with writer.indented():
                    writer.line(_return_statement(arm.template, args))
            writer.line("case _:")
            with writer.indented():
                writer.line(_return_statement(table.default, args))


def emit_module(catalog: CompiledCatalog, config: CompilerConfig | None = None) -> str:
    """Render a compiled catalog as Python source.

    Args:
        catalog: Compiled catalog
        config: Compiler configuration (defaults to CompilerConfig())

    Returns:
        Module source text with ``\\n`` line endings

    Raises:
        BabelImportError: If ``config.describe_locales`` is set and Babel is
            not installed
    """
    config = config or CompilerConfig()
    codec = config.emit_codec

    names: dict[LocaleTag, str | None] = {}
    if config.describe_locales:
        require_babel("describe_locales")
        names = describe_locales(catalog.locales)

    exported = [LANG_CLASS, ALL_LANGUAGES_NAME, DEFAULT_LANG_NAME, *catalog.identifiers]
    if codec:
        exported.append(CODEC_ERROR_NAME)

    writer = CodeWriter(config.indent)
    writer.line(GENERATED_HEADER)
    writer.line(f'"""{config.module_docstring}"""')
    writer.blank()
    writer.lines("import dataclasses", "from typing import Self")
    writer.blank()
    writer.line("__all__ = [")
    with writer.indented():
        for name in sorted(exported):
            writer.line(f"{string_literal(name)},")
    writer.line("]")
    writer.blank()
    _emit_tables(writer, catalog.locales, codec=codec)
    writer.blank(2)
    if codec:
        emit_codec_error(writer)
        writer.blank(2)
    _emit_lang_class(writer, catalog.locales, codec=codec)
    writer.blank(2)
    _emit_locales(writer, catalog.locales, names)

    for entry in catalog.entries:
        writer.blank(2)
        _emit_function(writer, entry.key, build_dispatch(entry, catalog.fallback))
        logger.debug("Emitted '%s' as %s()", entry.key, entry.identifier)

    return writer.getvalue()
