"""Build entry points.

Each entry point runs the full pipeline (read, compile, emit) before touching
the output file, so a malformed catalog never leaves a partial module behind.
The three ``build_translations*`` variants differ only in where the catalog
text comes from.

Output location:
    An absolute ``output_file`` is used as is. A relative one resolves against
    ``out_dir``, else the ``TWINEGEN_OUT_DIR`` environment variable, else the
    current directory.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import BinaryIO, TextIO, TypeAlias

from twinegen.analysis.references import check_references as _check_references
from twinegen.analysis.references import find_references
from twinegen.catalog.compiler import CompiledCatalog, compile_catalog
from twinegen.config import CompilerConfig
from twinegen.constants import OUT_DIR_ENV
from twinegen.diagnostics import ErrorTemplate, ReferenceSourceError
from twinegen.emit import emit_module
from twinegen.syntax.reader import CatalogSource, read_sources

__all__ = [
    "build_translations",
    "build_translations_from_readers",
    "build_translations_from_str",
    "check_references",
    "compile_sources",
    "load_catalog",
]

logger = logging.getLogger(__name__)

PathLike: TypeAlias = str | os.PathLike[str]


def load_catalog(
    sources: Iterable[CatalogSource], config: CompilerConfig | None = None
) -> CompiledCatalog:
    """Read and compile catalog sources without emitting.

    Args:
        sources: Catalog text, paths or text streams in precedence order
        config: Compiler configuration

    Returns:
        CompiledCatalog
    """
    return compile_catalog(read_sources(sources), config)


def compile_sources(
    sources: Iterable[CatalogSource], config: CompilerConfig | None = None
) -> str:
    """Read, compile and emit catalog sources.

    Args:
        sources: Catalog text, paths or text streams in precedence order
        config: Compiler configuration

    Returns:
        Generated module source

    Raises:
        TwineError: Any catalog error; nothing is emitted

    Example:
        >>> source = compile_sources(["[band_tool]\\nen = Tool\\nfr = Outil\\n"])
        >>> "def band_tool(lang: Lang, /) -> str:" in source
        True
    """
    config = config or CompilerConfig()
    return emit_module(load_catalog(sources, config), config)


def _resolve_output(output_file: PathLike, out_dir: PathLike | None) -> Path:
    path = Path(output_file)
    if path.is_absolute():
        return path
    if out_dir is None:
        out_dir = os.environ.get(OUT_DIR_ENV) or Path.cwd()
    return Path(out_dir) / path


def _write(
    sources: Iterable[CatalogSource],
    output_file: PathLike,
    out_dir: PathLike | None,
    config: CompilerConfig | None,
) -> Path:
    source = compile_sources(sources, config)
    target = _resolve_output(output_file, out_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(source, encoding="utf-8", newline="\n")
    logger.info("Wrote translations to %s", target)
    return target


def build_translations(
    paths: Iterable[PathLike],
    output_file: PathLike,
    *,
    out_dir: PathLike | None = None,
    config: CompilerConfig | None = None,
) -> Path:
    """Compile catalog files into a Python module.

    Args:
        paths: Catalog files in precedence order (later files override keys)
        output_file: Module path, relative paths resolve as described above
        out_dir: Base directory for a relative output_file
        config: Compiler configuration

    Returns:
        Path of the written module

    Raises:
        TwineError: Any catalog error; the output file is left untouched
        OSError: If the output cannot be written
    """
    return _write([Path(path) for path in paths], output_file, out_dir, config)


def build_translations_from_str(
    texts: Iterable[str],
    output_file: PathLike,
    *,
    out_dir: PathLike | None = None,
    config: CompilerConfig | None = None,
) -> Path:
    """Compile in-memory catalog text into a Python module.

    Same as build_translations() with sources named ``<string #N>``.
    """
    return _write(list(texts), output_file, out_dir, config)


def build_translations_from_readers(
    readers: Iterable[TextIO | BinaryIO],
    output_file: PathLike,
    *,
    out_dir: PathLike | None = None,
    config: CompilerConfig | None = None,
) -> Path:
    """Compile catalog streams into a Python module.

    Same as build_translations() with sources named after the stream's
    ``name`` attribute when it has one. Binary streams are decoded as UTF-8.
    """
    return _write(list(readers), output_file, out_dir, config)


def check_references(
    catalog: CompiledCatalog,
    sources: Iterable[os.PathLike[str] | str],
    *,
    module_names: Sequence[str] = ("i18n",),
) -> None:
    """Check caller sources for references to unknown keys.

    Args:
        catalog: Compiled catalog
        sources: Python files (``Path``) or Python source text (``str``)
        module_names: Last dotted component of the generated module's name

    Raises:
        UnresolvedKeyError: If any source references an unknown key
        ReferenceSourceError: If a caller file cannot be read
        SyntaxError: If a caller source does not parse
    """
    references = []
    for index, source in enumerate(sources, start=1):
        if isinstance(source, str):
            text, name = source, f"<string #{index}>"
        else:
            path = Path(source)
            name = str(path)
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ReferenceSourceError(
                    ErrorTemplate.reference_source_unreadable(name, str(e))
                ) from e
        references.extend(find_references(text, module_names=module_names, source=name))
    _check_references(catalog, references)
