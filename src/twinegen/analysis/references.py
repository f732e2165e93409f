"""Build-time detection of unknown translation keys.

Generated modules expose one function per key, so a reference to a missing key
is already a missing-attribute failure when the caller runs. This module moves
that failure to build time: it parses caller sources with ``ast`` and checks
every name they take from the generated module against the compiled catalog.

Recognized forms (``i18n`` stands for any configured module name):

    import i18n                    -> i18n.band_tool
    import i18n as t               -> t.band_tool
    import pkg.i18n                -> pkg.i18n.band_tool
    import pkg.i18n as t           -> t.band_tool
    from pkg import i18n           -> i18n.band_tool
    from i18n import band_tool     -> band_tool

Bindings are collected module-wide; scoping and rebinding are not tracked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from twinegen.catalog.compiler import CompiledCatalog
from twinegen.constants import RESERVED_NAMES
from twinegen.diagnostics import ErrorTemplate, SourceSpan, UnresolvedKeyError

__all__ = [
    "KeyReference",
    "check_references",
    "find_references",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyReference:
    """One name a caller takes from a generated module.

    Attributes:
        name: Attribute or imported name (e.g. "band_tool")
        line: 1-based line of the reference
        column: 0-based column of the reference
        source: Name of the caller source
    """

    name: str
    line: int
    column: int
    source: str = "<string>"

    @property
    def span(self) -> SourceSpan:
        """Location for diagnostics."""
        return SourceSpan(self.source, self.line)


def _dotted_name(node: ast.expr) -> str | None:
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            prefix = _dotted_name(value)
            return None if prefix is None else f"{prefix}.{attr}"
        case _:
            return None


class _ReferenceCollector(ast.NodeVisitor):
    """Two passes: bindings of the generated module, then accesses through them."""

    def __init__(self, module_names: frozenset[str], source: str) -> None:
        self._module_names = module_names
        self._source = source
        self.bindings: set[str] = set()
        self.references: list[KeyReference] = []

    def _is_generated(self, dotted: str) -> bool:
        return dotted.rpartition(".")[2] in self._module_names

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            if not self._is_generated(alias.name):
                continue
            self.bindings.add(alias.asname or alias.name)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        module = node.module or ""
        if module and self._is_generated(module):
            for alias in node.names:
                if alias.name == "*":
                    continue
                self.references.append(
                    KeyReference(alias.name, node.lineno, node.col_offset, self._source)
                )
            return
        for alias in node.names:
            if alias.name in self._module_names:
                self.bindings.add(alias.asname or alias.name)

    def collect_accesses(self, tree: ast.AST) -> None:
        for node in ast.walk(tree):
            if not isinstance(node, ast.Attribute):
                continue
            owner = _dotted_name(node.value)
            if owner is not None and owner in self.bindings:
                self.references.append(
                    KeyReference(node.attr, node.lineno, node.col_offset, self._source)
                )


def find_references(
    source_text: str,
    *,
    module_names: Sequence[str] = ("i18n",),
    source: str = "<string>",
) -> list[KeyReference]:
    """Find names a Python source takes from generated translation modules.

    Args:
        source_text: Python source of a caller
        module_names: Last dotted component of generated module names
        source: Name used in diagnostics

    Returns:
        References ordered by position

    Raises:
        SyntaxError: If the caller source does not parse

    Example:
        >>> [ref.name for ref in find_references("import i18n\\ni18n.band_tool(lang)")]
        ['band_tool']
    """
    tree = ast.parse(source_text, filename=source)
    collector = _ReferenceCollector(frozenset(module_names), source)
    collector.visit(tree)
    collector.collect_accesses(tree)
    references = sorted(collector.references, key=lambda ref: (ref.line, ref.column))
    logger.debug("Found %d translation reference(s) in %s", len(references), source)
    return references


def check_references(catalog: CompiledCatalog, references: Iterable[KeyReference]) -> None:
    """Reject references to keys the catalog does not define.

    Names of the generated module that are not keys (``Lang``,
    ``DEFAULT_LANG``, dunders) are accepted.

    Raises:
        UnresolvedKeyError: Listing every unknown name, located at the first
    """
    defined = frozenset(catalog.identifiers) | RESERVED_NAMES
    unknown = [
        ref for ref in references if ref.name not in defined and not ref.name.startswith("__")
    ]
    if not unknown:
        return
    names = tuple(dict.fromkeys(ref.name for ref in unknown))
    raise UnresolvedKeyError(ErrorTemplate.key_unresolved(names, unknown[0].span), names=names)
