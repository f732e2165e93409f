"""Indentation-aware source writer for code generation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

__all__ = ["CodeWriter", "string_literal"]


class CodeWriter:
    """Accumulates generated source lines at the current indentation.

    Output always uses ``\\n`` line endings, has no trailing whitespace and
    ends with exactly one newline.

    Example:
        >>> writer = CodeWriter()
        >>> writer.line("def f() -> int:")
        >>> with writer.indented():
        ...     writer.line("return 1")
        >>> print(writer.getvalue(), end="")
        def f() -> int:
            return 1
    """

    __slots__ = ("_depth", "_lines", "_unit")

    def __init__(self, indent: str = "    ") -> None:
        self._unit = indent
        self._depth = 0
        self._lines: list[str] = []

    @property
    def unit(self) -> str:
        """One level of indentation."""
        return self._unit

    def line(self, text: str = "") -> None:
        """Append one line (blank lines carry no indentation)."""
        self._lines.append(f"{self._unit * self._depth}{text}" if text else "")

    def lines(self, *texts: str) -> None:
        """Append several lines."""
        for text in texts:
            self.line(text)

    def blank(self, count: int = 1) -> None:
        """Append blank lines."""
        for _ in range(count):
            self.line()

    @contextmanager
    def indented(self, levels: int = 1) -> Iterator[None]:
        """Indent lines written inside the block."""
        self._depth += levels
        try:
            yield
        finally:
            self._depth -= levels

    def getvalue(self) -> str:
        """Generated source text."""
        lines = list(self._lines)
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n"


def string_literal(text: str) -> str:
    """Python string literal for text, double-quoted where possible.

    Example:
        >>> string_literal("Outil")
        '"Outil"'
        >>> string_literal("d'un groupe")
        '"d\\'un groupe"'
    """
    if "'" not in text and '"' not in text:
        return f'"{repr(text)[1:-1]}"'
    return repr(text)
