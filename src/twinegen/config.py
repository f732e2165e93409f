"""Compiler configuration.

Provides a single frozen dataclass that encapsulates every option of a
compilation run, shared by the compiler, the emitter and the build entry
points.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from twinegen.constants import DEFAULT_INDENT, DEFAULT_MODULE_DOCSTRING
from twinegen.enums import FallbackPolicy

__all__ = ["CompilerConfig"]


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Immutable configuration for a compilation run.

    All fields have sensible defaults; ``CompilerConfig()`` gives first-listed
    fallback, strict language coverage and no codec.

    Attributes:
        fallback: Dispatch policy for locales without an exact translation
            (default: FallbackPolicy.FIRST_LISTED).
        require_all_languages: Reject keys that lack a language used elsewhere
            in the catalog (default: True).
        emit_codec: Generate ``Lang.encode()``/``Lang.decode()`` and the
            ``UnknownLocaleOnDecode`` error (default: False).
        describe_locales: Annotate ``ALL_LANGUAGES`` entries with English
            display names from CLDR. Requires Babel (default: False).
        indent: Indentation unit of the generated module (default: 4 spaces).
        module_docstring: Docstring of the generated module.

    Example:
        >>> config = CompilerConfig(emit_codec=True, fallback=FallbackPolicy.SAME_LANGUAGE)
        >>> source = compile_sources([catalog_text], config)
    """

    fallback: FallbackPolicy = FallbackPolicy.FIRST_LISTED
    require_all_languages: bool = True
    emit_codec: bool = False
    describe_locales: bool = False
    indent: str = DEFAULT_INDENT
    module_docstring: str = DEFAULT_MODULE_DOCSTRING

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If indent is empty or contains non-blank characters,
                or if module_docstring cannot sit inside triple quotes.
        """
        if not isinstance(self.fallback, FallbackPolicy):
            object.__setattr__(self, "fallback", FallbackPolicy(self.fallback))
        if not self.indent or self.indent.strip(" \t"):
            msg = f"indent must be non-empty spaces or tabs, got {self.indent!r}"
            raise ValueError(msg)
        if '"""' in self.module_docstring or self.module_docstring.endswith(("\\", '"')):
            msg = "module_docstring must not contain triple quotes or end with a quote or backslash"
            raise ValueError(msg)
