"""Compiled catalog entries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from twinegen.diagnostics import SourceSpan
from twinegen.syntax.locale_tag import LocaleTag
from twinegen.syntax.printf import FormatTemplate

__all__ = [
    "CatalogEntry",
    "Translation",
]


@dataclass(frozen=True, slots=True)
class Translation:
    """One parsed translation of a key.

    Attributes:
        tag: Parsed locale tag
        template: Parsed translation text
        span: Catalog location of the translation line
    """

    tag: LocaleTag
    template: FormatTemplate
    span: SourceSpan | None = None


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """All translations of one catalog key.

    Attributes:
        key: Raw section name
        identifier: Normalized name of the generated function
        translations: Translations in catalog order (never empty)
    """

    key: str
    identifier: str
    translations: tuple[Translation, ...]

    def __post_init__(self) -> None:
        """Validate entry invariants.

        Raises:
            ValueError: If translations is empty
        """
        if not self.translations:
            msg = f"CatalogEntry '{self.key}' has no translations"
            raise ValueError(msg)

    @property
    def first(self) -> Translation:
        """First translation in catalog order (the default dispatch arm)."""
        return self.translations[0]

    @property
    def arity(self) -> int:
        """Number of formatting arguments every translation takes."""
        return self.first.template.arity

    @property
    def languages(self) -> frozenset[str]:
        """Languages covered, with or without region."""
        return frozenset(t.tag.language for t in self.translations)
