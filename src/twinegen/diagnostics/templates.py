"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _quote_all(names: Sequence[str]) -> str:
    return ", ".join(f"'{name}'" for name in names)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def key_value_outside_section(source: str, line: int) -> Diagnostic:
        """Key-value line found before the first section header.

        Args:
            source: Source name
            line: 1-based line number of the offending line

        Returns:
            Diagnostic for KEY_VALUE_OUTSIDE_SECTION
        """
        msg = f"Key-value line outside of any section at line {line}"
        return Diagnostic(
            code=DiagnosticCode.KEY_VALUE_OUTSIDE_SECTION,
            message=msg,
            span=SourceSpan(source, line),
            hint="Add a [section] header before the first translation",
        )

    @staticmethod
    def source_unreadable(source: str, reason: str) -> Diagnostic:
        """Catalog source could not be opened or decoded.

        Args:
            source: Source name
            reason: Underlying I/O or decoding error

        Returns:
            Diagnostic for SOURCE_UNREADABLE
        """
        msg = f"Could not read catalog source '{source}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNREADABLE,
            message=msg,
            span=SourceSpan(source),
            hint="Catalog sources must be readable UTF-8 text",
        )

    @staticmethod
    def locale_tag_invalid(tag: str, span: SourceSpan | None) -> Diagnostic:
        """Locale tag does not match ``language`` or ``language-region``.

        Args:
            tag: The offending tag text
            span: Location of the key-value line

        Returns:
            Diagnostic for LOCALE_TAG_INVALID
        """
        msg = f"Malformed locale tag '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TAG_INVALID,
            message=msg,
            span=span,
            hint="Use a language code optionally followed by a region, e.g. 'en' or 'en-gb'",
        )

    @staticmethod
    def placeholder_unsupported(
        placeholder: str, reason: str, span: SourceSpan | None
    ) -> Diagnostic:
        """Placeholder recognized but not expressible as a format field.

        Args:
            placeholder: Placeholder source text (e.g. ``%.3d``)
            reason: Why it cannot be translated
            span: Location of the translation

        Returns:
            Diagnostic for PLACEHOLDER_UNSUPPORTED
        """
        msg = f"Unsupported placeholder '{placeholder}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNSUPPORTED,
            message=msg,
            span=span,
            hint="Pad integers with a zero-prefixed width instead, e.g. '%03d'",
        )

    @staticmethod
    def key_not_identifier(key: str, identifier: str, span: SourceSpan | None) -> Diagnostic:
        """Normalized key is not a usable Python identifier.

        Args:
            key: Raw catalog key
            identifier: Result of normalization
            span: Location of the first translation of the key

        Returns:
            Diagnostic for KEY_NOT_IDENTIFIER
        """
        msg = f"Key '{key}' normalizes to '{identifier}', which is not a valid identifier"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_IDENTIFIER,
            message=msg,
            span=span,
            hint="Start keys with a letter and avoid Python keywords",
        )

    @staticmethod
    def catalog_empty() -> Diagnostic:
        """No translation at all was found in the sources.

        Returns:
            Diagnostic for CATALOG_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_EMPTY,
            message="Catalog contains no translations",
            hint="At least one [section] with one 'locale = text' line is required",
        )

    @staticmethod
    def section_empty(key: str) -> Diagnostic:
        """Section header without any translation line.

        Args:
            key: Raw catalog key

        Returns:
            Diagnostic for SECTION_EMPTY
        """
        msg = f"Section [{key}] has no translations"
        return Diagnostic(
            code=DiagnosticCode.SECTION_EMPTY,
            message=msg,
            hint="Add at least one 'locale = text' line or remove the section",
        )

    @staticmethod
    def key_collision(identifier: str, first: str, second: str) -> Diagnostic:
        """Two raw keys normalize to one identifier.

        Args:
            identifier: Shared normalized identifier
            first: First raw key (sorted order)
            second: Second raw key (sorted order)

        Returns:
            Diagnostic for KEY_COLLISION
        """
        msg = f"Keys '{first}' and '{second}' both normalize to '{identifier}'"
        return Diagnostic(
            code=DiagnosticCode.KEY_COLLISION,
            message=msg,
            hint="Rename one of the sections",
        )

    @staticmethod
    def placeholder_mismatch(
        key: str, expected: int, found: int, locale: str, span: SourceSpan | None
    ) -> Diagnostic:
        """Translations of one key take different numbers of arguments.

        Args:
            key: Raw catalog key
            expected: Placeholder count of the first translation
            found: Placeholder count of the offending translation
            locale: Locale tag of the offending translation
            span: Location of the offending translation

        Returns:
            Diagnostic for PLACEHOLDER_MISMATCH
        """
        msg = (
            f"Translation '{locale}' of key '{key}' has {found} placeholder(s), "
            f"expected {expected}"
        )
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MISMATCH,
            message=msg,
            span=span,
            hint="Every translation of a key must take the same arguments",
        )

    @staticmethod
    def translation_missing(key: str, languages: Sequence[str]) -> Diagnostic:
        """Key lacks languages present elsewhere in the catalog.

        Args:
            key: Raw catalog key
            languages: Sorted missing languages

        Returns:
            Diagnostic for TRANSLATION_MISSING
        """
        msg = f"Key '{key}' has no translation for {_quote_all(languages)}"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_MISSING,
            message=msg,
            hint="All keys must provide every language of the catalog",
        )

    @staticmethod
    def key_unresolved(names: Sequence[str], span: SourceSpan | None) -> Diagnostic:
        """Caller references unknown keys.

        Args:
            names: Unresolved identifiers in order of first reference
            span: Location of the first unresolved reference

        Returns:
            Diagnostic for KEY_UNRESOLVED
        """
        noun = "key" if len(names) == 1 else "keys"
        msg = f"Unresolved translation {noun} {_quote_all(names)}"
        return Diagnostic(
            code=DiagnosticCode.KEY_UNRESOLVED,
            message=msg,
            span=span,
            hint="Check the key spelling or add the section to the catalog",
        )

    @staticmethod
    def reference_source_unreadable(source: str, reason: str) -> Diagnostic:
        """Caller Python source could not be opened or decoded.

        Args:
            source: Path of the caller file
            reason: Underlying I/O or decoding error

        Returns:
            Diagnostic for REFERENCE_SOURCE_UNREADABLE
        """
        msg = f"Could not read source '{source}' for reference checking: {reason}"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_SOURCE_UNREADABLE,
            message=msg,
            span=SourceSpan(source),
            hint="Reference checking reads caller files as UTF-8 Python source",
        )

    @staticmethod
    def locale_unknown_language(value: str, language: str) -> Diagnostic:
        """Codec decode met a language outside the catalog.

        Args:
            value: Full string being decoded
            language: Offending language part

        Returns:
            Diagnostic for LOCALE_UNKNOWN_LANGUAGE
        """
        msg = f"Unknown language '{language}' in locale '{value}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN_LANGUAGE,
            message=msg,
            hint="Expected an existing language",
        )

    @staticmethod
    def locale_unknown_region(value: str, region: str) -> Diagnostic:
        """Codec decode met a region outside the catalog.

        Args:
            value: Full string being decoded
            region: Offending region part

        Returns:
            Diagnostic for LOCALE_UNKNOWN_REGION
        """
        msg = f"Unknown region '{region}' in locale '{value}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN_REGION,
            message=msg,
            hint="Expected an existing region",
        )
