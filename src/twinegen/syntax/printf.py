"""printf placeholder transcompiler.

Translations embed printf-style placeholders:

    %[flag][width][.precision]conversion

    flag        one of - + #
    width       decimal digits (a leading 0 requests zero padding)
    precision   "." followed by decimal digits
    conversion  d i s @ x X f

This module splits translation text into literal runs and placeholders
(FormatTemplate) and renders the template in Python ``str.format`` syntax so
that ``template.to_format_string().format(*args)`` renders what the printf
directive would, e.g. ``%-8.2f`` -> ``{:<8.2f}``, ``%#X`` -> ``{:#X}``.

Literal Text:
    ``%%`` is a literal percent sign. A lone trailing ``%`` and unsupported
    sequences such as ``%q`` are copied through unchanged. Braces are escaped
    for ``str.format``.

Unsupported:
    Precision on integer conversions (``%.3d``) has no format-spec
    equivalent and raises MalformedPlaceholderError instead of silently
    changing the output.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from twinegen.diagnostics import ErrorTemplate, MalformedPlaceholderError, SourceSpan
from twinegen.enums import Conversion

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Segments
    "Literal",
    "Placeholder",
    "Segment",
    # Template
    "FormatTemplate",
    "parse_format",
]

_DIRECTIVE_PATTERN: re.Pattern[str] = re.compile(
    r"%(?:(?P<flag>[-+#])?(?P<width>\d+)?(?P<precision>\.\d+)?(?P<conversion>[dis@xXf])"
    r"|(?P<escape>%))",
    re.ASCII,
)

_LEFT_JUSTIFY = "-"
_SIGN_FLAGS = frozenset({"+", "#"})
_TRUNCATING_CONVERSIONS = frozenset({Conversion.DECIMAL, Conversion.INTEGER})


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text run.

    Attributes:
        source: Text as written in the catalog ("%%" for an escaped percent)
        value: Text as rendered ("%" for an escaped percent)
    """

    source: str
    value: str

    def to_format_string(self) -> str:
        """Render with braces escaped for ``str.format``."""
        return self.value.replace("{", "{{").replace("}", "}}")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """printf placeholder.

    Attributes:
        conversion: Conversion category
        flag: One of "-", "+", "#", or None
        width: Width digits as written (may start with "0"), or None
        precision: Precision digits without the dot, or None
    """

    conversion: Conversion
    flag: str | None = None
    width: str | None = None
    precision: str | None = None

    @property
    def source(self) -> str:
        """printf directive as written in the catalog."""
        precision = f".{self.precision}" if self.precision is not None else ""
        return f"%{self.flag or ''}{self.width or ''}{precision}{self.conversion}"

    @property
    def truncates(self) -> bool:
        """True for ``%d`` and ``%i``, which truncate their argument to an int."""
        return self.conversion in _TRUNCATING_CONVERSIONS

    def argument(self, expression: str) -> str:
        """Argument expression as passed to ``str.format``.

        Example:
            >>> Placeholder(Conversion.DECIMAL).argument("arg0")
            'int(arg0)'
        """
        return f"int({expression})" if self.truncates else expression

    def to_format_string(self) -> str:
        """Render the equivalent ``str.format`` replacement field.

        Example:
            >>> Placeholder(Conversion.FLOAT, precision="0").to_format_string()
            '{:.0f}'
            >>> Placeholder(Conversion.STRING, flag="-", width="10").to_format_string()
            '{!s:<10}'
            >>> Placeholder(Conversion.HEX_UPPER, flag="#").to_format_string()
            '{:#X}'
        """
        width = self.width or ""
        align = ""
        if self.flag == _LEFT_JUSTIFY:
            # printf ignores zero padding on left-justified fields.
            width = width.lstrip("0")
            align = "<" if width else ""

        if self.conversion.is_text:
            # printf ignores zero padding, "+" and "#" for strings and
            # right-justifies them, str.format left-justifies by default.
            width = width.lstrip("0")
            if width and not align:
                align = ">"
            precision = f".{self.precision}" if self.precision is not None else ""
            spec = f"{align}{width}{precision}"
            if not spec and self.conversion is Conversion.OBJECT:
                return "{}"
            return f"{{!s:{spec}}}" if spec else "{!s}"

        sign = self.flag if self.flag in _SIGN_FLAGS else ""
        precision = f".{self.precision}" if self.precision is not None else ""
        kind = _FORMAT_TYPES[self.conversion]
        return f"{{:{align}{sign}{width}{precision}{kind}}}"


_FORMAT_TYPES: dict[Conversion, str] = {
    Conversion.DECIMAL: "d",
    Conversion.INTEGER: "d",
    Conversion.HEX_LOWER: "x",
    Conversion.HEX_UPPER: "X",
    Conversion.FLOAT: "f",
}

Segment: TypeAlias = Literal | Placeholder


@dataclass(frozen=True, slots=True)
class FormatTemplate:
    """Translation text split into literal runs and placeholders.

    Invariant: concatenating segment sources reconstructs the catalog text.

    Attributes:
        segments: Literal runs and placeholders in source order
    """

    segments: tuple[Segment, ...]

    @property
    def source(self) -> str:
        """Original catalog text."""
        return "".join(segment.source for segment in self.segments)

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        """Placeholders in argument order."""
        return tuple(s for s in self.segments if isinstance(s, Placeholder))

    @property
    def arity(self) -> int:
        """Number of positional arguments the template consumes."""
        return len(self.placeholders)

    @property
    def text(self) -> str:
        """Rendered text of a template without placeholders.

        Raises:
            ValueError: If the template has placeholders
        """
        if self.arity:
            msg = f"template {self.source!r} has {self.arity} placeholder(s)"
            raise ValueError(msg)
        return "".join(s.value for s in self.segments if isinstance(s, Literal))

    def to_format_string(self) -> str:
        """Render the whole template in ``str.format`` syntax."""
        return "".join(segment.to_format_string() for segment in self.segments)

    def format(self, *args: object) -> str:
        """Render the template with positional arguments.

        Raises:
            TypeError: If the argument count does not match arity
        """
        if len(args) != self.arity:
            msg = f"template takes {self.arity} argument(s), {len(args)} given"
            raise TypeError(msg)
        values = [
            int(arg) if placeholder.truncates else arg  # type: ignore[call-overload]
            for placeholder, arg in zip(self.placeholders, args, strict=True)
        ]
        return self.to_format_string().format(*values)


def _literal(text: str) -> Literal:
    return Literal(source=text, value=text)


def parse_format(text: str, *, span: SourceSpan | None = None) -> FormatTemplate:
    """Split translation text into a FormatTemplate.

    Args:
        text: Translation text as written in the catalog
        span: Location of the translation for diagnostics

    Returns:
        FormatTemplate whose source equals text

    Raises:
        MalformedPlaceholderError: If an integer conversion carries a precision

    Example:
        >>> template = parse_format("%s, %@!")
        >>> template.to_format_string()
        '{!s}, {}!'
        >>> parse_format("%.0f%").to_format_string()
        '{:.0f}%'
    """
    segments: list[Segment] = []
    position = 0
    for match in _DIRECTIVE_PATTERN.finditer(text):
        if match.start() > position:
            segments.append(_literal(text[position : match.start()]))
        position = match.end()

        if match.group("escape") is not None:
            segments.append(Literal(source="%%", value="%"))
            continue

        precision = match.group("precision")
        placeholder = Placeholder(
            conversion=Conversion(match.group("conversion")),
            flag=match.group("flag"),
            width=match.group("width"),
            precision=precision[1:] if precision is not None else None,
        )
        if placeholder.conversion.is_integer and placeholder.precision is not None:
            raise MalformedPlaceholderError(
                ErrorTemplate.placeholder_unsupported(
                    match.group(0), "integer conversions take no precision", span
                )
            )
        segments.append(placeholder)

    if position < len(text):
        segments.append(_literal(text[position:]))

    return FormatTemplate(segments=tuple(segments))
