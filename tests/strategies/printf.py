"""Hypothesis strategies for printf directives and translation text.

Usage:
    from tests.strategies.printf import printf_cases

    @given(case=printf_cases())
    def test_equivalence(case):
        directive, value = case
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# DIRECTIVE PARTS
# ============================================================================

flags: SearchStrategy[str] = st.sampled_from(["", "-", "+", "#"])

# Plain widths ("7") and zero-padded widths ("07")
numeric_widths: SearchStrategy[str] = st.one_of(
    st.just(""),
    st.integers(min_value=1, max_value=20).map(str),
    st.integers(min_value=1, max_value=20).map(lambda n: f"0{n}"),
)

text_widths: SearchStrategy[str] = st.one_of(
    st.just(""),
    st.integers(min_value=1, max_value=20).map(str),
)

precisions: SearchStrategy[str] = st.one_of(
    st.just(""),
    st.integers(min_value=0, max_value=8).map(lambda n: f".{n}"),
)

integer_values: SearchStrategy[int] = st.integers(min_value=-(10**9), max_value=10**9)

float_values: SearchStrategy[float] = st.floats(
    min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False
)

# Text without "%" so that literal runs never form directives
plain_text: SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_characters="%", blacklist_categories=("Cs",)),
    max_size=20,
)


# ============================================================================
# DIRECTIVES WITH VALUES
# ============================================================================


@composite
def printf_cases(draw: st.DrawFn) -> tuple[str, object]:
    """Generate a supported printf directive and a value it accepts.

    The directive is returned without the leading "%".

    Events emitted:
    - printf_category={integer|float|text}: Conversion category
    """
    category = draw(st.sampled_from(["integer", "float", "text"]))
    flag = draw(flags)
    event(f"printf_category={category}")

    match category:
        case "integer":
            conversion = draw(st.sampled_from("dixX"))
            width = draw(numeric_widths)
            return f"{flag}{width}{conversion}", draw(integer_values)
        case "float":
            width = draw(numeric_widths)
            precision = draw(precisions)
            return f"{flag}{width}{precision}f", draw(float_values)
        case _:
            width = draw(text_widths)
            precision = draw(precisions)
            value = draw(st.one_of(plain_text, integer_values, st.booleans()))
            return f"{flag}{width}{precision}s", value


@composite
def printf_templates(draw: st.DrawFn) -> tuple[str, tuple[object, ...]]:
    """Generate translation text mixing literal runs, ``%%`` and directives.

    Returns:
        (text, args) where ``text % args`` is the printf rendering

    Events emitted:
    - printf_placeholders={n}: Number of directives in the text
    """
    parts: list[str] = [draw(plain_text)]
    args: list[object] = []
    for _ in range(draw(st.integers(min_value=0, max_value=4))):
        if draw(st.booleans()):
            parts.append("%%")
        else:
            directive, value = draw(printf_cases())
            parts.append(f"%{directive}")
            args.append(value)
        parts.append(draw(plain_text))
    event(f"printf_placeholders={len(args)}")
    return "".join(parts), tuple(args)
