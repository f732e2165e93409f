"""Tests for catalog key normalization."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.strategies import catalog_keys
from twinegen.diagnostics import DiagnosticCode, MalformedCatalogError, SourceSpan
from twinegen.syntax import (
    is_valid_identifier,
    normalize_key,
    to_camel_case,
    to_snake_case,
    validate_identifier,
)


class TestSnakeCase:
    """to_snake_case() word splitting."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("band_tool", "band_tool"),
            ("BandTool", "band_tool"),
            ("bandTool", "band_tool"),
            ("band-tool", "band_tool"),
            ("band tool", "band_tool"),
            ("HTTPServer", "http_server"),
            ("getHTTP", "get_http"),
            ("version2Name", "version2_name"),
            ("the-jackson 5", "the_jackson_5"),
            ("__private__", "private"),
            ("RageAgainstTheMachine", "rage_against_the_machine"),
        ],
    )
    def test_conversions(self, text: str, expected: str) -> None:
        assert to_snake_case(text) == expected

    @given(key=catalog_keys)
    def test_snake_case_is_idempotent(self, key: str) -> None:
        assert to_snake_case(to_snake_case(key)) == to_snake_case(key)


class TestCamelCase:
    """to_camel_case() for generated constructor names."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("en", "En"), ("zh_hans", "ZhHans"), ("pt-br", "PtBr"), ("EN", "En")],
    )
    def test_conversions(self, text: str, expected: str) -> None:
        assert to_camel_case(text) == expected


class TestNormalizeKey:
    """normalize_key() and identifier validity."""

    def test_dots_become_double_underscore(self) -> None:
        assert normalize_key("app.menu.quitApp") == "app__menu__quit_app"

    def test_plain_snake_key_is_unchanged(self) -> None:
        assert normalize_key("app_ruin_the_band") == "app_ruin_the_band"

    @pytest.mark.parametrize(("first", "second"), [("BandTool", "band_tool"), ("a-b", "a_b")])
    def test_distinct_keys_can_collide(self, first: str, second: str) -> None:
        assert first != second
        assert normalize_key(first) == normalize_key(second)

    @given(key=catalog_keys)
    def test_generated_keys_are_fixed_points(self, key: str) -> None:
        assert normalize_key(key) == key
        assert is_valid_identifier(key)

    @pytest.mark.parametrize("identifier", ["5_stars", "class", "", "é-t"])
    def test_invalid_identifiers(self, identifier: str) -> None:
        assert not is_valid_identifier(identifier)


class TestValidateIdentifier:
    """validate_identifier() rejects names a generated module cannot define."""

    def test_accepts_plain_identifier(self) -> None:
        validate_identifier("band_tool", "BandTool")

    @pytest.mark.parametrize(("identifier", "key"), [("5_stars", "5 Stars"), ("class", "class")])
    def test_rejects_with_key_and_location(self, identifier: str, key: str) -> None:
        span = SourceSpan("bands.ini", 3)
        with pytest.raises(MalformedCatalogError) as exc_info:
            validate_identifier(identifier, key, span=span)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.KEY_NOT_IDENTIFIER
        assert diagnostic.span == span

    def test_rejects_reserved_name(self) -> None:
        with pytest.raises(MalformedCatalogError):
            validate_identifier("dataclasses", "dataclasses")
