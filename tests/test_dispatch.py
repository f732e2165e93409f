"""Tests for per-key dispatch tables and fallback policies."""

from __future__ import annotations

import logging

import pytest

from twinegen import CompilerConfig, FallbackPolicy, load_catalog
from twinegen.catalog import CompiledCatalog, build_dispatch
from twinegen.syntax import LocaleTag

# fr listed first so that the two fallback policies disagree for en-ca
BAND_TOOL = """\
[band_tool]
    fr = Outil
    en-us = Tool (US)
    en-gb = Tool (GB)
"""


def _catalog(policy: FallbackPolicy) -> CompiledCatalog:
    return load_catalog([BAND_TOOL], CompilerConfig(fallback=policy))


def _arms(catalog: CompiledCatalog, name: str) -> list[tuple[str, str | None, str]]:
    return [
        (arm.language, arm.region, arm.template.source)
        for arm in catalog.dispatch(name).arms
    ]


class TestArmOrder:
    """Arms sorted by language, regional before region-less."""

    def test_regional_arms_precede_baseline(self) -> None:
        catalog = load_catalog(["[k]\nen = Base\nfr = Fr\nen-gb = GB\n"])
        assert _arms(catalog, "k") == [
            ("en", "gb", "GB"),
            ("en", None, "Base"),
            ("fr", None, "Fr"),
        ]

    def test_default_is_first_listed(self) -> None:
        table = _catalog(FallbackPolicy.FIRST_LISTED).dispatch("band_tool")
        assert table.default.source == "Outil"

    def test_duplicate_tag_keeps_first(self, caplog: pytest.LogCaptureFixture) -> None:
        catalog = load_catalog(["[k]\nen = First\nen = Second\n"])
        with caplog.at_level(logging.DEBUG, logger="twinegen.catalog.dispatch"):
            arms = _arms(catalog, "k")
        assert arms == [("en", None, "First")]
        assert "unreachable" in caplog.text

    def test_table_carries_identifier_and_arity(self) -> None:
        catalog = load_catalog(["[FormatString]\nen = %s, %@!\n"])
        table = catalog.dispatch("FormatString")
        assert table.identifier == "format_string"
        assert table.arity == 2

    def test_build_dispatch_defaults_to_first_listed(self) -> None:
        entry = _catalog(FallbackPolicy.SAME_LANGUAGE).resolve("band_tool")
        assert build_dispatch(entry) == _catalog(FallbackPolicy.FIRST_LISTED).dispatch("band_tool")


class TestFirstListedFallback:
    """Exact region, then language baseline, then the first-listed text."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            (LocaleTag("fr"), "Outil"),
            (LocaleTag("fr", "ca"), "Outil"),
            (LocaleTag("en", "us"), "Tool (US)"),
            (LocaleTag("en", "gb"), "Tool (GB)"),
            (LocaleTag("en", "ca"), "Outil"),
            (LocaleTag("en"), "Outil"),
        ],
    )
    def test_lookup(self, tag: LocaleTag, expected: str) -> None:
        catalog = _catalog(FallbackPolicy.FIRST_LISTED)
        assert catalog.format("band_tool", tag) == expected

    def test_language_baseline_wins_over_default(self) -> None:
        catalog = load_catalog(["[k]\nfr = Bonjour\nen = Hello\nen-gb = Hello (GB)\n"])
        assert catalog.format("k", "en-ca") == "Hello"


class TestSameLanguageFallback:
    """Unlisted regions of a regional-only language use its first translation."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            (LocaleTag("fr"), "Outil"),
            (LocaleTag("en", "us"), "Tool (US)"),
            (LocaleTag("en", "gb"), "Tool (GB)"),
            (LocaleTag("en", "ca"), "Tool (US)"),
            (LocaleTag("en"), "Tool (US)"),
        ],
    )
    def test_lookup(self, tag: LocaleTag, expected: str) -> None:
        catalog = _catalog(FallbackPolicy.SAME_LANGUAGE)
        assert catalog.format("band_tool", tag) == expected

    def test_synthetic_arm_follows_regional_arms(self) -> None:
        assert _arms(_catalog(FallbackPolicy.SAME_LANGUAGE), "band_tool") == [
            ("en", "us", "Tool (US)"),
            ("en", "gb", "Tool (GB)"),
            ("en", None, "Tool (US)"),
            ("fr", None, "Outil"),
        ]

    def test_existing_baseline_is_not_duplicated(self) -> None:
        catalog = load_catalog(
            ["[k]\nen-gb = GB\nen = Base\n"], CompilerConfig(fallback="same-language")
        )
        assert _arms(catalog, "k") == [("en", "gb", "GB"), ("en", None, "Base")]
