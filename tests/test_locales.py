"""Tests for catalog-wide locale enumeration."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import locale_tag_texts
from twinegen.catalog import LocaleSet, describe_locale, describe_locales
from twinegen.syntax import LocaleTag, parse_locale_tag


class TestLocaleSet:
    """Sorting, deduplication and the default locale."""

    def test_order_and_default(self) -> None:
        locales = LocaleSet.from_tags([LocaleTag("fr"), LocaleTag("en", "gb"), LocaleTag("en")])
        assert list(locales) == [LocaleTag("en"), LocaleTag("en", "gb"), LocaleTag("fr")]
        assert locales.default == LocaleTag("en")

    def test_default_without_region_less_tag(self) -> None:
        locales = LocaleSet.from_tags(
            [LocaleTag("fr"), LocaleTag("en", "us"), LocaleTag("en", "gb")]
        )
        assert locales.default == LocaleTag("en", "gb")

    def test_duplicates_are_removed(self) -> None:
        locales = LocaleSet.from_tags([LocaleTag("en"), LocaleTag("en"), LocaleTag("en", "gb")])
        assert len(locales) == 2
        assert LocaleTag("en", "gb") in locales
        assert LocaleTag("fr") not in locales

    def test_languages_and_regions(self) -> None:
        locales = LocaleSet.from_tags(
            [LocaleTag("fr", "ca"), LocaleTag("en", "us"), LocaleTag("en", "gb"), LocaleTag("en")]
        )
        assert locales.languages == ("en", "fr")
        assert locales.regions == ("ca", "gb", "us")

    def test_empty_set_has_no_default(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            _ = LocaleSet().default

    @given(tags=st.lists(locale_tag_texts.map(parse_locale_tag), min_size=1))
    def test_independent_of_insertion_order(self, tags: list[LocaleTag]) -> None:
        forward = LocaleSet.from_tags(tags)
        backward = LocaleSet.from_tags(reversed(tags))
        assert forward == backward
        assert forward.default == min(tags)
        assert list(forward) == sorted(set(tags))


class TestDescribeLocale:
    """CLDR display names through Babel."""

    @pytest.fixture(autouse=True)
    def _require_babel(self) -> None:
        pytest.importorskip("babel")

    def test_known_locales(self) -> None:
        assert describe_locale(LocaleTag("en", "gb")) == "English (United Kingdom)"
        assert describe_locale(LocaleTag("fr")) == "French"

    def test_unknown_locale_is_none(self) -> None:
        assert describe_locale(LocaleTag("xx")) is None

    def test_describe_locales_warns_on_unknown(self, caplog: pytest.LogCaptureFixture) -> None:
        locales = LocaleSet.from_tags([LocaleTag("en"), LocaleTag("xx")])
        with caplog.at_level(logging.WARNING, logger="twinegen.catalog.locales"):
            names = describe_locales(locales)

        assert names == {LocaleTag("en"): "English", LocaleTag("xx"): None}
        assert "'xx' is not known to CLDR" in caplog.text
