"""Tests for CompilerConfig validation."""

from __future__ import annotations

import dataclasses

import pytest

from twinegen import CompilerConfig, FallbackPolicy


class TestCompilerConfig:
    """Defaults and construction-time validation."""

    def test_defaults(self) -> None:
        config = CompilerConfig()
        assert config.fallback is FallbackPolicy.FIRST_LISTED
        assert config.require_all_languages is True
        assert config.emit_codec is False
        assert config.describe_locales is False
        assert config.indent == "    "

    def test_fallback_from_string(self) -> None:
        config = CompilerConfig(fallback="same-language")  # type: ignore[arg-type]
        assert config.fallback is FallbackPolicy.SAME_LANGUAGE

    def test_unknown_fallback(self) -> None:
        with pytest.raises(ValueError, match="nearest"):
            CompilerConfig(fallback="nearest")  # type: ignore[arg-type]

    @pytest.mark.parametrize("indent", ["", "  x", "\n"])
    def test_invalid_indent(self, indent: str) -> None:
        with pytest.raises(ValueError, match="indent"):
            CompilerConfig(indent=indent)

    @pytest.mark.parametrize("indent", ["  ", "\t", "        "])
    def test_valid_indent(self, indent: str) -> None:
        assert CompilerConfig(indent=indent).indent == indent

    @pytest.mark.parametrize("docstring", ['Has """ inside', "Ends with \\", 'Ends with "'])
    def test_invalid_docstring(self, docstring: str) -> None:
        with pytest.raises(ValueError, match="module_docstring"):
            CompilerConfig(module_docstring=docstring)

    def test_frozen(self) -> None:
        config = CompilerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.emit_codec = True  # type: ignore[misc]
