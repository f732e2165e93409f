"""Pytest configuration for the twinegen test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.generated import load_module
from twinegen import CompilerConfig, compile_sources, load_catalog
from twinegen.catalog import CompiledCatalog

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

BAND_CATALOG = """\
; Band names, mangled
[app_ruin_the_band]
    en = Ruin a band name by translating it in French
    fr = Ruiner le nom d'un groupe en le traduisant en français

[band_tool]
    en-us = Tool (US)
    en-gb = Tool (GB)
    fr = Outil

[band_the_doors]
    en = The Doors
    fr = Les portes

[format_string]
    en = %s, %@!
    fr = %s, %@ !

[format_percentage]
    en = %.0f%
    fr = %.0f %%
"""


@pytest.fixture
def band_catalog_text() -> str:
    """Catalog with plain, regional and formatted keys."""
    return BAND_CATALOG


@pytest.fixture
def band_catalog() -> CompiledCatalog:
    """BAND_CATALOG compiled with the default configuration."""
    return load_catalog([BAND_CATALOG])


@pytest.fixture
def band_module() -> dict[str, Any]:
    """Namespace of the module generated from BAND_CATALOG."""
    return load_module(compile_sources([BAND_CATALOG]))


@pytest.fixture
def codec_module() -> dict[str, Any]:
    """Namespace of the module generated from BAND_CATALOG with the codec."""
    return load_module(compile_sources([BAND_CATALOG], CompilerConfig(emit_codec=True)))


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """BAND_CATALOG written to a file."""
    path = tmp_path / "translations.ini"
    path.write_text(BAND_CATALOG, encoding="utf-8")
    return path
