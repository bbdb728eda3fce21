"""Pytest configuration for the i18nroutes test suite.

Hypothesis profiles:
- dev: local runs, 200 examples. The properties here are pure string and
  mapping checks, so this stays fast.
- ci: 50 derandomized examples with no deadline (shared runners are slow
  to import Babel locale data on first use).
- verbose: 50 examples with progress output, for debugging a strategy.

Profile selection: HYPOTHESIS_PROFILE env var, else "ci" when CI=true,
else "dev".

Tests marked @pytest.mark.fuzz (long tag-scanner runs) are skipped unless
selected with: pytest -m fuzz
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from hypothesis import Verbosity, settings

from i18nroutes.config import LocaleRegistry, RoutesConfig
from i18nroutes.table import TranslationTable
from i18nroutes.translator import PathTranslator
from tests.helpers.sites import LOCALES, ROUTES, SITE_PAGES, write_tree

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, deadline=None, print_blob=True)
settings.register_profile("verbose", max_examples=50, verbosity=Verbosity.verbose)


def _detect_profile() -> str:
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
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def registry() -> LocaleRegistry:
    """en/fr/es/de with the English prefix suppressed."""
    return LocaleRegistry(LOCALES, "en")


@pytest.fixture
def prefixed_registry() -> LocaleRegistry:
    """en/fr/es/de with every locale prefixed."""
    return LocaleRegistry(LOCALES, "en", show_default_locale=True)


@pytest.fixture
def table(registry: LocaleRegistry) -> TranslationTable:
    return TranslationTable(ROUTES, registry)


@pytest.fixture
def translator(registry: LocaleRegistry, table: TranslationTable) -> PathTranslator:
    return PathTranslator(registry, table)


@pytest.fixture
def site(tmp_path: Path, registry: LocaleRegistry) -> RoutesConfig:
    """A site with templates in src/routes and routes.json in place."""
    src = tmp_path / "src"
    write_tree(src / "routes", SITE_PAGES)
    translations = src / "i18n" / "translations"
    translations.mkdir(parents=True)
    (translations / "routes.json").write_text(json.dumps(ROUTES), encoding="utf-8")
    (translations / "en.json").write_text("{}", encoding="utf-8")
    (translations / "fr.json").write_text("{}", encoding="utf-8")
    return RoutesConfig(registry=registry, src_dir=src)
