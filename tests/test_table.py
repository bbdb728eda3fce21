"""Tests for TranslationTable load-time validation and lookups.

Python 3.13+.
"""

import json
from pathlib import Path

import pytest

from i18nroutes.config import LocaleRegistry
from i18nroutes.errors import ConfigurationError, TranslationTableError
from i18nroutes.table import TranslationTable
from tests.helpers.sites import ROUTES


class TestLookups:
    def test_forward(self, table: TranslationTable) -> None:
        assert table.get("fr", "about") == "a-propos"
        assert table.get("fr", "blog/first-post") == "blogue/premier-article"

    def test_forward_missing(self, table: TranslationTable) -> None:
        assert table.get("es", "blog/first-post") is None
        assert table.get("it", "about") is None

    def test_reverse(self, table: TranslationTable) -> None:
        assert table.find_key("fr", "contactez-nous") == "contact"
        assert table.find_key("de", "blog/erster-beitrag") == "blog/first-post"

    def test_reverse_is_per_locale(self, table: TranslationTable) -> None:
        assert table.find_key("en", "a-propos") is None
        assert table.find_key("it", "about") is None

    def test_locales_follow_registry(self, table: TranslationTable) -> None:
        assert table.locales == ("en", "fr", "es", "de")

    def test_entries_read_only(self, table: TranslationTable) -> None:
        with pytest.raises(TypeError):
            table.entries("fr")["about"] = "x"  # type: ignore[index]
        assert dict(table.entries("unknown")) == {}

    def test_source_data_copied(self, registry: LocaleRegistry) -> None:
        data = json.loads(json.dumps(ROUTES))
        table = TranslationTable(data, registry)
        data["fr"]["about"] = "changed"
        assert table.get("fr", "about") == "a-propos"


class TestValidation:
    """Schema violations raise TranslationTableError at load time."""

    def _routes(self, **changes: object) -> dict:
        data = json.loads(json.dumps(ROUTES))
        data.update(changes)
        return data

    def test_is_configuration_error(self) -> None:
        assert issubclass(TranslationTableError, ConfigurationError)

    def test_missing_locale(self, registry: LocaleRegistry) -> None:
        data = self._routes()
        del data["de"]
        with pytest.raises(TranslationTableError, match="no route translations") as info:
            TranslationTable(data, registry)
        assert info.value.locale == "de"

    def test_unsupported_locale(self, registry: LocaleRegistry) -> None:
        data = self._routes(it={"about": "chi-siamo"})
        with pytest.raises(TranslationTableError, match="unsupported locale") as info:
            TranslationTable(data, registry)
        assert info.value.locale == "it"

    def test_top_level_not_object(self, registry: LocaleRegistry) -> None:
        with pytest.raises(TranslationTableError, match="top level"):
            TranslationTable(["en"], registry)  # type: ignore[arg-type]

    def test_locale_not_object(self, registry: LocaleRegistry) -> None:
        with pytest.raises(TranslationTableError, match="must be an object"):
            TranslationTable(self._routes(fr=["a-propos"]), registry)

    def test_nested_value(self, registry: LocaleRegistry) -> None:
        data = self._routes(fr={"blog": {"post": "article"}})
        with pytest.raises(TranslationTableError, match="must be a string") as info:
            TranslationTable(data, registry)
        assert (info.value.locale, info.value.key) == ("fr", "blog")

    @pytest.mark.parametrize("segment", ["", "/a-propos", "a-propos/"])
    def test_bad_segment(self, registry: LocaleRegistry, segment: str) -> None:
        data = self._routes(fr={"about": segment})
        with pytest.raises(TranslationTableError, match="non-empty path"):
            TranslationTable(data, registry)

    def test_duplicate_segment(self, registry: LocaleRegistry) -> None:
        data = self._routes(fr={"about": "info", "contact": "info"})
        with pytest.raises(TranslationTableError, match="maps both 'about' and 'contact'") as info:
            TranslationTable(data, registry)
        assert (info.value.locale, info.value.key) == ("fr", "contact")

    @pytest.mark.parametrize("segment", ["fr", "de/about"])
    def test_default_segment_starting_with_locale(
        self, registry: LocaleRegistry, segment: str
    ) -> None:
        data = self._routes(en={**ROUTES["en"], "french": segment})
        with pytest.raises(TranslationTableError, match="starts with locale") as info:
            TranslationTable(data, registry)
        assert (info.value.locale, info.value.key) == ("en", "french")

    def test_locale_segment_allowed_when_prefixed(
        self, prefixed_registry: LocaleRegistry
    ) -> None:
        data = self._routes(en={**ROUTES["en"], "french": "fr"})
        assert TranslationTable(data, prefixed_registry).get("en", "french") == "fr"

    def test_prefixed_locale_may_use_locale_code(self, registry: LocaleRegistry) -> None:
        data = self._routes(fr={**ROUTES["fr"], "german": "de"})
        assert TranslationTable(data, registry).find_key("fr", "de") == "german"

    def test_same_segment_in_different_locales_allowed(self, registry: LocaleRegistry) -> None:
        table = TranslationTable(ROUTES, registry)
        assert table.get("es", "blog") == table.get("de", "blog") == "blog"


class TestFromJson:
    def test_loads_file(self, tmp_path: Path, registry: LocaleRegistry) -> None:
        path = tmp_path / "routes.json"
        path.write_text(json.dumps(ROUTES), encoding="utf-8")
        table = TranslationTable.from_json(path, registry)
        assert table.get("de", "about") == "uber-uns"
        assert str(path) in repr(table)

    def test_missing_file(self, tmp_path: Path, registry: LocaleRegistry) -> None:
        with pytest.raises(TranslationTableError, match="not found"):
            TranslationTable.from_json(tmp_path / "routes.json", registry)

    def test_invalid_json(self, tmp_path: Path, registry: LocaleRegistry) -> None:
        path = tmp_path / "routes.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(TranslationTableError, match="not valid JSON"):
            TranslationTable.from_json(path, registry)

    def test_error_names_source(self, tmp_path: Path, registry: LocaleRegistry) -> None:
        path = tmp_path / "routes.json"
        path.write_text(json.dumps({"en": {}}), encoding="utf-8")
        with pytest.raises(TranslationTableError, match="routes.json: no route translations"):
            TranslationTable.from_json(path, registry)
