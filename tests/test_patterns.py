"""Tests for route pattern generation in DEV and BUILD modes.

Python 3.13+.
"""

import logging

import pytest

from i18nroutes.config import LocaleRegistry
from i18nroutes.discovery import RouteDescriptor
from i18nroutes.enums import BuildMode
from i18nroutes.patterns import RoutePattern, generate_patterns, strip_locale_hint
from i18nroutes.table import TranslationTable
from tests.helpers.sites import ROUTES

ROOT = RouteDescriptor("index.html", "/")
ABOUT = RouteDescriptor("about.html", "about")
POST = RouteDescriptor("blog/first-post.html", "blog/first-post")


class TestDynamicMode:
    def test_two_locales_four_patterns(self) -> None:
        registry = LocaleRegistry({"en": "English", "fr": "French"}, "en")
        table = TranslationTable(
            {"en": {"about": "about"}, "fr": {"about": "a-propos"}}, registry
        )
        patterns = generate_patterns([ROOT, ABOUT], registry, table, entry_dir="src/routes")
        assert patterns == (
            RoutePattern("/", "src/routes/index.html"),
            RoutePattern("/about", "src/routes/about.html"),
            RoutePattern("/fr", "src/routes/index.html"),
            RoutePattern("/fr/a-propos", "src/routes/about.html"),
        )

    def test_locale_major_order(self, registry: LocaleRegistry, table: TranslationTable) -> None:
        patterns = generate_patterns([ROOT, ABOUT], registry, table, entry_dir="r")
        assert [p.pattern for p in patterns] == [
            "/",
            "/about",
            "/fr",
            "/fr/a-propos",
            "/es",
            "/es/acerca-de",
            "/de",
            "/de/uber-uns",
        ]

    def test_every_locale_prefixed_when_default_shown(
        self, prefixed_registry: LocaleRegistry
    ) -> None:
        table = TranslationTable(ROUTES, prefixed_registry)
        patterns = generate_patterns([ROOT], prefixed_registry, table, entry_dir="r")
        assert [p.pattern for p in patterns] == ["/en", "/fr", "/es", "/de"]

    def test_nested_entrypoint_keeps_directories(
        self, registry: LocaleRegistry, table: TranslationTable
    ) -> None:
        patterns = generate_patterns([POST], registry, table, entry_dir="src/routes")
        assert {p.entrypoint for p in patterns} == {"src/routes/blog/first-post.html"}
        assert patterns[1] == RoutePattern(
            "/fr/blogue/premier-article", "src/routes/blog/first-post.html"
        )

    def test_missing_translation_is_not_fatal(
        self,
        registry: LocaleRegistry,
        table: TranslationTable,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            patterns = generate_patterns([POST], registry, table, entry_dir="r")
        assert RoutePattern("/es/blog/first-post", "r/blog/first-post.html") in patterns
        assert len(patterns) == 4

    def test_duplicate_urls_dropped(
        self,
        registry: LocaleRegistry,
        table: TranslationTable,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        # A key equal to another key's segment collides in the default locale.
        clash = RouteDescriptor("contact-us.html", "contact-us")
        contact = RouteDescriptor("contact.html", "contact")
        with caplog.at_level(logging.WARNING, logger="i18nroutes.patterns"):
            patterns = generate_patterns([contact, clash], registry, table, entry_dir="r")
        urls = [p.pattern for p in patterns]
        assert len(urls) == len(set(urls))
        assert RoutePattern("/contact-us", "r/contact.html") in patterns
        assert "already served by" in caplog.text

    def test_no_descriptors(self, registry: LocaleRegistry, table: TranslationTable) -> None:
        assert generate_patterns([], registry, table, entry_dir="r") == ()


class TestMaterializedMode:
    def test_hints_select_locale(self, registry: LocaleRegistry, table: TranslationTable) -> None:
        descriptors = [
            RouteDescriptor("about.html", "about"),
            RouteDescriptor("de/about.html", "de/about", "de"),
            RouteDescriptor("de/index.html", "de", "de"),
            RouteDescriptor("fr/about.html", "fr/about", "fr"),
            RouteDescriptor("fr/index.html", "fr", "fr"),
            RouteDescriptor("index.html", "/"),
        ]
        patterns = generate_patterns(
            descriptors, registry, table, entry_dir="src/temp-pages", mode=BuildMode.BUILD
        )
        assert patterns == (
            RoutePattern("/about", "src/temp-pages/about.html"),
            RoutePattern("/", "src/temp-pages/index.html"),
            RoutePattern("/fr/a-propos", "src/temp-pages/fr/about.html"),
            RoutePattern("/fr", "src/temp-pages/fr/index.html"),
            RoutePattern("/de/uber-uns", "src/temp-pages/de/about.html"),
            RoutePattern("/de", "src/temp-pages/de/index.html"),
        )

    def test_stripped_keys(self, registry: LocaleRegistry, table: TranslationTable) -> None:
        descriptors = [RouteDescriptor("fr/about.html", "about", "fr")]
        patterns = generate_patterns(
            descriptors, registry, table, entry_dir="w", mode=BuildMode.BUILD
        )
        assert patterns == (RoutePattern("/fr/a-propos", "w/fr/about.html"),)


class TestStripLocaleHint:
    @pytest.mark.parametrize(
        ("descriptor", "expected"),
        [
            (RouteDescriptor("about.html", "about"), "about"),
            (RouteDescriptor("fr/about.html", "fr/about", "fr"), "about"),
            (RouteDescriptor("fr/index.html", "fr", "fr"), "/"),
            (RouteDescriptor("fr/blog/index.html", "fr/blog", "fr"), "blog"),
            (RouteDescriptor("fr/about.html", "about", "fr"), "about"),
            (RouteDescriptor("fr/fr.html", "fr", "fr", hint_stripped=True), "fr"),
            (
                RouteDescriptor("fr/fr/about.html", "fr/about", "fr", hint_stripped=True),
                "fr/about",
            ),
        ],
    )
    def test_strip(self, descriptor: RouteDescriptor, expected: str) -> None:
        assert strip_locale_hint(descriptor) == expected
