"""Locale-aware path translation.

Forward: (route key, locale) -> URL path, for templates building links.
Reverse: URL -> route key, for handlers determining the active route.

    translate_path("about", "fr")       -> "/fr/a-propos"
    translate_path("about", "en")       -> "/about"   (default locale suppressed)
    translate_path("/", "fr")           -> "/fr"
    resolve_route_key("/fr/a-propos")   -> "about"

Forward translation never raises: a missing table entry logs one warning
and falls back to the untranslated key.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

from i18nroutes.constants import INTEGRATION_NAME, PASSTHROUGH_KEYS, ROOT_KEY

if TYPE_CHECKING:
    from i18nroutes.config import LocaleRegistry
    from i18nroutes.table import TranslationTable
    from i18nroutes.types import LocaleCode, RouteKey, UrlPath

__all__ = ["PathTranslator"]

logger = logging.getLogger(__name__)


def _path_segments(url: str) -> list[str]:
    """Decoded path segments of url, ignoring leading and trailing slashes."""
    path = unquote(urlsplit(url).path).strip("/")
    return path.split("/") if path else []


class PathTranslator:
    """Translate route keys to localized URL paths and back.

    A translator is bound to a locale used when translate_path() is called
    without one; the default locale unless created through bind(). Bound
    translators are callable, so templates can use them as link builders:

        >>> t = translator.bind("fr")
        >>> t("about")
        '/fr/a-propos'
        >>> t("about", "en")
        '/about'
    """

    __slots__ = ("_locale", "_registry", "_table")

    def __init__(
        self,
        registry: LocaleRegistry,
        table: TranslationTable,
        locale: LocaleCode | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            registry: Supported locales
            table: Validated route translations
            locale: Locale used when none is passed (default: registry default)
        """
        self._registry = registry
        self._table = table
        self._locale = self._known_locale(locale) if locale else registry.default_locale

    @property
    def locale(self) -> LocaleCode:
        """Locale used when translate_path() is called without one."""
        return self._locale

    def _known_locale(self, locale: LocaleCode) -> LocaleCode:
        if self._registry.is_supported(locale):
            return locale
        logger.warning(
            "[%s]: unsupported locale '%s', using '%s'",
            INTEGRATION_NAME,
            locale,
            self._registry.default_locale,
        )
        return self._registry.default_locale

    def bind(self, locale: LocaleCode) -> PathTranslator:
        """Return a translator whose default locale is locale."""
        return PathTranslator(self._registry, self._table, locale)

    def translate_path(self, route_key: RouteKey, locale: LocaleCode | None = None) -> UrlPath:
        """Localized URL path for route_key.

        Args:
            route_key: Canonical key, "/" for the index page; "#" and ""
                are placeholder links returned unchanged
            locale: Target locale (default: the bound locale)

        Returns:
            Absolute URL path
        """
        if route_key in PASSTHROUGH_KEYS:
            return route_key

        target = self._known_locale(locale) if locale else self._locale
        prefixed = self._registry.is_prefixed(target)

        if route_key == ROOT_KEY:
            return f"/{target}" if prefixed else ROOT_KEY

        segment = self._table.get(target, route_key)
        if segment is None:
            logger.warning(
                "[%s]: key '%s' not found in route translations for '%s'",
                INTEGRATION_NAME,
                route_key,
                target,
            )
            segment = route_key

        return f"/{target}/{segment}" if prefixed else f"/{segment}"

    __call__ = translate_path

    def locale_from_url(self, url: str) -> LocaleCode:
        """Locale named by the first path segment, else the default locale."""
        segments = _path_segments(url)
        if segments and self._registry.is_supported(segments[0]):
            return segments[0]
        return self._registry.default_locale

    def resolve_route_key(self, url: str) -> RouteKey | None:
        """Route key for a URL or path, or None if no route matches.

        Query string, fragment, and a trailing slash are ignored.

        Args:
            url: Absolute URL or path (e.g., "https://site/fr/a-propos?x=1")

        Returns:
            Route key, "/" for the index of any locale, or None when the
            path has no entry in that locale's translations
        """
        segments = _path_segments(url)
        if not segments:
            return ROOT_KEY

        first = segments[0]
        if self._registry.is_supported(first):
            locale = first
            rest = segments[1:]
            if not rest:
                return ROOT_KEY
        else:
            locale = self._registry.default_locale
            rest = segments
            if len(rest) == 1:
                # Unprefixed top-level route: the segment is the key unless
                # the default locale translates some key to it.
                return self._table.find_key(locale, first) or first

        remainder = "/".join(rest)
        route_key = self._table.find_key(locale, remainder)
        if route_key is None:
            logger.debug("No route for '%s' in '%s' translations", remainder, locale)
        return route_key
