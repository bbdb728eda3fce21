"""Route pattern generation.

Turns discovered templates into the (URL pattern, entrypoint) pairs a
file-based router registers. Two modes:

DEV (dynamic):
    Templates are discovered once in the canonical tree. Every route key is
    crossed with every locale; all entrypoints point at the canonical file.

BUILD (ahead-of-time):
    Templates are discovered in a materialized tree holding one copy per
    prefixed locale under ``<locale>/`` and the suppressed default locale's
    copy at the root. Each descriptor's locale comes from its hint; its
    entrypoint is the locale-specific copy.

Output is locale-major (registry order), then route order, with one pattern
per distinct URL.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from i18nroutes.constants import ROOT_KEY
from i18nroutes.enums import BuildMode
from i18nroutes.translator import PathTranslator

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from i18nroutes.config import LocaleRegistry
    from i18nroutes.discovery import RouteDescriptor
    from i18nroutes.table import TranslationTable
    from i18nroutes.types import LocaleCode, RouteKey

__all__ = ["RoutePattern", "generate_patterns", "strip_locale_hint"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A route to register with the host router.

    Attributes:
        pattern: URL pattern (e.g., "/fr/a-propos")
        entrypoint: Template serving it (e.g., "src/routes/about.html")
    """

    pattern: str
    entrypoint: str


def strip_locale_hint(descriptor: RouteDescriptor) -> RouteKey:
    """Route key of descriptor without its leading locale segment.

    Keys discovered with LocaleHintPolicy.STRIP (hint_stripped) are returned
    unchanged, so "fr/fr.html" stays "fr" instead of becoming the root page.

    Example:
        >>> strip_locale_hint(RouteDescriptor("fr/about.html", "fr/about", "fr"))
        'about'
        >>> strip_locale_hint(RouteDescriptor("fr/index.html", "fr", "fr"))
        '/'
    """
    hint = descriptor.source_locale_hint
    key = descriptor.route_key
    if not hint or descriptor.hint_stripped:
        return key
    if key == hint:
        return ROOT_KEY
    return key.removeprefix(f"{hint}/")


def _dynamic_pairs(
    descriptors: tuple[RouteDescriptor, ...],
    registry: LocaleRegistry,
) -> Iterator[tuple[LocaleCode, RouteKey, RouteDescriptor]]:
    for locale in registry.codes:
        for descriptor in descriptors:
            yield locale, descriptor.route_key, descriptor


def _materialized_pairs(
    descriptors: tuple[RouteDescriptor, ...],
    registry: LocaleRegistry,
) -> Iterator[tuple[LocaleCode, RouteKey, RouteDescriptor]]:
    order = {code: index for index, code in enumerate(registry.codes)}
    located = [
        (descriptor.source_locale_hint or registry.default_locale, position, descriptor)
        for position, descriptor in enumerate(descriptors)
    ]
    located.sort(key=lambda item: (order[item[0]], item[1]))
    for locale, _, descriptor in located:
        yield locale, strip_locale_hint(descriptor), descriptor


def generate_patterns(
    descriptors: Iterable[RouteDescriptor],
    registry: LocaleRegistry,
    table: TranslationTable,
    *,
    entry_dir: str | Path,
    mode: BuildMode = BuildMode.DEV,
) -> tuple[RoutePattern, ...]:
    """Produce one route pattern per distinct (locale, route key) URL.

    Missing translations fall back to the untranslated key (logged by the
    translator); generation continues.

    Args:
        descriptors: Templates found by discover_routes()
        registry: Supported locales
        table: Validated route translations
        entry_dir: Directory the descriptors were discovered in; entrypoints
            are ``<entry_dir>/<source_filename>``
        mode: DEV for the canonical tree, BUILD for a materialized tree

    Returns:
        Route patterns, locale-major then route order, without duplicates
    """
    items = tuple(descriptors)
    translator = PathTranslator(registry, table)
    base = Path(entry_dir).as_posix()

    pairs = (
        _materialized_pairs(items, registry)
        if mode is BuildMode.BUILD
        else _dynamic_pairs(items, registry)
    )

    patterns: list[RoutePattern] = []
    seen: dict[str, str] = {}
    for locale, route_key, descriptor in pairs:
        url = translator.translate_path(route_key, locale)
        entrypoint = f"{base}/{descriptor.source_filename}"
        if url in seen:
            if seen[url] != entrypoint:
                logger.warning(
                    "Pattern %s already served by %s; ignoring %s",
                    url,
                    seen[url],
                    entrypoint,
                )
            continue
        seen[url] = entrypoint
        patterns.append(RoutePattern(pattern=url, entrypoint=entrypoint))
        logger.debug("Generated %s -> %s", url, entrypoint)
    return tuple(patterns)
