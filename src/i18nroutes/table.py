"""Route translation table.

Loads routes.json (``{locale: {route_key: localized_segment}}``) once and
validates it against the locale registry before anything reads it:

- Top-level keys are exactly the supported locale codes
- Each locale maps route keys to non-empty string segments (no nesting)
- Segments are unique per locale, so reverse lookup is unambiguous

Validation failures raise TranslationTableError. After construction the
table is read-only.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from i18nroutes.errors import TranslationTableError

if TYPE_CHECKING:
    from i18nroutes.config import LocaleRegistry
    from i18nroutes.types import LocaleCode, RouteKey

__all__ = ["TranslationTable"]

logger = logging.getLogger(__name__)


class TranslationTable:
    """Per-locale mapping from route key to localized path segment.

    Supports forward lookup (key -> segment) and reverse lookup
    (segment -> key). Both are O(1); the reverse index is built at load.

    Example:
        >>> registry = LocaleRegistry({"en": "English", "fr": "French"}, "en")
        >>> table = TranslationTable(
        ...     {"en": {"about": "about"}, "fr": {"about": "a-propos"}}, registry
        ... )
        >>> table.get("fr", "about")
        'a-propos'
        >>> table.find_key("fr", "a-propos")
        'about'
    """

    __slots__ = ("_forward", "_reverse", "_source")

    def __init__(
        self,
        routes: Mapping[str, Any],
        registry: LocaleRegistry,
        *,
        source: str | None = None,
    ) -> None:
        """Validate and freeze the table.

        Args:
            routes: Parsed routes.json content
            registry: Supported locales the table must cover exactly
            source: Where the data came from, for error messages

        Raises:
            TranslationTableError: If the data violates the table schema
        """
        self._source = source or "<mapping>"
        self._validate_locales(routes, registry)

        forward: dict[LocaleCode, Mapping[RouteKey, str]] = {}
        reverse: dict[LocaleCode, Mapping[str, RouteKey]] = {}
        for locale in registry.codes:
            entries = self._validate_entries(locale, routes[locale], registry)
            forward[locale] = MappingProxyType(entries)
            reverse[locale] = MappingProxyType({v: k for k, v in entries.items()})
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)
        logger.debug(
            "Loaded route translations from %s: %s",
            self._source,
            ", ".join(f"{loc}={len(keys)}" for loc, keys in forward.items()),
        )

    def _validate_locales(self, routes: Mapping[str, Any], registry: LocaleRegistry) -> None:
        if not isinstance(routes, Mapping):
            msg = f"{self._source}: top level must be an object keyed by locale"
            raise TranslationTableError(msg)
        missing = [code for code in registry.codes if code not in routes]
        if missing:
            msg = f"{self._source}: no route translations for locale(s) {', '.join(missing)}"
            raise TranslationTableError(msg, locale=missing[0])
        unknown = [code for code in routes if not registry.is_supported(code)]
        if unknown:
            msg = f"{self._source}: unsupported locale(s) {', '.join(unknown)}"
            raise TranslationTableError(msg, locale=unknown[0])

    def _validate_entries(
        self, locale: LocaleCode, entries: Any, registry: LocaleRegistry
    ) -> dict[RouteKey, str]:
        if not isinstance(entries, Mapping):
            msg = f"{self._source}: translations for '{locale}' must be an object"
            raise TranslationTableError(msg, locale=locale)

        seen: dict[str, RouteKey] = {}
        result: dict[RouteKey, str] = {}
        for key, segment in entries.items():
            if not isinstance(segment, str):
                msg = (
                    f"{self._source}: '{locale}.{key}' must be a string, "
                    f"got {type(segment).__name__}"
                )
                raise TranslationTableError(msg, locale=locale, key=key)
            if not segment or segment.startswith("/") or segment.endswith("/"):
                msg = (
                    f"{self._source}: '{locale}.{key}' must be a non-empty path "
                    f"without leading or trailing '/', got {segment!r}"
                )
                raise TranslationTableError(msg, locale=locale, key=key)
            # Unprefixed URLs must not start with a locale code.
            head = segment.split("/", 1)[0]
            if not registry.is_prefixed(locale) and registry.is_supported(head):
                msg = (
                    f"{self._source}: '{locale}.{key}' would be served at '/{segment}', "
                    f"which starts with locale '{head}'"
                )
                raise TranslationTableError(msg, locale=locale, key=key)
            if segment in seen:
                msg = (
                    f"{self._source}: '{locale}' maps both '{seen[segment]}' and "
                    f"'{key}' to '{segment}'"
                )
                raise TranslationTableError(msg, locale=locale, key=key)
            seen[segment] = key
            result[key] = segment
        return result

    @classmethod
    def from_json(cls, path: str | Path, registry: LocaleRegistry) -> TranslationTable:
        """Load and validate a routes.json file.

        Raises:
            TranslationTableError: If the file is missing, is not valid JSON,
                or violates the table schema
        """
        json_path = Path(path)
        try:
            with json_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            msg = f"Route translations not found at '{json_path}'"
            raise TranslationTableError(msg) from e
        except json.JSONDecodeError as e:
            msg = f"Route translations at '{json_path}' are not valid JSON: {e}"
            raise TranslationTableError(msg) from e
        return cls(data, registry, source=str(json_path))

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales covered by the table, in registry order."""
        return tuple(self._forward)

    def entries(self, locale: LocaleCode) -> Mapping[RouteKey, str]:
        """Read-only key -> segment mapping for one locale (empty if unknown)."""
        return self._forward.get(locale, MappingProxyType({}))

    def get(self, locale: LocaleCode, route_key: RouteKey) -> str | None:
        """Forward lookup: localized segment for route_key, or None."""
        return self.entries(locale).get(route_key)

    def find_key(self, locale: LocaleCode, segment: str) -> RouteKey | None:
        """Reverse lookup: route key whose localized segment is segment, or None."""
        reverse = self._reverse.get(locale)
        if reverse is None:
            return None
        return reverse.get(segment)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TranslationTable(source={self._source!r}, locales={self.locales!r})"
