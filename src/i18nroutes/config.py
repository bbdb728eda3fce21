"""Locale registry and site configuration.

Both objects are frozen dataclasses built once at startup and passed
explicitly to every component; nothing reads ambient global state.

Example config.toml:

    [i18n]
    default_locale = "en"
    show_default_locale = false
    src_dir = "src"

    [i18n.locales]
    en = "English"
    fr = "French"

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from i18nroutes.constants import (
    DEFAULT_PAGE_EXTENSION,
    ROUTES_DIR,
    ROUTES_FILE,
    TEMP_PAGES_DIR,
    TRANSLATIONS_DIR,
)
from i18nroutes.enums import LocaleHintPolicy
from i18nroutes.errors import ConfigurationError
from i18nroutes.locale_utils import display_name, validate_locale_code

if TYPE_CHECKING:
    from collections.abc import Mapping

    from i18nroutes.types import LocaleCode

__all__ = ["LocaleRegistry", "RoutesConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleRegistry:
    """Immutable set of supported locales.

    Attributes:
        locales: Locale code -> display name, in URL generation order.
            An empty display name is filled from CLDR data.
        default_locale: Locale served when the URL carries none
        show_default_locale: Whether default-locale URLs carry the
            locale prefix (False suppresses it: "/about" not "/en/about")

    Example:
        >>> registry = LocaleRegistry({"en": "English", "fr": "French"}, "en")
        >>> registry.codes
        ('en', 'fr')
        >>> registry.is_prefixed("en"), registry.is_prefixed("fr")
        (False, True)
    """

    locales: Mapping[LocaleCode, str]
    default_locale: LocaleCode
    show_default_locale: bool = False

    def __post_init__(self) -> None:
        """Validate codes and freeze the locale mapping.

        Raises:
            ConfigurationError: If no locales are given, a code is invalid,
                or the default locale is not supported
        """
        if not self.locales:
            msg = "At least one locale is required"
            raise ConfigurationError(msg)
        names: dict[LocaleCode, str] = {}
        for code, name in self.locales.items():
            validate_locale_code(code)
            names[code] = name or display_name(code)
        if self.default_locale not in names:
            msg = (
                f"Default locale '{self.default_locale}' is not one of the "
                f"supported locales: {', '.join(names)}"
            )
            raise ConfigurationError(msg)
        object.__setattr__(self, "locales", MappingProxyType(names))

    @property
    def codes(self) -> tuple[LocaleCode, ...]:
        """Supported locale codes in configuration order."""
        return tuple(self.locales)

    def is_supported(self, locale: str) -> bool:
        """Check if locale is one of the configured codes."""
        return locale in self.locales

    def is_prefixed(self, locale: LocaleCode) -> bool:
        """Check if URLs for locale start with the locale segment."""
        return self.show_default_locale or locale != self.default_locale

    def name(self, locale: LocaleCode) -> str:
        """Display name of a supported locale."""
        return self.locales[locale]


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Immutable site layout and discovery settings.

    Directory fields are relative to src_dir.

    Attributes:
        registry: Supported locales
        src_dir: Site source directory
        routes_dir: Canonical page templates
        temp_pages_dir: Per-build working tree for ahead-of-time mode
        translations_dir: Directory holding routes.json and message catalogs
        routes_file: Route translation table file name
        overrides_dir: Optional tree of per-locale template overrides
            (``<overrides_dir>/<locale>/...``), applied in ahead-of-time mode
        page_extension: Recognized page template extension
        hint_policy: What discovery does with a leading locale segment
        clear_temp_pages: Remove the working tree once patterns are generated
    """

    registry: LocaleRegistry
    src_dir: Path
    routes_dir: str = ROUTES_DIR
    temp_pages_dir: str = TEMP_PAGES_DIR
    translations_dir: str = TRANSLATIONS_DIR
    routes_file: str = ROUTES_FILE
    overrides_dir: str | None = None
    page_extension: str = DEFAULT_PAGE_EXTENSION
    hint_policy: LocaleHintPolicy = LocaleHintPolicy.RECORD
    clear_temp_pages: bool = True

    def __post_init__(self) -> None:
        """Normalize paths and validate the page extension.

        Raises:
            ValueError: If page_extension does not start with a dot
        """
        object.__setattr__(self, "src_dir", Path(self.src_dir))
        if not self.page_extension.startswith("."):
            msg = f"page_extension must start with '.', got: '{self.page_extension}'"
            raise ValueError(msg)

    @property
    def routes_path(self) -> Path:
        """Absolute location of the canonical templates."""
        return self.src_dir / self.routes_dir

    @property
    def temp_pages_path(self) -> Path:
        """Absolute location of the ahead-of-time working tree."""
        return self.src_dir / self.temp_pages_dir

    @property
    def translations_path(self) -> Path:
        """Absolute location of the translation catalogs."""
        return self.src_dir / self.translations_dir

    @property
    def routes_file_path(self) -> Path:
        """Absolute location of routes.json."""
        return self.translations_path / self.routes_file

    @property
    def overrides_path(self) -> Path | None:
        """Absolute location of per-locale overrides, if configured."""
        if self.overrides_dir is None:
            return None
        return self.src_dir / self.overrides_dir

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> RoutesConfig:
        """Build a config from an ``[i18n]`` table.

        Relative src_dir values resolve against base_dir (default: cwd).
        Unknown keys are logged at debug level and ignored.

        Raises:
            ConfigurationError: If locales or default_locale is missing
        """
        known = {
            "locales",
            "default_locale",
            "show_default_locale",
            "src_dir",
            "routes_dir",
            "temp_pages_dir",
            "translations_dir",
            "routes_file",
            "overrides_dir",
            "page_extension",
            "locale_hint_policy",
            "clear_temp_pages",
        }
        if "locales" not in data or "default_locale" not in data:
            msg = "[i18n] table requires 'locales' and 'default_locale'"
            raise ConfigurationError(msg)

        registry = LocaleRegistry(
            locales=dict(data["locales"]),
            default_locale=data["default_locale"],
            show_default_locale=bool(data.get("show_default_locale", False)),
        )
        root = base_dir if base_dir is not None else Path.cwd()
        src_dir = root / data.get("src_dir", ".")
        extra = {k: v for k, v in data.items() if k not in known}
        if extra:
            logger.debug("Ignoring unknown i18n config keys: %s", ", ".join(sorted(extra)))

        try:
            hint_policy = LocaleHintPolicy(data.get("locale_hint_policy", LocaleHintPolicy.RECORD))
        except ValueError as e:
            msg = f"Invalid locale_hint_policy: {data.get('locale_hint_policy')!r}"
            raise ConfigurationError(msg) from e

        return cls(
            registry=registry,
            src_dir=src_dir,
            routes_dir=data.get("routes_dir", ROUTES_DIR),
            temp_pages_dir=data.get("temp_pages_dir", TEMP_PAGES_DIR),
            translations_dir=data.get("translations_dir", TRANSLATIONS_DIR),
            routes_file=data.get("routes_file", ROUTES_FILE),
            overrides_dir=data.get("overrides_dir"),
            page_extension=data.get("page_extension", DEFAULT_PAGE_EXTENSION),
            hint_policy=hint_policy,
            clear_temp_pages=bool(data.get("clear_temp_pages", True)),
        )

    @classmethod
    def from_toml(cls, path: str | Path) -> RoutesConfig:
        """Load the ``[i18n]`` table of a TOML file.

        Relative directories resolve against the file's directory.

        Raises:
            ConfigurationError: If the file is missing, unparseable, or has
                no ``[i18n]`` table
        """
        config_path = Path(path)
        try:
            with config_path.open("rb") as f:
                loaded = tomllib.load(f)
        except FileNotFoundError as e:
            msg = f"Config file not found: '{config_path}'"
            raise ConfigurationError(msg) from e
        except tomllib.TOMLDecodeError as e:
            msg = f"Config file '{config_path}' is not valid TOML: {e}"
            raise ConfigurationError(msg) from e

        table = loaded.get("i18n")
        if not isinstance(table, dict):
            msg = f"Config file '{config_path}' has no [i18n] table"
            raise ConfigurationError(msg)
        return cls.from_mapping(table, base_dir=config_path.resolve().parent)
