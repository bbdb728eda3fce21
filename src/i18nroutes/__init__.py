"""i18nroutes - locale-aware route resolution for file-based web routers.

Derives a canonical route key per page template, maps keys to localized URL
paths and back, and generates the (locale x route) patterns a router should
serve. Also interpolates numbered placeholder tags in translated strings and
sanitizes translated HTML.

Public API:
    LocaleRegistry - Supported locales and default-locale URL policy
    RoutesConfig - Site layout and discovery settings
    TranslationTable - Validated routes.json (forward and reverse lookup)
    PathTranslator - translate_path / resolve_route_key
    RouteBuilder - Discover, generate, and register routes in one session
    discover_routes - Scan a template tree for routes
    generate_patterns - Produce route patterns from discovered routes
    interpolate - Merge placeholder tags with a reference string's markup
    sanitize - Strip tags outside the allow-list
    negotiate_locale - Pick a supported locale from Accept-Language

Exceptions:
    I18nRoutesError - Base exception class
    ConfigurationError - Fatal setup error
    TranslationTableError - Invalid routes.json
"""

from .config import LocaleRegistry, RoutesConfig
from .discovery import RouteDescriptor, discover_routes
from .enums import BuildMode, LocaleHintPolicy
from .errors import ConfigurationError, I18nRoutesError, TranslationTableError
from .integration import RouteBuild, RouteBuilder
from .locale_utils import negotiate_locale
from .markup import interpolate, sanitize
from .patterns import RoutePattern, generate_patterns
from .table import TranslationTable
from .translator import PathTranslator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18n-routes")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildMode",
    "ConfigurationError",
    "I18nRoutesError",
    "LocaleHintPolicy",
    "LocaleRegistry",
    "PathTranslator",
    "RouteBuild",
    "RouteBuilder",
    "RouteDescriptor",
    "RoutePattern",
    "RoutesConfig",
    "TranslationTable",
    "TranslationTableError",
    "__version__",
    "discover_routes",
    "generate_patterns",
    "interpolate",
    "negotiate_locale",
    "sanitize",
]
