"""Shared constants for i18nroutes.

Single source of truth for names and defaults used by discovery, pattern
generation, and the markup helpers. Placing them here avoids circular
imports between the config and runtime modules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identity
    "INTEGRATION_NAME",
    # Directory layout
    "ROUTES_DIR",
    "PAGES_DIR",
    "TEMP_PAGES_DIR",
    "TRANSLATIONS_DIR",
    "ROUTES_FILE",
    # Discovery
    "DEFAULT_PAGE_EXTENSION",
    "PRIVATE_PREFIX",
    "INDEX_SEGMENT",
    # Path translation
    "ROOT_KEY",
    "PASSTHROUGH_KEYS",
    # Markup
    "ALLOWED_TAGS",
]

# ============================================================================
# IDENTITY
# ============================================================================

# Prefix for every user-facing diagnostic message.
INTEGRATION_NAME: str = "i18n-routes"

# ============================================================================
# DIRECTORY LAYOUT
# ============================================================================
#
# All directories are relative to the site source directory. The routes
# directory holds the canonical templates; the temp pages directory is the
# per-build working tree used by ahead-of-time generation.

ROUTES_DIR: str = "routes"
PAGES_DIR: str = "pages"
TEMP_PAGES_DIR: str = "temp-pages"
TRANSLATIONS_DIR: str = "i18n/translations"
ROUTES_FILE: str = "routes.json"

# ============================================================================
# DISCOVERY
# ============================================================================

DEFAULT_PAGE_EXTENSION: str = ".html"

# Templates whose file name starts with this marker are private partials.
PRIVATE_PREFIX: str = "_"

INDEX_SEGMENT: str = "index"

# ============================================================================
# PATH TRANSLATION
# ============================================================================

ROOT_KEY: str = "/"

# Placeholder link targets that are never translated.
PASSTHROUGH_KEYS: frozenset[str] = frozenset(("#", ""))

# ============================================================================
# MARKUP
# ============================================================================

# Tags allowed to survive sanitize(): bold, italic, line break, emphasis.
ALLOWED_TAGS: frozenset[str] = frozenset(("strong", "br", "em", "i", "b"))
