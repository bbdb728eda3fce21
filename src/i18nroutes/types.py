"""Type aliases for the routing domain.

Provides semantic type aliases used throughout the package and by user code
when annotating link builders and route handlers.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "RouteKey",
    "UrlPath",
]

type LocaleCode = str
"""Supported locale code used as a URL segment (e.g., 'en', 'fr', 'pt-BR')."""

type RouteKey = str
"""Canonical, locale-independent page identifier (e.g., '/', 'about', 'blog/post')."""

type UrlPath = str
"""Absolute URL path produced for a route (e.g., '/fr/a-propos')."""
