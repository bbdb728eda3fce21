"""Hypothesis strategies for i18nroutes property-based testing.

Usage:
    from tests.strategies import route_keys, translation_tables
"""

from .routes import path_segments, route_keys, translation_tables

__all__ = [
    "path_segments",
    "route_keys",
    "translation_tables",
]
