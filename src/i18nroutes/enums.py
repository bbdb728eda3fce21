"""Enumerations for i18nroutes type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class BuildMode(StrEnum):
    """Route generation mode, named after the host command that triggers it.

    StrEnum provides automatic string conversion: str(BuildMode.BUILD) == "build"
    """

    BUILD = "build"
    """Ahead-of-time: pages are materialized per locale, then discovered."""

    DEV = "dev"
    """Dynamic: one canonical tree, every locale points at the same files."""


class LocaleHintPolicy(StrEnum):
    """What discovery does with a leading locale segment in a template path.

    StrEnum provides automatic string conversion: str(LocaleHintPolicy.STRIP) == "strip"
    """

    RECORD = "record"
    """Keep the segment in the route key, record it as the hint."""

    STRIP = "strip"
    """Remove the segment from the route key, record it as the hint."""


class TagKind(StrEnum):
    """Structural kind of a markup tag.

    StrEnum provides automatic string conversion: str(TagKind.OPEN) == "open"
    """

    OPEN = "open"
    """Start tag: <a href="/x">"""

    SELF_CLOSING = "self_closing"
    """Self-closing tag: <br/>"""

    CLOSE = "close"
    """End tag: </a>"""


__all__ = [
    "BuildMode",
    "LocaleHintPolicy",
    "TagKind",
]
