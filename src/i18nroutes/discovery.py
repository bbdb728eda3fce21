"""Route discovery from a template directory tree.

Walks a directory, keeps routable page templates, and derives a canonical
route key for each:

    index.html          -> "/"
    about.html          -> "about"
    blog/index.html     -> "blog"
    blog/first.html     -> "blog/first"
    _layout.html        -> (skipped: private template)
    fr/about.html       -> "fr/about" (hint "fr"), or "about" with STRIP

A directory that cannot be read is logged and yields no routes; the caller
decides whether a missing tree is fatal.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from i18nroutes.constants import DEFAULT_PAGE_EXTENSION, INDEX_SEGMENT, PRIVATE_PREFIX, ROOT_KEY
from i18nroutes.enums import LocaleHintPolicy

if TYPE_CHECKING:
    from i18nroutes.config import LocaleRegistry
    from i18nroutes.types import LocaleCode, RouteKey

__all__ = ["RouteDescriptor", "derive_route_key", "discover_routes"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A routable template found by discovery.

    Attributes:
        source_filename: Template path relative to the discovery root,
            with "/" separators (e.g., "blog/index.html")
        route_key: Canonical route key (e.g., "blog")
        source_locale_hint: Locale named by the first path segment, or ""
        hint_stripped: True when discovery already removed the hint segment
            from route_key (LocaleHintPolicy.STRIP)
    """

    source_filename: str
    route_key: RouteKey
    source_locale_hint: LocaleCode = ""
    hint_stripped: bool = False

    @property
    def is_root(self) -> bool:
        """Check if this template is the index page."""
        return self.route_key == ROOT_KEY


def derive_route_key(
    relative_path: str,
    registry: LocaleRegistry,
    *,
    extension: str = DEFAULT_PAGE_EXTENSION,
    hint_policy: LocaleHintPolicy = LocaleHintPolicy.RECORD,
) -> tuple[RouteKey, LocaleCode]:
    """Derive (route_key, locale_hint) from a template path.

    Args:
        relative_path: Path relative to the discovery root, "/" separated
        registry: Supported locales, for leading-segment detection
        extension: Page extension to strip
        hint_policy: Keep or strip a leading locale segment

    Returns:
        Tuple of route key and locale hint ("" when there is none)

    Example:
        >>> derive_route_key("blog/index.html", registry)
        ('blog', '')
        >>> derive_route_key("fr/index.html", registry, hint_policy=LocaleHintPolicy.STRIP)
        ('/', 'fr')
    """
    stem = relative_path.removesuffix(extension)
    segments = stem.split("/")

    hint = segments[0] if registry.is_supported(segments[0]) else ""
    if hint and hint_policy is LocaleHintPolicy.STRIP:
        segments = segments[1:] or [INDEX_SEGMENT]

    if segments == [INDEX_SEGMENT]:
        return ROOT_KEY, hint
    if segments[-1] == INDEX_SEGMENT:
        segments = segments[:-1]
    return "/".join(segments), hint


def _list_files(root: Path) -> list[Path]:
    """Recursively list files under root, sorted for deterministic output.

    Raises:
        OSError: If root or any directory below it cannot be read
    """
    if not root.is_dir():
        msg = f"No such directory: '{root}'"
        raise FileNotFoundError(msg)

    def _raise(error: OSError) -> None:
        raise error

    files: list[Path] = []
    for dirpath, _dirnames, filenames in root.walk(on_error=_raise):
        files.extend(dirpath / name for name in filenames)
    return sorted(files)


def discover_routes(
    root: str | Path,
    registry: LocaleRegistry,
    *,
    extension: str = DEFAULT_PAGE_EXTENSION,
    hint_policy: LocaleHintPolicy = LocaleHintPolicy.RECORD,
) -> tuple[RouteDescriptor, ...]:
    """Scan root for page templates.

    Files whose name starts with "_" and files without the page extension
    are skipped. An unreadable root is logged and yields an empty tuple.

    Args:
        root: Directory to scan
        registry: Supported locales, for leading-segment detection
        extension: Recognized page template extension
        hint_policy: Keep or strip a leading locale segment

    Returns:
        Descriptors in sorted path order
    """
    root_path = Path(root)
    try:
        files = _list_files(root_path)
    except OSError as e:
        logger.error("Failed to read directory at path: %s: %s", root_path, e)
        return ()

    descriptors: list[RouteDescriptor] = []
    for path in files:
        if path.name.startswith(PRIVATE_PREFIX) or not path.name.endswith(extension):
            continue
        if path.name == extension:
            continue
        relative = path.relative_to(root_path).as_posix()
        route_key, hint = derive_route_key(
            relative, registry, extension=extension, hint_policy=hint_policy
        )
        stripped = bool(hint) and hint_policy is LocaleHintPolicy.STRIP
        descriptors.append(RouteDescriptor(relative, route_key, hint, stripped))
        logger.debug("Discovered route '%s' from %s", route_key, relative)
    return tuple(descriptors)
