"""Per-build working tree for ahead-of-time route generation.

The canonical templates are copied once per locale so every locale gets its
own entrypoint files:

    <work>/about.html        default locale (when its prefix is suppressed)
    <work>/fr/about.html     every prefixed locale
    <work>/de/about.html

Optional per-locale overrides (``<overrides>/<locale>/...``) are copied over
the locale's copy afterwards. The tree is a scoped resource: it is emptied
on entry and, when ``clear`` is set, removed on exit, including when the
body raises.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from i18nroutes.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from i18nroutes.config import LocaleRegistry

__all__ = ["materialize_pages", "materialized_pages", "remove_pages"]

logger = logging.getLogger(__name__)


def remove_pages(work_dir: Path) -> None:
    """Remove a working tree. Safe to call when it does not exist."""
    if work_dir.exists():
        shutil.rmtree(work_dir)
        logger.debug("Removed working tree %s", work_dir)


def _check_layout(routes_dir: Path, work_dir: Path, overrides_dir: Path | None = None) -> None:
    """Reject layouts where wiping work_dir would touch the sources."""
    if not routes_dir.is_dir():
        msg = f"Routes directory not found at '{routes_dir}'"
        raise ConfigurationError(msg)
    work = work_dir.resolve()
    routes = routes_dir.resolve()
    if work.is_relative_to(routes):
        msg = f"Working tree '{work_dir}' must not be inside routes directory '{routes_dir}'"
        raise ConfigurationError(msg)
    if routes.is_relative_to(work):
        msg = f"Working tree '{work_dir}' must not contain routes directory '{routes_dir}'"
        raise ConfigurationError(msg)
    if overrides_dir is not None and overrides_dir.resolve().is_relative_to(work):
        msg = f"Working tree '{work_dir}' must not contain overrides directory '{overrides_dir}'"
        raise ConfigurationError(msg)


def materialize_pages(
    routes_dir: Path,
    work_dir: Path,
    registry: LocaleRegistry,
    *,
    overrides_dir: Path | None = None,
) -> Path:
    """Copy the canonical templates into work_dir once per locale.

    Args:
        routes_dir: Canonical templates
        work_dir: Working tree to (re)create
        registry: Supported locales
        overrides_dir: Optional per-locale override tree

    Returns:
        work_dir

    Raises:
        ConfigurationError: If routes_dir is missing, or work_dir overlaps
            routes_dir or overrides_dir
    """
    _check_layout(routes_dir, work_dir, overrides_dir)
    remove_pages(work_dir)
    work_dir.mkdir(parents=True)

    for locale in registry.codes:
        target = work_dir / locale if registry.is_prefixed(locale) else work_dir
        shutil.copytree(routes_dir, target, dirs_exist_ok=True)
        if overrides_dir is not None and (overrides_dir / locale).is_dir():
            shutil.copytree(overrides_dir / locale, target, dirs_exist_ok=True)
            logger.debug("Applied %s overrides from %s", locale, overrides_dir / locale)
        logger.info("Loaded %s pages", registry.name(locale))
    return work_dir


@contextmanager
def materialized_pages(
    routes_dir: Path,
    work_dir: Path,
    registry: LocaleRegistry,
    *,
    overrides_dir: Path | None = None,
    clear: bool = True,
) -> Iterator[Path]:
    """Materialize the working tree for the duration of a with block.

    Example:
        >>> with materialized_pages(routes, tmp, registry) as work:
        ...     descriptors = discover_routes(work, registry)
    """
    _check_layout(routes_dir, work_dir, overrides_dir)
    try:
        yield materialize_pages(routes_dir, work_dir, registry, overrides_dir=overrides_dir)
    finally:
        if clear:
            remove_pages(work_dir)
