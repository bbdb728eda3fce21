"""Host integration: discover, generate, and register localized routes.

RouteBuilder is the entry point a site generator or web framework calls at
startup. It owns the sequence

    validate config -> (materialize) -> discover -> generate -> register
    -> host serves/builds -> (tear down)

as a single scoped session, so the ahead-of-time working tree is removed on
every exit path.

Example:
    >>> config = RoutesConfig.from_toml("config.toml")
    >>> builder = RouteBuilder(config)
    >>> with builder.session(BuildMode.BUILD, register=router.add) as build:
    ...     site.render_all()

Python 3.13+.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18nroutes.constants import INTEGRATION_NAME
from i18nroutes.discovery import discover_routes
from i18nroutes.enums import BuildMode
from i18nroutes.errors import ConfigurationError
from i18nroutes.patterns import RoutePattern, generate_patterns
from i18nroutes.table import TranslationTable
from i18nroutes.translator import PathTranslator
from i18nroutes.workspace import materialized_pages

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from i18nroutes.config import RoutesConfig

__all__ = ["RouteBuild", "RouteBuilder"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouteBuild:
    """Outcome of one route generation session.

    Attributes:
        mode: Generation mode used
        patterns: Registered route patterns, in registration order
        watch_files: Translation files the host should watch (DEV only)
    """

    mode: BuildMode
    patterns: tuple[RoutePattern, ...]
    watch_files: tuple[Path, ...] = ()


class RouteBuilder:
    """Generate and register localized routes for a site.

    Attributes:
        config: Site layout and locales
        table: Validated route translations
    """

    __slots__ = ("config", "table")

    def __init__(self, config: RoutesConfig, table: TranslationTable | None = None) -> None:
        """Initialize builder.

        Args:
            config: Site layout and locales
            table: Route translations (default: loaded from
                ``config.routes_file_path``)

        Raises:
            TranslationTableError: If routes.json is missing or invalid
        """
        self.config = config
        if table is None:
            table = TranslationTable.from_json(config.routes_file_path, config.registry)
        self.table = table

    def translator(self, locale: str | None = None) -> PathTranslator:
        """Path translator bound to locale (default: the default locale)."""
        return PathTranslator(self.config.registry, self.table, locale)

    def watch_files(self) -> tuple[Path, ...]:
        """Translation catalogs whose changes require regenerating routes."""
        directory = self.config.translations_path
        if not directory.is_dir():
            return ()
        return tuple(sorted(p for p in directory.iterdir() if p.is_file()))

    def _require_routes_dir(self) -> None:
        routes_path = self.config.routes_path
        if not routes_path.is_dir():
            msg = f"[{INTEGRATION_NAME}]: Routes directory not found at '{routes_path}'"
            raise ConfigurationError(msg)

    def _generate(self, root: Path, mode: BuildMode) -> tuple[RoutePattern, ...]:
        config = self.config
        descriptors = discover_routes(
            root,
            config.registry,
            extension=config.page_extension,
            hint_policy=config.hint_policy,
        )
        return generate_patterns(
            descriptors,
            config.registry,
            self.table,
            entry_dir=root,
            mode=mode,
        )

    @contextmanager
    def session(
        self,
        mode: BuildMode,
        register: Callable[[RoutePattern], None] | None = None,
    ) -> Iterator[RouteBuild]:
        """Generate routes and keep their entrypoints alive for the with block.

        In BUILD mode the templates are materialized into the temp pages
        directory first; it is removed on exit when
        ``config.clear_temp_pages`` is set. In DEV mode entrypoints are the
        canonical templates and nothing is copied.

        Args:
            mode: BUILD (ahead-of-time) or DEV (dynamic)
            register: Called once per pattern, in order (the host's
                route-injection hook)

        Raises:
            ConfigurationError: If the routes directory does not exist
        """
        self._require_routes_dir()
        config = self.config

        with ExitStack() as stack:
            if mode is BuildMode.BUILD:
                logger.info("Loading routes...")
                root = stack.enter_context(
                    materialized_pages(
                        config.routes_path,
                        config.temp_pages_path,
                        config.registry,
                        overrides_dir=config.overrides_path,
                        clear=config.clear_temp_pages,
                    )
                )
                watch: tuple[Path, ...] = ()
            else:
                watch = self.watch_files()
                if watch:
                    logger.info("Watching %s", ", ".join(p.name for p in watch))
                logger.info("Generating routes...")
                root = config.routes_path

            patterns = self._generate(root, mode)
            for route in patterns:
                logger.info("Registered %s", route.pattern)
                if register is not None:
                    register(route)

            yield RouteBuild(mode=mode, patterns=patterns, watch_files=watch)
            if mode is BuildMode.BUILD and config.clear_temp_pages:
                logger.info("Cleaning up...")

    def build(self, mode: BuildMode) -> tuple[RoutePattern, ...]:
        """Generate patterns without keeping the working tree.

        Suitable for listing routes; entrypoints under the temp pages
        directory no longer exist afterwards when clear_temp_pages is set.
        """
        with self.session(mode) as build:
            return build.patterns
