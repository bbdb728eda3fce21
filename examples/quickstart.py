"""Quickstart example for i18nroutes.

Builds a throwaway site on disk, generates its localized routes in both
modes, and shows link building, reverse lookup, and markup helpers.
"""

import json
import logging
import tempfile
from pathlib import Path

from i18nroutes import (
    BuildMode,
    LocaleRegistry,
    PathTranslator,
    RouteBuilder,
    RoutesConfig,
    interpolate,
    negotiate_locale,
    sanitize,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

ROUTES = {
    "en": {"about": "about", "blog": "blog"},
    "fr": {"about": "a-propos", "blog": "blogue"},
}

with tempfile.TemporaryDirectory() as tmp:
    src = Path(tmp) / "src"
    for name in ("index.html", "about.html", "_layout.html", "blog/index.html"):
        page = src / "routes" / name
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(f"<h1>{name}</h1>\n", encoding="utf-8")
    translations = src / "i18n" / "translations"
    translations.mkdir(parents=True)
    (translations / "routes.json").write_text(json.dumps(ROUTES), encoding="utf-8")

    registry = LocaleRegistry({"en": "English", "fr": "Français"}, "en")
    builder = RouteBuilder(RoutesConfig(registry=registry, src_dir=src))

    # Example 1: Dynamic routes
    print("=" * 50)
    print("Example 1: Dynamic Routes")
    print("=" * 50)
    for route in builder.build(BuildMode.DEV):
        print(f"{route.pattern:<14} {Path(route.entrypoint).relative_to(src)}")
    # Output:
    # /about         routes/about.html
    # /blog          routes/blog/index.html
    # /              routes/index.html
    # /fr/a-propos   routes/about.html
    # ...

    # Example 2: Ahead-of-time routes (working tree removed on exit)
    print("\n" + "=" * 50)
    print("Example 2: Ahead-of-Time Routes")
    print("=" * 50)
    with builder.session(BuildMode.BUILD) as build:
        for route in build.patterns:
            print(f"{route.pattern:<14} {Path(route.entrypoint).relative_to(src)}")

    # Example 3: Links and reverse lookup
    print("\n" + "=" * 50)
    print("Example 3: Links")
    print("=" * 50)
    link = PathTranslator(registry, builder.table).bind("fr")
    print(link("about"))  # /fr/a-propos
    print(link("about", "en"))  # /about
    print(link.resolve_route_key("/fr/blogue"))  # blog
    print(negotiate_locale("fr-CH, en;q=0.5", registry.codes, registry.default_locale))  # fr

# Example 4: Markup in translations
print("\n" + "=" * 50)
print("Example 4: Markup")
print("=" * 50)
print(interpolate("Lisez <0>la doc</0>", 'Read <a href="/docs">the docs</a>'))
# Output: Lisez <a href="/docs">la doc</a>
print(sanitize('<script>alert(1)</script><b>gras</b>'))
# Output: alert(1)<b>gras</b>
