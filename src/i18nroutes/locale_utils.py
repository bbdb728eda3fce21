"""Locale utilities backed by Babel.

Centralizes locale code handling: URL-segment codes (BCP-47 style, e.g.
"pt-BR") are normalized to POSIX form only when talking to Babel, so the
codes users configure are the codes that appear in URLs.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError
from babel.core import negotiate_locale as _babel_negotiate

from i18nroutes.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from i18nroutes.types import LocaleCode

__all__ = [
    "display_name",
    "get_babel_locale",
    "negotiate_locale",
    "normalize_locale",
    "parse_accept_language",
    "validate_locale_code",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def validate_locale_code(locale_code: str) -> None:
    """Reject codes that cannot serve as a URL segment or are unknown to Babel.

    Args:
        locale_code: Configured locale code

    Raises:
        ConfigurationError: If the code is empty, contains a path separator,
            or is not a locale identifier Babel knows
    """
    if not locale_code:
        msg = "Locale code cannot be empty"
        raise ConfigurationError(msg)
    if "/" in locale_code or "\\" in locale_code:
        msg = f"Path separators not allowed in locale: '{locale_code}'"
        raise ConfigurationError(msg)
    try:
        get_babel_locale(locale_code)
    except (ValueError, UnknownLocaleError) as e:
        msg = f"Unknown locale '{locale_code}': {e}"
        raise ConfigurationError(msg) from e


def display_name(locale_code: str, *, in_locale: str | None = None) -> str:
    """Human-readable locale name from CLDR data.

    Args:
        locale_code: Locale to describe
        in_locale: Locale to render the name in (default: the locale itself)

    Returns:
        Display name, e.g. "français" or "French"; the code itself when
        Babel has no name for it
    """
    locale = get_babel_locale(locale_code)
    target = get_babel_locale(in_locale) if in_locale else locale
    name = locale.get_display_name(target)
    return name if name else locale_code


def parse_accept_language(header: str) -> list[str]:
    """Parse an Accept-Language header into tags ordered by quality.

    Entries with a zero or malformed quality are dropped, as are wildcards.

    Example:
        >>> parse_accept_language("fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5")
        ['fr-CH', 'fr', 'en']
    """
    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality <= 0.0:
            continue
        weighted.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(
    accept_language: str | None,
    supported: Iterable[LocaleCode],
    default: LocaleCode,
) -> LocaleCode:
    """Pick the best supported locale for a request.

    Uses Babel's negotiation so "fr-CH" matches a supported "fr".

    Args:
        accept_language: Raw Accept-Language header (may be None or empty)
        supported: Supported locale codes as they appear in URLs
        default: Returned when nothing matches

    Returns:
        One of the supported codes, or default
    """
    if not accept_language:
        return default
    # Babel echoes the preferred spelling back, so match case-insensitively.
    by_posix = {normalize_locale(code).lower(): code for code in supported}
    preferred = [normalize_locale(tag) for tag in parse_accept_language(accept_language)]
    match = _babel_negotiate(preferred, list(by_posix))
    if match is None:
        logger.debug("No supported locale in Accept-Language '%s'", accept_language)
        return default
    return by_posix[match.lower()]
