"""Exception hierarchy for i18nroutes.

Only setup-time precondition failures are raised. Every runtime condition
(missing translation, reverse-lookup miss, unreadable template directory,
reference string without tags) resolves to a fallback value plus a log line.

Hierarchy:
    I18nRoutesError (base)
    └─ ConfigurationError (fatal setup error)
       └─ TranslationTableError (malformed routes.json)

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "I18nRoutesError",
    "TranslationTableError",
]


class I18nRoutesError(Exception):
    """Base exception for all i18nroutes errors."""


class ConfigurationError(I18nRoutesError):
    """Setup-time precondition failure.

    Examples:
    - Routes directory missing when patterns are generated
    - Default locale not among the supported locales

    Not recoverable: the build must be fixed and restarted.
    """


class TranslationTableError(ConfigurationError):
    """Translation table failed load-time validation.

    Raised for shape violations (unknown or missing locales, nested values)
    and for duplicate localized segments within one locale, which would make
    reverse lookup ambiguous.

    Attributes:
        locale: Locale whose table is invalid, if known
        key: Offending route key, if known
    """

    def __init__(self, message: str, *, locale: str = "", key: str = "") -> None:
        """Initialize TranslationTableError.

        Args:
            message: Human-readable error description
            locale: Locale whose table is invalid
            key: Offending route key
        """
        super().__init__(message)
        self.locale = locale
        self.key = key
