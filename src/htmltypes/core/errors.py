"""
Core exception types raised by attribute construction, token lookup, and settings.

Provides typed exceptions for core-domain failures:
- UnknownTokenError for raw strings outside a closed token set.
- OutOfDomainError for numeric values that violate a hard precondition.
- ConfigError for invalid render/runtime settings.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Validators in htmltypes.core.base raise OutOfDomainError; pydantic surfaces it
      as a ValidationError whose error entry carries it under ctx["error"].
    - Coercive token types (Crossorigin, ReferrerPolicy) never raise.

Examples:
    Catch an unknown token.

    >>> from htmltypes.attributes import FetchPriority
    >>> from htmltypes.core.errors import UnknownTokenError
    >>> try:
    ...     FetchPriority("bogus")
    ... except UnknownTokenError as e:
    ...     msg = str(e)
    >>> "fetchpriority" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "HtmlTypesError",
    "UnknownTokenError",
    "OutOfDomainError",
    "ConfigError",
]


class HtmlTypesError(ValueError):
    """Base class for htmltypes failures."""


class UnknownTokenError(HtmlTypesError):
    """Raw value is not a member of a closed (non-coercive) token set."""


class OutOfDomainError(HtmlTypesError):
    """Numeric value outside the documented domain of a hard-precondition attribute."""


class ConfigError(HtmlTypesError):
    """Invalid or unsupported render settings."""
