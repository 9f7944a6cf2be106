"""
Markup-name grammar, token-list joining, and closed-token lookup helpers.

Responsibilities
- Define what a valid markup attribute name looks like (lower-case, digits, hyphen).
- Join and split space- or comma-separated token lists deterministically.
- Resolve raw strings to members of closed token enumerations with a uniform error.

Design principles
-----------------
1) One naming standard:
   - Attribute classes: PascalCase (e.g. FetchPriority)
   - Token enum member names: UPPER_SNAKE (Python constants)
   - Serialized values and markup names: exactly as HTML spells them
     ("fetchpriority", "use-credentials", "plaintext-only")

2) Order preservation:
   - join_tokens keeps insertion order; no sorting, no de-duplication. The caller's
     sequence is the canonical order.

Downstream usage
----------------
- htmltypes.core.base uses join_tokens for list-valued attributes and
  token_from_value for closed token sets.
- Tests use ensure_all_attribute_names_valid over the registry.

Examples
--------
>>> from htmltypes.core.grammar import is_attribute_name, join_tokens, split_tokens
>>> is_attribute_name("accept-charset")
True
>>> is_attribute_name("AcceptCharset")
False
>>> join_tokens(["external", "noopener", "noreferrer"])
'external noopener noreferrer'
>>> split_tokens("a  b c")
('a', 'b', 'c')
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any, Final, TypeVar

from .constants import TOKEN_SEPARATOR
from .errors import UnknownTokenError

__all__ = [
    "is_attribute_name",
    "assert_attribute_name",
    "join_tokens",
    "split_tokens",
    "token_from_value",
    "ensure_all_attribute_names_valid",
]

E = TypeVar("E", bound=Enum)

_ATTRIBUTE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")


def is_attribute_name(value: str) -> bool:
    """
    Check whether a string is a canonical markup attribute name.

    Args:
      value (str): Candidate name.

    Returns:
      bool: True for names like "colspan" or "accept-charset", False otherwise.
    """
    return bool(_ATTRIBUTE_NAME_RE.match(value or ""))


def assert_attribute_name(value: str, what: str = "attribute") -> None:
    """
    Validate that a string is a canonical markup attribute name.

    Args:
      value (str): Candidate name.
      what (str): Human-friendly label used in the error message.

    Raises:
      ValueError: If value is not a canonical attribute name.
    """
    if not is_attribute_name(value):
        raise ValueError(f"{what} must be a lower-case markup name (got: {value!r})")


def join_tokens(tokens: Iterable[Any], separator: str = TOKEN_SEPARATOR) -> str:
    """
    Join tokens into the canonical list form, preserving order.

    Args:
      tokens (Iterable[Any]): Strings or attribute instances; each is rendered with str().
      separator (str): Separator placed between tokens.

    Returns:
      str: Joined value. An empty iterable yields "".

    Examples:
      >>> join_tokens(["UTF-8", "ISO-8859-1"], ",")
      'UTF-8,ISO-8859-1'
    """
    return separator.join(str(token) for token in tokens)


def split_tokens(value: str, separator: str = TOKEN_SEPARATOR) -> tuple[str, ...]:
    """
    Split a joined list back into tokens.

    Whitespace separators collapse runs of whitespace; other separators split exactly
    and strip padding around each token. Empty tokens are dropped.

    Args:
      value (str): Joined value.
      separator (str): Separator used when joining.

    Returns:
      tuple[str, ...]: Tokens in order.
    """
    if not separator.strip():
        return tuple(value.split())
    return tuple(part.strip() for part in value.split(separator) if part.strip())


def token_from_value(enum_cls: type[E], raw: Any, *, casefold: bool = False) -> E:
    """
    Resolve a raw value to a member of a closed token enumeration.

    Args:
      enum_cls (type[Enum]): Token enumeration to search.
      raw (Any): Member, serialized token, or anything else.
      casefold (bool): Compare case-insensitively when True.

    Returns:
      Enum: Matching member.

    Raises:
      UnknownTokenError: If no member serializes to raw.
    """
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str):
        wanted = raw.lower() if casefold else raw
        for member in enum_cls:
            candidate = member.value.lower() if casefold else member.value
            if candidate == wanted:
                return member
    name = getattr(enum_cls, "attribute", enum_cls.__name__)
    allowed = [m.value for m in enum_cls]
    raise UnknownTokenError(f"{name} must be one of {allowed} (got {raw!r})")


def ensure_all_attribute_names_valid(types: Iterable[type]) -> None:
    """
    Assert that every type declares a canonical markup attribute name.

    Args:
      types (Iterable[type]): Attribute types (models or token enums).

    Raises:
      AssertionError: If any type has a missing or non-canonical `attribute`.
    """
    for t in types:
        name = getattr(t, "attribute", None)
        if not isinstance(name, str) or not is_attribute_name(name):
            raise AssertionError(f"{t.__name__} has non-canonical attribute name: {name!r}")
