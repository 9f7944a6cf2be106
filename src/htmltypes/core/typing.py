"""
Lightweight typing aliases and structural contracts used across attribute types.

Provides a NewType for markup names, the `(name, value-or-absent)` pair alias handed to
element serializers, and one Protocol per attribute shape. This module contains no
runtime logic and is zero-IO.

Notes:
    - The Protocols are runtime-checkable so render helpers can dispatch on shape
      without importing concrete types. isinstance only checks member presence, so
      StringValued is mainly a static contract; BooleanValued is told apart by
      `default_value`.
    - Every concrete type satisfies exactly one of StringValued, BooleanValued, or the
      generic HTMLAttribute contract.

Examples:
    >>> from htmltypes.attributes import Cite, Disabled
    >>> from htmltypes.core.typing import BooleanValued
    >>> isinstance(Cite("https://example.com"), BooleanValued)
    False
    >>> isinstance(Disabled(), BooleanValued)
    True
"""

from __future__ import annotations

from typing import ClassVar, NewType, Protocol, runtime_checkable

__all__ = [
    "AttributeName",
    "AttributePair",
    "HTMLAttribute",
    "StringValued",
    "BooleanValued",
]

AttributeName = NewType("AttributeName", str)

# None in the value slot means "render the bare name".
AttributePair = tuple[str, str | None]


@runtime_checkable
class HTMLAttribute(Protocol):
    """Anything with a fixed markup name and a canonical string form."""

    attribute: ClassVar[str]

    @property
    def string_value(self) -> str: ...

    def pair(self) -> tuple[str, str]: ...


@runtime_checkable
class StringValued(HTMLAttribute, Protocol):
    """Attribute whose payload is already the wire string."""

    value: str


@runtime_checkable
class BooleanValued(HTMLAttribute, Protocol):
    """Attribute whose presence is the signal (true renders bare, false is omitted)."""

    value: bool
    default_value: ClassVar[bool]
