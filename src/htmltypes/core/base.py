"""
Shape contracts shared by every concrete attribute type.

Defines the pydantic v2 base models (generic, string, boolean, integer, number, and
token-list attributes), the Enum base for closed token sets, and the `preset`
descriptor for named constructor constants.

Responsibilities
- Bind a fixed markup name (`attribute`) to an immutable, typed `value`.
- Provide positional construction (`Cite("...")`) mapped 1:1 onto keyword construction.
- Expose the canonical serialization (`string_value`, `str()`) and the
  `(name, value)` pair consumed by element serializers.
- Host the validation policies reused by concrete types: order-preserving list joins,
  token resolution with or without a coercive fallback, and numeric preconditions.

Style
- Zero-IO (stdlib + pydantic only).
- Instances are frozen models: hashable, compared by type and value, no mutation API.

Examples
--------
>>> from htmltypes.core.base import StringAttribute, preset
>>> class Preload(StringAttribute):
...     attribute = "preload"
...     auto = preset("auto")
>>> Preload.auto.pair()
('preload', 'auto')
>>> str(Preload("metadata"))
'metadata'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum, nonmember
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, field_validator, model_validator

from .constants import TOKEN_SEPARATOR
from .errors import OutOfDomainError
from .grammar import join_tokens, split_tokens, token_from_value

__all__ = [
    "preset",
    "Attribute",
    "StringAttribute",
    "BooleanAttribute",
    "IntegerAttribute",
    "NumberAttribute",
    "TokenListAttribute",
    "TokenAttribute",
    "GenericAttribute",
    "format_value",
    "require",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


class preset:
    """
    Named constructor constant declared in an attribute class body.

    Reading the descriptor from the class returns a fresh instance built from the raw
    value, so `Rel.stylesheet == Rel("stylesheet")`. Presets are convenience only: they
    never restrict which values the type accepts.
    """

    __slots__ = ("raw", "name")

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        return owner(self.raw)

    def __repr__(self) -> str:
        return f"preset({self.raw!r})"


def format_value(value: Any) -> str:
    """
    Render a payload with the HTML spelling for its Python type.

    Args:
        value (Any): Payload (bool, int, float, str, attribute, or anything with str()).

    Returns:
        str: "true"/"false" for bools, shortest round-trip form for floats, str() otherwise.

    Examples:
        >>> format_value(True), format_value(2), format_value(0.5)
        ('true', '2', '0.5')
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def require(condition: bool, message: str) -> None:
    """
    Enforce a hard precondition inside a validator.

    Raises:
        OutOfDomainError: If condition is false. Pydantic surfaces it as a
            ValidationError whose error context carries this exception.
    """
    if not condition:
        raise OutOfDomainError(message)


class Attribute(BaseModel):
    """
    Generic attribute contract: a fixed markup name plus an immutable typed value.

    Attributes:
        attribute (ClassVar[str]): Markup-facing name, constant per type.
        value (Any): Typed payload, narrowed by each shape.

    Notes:
        - `T(x)` is the same as `T(value=x)`.
        - Passing an instance of the same type copies its value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", ignored_types=(preset,))

    attribute: ClassVar[str]

    value: Any

    def __init__(self, value: Any = _MISSING, /, **data: Any) -> None:
        if value is not _MISSING:
            data["value"] = value
        super().__init__(**data)

    @field_validator("value", mode="before")
    @classmethod
    def _unwrap_same_type(cls, v: Any) -> Any:
        if isinstance(v, cls):
            return v.value
        return v

    def _serialize(self) -> str:
        return format_value(self.value)

    @property
    def string_value(self) -> str:
        """Canonical serialization of the value."""
        return self._serialize()

    def pair(self) -> tuple[str, str]:
        """Return `(attribute, string_value)`."""
        return (self.attribute, self.string_value)

    @classmethod
    def presets(cls) -> dict[str, Any]:
        """Named presets declared on this type (and its bases), by name."""
        found: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if isinstance(member, preset):
                    found[name] = cls(member.raw)
        return found

    def __str__(self) -> str:
        return self.string_value


class StringAttribute(Attribute):
    """
    String-valued contract: the value is the wire string.

    Construction never fails for a str and `str(T(s)) == s`. Domain-specific
    normalization (e.g. FormMethod lower-casing) belongs to the concrete type.
    """

    value: str

    def _serialize(self) -> str:
        return self.value


class BooleanAttribute(Attribute):
    """
    Boolean-valued contract for HTML boolean attributes.

    Attributes:
        value (bool): Presence flag.
        default_value (ClassVar[bool]): Value used by `T()`; True only where the HTML
            default is true (e.g. Reversed, NoResize).

    Notes:
        Render contract owned by element serializers (see htmltypes.core.render):
          - value True renders the bare name (`disabled`), never `disabled="true"`.
          - value False omits the attribute entirely.
        `string_value` is the description "true"/"false" and is not markup.
    """

    default_value: ClassVar[bool] = False

    value: StrictBool

    @model_validator(mode="before")
    @classmethod
    def _apply_default(cls, data: Any) -> Any:
        if isinstance(data, dict) and "value" not in data:
            return {**data, "value": cls.default_value}
        return data

    def __bool__(self) -> bool:
        return self.value


class IntegerAttribute(Attribute):
    """Integer-valued contract; bools and numeric strings are rejected."""

    value: StrictInt

    def _serialize(self) -> str:
        return str(self.value)


class NumberAttribute(Attribute):
    """Floating-point contract; integers are widened to float."""

    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError(f"{cls.attribute} expects a number, got a bool")
        return v


class TokenListAttribute(StringAttribute):
    """
    List-valued contract: tokens joined once, on construction.

    Accepts a pre-joined string or any sequence of strings/attribute instances. Both
    entry points store the same canonical string; order is the caller's order.

    Attributes:
        separator (ClassVar[str]): Join separator (" " unless overridden).
    """

    separator: ClassVar[str] = TOKEN_SEPARATOR

    @field_validator("value", mode="before")
    @classmethod
    def _join_sequence(cls, v: Any) -> Any:
        if isinstance(v, (str, bytes, Attribute)):
            return v
        if isinstance(v, Iterable):
            return join_tokens(v, cls.separator)
        return v

    @property
    def tokens(self) -> tuple[str, ...]:
        """Stored value split back into tokens."""
        return split_tokens(self.value, self.separator)


class GenericAttribute(Attribute, Generic[T]):
    """Attribute whose payload type varies by host element (e.g. `value`)."""

    value: T


class TokenAttribute(Enum):
    """
    Closed token set bound to a markup name.

    Subclasses declare `attribute = nonmember("...")` and UPPER_SNAKE members whose
    values are the HTML tokens. Lookup of an unknown raw value either raises
    UnknownTokenError or, when `fallback` names a token, maps to that member.

    Examples:
        >>> from htmltypes.attributes import Crossorigin, FetchPriority
        >>> FetchPriority("high") is FetchPriority.HIGH
        True
        >>> Crossorigin("nope") is Crossorigin.ANONYMOUS
        True
    """

    fallback = nonmember(None)

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if cls.fallback is not None:
            logger.debug("%s: coercing %r to %r", cls.attribute, value, cls.fallback)
            return cls(cls.fallback)
        return token_from_value(cls, value)

    @classmethod
    def from_value(cls, raw: Any, *, casefold: bool = False) -> Any:
        """Resolve raw input, optionally case-insensitively (fallback still applies)."""
        try:
            return token_from_value(cls, raw, casefold=casefold)
        except ValueError:
            return cls(raw)

    @property
    def string_value(self) -> str:
        return self.value

    def pair(self) -> tuple[str, str]:
        return (self.attribute, self.value)

    def __str__(self) -> str:
        return self.value
