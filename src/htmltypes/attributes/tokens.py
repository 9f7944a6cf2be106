"""
Closed token sets bound to a markup name.

Each type is a TokenAttribute (an Enum). Member names are UPPER_SNAKE and member
values are the HTML tokens.

Lookup policies:
    - Closed (default): an unknown raw string raises UnknownTokenError.
    - Coercive: Crossorigin and ReferrerPolicy map unknown input to their documented
      default member, matching how browsers treat invalid values.

Examples:
    >>> from htmltypes.attributes.tokens import Contenteditable, Crossorigin, ReferrerPolicy
    >>> Crossorigin("use-credentials").pair()
    ('crossorigin', 'use-credentials')
    >>> ReferrerPolicy("whatever") is ReferrerPolicy.STRICT_ORIGIN_WHEN_CROSS_ORIGIN
    True
    >>> Contenteditable(True) is Contenteditable.TRUE
    True
"""

from __future__ import annotations

from enum import nonmember
from typing import Any

from htmltypes.core.base import TokenAttribute

__all__ = [
    "As",
    "Autocapitalize",
    "Autocorrect",
    "ButtonType",
    "Contenteditable",
    "Crossorigin",
    "Dir",
    "Draggable",
    "FetchPriority",
    "Inputmode",
    "Kind",
    "Popover",
    "ReferrerPolicy",
    "Scrolling",
    "Spellcheck",
    "Virtualkeyboardpolicy",
    "Writingsuggestions",
]


class As(TokenAttribute):
    """Destination of a preload or modulepreload link."""

    attribute = nonmember("as")

    AUDIO = "audio"
    DOCUMENT = "document"
    EMBED = "embed"
    FETCH = "fetch"
    FONT = "font"
    IMAGE = "image"
    OBJECT = "object"
    SCRIPT = "script"
    STYLE = "style"
    TRACK = "track"
    WORKER = "worker"


class Autocapitalize(TokenAttribute):
    attribute = nonmember("autocapitalize")

    NONE = "none"
    OFF = "off"
    SENTENCES = "sentences"
    ON = "on"
    WORDS = "words"
    CHARACTERS = "characters"


class Autocorrect(TokenAttribute):
    """Automatic text correction; EMPTY is the literal `""` token meaning on."""

    attribute = nonmember("autocorrect")

    ON = "on"
    EMPTY = '""'
    OFF = "off"


class ButtonType(TokenAttribute):
    attribute = nonmember("type")

    SUBMIT = "submit"
    RESET = "reset"
    BUTTON = "button"


class Contenteditable(TokenAttribute):
    """
    Whether the element is editable by the user.

    Also constructible from a bool: True maps to TRUE and False to FALSE.
    """

    attribute = nonmember("contenteditable")

    TRUE = "true"
    EMPTY = ""
    FALSE = "false"
    PLAINTEXT_ONLY = "plaintext-only"

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        return super()._missing_(value)


class Crossorigin(TokenAttribute):
    """
    CORS mode for fetching the resource.

    Any value other than "use-credentials" means anonymous, so construction never fails.
    """

    attribute = nonmember("crossorigin")
    fallback = nonmember("anonymous")

    ANONYMOUS = "anonymous"
    USE_CREDENTIALS = "use-credentials"


class Dir(TokenAttribute):
    attribute = nonmember("dir")

    LTR = "ltr"
    RTL = "rtl"
    AUTO = "auto"


class Draggable(TokenAttribute):
    attribute = nonmember("draggable")

    TRUE = "true"
    FALSE = "false"
    AUTO = "auto"


class FetchPriority(TokenAttribute):
    """Relative priority hint for fetching the resource."""

    attribute = nonmember("fetchpriority")

    HIGH = "high"
    LOW = "low"
    AUTO = "auto"


class Inputmode(TokenAttribute):
    """Virtual keyboard layout hint."""

    attribute = nonmember("inputmode")

    NONE = "none"
    TEXT = "text"
    DECIMAL = "decimal"
    NUMERIC = "numeric"
    TEL = "tel"
    SEARCH = "search"
    EMAIL = "email"
    URL = "url"


class Kind(TokenAttribute):
    """How a text track is meant to be used."""

    attribute = nonmember("kind")

    SUBTITLES = "subtitles"
    CAPTIONS = "captions"
    CHAPTERS = "chapters"
    METADATA = "metadata"


class Popover(TokenAttribute):
    attribute = nonmember("popover")

    AUTO = "auto"
    MANUAL = "manual"
    HINT = "hint"


class ReferrerPolicy(TokenAttribute):
    """
    Referrer sent when fetching the resource or following the link.

    Unknown values fall back to the browser default, strict-origin-when-cross-origin.
    """

    attribute = nonmember("referrerpolicy")
    fallback = nonmember("strict-origin-when-cross-origin")

    NO_REFERRER = "no-referrer"
    NO_REFERRER_WHEN_DOWNGRADE = "no-referrer-when-downgrade"
    ORIGIN = "origin"
    ORIGIN_WHEN_CROSS_ORIGIN = "origin-when-cross-origin"
    SAME_ORIGIN = "same-origin"
    STRICT_ORIGIN = "strict-origin"
    STRICT_ORIGIN_WHEN_CROSS_ORIGIN = "strict-origin-when-cross-origin"
    UNSAFE_URL = "unsafe-url"


class Scrolling(TokenAttribute):
    attribute = nonmember("scrolling")

    YES = "yes"
    NO = "no"
    AUTO = "auto"


class Spellcheck(TokenAttribute):
    attribute = nonmember("spellcheck")

    TRUE = "true"
    FALSE = "false"


class Virtualkeyboardpolicy(TokenAttribute):
    attribute = nonmember("virtualkeyboardpolicy")

    AUTO = "auto"
    MANUAL = "manual"


class Writingsuggestions(TokenAttribute):
    attribute = nonmember("writingsuggestions")

    TRUE = "true"
    FALSE = "false"
