"""
Attributes whose value is assembled from parts.

Builders format their inputs and never validate them: `Integrity.sha256("abc")` is
accepted even though "abc" is not a base64 digest.

Examples:
    >>> from htmltypes.attributes.composite import Elementtiming, Integrity, SourceType, Style
    >>> Elementtiming.from_parts("hero", "banner").value
    'hero-banner'
    >>> Integrity.sha256("abc123").value
    'sha256-abc123'
    >>> Style({"color": "red", "margin": "0"}).value
    'color: red; margin: 0'
    >>> SourceType("video/webm", codecs=True).string_value
    'video/webm codecs'
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import StrictBool, field_validator

from htmltypes.core.base import Attribute, StringAttribute, preset
from htmltypes.core.constants import DIRNAME_SUFFIX, ELEMENTTIMING_SEPARATOR, STYLE_SEPARATOR

__all__ = [
    "CharSet",
    "Dirname",
    "Elementtiming",
    "ElementtimingCategory",
    "Integrity",
    "SourceType",
    "Style",
]


class ElementtimingCategory(StrEnum):
    """Conventional prefixes for elementtiming identifiers."""

    HERO = "hero"
    MAIN = "main"
    HEADER = "header"
    NAV = "nav"
    FOOTER = "footer"
    IMAGE = "image"
    TEXT = "text"
    INTERACTIVE = "interactive"
    LAYOUT = "layout"
    CUSTOM = "custom"


class Elementtiming(StringAttribute):
    """Identifier reported by the Element Timing API for this element."""

    attribute = "elementtiming"

    @classmethod
    def from_parts(
        cls,
        category: ElementtimingCategory | str,
        name: str,
        separator: str = ELEMENTTIMING_SEPARATOR,
    ) -> Elementtiming:
        """
        Build "<category><separator><name>".

        The CUSTOM member contributes no prefix, so the value is just `name`; the
        plain string "custom" is an ordinary prefix.
        """
        if category is ElementtimingCategory.CUSTOM:
            return cls(name)
        return cls(f"{category}{separator}{name}")


class Integrity(StringAttribute):
    """Subresource integrity metadata ("<algorithm>-<base64 digest>")."""

    attribute = "integrity"

    @classmethod
    def sha256(cls, digest: str) -> Integrity:
        return cls(f"sha256-{digest}")

    @classmethod
    def sha384(cls, digest: str) -> Integrity:
        return cls(f"sha384-{digest}")

    @classmethod
    def sha512(cls, digest: str) -> Integrity:
        return cls(f"sha512-{digest}")


class Dirname(StringAttribute):
    """Name of the form field that submits the control's text direction."""

    attribute = "dirname"

    @classmethod
    def based_on(cls, element_name: str, suffix: str = DIRNAME_SUFFIX) -> Dirname:
        """
        Derive the field name from the control's own name.

        Examples:
            >>> Dirname.based_on("comment").value
            'comment-direction'
        """
        return cls(element_name + suffix)


class Style(StringAttribute):
    """
    Inline CSS declarations.

    Accepts a declaration string as-is, or a mapping of property to value joined as
    "prop: value" pairs in the mapping's order.
    """

    attribute = "style"

    @field_validator("value", mode="before")
    @classmethod
    def _join_declarations(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return STYLE_SEPARATOR.join(f"{k}: {val}" for k, val in v.items())
        return v


class SourceType(Attribute):
    """
    MIME type of a media or link resource, optionally flagged with codecs.

    Attributes:
        value (str): MIME type.
        codecs (bool | None): When True the description becomes "<mime> codecs".
    """

    attribute = "type"

    value: str
    codecs: StrictBool | None = None

    css = preset("text/css")
    javascript = preset("text/javascript")
    icon = preset("image/x-icon")
    svg = preset("image/svg+xml")
    png = preset("image/png")
    manifest = preset("application/manifest+json")
    rss = preset("application/rss+xml")
    atom = preset("application/atom+xml")
    application_json = preset("application/json")

    def _serialize(self) -> str:
        if self.codecs is True:
            return f"{self.value} codecs"
        return self.value


class _legacy(preset):
    """Preset for an encoding that should no longer be used; warns on access."""

    __slots__ = ("message",)

    def __init__(self, raw: Any, message: str) -> None:
        super().__init__(raw)
        self.message = message

    def __get__(self, instance: Any, owner: type) -> Any:
        warnings.warn(self.message, DeprecationWarning, stacklevel=2)
        return super().__get__(instance, owner)


class CharSet(StringAttribute):
    """
    Document character encoding declared by `<meta charset>`.

    Only utf-8 is conforming HTML; the legacy presets exist for old documents and
    emit a DeprecationWarning when read.
    """

    attribute = "charset"

    utf8 = preset("utf-8")
    utf16 = _legacy("utf-16", "UTF-16 is rarely used in HTML; use utf8")
    utf16be = _legacy("utf-16be", "UTF-16BE is not suitable for HTML; use utf8")
    utf16le = _legacy("utf-16le", "UTF-16LE is not suitable for HTML; use utf8")
    iso8859_1 = _legacy("iso-8859-1", "ISO-8859-1 is a legacy encoding; use utf8")
    iso8859_2 = _legacy("iso-8859-2", "ISO-8859-2 is a legacy Central European encoding; use utf8")
    iso8859_15 = _legacy("iso-8859-15", "ISO-8859-15 is a legacy Latin-1 variant; use utf8")
    windows1250 = _legacy("windows-1250", "Windows-1250 is a legacy Central European encoding; use utf8")
    windows1251 = _legacy("windows-1251", "Windows-1251 is a legacy Cyrillic encoding; use utf8")
    windows1252 = _legacy("windows-1252", "Windows-1252 is a legacy Western European encoding; use utf8")
    windows1256 = _legacy("windows-1256", "Windows-1256 is a legacy Arabic encoding; use utf8")
    koi8r = _legacy("koi8-r", "KOI8-R is a legacy Russian encoding; use utf8")
    koi8u = _legacy("koi8-u", "KOI8-U is a legacy Ukrainian encoding; use utf8")
    mac_roman = _legacy("macintosh", "MacRoman is not suitable for web content; use utf8")
    ibm866 = _legacy("ibm866", "IBM866 is a legacy DOS encoding; use utf8")
    gbk = _legacy("gbk", "GBK is a legacy Chinese encoding; use utf8")
    gb18030 = _legacy("gb18030", "GB18030 is legacy for web content; use utf8")
    big5 = _legacy("big5", "Big5 is a legacy Traditional Chinese encoding; use utf8")
    euc_jp = _legacy("euc-jp", "EUC-JP is a legacy Japanese encoding; use utf8")
    iso2022_jp = _legacy("iso-2022-jp", "ISO-2022-JP is an email encoding; use utf8")
    shift_jis = _legacy("shift_jis", "Shift_JIS is a legacy Japanese encoding; use utf8")
    euc_kr = _legacy("euc-kr", "EUC-KR is a legacy Korean encoding; use utf8")
