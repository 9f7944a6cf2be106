"""
List-valued attributes: ordered token lists joined once, on construction.

Each type accepts either a pre-joined string or a sequence of tokens (strings or other
attribute instances). Both entry points store the same canonical string, in the
caller's order, with no sorting or de-duplication.

Examples:
    >>> from htmltypes.attributes.lists import AcceptCharset, Headers, Rel
    >>> Headers(["h1", "h2"]).value
    'h1 h2'
    >>> Rel.secure_external.tokens
    ('external', 'noopener', 'noreferrer')
    >>> AcceptCharset.utf8_and_latin1.value
    'UTF-8,ISO-8859-1'
"""

from __future__ import annotations

from htmltypes.core.base import TokenListAttribute, preset
from htmltypes.core.constants import CHARSET_SEPARATOR, SCHEMA_ORG_BASE
from htmltypes.core.grammar import join_tokens

__all__ = [
    "AcceptCharset",
    "Class",
    "ControlsList",
    "For",
    "Headers",
    "Itemprop",
    "Itemtype",
    "Part",
    "Ping",
    "Rel",
]


class Headers(TokenListAttribute):
    """Ids of the header cells that apply to a table cell."""

    attribute = "headers"


class Rel(TokenListAttribute):
    """
    Relationship(s) between the current document and the linked resource.

    `secure_external` is the usual combination for links that leave the site.
    """

    attribute = "rel"

    alternate = preset("alternate")
    author = preset("author")
    help = preset("help")
    license = preset("license")
    next = preset("next")
    prev = preset("prev")
    search = preset("search")
    canonical = preset("canonical")
    stylesheet = preset("stylesheet")
    icon = preset("icon")
    manifest = preset("manifest")
    modulepreload = preset("modulepreload")
    preload = preset("preload")
    prefetch = preset("prefetch")
    preconnect = preset("preconnect")
    dns_prefetch = preset("dns-prefetch")
    bookmark = preset("bookmark")
    external = preset("external")
    nofollow = preset("nofollow")
    noopener = preset("noopener")
    noreferrer = preset("noreferrer")
    tag = preset("tag")
    me = preset("me")
    privacy_policy = preset("privacy-policy")
    terms_of_service = preset("terms-of-service")
    secure_external = preset(("external", "noopener", "noreferrer"))


class For(TokenListAttribute):
    """Ids of the controls a label or output element refers to."""

    attribute = "for"

    @classmethod
    def label(cls, control_id: str) -> For:
        """Label binding for a single control."""
        return cls(control_id)


class Ping(TokenListAttribute):
    """URLs notified when the hyperlink is followed."""

    attribute = "ping"


class Class(TokenListAttribute):
    attribute = "class"


class Itemprop(TokenListAttribute):
    attribute = "itemprop"


class Itemtype(TokenListAttribute):
    """Vocabulary URL(s) of a microdata item."""

    attribute = "itemtype"

    @classmethod
    def schema_org(cls, *types: str) -> Itemtype:
        """
        Itemtype for one or more schema.org types.

        Examples:
            >>> Itemtype.schema_org("Person").value
            'https://schema.org/Person'
        """
        return cls([SCHEMA_ORG_BASE + t for t in types])


class Part(TokenListAttribute):
    """Shadow part names exposed to ::part() selectors."""

    attribute = "part"


class ControlsList(TokenListAttribute):
    """Browser media controls to hide."""

    attribute = "controlslist"

    nodownload = preset("nodownload")
    nofullscreen = preset("nofullscreen")
    noremoteplayback = preset("noremoteplayback")

    @classmethod
    def combine(cls, *lists: ControlsList | str) -> ControlsList:
        """Join several lists or tokens in order."""
        return cls(join_tokens(lists, cls.separator))


class AcceptCharset(TokenListAttribute):
    """Character encodings a form accepts, comma-joined."""

    attribute = "accept-charset"
    separator = CHARSET_SEPARATOR

    utf8 = preset("UTF-8")
    latin1 = preset("ISO-8859-1")
    ascii = preset("US-ASCII")
    windows1252 = preset("windows-1252")
    utf8_and_latin1 = preset(("UTF-8", "ISO-8859-1"))
