"""
String-valued attributes: free strings and strings with named presets.

Every type here is a StringAttribute, so construction never fails for a `str` and
`str(T(s)) == s`. Presets (`Preload.metadata`, `FormTarget.blank`, ...) are named
constructors only; any other string is still accepted.

Responsibilities
- Bind each free-text attribute (alt, cite, href, src, ...) to its markup name.
- Offer the common values of open vocabularies as presets.
- Build URL-shaped values (mailto, sms, tel, whatsapp, file) with urllib.parse.
- Generate CSP nonces from the OS CSPRNG.

Notes
- FormMethod and Method are the normalizing types: they lower-case their input.
- Several types share a markup name ("type", "name", "form", "data"); they are
  distinct Python types because their presets and host elements differ.

Examples
--------
>>> from htmltypes.attributes.strings import FormMethod, Href, Preload
>>> FormMethod("POST").value
'post'
>>> Preload.metadata.pair()
('preload', 'metadata')
>>> Href.mailto("a@example.com", subject="Hi there").value
'mailto:a@example.com?subject=Hi%20there'
"""

from __future__ import annotations

import base64
import os
import secrets
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import field_validator

from htmltypes.config import RenderSettings
from htmltypes.core.base import StringAttribute, preset
from htmltypes.core.constants import WHATSAPP_BASE

__all__ = [
    "Abbr",
    "Action",
    "Allow",
    "Alt",
    "Autocomplete",
    "Behavior",
    "Blocking",
    "Capture",
    "Cite",
    "Color",
    "Content",
    "DateTime",
    "Direction",
    "EncType",
    "Face",
    "FormAction",
    "FormEncType",
    "FormMethod",
    "FormTarget",
    "Href",
    "Hreflang",
    "HttpEquiv",
    "Id",
    "ImageSizes",
    "ImageSrcSet",
    "Is",
    "Itemid",
    "Label",
    "Lang",
    "ListType",
    "Media",
    "Method",
    "MetaName",
    "Name",
    "Nonce",
    "ObjectData",
    "ObjectForm",
    "ObjectType",
    "Placeholder",
    "PopoverTarget",
    "PopoverTargetAction",
    "Poster",
    "Preload",
    "Scope",
    "ScriptType",
    "ShadowRootClonable",
    "ShadowRootMode",
    "Sizes",
    "Src",
    "TextareaWrap",
    "Xmlns",
]


# ============================================================================
# Free strings
# ============================================================================


class Abbr(StringAttribute):
    """Short description of a table header cell's content."""

    attribute = "abbr"


class Allow(StringAttribute):
    """Permissions policy for an iframe (e.g. "fullscreen; camera")."""

    attribute = "allow"


class Alt(StringAttribute):
    attribute = "alt"


class Cite(StringAttribute):
    """URL of a source document or message for quoted or edited content."""

    attribute = "cite"


class Color(StringAttribute):
    attribute = "color"


class Content(StringAttribute):
    """Value of a meta element, interpreted per its name or http-equiv."""

    attribute = "content"


class DateTime(StringAttribute):
    """Machine-readable date/time for time, del and ins."""

    attribute = "datetime"


class Face(StringAttribute):
    attribute = "face"


class FormAction(StringAttribute):
    """URL that processes the form submission, overriding the form's action."""

    attribute = "formaction"


class Hreflang(StringAttribute):
    attribute = "hreflang"


class Id(StringAttribute):
    attribute = "id"


class ImageSizes(StringAttribute):
    attribute = "imagesizes"


class ImageSrcSet(StringAttribute):
    attribute = "imagesrcset"


class Is(StringAttribute):
    """Name of a customized built-in element."""

    attribute = "is"


class Itemid(StringAttribute):
    attribute = "itemid"


class Label(StringAttribute):
    attribute = "label"


class Lang(StringAttribute):
    """BCP 47 language tag (e.g. "en", "nl-NL")."""

    attribute = "lang"


class Media(StringAttribute):
    """Media query the linked resource applies to."""

    attribute = "media"


class Name(StringAttribute):
    attribute = "name"


class ObjectForm(StringAttribute):
    """Id of the form element an object is associated with."""

    attribute = "form"


class PopoverTarget(StringAttribute):
    attribute = "popovertarget"


class Poster(StringAttribute):
    attribute = "poster"


class ShadowRootClonable(StringAttribute):
    attribute = "shadowrootclonable"


class Sizes(StringAttribute):
    attribute = "sizes"


class Src(StringAttribute):
    attribute = "src"


class Xmlns(StringAttribute):
    attribute = "xmlns"


# ============================================================================
# URL-valued strings
# ============================================================================


class Href(StringAttribute):
    """
    URL of a hyperlink or linked resource.

    Builders percent-encode query values with urllib.parse.quote; the address part
    (email, phone number) is used as given.

    Examples:
        >>> Href.sms("+15551234567", "On my way").value
        'sms:+15551234567?body=On%20my%20way'
        >>> Href.whatsapp("15551234567", "Hello there").value
        'https://wa.me/15551234567?text=Hello%20there'
    """

    attribute = "href"

    @classmethod
    def url(cls, url: Any) -> Href:
        """Href from any URL-like object, using its string form."""
        return cls(str(url))

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> Href:
        """`file://` URL for a local path (made absolute first)."""
        return cls(Path(path).absolute().as_uri())

    @classmethod
    def mailto(cls, email: str, subject: str | None = None, body: str | None = None) -> Href:
        query: dict[str, str] = {}
        if subject is not None:
            query["subject"] = subject
        if body is not None:
            query["body"] = body
        if not query:
            return cls(f"mailto:{email}")
        return cls(f"mailto:{email}?{urlencode(query, quote_via=quote)}")

    @classmethod
    def sms(cls, number: str, body: str) -> Href:
        return cls(f"sms:{number}?{urlencode({'body': body}, quote_via=quote)}")

    @classmethod
    def tel(cls, number: str) -> Href:
        return cls(f"tel:{number}")

    @classmethod
    def whatsapp(cls, number: str, message: str) -> Href:
        return cls(f"{WHATSAPP_BASE}{number}?text={quote(message, safe='')}")


class ObjectData(StringAttribute):
    """Address of the resource embedded by an object element."""

    attribute = "data"

    @classmethod
    def from_url(cls, url: Any) -> ObjectData:
        return cls(str(url))


class Action(StringAttribute):
    """URL that processes a form submission."""

    attribute = "action"

    @classmethod
    def from_url(cls, url: Any) -> Action:
        return cls(str(url))


# ============================================================================
# Nonce
# ============================================================================


class Nonce(StringAttribute):
    """
    Cryptographic nonce allowing an inline script or style under a CSP.

    Use a fresh value per response; `generate` draws from the OS CSPRNG.
    """

    attribute = "nonce"

    @classmethod
    def generate(cls, nbytes: int | None = None, settings: RenderSettings | None = None) -> Nonce:
        """
        Create a nonce from `nbytes` random bytes, base64-encoded.

        Args:
            nbytes (int | None): Number of random bytes (16 gives 128 bits). When None,
                `settings.nonce_bytes` is used.
            settings (RenderSettings | None): Source of the default size; loaded with
                RenderSettings.load() (env > TOML > defaults) when None.

        Returns:
            Nonce: New nonce; consecutive calls differ with overwhelming probability.
        """
        if nbytes is None:
            nbytes = (settings if settings is not None else RenderSettings.load()).nonce_bytes
        return cls(base64.b64encode(secrets.token_bytes(nbytes)).decode("ascii"))


# ============================================================================
# Strings with presets
# ============================================================================


class Autocomplete(StringAttribute):
    """Autofill hint for form controls (on, off, or a detail token list)."""

    attribute = "autocomplete"

    on = preset("on")
    off = preset("off")
    name = preset("name")
    email = preset("email")
    username = preset("username")
    new_password = preset("new-password")
    current_password = preset("current-password")
    one_time_code = preset("one-time-code")
    tel = preset("tel")
    street_address = preset("street-address")
    postal_code = preset("postal-code")


class Behavior(StringAttribute):
    """Scrolling behavior of an obsolete marquee element."""

    attribute = "behavior"

    scroll = preset("scroll")
    slide = preset("slide")
    alternate = preset("alternate")


class Blocking(StringAttribute):
    attribute = "blocking"

    render = preset("render")


class Capture(StringAttribute):
    """Camera to use for file inputs that capture media."""

    attribute = "capture"

    user = preset("user")
    environment = preset("environment")


class Direction(StringAttribute):
    attribute = "direction"

    left = preset("left")
    right = preset("right")
    up = preset("up")
    down = preset("down")


class EncType(StringAttribute):
    """MIME type used to encode a form submission."""

    attribute = "enctype"

    url_encoded = preset("application/x-www-form-urlencoded")
    multipart_form_data = preset("multipart/form-data")
    text_plain = preset("text/plain")


class FormEncType(StringAttribute):
    """Submit-button override of the form's enctype."""

    attribute = "formenctype"

    url_encoded = preset("application/x-www-form-urlencoded")
    multipart_form_data = preset("multipart/form-data")
    text_plain = preset("text/plain")


class FormMethod(StringAttribute):
    """
    Submit-button override of the HTTP method used to submit its form.

    Input is lower-cased, so `FormMethod("POST") == FormMethod.post`.
    """

    attribute = "formmethod"

    get = preset("get")
    post = preset("post")
    dialog = preset("dialog")

    @field_validator("value", mode="before")
    @classmethod
    def _lower(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v


class Method(FormMethod):
    """HTTP method of a form element; same tokens and lower-casing as FormMethod."""

    attribute = "method"


class FormTarget(StringAttribute):
    """Browsing context that receives the submission response."""

    attribute = "formtarget"

    self = preset("_self")
    blank = preset("_blank")
    parent = preset("_parent")
    top = preset("_top")
    unfenced_top = preset("_unfencedTop")


class HttpEquiv(StringAttribute):
    attribute = "http-equiv"

    content_security_policy = preset("content-security-policy")
    content_type = preset("content-type")
    default_style = preset("default-style")
    refresh = preset("refresh")
    x_ua_compatible = preset("x-ua-compatible")


class ListType(StringAttribute):
    """Numbering type of an ordered list."""

    attribute = "type"

    lower_alpha = preset("a")
    upper_alpha = preset("A")
    lower_roman = preset("i")
    upper_roman = preset("I")
    decimal = preset("1")


class MetaName(StringAttribute):
    """Metadata name of a meta element."""

    attribute = "name"

    application_name = preset("application-name")
    author = preset("author")
    description = preset("description")
    generator = preset("generator")
    keywords = preset("keywords")
    referrer = preset("referrer")
    theme_color = preset("theme-color")
    robots = preset("robots")
    viewport = preset("viewport")


class ObjectType(StringAttribute):
    """MIME type of the resource named by an object's data attribute."""

    attribute = "type"

    pdf = preset("application/pdf")
    mp4 = preset("video/mp4")
    mp3 = preset("audio/mpeg")
    jpeg = preset("image/jpeg")
    png = preset("image/png")
    html = preset("text/html")


class Placeholder(StringAttribute):
    """Hint shown in an empty form control."""

    attribute = "placeholder"

    email = preset("example@domain.com")
    phone = preset("(123) 456-7890")
    name = preset("First Last")
    search = preset("Search...")
    url = preset("https://example.com")


class PopoverTargetAction(StringAttribute):
    attribute = "popovertargetaction"

    show = preset("show")
    hide = preset("hide")
    toggle = preset("toggle")


class Preload(StringAttribute):
    """How much of a media resource to fetch before playback."""

    attribute = "preload"

    none = preset("none")
    metadata = preset("metadata")
    auto = preset("auto")


class Scope(StringAttribute):
    """Cells a table header cell applies to."""

    attribute = "scope"

    row = preset("row")
    col = preset("col")
    rowgroup = preset("rowgroup")
    colgroup = preset("colgroup")


class ScriptType(StringAttribute):
    """Kind of script a script element represents."""

    attribute = "type"

    module = preset("module")
    importmap = preset("importmap")
    speculationrules = preset("speculationrules")
    application_json = preset("application/json")
    text_plain = preset("text/plain")


class ShadowRootMode(StringAttribute):
    attribute = "shadowrootmode"

    open = preset("open")
    closed = preset("closed")


class TextareaWrap(StringAttribute):
    """Line wrapping of submitted textarea content."""

    attribute = "wrap"

    hard = preset("hard")
    soft = preset("soft")
