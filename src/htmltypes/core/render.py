"""
Turn attribute instances into `(name, value-or-absent)` pairs and markup text.

Element serializers consume `attribute_pair`; `render_attribute` and
`render_attributes` are the reference emitters used by tests and simple callers.

Notes:
    - Boolean attributes: True -> bare name, False -> omitted (no pair at all).
    - Values are HTML-escaped with the stdlib `html.escape` unless settings disable it.
    - Order of `render_attributes` output follows the input order.

Examples:
    >>> from htmltypes.attributes import ColSpan, Disabled, Rel
    >>> from htmltypes.core.render import render_attribute, render_attributes
    >>> render_attribute(ColSpan(2))
    'colspan="2"'
    >>> render_attributes([Rel(["external", "noopener"]), Disabled(True), Disabled(False)])
    'rel="external noopener" disabled'
"""

from __future__ import annotations

from collections.abc import Iterable
from html import escape
from typing import TYPE_CHECKING, Any

from .base import BooleanAttribute
from .typing import AttributePair, BooleanValued

if TYPE_CHECKING:
    from ..config import RenderSettings

__all__ = [
    "attribute_pair",
    "render_attribute",
    "render_attributes",
]


def _settings(settings: RenderSettings | None) -> RenderSettings:
    from ..config import RenderSettings

    return settings if settings is not None else RenderSettings()


def attribute_pair(attr: Any) -> AttributePair | None:
    """
    Build the pair an element serializer needs.

    Args:
        attr (Any): Attribute instance (model or token member).

    Returns:
        tuple[str, str | None] | None: `(name, value)` for valued attributes,
        `(name, None)` for a true boolean, None for a false boolean.
    """
    if isinstance(attr, (BooleanAttribute, BooleanValued)):
        return (attr.attribute, None) if attr.value else None
    return (attr.attribute, attr.string_value)


def render_attribute(attr: Any, settings: RenderSettings | None = None) -> str:
    """
    Render one attribute as markup text.

    Args:
        attr (Any): Attribute instance.
        settings (RenderSettings | None): Quote, escaping, and boolean style; defaults
            to RenderSettings().

    Returns:
        str: `name="value"`, the boolean form chosen by settings.boolean_style, or ""
        for an absent (false) boolean.
    """
    pair = attribute_pair(attr)
    if pair is None:
        return ""
    s = _settings(settings)
    name, value = pair
    if value is None:
        if s.boolean_style == "bare":
            return name
        value = "" if s.boolean_style == "empty" else name
    if s.escape:
        value = escape(value, quote=True)
    return f"{name}={s.quote}{value}{s.quote}"


def render_attributes(attrs: Iterable[Any], settings: RenderSettings | None = None) -> str:
    """
    Render several attributes, space-separated, skipping absent ones.

    Args:
        attrs (Iterable[Any]): Attribute instances in emission order.
        settings (RenderSettings | None): Passed through to render_attribute.

    Returns:
        str: Joined markup text ("" when nothing renders).
    """
    s = _settings(settings)
    parts = (render_attribute(a, s) for a in attrs)
    return " ".join(p for p in parts if p)
