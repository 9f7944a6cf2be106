"""
HTML boolean attributes.

Every type here is a BooleanAttribute: the flag's presence is the signal. A true value
renders as the bare name and a false value is omitted (see htmltypes.core.render).

Notes:
    - `T()` uses the type's default_value, which is False except for Reversed and
      NoResize.
    - Compact is obsolete in HTML; constructing it emits a DeprecationWarning.

Examples:
    >>> from htmltypes.attributes.boolean import Disabled, Reversed
    >>> Disabled().value, Reversed().value
    (False, True)
    >>> Disabled(True).pair()
    ('disabled', 'true')
"""

from __future__ import annotations

import warnings
from typing import Any

from htmltypes.core.base import BooleanAttribute

__all__ = [
    "Allowfullscreen",
    "Async",
    "Autofocus",
    "Autoplay",
    "Checked",
    "Compact",
    "Controls",
    "Default",
    "Defer",
    "Disabled",
    "DisablePictureInPicture",
    "DisableRemotePlayback",
    "FormNovalidate",
    "Inert",
    "Ismap",
    "Itemscope",
    "Loop",
    "Multiple",
    "Muted",
    "Nomodule",
    "NoResize",
    "Novalidate",
    "Open",
    "Playsinline",
    "Readonly",
    "Required",
    "Reversed",
    "Selected",
    "ShadowRootDelegatesFocus",
    "Truespeed",
]


class Allowfullscreen(BooleanAttribute):
    attribute = "allowfullscreen"


class Async(BooleanAttribute):
    """Fetch the script in parallel and run it as soon as it is available."""

    attribute = "async"


class Autofocus(BooleanAttribute):
    attribute = "autofocus"


class Autoplay(BooleanAttribute):
    """Start media playback as soon as enough data is buffered."""

    attribute = "autoplay"


class Checked(BooleanAttribute):
    attribute = "checked"


class Compact(BooleanAttribute):
    """
    Render a list with reduced spacing.

    Obsolete: use CSS `line-height`/`margin` instead.
    """

    attribute = "compact"

    def __init__(self, *args: Any, **data: Any) -> None:
        super().__init__(*args, **data)
        warnings.warn(
            "compact is obsolete in HTML; style the list with CSS instead",
            DeprecationWarning,
            stacklevel=2,
        )


class Controls(BooleanAttribute):
    attribute = "controls"


class Default(BooleanAttribute):
    attribute = "default"


class Defer(BooleanAttribute):
    """Run a classic script after the document has been parsed."""

    attribute = "defer"


class Disabled(BooleanAttribute):
    attribute = "disabled"


class DisablePictureInPicture(BooleanAttribute):
    attribute = "disablepictureinpicture"


class DisableRemotePlayback(BooleanAttribute):
    attribute = "disableremoteplayback"


class FormNovalidate(BooleanAttribute):
    attribute = "formnovalidate"


class Inert(BooleanAttribute):
    attribute = "inert"


class Ismap(BooleanAttribute):
    attribute = "ismap"


class Itemscope(BooleanAttribute):
    attribute = "itemscope"


class Loop(BooleanAttribute):
    attribute = "loop"


class Multiple(BooleanAttribute):
    attribute = "multiple"


class Muted(BooleanAttribute):
    attribute = "muted"


class Nomodule(BooleanAttribute):
    """Skip the script in browsers that support ES modules."""

    attribute = "nomodule"


class NoResize(BooleanAttribute):
    """Frame cannot be resized by the user. Present by default."""

    attribute = "noresize"
    default_value = True


class Novalidate(BooleanAttribute):
    attribute = "novalidate"


class Open(BooleanAttribute):
    """Details or dialog content is visible."""

    attribute = "open"


class Playsinline(BooleanAttribute):
    attribute = "playsinline"


class Readonly(BooleanAttribute):
    attribute = "readonly"


class Required(BooleanAttribute):
    attribute = "required"


class Reversed(BooleanAttribute):
    """Ordered list counts down. Present by default."""

    attribute = "reversed"
    default_value = True


class Selected(BooleanAttribute):
    attribute = "selected"


class ShadowRootDelegatesFocus(BooleanAttribute):
    attribute = "shadowrootdelegatesfocus"


class Truespeed(BooleanAttribute):
    attribute = "truespeed"
