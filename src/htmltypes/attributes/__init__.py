"""
Concrete HTML attribute types, grouped by value policy.

Modules
- boolean: presence flags (disabled, autoplay, reversed, ...).
- strings: free strings and strings with named presets (href, alt, preload, ...).
- tokens: closed token enumerations (fetchpriority, crossorigin, dir, ...).
- numeric: integers, floats and number-like strings (colspan, size, min, ...).
- lists: ordered token lists (rel, class, headers, accept-charset, ...).
- composite: values assembled from parts (integrity, style, elementtiming, ...).
- registry: lookup of types by markup name.
"""

from __future__ import annotations

from .boolean import *  # noqa: F401,F403
from .boolean import __all__ as _boolean_all
from .composite import *  # noqa: F401,F403
from .composite import __all__ as _composite_all
from .lists import *  # noqa: F401,F403
from .lists import __all__ as _lists_all
from .numeric import *  # noqa: F401,F403
from .numeric import __all__ as _numeric_all
from .registry import get_attribute_types, list_attribute_types
from .strings import *  # noqa: F401,F403
from .strings import __all__ as _strings_all
from .tokens import *  # noqa: F401,F403
from .tokens import __all__ as _tokens_all

__all__ = [
    *_boolean_all,
    *_strings_all,
    *_tokens_all,
    *_numeric_all,
    *_lists_all,
    *_composite_all,
    "get_attribute_types",
    "list_attribute_types",
]
