"""
Registry of concrete attribute types keyed by markup name.

Notes:
    - Several types share a markup name ("type" is bound by ButtonType, ListType,
      ObjectType, ScriptType and SourceType), so lookups return every match in
      registration order.
    - Registration order is module order (boolean, strings, tokens, numeric, lists,
      composite), then each module's `__all__` order.
"""

from __future__ import annotations

from collections import defaultdict

from . import boolean, composite, lists, numeric, strings, tokens

__all__ = [
    "get_attribute_types",
    "list_attribute_types",
]


def _collect() -> tuple[type, ...]:
    found: list[type] = []
    for module in (boolean, strings, tokens, numeric, lists, composite):
        for export in module.__all__:
            obj = getattr(module, export)
            if isinstance(obj, type) and isinstance(getattr(obj, "attribute", None), str):
                found.append(obj)
    return tuple(found)


# Registry
_TYPES: tuple[type, ...] = _collect()

_BY_NAME: dict[str, list[type]] = defaultdict(list)
for _t in _TYPES:
    _BY_NAME[_t.attribute].append(_t)
del _t


def get_attribute_types(name: str) -> list[type]:
    """
    Look up the attribute types bound to a markup name.

    Args:
        name (str): Markup attribute name (e.g. "rel", "type").

    Returns:
        list[type]: Matching types in registration order.

    Raises:
        KeyError: If no type is bound to `name`.
    """
    if name not in _BY_NAME:
        raise KeyError(name)
    return list(_BY_NAME[name])


def list_attribute_types() -> list[type]:
    """
    Return all registered attribute types.

    Returns:
        list[type]: Every concrete type in registration order.
    """
    return list(_TYPES)
