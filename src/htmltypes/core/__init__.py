"""
Core package aggregator for htmltypes contracts (shapes, grammar, rendering, errors).

## Contracts (single source of truth)
- Base — pydantic shape contracts (string, boolean, integer, number, list, generic)
  and the Enum base for closed token sets; `preset` named constructors.
- Grammar — markup-name rules, token joining/splitting, token lookup.
- Typing — AttributeName, AttributePair and runtime-checkable shape Protocols.
- Render — `(name, value)` pairs and reference markup emitters.
- Constants/Errors — separators, URL prefixes, nonce size; the exception taxonomy.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: attribute names and serialized tokens are spelled exactly as HTML
  spells them; Python names follow PEP 8.

## Downstream usage
- htmltypes.attributes — concrete types subclass the shapes defined in `base`.
- Element serializers consume `render.attribute_pair` and never re-derive names.

## Examples
```python
from htmltypes.core.render import render_attribute
from htmltypes.attributes import ColSpan, Disabled
render_attribute(ColSpan(2))   # 'colspan="2"'
render_attribute(Disabled())   # '' (absent)
```
"""
