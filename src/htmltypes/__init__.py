"""
htmltypes — strongly typed HTML attribute values.

## Responsibilities
- One small immutable type per HTML attribute, with a fixed markup name, a typed value
  domain, named presets and a canonical string form.
- Render helpers that turn attribute instances into markup pairs or text.

## Public API
- htmltypes.attributes — every concrete attribute type plus the name registry.
- htmltypes.core — shape contracts, grammar helpers, errors and rendering.
- htmltypes.config.RenderSettings — render options (env > TOML > defaults).

## Logging
The package logger carries a NullHandler; applications opt in with
`logging.getLogger("htmltypes").setLevel(logging.DEBUG)` to see coercions and clamps.

## Examples
```python
from htmltypes.attributes import Crossorigin, Rel
from htmltypes.core.render import render_attributes
render_attributes([Rel.secure_external, Crossorigin("bogus")])
# 'rel="external noopener noreferrer" crossorigin="anonymous"'
```
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
