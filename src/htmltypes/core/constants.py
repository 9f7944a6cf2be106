"""
htmltypes core defaults.

Defines separators, URL prefixes, and byte counts consumed by attribute types and the
render layer. This module is zero-IO and uses only the Python standard library.

Notes:
    - htmltypes.config.RenderSettings takes its defaults from here.
    - Changing TOKEN_SEPARATOR changes the canonical form of every space-joined list.
"""

from __future__ import annotations

__all__ = [
    "TOKEN_SEPARATOR",
    "CHARSET_SEPARATOR",
    "STYLE_SEPARATOR",
    "ELEMENTTIMING_SEPARATOR",
    "DIRNAME_SUFFIX",
    "SCHEMA_ORG_BASE",
    "WHATSAPP_BASE",
    "NONCE_BYTES",
    "DEFAULT_QUOTE",
]

# Separator for space-separated token lists (rel, headers, class, ping, ...).
TOKEN_SEPARATOR: str = " "

# accept-charset lists are comma-joined without padding ("UTF-8,ISO-8859-1").
CHARSET_SEPARATOR: str = ","

# Separator between CSS declarations in a style attribute.
STYLE_SEPARATOR: str = "; "

ELEMENTTIMING_SEPARATOR: str = "-"
DIRNAME_SUFFIX: str = "-direction"

SCHEMA_ORG_BASE: str = "https://schema.org/"
WHATSAPP_BASE: str = "https://wa.me/"

# 128 bits of CSPRNG output per generated nonce.
NONCE_BYTES: int = 16

DEFAULT_QUOTE: str = '"'
