"""
Configuration for htmltypes rendering and helper defaults.

Defines RenderSettings, a frozen dataclass carrying the options used by
htmltypes.core.render and by Nonce.generate. Defaults are sourced from
htmltypes.core.constants (the single source of truth).

Source of truth
- htmltypes.core.constants.DEFAULT_QUOTE, NONCE_BYTES

Import DAG discipline
- Depends only on stdlib and htmltypes.core.
- Render helpers take settings as an argument; Nonce.generate falls back to load().

Notes
- Precedence for RenderSettings.load(): env > TOML > defaults.
- Values from env/TOML that cannot be interpreted are ignored (defaults kept);
  explicit construction with invalid values raises ConfigError.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from htmltypes.core.constants import DEFAULT_QUOTE, NONCE_BYTES
from htmltypes.core.errors import ConfigError

__all__ = [
    "BooleanStyle",
    "RenderSettings",
]

logger = logging.getLogger(__name__)

BooleanStyle = Literal["bare", "empty", "name"]

_BOOLEAN_STYLES = {"bare", "empty", "name"}
_QUOTES = {'"', "'"}


@dataclass(frozen=True)
class RenderSettings:
    """
    Runtime settings for attribute rendering.

    Attributes:
        boolean_style (Literal["bare","empty","name"]): How a true boolean renders:
            `disabled`, `disabled=""`, or `disabled="disabled"`.
        quote (str): Quote character around values ('"' or "'").
        escape (bool): HTML-escape values with html.escape.
        nonce_bytes (int): CSPRNG bytes per generated nonce (>= 1).

    Raises:
        ConfigError: If any field is outside its allowed set.

    Examples:
        >>> from htmltypes.config import RenderSettings
        >>> RenderSettings(boolean_style="empty").boolean_style
        'empty'
    """

    boolean_style: BooleanStyle = "bare"
    quote: str = DEFAULT_QUOTE
    escape: bool = True
    nonce_bytes: int = NONCE_BYTES

    def __post_init__(self) -> None:
        if self.boolean_style not in _BOOLEAN_STYLES:
            raise ConfigError(
                f"boolean_style must be one of {sorted(_BOOLEAN_STYLES)}, got {self.boolean_style!r}"
            )
        if self.quote not in _QUOTES:
            raise ConfigError(f"quote must be one of {sorted(_QUOTES)}, got {self.quote!r}")
        if self.nonce_bytes < 1:
            raise ConfigError(f"nonce_bytes must be >= 1, got {self.nonce_bytes}")

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: RenderSettings, cfg: dict[str, Any] | None) -> RenderSettings:
        """Apply a loose config mapping onto RenderSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "boolean_style" in cfg and isinstance(cfg["boolean_style"], str):
            style = cfg["boolean_style"].strip().lower()
            if style in _BOOLEAN_STYLES:
                s = replace(s, boolean_style=style)  # type: ignore[arg-type]

        if "quote" in cfg and isinstance(cfg["quote"], str):
            if cfg["quote"] in _QUOTES:
                s = replace(s, quote=cfg["quote"])

        if "escape" in cfg:
            s = replace(s, escape=_bool(cfg["escape"]))

        if "nonce_bytes" in cfg:
            try:
                n = int(cfg["nonce_bytes"])
            except (TypeError, ValueError):
                n = 0
            if n >= 1:
                s = replace(s, nonce_bytes=n)

        return s

    @classmethod
    def from_env(
        cls, base: RenderSettings | None = None, prefix: str = "HTMLTYPES_"
    ) -> RenderSettings:
        """
        Build RenderSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - HTMLTYPES_BOOLEAN_STYLE ("bare" | "empty" | "name")
            - HTMLTYPES_QUOTE
            - HTMLTYPES_ESCAPE (1/0/true/false/yes/no/on/off)
            - HTMLTYPES_NONCE_BYTES
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("boolean_style", "quote", "escape", "nonce_bytes"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> RenderSettings:
        """
        Build RenderSettings from the render table of a TOML file.

        The table is `[render]` or `[tool.htmltypes.render]`, whichever the file has;
        keys outside it are ignored. When `path` is None, ./htmltypes.toml is read, then
        ./pyproject.toml, and the first file carrying a render table wins.

        Returns defaults if no file is present or none carries a render table.
        """
        files = [Path(path)] if path is not None else [Path("htmltypes.toml"), Path("pyproject.toml")]
        for p in files:
            table = _render_table(p)
            if table is not None:
                logger.debug("loaded render settings from %s", p)
                return cls._apply_mapping(cls(), table)
        return cls()

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> RenderSettings:
        """
        Load RenderSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (htmltypes.toml, pyproject.toml).

        Returns:
            RenderSettings
        """
        return cls.from_env(base=cls.from_toml(path))


def _render_table(p: Path) -> dict[str, Any] | None:
    """Return the render table of a TOML file, or None if absent or unreadable."""
    if not p.is_file():
        return None
    try:
        with p.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("skipping unreadable settings file %s: %s", p, exc)
        return None
    table = data.get("render")
    if table is None:
        table = data.get("tool", {}).get("htmltypes", {}).get("render")
    return table if isinstance(table, dict) else None
