from __future__ import annotations

from pathlib import Path

import pytest

from htmltypes.config import RenderSettings
from htmltypes.core.constants import NONCE_BYTES
from htmltypes.core.errors import ConfigError

_ENV_KEYS = [
    "HTMLTYPES_BOOLEAN_STYLE",
    "HTMLTYPES_QUOTE",
    "HTMLTYPES_ESCAPE",
    "HTMLTYPES_NONCE_BYTES",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write(tmp: Path, name: str, content: str) -> Path:
    p = tmp / name
    p.write_text(content)
    return p


def test_render_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write(
        tmp_path,
        "htmltypes.toml",
        """
        [render]
        boolean_style = "empty"
        nonce_bytes = 24
        escape = true
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("HTMLTYPES_BOOLEAN_STYLE", "name")
    monkeypatch.setenv("HTMLTYPES_ESCAPE", "off")

    # Act
    s = RenderSettings.load()

    # Assert precedence: env > TOML
    assert s.boolean_style == "name"  # env override
    assert s.escape is False  # env override
    assert s.nonce_bytes == 24  # from TOML


def test_render_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write(
        tmp_path,
        "htmltypes.toml",
        """
        [render]
        boolean_style = "empty"
        quote = "'"
        escape = false
        nonce_bytes = 32
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = RenderSettings.load()

    assert s.boolean_style == "empty"
    assert s.quote == "'"
    assert s.escape is False
    assert s.nonce_bytes == 32


def test_render_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    _write(
        tmp_path,
        "pyproject.toml",
        """
        [project]
        name = "site"

        [tool.htmltypes.render]
        boolean_style = "name"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert RenderSettings.load().boolean_style == "name"


def test_render_settings_explicit_path(tmp_path: Path, monkeypatch) -> None:
    cfg = _write(tmp_path, "custom.toml", '[render]\nboolean_style = "empty"\n')
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert RenderSettings.load(cfg).boolean_style == "empty"


def test_render_settings_ignore_top_level_keys(tmp_path: Path, monkeypatch) -> None:
    cfg = _write(tmp_path, "custom.toml", 'boolean_style = "empty"\nnonce_bytes = 8\n')
    _write(tmp_path, "htmltypes.toml", "quote = \"'\"\n")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert RenderSettings.load(cfg) == RenderSettings()
    assert RenderSettings.load() == RenderSettings()


def test_render_settings_pyproject_used_when_htmltypes_toml_has_no_table(
    tmp_path: Path, monkeypatch
) -> None:
    _write(tmp_path, "htmltypes.toml", 'title = "site"\n')
    _write(tmp_path, "pyproject.toml", '[tool.htmltypes.render]\nescape = false\n')
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert RenderSettings.load().escape is False


def test_render_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    # No TOML, no env
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = RenderSettings.load()

    assert s == RenderSettings()
    assert s.boolean_style == "bare"
    assert s.quote == '"'
    assert s.escape is True
    assert s.nonce_bytes == NONCE_BYTES


def test_render_settings_ignores_invalid_mapping_values(tmp_path: Path, monkeypatch) -> None:
    _write(
        tmp_path,
        "htmltypes.toml",
        """
        [render]
        boolean_style = "loud"
        quote = "`"
        nonce_bytes = "many"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("HTMLTYPES_NONCE_BYTES", "0")

    assert RenderSettings.load() == RenderSettings()


def test_render_settings_skips_unreadable_toml(tmp_path: Path, monkeypatch) -> None:
    _write(tmp_path, "htmltypes.toml", "this is = = not toml")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert RenderSettings.load() == RenderSettings()


@pytest.mark.parametrize(
    "kwargs",
    [{"boolean_style": "loud"}, {"quote": "`"}, {"nonce_bytes": 0}],
)
def test_render_settings_explicit_invalid_raises(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        RenderSettings(**kwargs)
