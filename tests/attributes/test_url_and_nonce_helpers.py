import base64
from pathlib import Path

from htmltypes.attributes import Action, Href, Nonce, ObjectData
from htmltypes.config import RenderSettings


def test_href_url() -> None:
    assert Href.url("https://example.com").value == "https://example.com"


def test_href_mailto() -> None:
    assert Href.mailto("a@example.com").value == "mailto:a@example.com"
    href = Href.mailto("a@example.com", subject="Hello", body="See you")
    assert href.value == "mailto:a@example.com?subject=Hello&body=See%20you"


def test_href_sms_and_tel() -> None:
    assert Href.sms("+15551234567", "On my way").value == "sms:+15551234567?body=On%20my%20way"
    assert Href.tel("+15551234567").value == "tel:+15551234567"


def test_href_whatsapp_encodes_message() -> None:
    href = Href.whatsapp("15551234567", "Hi & bye")
    assert href.value == "https://wa.me/15551234567?text=Hi%20%26%20bye"


def test_href_file(tmp_path: Path) -> None:
    href = Href.file(tmp_path / "a b.txt")
    assert href.value.startswith("file://")
    assert href.value.endswith("a%20b.txt")


def test_from_url_builders() -> None:
    assert ObjectData.from_url("https://example.com/movie.mp4").pair() == (
        "data",
        "https://example.com/movie.mp4",
    )
    assert Action.from_url("/submit").pair() == ("action", "/submit")


def _isolate_settings(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("HTMLTYPES_BOOLEAN_STYLE", "HTMLTYPES_QUOTE", "HTMLTYPES_ESCAPE", "HTMLTYPES_NONCE_BYTES"):
        monkeypatch.delenv(key, raising=False)


def test_nonce_generate_is_base64_of_16_bytes(tmp_path: Path, monkeypatch) -> None:
    _isolate_settings(tmp_path, monkeypatch)
    nonce = Nonce.generate()
    assert len(base64.b64decode(nonce.value)) == 16


def test_nonce_generate_differs_between_calls() -> None:
    assert Nonce.generate() != Nonce.generate()


def test_nonce_size_from_settings() -> None:
    settings = RenderSettings(nonce_bytes=24)
    assert len(base64.b64decode(Nonce.generate(settings=settings).value)) == 24


def test_nonce_explicit_size_wins_over_settings() -> None:
    settings = RenderSettings(nonce_bytes=24)
    assert len(base64.b64decode(Nonce.generate(8, settings=settings).value)) == 8


def test_nonce_size_from_environment(tmp_path: Path, monkeypatch) -> None:
    _isolate_settings(tmp_path, monkeypatch)
    monkeypatch.setenv("HTMLTYPES_NONCE_BYTES", "32")
    assert len(base64.b64decode(Nonce.generate().value)) == 32


def test_nonce_size_from_toml(tmp_path: Path, monkeypatch) -> None:
    _isolate_settings(tmp_path, monkeypatch)
    (tmp_path / "htmltypes.toml").write_text("[render]\nnonce_bytes = 20\n")
    assert len(base64.b64decode(Nonce.generate().value)) == 20
