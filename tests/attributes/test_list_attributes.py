import pytest

from htmltypes.attributes import (
    AcceptCharset,
    Class,
    ControlsList,
    For,
    Headers,
    Itemtype,
    Ping,
    Rel,
)


def test_headers_join_in_order() -> None:
    assert Headers(["h1", "h2"]).value == "h1 h2"


def test_sequence_and_string_forms_are_equal() -> None:
    assert Headers(["h1", "h2"]) == Headers("h1 h2")


def test_rel_accepts_rel_instances() -> None:
    assert Rel([Rel.external, Rel.noopener]).value == "external noopener"


def test_rel_secure_external() -> None:
    assert Rel.secure_external.value == "external noopener noreferrer"
    assert Rel.secure_external.tokens == ("external", "noopener", "noreferrer")


@pytest.mark.parametrize(
    "attr,expected",
    [
        (Rel.dns_prefetch, "dns-prefetch"),
        (Rel.privacy_policy, "privacy-policy"),
        (Rel.terms_of_service, "terms-of-service"),
        (Rel.modulepreload, "modulepreload"),
    ],
)
def test_rel_presets(attr: Rel, expected: str) -> None:
    assert attr.value == expected


def test_no_sorting_or_dedup() -> None:
    assert Class(["b", "a", "b"]).value == "b a b"


def test_empty_sequence() -> None:
    assert Class([]).value == ""
    assert Class([]).tokens == ()


def test_for_label() -> None:
    assert For.label("email").pair() == ("for", "email")


def test_itemtype_schema_org() -> None:
    assert Itemtype.schema_org("Person").value == "https://schema.org/Person"
    assert Itemtype.schema_org("Person", "Athlete").tokens == (
        "https://schema.org/Person",
        "https://schema.org/Athlete",
    )


def test_ping_urls() -> None:
    assert Ping(("https://a.example/p", "https://b.example/p")).value == "https://a.example/p https://b.example/p"


def test_controls_list_combine() -> None:
    combined = ControlsList.combine(ControlsList.nodownload, "nofullscreen")
    assert combined.value == "nodownload nofullscreen"


def test_accept_charset_is_comma_joined() -> None:
    assert AcceptCharset(["UTF-8", "ISO-8859-1"]).value == "UTF-8,ISO-8859-1"
    assert AcceptCharset.utf8_and_latin1 == AcceptCharset("UTF-8,ISO-8859-1")
    assert AcceptCharset.utf8_and_latin1.tokens == ("UTF-8", "ISO-8859-1")
    assert AcceptCharset.attribute == "accept-charset"
