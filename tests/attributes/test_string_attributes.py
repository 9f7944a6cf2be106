import pytest

from htmltypes.attributes import (
    Autocomplete,
    Behavior,
    Cite,
    EncType,
    FormMethod,
    FormTarget,
    HttpEquiv,
    ListType,
    MetaName,
    Method,
    ObjectType,
    Placeholder,
    ScriptType,
    TextareaWrap,
    list_attribute_types,
)
from htmltypes.core.base import StringAttribute, TokenListAttribute
from htmltypes.core.typing import BooleanValued, StringValued


def _string_types() -> list[type[StringAttribute]]:
    return [
        t
        for t in list_attribute_types()
        if issubclass(t, StringAttribute) and not issubclass(t, TokenListAttribute)
    ]


@pytest.mark.parametrize("cls", _string_types(), ids=lambda t: t.__name__)
def test_every_string_type_round_trips(cls: type[StringAttribute]) -> None:
    assert str(cls("some-value")) == "some-value"
    assert cls("some-value").pair() == (cls.attribute, "some-value")


def test_string_types_satisfy_string_protocol() -> None:
    assert isinstance(Cite("x"), StringValued)
    assert not isinstance(Cite("x"), BooleanValued)


@pytest.mark.parametrize("raw", ["POST", "Post", "post"])
def test_form_method_lowercases(raw: str) -> None:
    assert FormMethod(raw).value == "post"


def test_form_method_accepts_unlisted_methods() -> None:
    assert FormMethod("PUT").value == "put"


def test_form_method_and_method_markup_names() -> None:
    assert FormMethod.post.pair() == ("formmethod", "post")
    assert Method("POST").pair() == ("method", "post")
    assert Method.dialog.value == "dialog"


@pytest.mark.parametrize(
    "attr,expected",
    [
        (FormTarget.self, "_self"),
        (FormTarget.blank, "_blank"),
        (FormTarget.unfenced_top, "_unfencedTop"),
        (EncType.url_encoded, "application/x-www-form-urlencoded"),
        (EncType.multipart_form_data, "multipart/form-data"),
        (ListType.upper_roman, "I"),
        (ListType.decimal, "1"),
        (ObjectType.mp3, "audio/mpeg"),
        (ScriptType.application_json, "application/json"),
        (Placeholder.phone, "(123) 456-7890"),
        (MetaName.theme_color, "theme-color"),
        (HttpEquiv.x_ua_compatible, "x-ua-compatible"),
        (Behavior.alternate, "alternate"),
        (TextareaWrap.hard, "hard"),
        (Autocomplete.one_time_code, "one-time-code"),
    ],
)
def test_preset_values(attr: StringAttribute, expected: str) -> None:
    assert attr.value == expected


def test_shared_markup_names() -> None:
    assert ListType.attribute == ObjectType.attribute == ScriptType.attribute == "type"
    assert HttpEquiv.attribute == "http-equiv"
    assert MetaName.author.pair() == ("name", "author")


def test_presets_do_not_close_the_value_set() -> None:
    assert ScriptType("text/x-template").value == "text/x-template"
