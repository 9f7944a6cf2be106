import pytest

from htmltypes.attributes import (
    ButtonType,
    FontSize,
    FormMethod,
    ListType,
    Method,
    ObjectType,
    Rel,
    ScriptType,
    Size,
    SourceType,
    get_attribute_types,
    list_attribute_types,
)


def test_lookup_by_name() -> None:
    assert get_attribute_types("rel") == [Rel]


def test_form_and_submit_method_names_are_distinct() -> None:
    assert get_attribute_types("formmethod") == [FormMethod]
    assert get_attribute_types("method") == [Method]


def test_shared_names_return_every_type() -> None:
    assert set(get_attribute_types("type")) == {ButtonType, ListType, ObjectType, ScriptType, SourceType}
    assert set(get_attribute_types("size")) == {Size, FontSize}


def test_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_attribute_types("not-an-attribute")


def test_registry_has_no_duplicates_and_skips_helpers() -> None:
    types = list_attribute_types()
    assert len(types) == len(set(types))
    names = {t.__name__ for t in types}
    assert "DateFormat" not in names
    assert "ElementtimingCategory" not in names
