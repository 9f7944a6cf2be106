import warnings

import pytest
from pydantic import ValidationError

from htmltypes.attributes import Compact, Disabled, NoResize, Open, Reversed, list_attribute_types
from htmltypes.core.base import BooleanAttribute
from htmltypes.core.typing import BooleanValued, HTMLAttribute


def _boolean_types() -> list[type[BooleanAttribute]]:
    return [t for t in list_attribute_types() if issubclass(t, BooleanAttribute) and t is not Compact]


@pytest.mark.parametrize("cls", _boolean_types(), ids=lambda t: t.attribute)
def test_default_constructor_uses_default_value(cls: type[BooleanAttribute]) -> None:
    assert cls().value is cls.default_value


def test_only_reversed_and_noresize_default_true() -> None:
    assert {t for t in _boolean_types() if t.default_value} == {Reversed, NoResize}


def test_description_is_true_false() -> None:
    assert Open(True).string_value == "true"
    assert str(Open(False)) == "false"


def test_explicit_false_overrides_true_default() -> None:
    assert Reversed(False).value is False


def test_boolean_types_satisfy_boolean_protocol() -> None:
    assert isinstance(Disabled(), BooleanValued)
    assert isinstance(Disabled(), HTMLAttribute)


def test_non_bool_values_rejected() -> None:
    with pytest.raises(ValidationError):
        Disabled(1)


def test_compact_is_deprecated() -> None:
    with pytest.warns(DeprecationWarning, match="compact"):
        Compact(True)


def test_compact_warning_points_at_caller() -> None:
    with pytest.warns(DeprecationWarning) as record:
        Compact(True)
    assert record[0].filename == __file__


def test_other_booleans_do_not_warn() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        Disabled(True)
