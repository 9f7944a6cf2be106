import pytest
from pydantic import ValidationError

from htmltypes.attributes import FetchPriority, Kind, Span
from htmltypes.config import RenderSettings
from htmltypes.core.errors import ConfigError, HtmlTypesError, OutOfDomainError, UnknownTokenError


@pytest.mark.parametrize("exc", [UnknownTokenError, OutOfDomainError, ConfigError])
def test_errors_share_base_and_are_value_errors(exc: type[Exception]) -> None:
    assert issubclass(exc, HtmlTypesError)
    assert issubclass(exc, ValueError)


def test_unknown_token_raises_typed_error() -> None:
    with pytest.raises(UnknownTokenError, match="bogus"):
        FetchPriority("bogus")
    with pytest.raises(ValueError):
        Kind("audio-description")


def test_out_of_domain_is_carried_by_validation_error() -> None:
    with pytest.raises(ValidationError) as info:
        Span(0)
    err = info.value.errors()[0]["ctx"]["error"]
    assert isinstance(err, OutOfDomainError)
    assert "span must be > 0" in str(err)


def test_config_error_on_invalid_settings() -> None:
    with pytest.raises(ConfigError):
        RenderSettings(boolean_style="loud")
