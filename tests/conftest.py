from __future__ import annotations

import pytest

from funcdef.builder import FunctionDefinitionBuilder
from funcdef.models import define_enum, define_string


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FUNCDEF_* environment from changing serialized output."""

    monkeypatch.delenv("FUNCDEF_JSON_INDENT", raising=False)


@pytest.fixture()
def weather_builder() -> FunctionDefinitionBuilder:
    return (
        FunctionDefinitionBuilder("get_weather", "Get the current weather for a location")
        .add_parameter("location", define_string("City and state, e.g. San Francisco, CA"))
        .add_parameter("unit", define_enum(["celsius", "fahrenheit"]), required=False)
    )
