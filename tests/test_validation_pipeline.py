from __future__ import annotations

import pytest

from funcdef.builder import FunctionDefinitionBuilder
from funcdef.models import PropertyDefinition, define_array, define_object, define_string
from funcdef.validators import (
    DEFAULT_PIPELINE,
    STRICT_PIPELINE,
    InvalidFunctionNameError,
    PropertyCountValidator,
    RequiredPropertiesValidator,
    SchemaConsistencyError,
    ValidatorPipeline,
)


def test_default_pipeline_only_checks_name() -> None:
    fn = FunctionDefinitionBuilder("ok").add_parameter("x", define_object(required=["missing"])).build()
    DEFAULT_PIPELINE.validate(definition=fn)


def test_strict_pipeline_flags_nested_required_mismatch() -> None:
    fn = FunctionDefinitionBuilder("ok").add_parameter("x", define_object({"a": define_string()}, ["a", "b"])).build()

    with pytest.raises(SchemaConsistencyError) as e:
        STRICT_PIPELINE.validate(definition=fn)

    assert "parameters.x" in str(e.value)
    assert "b" in str(e.value)


def test_strict_pipeline_walks_array_items() -> None:
    item = PropertyDefinition(min_properties=3, max_properties=1)
    fn = FunctionDefinitionBuilder("ok").add_parameter("xs", define_array(item)).build()

    with pytest.raises(SchemaConsistencyError) as e:
        ValidatorPipeline(validators=(PropertyCountValidator(),)).validate(definition=fn)

    assert "parameters.xs[]" in str(e.value)
    assert "minProperties (3) > maxProperties (1)" in str(e.value)


def test_strict_pipeline_checks_name_first() -> None:
    fn = FunctionDefinitionBuilder("bad name").add_parameter("x", define_object(required=["nope"])).build()

    with pytest.raises(InvalidFunctionNameError):
        STRICT_PIPELINE.validate(definition=fn)


def test_builder_validate_accepts_custom_pipeline() -> None:
    builder = FunctionDefinitionBuilder("ok").add_parameter("x", define_string())
    builder.build().parameters.required = ["x", "ghost"]

    with pytest.raises(SchemaConsistencyError):
        builder.validate(ValidatorPipeline(validators=(RequiredPropertiesValidator(),)))


def test_strict_pipeline_passes_consistent_definition(weather_builder: FunctionDefinitionBuilder) -> None:
    assert weather_builder.validate(STRICT_PIPELINE) is weather_builder
