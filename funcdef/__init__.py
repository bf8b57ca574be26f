"""Typed JSON Schema fragments for tool/function-calling APIs.

Build a FunctionDefinition with FunctionDefinitionBuilder, then hand it to
`funcdef.serialization` to get the wire dict or JSON text.
"""

from funcdef.builder import FunctionDefinitionBuilder
from funcdef.fsm import BuilderState
from funcdef.models import (
    FunctionDefinition,
    FunctionObjectType,
    PropertyDefinition,
    UnsupportedTypeError,
    convert_type_to_string,
    define_array,
    define_boolean,
    define_enum,
    define_integer,
    define_null,
    define_number,
    define_object,
    define_string,
)
from funcdef.validators import (
    DEFAULT_PIPELINE,
    STRICT_PIPELINE,
    InvalidFunctionNameError,
    SchemaConsistencyError,
    ValidatorPipeline,
    validate_name,
)

__all__ = [
    "BuilderState",
    "DEFAULT_PIPELINE",
    "FunctionDefinition",
    "FunctionDefinitionBuilder",
    "FunctionObjectType",
    "InvalidFunctionNameError",
    "PropertyDefinition",
    "STRICT_PIPELINE",
    "SchemaConsistencyError",
    "UnsupportedTypeError",
    "ValidatorPipeline",
    "convert_type_to_string",
    "define_array",
    "define_boolean",
    "define_enum",
    "define_integer",
    "define_null",
    "define_number",
    "define_object",
    "define_string",
    "validate_name",
]
