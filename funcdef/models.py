from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UnsupportedTypeError(ValueError):
    pass


class FunctionObjectType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"
    BOOLEAN = "boolean"
    NULL = "null"


def convert_type_to_string(type_: Any) -> str:
    """Map a FunctionObjectType to its lowercase wire string."""

    match type_:
        case FunctionObjectType.STRING:
            return "string"
        case FunctionObjectType.INTEGER:
            return "integer"
        case FunctionObjectType.NUMBER:
            return "number"
        case FunctionObjectType.OBJECT:
            return "object"
        case FunctionObjectType.ARRAY:
            return "array"
        case FunctionObjectType.BOOLEAN:
            return "boolean"
        case FunctionObjectType.NULL:
            return "null"
        case _:
            raise UnsupportedTypeError(f"Unknown type: {type_}")


class PropertyDefinition(BaseModel):
    """One JSON Schema node describing a function parameter or a nested value.

    Fields that don't apply to `type` stay None so the serializer omits them
    (an explicit null means something different from an absent key in JSON Schema).
    """

    model_config = ConfigDict(populate_by_name=True)

    type: FunctionObjectType = FunctionObjectType.OBJECT

    # Only meaningful for type == "object". Insertion order is the wire order.
    properties: dict[str, PropertyDefinition] | None = None
    required: list[str] | None = None

    # None means "unspecified", which is not the same as True.
    additional_properties: bool | None = Field(default=None, alias="additionalProperties")

    description: str | None = None
    enum: list[str] | None = None

    min_properties: int | None = Field(default=None, ge=0, alias="minProperties")
    max_properties: int | None = Field(default=None, ge=0, alias="maxProperties")

    # Only meaningful for type == "array".
    items: PropertyDefinition | None = None

    @classmethod
    def define_array(cls, items: PropertyDefinition | None = None) -> PropertyDefinition:
        return define_array(items)

    @classmethod
    def define_enum(cls, values: list[str], description: str | None = None) -> PropertyDefinition:
        return define_enum(values, description)

    @classmethod
    def define_integer(cls, description: str | None = None) -> PropertyDefinition:
        return define_integer(description)

    @classmethod
    def define_number(cls, description: str | None = None) -> PropertyDefinition:
        return define_number(description)

    @classmethod
    def define_string(cls, description: str | None = None) -> PropertyDefinition:
        return define_string(description)

    @classmethod
    def define_boolean(cls, description: str | None = None) -> PropertyDefinition:
        return define_boolean(description)

    @classmethod
    def define_null(cls, description: str | None = None) -> PropertyDefinition:
        return define_null(description)

    @classmethod
    def define_object(
        cls,
        properties: dict[str, PropertyDefinition] | None = None,
        required: list[str] | None = None,
        additional_properties: bool | None = None,
        description: str | None = None,
        enum: list[str] | None = None,
    ) -> PropertyDefinition:
        return define_object(properties, required, additional_properties, description, enum)


class FunctionDefinition(BaseModel):
    """A callable tool exposed to a model."""

    model_config = ConfigDict(populate_by_name=True)

    # Must be a-z, A-Z, 0-9, '_' or '-', at most 64 chars. Checked by validate_name, not here.
    name: str

    # Used by the model to choose when and how to call the function.
    description: str | None = None

    parameters: PropertyDefinition


def _scalar(type_: FunctionObjectType, description: str | None) -> PropertyDefinition:
    return PropertyDefinition(type=convert_type_to_string(type_), description=description)


def define_array(items: PropertyDefinition | None = None) -> PropertyDefinition:
    return PropertyDefinition(type=convert_type_to_string(FunctionObjectType.ARRAY), items=items)


def define_enum(values: list[str], description: str | None = None) -> PropertyDefinition:
    # Copy so later changes to the caller's list don't leak into the schema.
    return PropertyDefinition(
        type=convert_type_to_string(FunctionObjectType.STRING),
        enum=list(values),
        description=description,
    )


def define_integer(description: str | None = None) -> PropertyDefinition:
    return _scalar(FunctionObjectType.INTEGER, description)


def define_number(description: str | None = None) -> PropertyDefinition:
    return _scalar(FunctionObjectType.NUMBER, description)


def define_string(description: str | None = None) -> PropertyDefinition:
    return _scalar(FunctionObjectType.STRING, description)


def define_boolean(description: str | None = None) -> PropertyDefinition:
    return _scalar(FunctionObjectType.BOOLEAN, description)


def define_null(description: str | None = None) -> PropertyDefinition:
    return _scalar(FunctionObjectType.NULL, description)


def define_object(
    properties: dict[str, PropertyDefinition] | None = None,
    required: list[str] | None = None,
    additional_properties: bool | None = None,
    description: str | None = None,
    enum: list[str] | None = None,
) -> PropertyDefinition:
    return PropertyDefinition(
        type=convert_type_to_string(FunctionObjectType.OBJECT),
        properties=properties,
        required=required,
        additional_properties=additional_properties,
        description=description,
        enum=enum,
    )
