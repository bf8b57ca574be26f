from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from funcdef.models import FunctionDefinition
from funcdef.settings import settings_from_env

logger = logging.getLogger(__name__)


def to_wire(model: BaseModel) -> dict[str, Any]:
    """Dump a model to its wire dict.

    Unset optional fields are dropped rather than emitted as null. Explicit values
    (False, 0, empty lists) are kept. Key order follows field order, and
    `properties` / `required` / `enum` keep insertion order.
    """

    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(model: BaseModel, indent: int | None = None) -> str:
    if indent is None:
        indent = settings_from_env().json_indent
    return model.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def to_tool(definition: FunctionDefinition) -> dict[str, Any]:
    """Wrap a function definition as an entry of an OpenAI chat `tools` list."""

    return {"type": "function", "function": to_wire(definition)}


def function_from_wire(data: dict[str, Any]) -> FunctionDefinition:
    return FunctionDefinition.model_validate(data)


def function_from_json(text: str) -> FunctionDefinition:
    definition = FunctionDefinition.model_validate_json(text)
    logger.debug("Decoded function definition %r", definition.name)
    return definition
