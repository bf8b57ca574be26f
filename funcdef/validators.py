from __future__ import annotations

import logging
import string
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from funcdef.models import FunctionDefinition, PropertyDefinition

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 64
VALID_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "-_")

_NAME_REQUIREMENT = (
    "The name of the function must be a-z, A-Z, 0-9, or contain underscores and dashes, "
    f"with a maximum length of {MAX_NAME_LENGTH}."
)


class InvalidFunctionNameError(ValueError):
    def __init__(self, message: str, *, name: str, invalid_chars: list[str]):
        super().__init__(message)
        self.name = name
        self.invalid_chars = invalid_chars


class SchemaConsistencyError(ValueError):
    pass


def validate_name(function_name: str) -> None:
    """Raise InvalidFunctionNameError unless the name is accepted by the tool-calling API.

    Invalid characters are reported once per occurrence, in order. When both rules
    are broken the message reads: invalid characters, then too long, then the
    base requirement.
    """

    invalid_chars = [ch for ch in function_name if ch not in VALID_NAME_CHARS]
    too_long = len(function_name) > MAX_NAME_LENGTH
    if not too_long and not invalid_chars:
        return

    message = _NAME_REQUIREMENT
    if too_long:
        message = "Function name is too long. " + message
    if invalid_chars:
        message = f"Function name contains invalid characters: {','.join(invalid_chars)}. " + message

    logger.debug("Rejected function name %r (length=%d, invalid=%r)", function_name, len(function_name), invalid_chars)
    raise InvalidFunctionNameError(message, name=function_name, invalid_chars=invalid_chars)


def _walk(node: PropertyDefinition, path: str) -> Iterator[tuple[str, PropertyDefinition]]:
    yield path, node
    for key, child in (node.properties or {}).items():
        yield from _walk(child, f"{path}.{key}")
    if node.items is not None:
        yield from _walk(node.items, f"{path}[]")


class FunctionValidator(ABC):
    """A small, composable check over a finished function definition."""

    @abstractmethod
    def validate(self, *, definition: FunctionDefinition) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class NameValidator(FunctionValidator):
    def validate(self, *, definition: FunctionDefinition) -> None:
        validate_name(definition.name)


@dataclass(frozen=True, slots=True)
class RequiredPropertiesValidator(FunctionValidator):
    """Every `required` entry must name a declared property, at every nesting level."""

    def validate(self, *, definition: FunctionDefinition) -> None:
        for path, node in _walk(definition.parameters, "parameters"):
            if not node.required:
                continue
            declared = node.properties or {}
            missing = [name for name in node.required if name not in declared]
            if missing:
                raise SchemaConsistencyError(f"{path}: required names not in properties: {','.join(missing)}")


@dataclass(frozen=True, slots=True)
class PropertyCountValidator(FunctionValidator):
    """minProperties may not exceed maxProperties."""

    def validate(self, *, definition: FunctionDefinition) -> None:
        for path, node in _walk(definition.parameters, "parameters"):
            if node.min_properties is None or node.max_properties is None:
                continue
            if node.min_properties > node.max_properties:
                raise SchemaConsistencyError(
                    f"{path}: minProperties ({node.min_properties}) > maxProperties ({node.max_properties})"
                )


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[FunctionValidator, ...]

    def validate(self, *, definition: FunctionDefinition) -> None:
        for v in self.validators:
            v.validate(definition=definition)


# Builder.validate() only checks the function name unless told otherwise.
DEFAULT_PIPELINE = ValidatorPipeline(validators=(NameValidator(),))

STRICT_PIPELINE = ValidatorPipeline(
    validators=(
        NameValidator(),
        RequiredPropertiesValidator(),
        PropertyCountValidator(),
    )
)
