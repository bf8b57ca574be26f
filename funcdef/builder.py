from __future__ import annotations

import logging
from collections.abc import Mapping

from funcdef.fsm import BuilderFSM, BuilderState
from funcdef.models import FunctionDefinition, FunctionObjectType, PropertyDefinition
from funcdef.validators import DEFAULT_PIPELINE, ValidatorPipeline, validate_name

logger = logging.getLogger(__name__)


class FunctionDefinitionBuilder:
    """Fluent builder for a FunctionDefinition.

    Validation is opt-in: call `validate()` before `build()` to check the name.
    `build()` hands back the owned definition without copying or freezing it.
    """

    validate_name = staticmethod(validate_name)

    def __init__(self, name: str, description: str | None = None):
        self._definition = FunctionDefinition(
            name=name,
            description=description,
            parameters=PropertyDefinition(type=FunctionObjectType.OBJECT, properties={}),
        )
        self._fsm = BuilderFSM()

    @property
    def state(self) -> BuilderState:
        return self._fsm.builder_state

    def add_parameter(self, name: str, definition: PropertyDefinition, required: bool = True) -> FunctionDefinitionBuilder:
        params = self._definition.parameters
        if params.properties is None:
            params.properties = {}

        # Re-adding a name replaces the definition but keeps its original position.
        params.properties[name] = definition

        # Last call wins for required-ness, and a name is listed at most once.
        if required:
            if params.required is None:
                params.required = []
            if name not in params.required:
                params.required.append(name)
        elif params.required and name in params.required:
            params.required.remove(name)
            logger.debug("Parameter %r of %r is no longer required", name, self._definition.name)
            if not params.required:
                params.required = None

        logger.debug("Added parameter %r (required=%s) to %r", name, required, self._definition.name)
        self._fsm.parameter_added()
        return self

    def add_parameters(self, parameters: Mapping[str, PropertyDefinition], required: bool = True) -> FunctionDefinitionBuilder:
        for name, definition in parameters.items():
            self.add_parameter(name, definition, required=required)
        return self

    def validate(self, pipeline: ValidatorPipeline | None = None) -> FunctionDefinitionBuilder:
        (pipeline or DEFAULT_PIPELINE).validate(definition=self._definition)
        return self

    def build(self) -> FunctionDefinition:
        return self._definition
