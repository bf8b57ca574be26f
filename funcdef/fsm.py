from __future__ import annotations

from enum import StrEnum

from statemachine import State, StateMachine


class BuilderState(StrEnum):
    initialized = "initialized"
    populated = "populated"


class BuilderFSM(StateMachine):
    """Lifecycle of a FunctionDefinitionBuilder.

    Purely informational: no state blocks any builder method, and there is no
    final "built" state, so a builder can keep being mutated after build().
    """

    empty = State(BuilderState.initialized.value, value=BuilderState.initialized.value, initial=True)
    populated = State(BuilderState.populated.value, value=BuilderState.populated.value)

    parameter_added = empty.to(populated) | populated.to(populated)

    @property
    def builder_state(self) -> BuilderState:
        return BuilderState(str(self.current_state.value))
