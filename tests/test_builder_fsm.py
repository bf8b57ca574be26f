from __future__ import annotations

from funcdef.fsm import BuilderFSM, BuilderState


def test_fsm_starts_initialized() -> None:
    fsm = BuilderFSM()
    assert fsm.builder_state == BuilderState.initialized


def test_parameter_added_is_allowed_repeatedly() -> None:
    fsm = BuilderFSM()

    fsm.parameter_added()
    assert fsm.builder_state == BuilderState.populated

    fsm.parameter_added()
    fsm.parameter_added()
    assert fsm.builder_state == BuilderState.populated
