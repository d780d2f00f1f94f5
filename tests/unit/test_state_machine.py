# tests/unit/test_state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def test_state_machine_init(simple_state, another_state):
    from assemblysem.core.state_machine import StateMachine

    m = StateMachine("m", states=[simple_state, another_state])
    assert m.name == "m"
    assert m.states == (simple_state, another_state)
    assert m.current_state is None


def test_current_state_must_belong(simple_state, another_state):
    from assemblysem.core.errors import StateNotFoundError
    from assemblysem.core.state_machine import StateMachine

    m = StateMachine("m", states=[simple_state])
    m.current_state = simple_state
    assert m.current_state is simple_state
    with pytest.raises(StateNotFoundError):
        m.current_state = another_state
    m.current_state = None
    assert m.current_state is None


def test_duplicate_state_name_rejected(simple_state):
    from assemblysem.core.errors import ValidationError
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.states import State

    m = StateMachine("m", states=[simple_state])
    m.add_state(simple_state)
    assert len(m.states) == 1
    with pytest.raises(ValidationError):
        m.add_state(State("Idle"))


def test_transition_must_reference_own_states(simple_state, another_state):
    from assemblysem.core.errors import StateNotFoundError
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.transitions import Transition

    m = StateMachine("m", states=[simple_state])
    with pytest.raises(StateNotFoundError):
        m.add_transition(Transition(simple_state, another_state))
    m.add_state(another_state)
    m.add_transition(Transition(simple_state, another_state))
    assert len(m.transitions) == 1


def test_get_state(simple_state):
    from assemblysem.core.errors import StateNotFoundError
    from assemblysem.core.state_machine import StateMachine

    m = StateMachine("m", states=[simple_state])
    assert m.get_state("Idle") is simple_state
    with pytest.raises(StateNotFoundError):
        m.get_state("Missing")


def test_transitions_from_filters(simple_state, another_state):
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.transitions import Transition

    auto = Transition(simple_state, another_state)
    triggered = Transition(simple_state, another_state, triggerable=True)
    back = Transition(another_state, simple_state)
    m = StateMachine("m", states=[simple_state, another_state], transitions=[auto, triggered, back])
    assert m.transitions_from(simple_state) == [auto, triggered]
    assert m.transitions_from(simple_state, triggerable=False) == [auto]
    assert m.transitions_from(simple_state, triggerable=True) == [triggered]


def test_clone_shares_structure(simple_state, another_state):
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.transitions import Transition

    t = Transition(simple_state, another_state)
    m = StateMachine("m", states=[simple_state, another_state], transitions=[t])
    clone = m.clone(another_state)
    assert clone is not m
    assert clone.name == "m"
    assert clone.current_state is another_state
    assert m.current_state is None
    assert clone.states[0] is simple_state
    assert clone.transitions[0] is t


def test_frozen_machine_rejects_changes(simple_state, another_state):
    from assemblysem.core.errors import AssemblyError
    from assemblysem.core.state_machine import StateMachine

    m = StateMachine("m", states=[simple_state, another_state], current_state=simple_state)
    m.freeze()
    assert m.frozen
    with pytest.raises(AssemblyError):
        m.current_state = another_state
    with pytest.raises(AssemblyError):
        m.add_state(simple_state)
