# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def simple_state():
    """A minimal State object for basic testing."""
    from assemblysem.core.states import State

    return State(name="Idle")


@pytest.fixture
def another_state():
    """Another State object for transitions."""
    from assemblysem.core.states import State

    return State(name="Active")


@pytest.fixture
def machine_factory():
    """Returns a factory building a machine from a name and state names."""
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.states import State

    def _factory(name, *state_names):
        return StateMachine(name, states=[State(s) for s in state_names])

    return _factory


@pytest.fixture
def two_machine_template(machine_factory):
    """Assembly with M1={A,B} and M2={X,Y}."""
    from assemblysem.core.assembly import Assembly

    template = Assembly("plant")
    template.add_state_machine("M1", machine_factory("M1", "A", "B"))
    template.add_state_machine("M2", machine_factory("M2", "X", "Y"))
    return template


@pytest.fixture
def three_machine_template(machine_factory):
    """Assembly with state counts 2, 3 and 1."""
    from assemblysem.core.assembly import Assembly

    template = Assembly("cell")
    template.add_state_machine("door", machine_factory("door", "open", "closed"))
    template.add_state_machine("arm", machine_factory("arm", "idle", "moving", "fault"))
    template.add_state_machine("lamp", machine_factory("lamp", "on"))
    return template


@pytest.fixture
def generator():
    from assemblysem.runtime.generator import AssemblyGenerator

    return AssemblyGenerator()


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from assemblysem.core.errors import (
        AssemblyError,
        StateNotFoundError,
        StructuralMismatchError,
        UnassignedStateError,
        ValidationError,
    )

    return (AssemblyError, StateNotFoundError, StructuralMismatchError, UnassignedStateError, ValidationError)


@pytest.fixture
def mock_hook():
    """A hook mock for the generator's notifications."""
    hook = MagicMock()
    hook.on_assembly = MagicMock()
    hook.on_configuration = MagicMock()
    hook.on_error = MagicMock()
    return hook
