# assemblysem/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from assemblysem.core.errors import AssemblyError, StateNotFoundError, ValidationError
from assemblysem.core.states import State
from assemblysem.core.transitions import Transition


class StateMachine:
    """
    A finite state machine owning a fixed set of states and transitions and a
    single current-state slot.

    Inside an assembly template the current state is usually unset. The
    generator produces clones that share this machine's State and Transition
    objects and differ only in the state installed as current.
    """

    def __init__(
        self,
        name: str,
        states: Iterable[State] = (),
        transitions: Iterable[Transition] = (),
        current_state: Optional[State] = None,
    ) -> None:
        """
        :param name: Name of the machine.
        :param states: States owned by the machine, in enumeration order.
        :param transitions: Transitions between the machine's states.
        :param current_state: Optional initial current state.
        """
        self._name = name
        self._states: Dict[str, State] = {}
        self._transitions: List[Transition] = []
        self._current_state: Optional[State] = None
        self._frozen = False

        for state in states:
            self.add_state(state)
        for transition in transitions:
            self.add_transition(transition)
        if current_state is not None:
            self.current_state = current_state

    @property
    def name(self) -> str:
        return self._name

    @property
    def states(self) -> Tuple[State, ...]:
        """States in insertion order."""
        return tuple(self._states.values())

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._transitions)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def current_state(self) -> Optional[State]:
        """Get the current state, or None when unset."""
        return self._current_state

    @current_state.setter
    def current_state(self, state: Optional[State]) -> None:
        self._check_mutable()
        if state is not None and not self.has_state(state):
            raise StateNotFoundError(f"State '{state.name}' is not a state of machine '{self._name}'.")
        self._current_state = state

    def has_state(self, state: State) -> bool:
        return self._states.get(state.name) is state

    def get_state(self, name: str) -> State:
        """
        Look up a state by name.

        :raises StateNotFoundError: If the machine has no state with that name.
        """
        try:
            return self._states[name]
        except KeyError:
            raise StateNotFoundError(f"Machine '{self._name}' has no state named '{name}'.") from None

    def add_state(self, state: State) -> None:
        """
        Add a state. Names must be unique within the machine; re-adding the
        same object is a no-op.
        """
        self._check_mutable()
        existing = self._states.get(state.name)
        if existing is state:
            return
        if existing is not None:
            raise ValidationError(f"Machine '{self._name}' already has a state named '{state.name}'.")
        self._states[state.name] = state

    def add_transition(self, transition: Transition) -> None:
        """
        Add a transition. Its source and target must already be states of
        this machine.
        """
        self._check_mutable()
        if not self.has_state(transition.source):
            raise StateNotFoundError(f"Source state {transition.source.name} not in machine '{self._name}'")
        if not self.has_state(transition.target):
            raise StateNotFoundError(f"Target state {transition.target.name} not in machine '{self._name}'")
        self._transitions.append(transition)

    def transitions_from(self, state: State, triggerable: Optional[bool] = None) -> List[Transition]:
        """
        Return the transitions leaving ``state``, optionally restricted to
        triggerable (True) or autonomous (False) ones.
        """
        return [
            t
            for t in self._transitions
            if t.source is state and (triggerable is None or t.triggerable == triggerable)
        ]

    def clone(self, current_state: Optional[State] = None) -> "StateMachine":
        """
        Shallow clone: the new machine shares this machine's states and
        transitions and has ``current_state`` installed as its current state.
        """
        clone = StateMachine(self._name)
        clone._states = dict(self._states)
        clone._transitions = list(self._transitions)
        clone.current_state = current_state
        return clone

    def freeze(self) -> None:
        """Make the machine read-only."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise AssemblyError(f"State machine '{self._name}' is frozen.")

    def __repr__(self) -> str:
        current = self._current_state.name if self._current_state else None
        return f"StateMachine({self._name!r}, states={list(self._states)}, current={current!r})"
