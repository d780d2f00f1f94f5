# assemblysem/semantics/exit_zone.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set

from assemblysem.core.propositions import BasicStateProposition
from assemblysem.core.state_machine import StateMachine
from assemblysem.core.states import State


@dataclass(frozen=True)
class ExitZone:
    """
    A condition under which a state is expected to be left on its own: the
    moment another machine reaches ``target``.
    """

    target: BasicStateProposition

    def __str__(self) -> str:
        return f"exit({self.target})"


def _autonomous_guards(machine: StateMachine, state: State) -> Set[BasicStateProposition]:
    # Only atomic guards of autonomous transitions count as covering an exit zone.
    return {
        t.guard
        for t in machine.transitions_from(state, triggerable=False)
        if isinstance(t.guard, BasicStateProposition)
    }


def covered_exit_zones(machine: StateMachine, state: State, exit_zones: Iterable[ExitZone]) -> List[ExitZone]:
    """Exit zones handled by an autonomous transition leaving ``state``."""
    guards = _autonomous_guards(machine, state)
    return [zone for zone in exit_zones if zone.target in guards]


def uncovered_exit_zones(machine: StateMachine, state: State, exit_zones: Iterable[ExitZone]) -> List[ExitZone]:
    """Exit zones no autonomous transition leaving ``state`` handles."""
    guards = _autonomous_guards(machine, state)
    return [zone for zone in exit_zones if zone.target not in guards]
