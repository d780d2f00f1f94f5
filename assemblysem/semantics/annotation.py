# assemblysem/semantics/annotation.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Set

from assemblysem.semantics.configuration import Configuration
from assemblysem.semantics.exit_zone import ExitZone, covered_exit_zones
from assemblysem.semantics.semantics import Semantics

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly
    from assemblysem.core.state_machine import StateMachine
    from assemblysem.core.states import State


@dataclass(frozen=True)
class ConfigurationStatus:
    configuration: Configuration
    satisfies_constraints: bool


@dataclass(frozen=True)
class ExitZoneStatus:
    exit_zone: ExitZone
    covered: bool


@dataclass
class StateSemantics:
    """
    The semantics attached to one state of an editor machine: where the state
    actually holds, where it is allowed to hold (its constraints), and the
    exit zones it should react to.
    """

    state_semantics: Semantics
    constraints_semantics: Semantics
    reactive_semantics: Set[ExitZone] = field(default_factory=set)

    @classmethod
    def for_assembly(cls, assembly: "Assembly") -> "StateSemantics":
        """Empty state semantics and bottom constraints for ``assembly``."""
        return cls(Semantics(assembly.assembly_id), Semantics.bottom(assembly))

    def classify(self) -> List[ConfigurationStatus]:
        """
        Each configuration of the state semantics, flagged by whether the
        constraints contain it. Membership compares canonical string forms.
        """
        allowed = {str(c) for c in self.constraints_semantics}
        return [ConfigurationStatus(c, str(c) in allowed) for c in self.state_semantics]

    def violations(self) -> List[Configuration]:
        return [s.configuration for s in self.classify() if not s.satisfies_constraints]

    def exit_zone_coverage(self, machine: "StateMachine", state: "State") -> List[ExitZoneStatus]:
        """Each reactive exit zone, flagged by whether ``state`` handles it."""
        zones = sorted(self.reactive_semantics, key=str)
        covered = set(covered_exit_zones(machine, state, zones))
        return [ExitZoneStatus(z, z in covered) for z in zones]

