# assemblysem/core/assembly.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from assemblysem.core.errors import AssemblyError, UnassignedStateError, ValidationError
from assemblysem.core.state_machine import StateMachine


class Assembly:
    """
    A named composition of independent state machines, each registered under a
    unique machine id.

    An assembly is either a template (current states unset or irrelevant) or a
    concrete instance in which every machine has a current state. The order in
    which machines are added is stored explicitly in ``machine_ids`` and is the
    canonical order used for enumeration and for printing configurations.
    """

    def __init__(self, assembly_id: str, machines: Optional[Mapping[str, StateMachine]] = None) -> None:
        """
        :param assembly_id: Identifier shared by the template and every
            instance generated from it.
        :param machines: Optional initial machines, added in mapping order.
        """
        self._assembly_id = assembly_id
        self._machines: Dict[str, StateMachine] = {}
        self._machine_ids: Tuple[str, ...] = ()
        self._frozen = False
        for machine_id, machine in (machines or {}).items():
            self.add_state_machine(machine_id, machine)

    @property
    def assembly_id(self) -> str:
        return self._assembly_id

    @property
    def machine_ids(self) -> Tuple[str, ...]:
        """Machine ids in canonical order."""
        return self._machine_ids

    @property
    def state_machines(self) -> Mapping[str, StateMachine]:
        """Read-only view of the machine map, in canonical order."""
        return MappingProxyType(self._machines)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_concrete(self) -> bool:
        """True when every machine has a current state."""
        return all(m.current_state is not None for m in self._machines.values())

    def add_state_machine(self, machine_id: str, machine: StateMachine) -> None:
        """
        Register a machine under ``machine_id``.

        :raises ValidationError: If the id is already taken or the machine is
            not a StateMachine.
        """
        if self._frozen:
            raise AssemblyError(f"Assembly '{self._assembly_id}' is frozen.")
        if not isinstance(machine, StateMachine):
            raise ValidationError(f"Machine '{machine_id}' must be a StateMachine, got {type(machine).__name__}.")
        if machine_id in self._machines:
            raise ValidationError(f"Assembly '{self._assembly_id}' already has a machine '{machine_id}'.")
        self._machines[machine_id] = machine
        self._machine_ids = self._machine_ids + (machine_id,)

    def get_state_machine(self, machine_id: str) -> StateMachine:
        """
        :raises UnassignedStateError: If no machine is registered under the id.
        """
        try:
            return self._machines[machine_id]
        except KeyError:
            raise UnassignedStateError(
                f"Machine '{machine_id}' is not part of assembly '{self._assembly_id}'."
            ) from None

    def __contains__(self, machine_id: object) -> bool:
        return machine_id in self._machines

    def __len__(self) -> int:
        return len(self._machines)

    def assignment(self) -> Tuple[Tuple[str, Optional[str]], ...]:
        """
        The current-state assignment as ``(machine_id, state_name)`` pairs in
        canonical order; ``state_name`` is None for unset machines.
        """
        return tuple(
            (mid, m.current_state.name if m.current_state is not None else None)
            for mid, m in self._machines.items()
        )

    def freeze(self) -> None:
        """Freeze the assembly and every machine in it."""
        for machine in self._machines.values():
            machine.freeze()
        self._frozen = True

    def __repr__(self) -> str:
        return f"Assembly({self._assembly_id!r}, {dict(self.assignment())})"
