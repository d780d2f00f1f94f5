# assemblysem/semantics/configuration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from assemblysem.core.errors import ValidationError
from assemblysem.core.propositions import And, BasicStateProposition

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly


@dataclass(frozen=True)
class Configuration:
    """
    One point of an assembly's joint-state space: a (machine, state) pair per
    machine, kept in the assembly's canonical machine order.

    A configuration extracted from an assembly with unset machines lacks
    their pairs; such partial configurations are valid values.
    """

    assembly_id: str
    pairs: Tuple[BasicStateProposition, ...] = ()

    def __post_init__(self) -> None:
        machine_ids = [p.machine_id for p in self.pairs]
        if len(set(machine_ids)) != len(machine_ids):
            raise ValidationError(f"Configuration has more than one state for a machine: {machine_ids}")

    @classmethod
    def from_basic_state_propositions(
        cls, assembly_id: str, propositions: Iterable[BasicStateProposition]
    ) -> "Configuration":
        return cls(assembly_id, tuple(propositions))

    @property
    def machine_ids(self) -> Tuple[str, ...]:
        return tuple(p.machine_id for p in self.pairs)

    def state_of(self, machine_id: str) -> Optional[str]:
        """State name recorded for ``machine_id``, or None if absent."""
        for p in self.pairs:
            if p.machine_id == machine_id:
                return p.state_name
        return None

    def is_partial_for(self, assembly: "Assembly") -> bool:
        """True if some machine of ``assembly`` has no pair here."""
        return bool(set(assembly.machine_ids) - set(self.machine_ids))

    def as_proposition(self) -> And:
        """The conjunction of this configuration's atoms."""
        return And(*self.pairs)

    def sort_key(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((p.machine_id, p.state_name) for p in self.pairs)

    def __str__(self) -> str:
        return "(" + ",".join(str(p) for p in self.pairs) + ")"
