# assemblysem/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from assemblysem.core.errors import UnassignedStateError, ValidationError
from assemblysem.core.propositions import atoms
from assemblysem.core.state_machine import StateMachine

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly
    from assemblysem.core.propositions import Proposition

logger = logging.getLogger(__name__)


class Validator:
    """
    Checks templates and formulas before the generator enumerates them, so
    malformed input fails before any assembly is produced.
    """

    def __init__(self) -> None:
        self._rules_engine = _ValidationRulesEngine()

    def validate_state_machine(self, machine: StateMachine) -> None:
        """
        Check the machine's states and transitions for consistency.

        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_machine(machine)

    def validate_assembly(self, assembly: "Assembly") -> None:
        """
        Check every machine of the assembly.

        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_assembly(assembly)

    def validate_formula(self, formula: "Proposition", assembly: "Assembly") -> None:
        """
        Check that every atom of the formula names a machine of the assembly.

        :raises UnassignedStateError: If an atom names an unknown machine.
        """
        self._rules_engine.validate_formula(formula, assembly)


class _ValidationRulesEngine:
    """
    Internal engine applying the default rules. Centralizes validation logic
    for easier maintenance.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_machine(self, machine: StateMachine) -> None:
        self._default_rules.validate_machine(machine)

    def validate_assembly(self, assembly: "Assembly") -> None:
        self._default_rules.validate_assembly(assembly)

    def validate_formula(self, formula: "Proposition", assembly: "Assembly") -> None:
        self._default_rules.validate_formula(formula, assembly)


class _DefaultValidationRules:
    """
    Built-in rules ensuring basic correctness of machines, assemblies and
    formulas.
    """

    @staticmethod
    def validate_machine(machine: StateMachine) -> None:
        """
        - Transitions reference states of the machine.
        - The current state, if set, is a state of the machine.
        """
        for t in machine.transitions:
            for state in (t.source, t.target):
                if not machine.has_state(state):
                    raise ValidationError(
                        f"State {state.name} is referenced in transition but not in machine '{machine.name}'."
                    )
        current = machine.current_state
        if current is not None and not machine.has_state(current):
            raise ValidationError(f"Current state {current.name} is not a state of machine '{machine.name}'.")

    @staticmethod
    def validate_assembly(assembly: "Assembly") -> None:
        if not isinstance(assembly.assembly_id, str):
            raise ValidationError("Assembly id must be a string.")
        for machine_id in assembly.machine_ids:
            machine = assembly.state_machines[machine_id]
            if not isinstance(machine, StateMachine):
                raise ValidationError(f"Machine '{machine_id}' is not a StateMachine.")
            _DefaultValidationRules.validate_machine(machine)
            if not machine.states:
                logger.debug("Machine '%s' has no states; the enumeration will be empty", machine_id)

    @staticmethod
    def validate_formula(formula: "Proposition", assembly: "Assembly") -> None:
        for atom in atoms(formula):
            if atom.machine_id not in assembly:
                raise UnassignedStateError(
                    f"Formula references machine '{atom.machine_id}', "
                    f"which is not part of assembly '{assembly.assembly_id}'."
                )
            machine = assembly.state_machines[atom.machine_id]
            if not any(s.name == atom.state_name for s in machine.states):
                logger.warning(
                    "Formula references state '%s', which machine '%s' does not have", atom.state_name, atom.machine_id
                )
