# assemblysem/runtime/generator.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Exhaustive enumeration of an assembly's joint configurations.

The generator expands a template assembly into every concrete assembly (one
per combination of current states) and evaluates formulas over that space,
collecting the satisfying configurations into a Semantics value. The work is
intentionally brute force: time and space are the product of the machines'
state counts, and no formula-directed pruning is attempted.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from assemblysem.core.assembly import Assembly
from assemblysem.core.errors import UnassignedStateError
from assemblysem.core.propositions import BasicStateProposition, Evaluable
from assemblysem.core.states import State
from assemblysem.core.validations import Validator
from assemblysem.semantics.configuration import Configuration
from assemblysem.semantics.semantics import Semantics

logger = logging.getLogger(__name__)


class AssemblyGenerator:
    """
    Enumerates concrete assemblies from a template and computes formula
    semantics over them.

    Hooks are optional objects exposing any of ``on_assembly(assembly)``,
    ``on_configuration(configuration)`` and ``on_error(error)``.
    """

    def __init__(self, validator: Optional[Validator] = None, hooks: Optional[List] = None) -> None:
        """
        :param validator: Validator applied to templates and formulas.
        :param hooks: Optional list of hook objects.
        """
        self._validator = validator or Validator()
        self._hooks = hooks or []

    def generate_all_assemblies(self, template: Assembly) -> List[Assembly]:
        """
        Return one concrete assembly per combination of current states.

        The result has exactly the product of the machines' state counts as
        its length: one trivial assembly for a template without machines, and
        none at all if any machine has no states.
        """
        assemblies = list(self.iter_assemblies(template))
        logger.debug("Generated %d assemblies for '%s'", len(assemblies), template.assembly_id)
        return assemblies

    def iter_assemblies(self, template: Assembly) -> Iterator[Assembly]:
        """Lazily yield the assemblies of :meth:`generate_all_assemblies`."""
        try:
            yield from self._enumerate(template)
        except Exception as e:
            self._notify_error(e)
            raise

    def _enumerate(self, template: Assembly) -> Iterator[Assembly]:
        self._validator.validate_assembly(template)
        # The machine order is fixed here and defines the configuration order.
        machine_ids = template.machine_ids
        state_lists = [template.state_machines[mid].states for mid in machine_ids]
        for chosen in _assignments(state_lists, 0, ()):
            assembly = _clone_with_assignment(template, machine_ids, chosen)
            self._notify_assembly(assembly)
            yield assembly

    def evaluate(self, template: Assembly, formula: Evaluable) -> Semantics:
        """
        Return the semantics of ``formula``: the configurations of every
        generated assembly on which it evaluates to True.

        :raises UnassignedStateError: If the formula references a machine the
            template does not have.
        """
        try:
            self._validator.validate_formula(formula, template)
            result = Semantics(template.assembly_id)
            for assembly in self._enumerate(template):
                if formula.evaluate(assembly):
                    configuration = self.extract_configuration(assembly)
                    result.add_configuration(configuration)
                    self._notify_configuration(configuration)
        except Exception as e:
            self._notify_error(e)
            raise
        logger.debug("Formula %s holds in %d configurations of '%s'", formula, len(result), template.assembly_id)
        return result

    def universe(self, template: Assembly) -> Semantics:
        """Every configuration of ``template``."""
        result = Semantics(template.assembly_id)
        for assembly in self.iter_assemblies(template):
            result.add_configuration(self.extract_configuration(assembly))
        return result

    @staticmethod
    def extract_configuration(assembly: Assembly, total: bool = False) -> Configuration:
        """
        Convert an assembly's current states into a Configuration, in the
        assembly's machine order. Machines without a current state contribute
        no pair, unless ``total`` is set, in which case they are an error.

        :raises UnassignedStateError: If ``total`` and a machine is unset.
        """
        propositions = []
        for machine_id in assembly.machine_ids:
            current = assembly.state_machines[machine_id].current_state
            if current is not None:
                propositions.append(BasicStateProposition(machine_id, current.name))
            elif total:
                raise UnassignedStateError(
                    f"Machine '{machine_id}' of assembly '{assembly.assembly_id}' has no current state."
                )
        return Configuration.from_basic_state_propositions(assembly.assembly_id, propositions)

    def _notify_assembly(self, assembly: Assembly) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_assembly"):
                hook.on_assembly(assembly)

    def _notify_configuration(self, configuration: Configuration) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_configuration"):
                hook.on_configuration(configuration)

    def _notify_error(self, error: Exception) -> None:
        for hook in self._hooks:
            if hasattr(hook, "on_error"):
                hook.on_error(error)


def _assignments(
    state_lists: Sequence[Sequence[State]], index: int, chosen: Tuple[State, ...]
) -> Iterator[Tuple[State, ...]]:
    """
    Depth-first backtracking over the machines. ``chosen`` holds the states
    picked for machines ``0..index-1``; each branch extends its own tuple, so
    nothing needs undoing on return.
    """
    if index == len(state_lists):
        yield chosen
        return
    for state in state_lists[index]:
        yield from _assignments(state_lists, index + 1, chosen + (state,))


def _clone_with_assignment(template: Assembly, machine_ids: Sequence[str], chosen: Sequence[State]) -> Assembly:
    assembly = Assembly(template.assembly_id)
    for machine_id, state in zip(machine_ids, chosen):
        assembly.add_state_machine(machine_id, template.state_machines[machine_id].clone(state))
    assembly.freeze()
    return assembly


_default_generator = AssemblyGenerator()


def generate_all_assemblies(template: Assembly) -> List[Assembly]:
    return _default_generator.generate_all_assemblies(template)


def evaluate_formula(template: Assembly, formula: Evaluable) -> Semantics:
    return _default_generator.evaluate(template, formula)


def extract_configuration(assembly: Assembly, total: bool = False) -> Configuration:
    return AssemblyGenerator.extract_configuration(assembly, total=total)
