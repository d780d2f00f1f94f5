# assemblysem/core/propositions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Propositional formulas over the current states of an assembly.

The formula language is a closed set of frozen variants. Atoms are
``BasicStateProposition`` ("machine M is in state S"); the connectives are
``And``, ``Or``, ``Not``, ``Implies`` and ``Iff``, plus the constants
``TrueProposition`` and ``FalseProposition``. All of them are evaluated by the
single recursive :func:`evaluate` function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple, Union, runtime_checkable

from assemblysem.core.errors import UnassignedStateError

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly
    from assemblysem.semantics.semantics import Semantics


@runtime_checkable
class Evaluable(Protocol):
    """
    Anything that can be evaluated against a concrete assembly.

    Runtime Invariants:
    - Evaluation is a pure function of the assembly's current states.
    - The assembly is never mutated.
    """

    def evaluate(self, assembly: "Assembly") -> bool: ...


class _Connectives:
    """Operator sugar shared by every variant."""

    def __and__(self, other: "Proposition") -> "And":
        return And(self, other)

    def __or__(self, other: "Proposition") -> "Or":
        return Or(self, other)

    def __invert__(self) -> "Not":
        return Not(self)

    def evaluate(self, assembly: "Assembly") -> bool:
        return evaluate(self, assembly)


@dataclass(frozen=True)
class BasicStateProposition(_Connectives):
    """Atomic formula: machine ``machine_id`` is currently in state ``state_name``."""

    machine_id: str
    state_name: str

    def to_semantics(self, template: "Assembly") -> "Semantics":
        """Semantics of this atom over every configuration of ``template``."""
        from assemblysem.runtime.generator import evaluate_formula

        return evaluate_formula(template, self)

    def __str__(self) -> str:
        return f"{self.machine_id}.{self.state_name}"


@dataclass(frozen=True, init=False)
class And(_Connectives):
    operands: Tuple["Proposition", ...]

    def __init__(self, *operands: "Proposition") -> None:
        object.__setattr__(self, "operands", tuple(operands))

    def __str__(self) -> str:
        return "(" + " & ".join(str(o) for o in self.operands) + ")" if self.operands else "true"


@dataclass(frozen=True, init=False)
class Or(_Connectives):
    operands: Tuple["Proposition", ...]

    def __init__(self, *operands: "Proposition") -> None:
        object.__setattr__(self, "operands", tuple(operands))

    def __str__(self) -> str:
        return "(" + " | ".join(str(o) for o in self.operands) + ")" if self.operands else "false"


@dataclass(frozen=True)
class Not(_Connectives):
    operand: "Proposition"

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True)
class Implies(_Connectives):
    antecedent: "Proposition"
    consequent: "Proposition"

    def __str__(self) -> str:
        return f"({self.antecedent} -> {self.consequent})"


@dataclass(frozen=True)
class Iff(_Connectives):
    left: "Proposition"
    right: "Proposition"

    def __str__(self) -> str:
        return f"({self.left} <-> {self.right})"


@dataclass(frozen=True)
class TrueProposition(_Connectives):
    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class FalseProposition(_Connectives):
    def __str__(self) -> str:
        return "false"


Proposition = Union[BasicStateProposition, And, Or, Not, Implies, Iff, TrueProposition, FalseProposition]


def evaluate(formula: Proposition, assembly: "Assembly") -> bool:
    """
    Evaluate ``formula`` against the current states of ``assembly``.

    :raises UnassignedStateError: If an atom names a machine that is not in the
        assembly, or a machine without a current state.
    :raises TypeError: If ``formula`` is not a proposition variant.
    """
    if isinstance(formula, BasicStateProposition):
        machine = assembly.get_state_machine(formula.machine_id)
        current = machine.current_state
        if current is None:
            raise UnassignedStateError(
                f"Machine '{formula.machine_id}' of assembly '{assembly.assembly_id}' has no current state."
            )
        return current.name == formula.state_name
    if isinstance(formula, And):
        return all(evaluate(o, assembly) for o in formula.operands)
    if isinstance(formula, Or):
        return any(evaluate(o, assembly) for o in formula.operands)
    if isinstance(formula, Not):
        return not evaluate(formula.operand, assembly)
    if isinstance(formula, Implies):
        return not evaluate(formula.antecedent, assembly) or evaluate(formula.consequent, assembly)
    if isinstance(formula, Iff):
        return evaluate(formula.left, assembly) == evaluate(formula.right, assembly)
    if isinstance(formula, TrueProposition):
        return True
    if isinstance(formula, FalseProposition):
        return False
    raise TypeError(f"Not a proposition: {formula!r}")


def atoms(formula: Proposition) -> Tuple[BasicStateProposition, ...]:
    """Atoms of ``formula`` in first-occurrence order, without repeats."""
    seen = {}

    def visit(f: Proposition) -> None:
        if isinstance(f, BasicStateProposition):
            seen.setdefault(f, None)
        elif isinstance(f, (And, Or)):
            for o in f.operands:
                visit(o)
        elif isinstance(f, Not):
            visit(f.operand)
        elif isinstance(f, Implies):
            visit(f.antecedent)
            visit(f.consequent)
        elif isinstance(f, Iff):
            visit(f.left)
            visit(f.right)

    visit(formula)
    return tuple(seen)
