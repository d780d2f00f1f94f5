"""assemblysem: extensional semantics of assemblies of finite state machines

This package enumerates every joint configuration of a set of independent
state machines and computes, for a propositional formula over their current
states, the set of configurations in which it holds.

Responsibilities:
    - Assembly, state machine, state and transition data model
    - Propositional formulas over "machine M is in state S" atoms
    - Exhaustive enumeration of concrete assemblies from a template
    - Boolean lattice of configuration sets (top, bottom, AND, OR)

Interactions:
    - Editors and dialogs supply templates and parsed formulas
    - Editors consume Semantics values and their string forms
    - Logging system for diagnostics

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at AssemblyError
        - Failures propagate to the caller; an empty result is never an error

    Logging:
        - Module-level loggers, no handlers configured by the library

    Performance:
        - Enumeration is exhaustive; cost is the product of state counts
"""

from .core import (
    And,
    Assembly,
    AssemblyError,
    BasicStateProposition,
    FalseProposition,
    Iff,
    Implies,
    Not,
    Or,
    State,
    StateMachine,
    StateNotFoundError,
    StructuralMismatchError,
    Transition,
    TrueProposition,
    UnassignedStateError,
    ValidationError,
)
from .runtime import AssemblyGenerator, evaluate_formula, extract_configuration, generate_all_assemblies
from .semantics import Configuration, Semantics

__version__ = "0.1.0"

__all__ = [
    "And",
    "Assembly",
    "AssemblyError",
    "AssemblyGenerator",
    "BasicStateProposition",
    "Configuration",
    "FalseProposition",
    "Iff",
    "Implies",
    "Not",
    "Or",
    "Semantics",
    "State",
    "StateMachine",
    "StateNotFoundError",
    "StructuralMismatchError",
    "Transition",
    "TrueProposition",
    "UnassignedStateError",
    "ValidationError",
    "evaluate_formula",
    "extract_configuration",
    "generate_all_assemblies",
]
