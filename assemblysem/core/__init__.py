"""
Core package providing the assembly data model and formula language.

Architecture:
- States and transitions are immutable and shared between clones
- State machines own states, transitions and a current-state slot
- Assemblies compose machines under unique ids in a canonical order
- Propositions are a closed set of variants with one evaluator
"""

# Import order matters to avoid circular dependencies
from .errors import (
    AssemblyError,
    StateNotFoundError,
    StructuralMismatchError,
    UnassignedStateError,
    ValidationError,
)
from .states import State
from .propositions import (
    And,
    BasicStateProposition,
    Evaluable,
    FalseProposition,
    Iff,
    Implies,
    Not,
    Or,
    Proposition,
    TrueProposition,
    evaluate,
)
from .transitions import Transition
from .state_machine import StateMachine
from .assembly import Assembly
from .validations import Validator

__all__ = [
    # Errors
    "AssemblyError",
    "StateNotFoundError",
    "StructuralMismatchError",
    "UnassignedStateError",
    "ValidationError",
    # Model
    "State",
    "Transition",
    "StateMachine",
    "Assembly",
    "Validator",
    # Propositions
    "And",
    "BasicStateProposition",
    "Evaluable",
    "FalseProposition",
    "Iff",
    "Implies",
    "Not",
    "Or",
    "Proposition",
    "TrueProposition",
    "evaluate",
]
