# assemblysem/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class AssemblyError(Exception):
    """
    Base exception class for errors within the assembly semantics library.
    """


class StateNotFoundError(AssemblyError):
    """
    Raised when a state is not a member of the state machine it is used with.
    """


class ValidationError(AssemblyError):
    """
    Raised when a state machine or assembly is structurally malformed.
    """


class StructuralMismatchError(AssemblyError):
    """
    Raised when semantics belonging to different assemblies are combined.
    """


class UnassignedStateError(AssemblyError):
    """
    Raised when a machine is absent from an assembly, or has no current state
    where one is required.
    """
