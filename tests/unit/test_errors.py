# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_error_hierarchy(error_classes):
    AssemblyError, *subclasses = error_classes
    for cls in subclasses:
        assert issubclass(cls, AssemblyError)


def test_exceptions_instantiation(error_classes):
    _, StateNotFoundError, StructuralMismatchError, UnassignedStateError, ValidationError = error_classes
    e = StateNotFoundError("Missing state")
    assert str(e) == "Missing state"
    e = StructuralMismatchError("Different assemblies")
    assert str(e) == "Different assemblies"
    e = UnassignedStateError("No current state")
    assert str(e) == "No current state"
    e = ValidationError("Invalid config")
    assert str(e) == "Invalid config"
