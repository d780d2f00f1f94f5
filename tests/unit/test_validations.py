# tests/unit/test_validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest


def test_validator_accepts_template(two_machine_template):
    from assemblysem.core.validations import Validator

    Validator().validate_assembly(two_machine_template)


def test_validator_rejects_foreign_current_state(machine_factory):
    from assemblysem.core.errors import ValidationError
    from assemblysem.core.states import State
    from assemblysem.core.validations import Validator

    m = machine_factory("m", "a")
    # Bypass the setter to simulate a corrupted machine.
    m._current_state = State("ghost")
    with pytest.raises(ValidationError):
        Validator().validate_state_machine(m)


def test_validate_formula_unknown_machine(two_machine_template):
    from assemblysem.core.errors import UnassignedStateError
    from assemblysem.core.propositions import And, BasicStateProposition
    from assemblysem.core.validations import Validator

    formula = And(BasicStateProposition("M1", "A"), BasicStateProposition("M7", "Q"))
    with pytest.raises(UnassignedStateError):
        Validator().validate_formula(formula, two_machine_template)


def test_validate_formula_warns_on_unknown_state(two_machine_template, caplog):
    from assemblysem.core.propositions import BasicStateProposition
    from assemblysem.core.validations import Validator

    with caplog.at_level(logging.WARNING, logger="assemblysem.core.validations"):
        Validator().validate_formula(BasicStateProposition("M1", "Q"), two_machine_template)
    assert "does not have" in caplog.text
