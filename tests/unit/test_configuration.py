# tests/unit/test_configuration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def _conf(assembly_id, *pairs):
    from assemblysem.core.propositions import BasicStateProposition
    from assemblysem.semantics.configuration import Configuration

    return Configuration.from_basic_state_propositions(assembly_id, [BasicStateProposition(m, s) for m, s in pairs])


def test_canonical_string():
    c = _conf("plant", ("M1", "A"), ("M2", "X"))
    assert str(c) == "(M1.A,M2.X)"
    assert str(_conf("plant")) == "()"


def test_equality_and_hash():
    assert _conf("plant", ("M1", "A")) == _conf("plant", ("M1", "A"))
    assert hash(_conf("plant", ("M1", "A"))) == hash(_conf("plant", ("M1", "A")))
    assert _conf("plant", ("M1", "A")) != _conf("other", ("M1", "A"))


def test_one_pair_per_machine():
    from assemblysem.core.errors import ValidationError

    with pytest.raises(ValidationError):
        _conf("plant", ("M1", "A"), ("M1", "B"))


def test_accessors(two_machine_template):
    c = _conf("plant", ("M1", "A"), ("M2", "X"))
    assert c.machine_ids == ("M1", "M2")
    assert c.state_of("M2") == "X"
    assert c.state_of("M3") is None
    assert not c.is_partial_for(two_machine_template)
    assert _conf("plant", ("M1", "A")).is_partial_for(two_machine_template)


def test_as_proposition(two_machine_template):
    from assemblysem.core.propositions import And, BasicStateProposition

    c = _conf("plant", ("M1", "A"), ("M2", "X"))
    assert c.as_proposition() == And(BasicStateProposition("M1", "A"), BasicStateProposition("M2", "X"))
