# assemblysem/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass

from assemblysem.core.base import StateBase


@dataclass(frozen=True, eq=False)
class State(StateBase):
    """
    Represents a state of a state machine. States carry only a name and are
    never mutated after construction, so the same State object is shared by
    every clone of the machine that owns it.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("State name must be a non-empty string.")

    def __repr__(self) -> str:
        return f"State({self.name!r})"

    def __str__(self) -> str:
        return self.name
