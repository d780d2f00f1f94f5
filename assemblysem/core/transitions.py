# assemblysem/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from assemblysem.core.states import State

if TYPE_CHECKING:
    from assemblysem.core.propositions import Proposition


class Transition:
    """
    Defines a possible path from one state to another, guarded by a
    proposition over the assembly the owning machine belongs to. A triggerable
    transition fires on an external trigger; a non-triggerable (autonomous)
    transition fires on its own once its guard holds.

    Transitions are immutable and shared by every clone of their machine.
    """

    __slots__ = ("_source", "_target", "_guard", "_triggerable")

    def __init__(
        self,
        source: State,
        target: State,
        guard: Optional["Proposition"] = None,
        triggerable: bool = False,
    ) -> None:
        """
        :param source: The origin State of this transition.
        :param target: The destination State of this transition.
        :param guard: Proposition controlling when the transition may fire.
        :param triggerable: True for externally triggered transitions.
        """
        if source is None or target is None:
            raise ValueError("Transition must have a valid source and target state.")
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_guard", guard)
        object.__setattr__(self, "_triggerable", bool(triggerable))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Transition is immutable")

    @property
    def source(self) -> State:
        """
        The source state of the transition.
        """
        return self._source

    @property
    def target(self) -> State:
        """
        The target state of the transition.
        """
        return self._target

    @property
    def guard(self) -> Optional["Proposition"]:
        """The guard proposition, or None for an unguarded transition."""
        return self._guard

    @property
    def triggerable(self) -> bool:
        """Whether the transition waits for an external trigger."""
        return self._triggerable

    @property
    def autonomous(self) -> bool:
        return not self._triggerable

    def __repr__(self) -> str:
        kind = "triggerable" if self._triggerable else "autonomous"
        return f"Transition({self._source.name} -> {self._target.name}, guard={self._guard}, {kind})"
