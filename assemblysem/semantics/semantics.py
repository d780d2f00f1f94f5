# assemblysem/semantics/semantics.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Iterable, Iterator, List, Set, Union

from assemblysem.core.errors import StructuralMismatchError
from assemblysem.semantics.configuration import Configuration

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly


def _assembly_id_of(assembly: Union["Assembly", str]) -> str:
    return assembly if isinstance(assembly, str) else assembly.assembly_id


class Semantics:
    """
    A set of configurations of one assembly, with the boolean lattice
    operations over that assembly's configuration universe.

    ``bottom`` is the empty set and ``top`` the set of every configuration of
    the template. ``AND`` is intersection and ``OR`` is union; both return new
    values and require operands of the same assembly.

    Iteration and printing follow the configurations' machine/state order, so
    equal semantics always print identically.
    """

    def __init__(self, assembly_id: str, configurations: Iterable[Configuration] = ()) -> None:
        self._assembly_id = assembly_id
        self._configurations: Set[Configuration] = set()
        for configuration in configurations:
            self.add_configuration(configuration)

    @classmethod
    def bottom(cls, assembly: Union["Assembly", str]) -> "Semantics":
        """The empty semantics of ``assembly`` (an Assembly or its id)."""
        return cls(_assembly_id_of(assembly))

    @classmethod
    def top(cls, template: "Assembly") -> "Semantics":
        """
        The semantics containing every configuration of ``template``. The
        universe is enumerated afresh on each call.
        """
        from assemblysem.runtime.generator import AssemblyGenerator

        return AssemblyGenerator().universe(template)

    @property
    def assembly_id(self) -> str:
        return self._assembly_id

    @property
    def configurations(self) -> FrozenSet[Configuration]:
        return frozenset(self._configurations)

    def add_configuration(self, configuration: Configuration) -> None:
        """
        Insert a configuration; inserting one already present is a no-op.

        :raises StructuralMismatchError: If it belongs to another assembly.
        """
        if configuration.assembly_id != self._assembly_id:
            raise StructuralMismatchError(
                f"Configuration {configuration} belongs to assembly '{configuration.assembly_id}', "
                f"not '{self._assembly_id}'."
            )
        self._configurations.add(configuration)

    def AND(self, other: "Semantics") -> "Semantics":
        """Intersection."""
        self._check_compatible(other)
        return Semantics(self._assembly_id, self._configurations & other._configurations)

    def OR(self, other: "Semantics") -> "Semantics":
        """Union."""
        self._check_compatible(other)
        return Semantics(self._assembly_id, self._configurations | other._configurations)

    def complement(self, template: "Assembly") -> "Semantics":
        """Every configuration of ``template`` not in this semantics."""
        universe = Semantics.top(template)
        self._check_compatible(universe)
        return Semantics(self._assembly_id, universe._configurations - self._configurations)

    __and__ = AND
    __or__ = OR

    def _check_compatible(self, other: "Semantics") -> None:
        if not isinstance(other, Semantics):
            raise TypeError(f"Expected Semantics, got {type(other).__name__}")
        if other._assembly_id != self._assembly_id:
            raise StructuralMismatchError(
                f"Cannot combine semantics of assembly '{self._assembly_id}' with '{other._assembly_id}'."
            )

    def sorted_configurations(self) -> List[Configuration]:
        return sorted(self._configurations, key=Configuration.sort_key)

    def is_empty(self) -> bool:
        return not self._configurations

    def __iter__(self) -> Iterator[Configuration]:
        return iter(self.sorted_configurations())

    def __len__(self) -> int:
        return len(self._configurations)

    def __contains__(self, configuration: object) -> bool:
        return configuration in self._configurations

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Semantics):
            return NotImplemented
        return self._assembly_id == other._assembly_id and self._configurations == other._configurations

    __hash__ = None

    def __str__(self) -> str:
        return "{" + ", ".join(str(c) for c in self) + "}"

    def __repr__(self) -> str:
        return f"Semantics({self._assembly_id!r}, {self})"
