#!/usr/bin/env python3
# src/ligclash/core/domain/models/atom.py

"""
Domain models representing the atoms of one analyzed structure.
"""

from dataclasses import dataclass, field
from typing import Tuple

HALIDES = frozenset({"F", "CL", "BR", "I"})


def normalize_element(element: str) -> str:
    """Return the two-character, right-justified upper-case element code."""
    return element.strip().upper().rjust(2)


@dataclass(frozen=True)
class AtomRecord:
    """Represents a single atom read from a structure file."""

    coordinates: Tuple[float, float, float]
    element: str
    atom_name: str = ""
    residue_name: str = ""
    chain_id: str = "A"
    is_hetero: bool = False
    alt_loc: str = ""
    serial: int = 0

    def __post_init__(self):
        object.__setattr__(
            self, "coordinates", tuple(float(c) for c in self.coordinates)
        )
        object.__setattr__(self, "element", normalize_element(self.element))

    @property
    def symbol(self) -> str:
        """Element symbol without padding, e.g. ``"CL"``."""
        return self.element.strip()

    @property
    def is_carbon(self) -> bool:
        return self.element == " C"

    @property
    def is_hydrogen(self) -> bool:
        return self.element == " H"

    @property
    def is_halide(self) -> bool:
        return self.symbol in HALIDES


@dataclass(frozen=True)
class AtomSet:
    """Atoms of one structure, partitioned into ligand and protein roles."""

    ligand_atoms: Tuple[AtomRecord, ...] = field(default_factory=tuple)
    protein_atoms: Tuple[AtomRecord, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "ligand_atoms", tuple(self.ligand_atoms))
        object.__setattr__(self, "protein_atoms", tuple(self.protein_atoms))

    @property
    def ligand_atom_count(self) -> int:
        return len(self.ligand_atoms)
