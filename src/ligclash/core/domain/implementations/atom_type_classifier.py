#!/usr/bin/env python3
# src/ligclash/core/domain/implementations/atom_type_classifier.py

"""
Distance-based inference of ligand hydrogen-bond roles.

Structure files rarely carry a bond table or hydrogens for ligands, so the
donor/acceptor character of each ligand nitrogen and oxygen is inferred from
the other ligand atoms lying within bonding distance, and from how the
length of a single bond compares with reference bond lengths.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from ...utils.geometry import coordinate_array, squared_distance_matrix
from ..exceptions import EmptyInputError
from ..models.atom import HALIDES, AtomRecord
from ..models.atom_type import AtomType

logger = logging.getLogger(__name__)

UPPER_LIMIT = 1.8  # upper bond length for N- and O-containing bonds
MAX_RECORDED_BONDS = 3

# Reference bond lengths (Angstrom)
C_O_1 = 1.216
C_O_2 = 1.413
CO_CARB = 1.250
N2_O2 = 1.396
NO3_MINUS = 1.239
C_SP3_N_3 = 1.482
C_AR_SP3_N_4_2 = 1.474

TYPICAL_NEIGHBORS = frozenset({"C", "N", "O", "P", "F", "CL", "I", "BR"})


@dataclass(frozen=True)
class Neighborhood:
    """Ligand atoms within bonding distance of one atom."""

    atom: AtomRecord
    bonds: Tuple[Tuple[str, float], ...]
    contains_hydrogen: bool
    strange_atoms: bool
    excess_bonds: int = 0

    @property
    def symbol(self) -> str:
        return self.atom.symbol

    @property
    def num_bonds(self) -> int:
        return len(self.bonds)

    @property
    def first_distance(self) -> float:
        return self.bonds[0][1]

    @property
    def has_halide_neighbor(self) -> bool:
        return any(symbol in HALIDES for symbol, _ in self.bonds)

    def single_bond_to(self, *symbols: str) -> bool:
        return self.num_bonds == 1 and self.bonds[0][0] in symbols


Outcome = Union[AtomType, Callable[[Neighborhood], AtomType]]


class Rule(NamedTuple):
    name: str
    applies: Callable[[Neighborhood], bool]
    outcome: Outcome
    warning: Optional[str] = None


def _closer_to(reference: float, alternative: float, near: AtomType, far: AtomType):
    """Pick ``near`` when the bond length is closer to ``reference``."""

    def decide(hood: Neighborhood) -> AtomType:
        d = hood.first_distance
        return near if abs(reference - d) < abs(d - alternative) else far

    return decide


RULES: Tuple[Rule, ...] = (
    Rule("halide neighbor", lambda h: h.has_halide_neighbor, AtomType.ACCEPTOR),
    Rule(
        "saturated nitrogen",
        lambda h: h.symbol == "N" and h.num_bonds == 3 and not h.contains_hydrogen,
        AtomType.NONE,
    ),
    Rule(
        "saturated oxygen",
        lambda h: h.symbol == "O" and h.num_bonds == 2 and not h.contains_hydrogen,
        AtomType.NONE,
    ),
    Rule(
        "isolated atom",
        lambda h: h.num_bonds == 0,
        AtomType.NONE,
        warning="Isolated atom %s: no ligand atom within %.2f A",
    ),
    Rule("atypical neighbor", lambda h: h.strange_atoms, AtomType.NONE),
    Rule(
        "C-O",
        lambda h: h.symbol == "O" and h.single_bond_to("C"),
        _closer_to(C_O_2, CO_CARB, AtomType.DONOR, AtomType.ACCEPTOR),
    ),
    Rule("O-O", lambda h: h.symbol == "O" and h.single_bond_to("O"), AtomType.NONE),
    Rule(
        "N-O",
        lambda h: h.symbol == "O" and h.single_bond_to("N"),
        _closer_to(N2_O2, NO3_MINUS, AtomType.DONOR, AtomType.ACCEPTOR),
    ),
    Rule("phosphate", lambda h: h.symbol == "O" and h.single_bond_to("P"), AtomType.ACCEPTOR),
    Rule("multiply bonded oxygen", lambda h: h.symbol == "O" and h.num_bonds > 1, AtomType.NONE),
    Rule("two-coordinate nitrogen", lambda h: h.symbol == "N" and h.num_bonds == 2, AtomType.BOTH),
    Rule(
        "C-N",
        lambda h: h.symbol == "N" and h.single_bond_to("C"),
        _closer_to(C_SP3_N_3, C_AR_SP3_N_4_2, AtomType.DONOR, AtomType.BOTH),
    ),
    Rule("N-O or N-N", lambda h: h.symbol == "N" and h.single_bond_to("O", "N"), AtomType.NONE),
)


def describe_atom(atom: AtomRecord) -> str:
    name = atom.atom_name.strip() or atom.symbol
    return f"{name} {atom.residue_name.strip()} {atom.chain_id}#{atom.serial}"


class GeometricAtomTypeClassifier:
    """Assigns an AtomType to each ligand atom by evaluating RULES in order."""

    def __init__(self, upper_limit: float = UPPER_LIMIT, rules: Sequence[Rule] = RULES):
        self._upper_limit = upper_limit
        self._rules = tuple(rules)

    def classify(self, ligand_atoms: Sequence[AtomRecord]) -> List[AtomType]:
        """
        Classify every ligand atom.

        Args:
            ligand_atoms: Non-empty sequence of ligand atoms

        Returns:
            AtomType per atom, in the order of ``ligand_atoms``

        Raises:
            EmptyInputError: If no ligand atoms were given
        """
        if len(ligand_atoms) == 0:
            raise EmptyInputError("Cannot classify an empty ligand")

        coords = coordinate_array(ligand_atoms)
        distances = np.sqrt(squared_distance_matrix(coords, coords))
        return [
            self._classify_atom(index, ligand_atoms, distances[index])
            for index in range(len(ligand_atoms))
        ]

    def neighborhood(
        self, index: int, ligand_atoms: Sequence[AtomRecord], distances: np.ndarray
    ) -> Neighborhood:
        """Collect up to three bonded neighbors, nearest first."""
        candidates = sorted(
            (float(distances[other]), ligand_atoms[other].symbol)
            for other in range(len(ligand_atoms))
            if other != index and distances[other] < self._upper_limit
        )
        recorded = candidates[:MAX_RECORDED_BONDS]
        return Neighborhood(
            atom=ligand_atoms[index],
            bonds=tuple((symbol, dist) for dist, symbol in recorded),
            contains_hydrogen=any(symbol == "H" for _, symbol in recorded),
            strange_atoms=any(symbol not in TYPICAL_NEIGHBORS for _, symbol in recorded),
            excess_bonds=len(candidates) - len(recorded),
        )

    def _classify_atom(
        self, index: int, ligand_atoms: Sequence[AtomRecord], distances: np.ndarray
    ) -> AtomType:
        atom = ligand_atoms[index]
        if atom.is_carbon:
            return AtomType.NONE
        if atom.symbol not in ("N", "O"):
            return AtomType.NONE

        hood = self.neighborhood(index, ligand_atoms, distances)
        if hood.excess_bonds:
            logger.warning(
                "Too many bonds for %s: %d atoms within %.2f A, keeping the nearest %d",
                describe_atom(atom),
                hood.num_bonds + hood.excess_bonds,
                self._upper_limit,
                MAX_RECORDED_BONDS,
            )

        for rule in self._rules:
            if rule.applies(hood):
                if rule.warning:
                    logger.warning(rule.warning, describe_atom(atom), self._upper_limit)
                outcome = rule.outcome
                return outcome if isinstance(outcome, AtomType) else outcome(hood)

        logger.warning(
            "Unexpected neighborhood for %s: bonds %s", describe_atom(atom), hood.bonds
        )
        return AtomType.NONE


def classify_ligand_atoms(ligand_atoms: Sequence[AtomRecord]) -> List[AtomType]:
    """Infer the hydrogen-bond role of each ligand atom from geometry alone."""
    return GeometricAtomTypeClassifier().classify(ligand_atoms)
