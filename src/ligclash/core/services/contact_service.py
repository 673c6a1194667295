"""Service for counting protein-ligand contacts, H-bonds and VdW pairs."""

import logging
from typing import List, Sequence

import numpy as np

from ..domain.exceptions import ConfigurationError
from ..domain.implementations.atom_type_classifier import classify_ligand_atoms
from ..domain.implementations.protein_roles import is_hydrogen_bond
from ..domain.models.atom import AtomRecord
from ..domain.models.atom_type import AtomType
from ..domain.models.bounding_box import BoundingBox
from ..domain.models.clash_result import ContactResult
from ..utils.geometry import coordinate_array, squared_distance_matrix

logger = logging.getLogger(__name__)


def accumulate_contacts(
    protein_atoms: Sequence[AtomRecord],
    ligand_atoms: Sequence[AtomRecord],
    ligand_types: Sequence[AtomType],
    box: BoundingBox,
    cutoff: float,
    consume_failed_candidates: bool = False,
) -> ContactResult:
    """
    Count close protein-ligand pairs and classify them.

    Pairs are visited protein-major, ligand-minor. Every pair closer than
    ``cutoff`` is a contact. Carbon-carbon contacts count as VdW; any other
    contact is an H-bond candidate unless one of its atoms already takes part
    in an H-bond. Pairing is greedy, so each atom joins at most one H-bond.

    Args:
        protein_atoms: Protein atoms
        ligand_atoms: Ligand atoms
        ligand_types: Inferred role of each ligand atom
        box: Ligand bounding box
        cutoff: Contact distance in Angstrom
        consume_failed_candidates: Also retire both atoms after a candidate
            that is not an H-bond

    Returns:
        ContactResult with contact, H-bond and VdW counts

    Raises:
        ConfigurationError: If ``cutoff`` is not positive or ``ligand_types``
            does not match ``ligand_atoms``
    """
    if not cutoff > 0:
        raise ConfigurationError(f"Contact cutoff must be positive, got {cutoff}")
    if len(ligand_types) != len(ligand_atoms):
        raise ConfigurationError(
            f"Got {len(ligand_types)} atom types for {len(ligand_atoms)} ligand atoms"
        )

    nearby = [atom for atom in protein_atoms if box.contains(atom, margin=cutoff)]
    if not nearby or not ligand_atoms:
        return ContactResult(contacts=0, hbonds=0, vdw=0)

    squared = squared_distance_matrix(
        coordinate_array(nearby), coordinate_array(ligand_atoms)
    )
    pairs = np.argwhere(squared < cutoff * cutoff)

    vdw = 0
    hbonds = 0
    protein_bonded: List[bool] = [False] * len(nearby)
    ligand_bonded: List[bool] = [False] * len(ligand_atoms)
    for p_index, l_index in pairs:
        protein_atom = nearby[p_index]
        ligand_atom = ligand_atoms[l_index]
        if protein_atom.is_carbon and ligand_atom.is_carbon:
            vdw += 1
            continue
        if protein_bonded[p_index] or ligand_bonded[l_index]:
            continue
        bonded = is_hydrogen_bond(
            ligand_types[l_index], protein_atom.atom_name, protein_atom.residue_name
        )
        if bonded:
            hbonds += 1
        if bonded or consume_failed_candidates:
            protein_bonded[p_index] = True
            ligand_bonded[l_index] = True

    return ContactResult(contacts=len(pairs), hbonds=hbonds, vdw=vdw)


class ContactService:
    """Classifies ligand atoms and runs the contact pass."""

    def __init__(self, cutoff: float, consume_failed_candidates: bool = False):
        self._cutoff = cutoff
        self._consume_failed_candidates = consume_failed_candidates

    def count_contacts(
        self,
        protein_atoms: Sequence[AtomRecord],
        ligand_atoms: Sequence[AtomRecord],
        box: BoundingBox,
    ) -> ContactResult:
        ligand_types = classify_ligand_atoms(ligand_atoms)
        logger.debug(
            "Ligand roles: %s",
            {t.name: sum(1 for x in ligand_types if x == t) for t in AtomType},
        )
        return accumulate_contacts(
            protein_atoms,
            ligand_atoms,
            ligand_types,
            box,
            self._cutoff,
            consume_failed_candidates=self._consume_failed_candidates,
        )
