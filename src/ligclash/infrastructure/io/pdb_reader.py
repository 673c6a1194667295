"""Reads protein and ligand atoms from PDB files."""

import logging
from typing import List

from Bio.PDB.PDBParser import PDBParser

from ...core.domain.models.atom import AtomRecord, AtomSet

logger = logging.getLogger(__name__)

DEFAULT_LIGAND_CHAIN = "B"


def _first_conformation(entity):
    """Keep only the first-seen alternate of a disordered atom or residue."""
    if entity.is_disordered() == 2:
        return entity.disordered_get_list()[0]
    return entity


class PDBAtomReader:
    """
    Splits one model of a PDB file into ligand and protein atoms.

    Every atom of ``ligand_chain`` is a ligand atom; standard residues of the
    remaining chains are protein atoms. Waters and other hetero groups outside
    the ligand chain are ignored.
    """

    def __init__(self, ligand_chain: str = DEFAULT_LIGAND_CHAIN):
        self.ligand_chain = ligand_chain
        self._parser = PDBParser(QUIET=True)

    def read(self, filepath: str, model_num: int = 0) -> AtomSet:
        """
        Read the atoms of one model.

        Args:
            filepath: Path to the PDB file
            model_num: Index of the model to read; falls back to the first model

        Returns:
            AtomSet with ligand and protein atoms in file order

        Raises:
            ValueError: If the file holds no atoms
        """
        structure = self._parser.get_structure("structure", filepath)
        models = list(structure)
        if not models:
            raise ValueError(f"No atoms found in {filepath}")
        model = models[model_num] if model_num < len(models) else models[0]

        ligand: List[AtomRecord] = []
        protein: List[AtomRecord] = []
        for chain in model:
            for residue in chain:
                residue = _first_conformation(residue)
                if chain.id == self.ligand_chain:
                    target = ligand
                elif residue.id[0] == " ":
                    target = protein
                else:
                    continue
                for atom in residue:
                    target.append(self._to_record(_first_conformation(atom), residue, chain.id))

        if not ligand and not protein:
            raise ValueError(f"No atoms found in {filepath}")
        logger.debug(
            "Read %d ligand and %d protein atoms from %s", len(ligand), len(protein), filepath
        )
        return AtomSet(ligand_atoms=ligand, protein_atoms=protein)

    @staticmethod
    def _to_record(atom, residue, chain_id: str) -> AtomRecord:
        return AtomRecord(
            # PDB coordinates carry three decimals; Biopython stores float32
            coordinates=tuple(round(float(c), 3) for c in atom.coord),
            element=atom.element or "",
            atom_name=atom.get_fullname(),
            residue_name=residue.get_resname(),
            chain_id=chain_id,
            is_hetero=residue.id[0] != " ",
            alt_loc=atom.get_altloc().strip(),
            serial=atom.get_serial_number() or 0,
        )
