"""Hydrogen-bond roles of standard protein atoms."""

from typing import Dict, Optional, Tuple

from ..models.atom_type import AtomType

ANY_RESIDUE = None

# (padded atom name, residue name or ANY_RESIDUE) -> role
PROTEIN_ATOM_ROLES: Dict[Tuple[str, Optional[str]], AtomType] = {
    # amide and guanidinium N-H
    (" N  ", ANY_RESIDUE): AtomType.DONOR,
    (" NH1", "ARG"): AtomType.DONOR,
    (" NH2", "ARG"): AtomType.DONOR,
    (" ND2", "ASN"): AtomType.DONOR,
    (" NE2", "GLN"): AtomType.DONOR,
    # aromatic N
    (" NE1", "TRP"): AtomType.NONE,
    (" NE2", "HIS"): AtomType.NONE,
    (" ND1", "HIS"): AtomType.DONOR,
    # charged N
    (" NZ ", "LYS"): AtomType.DONOR,
    (" NE ", "ARG"): AtomType.DONOR,
    # carbonyl O
    (" O  ", ANY_RESIDUE): AtomType.ACCEPTOR,
    (" OD1", "ASN"): AtomType.ACCEPTOR,
    (" OE1", "GLN"): AtomType.ACCEPTOR,
    # hydroxyl O
    (" OG ", "SER"): AtomType.DONOR,
    (" OG1", "THR"): AtomType.DONOR,
    (" OH ", "TYR"): AtomType.DONOR,
    # carboxylate O
    (" OXT", ANY_RESIDUE): AtomType.ACCEPTOR,
    (" OD1", "ASP"): AtomType.ACCEPTOR,
    (" OD2", "ASP"): AtomType.ACCEPTOR,
    (" OE1", "GLU"): AtomType.ACCEPTOR,
    (" OE2", "GLU"): AtomType.ACCEPTOR,
}


def pad_atom_name(atom_name: str) -> str:
    """Pad an atom name to the four-character PDB field.

    Names shorter than four characters start in the second column, e.g.
    ``"N"`` becomes ``" N  "`` and ``"OG1"`` becomes ``" OG1"``.
    """
    if len(atom_name) >= 4:
        return atom_name[:4]
    return (" " + atom_name.strip()).ljust(4)


def protein_atom_role(atom_name: str, residue_name: str) -> AtomType:
    """Look up the donor/acceptor role of a protein atom."""
    name = pad_atom_name(atom_name)
    if name[1] in ("C", "S"):
        return AtomType.NONE
    residue = residue_name.strip().upper()
    role = PROTEIN_ATOM_ROLES.get((name, residue))
    if role is None:
        role = PROTEIN_ATOM_ROLES.get((name, ANY_RESIDUE), AtomType.NONE)
    return role


def is_hydrogen_bond(ligand_type: AtomType, protein_atom_name: str, protein_residue_name: str) -> bool:
    """
    Decide whether a close ligand-protein pair forms a hydrogen bond.

    Args:
        ligand_type: Inferred role of the ligand atom
        protein_atom_name: PDB atom name of the protein atom
        protein_residue_name: Three-letter residue name of the protein atom

    Returns:
        True for a donor/acceptor pairing, or when either side may play both roles
    """
    protein_type = protein_atom_role(protein_atom_name, protein_residue_name)
    if (ligand_type, protein_type) in (
        (AtomType.DONOR, AtomType.ACCEPTOR),
        (AtomType.ACCEPTOR, AtomType.DONOR),
    ):
        return True
    if AtomType.NONE in (ligand_type, protein_type):
        return False
    return AtomType.BOTH in (ligand_type, protein_type)
