"""Rule-based chemistry used by the contact pass."""

from .atom_type_classifier import GeometricAtomTypeClassifier, classify_ligand_atoms
from .protein_roles import is_hydrogen_bond, protein_atom_role

__all__ = [
    "GeometricAtomTypeClassifier",
    "classify_ligand_atoms",
    "is_hydrogen_bond",
    "protein_atom_role",
]
