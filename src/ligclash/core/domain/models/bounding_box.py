"""Axis-aligned bounding box of the ligand atoms."""

from dataclasses import dataclass
from typing import Sequence

from ...utils.geometry import coordinate_array
from ..exceptions import EmptyInputError
from .atom import AtomRecord


@dataclass(frozen=True)
class BoundingBox:
    """Per-axis minimum and maximum coordinates."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    @property
    def origin(self):
        return (self.min_x, self.min_y, self.min_z)

    def contains(self, position, margin: float = 0.0) -> bool:
        """Strict containment test, optionally with the box grown by ``margin``."""
        x, y, z = getattr(position, "coordinates", position)
        return (
            self.min_x - margin < x < self.max_x + margin
            and self.min_y - margin < y < self.max_y + margin
            and self.min_z - margin < z < self.max_z + margin
        )


def compute_bounding_box(ligand_atoms: Sequence[AtomRecord]) -> BoundingBox:
    """
    Reduce the ligand atom positions to an axis-aligned box.

    Args:
        ligand_atoms: Non-empty sequence of ligand atoms

    Returns:
        BoundingBox spanning every ligand atom

    Raises:
        EmptyInputError: If no ligand atoms were given
    """
    coords = coordinate_array(ligand_atoms)
    if len(coords) == 0:
        raise EmptyInputError("Cannot compute a bounding box for an empty ligand")

    lower = coords.min(axis=0)
    upper = coords.max(axis=0)
    return BoundingBox(
        min_x=float(lower[0]),
        max_x=float(upper[0]),
        min_y=float(lower[1]),
        max_y=float(upper[1]),
        min_z=float(lower[2]),
        max_z=float(upper[2]),
    )
