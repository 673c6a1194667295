"""Occupancy grid over the ligand bounding box."""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..exceptions import ConfigurationError, GridIndexOutOfRange
from .atom import AtomRecord
from .bounding_box import BoundingBox

DEFAULT_MAX_GRID_CELLS = 10_000_000


@dataclass(frozen=True)
class VoxelGrid:
    """
    Boolean occupancy flags for a regular grid of cubic cells.

    Cells are stored in a flat buffer indexed as
    ``(cell_z * size_y + cell_y) * size_x + cell_x``. The grid records
    presence only: several atoms may share one cell.
    """

    origin: Tuple[float, float, float]
    step: float
    size_x: int
    size_y: int
    size_z: int
    occupancy: np.ndarray

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.size_x, self.size_y, self.size_z)

    @property
    def cell_count(self) -> int:
        return self.size_x * self.size_y * self.size_z

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.occupancy))

    def cell_of(self, position) -> Tuple[int, int, int]:
        """Per-axis cell of a position; raises if it falls outside the grid."""
        coords = getattr(position, "coordinates", position)
        cell = tuple(
            int(math.floor((coord - lower) / self.step))
            for coord, lower in zip(coords, self.origin)
        )
        if any(c < 0 or c >= size for c, size in zip(cell, self.shape)):
            raise GridIndexOutOfRange(cell, self.shape)
        return cell

    def cell_index(self, position) -> int:
        """Linear index of the cell holding ``position``."""
        cell_x, cell_y, cell_z = self.cell_of(position)
        return (cell_z * self.size_y + cell_y) * self.size_x + cell_x

    def is_occupied(self, position) -> bool:
        return bool(self.occupancy[self.cell_index(position)])


def grid_dimensions(box: BoundingBox, step: float) -> Tuple[int, int, int]:
    """
    Cells per axis; two cells of slack absorb rounding at the box edges.

    Raises:
        ConfigurationError: If ``step`` is too small for the cell count to be
            represented
    """
    spans = (box.max_x - box.min_x, box.max_y - box.min_y, box.max_z - box.min_z)
    cells = [span / step for span in spans]
    if not all(math.isfinite(c) for c in cells):
        raise ConfigurationError(
            f"Grid step {step} is too small for a ligand spanning {spans} A"
        )
    size_x, size_y, size_z = (int(math.floor(c)) + 2 for c in cells)
    return size_x, size_y, size_z


def build_grid(
    ligand_atoms: Sequence[AtomRecord],
    box: BoundingBox,
    step: float,
    max_cells: int = DEFAULT_MAX_GRID_CELLS,
) -> VoxelGrid:
    """
    Build the ligand occupancy grid.

    Args:
        ligand_atoms: Atoms whose cells are marked occupied
        box: Bounding box of ``ligand_atoms``
        step: Cell edge length in Angstrom
        max_cells: Upper bound on the number of grid cells

    Returns:
        VoxelGrid with every ligand atom's cell occupied

    Raises:
        ConfigurationError: If ``step`` is not positive or the grid is too large
        GridIndexOutOfRange: If a ligand atom maps outside the grid
    """
    if not step > 0:
        raise ConfigurationError(f"Grid step must be positive, got {step}")

    size_x, size_y, size_z = grid_dimensions(box, step)
    cell_count = size_x * size_y * size_z
    if cell_count > max_cells:
        raise ConfigurationError(
            f"Grid of {size_x}x{size_y}x{size_z} = {cell_count} cells exceeds "
            f"the limit of {max_cells}; increase the step (currently {step})"
        )

    grid = VoxelGrid(
        origin=box.origin,
        step=float(step),
        size_x=size_x,
        size_y=size_y,
        size_z=size_z,
        occupancy=np.zeros(cell_count, dtype=bool),
    )
    for atom in ligand_atoms:
        grid.occupancy[grid.cell_index(atom)] = True
    grid.occupancy.flags.writeable = False
    return grid


def query_cell(grid: VoxelGrid, position) -> bool:
    """Whether the cell holding ``position`` is occupied by a ligand atom."""
    return grid.is_occupied(position)
