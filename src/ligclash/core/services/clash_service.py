"""Service for grid-based clash (intersection) estimation."""

import logging
from typing import Sequence, Tuple

from ..domain.models.atom import AtomRecord
from ..domain.models.bounding_box import BoundingBox, compute_bounding_box
from ..domain.models.clash_result import IntersectionResult
from ..domain.models.voxel_grid import (
    DEFAULT_MAX_GRID_CELLS,
    VoxelGrid,
    build_grid,
    query_cell,
)

logger = logging.getLogger(__name__)


def estimate_intersection(
    protein_atoms: Sequence[AtomRecord],
    grid: VoxelGrid,
    box: BoundingBox,
    step: float,
) -> IntersectionResult:
    """
    Estimate the ligand-protein overlap volume.

    Protein atoms strictly inside the ligand bounding box are looked up in the
    occupancy grid; each hit contributes one cell volume. This is a coarse
    proxy for steric overlap, not an exact geometric volume.

    Args:
        protein_atoms: Protein atoms to test
        grid: Ligand occupancy grid
        box: Ligand bounding box the grid was built on
        step: Grid cell edge length

    Returns:
        IntersectionResult with the hit count and ``count * step ** 3``
    """
    overlap = sum(
        1
        for atom in protein_atoms
        if box.contains(atom) and query_cell(grid, atom)
    )
    return IntersectionResult(overlap_atom_count=overlap, volume=overlap * step ** 3)


class ClashService:
    """Builds the ligand occupancy grid and scores protein overlap against it."""

    def __init__(self, step: float, max_grid_cells: int = DEFAULT_MAX_GRID_CELLS):
        self._step = step
        self._max_grid_cells = max_grid_cells

    def index_ligand(
        self, ligand_atoms: Sequence[AtomRecord]
    ) -> Tuple[BoundingBox, VoxelGrid]:
        """Compute the ligand bounding box and its occupancy grid."""
        box = compute_bounding_box(ligand_atoms)
        grid = build_grid(ligand_atoms, box, self._step, max_cells=self._max_grid_cells)
        logger.debug(
            "Grid %dx%dx%d (%d cells, %d occupied) at step %.3f",
            grid.size_x,
            grid.size_y,
            grid.size_z,
            grid.cell_count,
            grid.occupied_count,
            self._step,
        )
        return box, grid

    def detect_clashes(
        self,
        protein_atoms: Sequence[AtomRecord],
        grid: VoxelGrid,
        box: BoundingBox,
    ) -> IntersectionResult:
        return estimate_intersection(protein_atoms, grid, box, self._step)
