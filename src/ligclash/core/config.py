"""Parameters of one interaction analysis run."""

from dataclasses import dataclass

from .domain.exceptions import ConfigurationError
from .domain.models.voxel_grid import DEFAULT_MAX_GRID_CELLS

DEFAULT_CLASH_GATE = 2.0


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Settings shared by every structure in a batch.

    Attributes:
        step: Voxel grid cell edge length in Angstrom
        cutoff: Contact distance cutoff in Angstrom
        max_grid_cells: Largest voxel grid that may be allocated
        clash_gate: Intersection volume per ligand atom at which the contact
            pass is skipped
        consume_failed_candidates: Mark atoms as used by an H-bond after any
            evaluated candidate pair, not only after an accepted one
    """

    step: float = 1.0
    cutoff: float = 4.0
    max_grid_cells: int = DEFAULT_MAX_GRID_CELLS
    clash_gate: float = DEFAULT_CLASH_GATE
    consume_failed_candidates: bool = False

    def __post_init__(self):
        for name in ("step", "cutoff", "max_grid_cells", "clash_gate"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
