"""Domain model classes."""

from .atom import AtomRecord, AtomSet
from .atom_type import AtomType
from .bounding_box import BoundingBox, compute_bounding_box
from .voxel_grid import VoxelGrid, build_grid, query_cell
from .clash_result import (
    NOT_COMPUTED,
    AnalysisResult,
    ContactResult,
    IntersectionResult,
)

__all__ = [
    "AtomRecord",
    "AtomSet",
    "AtomType",
    "BoundingBox",
    "compute_bounding_box",
    "VoxelGrid",
    "build_grid",
    "query_cell",
    "NOT_COMPUTED",
    "AnalysisResult",
    "ContactResult",
    "IntersectionResult",
]
