"""Core domain models and services for protein-ligand interaction scoring."""

from .config import AnalysisConfig
from .domain.exceptions import (
    ConfigurationError,
    EmptyInputError,
    GridIndexOutOfRange,
    LigclashError,
)
from .domain.models import (
    NOT_COMPUTED,
    AnalysisResult,
    AtomRecord,
    AtomSet,
    AtomType,
    BoundingBox,
    VoxelGrid,
)
from .services import InteractionAnalysisService

__all__ = [
    "AnalysisConfig",
    "ConfigurationError",
    "EmptyInputError",
    "GridIndexOutOfRange",
    "LigclashError",
    "NOT_COMPUTED",
    "AnalysisResult",
    "AtomRecord",
    "AtomSet",
    "AtomType",
    "BoundingBox",
    "VoxelGrid",
    "InteractionAnalysisService",
]
