"""Grid-based clash and contact scoring of protein-ligand structures."""

from .core import (
    NOT_COMPUTED,
    AnalysisConfig,
    AnalysisResult,
    AtomRecord,
    AtomSet,
    AtomType,
    InteractionAnalysisService,
)

__version__ = "0.1.0"

__all__ = [
    "NOT_COMPUTED",
    "AnalysisConfig",
    "AnalysisResult",
    "AtomRecord",
    "AtomSet",
    "AtomType",
    "InteractionAnalysisService",
]
