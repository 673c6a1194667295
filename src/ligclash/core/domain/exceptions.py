"""Exceptions raised by the interaction analysis core."""


class LigclashError(Exception):
    """Base class for all ligclash errors."""


class EmptyInputError(LigclashError, ValueError):
    """Raised when an operation receives an empty ligand atom set."""


class ConfigurationError(LigclashError, ValueError):
    """Raised for invalid analysis parameters or an oversized voxel grid."""


class GridIndexOutOfRange(LigclashError, IndexError):
    """Raised when a coordinate maps outside the voxel grid."""

    def __init__(self, cell, shape):
        self.cell = cell
        self.shape = shape
        super().__init__(f"Cell {cell} lies outside grid of size {shape}")
