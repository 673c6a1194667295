"""Distance helpers shared by the clash and contact passes."""

from typing import Iterable

import numpy as np


def _as_array(position) -> np.ndarray:
    # AtomRecord-like objects or plain coordinate triples
    coordinates = getattr(position, "coordinates", position)
    return np.asarray(coordinates, dtype=float)


def squared_distance(a, b) -> float:
    """Squared Euclidean distance between two atoms or coordinate triples."""
    delta = _as_array(a) - _as_array(b)
    return float(np.dot(delta, delta))


def distance(a, b) -> float:
    """Euclidean distance between two atoms or coordinate triples."""
    return float(np.sqrt(squared_distance(a, b)))


def coordinate_array(atoms: Iterable) -> np.ndarray:
    """Stack atom coordinates into an ``(n, 3)`` float array."""
    coords = [atom.coordinates for atom in atoms]
    if not coords:
        return np.empty((0, 3), dtype=float)
    return np.asarray(coords, dtype=float)


def squared_distance_matrix(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Pairwise squared distances between ``(n, 3)`` and ``(m, 3)`` arrays."""
    delta = first[:, np.newaxis, :] - second[np.newaxis, :, :]
    return np.einsum("ijk,ijk->ij", delta, delta)
