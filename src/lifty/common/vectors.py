"""Small numpy helpers for 3D points and vectors."""
from __future__ import annotations

import numpy as np

from .constants import Point3D


def as_vector(point) -> np.ndarray:
    """Return ``point`` as a float64 array of shape (3,)."""
    arr = np.asarray(point, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3D point, got shape {arr.shape}")
    return arr


def as_point(vec: np.ndarray) -> Point3D:
    return (float(vec[0]), float(vec[1]), float(vec[2]))


def unit_vector(vec: np.ndarray, min_length: float) -> np.ndarray | None:
    """Normalize ``vec``; ``None`` when it is shorter than ``min_length``."""
    length = float(np.linalg.norm(vec))
    if length < min_length:
        return None
    return vec / length
