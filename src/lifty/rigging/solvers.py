"""
Sling tension solvers.

Which solver runs depends on the sling count:

- 1 sling: carries the whole load.
- 2 slings: lever-rule split about the CoG, each share divided by the cosine
  of that sling's angle from vertical. This is an approximation, not a full
  3D moment balance.
- 3 slings: exact solve of the force balance ``A·T = W·g·ẑ``.
- 4-6 slings: statically indeterminate; minimum-norm least-squares tensions
  from the SVD of ``AᵀA``.

The columns of ``A`` are unit vectors from each attachment point to its hook
point. Solved forces are converted from N to kg. A solved tension below
``-TENSION_TOLERANCE_KG`` means the geometry needs a sling to push and is
rejected.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ..common.constants import (
    DETERMINANT_TOLERANCE,
    GRAVITY,
    LENGTH_TOLERANCE,
    SVD_TOLERANCE,
    TENSION_TOLERANCE_KG,
    ZERO_TOLERANCE,
)
from ..common.errors import InsufficientPickPoints, InvalidRiggingConfiguration, RiggingSolveError
from ..common.vectors import as_vector, unit_vector
from .models import Load, Sling

logger = logging.getLogger(__name__)

MAX_SLINGS = 6
MIN_VERTICAL_COSINE = 1e-6
VERTICAL = np.array([0.0, 0.0, 1.0])


def sling_direction(sling: Sling) -> np.ndarray:
    """Unit vector from attachment point to hook point."""
    direction = unit_vector(as_vector(sling.hook_point) - as_vector(sling.attachment_point), LENGTH_TOLERANCE)
    if direction is None:
        raise InvalidRiggingConfiguration(f"Sling '{sling.id}' length too short")
    return direction


def sling_angle_from_vertical(sling: Sling) -> float:
    """Angle between the sling and the vertical, in degrees."""
    cos_angle = float(np.clip(np.dot(sling_direction(sling), VERTICAL), -1.0, 1.0))
    return math.degrees(math.acos(cos_angle))


def solve_tensions(*, load: Load, slings: Sequence[Sling]) -> list[float]:
    """Sling tensions in kg, in the order of ``slings``.

    Raises:
        InsufficientPickPoints: No slings.
        InvalidRiggingConfiguration: More than six slings or degenerate geometry.
        RiggingSolveError: The least-squares system has no usable singular values.
    """
    n = len(slings)
    if n == 0:
        raise InsufficientPickPoints()
    if n > MAX_SLINGS:
        raise InvalidRiggingConfiguration(f"Too many slings ({n}); max {MAX_SLINGS} supported")

    # Rejects zero-length slings before any solve.
    directions = [sling_direction(s) for s in slings]

    if n == 1:
        logger.debug("Single sling carries %.1f kg", load.weight_kg)
        return [float(load.weight_kg)]
    if n == 2:
        return solve_two_slings(load=load, slings=slings)

    A = np.column_stack(directions)
    if n == 3:
        return solve_three_slings(load=load, A=A)
    return solve_least_squares(load=load, A=A)


def solve_two_slings(*, load: Load, slings: Sequence[Sling]) -> list[float]:
    cog = as_vector(load.center_of_gravity)
    r1 = float(np.linalg.norm(as_vector(slings[0].attachment_point) - cog))
    r2 = float(np.linalg.norm(as_vector(slings[1].attachment_point) - cog))

    if r1 + r2 < LENGTH_TOLERANCE:
        raise InvalidRiggingConfiguration("Pick points too close to center of gravity")

    weight = load.weight_kg
    shares = (weight * r2 / (r1 + r2), weight * r1 / (r1 + r2))

    tensions: list[float] = []
    for sling, share in zip(slings, shares):
        cos_angle = float(np.dot(sling_direction(sling), VERTICAL))
        if cos_angle < MIN_VERTICAL_COSINE:
            raise InvalidRiggingConfiguration(f"Sling '{sling.id}' is horizontal or points down")
        tensions.append(share / cos_angle)

    logger.debug("Two-sling split r1=%.3f r2=%.3f -> %s", r1, r2, tensions)
    return tensions


def solve_three_slings(*, load: Load, A: np.ndarray) -> list[float]:
    det = float(np.linalg.det(A))
    if abs(det) < DETERMINANT_TOLERANCE:
        raise InvalidRiggingConfiguration("Slings are coplanar or collinear - cannot solve")

    # A·T = -F with F = (0, 0, -W·g)
    rhs = np.array([0.0, 0.0, load.weight_kg * GRAVITY])
    try:
        tensions_n = np.linalg.solve(A, rhs)
    except np.linalg.LinAlgError as exc:
        raise RiggingSolveError(f"Cannot invert sling geometry matrix: {exc}") from exc

    logger.debug("Three-sling solve det=%.4g", det)
    return _to_kg(tensions_n)


def solve_least_squares(*, load: Load, A: np.ndarray) -> list[float]:
    """Minimum-norm tensions for 4-6 slings (most even distribution)."""
    rhs = np.array([0.0, 0.0, load.weight_kg * GRAVITY])
    AtA = A.T @ A
    Atb = A.T @ rhs

    U, s, Vt = np.linalg.svd(AtA)
    usable = s > SVD_TOLERANCE
    if not np.any(usable):
        raise RiggingSolveError("SVD solve failed: sling geometry matrix is singular")

    s_inv = np.zeros_like(s)
    s_inv[usable] = 1.0 / s[usable]
    tensions_n = Vt.T @ (s_inv * (U.T @ Atb))

    residual = float(np.linalg.norm(A @ tensions_n - rhs))
    logger.debug("Least-squares solve rank=%d residual=%.3g N", int(np.sum(usable)), residual)
    return _to_kg(tensions_n)


def _to_kg(tensions_n: np.ndarray) -> list[float]:
    tensions_kg = tensions_n / GRAVITY
    if np.any(tensions_kg < -TENSION_TOLERANCE_KG):
        raise InvalidRiggingConfiguration(
            "Configuration produces negative tension - check pick point locations"
        )
    return [float(t) if t > ZERO_TOLERANCE else 0.0 for t in tensions_kg]


__all__ = [
    "MAX_SLINGS",
    "sling_direction",
    "sling_angle_from_vertical",
    "solve_tensions",
    "solve_two_slings",
    "solve_three_slings",
    "solve_least_squares",
]
