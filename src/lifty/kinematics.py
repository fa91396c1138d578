"""
Boom and hook kinematics.

Coordinate convention:
- x-axis: side (east)
- y-axis: forward (north)
- z-axis: up

Swing angles are compass bearings measured clockwise from +y, so 0° is
straight ahead and 90° is to the right. Boom angles are measured up from
horizontal. The hoist cable is assumed vertical (no sag, no sway).
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from .common.constants import POSITION_TOLERANCE, Point3D, Vector3D

logger = logging.getLogger(__name__)

ORIGIN: Point3D = (0.0, 0.0, 0.0)


def calculate_boom_tip_position(
    crane_base: Point3D,
    boom_length_m: float,
    boom_angle_deg: float,
    swing_angle_deg: float,
    boom_pivot_height_m: float,
) -> Point3D:
    """Boom tip (sheave) position in world coordinates."""
    boom_angle = math.radians(boom_angle_deg)
    swing_angle = math.radians(swing_angle_deg)

    horizontal_reach = boom_length_m * math.cos(boom_angle)
    vertical_reach = boom_length_m * math.sin(boom_angle)

    x = horizontal_reach * math.sin(swing_angle)
    y = horizontal_reach * math.cos(swing_angle)
    z = boom_pivot_height_m + vertical_reach

    bx, by, bz = crane_base
    return (bx + x, by + y, bz + z)


def calculate_hook_position(
    crane_base: Point3D,
    boom_length_m: float,
    boom_angle_deg: float,
    swing_angle_deg: float,
    boom_pivot_height_m: float,
    hoist_length_m: float,
) -> Point3D:
    """Hook position: the boom tip lowered by the hoist length."""
    x, y, z = calculate_boom_tip_position(
        crane_base,
        boom_length_m,
        boom_angle_deg,
        swing_angle_deg,
        boom_pivot_height_m,
    )
    return (x, y, z - hoist_length_m)


def calculate_boom_angle_for_height(
    boom_length_m: float,
    target_radius_m: float,
    target_hook_height_m: float,
    boom_pivot_height_m: float,
    hoist_length_m: float,
) -> float | None:
    """Boom angle (degrees) that puts the hook at a radius and height.

    A boom of fixed length reaches a given radius at exactly one angle,
    ``acos(radius / L)``. The hook height is then set by paying the hoist in
    or out, so the target is reachable when it does not sit above the boom
    tip at that angle, i.e. when
    ``sqrt(radius² + (target_hook_height - pivot_height)²) <= L``.

    ``hoist_length_m`` is the cable currently paid out. It does not limit
    reachability; use :func:`calculate_hoist_length_for_height` for the
    cable length the target needs.

    Returns:
        Angle from horizontal in degrees, or ``None`` if the target is out of reach.
    """
    if boom_length_m <= 0.0 or target_radius_m < 0.0 or target_radius_m > boom_length_m:
        return None

    height_from_pivot = target_hook_height_m - boom_pivot_height_m
    tip_height_from_pivot = math.sqrt(boom_length_m**2 - target_radius_m**2)
    if height_from_pivot > tip_height_from_pivot + POSITION_TOLERANCE:
        return None

    angle_deg = math.degrees(math.acos(target_radius_m / boom_length_m))
    logger.debug(
        "Boom angle %.2f° for radius %.2fm; hoist change %.2fm",
        angle_deg,
        target_radius_m,
        (tip_height_from_pivot - height_from_pivot) - hoist_length_m,
    )
    return angle_deg


def calculate_swing_path(
    crane_base: Point3D,
    boom_length_m: float,
    boom_angle_deg: float,
    swing_deg_range: tuple[float, float],
    boom_pivot_height_m: float,
    hoist_length_m: float,
    num_steps: int,
) -> list[Point3D]:
    """Hook positions sampled linearly over a swing from start to end angle.

    Both end angles are included. ``num_steps == 1`` yields the start
    position only and ``num_steps <= 0`` yields an empty path.
    """
    if num_steps <= 0:
        return []

    start, end = swing_deg_range
    path: list[Point3D] = []
    for i in range(num_steps):
        t = i / (num_steps - 1) if num_steps > 1 else 0.0
        swing_angle = start + t * (end - start)
        path.append(
            calculate_hook_position(
                crane_base,
                boom_length_m,
                boom_angle_deg,
                swing_angle,
                boom_pivot_height_m,
                hoist_length_m,
            )
        )

    return path


def check_clearance(
    hook_path: Sequence[Point3D],
    load_dimensions: Vector3D,
    obstacle_position: Point3D,
    obstacle_dimensions: Vector3D,
    clearance_margin_m: float,
) -> bool:
    """True if the load clears an axis-aligned obstacle at every path sample.

    The load box hangs below the hook (centred half its height down). Both
    boxes are grown by ``clearance_margin_m``. Only the sampled positions are
    tested, so a collision between two samples can be missed.
    """
    load_half = [d / 2.0 + clearance_margin_m for d in load_dimensions]
    obs_half = [d / 2.0 + clearance_margin_m for d in obstacle_dimensions]
    ox, oy, oz = obstacle_position

    for hx, hy, hz in hook_path:
        load_center = (hx, hy, hz - load_dimensions[2] / 2.0)

        if (
            abs(load_center[0] - ox) < load_half[0] + obs_half[0]
            and abs(load_center[1] - oy) < load_half[1] + obs_half[1]
            and abs(load_center[2] - oz) < load_half[2] + obs_half[2]
        ):
            return False

    return True


def calculate_hoist_length_for_height(boom_tip_height_m: float, target_hook_height_m: float) -> float:
    """Cable length that puts the hook at the target height (never negative)."""
    return max(boom_tip_height_m - target_hook_height_m, 0.0)


__all__ = [
    "calculate_boom_tip_position",
    "calculate_hook_position",
    "calculate_boom_angle_for_height",
    "calculate_swing_path",
    "check_clearance",
    "calculate_hoist_length_for_height",
]
