"""Rigging design helpers: pick-point layout, sling sizing and load presets."""

from __future__ import annotations

from dataclasses import dataclass
import math

from ..common.constants import REQUIRED_CAPACITY_MARGIN, ZERO_TOLERANCE, Point3D, Vector3D
from ..common.errors import InvalidRiggingConfiguration
from .models import HitchType, Load, PickPoint, Sling, SlingSpec


def suggest_pick_points(load: Load, num_points: int) -> list[Point3D]:
    """Pick points on top of the load, symmetric about the CoG.

    2 points sit at ±0.4 × length along x. 4 points sit at ±0.35 × length,
    ±0.35 × width. Other counts return an empty list.
    """
    cx, cy, cz = load.center_of_gravity
    length, width, height = load.dimensions
    z_top = cz + height * 0.5

    if num_points == 2:
        offset = length * 0.4
        return [(cx - offset, cy, z_top), (cx + offset, cy, z_top)]

    if num_points == 4:
        dx = length * 0.35
        dy = width * 0.35
        return [
            (cx + dx, cy + dy, z_top),
            (cx + dx, cy - dy, z_top),
            (cx - dx, cy + dy, z_top),
            (cx - dx, cy - dy, z_top),
        ]

    return []


def required_sling_capacity(
    load_weight_kg: float,
    num_slings: int,
    max_angle_from_vertical_deg: float,
    hitch_type: HitchType = HitchType.VERTICAL,
) -> float:
    """Rated (vertical) capacity each sling needs, including a 20 % margin."""
    if num_slings <= 0:
        return 0.0

    factor = math.cos(math.radians(max_angle_from_vertical_deg)) * hitch_type.capacity_factor
    if factor <= ZERO_TOLERANCE:
        raise InvalidRiggingConfiguration(
            f"Sling angle {max_angle_from_vertical_deg:.1f}° from vertical leaves no capacity"
        )

    per_sling = load_weight_kg / num_slings
    return per_sling / factor * REQUIRED_CAPACITY_MARGIN


def slings_from_pick_points(
    load: Load,
    hook_position: Point3D,
    spec: SlingSpec,
    hitch_type: HitchType = HitchType.VERTICAL,
) -> list[Sling]:
    """One sling per active pick point, all meeting at ``hook_position``.

    Slings are named after their pick point.
    """
    return [
        Sling(
            spec=spec,
            attachment_point=pick.position,
            hook_point=hook_position,
            hitch_type=hitch_type,
            name=pick.id,
        )
        for pick in load.active_pick_points
    ]


@dataclass(frozen=True)
class LoadPreset:
    name: str
    weight_kg: float
    dimensions: Vector3D
    pick_points: int


LOAD_PRESETS: dict[str, LoadPreset] = {
    "steel_beam": LoadPreset("Steel Beam", 5000.0, (12.0, 0.4, 0.6), 2),
    "concrete_panel": LoadPreset("Concrete Panel", 8000.0, (5.0, 2.5, 0.3), 4),
    "shipping_container": LoadPreset("Shipping Container", 3000.0, (6.0, 2.4, 2.6), 4),
    "hvac_unit": LoadPreset("HVAC Unit", 2000.0, (3.0, 1.5, 1.2), 4),
}


def load_from_preset(key: str, base: Point3D = (0.0, 0.0, 0.0)) -> Load:
    """Build a ``Load`` resting on ``base`` with suggested pick points.

    Raises:
        KeyError: Unknown preset.
    """
    try:
        preset = LOAD_PRESETS[key]
    except KeyError:
        raise KeyError(f"Unknown load preset '{key}'. Available: {', '.join(LOAD_PRESETS)}") from None

    bx, by, bz = base
    load = Load(
        weight_kg=preset.weight_kg,
        center_of_gravity=(bx, by, bz + preset.dimensions[2] / 2.0),
        dimensions=preset.dimensions,
        name=preset.name,
    )
    for i, position in enumerate(suggest_pick_points(load, preset.pick_points), start=1):
        load.pick_points.append(PickPoint(id=f"P{i}", position=position))
    return load


__all__ = [
    "suggest_pick_points",
    "required_sling_capacity",
    "slings_from_pick_points",
    "LoadPreset",
    "LOAD_PRESETS",
    "load_from_preset",
]
