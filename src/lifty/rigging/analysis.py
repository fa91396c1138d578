"""
Rigging analysis: per-sling capacity, balance, safety and warnings.

``analyze_rigging`` is the entry point used by ``RiggingConfiguration.analyze``.
Soft issues (shallow angles, high utilization, low safety factor, CoG offset)
are reported as warning strings on the result; only unsolvable or
degenerate rigging raises.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Sequence

import numpy as np

from ..common.constants import (
    DEFAULT_CRITERIA,
    GRAVITY,
    IMPACT_FACTOR,
    SPREADER_ALLOWABLE_STRESS_PA,
    WIND_DIVISOR_MS,
    WIND_THRESHOLD_MS,
    ZERO_TOLERANCE,
    Point3D,
    RiggingCriteria,
    Vector3D,
)
from ..common.vectors import as_point, as_vector
from .models import Load, RiggingConfiguration, RiggingHardware, Sling
from .results import RiggingAnalysis, SafetyAnalysis, SlingTensionAnalysis, SpreaderBeamAnalysis
from .solvers import sling_angle_from_vertical, solve_tensions

logger = logging.getLogger(__name__)

MIN_TOTAL_TENSION_KG = 1e-3


@dataclass(frozen=True)
class DynamicFactors:
    impact_loading: bool = False
    wind_speed_ms: float = 0.0


def analyze_rigging(
    config: RiggingConfiguration,
    criteria: RiggingCriteria | None = None,
) -> RiggingAnalysis:
    """Solve and judge a rigging configuration.

    Raises:
        InsufficientPickPoints: No slings.
        InvalidRiggingConfiguration: Degenerate geometry or more than six slings.
        RiggingSolveError: Least-squares solve failed.
    """
    criteria = criteria or DEFAULT_CRITERIA

    tensions = solve_tensions(load=config.load, slings=config.slings)
    sling_tensions = [
        analyze_sling(sling, tension_kg, criteria=criteria)
        for sling, tension_kg in zip(config.slings, tensions)
    ]

    is_balanced, tilt = check_balance(config.load, config.slings, sling_tensions, criteria=criteria)
    rigging_weight = calculate_rigging_weight(config.slings, config.hardware)
    safety = analyze_safety(config.load, sling_tensions, config.crane_hook_position, criteria=criteria)
    warnings = generate_warnings(sling_tensions, safety, criteria=criteria)

    logger.debug(
        "Rigging: %d sling(s), SF %.2f, balanced=%s, %d warning(s)",
        len(sling_tensions),
        safety.overall_safety_factor,
        is_balanced,
        len(warnings),
    )

    return RiggingAnalysis(
        sling_tensions=sling_tensions,
        total_rigging_weight_kg=rigging_weight,
        is_balanced=is_balanced,
        tilt_angle_deg=tilt,
        safety_analysis=safety,
        warnings=warnings,
    )


def analyze_sling(
    sling: Sling,
    tension_kg: float,
    *,
    criteria: RiggingCriteria = DEFAULT_CRITERIA,
) -> SlingTensionAnalysis:
    """Capacity at the sling's angle and hitch, and utilization for ``tension_kg``.

    Capacity is ``rated × cos(angle from vertical) × hitch factor``. A sling at
    or past horizontal has no capacity and is reported unsafe.
    """
    angle_deg = sling_angle_from_vertical(sling)
    angle_factor = math.cos(math.radians(angle_deg))
    capacity_kg = sling.spec.rated_capacity_kg * angle_factor * sling.hitch_type.capacity_factor

    if capacity_kg > ZERO_TOLERANCE:
        utilization = tension_kg / capacity_kg * 100.0
    else:
        utilization = math.inf

    return SlingTensionAnalysis(
        sling_id=sling.id,
        tension_kg=tension_kg,
        tension_kn=tension_kg * GRAVITY / 1000.0,
        angle_from_vertical_deg=angle_deg,
        capacity_kg=capacity_kg,
        utilization_percent=utilization,
        is_safe=utilization <= criteria.max_utilization_percent,
    )


def check_balance(
    load: Load,
    slings: Sequence[Sling],
    tensions: Sequence[SlingTensionAnalysis],
    *,
    criteria: RiggingCriteria = DEFAULT_CRITERIA,
) -> tuple[bool, Vector3D | None]:
    """Compare the tension-weighted attachment centroid with the CoG in plan.

    Only the horizontal (x, y) offset counts towards balance. The vertical
    gap between attachment points and CoG is ignored, so a CoG sitting
    straight below the attachment plane is balanced.

    Returns:
        (is_balanced, tilt) where tilt is ``(about x, about y, 0)`` in degrees
        when unbalanced. An unloaded rigging is reported unbalanced with no tilt.
    """
    weights = np.array([t.tension_kg for t in tensions], dtype=float)
    total = float(weights.sum())
    if total < MIN_TOTAL_TENSION_KG:
        return False, None

    points = np.array([as_vector(s.attachment_point) for s in slings])
    centroid = (weights[:, None] * points).sum(axis=0) / total
    offset = centroid - as_vector(load.center_of_gravity)

    if float(np.hypot(offset[0], offset[1])) < criteria.balance_tolerance_m:
        return True, None

    height = float(load.dimensions[2])
    tilt_x = math.degrees(math.atan2(float(offset[0]), height))
    tilt_y = math.degrees(math.atan2(float(offset[1]), height))
    return False, (tilt_x, tilt_y, 0.0)


def calculate_rigging_weight(slings: Sequence[Sling], hardware: Sequence[RiggingHardware]) -> float:
    sling_weight = sum(s.spec.estimate_weight_kg() for s in slings)
    hardware_weight = sum(h.weight_kg for h in hardware)
    return sling_weight + hardware_weight


def analyze_safety(
    load: Load,
    tensions: Sequence[SlingTensionAnalysis],
    hook_position: Point3D,
    *,
    criteria: RiggingCriteria = DEFAULT_CRITERIA,
) -> SafetyAnalysis:
    """Governing (minimum) capacity/tension ratio and the hook offset from CoG."""
    min_sf = math.inf
    critical: str | None = None
    for tension in tensions:
        sf = tension.safety_factor
        if sf < min_sf:
            min_sf = sf
            critical = tension.sling_id

    offset = as_vector(hook_position) - as_vector(load.center_of_gravity)

    return SafetyAnalysis(
        overall_safety_factor=min_sf,
        critical_sling_id=critical,
        is_configuration_safe=min_sf >= criteria.min_safety_factor,
        cog_offset_from_hook_m=as_point(offset),
    )


def generate_warnings(
    tensions: Sequence[SlingTensionAnalysis],
    safety: SafetyAnalysis,
    *,
    criteria: RiggingCriteria = DEFAULT_CRITERIA,
) -> list[str]:
    """Advisory messages for a solved rigging.

    The CoG offset warning uses the plan (x, y) distance between hook and
    CoG, ``SafetyAnalysis.horizontal_offset_m``. The hook height above the
    load does not count as offset.
    """
    warnings: list[str] = []

    for t in tensions:
        if t.angle_from_vertical_deg > criteria.shallow_angle_deg:
            warnings.append(
                f"Sling '{t.sling_id}' has shallow angle ({t.angle_from_vertical_deg:.1f}° from vertical). "
                f"Angles > {criteria.shallow_angle_deg:.0f}° significantly increase tension."
            )
        if t.utilization_percent > criteria.high_utilization_percent:
            warnings.append(f"Sling '{t.sling_id}' is highly loaded ({t.utilization_percent:.0f}% of capacity)")
        if not t.is_safe:
            warnings.append(f"Sling '{t.sling_id}' is OVERLOADED ({t.utilization_percent:.0f}% of capacity)!")

    if safety.overall_safety_factor < criteria.min_safety_factor:
        warnings.append(
            f"Safety factor ({safety.overall_safety_factor:.1f}:1) is below minimum required "
            f"({criteria.min_safety_factor:.0f}:1)"
        )

    offset = safety.horizontal_offset_m
    if offset > criteria.max_cog_offset_m:
        warnings.append(f"Center of gravity is offset {offset:.1f}m from hook - load may swing during lift")

    return warnings


def apply_dynamic_factors(static_tension_kg: float, factors: DynamicFactors) -> float:
    """Scale a static tension for impact and wind. Factors multiply."""
    multiplier = 1.0
    if factors.impact_loading:
        multiplier *= IMPACT_FACTOR
    if factors.wind_speed_ms > WIND_THRESHOLD_MS:
        multiplier *= 1.0 + factors.wind_speed_ms / WIND_DIVISOR_MS
    return static_tension_kg * multiplier


def analyze_spreader_beam(
    beam_length_m: float,
    beam_weight_kg: float,
    lift_point_spacing_m: float,
    load_kg: float,
) -> SpreaderBeamAnalysis:
    """Simply supported beam under the total load.

    ``lift_point_spacing_m`` does not enter the estimate; the full beam
    length is the span.
    """
    total_n = (load_kg + beam_weight_kg) * GRAVITY
    moment = total_n * beam_length_m / 8.0
    return SpreaderBeamAnalysis(
        max_bending_moment_nm=moment,
        max_shear_force_n=total_n / 2.0,
        required_section_modulus_m3=moment / SPREADER_ALLOWABLE_STRESS_PA,
    )


__all__ = [
    "DynamicFactors",
    "analyze_rigging",
    "analyze_sling",
    "check_balance",
    "calculate_rigging_weight",
    "analyze_safety",
    "generate_warnings",
    "apply_dynamic_factors",
    "analyze_spreader_beam",
]
