"""
Shared constants, tolerances and analysis criteria.

All quantities are SI: metres, kilograms, degrees (at the API surface), kPa.
"""
from __future__ import annotations

from dataclasses import dataclass

# Type aliases
Point3D = tuple[float, float, float]
Vector3D = tuple[float, float, float]

GRAVITY = 9.81  # m/s^2

# Numerical tolerances (consistent across all solvers)
ZERO_TOLERANCE = 1e-12  # For checking near-zero values
LENGTH_TOLERANCE = 1e-3  # 1 mm; shorter sling/moment-arm lengths are degenerate
DETERMINANT_TOLERANCE = 1e-6  # 3-sling direction matrix
SVD_TOLERANCE = 1e-6  # Singular values below this are treated as zero
POSITION_TOLERANCE = 1e-9  # For position/distance comparisons
TENSION_TOLERANCE_KG = 1e-6  # Solved tensions below minus this are compressive
RADIUS_MATCH_TOLERANCE = 0.01  # m; chart points closer than this are one point
BOOM_MATCH_TOLERANCE = 0.1  # m; boom charts closer than this are one chart

# Capacity
SAFE_WORKING_LOAD_RATIO = 0.75  # Fraction of chart capacity usable as SWL

# Sling self-weight estimates
WIRE_ROPE_KG_PER_M_PER_MM = 0.5
CHAIN_KG_PER_M_PER_MM = 1.0
SYNTHETIC_KG_PER_M_PER_CM = 0.1

# Spreader beam
SPREADER_ALLOWABLE_STRESS_PA = 250e6  # Mild steel

# Dynamic factors
IMPACT_FACTOR = 1.25
WIND_THRESHOLD_MS = 5.0
WIND_DIVISOR_MS = 50.0

REQUIRED_CAPACITY_MARGIN = 1.2


@dataclass(frozen=True)
class RiggingCriteria:
    """Thresholds applied when judging a rigging analysis.

    Defaults are the usual 5:1 rigging practice; override for site rules.
    """
    min_safety_factor: float = 5.0
    shallow_angle_deg: float = 60.0  # from vertical
    high_utilization_percent: float = 90.0
    max_utilization_percent: float = 100.0
    max_cog_offset_m: float = 0.2
    balance_tolerance_m: float = 0.05


DEFAULT_CRITERIA = RiggingCriteria()
