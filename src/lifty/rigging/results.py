"""Result models for rigging analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any

from ..common.constants import Vector3D
from ..common.errors import SlingOverloaded, UnbalancedLoad


@dataclass(frozen=True)
class SlingTensionAnalysis:
    """Tension and capacity of one sling."""

    sling_id: str
    tension_kg: float
    tension_kn: float
    angle_from_vertical_deg: float
    capacity_kg: float
    utilization_percent: float
    is_safe: bool

    @property
    def safety_factor(self) -> float:
        """capacity / tension (inf for an unloaded sling)."""
        if self.tension_kg <= 0.0:
            return math.inf
        return max(self.capacity_kg, 0.0) / self.tension_kg

    @property
    def info(self) -> dict[str, Any]:
        return {
            "sling_id": self.sling_id,
            "tension_kg": self.tension_kg,
            "tension_kN": self.tension_kn,
            "angle_from_vertical_deg": self.angle_from_vertical_deg,
            "capacity_kg": self.capacity_kg,
            "utilization_percent": self.utilization_percent,
            "is_safe": self.is_safe,
        }


@dataclass(frozen=True)
class SafetyAnalysis:
    overall_safety_factor: float
    critical_sling_id: str | None
    is_configuration_safe: bool
    cog_offset_from_hook_m: Vector3D

    @property
    def horizontal_offset_m(self) -> float:
        """Plan distance between hook and CoG."""
        dx, dy, _ = self.cog_offset_from_hook_m
        return math.hypot(dx, dy)

    @property
    def info(self) -> dict[str, Any]:
        return {
            "overall_safety_factor": self.overall_safety_factor,
            "critical_sling_id": self.critical_sling_id,
            "is_configuration_safe": self.is_configuration_safe,
            "cog_offset_from_hook_m": self.cog_offset_from_hook_m,
        }


@dataclass(frozen=True)
class SpreaderBeamAnalysis:
    max_bending_moment_nm: float
    max_shear_force_n: float
    required_section_modulus_m3: float

    @property
    def info(self) -> dict[str, Any]:
        return {
            "max_bending_moment_Nm": self.max_bending_moment_nm,
            "max_shear_force_N": self.max_shear_force_n,
            "required_section_modulus_m3": self.required_section_modulus_m3,
        }


@dataclass(frozen=True)
class RiggingAnalysis:
    """Outcome of ``analyze_rigging``.

    Attributes:
        sling_tensions: One entry per sling, in input order
        total_rigging_weight_kg: Sling self-weight estimate plus hardware
        is_balanced: Tension-weighted attachment centroid within tolerance of CoG
        tilt_angle_deg: (about x, about y, 0) tilt estimate when unbalanced
        safety_analysis: Governing safety factor and hook offset
        warnings: Advisory messages; never raised
    """

    sling_tensions: list[SlingTensionAnalysis]
    total_rigging_weight_kg: float
    is_balanced: bool
    tilt_angle_deg: Vector3D | None
    safety_analysis: SafetyAnalysis
    warnings: list[str] = field(default_factory=list)

    @property
    def max_tension_kg(self) -> float:
        return max((t.tension_kg for t in self.sling_tensions), default=0.0)

    @property
    def max_utilization_percent(self) -> float:
        return max((t.utilization_percent for t in self.sling_tensions), default=0.0)

    @property
    def is_safe(self) -> bool:
        return self.safety_analysis.is_configuration_safe and all(t.is_safe for t in self.sling_tensions)

    def require_safe(self) -> None:
        """Raise on the hard failures that warnings only report.

        Raises:
            SlingOverloaded: For the most utilized sling above the limit.
            UnbalancedLoad: The attachment centroid is off the CoG in plan.
        """
        overloaded = [t for t in self.sling_tensions if not t.is_safe]
        if overloaded:
            worst = max(overloaded, key=lambda t: t.utilization_percent)
            raise SlingOverloaded(worst.sling_id, worst.utilization_percent)

        if not self.is_balanced:
            tilt = self.tilt_angle_deg or (0.0, 0.0, 0.0)
            raise UnbalancedLoad(math.hypot(tilt[0], tilt[1]))

    def tension_for(self, sling_id: str) -> SlingTensionAnalysis:
        for tension in self.sling_tensions:
            if tension.sling_id == sling_id:
                return tension
        raise KeyError(sling_id)

    @property
    def info(self) -> dict[str, Any]:
        return {
            "slings": [t.info for t in self.sling_tensions],
            "total_rigging_weight_kg": self.total_rigging_weight_kg,
            "is_balanced": self.is_balanced,
            "tilt_angle_deg": self.tilt_angle_deg,
            "safety": self.safety_analysis.info,
            "warnings": list(self.warnings),
        }

    def plot(self, **kwargs):
        """Bar chart of sling utilization. See ``lifty.plotting.plot_rigging_result``."""
        from ..plotting import plot_rigging_result

        return plot_rigging_result(self, **kwargs)


__all__ = [
    "SlingTensionAnalysis",
    "SafetyAnalysis",
    "SpreaderBeamAnalysis",
    "RiggingAnalysis",
]
