"""Ground bearing pressure analysis."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any

from ..common.constants import GRAVITY
from ..common.errors import GroundBearingError
from .models import GroundConfiguration, PadMaterial, Soil, SupportPoint

if TYPE_CHECKING:
    from ..crane.configuration import CraneConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BearingPressure:
    support_index: int
    pressure_kpa: float
    allowable_kpa: float
    is_safe: bool
    utilization_percent: float

    @property
    def info(self) -> dict[str, Any]:
        return {
            "support_index": self.support_index,
            "pressure_kPa": self.pressure_kpa,
            "allowable_kPa": self.allowable_kpa,
            "utilization_percent": self.utilization_percent,
            "is_safe": self.is_safe,
        }


@dataclass(frozen=True)
class GroundBearingAnalysis:
    is_safe: bool
    soil_type: Soil
    bearing_pressures: list[BearingPressure]

    @property
    def max_pressure_kpa(self) -> float:
        return max((b.pressure_kpa for b in self.bearing_pressures), default=0.0)

    @property
    def max_utilization_percent(self) -> float:
        return max((b.utilization_percent for b in self.bearing_pressures), default=0.0)

    @property
    def info(self) -> dict[str, Any]:
        return {
            "is_safe": self.is_safe,
            "soil": self.soil_type.label,
            "max_pressure_kPa": self.max_pressure_kpa,
            "max_utilization_percent": self.max_utilization_percent,
            "supports": [b.info for b in self.bearing_pressures],
        }


def analyze_ground_bearing(config: GroundConfiguration) -> GroundBearingAnalysis:
    """Compare each support's bearing pressure with the allowable soil pressure.

    ``pressure = load · g / 1000 / area`` (kPa) and
    ``allowable = soil capacity / safety factor``. The configuration is safe
    only if every support is.

    Raises:
        GroundBearingError: No support points, safety factor below 1 or a
            non-positive contact area.
    """
    if not config.support_points:
        raise GroundBearingError("No support points provided")
    if config.safety_factor < 1.0:
        raise GroundBearingError("Safety factor must be >= 1.0")

    allowable = config.soil_type.allowable_bearing_capacity_kpa / config.safety_factor

    pressures: list[BearingPressure] = []
    for i, point in enumerate(config.support_points):
        area = point.contact_area_m2
        if area <= 0.0:
            raise GroundBearingError(f"Support point {i} has invalid contact area")

        pressure = point.load_kg * GRAVITY / 1000.0 / area
        pressures.append(
            BearingPressure(
                support_index=i,
                pressure_kpa=pressure,
                allowable_kpa=allowable,
                is_safe=pressure <= allowable,
                utilization_percent=pressure / allowable * 100.0,
            )
        )

    all_safe = all(p.is_safe for p in pressures)
    logger.debug(
        "Ground bearing on %s: max %.1f kPa vs %.1f kPa allowable",
        config.soil_type.label,
        max(p.pressure_kpa for p in pressures),
        allowable,
    )
    return GroundBearingAnalysis(is_safe=all_safe, soil_type=config.soil_type, bearing_pressures=pressures)


def support_points_from_crane(
    config: "CraneConfiguration",
    extra_load_kg: float = 0.0,
    pad_material: PadMaterial = PadMaterial.STEEL,
) -> list[SupportPoint]:
    """Pad support points under the deployed outriggers of a crane.

    Crane weight (base + counterweight) plus ``extra_load_kg`` is shared
    equally between the deployed pads. Positions are world coordinates.

    Raises:
        GroundBearingError: No outrigger is deployed.
    """
    deployed = [o for o in config.outriggers.outriggers if o.is_deployed()]
    if not deployed:
        raise GroundBearingError("No support points provided")

    share = (config.get_total_weight_kg() + extra_load_kg) / len(deployed)
    px, py, pz = config.position

    points: list[SupportPoint] = []
    for outrigger in deployed:
        cx, cy, cz = outrigger.get_contact_point(config.outriggers.base_width_m)
        points.append(
            SupportPoint.with_pad(
                (px + cx, py + cy, pz + cz),
                share,
                outrigger.pad_diameter_m,
                pad_material,
            )
        )
    return points


__all__ = [
    "BearingPressure",
    "GroundBearingAnalysis",
    "analyze_ground_bearing",
    "support_points_from_crane",
]
