"""Immutable crane model specifications."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .capacity import CapacityChart
from .counterweight import CounterweightConfig
from .outriggers import OutriggerSystem


class CraneType(Enum):
    ALL_TERRAIN = "all_terrain"
    ROUGH_TERRAIN = "rough_terrain"
    TRUCK_MOUNTED = "truck_mounted"
    CRAWLER = "crawler"
    TOWER = "tower"

    @property
    def label(self) -> str:
        return _CRANE_TYPE_LABELS[self]


_CRANE_TYPE_LABELS = {
    CraneType.ALL_TERRAIN: "All-Terrain",
    CraneType.ROUGH_TERRAIN: "Rough Terrain",
    CraneType.TRUCK_MOUNTED: "Truck Mounted",
    CraneType.CRAWLER: "Crawler",
    CraneType.TOWER: "Tower",
}


@dataclass(frozen=True)
class CraneSpec:
    """Catalog entry for one crane model.

    Lengths in m, weights in kg, angles in degrees, speeds in m/min (hoist)
    and rpm (swing), engine power in kW.
    """

    id: str
    manufacturer: str
    model: str
    year: int
    crane_type: CraneType

    base_weight_kg: float
    transport_weight_kg: float
    length_m: float
    width_m: float
    height_m: float

    boom_length_range_m: tuple[float, float]
    boom_sections: int
    boom_pivot_height_m: float
    min_boom_angle_deg: float
    max_boom_angle_deg: float

    hoist_length_range_m: tuple[float, float]
    max_hoist_speed_m_min: float

    max_capacity_kg: float
    max_radius_m: float
    min_radius_m: float
    max_tip_height_m: float

    outrigger_base_width_m: float
    outrigger_base_length_m: float
    outrigger_max_extension_m: float

    counterweight_slab_kg: float
    counterweight_max_slabs: int
    counterweight_moment_arm_m: float

    capacity_chart: CapacityChart = field(default_factory=CapacityChart, compare=False, repr=False)

    engine_power_kw: float = 0.0
    max_swing_speed_rpm: float = 0.0

    def __post_init__(self) -> None:
        lo, hi = self.boom_length_range_m
        if lo <= 0.0 or hi < lo:
            raise ValueError(f"Invalid boom length range {self.boom_length_range_m}")
        if self.max_boom_angle_deg < self.min_boom_angle_deg:
            raise ValueError("max_boom_angle_deg must be >= min_boom_angle_deg")
        if self.max_radius_m < self.min_radius_m:
            raise ValueError("max_radius_m must be >= min_radius_m")

    @property
    def min_boom_length_m(self) -> float:
        return self.boom_length_range_m[0]

    @property
    def max_boom_length_m(self) -> float:
        return self.boom_length_range_m[1]

    @property
    def display_name(self) -> str:
        return f"{self.manufacturer} {self.model}"

    def create_outrigger_system(self) -> OutriggerSystem:
        return OutriggerSystem.create(
            base_width_m=self.outrigger_base_width_m,
            base_length_m=self.outrigger_base_length_m,
            max_extension_m=self.outrigger_max_extension_m,
        )

    def create_counterweight_config(self) -> CounterweightConfig:
        return CounterweightConfig(
            slab_weight_kg=self.counterweight_slab_kg,
            max_slabs=self.counterweight_max_slabs,
            moment_arm_m=self.counterweight_moment_arm_m,
        )

    def with_capacity_chart(self, chart: CapacityChart) -> "CraneSpec":
        return replace(self, capacity_chart=chart)


__all__ = ["CraneType", "CraneSpec"]
