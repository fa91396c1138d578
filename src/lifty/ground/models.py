"""
Soil, support and mat models for ground-bearing checks.

Allowable bearing capacities are presumptive values in kPa.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import math

from ..common.constants import Point3D


class SoilType(Enum):
    HARD_ROCK = "hard_rock"
    MEDIUM_ROCK = "medium_rock"
    INTERMEDIATE_ROCK = "intermediate_rock"
    SOFT_ROCK = "soft_rock"
    DENSE_GRAVEL = "dense_gravel"
    MEDIUM_GRAVEL = "medium_gravel"
    LOOSE_GRAVEL = "loose_gravel"
    DENSE_SAND = "dense_sand"
    MEDIUM_SAND = "medium_sand"
    LOOSE_SAND = "loose_sand"
    HARD_CLAY = "hard_clay"
    STIFF_CLAY = "stiff_clay"
    MEDIUM_CLAY = "medium_clay"
    SOFT_CLAY = "soft_clay"
    DENSE_SILT = "dense_silt"
    MEDIUM_SILT = "medium_silt"
    LOOSE_SILT = "loose_silt"
    PEAT = "peat"

    @property
    def allowable_bearing_capacity_kpa(self) -> float:
        return _SOIL_CAPACITY_KPA[self]

    @property
    def description(self) -> str:
        return _SOIL_DESCRIPTIONS[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class CustomSoil:
    """Site-specific bearing capacity from a geotechnical report."""

    capacity_kpa: float

    def __post_init__(self) -> None:
        if self.capacity_kpa <= 0.0:
            raise ValueError("capacity_kpa must be positive")

    @property
    def allowable_bearing_capacity_kpa(self) -> float:
        return self.capacity_kpa

    @property
    def description(self) -> str:
        return "Custom Bearing Capacity"

    @property
    def label(self) -> str:
        return f"Custom ({self.capacity_kpa:.0f} kPa)"


Soil = SoilType | CustomSoil


_SOIL_CAPACITY_KPA = {
    SoilType.HARD_ROCK: 5746.0,
    SoilType.MEDIUM_ROCK: 3830.0,
    SoilType.INTERMEDIATE_ROCK: 1915.0,
    SoilType.SOFT_ROCK: 766.0,
    SoilType.DENSE_GRAVEL: 600.0,
    SoilType.MEDIUM_GRAVEL: 400.0,
    SoilType.LOOSE_GRAVEL: 200.0,
    SoilType.DENSE_SAND: 600.0,
    SoilType.MEDIUM_SAND: 300.0,
    SoilType.LOOSE_SAND: 100.0,
    SoilType.HARD_CLAY: 479.0,
    SoilType.STIFF_CLAY: 287.0,
    SoilType.MEDIUM_CLAY: 192.0,
    SoilType.SOFT_CLAY: 100.0,
    SoilType.DENSE_SILT: 287.0,
    SoilType.MEDIUM_SILT: 150.0,
    SoilType.LOOSE_SILT: 75.0,
    SoilType.PEAT: 25.0,
}

_SOIL_DESCRIPTIONS = {
    SoilType.HARD_ROCK: "Massive unweathered rock such as granite or diorite; hard to break with a hammer.",
    SoilType.MEDIUM_ROCK: "Strong rock with possible laminations, such as limestone or sandstone.",
    SoilType.INTERMEDIATE_ROCK: "Slightly weathered or jointed rock, broken bedrock or hard shale.",
    SoilType.SOFT_ROCK: "Rock that softens when exposed and can be removed by picking; may need pretreatment.",
    SoilType.DENSE_GRAVEL: "Densely compacted gravel with tightly packed particles.",
    SoilType.MEDIUM_GRAVEL: "Moderately compacted gravel.",
    SoilType.LOOSE_GRAVEL: "Uncompacted gravel with open voids; often needs pretreatment.",
    SoilType.DENSE_SAND: "Densely packed sand with a high SPT blow count.",
    SoilType.MEDIUM_SAND: "Moderately packed sand with a mid-range SPT blow count.",
    SoilType.LOOSE_SAND: "Loose sand prone to settlement; unsuitable for heavy loads untreated.",
    SoilType.HARD_CLAY: "Indented with difficulty by thumbnail; can be peeled with a knife.",
    SoilType.STIFF_CLAY: "Indented about 10 mm by thumb, penetrated only with great effort.",
    SoilType.MEDIUM_CLAY: "Penetrated about 10 mm by thumb with moderate effort.",
    SoilType.SOFT_CLAY: "Easily penetrated by thumb and moulded by light finger pressure.",
    SoilType.DENSE_SILT: "Very compact silt, comparable to medium-dense sand.",
    SoilType.MEDIUM_SILT: "Firm silt with moderate resistance to penetration.",
    SoilType.LOOSE_SILT: "Loose silt with high settlement potential.",
    SoilType.PEAT: "Organic, highly compressible soil; not loadable without pretreatment.",
}


class PadMaterial(Enum):
    STEEL = "steel"
    HARDWOOD = "hardwood"
    COMPOSITE = "composite"


class MatMaterial(Enum):
    TIMBER_MAT = "timber_mat"
    COMPOSITE_MAT = "composite_mat"
    STEEL_PLATE = "steel_plate"


def _name(material: Enum) -> str:
    return material.value.replace("_", " ").title()


# Support variants. Contact area is what spreads load into the soil.


@dataclass(frozen=True)
class OutriggerPadSupport:
    pad_diameter_m: float
    pad_material: PadMaterial = PadMaterial.STEEL

    @property
    def contact_area_m2(self) -> float:
        return math.pi * (self.pad_diameter_m / 2.0) ** 2

    @property
    def description(self) -> str:
        return f"{self.pad_diameter_m:.1f}m {_name(self.pad_material)} pad"


@dataclass(frozen=True)
class TireSupport:
    tire_width_m: float
    tire_diameter_m: float

    @property
    def contact_area_m2(self) -> float:
        # Footprint length taken as 15 % of the tire diameter.
        return self.tire_width_m * self.tire_diameter_m * 0.15

    @property
    def description(self) -> str:
        return "Tire support"


@dataclass(frozen=True)
class MatWithPadSupport:
    mat_length_m: float
    mat_width_m: float
    mat_material: MatMaterial
    pad_diameter_m: float
    pad_material: PadMaterial = PadMaterial.STEEL

    @property
    def contact_area_m2(self) -> float:
        return self.mat_length_m * self.mat_width_m

    @property
    def description(self) -> str:
        return (
            f"{self.mat_length_m:.1f}m×{self.mat_width_m:.1f}m {_name(self.mat_material)}"
            f" + {self.pad_diameter_m:.1f}m {_name(self.pad_material)} pad"
        )


@dataclass(frozen=True)
class MatSupport:
    mat_length_m: float
    mat_width_m: float
    mat_material: MatMaterial = MatMaterial.TIMBER_MAT

    @property
    def contact_area_m2(self) -> float:
        return self.mat_length_m * self.mat_width_m

    @property
    def description(self) -> str:
        return f"{self.mat_length_m:.1f}m×{self.mat_width_m:.1f}m {_name(self.mat_material)}"


SupportType = OutriggerPadSupport | TireSupport | MatWithPadSupport | MatSupport


@dataclass(frozen=True)
class SupportPoint:
    """A point where crane weight reaches the ground."""

    position: Point3D
    load_kg: float
    support_type: SupportType

    @classmethod
    def with_pad(
        cls,
        position: Point3D,
        load_kg: float,
        pad_diameter_m: float,
        pad_material: PadMaterial = PadMaterial.STEEL,
    ) -> "SupportPoint":
        return cls(position, load_kg, OutriggerPadSupport(pad_diameter_m, pad_material))

    @classmethod
    def with_mat_and_pad(
        cls,
        position: Point3D,
        load_kg: float,
        mat_length_m: float,
        mat_width_m: float,
        mat_material: MatMaterial,
        pad_diameter_m: float,
        pad_material: PadMaterial = PadMaterial.STEEL,
    ) -> "SupportPoint":
        support = MatWithPadSupport(mat_length_m, mat_width_m, mat_material, pad_diameter_m, pad_material)
        return cls(position, load_kg, support)

    @property
    def contact_area_m2(self) -> float:
        return self.support_type.contact_area_m2


@dataclass(frozen=True)
class CraneMat:
    material: MatMaterial
    length_m: float
    width_m: float
    thickness_m: float
    weight_kg: float
    stacked_count: int = 1

    @property
    def area_m2(self) -> float:
        return self.length_m * self.width_m

    @property
    def total_weight_kg(self) -> float:
        return self.weight_kg * self.stacked_count


@dataclass(frozen=True)
class OutriggerPad:
    """Float geometry: circular (diameter) or rectangular (width × length), optionally on mats."""

    diameter_m: float | None = None
    width_m: float | None = None
    length_m: float | None = None
    mats: tuple[CraneMat, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.diameter_m is None and (self.width_m is None or self.length_m is None):
            raise ValueError("OutriggerPad needs a diameter or both width and length")

    @property
    def pad_area_m2(self) -> float:
        if self.diameter_m is not None:
            return math.pi * (self.diameter_m / 2.0) ** 2
        return self.width_m * self.length_m

    @property
    def bearing_area_m2(self) -> float:
        """Area spreading load into the soil: the largest mat if any, else the pad."""
        if self.mats:
            return max(m.area_m2 for m in self.mats)
        return self.pad_area_m2


@dataclass
class GroundConfiguration:
    support_points: list[SupportPoint]
    soil_type: Soil
    safety_factor: float = 2.0

    def analyze(self):
        """Bearing pressure at every support point.

        Returns:
            GroundBearingAnalysis

        Raises:
            GroundBearingError: No support points, safety factor below 1 or a
                non-positive contact area.
        """
        from .analysis import analyze_ground_bearing

        return analyze_ground_bearing(self)


__all__ = [
    "SoilType",
    "CustomSoil",
    "Soil",
    "PadMaterial",
    "MatMaterial",
    "OutriggerPadSupport",
    "TireSupport",
    "MatWithPadSupport",
    "MatSupport",
    "SupportType",
    "SupportPoint",
    "CraneMat",
    "OutriggerPad",
    "GroundConfiguration",
]
