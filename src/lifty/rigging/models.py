"""
Rigging input models: loads, pick points, slings and hardware.

Positions are world coordinates in metres. Material, grade and hardware
variants are small frozen dataclasses dispatched with ``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from ..common.constants import (
    CHAIN_KG_PER_M_PER_MM,
    SYNTHETIC_KG_PER_M_PER_CM,
    WIRE_ROPE_KG_PER_M_PER_MM,
    Point3D,
    RiggingCriteria,
    Vector3D,
)


class HitchType(Enum):
    VERTICAL = "vertical"
    CHOKER = "choker"
    BASKET = "basket"
    BRIDLE = "bridle"

    @property
    def capacity_factor(self) -> float:
        """Capacity relative to a vertical hitch."""
        return _HITCH_FACTORS[self]


_HITCH_FACTORS = {
    HitchType.VERTICAL: 1.0,
    HitchType.CHOKER: 0.75,
    HitchType.BASKET: 2.0,
    HitchType.BRIDLE: 1.0,
}


WireRopeGrade = Literal["IPS", "EIPS"]
ChainGrade = Literal["grade_80", "grade_100"]
SyntheticMaterial = Literal["nylon", "polyester", "dyneema"]


@dataclass(frozen=True)
class WireRope:
    grade: WireRopeGrade = "EIPS"


@dataclass(frozen=True)
class Chain:
    grade: ChainGrade = "grade_80"


@dataclass(frozen=True)
class Synthetic:
    material: SyntheticMaterial = "polyester"


SlingMaterial = WireRope | Chain | Synthetic


@dataclass(frozen=True)
class SlingSpec:
    """Catalogue data for one sling.

    Attributes:
        id: Sling identifier
        material: WireRope, Chain or Synthetic
        length_m: Effective length
        rated_capacity_kg: Working load limit in a vertical hitch
        safety_factor: Design factor of the sling (5:1 typical)
        diameter_mm: Rope or chain diameter
        width_mm: Webbing width for synthetic slings
    """

    id: str
    material: SlingMaterial
    length_m: float
    rated_capacity_kg: float
    safety_factor: float = 5.0
    diameter_mm: float | None = None
    width_mm: float | None = None

    def __post_init__(self) -> None:
        if self.length_m <= 0.0:
            raise ValueError("length_m must be positive")
        if self.rated_capacity_kg <= 0.0:
            raise ValueError("rated_capacity_kg must be positive")

    def estimate_weight_kg(self) -> float:
        """Rough self-weight from material, length and size."""
        if isinstance(self.material, WireRope):
            return self.length_m * (self.diameter_mm or 0.0) * WIRE_ROPE_KG_PER_M_PER_MM
        if isinstance(self.material, Chain):
            return self.length_m * (self.diameter_mm or 0.0) * CHAIN_KG_PER_M_PER_MM
        if isinstance(self.material, Synthetic):
            width_cm = (self.width_mm or 0.0) / 10.0
            return self.length_m * width_cm * SYNTHETIC_KG_PER_M_PER_CM
        raise TypeError(f"Unknown sling material {self.material!r}")


@dataclass(frozen=True)
class Sling:
    """A sling from a load attachment point up to the hook.

    ``id`` is ``name`` when given, else the spec id. Name slings that share a spec.
    """

    spec: SlingSpec
    attachment_point: Point3D
    hook_point: Point3D
    hitch_type: HitchType = HitchType.VERTICAL
    name: str | None = None

    @property
    def id(self) -> str:
        return self.name if self.name is not None else self.spec.id


@dataclass(frozen=True)
class PickPoint:
    id: str
    position: Point3D
    active: bool = True


@dataclass
class Load:
    """The object being lifted.

    Attributes:
        weight_kg: Load weight
        center_of_gravity: CoG in world coordinates
        dimensions: Bounding box (length x, width y, height z)
        pick_points: Candidate attachment points (some may be inactive)
        name: Optional label
    """

    weight_kg: float
    center_of_gravity: Point3D
    dimensions: Vector3D
    pick_points: list[PickPoint] = field(default_factory=list)
    name: str | None = None

    def __post_init__(self) -> None:
        if self.weight_kg <= 0.0:
            raise ValueError("weight_kg must be positive")
        if any(d < 0.0 for d in self.dimensions):
            raise ValueError("dimensions must be non-negative")

    @property
    def active_pick_points(self) -> list[PickPoint]:
        return [p for p in self.pick_points if p.active]


# Hardware variants


@dataclass(frozen=True)
class Shackle:
    size_mm: float


@dataclass(frozen=True)
class Hook:
    type_name: str


@dataclass(frozen=True)
class SpreaderBeam:
    length_m: float


@dataclass(frozen=True)
class SpreaderFrame:
    width_m: float
    length_m: float


@dataclass(frozen=True)
class LiftingBeam:
    length_m: float
    beam_weight_kg: float


@dataclass(frozen=True)
class SnatchBlock:
    sheave_diameter_mm: float


@dataclass(frozen=True)
class Swivel:
    pass


HardwareType = Shackle | Hook | SpreaderBeam | SpreaderFrame | LiftingBeam | SnatchBlock | Swivel


@dataclass(frozen=True)
class RiggingHardware:
    hardware_type: HardwareType
    rated_capacity_kg: float
    weight_kg: float
    position: Point3D = (0.0, 0.0, 0.0)

    @property
    def label(self) -> str:
        return type(self.hardware_type).__name__


@dataclass
class RiggingConfiguration:
    """Load, slings, hardware and hook position for one analysis run."""

    load: Load
    slings: list[Sling]
    crane_hook_position: Point3D
    hardware: list[RiggingHardware] = field(default_factory=list)

    def analyze(self, criteria: RiggingCriteria | None = None):
        """Solve sling tensions and judge the rigging.

        Returns:
            RiggingAnalysis

        Raises:
            RiggingError: Unsolvable or degenerate rigging.
        """
        from .analysis import analyze_rigging

        return analyze_rigging(self, criteria=criteria)


__all__ = [
    "HitchType",
    "WireRope",
    "Chain",
    "Synthetic",
    "SlingMaterial",
    "SlingSpec",
    "Sling",
    "PickPoint",
    "Load",
    "Shackle",
    "Hook",
    "SpreaderBeam",
    "SpreaderFrame",
    "LiftingBeam",
    "SnatchBlock",
    "Swivel",
    "HardwareType",
    "RiggingHardware",
    "RiggingConfiguration",
]
