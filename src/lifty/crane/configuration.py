"""
Mutable crane scenario state.

``CraneConfiguration`` holds the scalars a UI writes (boom length and angle,
swing, hoist, outriggers, counterweight). Every derived quantity (radius,
hook position, current capacity) is recomputed from those scalars on each
call; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from ..common.constants import SAFE_WORKING_LOAD_RATIO, Point3D
from ..common.errors import (
    BoomAngleInvalid,
    BoomLengthOutOfRange,
    HeightExceeded,
    LoadExceedsCapacity,
    RadiusOutOfRange,
    UnsafeConfiguration,
)
from ..kinematics import ORIGIN, calculate_boom_tip_position, calculate_hook_position
from .counterweight import CounterweightConfig
from .outriggers import OutriggerSystem
from .spec import CraneSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CraneState:
    """Read-only snapshot of the pose of a crane."""

    boom_length_m: float
    boom_angle_deg: float
    swing_angle_deg: float
    hoist_length_m: float
    position: Point3D
    heading_deg: float


@dataclass
class CraneConfiguration:
    """A crane from the catalog set up for one lift.

    Attributes:
        spec: Immutable crane model data
        position: Slew centre at ground level in world coordinates
        heading_deg: Carrier heading (compass bearing)
        boom_length_m: Telescoped boom length
        boom_angle_deg: Boom angle above horizontal
        swing_angle_deg: Superstructure swing relative to the carrier front
        hoist_length_m: Cable paid out below the boom tip
        outriggers: Built from the spec when omitted
        counterweight: Built from the spec (empty) when omitted
    """

    spec: CraneSpec
    position: Point3D = ORIGIN
    heading_deg: float = 0.0
    boom_length_m: float = 30.0
    boom_angle_deg: float = 60.0
    swing_angle_deg: float = 0.0
    hoist_length_m: float = 10.0
    outriggers: OutriggerSystem | None = None
    counterweight: CounterweightConfig | None = None

    def __post_init__(self) -> None:
        if self.outriggers is None:
            self.outriggers = self.spec.create_outrigger_system()
        if self.counterweight is None:
            self.counterweight = self.spec.create_counterweight_config()

    # === Geometry ===

    def get_radius(self) -> float:
        return self.boom_length_m * math.cos(math.radians(self.boom_angle_deg))

    @property
    def azimuth_deg(self) -> float:
        """World bearing of the boom (swing + heading)."""
        return self.swing_angle_deg + self.heading_deg

    def get_boom_tip_position(self) -> Point3D:
        return calculate_boom_tip_position(
            self.position,
            self.boom_length_m,
            self.boom_angle_deg,
            self.azimuth_deg,
            self.spec.boom_pivot_height_m,
        )

    def get_hook_position(self) -> Point3D:
        return calculate_hook_position(
            self.position,
            self.boom_length_m,
            self.boom_angle_deg,
            self.azimuth_deg,
            self.spec.boom_pivot_height_m,
            self.hoist_length_m,
        )

    def get_hook_height(self) -> float:
        return self.get_hook_position()[2]

    # === Capacity ===

    def get_current_capacity(self) -> float | None:
        """De-rated chart capacity for the current pose and outrigger state."""
        if not self.outriggers.all_deployed():
            on_tires = True
            extension_ratio = 0.0
        else:
            on_tires = False
            extension_ratio = self.outriggers.average_extension_ratio()

        capacity = self.spec.capacity_chart.get_capacity(
            self.boom_length_m,
            self.get_radius(),
            self.swing_angle_deg,
            extension_ratio,
            on_tires,
        )
        logger.debug(
            "Capacity %s kg at %.2fm radius (extension %.2f, on tires %s)",
            capacity,
            self.get_radius(),
            extension_ratio,
            on_tires,
        )
        return capacity

    def can_lift(self, load_kg: float) -> bool:
        """True when ``load_kg`` is within the safe working load.

        A load between the safe working load and the chart capacity returns
        ``False``. A load above the chart capacity raises.

        Raises:
            UnsafeConfiguration: No capacity data for this pose.
            LoadExceedsCapacity: Load above the de-rated chart capacity.
        """
        capacity = self.get_current_capacity()
        if capacity is None:
            raise UnsafeConfiguration("Cannot determine capacity for current configuration")

        if load_kg > capacity:
            raise LoadExceedsCapacity(load_kg, capacity, self.get_radius())

        return load_kg <= capacity * SAFE_WORKING_LOAD_RATIO

    # === Validation ===

    def validate(self) -> None:
        """Raise the first violated constraint.

        Order: boom length, boom angle, radius, hook height, outriggers,
        counterweight. Hook height is measured from the crane base
        (``position[2]``), not from z = 0, so a crane standing on a raised
        platform gets the same height limit.
        """
        spec = self.spec

        if not (spec.min_boom_length_m <= self.boom_length_m <= spec.max_boom_length_m):
            raise BoomLengthOutOfRange(self.boom_length_m, spec.min_boom_length_m, spec.max_boom_length_m)

        if not (spec.min_boom_angle_deg <= self.boom_angle_deg <= spec.max_boom_angle_deg):
            raise BoomAngleInvalid(self.boom_angle_deg, spec.min_boom_angle_deg, spec.max_boom_angle_deg)

        radius = self.get_radius()
        if not (spec.min_radius_m <= radius <= spec.max_radius_m):
            raise RadiusOutOfRange(radius, spec.min_radius_m, spec.max_radius_m)

        hook_height = self.get_hook_height() - self.position[2]
        if hook_height > spec.max_tip_height_m:
            raise HeightExceeded(hook_height, spec.max_tip_height_m)

        self.outriggers.validate()
        self.counterweight.validate()

    # === Misc ===

    def get_total_weight_kg(self) -> float:
        return self.spec.base_weight_kg + self.counterweight.get_total_weight_kg()

    def state(self) -> CraneState:
        return CraneState(
            boom_length_m=self.boom_length_m,
            boom_angle_deg=self.boom_angle_deg,
            swing_angle_deg=self.swing_angle_deg,
            hoist_length_m=self.hoist_length_m,
            position=tuple(self.position),
            heading_deg=self.heading_deg,
        )


__all__ = ["CraneState", "CraneConfiguration"]
