"""Outrigger legs and the four-leg outrigger system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import math

from ..common.constants import Point3D
from ..common.errors import OutriggerExtensionInvalid, OutriggerPositionInvalid, UnsafeConfiguration

DEFAULT_PAD_DIAMETER_M = 0.6
DEFAULT_JACK_EXTENSION_M = 0.5


class OutriggerPosition(Enum):
    FRONT_LEFT = "front_left"
    FRONT_RIGHT = "front_right"
    REAR_LEFT = "rear_left"
    REAR_RIGHT = "rear_right"

    @property
    def label(self) -> str:
        return _POSITION_LABELS[self]

    @property
    def signs(self) -> tuple[float, float]:
        """(x, y) direction of the corner from the crane centre."""
        return _POSITION_SIGNS[self]

    @classmethod
    def parse(cls, value: "OutriggerPosition | str") -> "OutriggerPosition":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise OutriggerPositionInvalid(str(value)) from None


_POSITION_LABELS = {
    OutriggerPosition.FRONT_LEFT: "Front Left",
    OutriggerPosition.FRONT_RIGHT: "Front Right",
    OutriggerPosition.REAR_LEFT: "Rear Left",
    OutriggerPosition.REAR_RIGHT: "Rear Right",
}

_POSITION_SIGNS = {
    OutriggerPosition.FRONT_LEFT: (-1.0, 1.0),
    OutriggerPosition.FRONT_RIGHT: (1.0, 1.0),
    OutriggerPosition.REAR_LEFT: (-1.0, -1.0),
    OutriggerPosition.REAR_RIGHT: (1.0, -1.0),
}


# Deployment states. Any state may be assigned directly; only Set is deployed.


@dataclass(frozen=True)
class Retracted:
    pass


@dataclass(frozen=True)
class Extended:
    pass


@dataclass(frozen=True)
class Set:
    """Beam extended and jacked down onto its pad."""

    jack_extension_m: float = DEFAULT_JACK_EXTENSION_M


OutriggerDeployment = Retracted | Extended | Set


@dataclass
class OutriggerConfig:
    """One outrigger leg.

    Attributes:
        position: Corner of the carrier
        deployment: Retracted, Extended or Set
        extension_m: Current beam extension
        max_extension_m: Full beam extension
        min_extension_m: Shortest usable extension (half of max by default)
        pad_diameter_m: Float (pad) diameter
    """

    position: OutriggerPosition
    max_extension_m: float
    deployment: OutriggerDeployment = field(default_factory=Retracted)
    extension_m: float | None = None
    min_extension_m: float | None = None
    pad_diameter_m: float = DEFAULT_PAD_DIAMETER_M

    def __post_init__(self) -> None:
        self.position = OutriggerPosition.parse(self.position)
        if self.max_extension_m <= 0.0:
            raise ValueError("max_extension_m must be positive")
        if self.min_extension_m is None:
            self.min_extension_m = self.max_extension_m * 0.5
        if self.extension_m is None:
            self.extension_m = self.max_extension_m
        if self.pad_diameter_m <= 0.0:
            raise ValueError("pad_diameter_m must be positive")

    def is_deployed(self) -> bool:
        return isinstance(self.deployment, Set)

    @property
    def extension_ratio(self) -> float:
        return self.extension_m / self.max_extension_m

    def get_contact_point(self, base_width_m: float) -> Point3D:
        """Pad position relative to the crane centre (z = 0).

        The carrier corner (±w/2, ±w/2) is pushed out along its diagonal by
        ``extension / diagonal``. Deployment state is ignored.
        """
        half = base_width_m / 2.0
        diagonal = math.sqrt(2.0 * half * half)
        scale = 1.0 + (self.extension_m / diagonal if diagonal > 0.0 else 0.0)
        sx, sy = self.position.signs
        return (sx * half * scale, sy * half * scale, 0.0)

    def validate(self) -> None:
        if not (self.min_extension_m <= self.extension_m <= self.max_extension_m):
            raise OutriggerExtensionInvalid(self.extension_m, self.min_extension_m, self.max_extension_m)


@dataclass
class OutriggerSystem:
    """Four outriggers (FL, FR, RL, RR) plus carrier footprint."""

    outriggers: list[OutriggerConfig]
    base_width_m: float
    base_length_m: float
    all_required: bool = True

    def __post_init__(self) -> None:
        positions = [o.position for o in self.outriggers]
        if len(positions) != 4 or set(positions) != set(OutriggerPosition):
            raise ValueError("OutriggerSystem needs exactly one outrigger per corner")

    @classmethod
    def create(
        cls,
        base_width_m: float,
        base_length_m: float,
        max_extension_m: float,
        pad_diameter_m: float = DEFAULT_PAD_DIAMETER_M,
    ) -> "OutriggerSystem":
        """Four retracted outriggers at full extension length."""
        outriggers = [
            OutriggerConfig(position=pos, max_extension_m=max_extension_m, pad_diameter_m=pad_diameter_m)
            for pos in OutriggerPosition
        ]
        return cls(outriggers=outriggers, base_width_m=base_width_m, base_length_m=base_length_m)

    def get_outrigger(self, position: OutriggerPosition | str) -> OutriggerConfig:
        position = OutriggerPosition.parse(position)
        for outrigger in self.outriggers:
            if outrigger.position is position:
                return outrigger
        raise OutriggerPositionInvalid(position.value)

    def all_deployed(self) -> bool:
        if self.all_required:
            return all(o.is_deployed() for o in self.outriggers)
        return any(o.is_deployed() for o in self.outriggers)

    def average_extension_ratio(self) -> float:
        return sum(o.extension_ratio for o in self.outriggers) / len(self.outriggers)

    def get_all_contact_points(self) -> list[Point3D]:
        """Contact points of deployed outriggers only."""
        return [o.get_contact_point(self.base_width_m) for o in self.outriggers if o.is_deployed()]

    def calculate_support_area(self) -> float:
        """Bounding-rectangle area of the deployed pads.

        Only defined for exactly four deployed points; any other count gives 0.
        """
        points = self.get_all_contact_points()
        if len(points) != 4:
            return 0.0

        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return (max(xs) - min(xs)) * (max(ys) - min(ys))

    def validate(self) -> None:
        for outrigger in self.outriggers:
            outrigger.validate()

        if self.all_required and not self.all_deployed():
            raise UnsafeConfiguration("Not all required outriggers are deployed")

    def set_extension_pct(self, fraction: float) -> None:
        """Set every beam to ``fraction`` of its max extension. Deployment is untouched."""
        for outrigger in self.outriggers:
            outrigger.extension_m = outrigger.max_extension_m * fraction

    def _preset(self, fraction: float | None) -> None:
        for outrigger in self.outriggers:
            if fraction is None:
                outrigger.extension_m = outrigger.min_extension_m
            else:
                outrigger.extension_m = outrigger.max_extension_m * fraction
            outrigger.deployment = Set(jack_extension_m=DEFAULT_JACK_EXTENSION_M)

    def preset_max_extension(self) -> None:
        self._preset(1.0)

    def preset_medium_extension(self) -> None:
        self._preset(0.75)

    def preset_min_extension(self) -> None:
        self._preset(None)

    def preset_on_tires(self) -> None:
        """Retract every outrigger. Beam extensions keep their values."""
        for outrigger in self.outriggers:
            outrigger.deployment = Retracted()


__all__ = [
    "OutriggerPosition",
    "Retracted",
    "Extended",
    "Set",
    "OutriggerDeployment",
    "OutriggerConfig",
    "OutriggerSystem",
]
