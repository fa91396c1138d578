"""
Exception hierarchy.

Every error is a ``ValueError`` so code written against plain ``ValueError``
keeps working. Validation is fail-fast: the first violated constraint is raised.
"""
from __future__ import annotations


class LiftyError(ValueError):
    """Base class for all lifty errors."""


# === Crane configuration ===


class ConfigurationError(LiftyError):
    """A crane configuration is out of range or cannot be evaluated."""


class BoomLengthOutOfRange(ConfigurationError):
    def __init__(self, current: float, min: float, max: float) -> None:
        self.current = current
        self.min = min
        self.max = max
        super().__init__(f"Boom length {current:.1f}m is out of range ({min:.1f}m - {max:.1f}m)")


class BoomAngleInvalid(ConfigurationError):
    def __init__(self, angle: float, min: float = 0.0, max: float = 85.0) -> None:
        self.angle = angle
        self.min = min
        self.max = max
        super().__init__(f"Boom angle {angle:.1f}° is invalid (must be {min:.0f}-{max:.0f}°)")


class RadiusOutOfRange(ConfigurationError):
    def __init__(self, current: float, min: float, max: float) -> None:
        self.current = current
        self.min = min
        self.max = max
        super().__init__(f"Radius {current:.1f}m is out of range ({min:.1f}m - {max:.1f}m)")


class HeightExceeded(ConfigurationError):
    def __init__(self, current: float, max: float) -> None:
        self.current = current
        self.max = max
        super().__init__(f"Hook height {current:.1f}m exceeds maximum {max:.1f}m")


class LoadExceedsCapacity(ConfigurationError):
    def __init__(self, load_kg: float, capacity_kg: float, radius_m: float) -> None:
        self.load_kg = load_kg
        self.capacity_kg = capacity_kg
        self.radius_m = radius_m
        super().__init__(
            f"Load {load_kg:.0f}kg exceeds capacity {capacity_kg:.0f}kg at {radius_m:.1f}m radius"
        )


class OutriggerPositionInvalid(ConfigurationError):
    def __init__(self, position: str) -> None:
        self.position = position
        super().__init__(f"Invalid outrigger position: {position}")


class OutriggerExtensionInvalid(ConfigurationError):
    def __init__(self, extension: float, min: float, max: float) -> None:
        self.extension = extension
        self.min = min
        self.max = max
        super().__init__(
            f"Outrigger extension {extension:.1f}m out of range ({min:.1f}m - {max:.1f}m)"
        )


class CounterweightInvalid(ConfigurationError):
    def __init__(self, weight_kg: float, min: float, max: float) -> None:
        self.weight_kg = weight_kg
        self.min = min
        self.max = max
        super().__init__(
            f"Counterweight {weight_kg:.0f}kg invalid (must be {min:.0f}kg - {max:.0f}kg)"
        )


class CapacityChartNotFound(ConfigurationError):
    def __init__(self, boom_length: float) -> None:
        self.boom_length = boom_length
        super().__init__(f"No capacity chart found for boom length {boom_length:.1f}m")


class UnsafeConfiguration(ConfigurationError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsafe configuration: {reason}")


# === Rigging ===


class RiggingError(LiftyError):
    """Rigging geometry cannot be solved or is structurally invalid."""


class InsufficientPickPoints(RiggingError):
    def __init__(self, message: str = "At least one sling is required") -> None:
        super().__init__(message)


class SlingOverloaded(RiggingError):
    def __init__(self, sling_id: str, utilization_percent: float) -> None:
        self.sling_id = sling_id
        self.utilization_percent = utilization_percent
        super().__init__(f"Sling '{sling_id}' overloaded ({utilization_percent:.0f}% of capacity)")


class UnbalancedLoad(RiggingError):
    def __init__(self, tilt_angle_deg: float) -> None:
        self.tilt_angle_deg = tilt_angle_deg
        super().__init__(f"Load is unbalanced (tilt {tilt_angle_deg:.1f}°)")


class InvalidRiggingConfiguration(RiggingError):
    """Degenerate geometry: coplanar slings, zero-length slings, too many slings."""


class RiggingSolveError(RiggingError):
    """The linear solve itself failed."""


# === Ground bearing / parsing ===


class GroundBearingError(LiftyError):
    """Ground configuration cannot be analyzed."""


class ParseError(LiftyError):
    """Malformed load-chart input.

    ``line`` is the 1-based line number of the offending row when known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)


__all__ = [
    "LiftyError",
    "ConfigurationError",
    "BoomLengthOutOfRange",
    "BoomAngleInvalid",
    "RadiusOutOfRange",
    "HeightExceeded",
    "LoadExceedsCapacity",
    "OutriggerPositionInvalid",
    "OutriggerExtensionInvalid",
    "CounterweightInvalid",
    "CapacityChartNotFound",
    "UnsafeConfiguration",
    "RiggingError",
    "InsufficientPickPoints",
    "SlingOverloaded",
    "UnbalancedLoad",
    "InvalidRiggingConfiguration",
    "RiggingSolveError",
    "GroundBearingError",
    "ParseError",
]
