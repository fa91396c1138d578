"""
Common infrastructure shared by the crane, rigging and ground analyses.

Includes constants, tolerances, analysis criteria and the error hierarchy.
"""

from .constants import (
    GRAVITY,
    ZERO_TOLERANCE,
    LENGTH_TOLERANCE,
    DETERMINANT_TOLERANCE,
    SVD_TOLERANCE,
    POSITION_TOLERANCE,
    TENSION_TOLERANCE_KG,
    RADIUS_MATCH_TOLERANCE,
    BOOM_MATCH_TOLERANCE,
    SAFE_WORKING_LOAD_RATIO,
    DEFAULT_CRITERIA,
    Point3D,
    Vector3D,
    RiggingCriteria,
)
from .errors import (
    LiftyError,
    ConfigurationError,
    BoomLengthOutOfRange,
    BoomAngleInvalid,
    RadiusOutOfRange,
    HeightExceeded,
    LoadExceedsCapacity,
    OutriggerPositionInvalid,
    OutriggerExtensionInvalid,
    CounterweightInvalid,
    CapacityChartNotFound,
    UnsafeConfiguration,
    RiggingError,
    InsufficientPickPoints,
    SlingOverloaded,
    UnbalancedLoad,
    InvalidRiggingConfiguration,
    RiggingSolveError,
    GroundBearingError,
    ParseError,
)

__all__ = [
    "GRAVITY",
    "ZERO_TOLERANCE",
    "LENGTH_TOLERANCE",
    "DETERMINANT_TOLERANCE",
    "SVD_TOLERANCE",
    "POSITION_TOLERANCE",
    "TENSION_TOLERANCE_KG",
    "RADIUS_MATCH_TOLERANCE",
    "BOOM_MATCH_TOLERANCE",
    "SAFE_WORKING_LOAD_RATIO",
    "DEFAULT_CRITERIA",
    "Point3D",
    "Vector3D",
    "RiggingCriteria",
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
