"""
Ground bearing: soil capacities, support contact areas and pressure checks.
"""

from .models import (
    SoilType,
    CustomSoil,
    Soil,
    PadMaterial,
    MatMaterial,
    OutriggerPadSupport,
    TireSupport,
    MatWithPadSupport,
    MatSupport,
    SupportType,
    SupportPoint,
    CraneMat,
    OutriggerPad,
    GroundConfiguration,
)
from .analysis import (
    BearingPressure,
    GroundBearingAnalysis,
    analyze_ground_bearing,
    support_points_from_crane,
)

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
    "BearingPressure",
    "GroundBearingAnalysis",
    "analyze_ground_bearing",
    "support_points_from_crane",
]
