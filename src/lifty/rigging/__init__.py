"""
Rigging: load and sling models, tension solvers and safety analysis.
"""

from .models import (
    HitchType,
    WireRope,
    Chain,
    Synthetic,
    SlingMaterial,
    SlingSpec,
    Sling,
    PickPoint,
    Load,
    Shackle,
    Hook,
    SpreaderBeam,
    SpreaderFrame,
    LiftingBeam,
    SnatchBlock,
    Swivel,
    HardwareType,
    RiggingHardware,
    RiggingConfiguration,
)
from .results import SlingTensionAnalysis, SafetyAnalysis, SpreaderBeamAnalysis, RiggingAnalysis
from .solvers import solve_tensions, sling_angle_from_vertical
from .analysis import (
    DynamicFactors,
    analyze_rigging,
    analyze_sling,
    check_balance,
    calculate_rigging_weight,
    analyze_safety,
    generate_warnings,
    apply_dynamic_factors,
    analyze_spreader_beam,
)
from .design import (
    suggest_pick_points,
    required_sling_capacity,
    slings_from_pick_points,
    LoadPreset,
    LOAD_PRESETS,
    load_from_preset,
)

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
    "SlingTensionAnalysis",
    "SafetyAnalysis",
    "SpreaderBeamAnalysis",
    "RiggingAnalysis",
    "solve_tensions",
    "sling_angle_from_vertical",
    "DynamicFactors",
    "analyze_rigging",
    "analyze_sling",
    "check_balance",
    "calculate_rigging_weight",
    "analyze_safety",
    "generate_warnings",
    "apply_dynamic_factors",
    "analyze_spreader_beam",
    "suggest_pick_points",
    "required_sling_capacity",
    "slings_from_pick_points",
    "LoadPreset",
    "LOAD_PRESETS",
    "load_from_preset",
]
