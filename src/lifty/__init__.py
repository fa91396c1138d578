"""
Lifty - Crane Lift Safety Analysis Package

Check whether a mobile-crane lift is reachable, within the rated load chart,
statically balanced in its rigging and carried safely by the ground.

Example usage (Crane):
    from lifty import CraneConfiguration, get_crane_spec

    # 1. Pick a crane from the catalog
    spec = get_crane_spec("liebherr_ltm_1100_5_2")

    # 2. Set up the lift
    crane = CraneConfiguration(spec, boom_length_m=30.0, boom_angle_deg=60.0)
    crane.outriggers.preset_max_extension()
    crane.counterweight.preset_max()
    crane.validate()

    # 3. Query capacity
    print(f"Radius: {crane.get_radius():.1f} m")
    print(f"Capacity: {crane.get_current_capacity():.0f} kg")
    print(f"8 t within SWL: {crane.can_lift(8000)}")

Example usage (Rigging):
    from lifty import (
        HitchType, Load, PickPoint, RiggingConfiguration, SlingSpec, Synthetic,
        slings_from_pick_points,
    )

    load = Load(
        weight_kg=8000,
        center_of_gravity=(0.0, 0.0, 0.6),
        dimensions=(5.0, 2.5, 1.2),
        pick_points=[
            PickPoint("A", (2.0, 1.0, 1.2)),
            PickPoint("B", (2.0, -1.0, 1.2)),
            PickPoint("C", (-2.0, 1.0, 1.2)),
            PickPoint("D", (-2.0, -1.0, 1.2)),
        ],
    )
    spec = SlingSpec("polyester_3t", Synthetic("polyester"), length_m=5.0,
                     rated_capacity_kg=3000, width_mm=90)
    hook = (0.0, 0.0, 5.0)
    rigging = RiggingConfiguration(load, slings_from_pick_points(load, hook, spec), hook)

    result = rigging.analyze()
    for sling in result.sling_tensions:
        print(f"{sling.sling_id}: {sling.tension_kg:.0f} kg ({sling.utilization_percent:.0f}%)")
    print(result.warnings)
    result.plot()

Example usage (Ground):
    from lifty import GroundConfiguration, SoilType, support_points_from_crane

    ground = GroundConfiguration(
        support_points=support_points_from_crane(crane, extra_load_kg=8000),
        soil_type=SoilType.MEDIUM_GRAVEL,
        safety_factor=2.0,
    )
    print(ground.analyze().is_safe)
"""

import logging

from .common import (
    GRAVITY,
    DEFAULT_CRITERIA,
    RiggingCriteria,
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

from .kinematics import (
    calculate_boom_tip_position,
    calculate_hook_position,
    calculate_boom_angle_for_height,
    calculate_swing_path,
    check_clearance,
    calculate_hoist_length_for_height,
)

from .crane import (
    CapacityPoint,
    LoadChart,
    CapacityChart,
    CapacityChartBuilder,
    parse_csv,
    parse_json,
    parse_table,
    load_charts,
    OutriggerPosition,
    Retracted,
    Extended,
    Set,
    OutriggerConfig,
    OutriggerSystem,
    CounterweightConfig,
    CraneType,
    CraneSpec,
    crane_ids,
    get_crane_spec,
    all_crane_specs,
    CraneState,
    CraneConfiguration,
)

from .rigging import (
    HitchType,
    WireRope,
    Chain,
    Synthetic,
    SlingSpec,
    Sling,
    PickPoint,
    Load,
    RiggingHardware,
    RiggingConfiguration,
    RiggingAnalysis,
    SlingTensionAnalysis,
    SafetyAnalysis,
    SpreaderBeamAnalysis,
    DynamicFactors,
    analyze_rigging,
    apply_dynamic_factors,
    analyze_spreader_beam,
    suggest_pick_points,
    required_sling_capacity,
    slings_from_pick_points,
    LOAD_PRESETS,
    load_from_preset,
)

from .ground import (
    SoilType,
    CustomSoil,
    PadMaterial,
    MatMaterial,
    SupportPoint,
    GroundConfiguration,
    GroundBearingAnalysis,
    BearingPressure,
    analyze_ground_bearing,
    support_points_from_crane,
)

from .plotting import plot_load_chart, plot_rigging_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Constants and criteria
    "GRAVITY",
    "DEFAULT_CRITERIA",
    "RiggingCriteria",
    # Errors
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
    # Kinematics
    "calculate_boom_tip_position",
    "calculate_hook_position",
    "calculate_boom_angle_for_height",
    "calculate_swing_path",
    "check_clearance",
    "calculate_hoist_length_for_height",
    # Crane
    "CapacityPoint",
    "LoadChart",
    "CapacityChart",
    "CapacityChartBuilder",
    "parse_csv",
    "parse_json",
    "parse_table",
    "load_charts",
    "OutriggerPosition",
    "Retracted",
    "Extended",
    "Set",
    "OutriggerConfig",
    "OutriggerSystem",
    "CounterweightConfig",
    "CraneType",
    "CraneSpec",
    "crane_ids",
    "get_crane_spec",
    "all_crane_specs",
    "CraneState",
    "CraneConfiguration",
    # Rigging
    "HitchType",
    "WireRope",
    "Chain",
    "Synthetic",
    "SlingSpec",
    "Sling",
    "PickPoint",
    "Load",
    "RiggingHardware",
    "RiggingConfiguration",
    "RiggingAnalysis",
    "SlingTensionAnalysis",
    "SafetyAnalysis",
    "SpreaderBeamAnalysis",
    "DynamicFactors",
    "analyze_rigging",
    "apply_dynamic_factors",
    "analyze_spreader_beam",
    "suggest_pick_points",
    "required_sling_capacity",
    "slings_from_pick_points",
    "LOAD_PRESETS",
    "load_from_preset",
    # Ground
    "SoilType",
    "CustomSoil",
    "PadMaterial",
    "MatMaterial",
    "SupportPoint",
    "GroundConfiguration",
    "GroundBearingAnalysis",
    "BearingPressure",
    "analyze_ground_bearing",
    "support_points_from_crane",
    # Plotting
    "plot_load_chart",
    "plot_rigging_result",
]

__version__ = "0.1.0"
