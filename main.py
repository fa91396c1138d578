"""
Lifty Example: Full lift check for a precast panel.

This example demonstrates:
1. Picking a crane from the catalog and setting up the lift
2. Checking the load against the de-rated load chart
3. Solving the sling tensions for a four-point lift
4. Checking ground bearing under the outrigger pads
"""
from lifty import (
    CraneConfiguration,
    GroundConfiguration,
    RiggingConfiguration,
    SlingSpec,
    SoilType,
    Synthetic,
    get_crane_spec,
    load_from_preset,
    slings_from_pick_points,
    support_points_from_crane,
)


def main() -> None:
    # 1. Crane: 30 m boom at 60°, outriggers fully out, full counterweight
    spec = get_crane_spec("liebherr_ltm_1100_5_2")
    crane = CraneConfiguration(spec, boom_length_m=30.0, boom_angle_deg=60.0, hoist_length_m=12.0)
    crane.outriggers.preset_max_extension()
    crane.counterweight.preset_max()
    crane.validate()

    print(f"Crane: {spec.display_name} ({spec.crane_type.label})")
    print(f"  Radius: {crane.get_radius():.1f} m")
    print(f"  Hook height: {crane.get_hook_height():.1f} m")

    # 2. Load at the hook radius
    hook = crane.get_hook_position()
    load = load_from_preset("concrete_panel", base=(hook[0], hook[1], 0.0))

    capacity = crane.get_current_capacity()
    print(f"\nLoad: {load.name}, {load.weight_kg:.0f} kg")
    print(f"  Chart capacity: {capacity:.0f} kg")
    print(f"  Within safe working load: {crane.can_lift(load.weight_kg)}")

    # 3. Rigging: four polyester slings to the hook
    sling = SlingSpec(
        id="polyester_5t",
        material=Synthetic("polyester"),
        length_m=6.0,
        rated_capacity_kg=5000.0,
        width_mm=150.0,
    )
    rigging = RiggingConfiguration(
        load=load,
        slings=slings_from_pick_points(load, hook, sling),
        crane_hook_position=hook,
    )
    result = rigging.analyze()

    print("\nSling Tensions:")
    for t in result.sling_tensions:
        print(
            f"  {t.sling_id}: {t.tension_kg:.0f} kg at {t.angle_from_vertical_deg:.1f}° "
            f"({t.utilization_percent:.0f}% of {t.capacity_kg:.0f} kg)"
        )
    print(f"  Safety factor: {result.safety_analysis.overall_safety_factor:.1f}:1")
    print(f"  Balanced: {result.is_balanced}")
    for warning in result.warnings:
        print(f"  ⚠ {warning}")

    # 4. Ground: crane weight plus load and rigging on the four pads
    ground = GroundConfiguration(
        support_points=support_points_from_crane(
            crane, extra_load_kg=load.weight_kg + result.total_rigging_weight_kg
        ),
        soil_type=SoilType.DENSE_GRAVEL,
        safety_factor=2.0,
    )
    bearing = ground.analyze()

    print(f"\nGround Bearing ({bearing.soil_type.label}):")
    print(f"  Max pressure: {bearing.max_pressure_kpa:.0f} kPa")
    print(f"  Utilization: {bearing.max_utilization_percent:.0f}%")
    print(f"  Safe: {bearing.is_safe}")

    # 5. Plots
    print("\nGenerating plots...")
    spec.capacity_chart.plot(radius_m=crane.get_radius(), save_path="load_chart_example.svg")
    result.plot(save_path="rigging_example.svg")


if __name__ == "__main__":
    main()
