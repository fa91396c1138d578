"""
Example 2: Sling tensions for 2, 3 and 4 point lifts.

The same 6 t skid is rigged three ways and the results compared, including
the effect of an off-centre CoG and dynamic factors.
"""
from pathlib import Path

from lifty import (
    DynamicFactors,
    Load,
    PickPoint,
    RiggingConfiguration,
    SlingSpec,
    WireRope,
    apply_dynamic_factors,
    required_sling_capacity,
    slings_from_pick_points,
)

GALLERY = Path(__file__).parent / "gallery"


def skid(pick_points, cog=(0.0, 0.0, 0.5)):
    return Load(
        weight_kg=6000.0,
        center_of_gravity=cog,
        dimensions=(4.0, 2.0, 1.0),
        pick_points=[PickPoint(f"P{i + 1}", p) for i, p in enumerate(pick_points)],
        name="Pump skid",
    )


def report(title, rigging):
    result = rigging.analyze()

    print(f"\n{title}")
    print("-" * 60)
    for t in result.sling_tensions:
        print(
            f"  {t.sling_id}: {t.tension_kg:7.0f} kg  {t.angle_from_vertical_deg:5.1f}°  "
            f"{t.utilization_percent:5.1f}%  {'OK' if t.is_safe else 'OVERLOADED'}"
        )
    print(f"  Safety factor: {result.safety_analysis.overall_safety_factor:.1f}:1 "
          f"(critical: {result.safety_analysis.critical_sling_id})")
    print(f"  Balanced: {result.is_balanced}  tilt: {result.tilt_angle_deg}")
    for warning in result.warnings:
        print(f"  ⚠ {warning}")
    return result


def main():
    hook = (0.0, 0.0, 4.0)
    sling = SlingSpec("wire_16mm", WireRope("EIPS"), length_m=4.0, rated_capacity_kg=12000.0, diameter_mm=16.0)

    print("=" * 60)
    print("Pump skid rigging")
    print("=" * 60)

    two = skid([(1.5, 0.0, 1.0), (-1.5, 0.0, 1.0)])
    report("Two-point lift", RiggingConfiguration(two, slings_from_pick_points(two, hook, sling), hook))

    three = skid([(1.5, 0.0, 1.0), (-1.0, 0.8, 1.0), (-1.0, -0.8, 1.0)])
    report("Three-point lift", RiggingConfiguration(three, slings_from_pick_points(three, hook, sling), hook))

    corners = [(1.6, 0.8, 1.0), (1.6, -0.8, 1.0), (-1.6, 0.8, 1.0), (-1.6, -0.8, 1.0)]
    four = skid(corners)
    result = report("Four-point lift", RiggingConfiguration(four, slings_from_pick_points(four, hook, sling), hook))

    offset = skid(corners, cog=(0.6, 0.2, 0.5))
    report(
        "Four-point lift, CoG off centre",
        RiggingConfiguration(offset, slings_from_pick_points(offset, hook, sling), hook),
    )

    print("\nDynamic tension on the four-point lift")
    print("-" * 60)
    static = result.max_tension_kg
    for factors in (DynamicFactors(impact_loading=True), DynamicFactors(wind_speed_ms=12.0)):
        print(f"  {factors}: {apply_dynamic_factors(static, factors):.0f} kg")

    print(f"\nRequired rated capacity per sling (4 legs, 35°): "
          f"{required_sling_capacity(6000.0, 4, 35.0):.0f} kg")

    GALLERY.mkdir(exist_ok=True)
    result.plot(show=False, save_path=GALLERY / "rigging_four_point.svg")


if __name__ == "__main__":
    main()
