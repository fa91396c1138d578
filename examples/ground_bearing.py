"""
Example 3: Outrigger ground bearing on different soils.

Compares bare pads against timber mats for the same crane and load.
"""
from lifty import (
    CraneConfiguration,
    GroundConfiguration,
    MatMaterial,
    SoilType,
    SupportPoint,
    get_crane_spec,
    support_points_from_crane,
)


def main():
    crane = CraneConfiguration(get_crane_spec("liebherr_ltm_1100_5_2"))
    crane.outriggers.preset_max_extension()
    crane.counterweight.preset_max()
    load_kg = 12000.0

    pads = support_points_from_crane(crane, extra_load_kg=load_kg)
    mats = [
        SupportPoint.with_mat_and_pad(p.position, p.load_kg, 2.4, 2.4, MatMaterial.TIMBER_MAT, 0.6)
        for p in pads
    ]

    print("=" * 60)
    print(f"Ground bearing: {crane.get_total_weight_kg():.0f} kg crane + {load_kg:.0f} kg load")
    print(f"Per pad: {pads[0].load_kg:.0f} kg")
    print("=" * 60)
    print(f"{'Soil':<18}{'Bare pad':>14}{'2.4 m mat':>14}")

    for soil in (SoilType.HARD_ROCK, SoilType.DENSE_GRAVEL, SoilType.MEDIUM_SAND, SoilType.STIFF_CLAY, SoilType.SOFT_CLAY):
        row = []
        for supports in (pads, mats):
            result = GroundConfiguration(supports, soil, safety_factor=2.0).analyze()
            flag = "OK" if result.is_safe else "FAIL"
            row.append(f"{result.max_utilization_percent:6.0f}% {flag:<4}")
        print(f"{soil.label:<18}{row[0]:>14}{row[1]:>14}")

    print(f"\nBare pad: {pads[0].support_type.description}, {pads[0].contact_area_m2:.2f} m²")
    print(f"Mat:      {mats[0].support_type.description}, {mats[0].contact_area_m2:.2f} m²")


if __name__ == "__main__":
    main()
