"""
Example 4: Load chart import and swing clearance.

Builds a capacity chart from a manufacturer-style table, finds the boom angle
for a landing point and checks a swing past a building.
"""
from lifty import (
    CapacityChartBuilder,
    CraneConfiguration,
    calculate_boom_angle_for_height,
    calculate_hoist_length_for_height,
    calculate_swing_path,
    check_clearance,
    get_crane_spec,
)

TABLE = """
BOOM LENGTH: 24.0m
Radius(m)  Capacity(kg)
3.0        40000
6.0        26000
10.0       15000
16.0       8000
20.0       5500

BOOM LENGTH: 32.0m
Radius(m)  Capacity(kg)
4.0        32000
10.0       13500
16.0       7200
24.0       4000
28.0       3100
"""


def main():
    chart = CapacityChartBuilder().add_charts_from_table(TABLE).build()
    spec = get_crane_spec("tadano_gr_600xl").with_capacity_chart(chart)

    # Landing point: 14 m out, 6 m above ground
    boom = 24.0
    angle = calculate_boom_angle_for_height(boom, 14.0, 6.0, spec.boom_pivot_height_m, 0.0)
    if angle is None:
        print("Landing point is out of reach")
        return

    crane = CraneConfiguration(spec, boom_length_m=boom, boom_angle_deg=angle)
    crane.outriggers.preset_max_extension()
    crane.counterweight.preset_max()
    crane.hoist_length_m = calculate_hoist_length_for_height(crane.get_boom_tip_position()[2], 6.0)
    crane.validate()

    print("=" * 60)
    print(f"{spec.display_name} with imported chart")
    print("=" * 60)
    print(f"  Boom angle: {angle:.1f}°  radius: {crane.get_radius():.1f} m")
    print(f"  Hoist length: {crane.hoist_length_m:.1f} m  hook height: {crane.get_hook_height():.1f} m")
    print(f"  Capacity: {crane.get_current_capacity():.0f} kg")
    print(f"  Interpolated (28 m boom, no de-rating): {chart.get_capacity_interpolated(28.0, 14.0):.0f} kg")

    # Swing from over the front to over the side past a 10 m building
    path = calculate_swing_path(
        crane.position, boom, angle, (0.0, 90.0), spec.boom_pivot_height_m, crane.hoist_length_m, 19
    )
    building = ((9.0, 9.0, 5.0), (4.0, 4.0, 10.0))
    for margin in (0.0, 0.5, 1.0):
        clear = check_clearance(path, (3.0, 1.5, 1.0), building[0], building[1], margin)
        print(f"  Clearance with {margin:.1f} m margin: {'clear' if clear else 'COLLISION'}")


if __name__ == "__main__":
    main()
