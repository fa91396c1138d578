"""
Example 1: Crane capacity across boom angles and swing.

Shows how the de-rating factors change the usable capacity for the same
boom and radius.
"""
from pathlib import Path

from lifty import CraneConfiguration, LoadExceedsCapacity, get_crane_spec

GALLERY = Path(__file__).parent / "gallery"


def main():
    spec = get_crane_spec("liebherr_ltm_1100_5_2")
    crane = CraneConfiguration(spec, boom_length_m=30.0)
    crane.counterweight.preset_max()

    print("=" * 60)
    print(f"{spec.display_name}: capacity vs boom angle (30 m boom)")
    print("=" * 60)

    crane.outriggers.preset_max_extension()
    for angle in (45.0, 55.0, 60.0, 70.0, 80.0):
        crane.boom_angle_deg = angle
        print(f"  {angle:4.0f}°  r = {crane.get_radius():5.1f} m  capacity = {crane.get_current_capacity():8.0f} kg")

    crane.boom_angle_deg = 60.0

    print("\n" + "=" * 60)
    print("De-rating at 15 m radius")
    print("=" * 60)

    for label, swing, setup in [
        ("Over front, full outriggers", 0.0, crane.outriggers.preset_max_extension),
        ("Over side, full outriggers", 90.0, crane.outriggers.preset_max_extension),
        ("Over rear, full outriggers", 180.0, crane.outriggers.preset_max_extension),
        ("Over front, 75% outriggers", 0.0, crane.outriggers.preset_medium_extension),
        ("Over front, on tires", 0.0, crane.outriggers.preset_on_tires),
    ]:
        setup()
        crane.swing_angle_deg = swing
        print(f"  {label:<30} {crane.get_current_capacity():8.0f} kg")

    crane.outriggers.preset_max_extension()
    crane.swing_angle_deg = 0.0

    print("\n" + "=" * 60)
    print("Lift checks")
    print("=" * 60)
    for load_kg in (8000.0, 20000.0, 30000.0):
        try:
            ok = crane.can_lift(load_kg)
            print(f"  {load_kg:8.0f} kg: {'OK' if ok else 'above safe working load'}")
        except LoadExceedsCapacity as exc:
            print(f"  {load_kg:8.0f} kg: {exc}")

    GALLERY.mkdir(exist_ok=True)
    spec.capacity_chart.plot(radius_m=crane.get_radius(), show=False, save_path=GALLERY / "load_chart.svg")


if __name__ == "__main__":
    main()
