from dataclasses import replace
import math

import pytest

from lifty import (
    BoomAngleInvalid,
    BoomLengthOutOfRange,
    CounterweightInvalid,
    CraneConfiguration,
    CraneSpec,
    HeightExceeded,
    LoadExceedsCapacity,
    RadiusOutOfRange,
    UnsafeConfiguration,
    get_crane_spec,
)


def test_defaults_build_outriggers_and_counterweight(ltm_1100: CraneSpec) -> None:
    crane = CraneConfiguration(ltm_1100)

    assert crane.position == (0.0, 0.0, 0.0)
    assert crane.outriggers.base_width_m == 2.75
    assert len(crane.outriggers.outriggers) == 4
    assert crane.counterweight.max_slabs == 16
    assert crane.counterweight.get_slab_count() == 0


def test_radius_and_hook_position(crane: CraneConfiguration) -> None:
    assert crane.get_radius() == pytest.approx(15.0)

    x, y, z = crane.get_hook_position()
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(15.0)
    assert z == pytest.approx(3.2 + 30.0 * math.sin(math.radians(60.0)) - 10.0)
    assert crane.get_hook_height() == pytest.approx(19.18, abs=0.01)


def test_heading_rotates_the_boom(ltm_1100: CraneSpec) -> None:
    crane = CraneConfiguration(ltm_1100, position=(100.0, 50.0, 2.0), heading_deg=90.0)

    x, y, z = crane.get_boom_tip_position()
    assert x == pytest.approx(115.0)
    assert y == pytest.approx(50.0, abs=1e-9)
    assert z == pytest.approx(2.0 + 3.2 + 30.0 * math.sin(math.radians(60.0)))


def test_capacity_with_full_outriggers(crane: CraneConfiguration) -> None:
    assert crane.get_current_capacity() == pytest.approx(25000.0)


def test_capacity_on_tires(ltm_1100: CraneSpec) -> None:
    crane = CraneConfiguration(ltm_1100)
    # Partial extension factor plus on-tires factor
    assert crane.get_current_capacity() == pytest.approx(25000.0 * 0.85 * 0.40)


def test_capacity_with_medium_outriggers(crane: CraneConfiguration) -> None:
    crane.outriggers.preset_medium_extension()
    assert crane.get_current_capacity() == pytest.approx(21250.0)


def test_capacity_over_rear(crane: CraneConfiguration) -> None:
    crane.swing_angle_deg = 180.0
    assert crane.get_current_capacity() == pytest.approx(25000.0 * 0.75)


def test_swing_factor_ignores_heading(crane: CraneConfiguration) -> None:
    crane.heading_deg = 180.0
    assert crane.get_current_capacity() == pytest.approx(25000.0)


def test_can_lift_within_safe_working_load(crane: CraneConfiguration) -> None:
    assert crane.can_lift(8000.0)
    # Above 75 % of capacity but still on the chart
    assert not crane.can_lift(20000.0)


def test_can_lift_above_chart_raises(crane: CraneConfiguration) -> None:
    with pytest.raises(LoadExceedsCapacity) as exc_info:
        crane.can_lift(30000.0)

    assert exc_info.value.capacity_kg == pytest.approx(25000.0)
    assert exc_info.value.radius_m == pytest.approx(15.0)


def test_can_lift_without_chart_raises() -> None:
    crane = CraneConfiguration(get_crane_spec("grove_gmk_5150l"))
    crane.outriggers.preset_max_extension()

    assert crane.get_current_capacity() is None
    with pytest.raises(UnsafeConfiguration, match="Cannot determine capacity"):
        crane.can_lift(1000.0)


def test_validate_passes_for_normal_setup(crane: CraneConfiguration) -> None:
    crane.validate()


def test_validate_boom_length(crane: CraneConfiguration) -> None:
    crane.boom_length_m = 60.0
    with pytest.raises(BoomLengthOutOfRange):
        crane.validate()


def test_validate_boom_angle(crane: CraneConfiguration) -> None:
    crane.boom_angle_deg = 86.0
    with pytest.raises(BoomAngleInvalid):
        crane.validate()


def test_validate_hook_height_is_relative_to_crane_base(crane: CraneConfiguration) -> None:
    crane.position = (0.0, 0.0, 100.0)

    assert crane.get_hook_height() > crane.spec.max_tip_height_m
    crane.validate()


def test_validate_radius(crane: CraneConfiguration) -> None:
    # 85° on a 30 m boom leaves 2.6 m radius, below the 3 m minimum
    crane.boom_angle_deg = 85.0
    with pytest.raises(RadiusOutOfRange):
        crane.validate()


def test_validate_hook_height(ltm_1100: CraneSpec) -> None:
    crane = CraneConfiguration(replace(ltm_1100, max_tip_height_m=20.0), hoist_length_m=5.0)
    crane.outriggers.preset_max_extension()
    crane.counterweight.preset_max()

    with pytest.raises(HeightExceeded):
        crane.validate()


def test_validate_checks_outriggers_then_counterweight(ltm_1100: CraneSpec) -> None:
    crane = CraneConfiguration(ltm_1100)

    with pytest.raises(UnsafeConfiguration):
        crane.validate()

    crane.outriggers.preset_max_extension()
    with pytest.raises(CounterweightInvalid):
        crane.validate()


def test_total_weight(crane: CraneConfiguration) -> None:
    assert crane.get_total_weight_kg() == pytest.approx(88000.0)


def test_state_snapshot(crane: CraneConfiguration) -> None:
    state = crane.state()
    crane.boom_angle_deg = 45.0

    assert state.boom_angle_deg == 60.0
    assert state.boom_length_m == 30.0
    assert state.position == (0.0, 0.0, 0.0)
