import math

import pytest

from lifty import (
    calculate_boom_angle_for_height,
    calculate_boom_tip_position,
    calculate_hoist_length_for_height,
    calculate_hook_position,
    calculate_swing_path,
    check_clearance,
)


def test_horizontal_boom_points_forward() -> None:
    tip = calculate_boom_tip_position((0.0, 0.0, 0.0), 30.0, 0.0, 0.0, 3.0)
    assert tip == pytest.approx((0.0, 30.0, 3.0))


def test_swing_90_points_right() -> None:
    tip = calculate_boom_tip_position((0.0, 0.0, 0.0), 30.0, 0.0, 90.0, 3.0)
    assert tip == pytest.approx((30.0, 0.0, 3.0), abs=1e-9)


def test_tip_is_offset_by_crane_base() -> None:
    tip = calculate_boom_tip_position((10.0, -5.0, 1.0), 30.0, 60.0, 0.0, 3.0)
    assert tip == pytest.approx((10.0, -5.0 + 15.0, 1.0 + 3.0 + 30.0 * math.sin(math.radians(60.0))))


@pytest.mark.parametrize("swing", [0.0, 37.0, 90.0, 211.0, 300.0])
@pytest.mark.parametrize("angle", [0.0, 30.0, 60.0, 80.0])
def test_horizontal_reach_is_boom_cosine(swing: float, angle: float) -> None:
    x, y, _ = calculate_boom_tip_position((0.0, 0.0, 0.0), 40.0, angle, swing, 2.5)
    assert math.hypot(x, y) == pytest.approx(40.0 * math.cos(math.radians(angle)))


def test_hook_hangs_below_tip() -> None:
    tip = calculate_boom_tip_position((0.0, 0.0, 0.0), 30.0, 60.0, 45.0, 3.0)
    hook = calculate_hook_position((0.0, 0.0, 0.0), 30.0, 60.0, 45.0, 3.0, 12.0)

    assert hook[0] == pytest.approx(tip[0])
    assert hook[1] == pytest.approx(tip[1])
    assert hook[2] == pytest.approx(tip[2] - 12.0)


def test_boom_angle_for_reachable_target() -> None:
    angle = calculate_boom_angle_for_height(30.0, 15.0, 24.0, 3.0, 10.0)
    assert angle == pytest.approx(60.0)


def test_boom_angle_ignores_current_hoist_length() -> None:
    a = calculate_boom_angle_for_height(30.0, 15.0, 10.0, 3.0, 0.0)
    b = calculate_boom_angle_for_height(30.0, 15.0, 10.0, 3.0, 50.0)
    assert a == pytest.approx(b)


REACH_BOOM, REACH_PIVOT = 30.0, 3.0
REACHABLE_TARGETS = [
    (r, h)
    for r in (0.0, 5.0, 12.5, 20.0, 29.0, 30.0)
    for h in (-20.0, -10.0, 0.0, 3.0, 10.0, 20.0, 28.0, 33.0)
    if math.hypot(r, h - REACH_PIVOT) <= REACH_BOOM
]


@pytest.mark.parametrize(("radius", "height"), REACHABLE_TARGETS)
def test_boom_angle_found_for_every_target_within_boom_length(radius: float, height: float) -> None:
    angle = calculate_boom_angle_for_height(REACH_BOOM, radius, height, REACH_PIVOT, 10.0)

    assert angle is not None
    assert REACH_BOOM * math.cos(math.radians(angle)) == pytest.approx(radius, abs=1e-9)


def test_boom_angle_unreachable_radius() -> None:
    assert calculate_boom_angle_for_height(30.0, 50.0, 50.0, 3.0, 10.0) is None
    assert calculate_boom_angle_for_height(30.0, -1.0, 10.0, 3.0, 10.0) is None
    assert calculate_boom_angle_for_height(0.0, 0.0, 1.0, 3.0, 10.0) is None


def test_boom_angle_target_above_tip() -> None:
    # At 15 m radius a 30 m boom tops out ~25.98 m above the pivot
    assert calculate_boom_angle_for_height(30.0, 15.0, 30.0, 3.0, 10.0) is None


def test_swing_path_includes_both_ends() -> None:
    path = calculate_swing_path((0.0, 0.0, 0.0), 30.0, 0.0, (0.0, 180.0), 3.0, 10.0, 3)

    assert len(path) == 3
    assert path[0] == pytest.approx((0.0, 30.0, -7.0), abs=1e-9)
    assert path[1] == pytest.approx((30.0, 0.0, -7.0), abs=1e-9)
    assert path[2] == pytest.approx((0.0, -30.0, -7.0), abs=1e-9)


def test_swing_path_degenerate_step_counts() -> None:
    assert calculate_swing_path((0.0, 0.0, 0.0), 30.0, 0.0, (0.0, 90.0), 3.0, 10.0, 0) == []

    single = calculate_swing_path((0.0, 0.0, 0.0), 30.0, 0.0, (0.0, 90.0), 3.0, 10.0, 1)
    assert single == [pytest.approx((0.0, 30.0, -7.0))]


def test_clearance_respects_margin() -> None:
    path = [(0.0, 20.0, 10.0)]

    assert check_clearance(path, (2.0, 2.0, 2.0), (0.0, 23.0, 9.0), (1.0, 1.0, 1.0), 0.0)
    assert not check_clearance(path, (2.0, 2.0, 2.0), (0.0, 23.0, 9.0), (1.0, 1.0, 1.0), 1.0)


def test_clearance_detects_collision_anywhere_on_path() -> None:
    path = calculate_swing_path((0.0, 0.0, 0.0), 30.0, 0.0, (0.0, 90.0), 3.0, 0.0, 7)
    # Obstacle sitting on the 45° sample
    r = 30.0 / math.sqrt(2.0)
    assert not check_clearance(path, (2.0, 2.0, 2.0), (r, r, 2.0), (1.0, 1.0, 1.0), 0.0)


def test_clearance_for_empty_path() -> None:
    assert check_clearance([], (2.0, 2.0, 2.0), (0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 5.0)


def test_hoist_length_for_height() -> None:
    assert calculate_hoist_length_for_height(40.0, 25.0) == pytest.approx(15.0)
    assert calculate_hoist_length_for_height(20.0, 25.0) == 0.0
