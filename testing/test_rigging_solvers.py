import math

import pytest

from lifty import (
    InsufficientPickPoints,
    InvalidRiggingConfiguration,
    Load,
    Sling,
    SlingSpec,
    WireRope,
)
from lifty.rigging import sling_angle_from_vertical, solve_tensions


@pytest.fixture
def rope() -> SlingSpec:
    return SlingSpec("rope", WireRope(), length_m=5.0, rated_capacity_kg=10000.0, diameter_mm=20.0)


def _ring_slings(spec: SlingSpec, count: int, hook: tuple) -> list[Sling]:
    """``count`` slings from a unit circle at z=0 up to ``hook``."""
    slings = []
    for i in range(count):
        a = 2.0 * math.pi * i / count
        slings.append(Sling(spec, (math.cos(a), math.sin(a), 0.0), hook, name=f"S{i + 1}"))
    return slings


def _point_load(weight_kg: float) -> Load:
    return Load(weight_kg=weight_kg, center_of_gravity=(0.0, 0.0, 0.0), dimensions=(2.0, 2.0, 1.0))


def test_no_slings() -> None:
    with pytest.raises(InsufficientPickPoints):
        solve_tensions(load=_point_load(1000.0), slings=[])


def test_too_many_slings(rope: SlingSpec) -> None:
    with pytest.raises(InvalidRiggingConfiguration, match="Too many slings"):
        solve_tensions(load=_point_load(1000.0), slings=_ring_slings(rope, 7, (0.0, 0.0, 2.0)))


def test_zero_length_sling(rope: SlingSpec) -> None:
    sling = Sling(rope, (1.0, 1.0, 1.0), (1.0, 1.0, 1.0), name="short")

    with pytest.raises(InvalidRiggingConfiguration, match="'short' length too short"):
        solve_tensions(load=_point_load(1000.0), slings=[sling])


def test_single_sling_carries_everything(rope: SlingSpec) -> None:
    sling = Sling(rope, (0.5, 0.0, 0.0), (0.0, 0.0, 3.0))
    assert solve_tensions(load=_point_load(1234.0), slings=[sling]) == [1234.0]


def test_two_symmetric_slings(rope: SlingSpec) -> None:
    load = Load(weight_kg=8000.0, center_of_gravity=(0.0, 0.0, 0.6), dimensions=(5.0, 2.5, 1.2))
    hook = (0.0, 0.0, 5.0)
    slings = [Sling(rope, (2.0, 0.0, 1.2), hook), Sling(rope, (-2.0, 0.0, 1.2), hook)]

    tensions = solve_tensions(load=load, slings=slings)

    cos_angle = 3.8 / math.hypot(2.0, 3.8)
    assert tensions == pytest.approx([4000.0 / cos_angle] * 2)
    assert tensions[0] == pytest.approx(4520.2, abs=0.1)


def test_two_slings_closer_sling_takes_more(rope: SlingSpec) -> None:
    load = Load(weight_kg=1000.0, center_of_gravity=(1.0, 0.0, 0.0), dimensions=(4.0, 1.0, 1.0))
    hook = (1.0, 0.0, 10.0)
    slings = [Sling(rope, (2.0, 0.0, 0.0), hook), Sling(rope, (-2.0, 0.0, 0.0), hook)]

    near, far = solve_tensions(load=load, slings=slings)

    assert near > far


def test_two_horizontal_slings_rejected(rope: SlingSpec) -> None:
    hook = (0.0, 0.0, 0.0)
    slings = [Sling(rope, (2.0, 0.0, 0.0), hook), Sling(rope, (-2.0, 0.0, 0.0), hook)]

    with pytest.raises(InvalidRiggingConfiguration, match="horizontal"):
        solve_tensions(load=_point_load(1000.0), slings=slings)


def test_two_slings_at_cog_rejected(rope: SlingSpec) -> None:
    hook = (0.0, 0.0, 5.0)
    slings = [Sling(rope, (0.0, 0.0, 0.0), hook), Sling(rope, (0.0, 0.0, 0.0), hook)]

    with pytest.raises(InvalidRiggingConfiguration, match="too close"):
        solve_tensions(load=_point_load(1000.0), slings=slings)


def test_three_symmetric_slings(rope: SlingSpec) -> None:
    tensions = solve_tensions(load=_point_load(3000.0), slings=_ring_slings(rope, 3, (0.0, 0.0, 2.0)))

    assert tensions == pytest.approx([1000.0 * math.sqrt(5.0) / 2.0] * 3)
    assert tensions[0] == pytest.approx(1118.03, abs=0.01)


def test_three_slings_vertical_sum_equals_weight(rope: SlingSpec) -> None:
    hook = (0.3, -0.2, 4.0)
    slings = [
        Sling(rope, (1.5, 0.0, 0.0), hook),
        Sling(rope, (-1.0, 1.2, 0.0), hook),
        Sling(rope, (-0.8, -1.4, 0.0), hook),
    ]

    tensions = solve_tensions(load=_point_load(5000.0), slings=slings)

    vertical = sum(t * math.cos(math.radians(sling_angle_from_vertical(s))) for s, t in zip(slings, tensions))
    assert vertical == pytest.approx(5000.0)
    assert all(t >= 0.0 for t in tensions)


def test_three_coplanar_slings_rejected(rope: SlingSpec) -> None:
    hook = (0.0, 0.0, 2.0)
    slings = [Sling(rope, (x, 0.0, 0.0), hook) for x in (-1.0, 0.5, 1.0)]

    with pytest.raises(InvalidRiggingConfiguration, match="coplanar"):
        solve_tensions(load=_point_load(1000.0), slings=slings)


def test_three_slings_needing_compression_rejected(rope: SlingSpec) -> None:
    origin = (0.0, 0.0, 0.0)
    slings = [
        Sling(rope, origin, (1.0, 0.0, 1.0)),
        Sling(rope, origin, (0.0, 1.0, 1.0)),
        Sling(rope, origin, (1.0, 1.0, 1.0)),
    ]

    with pytest.raises(InvalidRiggingConfiguration, match="negative tension"):
        solve_tensions(load=_point_load(1000.0), slings=slings)


@pytest.mark.parametrize("count", [4, 5, 6])
def test_symmetric_indeterminate_slings_share_equally(rope: SlingSpec, count: int) -> None:
    weight = 6000.0
    tensions = solve_tensions(load=_point_load(weight), slings=_ring_slings(rope, count, (0.0, 0.0, 2.0)))

    expected = weight / count * math.sqrt(5.0) / 2.0
    assert tensions == pytest.approx([expected] * count, rel=1e-6)


def test_least_squares_balances_weight(rope: SlingSpec) -> None:
    hook = (0.2, 0.1, 6.0)
    slings = [
        Sling(rope, (2.0, 1.0, 0.0), hook),
        Sling(rope, (2.5, -1.0, 0.0), hook),
        Sling(rope, (-2.0, 1.5, 0.0), hook),
        Sling(rope, (-1.5, -1.0, 0.0), hook),
    ]

    tensions = solve_tensions(load=_point_load(8000.0), slings=slings)

    vertical = sum(t * math.cos(math.radians(sling_angle_from_vertical(s))) for s, t in zip(slings, tensions))
    assert vertical == pytest.approx(8000.0, rel=1e-6)


def test_angle_from_vertical(rope: SlingSpec) -> None:
    assert sling_angle_from_vertical(Sling(rope, (0.0, 0.0, 0.0), (0.0, 0.0, 3.0))) == pytest.approx(0.0)
    assert sling_angle_from_vertical(Sling(rope, (0.0, 0.0, 0.0), (1.0, 0.0, 1.0))) == pytest.approx(45.0)
    assert sling_angle_from_vertical(Sling(rope, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0))) == pytest.approx(90.0)
