import math

import pytest

from lifty import (
    CraneConfiguration,
    CustomSoil,
    GroundBearingError,
    GroundConfiguration,
    MatMaterial,
    PadMaterial,
    Retracted,
    SoilType,
    SupportPoint,
    analyze_ground_bearing,
    support_points_from_crane,
)
from lifty.ground import CraneMat, MatSupport, OutriggerPad, TireSupport


def _one_square_metre(load_kg: float) -> SupportPoint:
    return SupportPoint((0.0, 0.0, 0.0), load_kg, MatSupport(1.0, 1.0))


def test_pressure_on_one_square_metre() -> None:
    result = GroundConfiguration([_one_square_metre(10000.0)], SoilType.MEDIUM_GRAVEL).analyze()

    bearing = result.bearing_pressures[0]
    assert bearing.pressure_kpa == pytest.approx(98.1)
    assert bearing.allowable_kpa == pytest.approx(200.0)
    assert bearing.is_safe
    assert result.is_safe


def test_soft_clay_fails() -> None:
    result = GroundConfiguration([_one_square_metre(10000.0)], SoilType.SOFT_CLAY, safety_factor=2.0).analyze()

    assert not result.is_safe
    assert result.max_utilization_percent == pytest.approx(196.2)


def test_one_failing_support_fails_all() -> None:
    supports = [_one_square_metre(1000.0), _one_square_metre(1000.0), _one_square_metre(30000.0)]
    result = analyze_ground_bearing(GroundConfiguration(supports, SoilType.MEDIUM_SAND))

    assert [b.is_safe for b in result.bearing_pressures] == [True, True, False]
    assert not result.is_safe
    assert result.max_pressure_kpa == pytest.approx(30000.0 * 9.81 / 1000.0)


def test_custom_soil() -> None:
    soil = CustomSoil(500.0)
    result = GroundConfiguration([_one_square_metre(10000.0)], soil, safety_factor=1.0).analyze()

    assert result.bearing_pressures[0].allowable_kpa == 500.0
    assert result.info["soil"] == "Custom (500 kPa)"


def test_custom_soil_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CustomSoil(0.0)


def test_no_support_points() -> None:
    with pytest.raises(GroundBearingError, match="No support points provided"):
        GroundConfiguration([], SoilType.DENSE_SAND).analyze()


def test_safety_factor_below_one() -> None:
    with pytest.raises(GroundBearingError, match="Safety factor must be >= 1.0"):
        GroundConfiguration([_one_square_metre(1000.0)], SoilType.DENSE_SAND, safety_factor=0.9).analyze()


def test_zero_contact_area() -> None:
    supports = [_one_square_metre(1000.0), SupportPoint((0.0, 0.0, 0.0), 1000.0, MatSupport(0.0, 1.0))]

    with pytest.raises(GroundBearingError, match="Support point 1 has invalid contact area"):
        GroundConfiguration(supports, SoilType.DENSE_SAND).analyze()


def test_soil_table() -> None:
    assert SoilType.HARD_ROCK.allowable_bearing_capacity_kpa == 5746.0
    assert SoilType.PEAT.allowable_bearing_capacity_kpa == 25.0
    assert SoilType.STIFF_CLAY.label == "Stiff Clay"
    assert all(soil.description for soil in SoilType)


def test_support_contact_areas() -> None:
    pad = SupportPoint.with_pad((0.0, 0.0, 0.0), 1000.0, 0.6)
    mat = SupportPoint.with_mat_and_pad((0.0, 0.0, 0.0), 1000.0, 1.2, 1.2, MatMaterial.TIMBER_MAT, 0.6)
    tire = SupportPoint((0.0, 0.0, 0.0), 1000.0, TireSupport(0.5, 1.2))

    assert pad.contact_area_m2 == pytest.approx(math.pi * 0.09)
    assert mat.contact_area_m2 == pytest.approx(1.44)
    assert tire.contact_area_m2 == pytest.approx(0.09)


def test_support_descriptions() -> None:
    pad = SupportPoint.with_pad((0.0, 0.0, 0.0), 1000.0, 0.6, PadMaterial.HARDWOOD)
    mat = SupportPoint.with_mat_and_pad((0.0, 0.0, 0.0), 1000.0, 1.2, 1.2, MatMaterial.TIMBER_MAT, 0.6)

    assert pad.support_type.description == "0.6m Hardwood pad"
    assert mat.support_type.description == "1.2m×1.2m Timber Mat + 0.6m Steel pad"
    assert MatSupport(1.2, 1.2).description == "1.2m×1.2m Timber Mat"


def test_mat_spreads_load() -> None:
    bare = SupportPoint.with_pad((0.0, 0.0, 0.0), 20000.0, 0.6)
    on_mat = SupportPoint.with_mat_and_pad((0.0, 0.0, 0.0), 20000.0, 2.0, 2.0, MatMaterial.COMPOSITE_MAT, 0.6)

    bare_result = GroundConfiguration([bare], SoilType.MEDIUM_CLAY).analyze()
    mat_result = GroundConfiguration([on_mat], SoilType.MEDIUM_CLAY).analyze()

    assert not bare_result.is_safe
    assert mat_result.is_safe


def test_outrigger_pad_geometry() -> None:
    mat = CraneMat(MatMaterial.TIMBER_MAT, length_m=2.0, width_m=1.5, thickness_m=0.2, weight_kg=300.0, stacked_count=2)

    assert OutriggerPad(diameter_m=0.6).bearing_area_m2 == pytest.approx(math.pi * 0.09)
    assert OutriggerPad(width_m=0.5, length_m=0.8).pad_area_m2 == pytest.approx(0.4)
    assert OutriggerPad(diameter_m=0.6, mats=(mat,)).bearing_area_m2 == pytest.approx(3.0)
    assert mat.total_weight_kg == 600.0
    with pytest.raises(ValueError):
        OutriggerPad(width_m=0.5)


# === Crane supports ===


def test_support_points_from_crane(crane: CraneConfiguration) -> None:
    points = support_points_from_crane(crane, extra_load_kg=8000.0)

    assert len(points) == 4
    assert all(p.load_kg == pytest.approx(24000.0) for p in points)

    result = GroundConfiguration(points, SoilType.DENSE_GRAVEL).analyze()
    assert result.max_pressure_kpa == pytest.approx(832.7, abs=0.1)
    assert not result.is_safe


def test_support_points_follow_crane_position(crane: CraneConfiguration) -> None:
    at_origin = support_points_from_crane(crane)
    crane.position = (50.0, 20.0, 1.0)
    moved = support_points_from_crane(crane)

    for a, b in zip(at_origin, moved):
        assert b.position == pytest.approx((a.position[0] + 50.0, a.position[1] + 20.0, a.position[2] + 1.0))


def test_support_points_share_load_between_deployed_pads(crane: CraneConfiguration) -> None:
    crane.outriggers.get_outrigger("rear_left").deployment = Retracted()

    points = support_points_from_crane(crane)

    assert len(points) == 3
    assert all(p.load_kg == pytest.approx(88000.0 / 3.0) for p in points)


def test_support_points_need_a_deployed_outrigger(crane: CraneConfiguration) -> None:
    crane.outriggers.preset_on_tires()

    with pytest.raises(GroundBearingError, match="No support points provided"):
        support_points_from_crane(crane)
