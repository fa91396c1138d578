"""
Built-in crane catalog.

Every call builds fresh ``CraneSpec`` values; nothing is cached or shared.
Only the Liebherr LTM 1100-5.2 ships with load charts, the others carry an
empty ``CapacityChart`` (attach one with ``CraneSpec.with_capacity_chart``).
"""

from __future__ import annotations

from typing import Callable

from .capacity import CapacityChart
from .spec import CraneSpec, CraneType


def _spec(
    id: str,
    manufacturer: str,
    model: str,
    year: int,
    crane_type: CraneType,
    *,
    weights: tuple[float, float],
    dims: tuple[float, float, float],
    boom: tuple[float, float],
    sections: int,
    pivot: float,
    max_angle: float,
    hoist: tuple[float, float],
    hoist_speed: float,
    max_capacity: float,
    radius: tuple[float, float],
    max_tip_height: float,
    outriggers: tuple[float, float, float],
    counterweight: tuple[float, int, float],
    engine_kw: float,
    swing_rpm: float,
    chart: CapacityChart | None = None,
) -> CraneSpec:
    base_weight, transport_weight = weights
    length, width, height = dims
    min_radius, max_radius = radius
    outrigger_width, outrigger_length, outrigger_ext = outriggers
    slab_kg, max_slabs, arm = counterweight
    return CraneSpec(
        id=id,
        manufacturer=manufacturer,
        model=model,
        year=year,
        crane_type=crane_type,
        base_weight_kg=base_weight,
        transport_weight_kg=transport_weight,
        length_m=length,
        width_m=width,
        height_m=height,
        boom_length_range_m=boom,
        boom_sections=sections,
        boom_pivot_height_m=pivot,
        min_boom_angle_deg=0.0,
        max_boom_angle_deg=max_angle,
        hoist_length_range_m=hoist,
        max_hoist_speed_m_min=hoist_speed,
        max_capacity_kg=max_capacity,
        max_radius_m=max_radius,
        min_radius_m=min_radius,
        max_tip_height_m=max_tip_height,
        outrigger_base_width_m=outrigger_width,
        outrigger_base_length_m=outrigger_length,
        outrigger_max_extension_m=outrigger_ext,
        counterweight_slab_kg=slab_kg,
        counterweight_max_slabs=max_slabs,
        counterweight_moment_arm_m=arm,
        capacity_chart=chart if chart is not None else CapacityChart(),
        engine_power_kw=engine_kw,
        max_swing_speed_rpm=swing_rpm,
    )


def liebherr_ltm_1100_5_2() -> CraneSpec:
    return _spec(
        "liebherr_ltm_1100_5_2", "Liebherr", "LTM 1100-5.2", 2020, CraneType.ALL_TERRAIN,
        weights=(48000, 60000), dims=(13.6, 2.75, 3.85),
        boom=(15.0, 52.0), sections=5, pivot=3.2, max_angle=85.0,
        hoist=(2.0, 60.0), hoist_speed=110.0,
        max_capacity=100000, radius=(3.0, 48.0), max_tip_height=56.0,
        outriggers=(2.75, 3.0, 7.1), counterweight=(2500, 16, 4.5),
        engine_kw=380, swing_rpm=1.8,
        chart=CapacityChart.example_liebherr_ltm_1100(),
    )


def liebherr_ltm_1500_8_1() -> CraneSpec:
    return _spec(
        "liebherr_ltm_1500_8_1", "Liebherr", "LTM 1500-8.1", 2019, CraneType.ALL_TERRAIN,
        weights=(108000, 132000), dims=(17.8, 3.0, 4.0),
        boom=(15.4, 84.0), sections=8, pivot=4.2, max_angle=85.0,
        hoist=(3.0, 100.0), hoist_speed=145.0,
        max_capacity=500000, radius=(3.5, 78.0), max_tip_height=91.0,
        outriggers=(3.0, 3.5, 9.2), counterweight=(5000, 38, 6.5),
        engine_kw=680, swing_rpm=1.5,
    )


def grove_gmk_5150l() -> CraneSpec:
    return _spec(
        "grove_gmk_5150l", "Grove", "GMK 5150L", 2019, CraneType.ALL_TERRAIN,
        weights=(60000, 72000), dims=(15.47, 2.75, 3.98),
        boom=(15.2, 60.0), sections=6, pivot=3.5, max_angle=85.0,
        hoist=(2.0, 70.0), hoist_speed=135.0,
        max_capacity=150000, radius=(3.0, 54.0), max_tip_height=66.0,
        outriggers=(3.0, 3.5, 7.5), counterweight=(3000, 20, 5.0),
        engine_kw=450, swing_rpm=2.0,
    )


def grove_gmk_6300l() -> CraneSpec:
    return _spec(
        "grove_gmk_6300l", "Grove", "GMK 6300L", 2021, CraneType.ALL_TERRAIN,
        weights=(84000, 108000), dims=(16.7, 3.0, 4.0),
        boom=(16.0, 80.0), sections=7, pivot=4.0, max_angle=85.0,
        hoist=(3.0, 90.0), hoist_speed=150.0,
        max_capacity=300000, radius=(3.5, 72.0), max_tip_height=88.0,
        outriggers=(3.0, 3.8, 8.8), counterweight=(4000, 30, 6.0),
        engine_kw=580, swing_rpm=1.6,
    )


def tadano_gr_600xl() -> CraneSpec:
    return _spec(
        "tadano_gr_600xl", "Tadano", "GR-600XL", 2021, CraneType.ROUGH_TERRAIN,
        weights=(36000, 42000), dims=(11.5, 2.49, 3.63),
        boom=(10.9, 42.7), sections=4, pivot=2.8, max_angle=82.0,
        hoist=(1.5, 50.0), hoist_speed=95.0,
        max_capacity=60000, radius=(2.5, 40.0), max_tip_height=47.0,
        outriggers=(2.49, 2.8, 5.9), counterweight=(2000, 10, 3.8),
        engine_kw=275, swing_rpm=1.5,
    )


def tadano_gr_1000xl() -> CraneSpec:
    return _spec(
        "tadano_gr_1000xl", "Tadano", "GR-1000XL", 2020, CraneType.ROUGH_TERRAIN,
        weights=(52000, 64000), dims=(13.2, 2.99, 3.83),
        boom=(13.7, 50.0), sections=5, pivot=3.1, max_angle=83.0,
        hoist=(2.0, 65.0), hoist_speed=120.0,
        max_capacity=100000, radius=(3.0, 46.0), max_tip_height=56.0,
        outriggers=(2.99, 3.2, 7.3), counterweight=(2800, 14, 4.3),
        engine_kw=365, swing_rpm=1.7,
    )


def terex_rt_780() -> CraneSpec:
    return _spec(
        "terex_rt_780", "Terex", "RT 780", 2022, CraneType.ROUGH_TERRAIN,
        weights=(43000, 52000), dims=(12.3, 2.9, 3.76),
        boom=(11.9, 47.2), sections=5, pivot=3.0, max_angle=82.0,
        hoist=(2.0, 55.0), hoist_speed=106.0,
        max_capacity=75000, radius=(2.8, 44.0), max_tip_height=52.0,
        outriggers=(2.9, 3.1, 6.7), counterweight=(2300, 12, 4.0),
        engine_kw=335, swing_rpm=1.6,
    )


def link_belt_htc_8690() -> CraneSpec:
    return _spec(
        "link_belt_htc_8690", "Link-Belt", "HTC-8690", 2021, CraneType.TRUCK_MOUNTED,
        weights=(48500, 58000), dims=(13.1, 2.59, 3.81),
        boom=(12.8, 50.3), sections=5, pivot=3.0, max_angle=83.0,
        hoist=(2.0, 60.0), hoist_speed=115.0,
        max_capacity=90000, radius=(2.8, 46.0), max_tip_height=55.0,
        outriggers=(2.59, 3.0, 7.0), counterweight=(2700, 13, 4.2),
        engine_kw=355, swing_rpm=1.7,
    )


_FACTORIES: dict[str, Callable[[], CraneSpec]] = {
    "liebherr_ltm_1100_5_2": liebherr_ltm_1100_5_2,
    "liebherr_ltm_1500_8_1": liebherr_ltm_1500_8_1,
    "grove_gmk_5150l": grove_gmk_5150l,
    "grove_gmk_6300l": grove_gmk_6300l,
    "tadano_gr_600xl": tadano_gr_600xl,
    "tadano_gr_1000xl": tadano_gr_1000xl,
    "terex_rt_780": terex_rt_780,
    "link_belt_htc_8690": link_belt_htc_8690,
}


def crane_ids() -> list[str]:
    return list(_FACTORIES)


def get_crane_spec(crane_id: str) -> CraneSpec:
    """Build the spec registered under ``crane_id``.

    Raises:
        KeyError: Unknown id.
    """
    try:
        factory = _FACTORIES[crane_id]
    except KeyError:
        raise KeyError(f"Unknown crane id '{crane_id}'. Available: {', '.join(_FACTORIES)}") from None
    return factory()


def all_crane_specs() -> list[CraneSpec]:
    return [factory() for factory in _FACTORIES.values()]


__all__ = ["crane_ids", "get_crane_spec", "all_crane_specs"]
