import matplotlib

matplotlib.use("Agg")

import pytest

from lifty import (
    CapacityChart,
    CraneConfiguration,
    CraneSpec,
    Load,
    LoadChart,
    PickPoint,
    RiggingConfiguration,
    SlingSpec,
    Synthetic,
    get_crane_spec,
    slings_from_pick_points,
)


@pytest.fixture
def two_point_chart() -> LoadChart:
    """Single boom length with (3 m, 100 t) and (10 m, 40 t)."""
    chart = LoadChart(boom_length_m=30.0)
    chart.add_point(10.0, 40000.0)
    chart.add_point(3.0, 100000.0)
    return chart


@pytest.fixture
def example_chart() -> CapacityChart:
    return CapacityChart.example_liebherr_ltm_1100()


@pytest.fixture
def ltm_1100() -> CraneSpec:
    return get_crane_spec("liebherr_ltm_1100_5_2")


@pytest.fixture
def crane(ltm_1100: CraneSpec) -> CraneConfiguration:
    """30 m boom at 60° (15 m radius), outriggers fully set, full counterweight."""
    config = CraneConfiguration(ltm_1100)
    config.outriggers.preset_max_extension()
    config.counterweight.preset_max()
    return config


@pytest.fixture
def polyester_3t() -> SlingSpec:
    return SlingSpec(
        id="polyester_3t",
        material=Synthetic("polyester"),
        width_mm=90.0,
        length_m=5.0,
        rated_capacity_kg=3000.0,
        safety_factor=5.0,
    )


@pytest.fixture
def panel_load() -> Load:
    """8 t panel, CoG at mid-height, four pick points on the top face."""
    return Load(
        weight_kg=8000.0,
        center_of_gravity=(0.0, 0.0, 0.6),
        dimensions=(5.0, 2.5, 1.2),
        pick_points=[
            PickPoint("A", (2.0, 1.0, 1.2)),
            PickPoint("B", (2.0, -1.0, 1.2)),
            PickPoint("C", (-2.0, 1.0, 1.2)),
            PickPoint("D", (-2.0, -1.0, 1.2)),
        ],
    )


@pytest.fixture
def four_sling_rigging(panel_load: Load, polyester_3t: SlingSpec) -> RiggingConfiguration:
    hook = (0.0, 0.0, 5.0)
    return RiggingConfiguration(
        load=panel_load,
        slings=slings_from_pick_points(panel_load, hook, polyester_3t),
        crane_hook_position=hook,
    )
