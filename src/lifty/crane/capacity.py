"""
Load charts and the capacity model.

A ``LoadChart`` holds (radius, capacity) points for one boom length. A
``CapacityChart`` keys load charts by boom length (rounded to 0.1 m) and
carries the de-rating factors for non-ideal operating conditions.

Two lookup paths exist and are intentionally different:

- ``CapacityChart.get_capacity`` picks the nearest boom-length chart and
  applies swing, outrigger and on-tires de-rating.
- ``CapacityChart.get_capacity_interpolated`` interpolates between the two
  nearest boom-length charts and applies no de-rating.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from ..common.constants import BOOM_MATCH_TOLERANCE, RADIUS_MATCH_TOLERANCE
from ..common.errors import CapacityChartNotFound

logger = logging.getLogger(__name__)


def chart_key(boom_length_m: float) -> str:
    """Dictionary key for a boom length (0.1 m resolution)."""
    return f"{boom_length_m:.1f}"


@dataclass(frozen=True)
class CapacityPoint:
    """Single point on a load chart."""

    radius_m: float
    capacity_kg: float


@dataclass
class LoadChart:
    """Radius/capacity table for one boom length. Points stay sorted by radius."""

    boom_length_m: float
    points: list[CapacityPoint] = field(default_factory=list)
    notes: str | None = None

    def __post_init__(self) -> None:
        self.points.sort(key=lambda p: p.radius_m)

    def add_point(self, radius_m: float, capacity_kg: float) -> None:
        self.points.append(CapacityPoint(radius_m=float(radius_m), capacity_kg=float(capacity_kg)))
        self.points.sort(key=lambda p: p.radius_m)

    def get_capacity_at_radius(self, radius_m: float) -> float | None:
        """Capacity at ``radius_m`` by linear interpolation.

        Outside the tabulated range the nearest boundary capacity is returned
        (clamped, never extrapolated). ``None`` when the chart is empty.
        """
        if not self.points:
            return None

        lower: CapacityPoint | None = None
        upper: CapacityPoint | None = None
        for point in self.points:
            if point.radius_m <= radius_m and (lower is None or point.radius_m > lower.radius_m):
                lower = point
            if point.radius_m >= radius_m and (upper is None or point.radius_m < upper.radius_m):
                upper = point

        if lower is not None and upper is not None:
            if abs(lower.radius_m - upper.radius_m) < RADIUS_MATCH_TOLERANCE:
                return lower.capacity_kg
            t = (radius_m - lower.radius_m) / (upper.radius_m - lower.radius_m)
            return lower.capacity_kg + t * (upper.capacity_kg - lower.capacity_kg)
        if lower is not None:
            return lower.capacity_kg
        if upper is not None:
            return upper.capacity_kg
        return None

    @property
    def max_radius(self) -> float:
        return max((p.radius_m for p in self.points), default=0.0)

    @property
    def min_radius(self) -> float:
        return min((p.radius_m for p in self.points), default=0.0)

    @property
    def max_capacity(self) -> float:
        return max((p.capacity_kg for p in self.points), default=0.0)


@dataclass
class CapacityChart:
    """All load charts of a crane plus de-rating factors.

    Attributes:
        charts: Load charts keyed by ``chart_key(boom_length_m)``
        over_side_factor: Swing over the side (45°-135°, 225°-315°)
        over_rear_factor: Swing over the rear (135°-225°)
        dynamic_factor: Moving loads (carried for callers, not applied by lookups)
        outrigger_intermediate_factor: Outriggers set but not fully extended
        on_tires_factor: Lifting on rubber
    """

    charts: dict[str, LoadChart] = field(default_factory=dict)
    over_side_factor: float = 0.85
    over_rear_factor: float = 0.75
    dynamic_factor: float = 0.85
    outrigger_intermediate_factor: float = 0.85
    on_tires_factor: float = 0.40

    def add_chart(self, chart: LoadChart) -> None:
        """Add (or replace) the chart for ``chart.boom_length_m``."""
        self.charts[chart_key(chart.boom_length_m)] = chart

    @property
    def boom_lengths(self) -> list[float]:
        return sorted(chart.boom_length_m for chart in self.charts.values())

    def get_capacity(
        self,
        boom_length_m: float,
        radius_m: float,
        swing_angle_deg: float,
        outrigger_extension_pct: float,
        on_tires: bool,
    ) -> float | None:
        """De-rated capacity from the nearest boom-length chart.

        No interpolation across boom lengths happens here. The swing factor
        always applies; ``outrigger_extension_pct < 1.0`` (a fraction, 1.0 =
        fully extended) applies the flat intermediate factor and ``on_tires``
        applies the on-tires factor.
        """
        chart = self.find_chart_for_boom_length(boom_length_m)
        if chart is None:
            return None

        capacity = chart.get_capacity_at_radius(radius_m)
        if capacity is None:
            return None

        capacity *= self.get_swing_factor(swing_angle_deg)

        if outrigger_extension_pct < 1.0:
            capacity *= self.outrigger_intermediate_factor

        if on_tires:
            capacity *= self.on_tires_factor

        return capacity

    def get_swing_factor(self, swing_angle_deg: float) -> float:
        """De-rating for the swing quadrant (0° = front, 90° = right side)."""
        angle = swing_angle_deg % 360.0

        if 45.0 <= angle < 135.0:
            return self.over_side_factor
        if 135.0 <= angle < 225.0:
            return self.over_rear_factor
        if 225.0 <= angle < 315.0:
            return self.over_side_factor
        return 1.0

    def get_chart(self, boom_length_m: float) -> LoadChart:
        """Chart for exactly this boom length (0.1 m key), no nearest fallback.

        Raises:
            CapacityChartNotFound: No chart at that boom length.
        """
        chart = self.charts.get(chart_key(boom_length_m))
        if chart is None:
            raise CapacityChartNotFound(boom_length_m)
        return chart

    def find_chart_for_boom_length(self, boom_length_m: float) -> LoadChart | None:
        """Exact 0.1 m key match, otherwise the closest boom length."""
        chart = self.charts.get(chart_key(boom_length_m))
        if chart is not None:
            return chart

        if not self.charts:
            return None

        closest = min(self.charts.values(), key=lambda c: abs(c.boom_length_m - boom_length_m))
        logger.debug("No %.1fm chart; using closest %.1fm", boom_length_m, closest.boom_length_m)
        return closest

    def get_capacity_interpolated(self, boom_length_m: float, radius_m: float) -> float | None:
        """Capacity interpolated between the boom-length charts either side.

        Uses the single closest chart when only one side exists. Applies no
        de-rating factors.
        """
        lower: LoadChart | None = None
        upper: LoadChart | None = None
        for chart in self.charts.values():
            if chart.boom_length_m <= boom_length_m and (
                lower is None or chart.boom_length_m > lower.boom_length_m
            ):
                lower = chart
            if chart.boom_length_m >= boom_length_m and (
                upper is None or chart.boom_length_m < upper.boom_length_m
            ):
                upper = chart

        if lower is not None and upper is not None:
            if abs(lower.boom_length_m - upper.boom_length_m) < BOOM_MATCH_TOLERANCE:
                return lower.get_capacity_at_radius(radius_m)

            lower_cap = lower.get_capacity_at_radius(radius_m)
            upper_cap = upper.get_capacity_at_radius(radius_m)
            if lower_cap is None or upper_cap is None:
                return None

            t = (boom_length_m - lower.boom_length_m) / (upper.boom_length_m - lower.boom_length_m)
            return lower_cap + t * (upper_cap - lower_cap)

        chart = lower if lower is not None else upper
        if chart is None:
            return None
        return chart.get_capacity_at_radius(radius_m)

    def plot(self, **kwargs):
        """Capacity vs radius for every boom length. See ``lifty.plotting.plot_load_chart``."""
        from ..plotting import plot_load_chart

        return plot_load_chart(self, **kwargs)

    @classmethod
    def example_liebherr_ltm_1100(cls) -> "CapacityChart":
        """Example chart for a 100 t all-terrain crane (30, 40 and 50 m boom)."""
        return (
            CapacityChartBuilder()
            .with_over_side_factor(0.85)
            .with_over_rear_factor(0.75)
            .add_charts_from_csv(_LIEBHERR_LTM_1100_CSV)
            .build()
        )


class CapacityChartBuilder:
    """Fluent builder for ``CapacityChart``."""

    def __init__(self) -> None:
        self._chart = CapacityChart()

    def with_over_side_factor(self, factor: float) -> "CapacityChartBuilder":
        self._chart.over_side_factor = factor
        return self

    def with_over_rear_factor(self, factor: float) -> "CapacityChartBuilder":
        self._chart.over_rear_factor = factor
        return self

    def with_dynamic_factor(self, factor: float) -> "CapacityChartBuilder":
        self._chart.dynamic_factor = factor
        return self

    def with_outrigger_intermediate_factor(self, factor: float) -> "CapacityChartBuilder":
        self._chart.outrigger_intermediate_factor = factor
        return self

    def with_on_tires_factor(self, factor: float) -> "CapacityChartBuilder":
        self._chart.on_tires_factor = factor
        return self

    def add_chart(self, chart: LoadChart) -> "CapacityChartBuilder":
        self._chart.add_chart(chart)
        return self

    def add_charts(self, charts: list[LoadChart]) -> "CapacityChartBuilder":
        for chart in charts:
            self._chart.add_chart(chart)
        return self

    def add_charts_from_csv(self, csv_data: str) -> "CapacityChartBuilder":
        from .parsers import parse_csv

        return self.add_charts(parse_csv(csv_data))

    def add_charts_from_json(self, json_data: str) -> "CapacityChartBuilder":
        from .parsers import parse_json

        return self.add_charts(parse_json(json_data))

    def add_charts_from_table(self, table_data: str) -> "CapacityChartBuilder":
        from .parsers import parse_table

        return self.add_charts(parse_table(table_data))

    def add_charts_from_file(self, path: str | Path) -> "CapacityChartBuilder":
        from .parsers import load_charts

        return self.add_charts(load_charts(path))

    def build(self) -> CapacityChart:
        return self._chart


_LIEBHERR_LTM_1100_CSV = """boom_length,radius,capacity
30.0,3.0,100000
30.0,5.0,80000
30.0,10.0,40000
30.0,15.0,25000
30.0,20.0,15000
30.0,25.0,10000
40.0,3.0,90000
40.0,5.0,70000
40.0,10.0,35000
40.0,20.0,12000
40.0,30.0,7000
40.0,35.0,5000
50.0,3.0,80000
50.0,10.0,30000
50.0,20.0,10000
50.0,30.0,6000
50.0,40.0,4000
50.0,45.0,3000"""


__all__ = [
    "CapacityPoint",
    "LoadChart",
    "CapacityChart",
    "CapacityChartBuilder",
    "chart_key",
]
