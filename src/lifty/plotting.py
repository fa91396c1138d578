"""
Plotting helpers for load charts and rigging results.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from .crane.capacity import CapacityChart, LoadChart
    from .rigging.results import RiggingAnalysis


def _finish(fig, save_path: str | Path | None, show: bool) -> None:
    plt.tight_layout()

    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()


def plot_load_chart(
    chart: "CapacityChart | LoadChart | Sequence[LoadChart]",
    *,
    boom_length_m: float | None = None,
    radius_m: float | None = None,
    capacity_unit: str = "t",
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
) -> plt.Axes:
    """Capacity vs radius, one line per boom length.

    ``boom_length_m`` limits a ``CapacityChart`` to that one boom length
    (``CapacityChartNotFound`` when it has no such chart). ``radius_m`` draws a
    vertical marker at the working radius.
    """
    from .crane.capacity import CapacityChart, LoadChart

    if isinstance(chart, CapacityChart) and boom_length_m is not None:
        charts = [chart.get_chart(boom_length_m)]
    elif isinstance(chart, CapacityChart):
        charts = sorted(chart.charts.values(), key=lambda c: c.boom_length_m)
    elif isinstance(chart, LoadChart):
        charts = [chart]
    else:
        charts = list(chart)

    if capacity_unit not in {"t", "kg"}:
        raise ValueError("capacity_unit must be 't' or 'kg'")
    scale = 1e-3 if capacity_unit == "t" else 1.0

    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 6))
    else:
        fig = ax.figure

    for load_chart in charts:
        radii = [p.radius_m for p in load_chart.points]
        capacities = [p.capacity_kg * scale for p in load_chart.points]
        ax.plot(radii, capacities, marker="o", markersize=4, linewidth=1.5,
                label=f"{load_chart.boom_length_m:.1f} m boom")

    if radius_m is not None:
        ax.axvline(radius_m, color="darkred", linestyle="--", linewidth=1.2, label=f"r = {radius_m:.1f} m")

    ax.set_xlabel("Radius (m)", fontsize=11)
    ax.set_ylabel(f"Capacity ({capacity_unit})", fontsize=11)
    ax.set_title("Load Chart", fontsize=12)
    ax.grid(True, alpha=0.3, linestyle="--")
    if charts:
        ax.legend(fontsize=9)

    _finish(fig, save_path, show)
    return ax


def plot_rigging_result(
    result: "RiggingAnalysis",
    *,
    cmap: str = "RdYlGn_r",
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
) -> plt.Axes:
    """Bar chart of sling utilization with the 100 % limit line."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 5))
    else:
        fig = ax.figure

    ids = [t.sling_id for t in result.sling_tensions]
    utils = [t.utilization_percent for t in result.sling_tensions]
    finite = [u for u in utils if u != float("inf")]
    top = max(finite + [100.0]) * 1.15
    shown = [u if u != float("inf") else top for u in utils]

    norm = mcolors.Normalize(vmin=0.0, vmax=100.0, clip=True)
    colormap = plt.get_cmap(cmap)
    colors = [colormap(norm(u)) for u in shown]

    bars = ax.bar(range(len(ids)), shown, color=colors, edgecolor="black", linewidth=1.0, zorder=3)
    for bar, t in zip(bars, result.sling_tensions):
        ax.text(
            bar.get_x() + bar.get_width() / 2.0,
            bar.get_height(),
            f"{t.tension_kg:.0f} kg\n{t.angle_from_vertical_deg:.0f}°",
            ha="center",
            va="bottom",
            fontsize=8,
        )

    ax.axhline(100.0, color="darkred", linestyle="--", linewidth=1.2, label="Capacity")
    ax.set_xticks(range(len(ids)))
    ax.set_xticklabels(ids)
    ax.set_ylim(0.0, top * 1.1)
    ax.set_ylabel("Utilization (%)", fontsize=11)
    ax.grid(True, axis="y", alpha=0.3, linestyle="--")

    sf = result.safety_analysis.overall_safety_factor
    title = f"Rigging Analysis | SF {sf:.1f}:1"
    title += " | balanced" if result.is_balanced else " | UNBALANCED"
    ax.set_title(title, fontsize=12)
    ax.legend(fontsize=9)

    _finish(fig, save_path, show)
    return ax


__all__ = ["plot_load_chart", "plot_rigging_result"]
