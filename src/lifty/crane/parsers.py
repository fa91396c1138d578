"""
Load-chart parsers.

Three input formats are understood, each producing one ``LoadChart`` per boom
length. Rows and sections are merged by the same 0.1 m key ``CapacityChart``
uses, so ``30m`` and ``30.0m`` end up in one chart.

CSV::

    boom_length,radius,capacity
    30.0,3.0,100000
    30.0,5.0,80000

JSON::

    {"charts": [{"boom_length_m": 30.0,
                 "points": [{"radius_m": 3.0, "capacity_kg": 100000}]}]}

Manufacturer table::

    BOOM LENGTH: 30.0m
    Radius(m)  Capacity(kg)
    3.0        100000
    5.0        80000

Malformed rows raise ``ParseError`` carrying the 1-based line number.
"""
from __future__ import annotations

import io
import json
import logging
import math
import re
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from pydantic import BaseModel, ValidationError, field_validator

from ..common.errors import ParseError
from .capacity import LoadChart, chart_key

logger = logging.getLogger(__name__)

_BOOM_HEADER = "BOOM LENGTH:"
_CSV_COLUMNS = 3
_TOKENIZER_LINE = re.compile(r"line (\d+)")


class ChartPoint(BaseModel):
    radius_m: float
    capacity_kg: float

    @field_validator("radius_m", "capacity_kg")
    @classmethod
    def _finite(cls, v):
        if not math.isfinite(v):
            raise ValueError("must be finite")
        return v


class ChartEntry(BaseModel):
    boom_length_m: float
    notes: Optional[str] = None
    points: list[ChartPoint]

    @field_validator("boom_length_m")
    @classmethod
    def _positive_boom(cls, v):
        if not math.isfinite(v) or v <= 0.0:
            raise ValueError("must be a finite length > 0")
        return v


class ChartDocument(BaseModel):
    charts: list[ChartEntry]


def _merge(
    charts: dict[str, LoadChart],
    boom_length_m: float,
    points: Iterable[tuple[float, float]],
    notes: str | None = None,
) -> None:
    chart = charts.setdefault(chart_key(boom_length_m), LoadChart(boom_length_m=boom_length_m))
    if chart.notes is None:
        chart.notes = notes
    for radius, capacity in points:
        chart.add_point(radius, capacity)


def _parse_number(text: str, what: str, line: int) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseError(f"Invalid {what} '{text}'", line=line) from None


def parse_csv(csv_data: str) -> list[LoadChart]:
    """Parse ``boom_length,radius,capacity`` rows. The first line is a header."""
    try:
        # header skipped by position; blank rows kept so row i stays file line i + 2
        df = pd.read_csv(
            io.StringIO(csv_data),
            header=None,
            skiprows=1,
            dtype=str,
            skip_blank_lines=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        match = _TOKENIZER_LINE.search(str(exc))
        raise ParseError(
            f"Expected {_CSV_COLUMNS} columns", line=int(match.group(1)) if match else None
        ) from exc

    charts: dict[str, LoadChart] = {}
    for i, row in enumerate(df.itertuples(index=False, name=None)):
        line_num = i + 2
        filled = [not pd.isna(cell) for cell in row]
        if not any(filled):
            continue
        if sum(filled) != _CSV_COLUMNS or not all(filled[:_CSV_COLUMNS]):
            raise ParseError(f"Expected {_CSV_COLUMNS} columns, got {sum(filled)}", line=line_num)

        boom_length = _parse_number(row[0].strip(), "boom length", line_num)
        radius = _parse_number(row[1].strip(), "radius", line_num)
        capacity = _parse_number(row[2].strip(), "capacity", line_num)
        _merge(charts, boom_length, [(radius, capacity)])

    logger.debug("Parsed %d chart(s) from CSV", len(charts))
    return list(charts.values())


def _validation_message(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = list(err["loc"])
    if len(loc) >= 2 and loc[0] == "charts" and isinstance(loc[1], int):
        where = f"chart {loc[1]}"
        field = ".".join(str(part) for part in loc[2:])
        if field:
            where = f"{where} {field}"
    else:
        where = ".".join(str(part) for part in loc) or "document"
    return f"JSON parse error: {where}: {err['msg']}"


def parse_json(json_data: str) -> list[LoadChart]:
    """Parse the ``{"charts": [...]}`` document."""
    try:
        data = json.loads(json_data)
    except json.JSONDecodeError as exc:
        raise ParseError(f"JSON parse error: {exc.msg}", line=exc.lineno) from exc

    try:
        document = ChartDocument.model_validate(data)
    except ValidationError as exc:
        raise ParseError(_validation_message(exc)) from exc

    charts: dict[str, LoadChart] = {}
    for entry in document.charts:
        _merge(
            charts,
            entry.boom_length_m,
            ((p.radius_m, p.capacity_kg) for p in entry.points),
            notes=entry.notes,
        )

    logger.debug("Parsed %d chart(s) from JSON", len(charts))
    return list(charts.values())


def parse_table(table_data: str) -> list[LoadChart]:
    """Parse manufacturer-style ``BOOM LENGTH: <n>m`` sections.

    Blank lines and lines containing ``RADIUS`` are sub-headers. Rows before
    the first section header are ignored. Sections without points are dropped,
    repeated sections for one boom length are merged.
    """
    charts: dict[str, LoadChart] = {}
    boom_length: float | None = None
    rows: list[tuple[float, float]] = []

    for idx, raw in enumerate(table_data.splitlines()):
        line_num = idx + 1
        line = raw.strip()
        upper = line.upper()

        if upper.startswith(_BOOM_HEADER):
            if boom_length is not None and rows:
                _merge(charts, boom_length, rows)

            boom_str = line[len(_BOOM_HEADER):].strip().rstrip("mM").strip()
            boom_length = _parse_number(boom_str, "boom length", line_num)
            rows = []
            continue

        if not line or "RADIUS" in upper:
            continue

        if boom_length is None:
            continue

        parts = line.split()
        if len(parts) < 2:
            raise ParseError(f"Expected radius and capacity, got '{line}'", line=line_num)
        rows.append(
            (_parse_number(parts[0], "radius", line_num), _parse_number(parts[1], "capacity", line_num))
        )

    if boom_length is not None and rows:
        _merge(charts, boom_length, rows)

    logger.debug("Parsed %d chart(s) from table", len(charts))
    return list(charts.values())


def load_charts(path: str | Path) -> list[LoadChart]:
    """Read a chart file, choosing the parser by suffix (.csv, .json, else table)."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParseError(f"Failed to read {path}: {exc}") from exc

    suffix = path.suffix.lower()
    if suffix == ".csv":
        return parse_csv(text)
    if suffix == ".json":
        return parse_json(text)
    return parse_table(text)


__all__ = [
    "ChartPoint",
    "ChartEntry",
    "ChartDocument",
    "parse_csv",
    "parse_json",
    "parse_table",
    "load_charts",
]
