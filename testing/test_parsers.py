import json
from pathlib import Path

import pytest

from lifty import CapacityChartBuilder, ParseError, load_charts, parse_csv, parse_json, parse_table


CSV = """boom_length,radius,capacity
30.0,3.0,100000
30.0,5.0,80000

40.0,5.0,70000
"""

TABLE = """LIEBHERR LTM 1100 - main boom
BOOM LENGTH: 30.0m
Radius(m)  Capacity(kg)
3.0        100000
5.0        80000

BOOM LENGTH: 40.0m
RADIUS     CAPACITY
5.0        70000
10.0       35000

BOOM LENGTH: 50.0m
"""


def test_csv_groups_rows_by_boom_length() -> None:
    charts = parse_csv(CSV)

    assert [c.boom_length_m for c in charts] == [30.0, 40.0]
    assert [(p.radius_m, p.capacity_kg) for p in charts[0].points] == [(3.0, 100000.0), (5.0, 80000.0)]
    assert len(charts[1].points) == 1


def test_csv_header_only_gives_no_charts() -> None:
    assert parse_csv("boom_length,radius,capacity\n") == []


def test_csv_bad_number_reports_line() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_csv("boom_length,radius,capacity\n30.0,3.0,100000\n30.0,abc,80000\n")

    assert exc_info.value.line == 3
    assert "Line 3" in str(exc_info.value)


def test_csv_wrong_column_count_reports_line() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_csv("boom_length,radius,capacity\n30.0,3.0\n")

    assert exc_info.value.line == 2


def test_json_document() -> None:
    doc = {
        "charts": [
            {
                "boom_length_m": 30.0,
                "notes": "full counterweight",
                "points": [
                    {"radius_m": 5.0, "capacity_kg": 80000},
                    {"radius_m": 3.0, "capacity_kg": 100000},
                ],
            }
        ]
    }
    charts = parse_json(json.dumps(doc))

    assert len(charts) == 1
    assert charts[0].notes == "full counterweight"
    assert [p.radius_m for p in charts[0].points] == [3.0, 5.0]


def test_json_syntax_error_is_parse_error() -> None:
    with pytest.raises(ParseError, match="JSON parse error"):
        parse_json('{"charts": [')


def test_json_missing_field_is_parse_error() -> None:
    with pytest.raises(ParseError, match="chart 0"):
        parse_json('{"charts": [{"points": []}]}')


def test_json_without_charts_list_is_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_json("[1, 2, 3]")


def test_table_sections() -> None:
    charts = parse_table(TABLE)

    # The empty 50 m section is dropped
    assert [c.boom_length_m for c in charts] == [30.0, 40.0]
    assert charts[1].get_capacity_at_radius(10.0) == pytest.approx(35000.0)


def test_table_malformed_row_reports_line() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_table("BOOM LENGTH: 30.0m\n3.0\n")

    assert exc_info.value.line == 2


def test_table_bad_boom_header() -> None:
    with pytest.raises(ParseError):
        parse_table("BOOM LENGTH: long\n3.0 100000\n")


def test_load_charts_picks_parser_by_suffix(tmp_path: Path) -> None:
    csv_file = tmp_path / "chart.csv"
    csv_file.write_text(CSV, encoding="utf-8")
    table_file = tmp_path / "chart.txt"
    table_file.write_text(TABLE, encoding="utf-8")

    assert len(load_charts(csv_file)) == 2
    assert len(load_charts(table_file)) == 2


def test_load_charts_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ParseError, match="Failed to read"):
        load_charts(tmp_path / "missing.csv")


def test_builder_from_file(tmp_path: Path) -> None:
    path = tmp_path / "chart.json"
    path.write_text(
        json.dumps({"charts": [{"boom_length_m": 25.0, "points": [{"radius_m": 4.0, "capacity_kg": 60000}]}]}),
        encoding="utf-8",
    )

    chart = CapacityChartBuilder().add_charts_from_file(path).build()

    assert chart.get_capacity(25.0, 4.0, 0.0, 1.0, False) == pytest.approx(60000.0)


def test_table_repeated_boom_section_is_merged() -> None:
    table = """BOOM LENGTH: 30.0m
3.0        100000
5.0        80000

BOOM LENGTH: 40.0m
5.0        70000

BOOM LENGTH: 30m
10.0       40000
"""
    chart = CapacityChartBuilder().add_charts_from_table(table).build()

    assert sorted(chart.charts) == ["30.0", "40.0"]
    assert [(p.radius_m, p.capacity_kg) for p in chart.charts["30.0"].points] == [
        (3.0, 100000.0),
        (5.0, 80000.0),
        (10.0, 40000.0),
    ]


def test_json_entries_with_same_boom_length_are_merged() -> None:
    doc = {
        "charts": [
            {"boom_length_m": 30.0, "notes": "main", "points": [{"radius_m": 3.0, "capacity_kg": 100000}]},
            {"boom_length_m": 40.0, "points": [{"radius_m": 5.0, "capacity_kg": 70000}]},
            {"boom_length_m": 30, "points": [{"radius_m": 10.0, "capacity_kg": 40000}]},
        ]
    }
    charts = parse_json(json.dumps(doc))

    assert [c.boom_length_m for c in charts] == [30.0, 40.0]
    assert [p.radius_m for p in charts[0].points] == [3.0, 10.0]
    assert charts[0].notes == "main"


def test_csv_rows_with_equivalent_boom_lengths_share_a_chart() -> None:
    charts = parse_csv("boom_length,radius,capacity\n30,3.0,100000\n30.0,5.0,80000\n")

    assert len(charts) == 1
    assert len(charts[0].points) == 2


def test_csv_blank_line_keeps_line_numbers() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_csv("boom_length,radius,capacity\n30.0,3.0,100000\n\n30.0,5.0,\n")

    assert exc_info.value.line == 4


def test_csv_extra_columns_is_parse_error() -> None:
    with pytest.raises(ParseError, match="columns"):
        parse_csv("boom_length,radius,capacity\n30.0,3.0,100000\n30.0,5.0,80000,1\n")


def test_csv_empty_input_gives_no_charts() -> None:
    assert parse_csv("") == []


def test_json_wrong_type_names_the_field() -> None:
    doc = {"charts": [{"boom_length_m": 30.0, "points": [{"radius_m": "far", "capacity_kg": 1000}]}]}

    with pytest.raises(ParseError, match="chart 0 points.0.radius_m"):
        parse_json(json.dumps(doc))


def test_json_rejects_non_finite_capacity() -> None:
    with pytest.raises(ParseError, match="finite"):
        parse_json('{"charts": [{"boom_length_m": 30.0, "points": [{"radius_m": 3.0, "capacity_kg": NaN}]}]}')


def test_json_rejects_zero_boom_length() -> None:
    with pytest.raises(ParseError, match="boom_length_m"):
        parse_json('{"charts": [{"boom_length_m": 0, "points": []}]}')
