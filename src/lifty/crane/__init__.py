"""
Crane model: capacity charts, outriggers, counterweight, specs and scenario state.
"""

from .capacity import CapacityPoint, LoadChart, CapacityChart, CapacityChartBuilder
from .parsers import parse_csv, parse_json, parse_table, load_charts
from .outriggers import (
    OutriggerPosition,
    Retracted,
    Extended,
    Set,
    OutriggerDeployment,
    OutriggerConfig,
    OutriggerSystem,
)
from .counterweight import CounterweightSlab, CounterweightConfig
from .spec import CraneType, CraneSpec
from .catalog import crane_ids, get_crane_spec, all_crane_specs
from .configuration import CraneState, CraneConfiguration

__all__ = [
    "CapacityPoint",
    "LoadChart",
    "CapacityChart",
    "CapacityChartBuilder",
    "parse_csv",
    "parse_json",
    "parse_table",
    "load_charts",
    "OutriggerPosition",
    "Retracted",
    "Extended",
    "Set",
    "OutriggerDeployment",
    "OutriggerConfig",
    "OutriggerSystem",
    "CounterweightSlab",
    "CounterweightConfig",
    "CraneType",
    "CraneSpec",
    "crane_ids",
    "get_crane_spec",
    "all_crane_specs",
    "CraneState",
    "CraneConfiguration",
]
