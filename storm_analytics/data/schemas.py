"""
Run configuration and result containers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import pandas as pd

from storm_analytics.config import (
    DEFAULT_YEAR, MISSING_CATEGORY_LABEL,
    TOP_HEALTH_CHART, TOP_STATE_TYPES, TOP_SEASONAL_TYPES, TOP_DAMAGE_CHART,
)


class ChartKind(str, Enum):
    HEALTH = "health"
    STATE = "state"
    SEASONAL = "seasonal"
    DAMAGE = "damage"

    @property
    def filename(self) -> str:
        return {
            ChartKind.HEALTH: "health_impact.png",
            ChartKind.STATE: "events_by_state.png",
            ChartKind.SEASONAL: "seasonal_trends.png",
            ChartKind.DAMAGE: "property_damage.png",
        }[self]


@dataclass
class InputFiles:
    """Resolved locations of the three Storm Events extracts."""
    details: Path
    locations: Path
    fatalities: Path


@dataclass
class ReportOptions:
    """Knobs for one report run."""
    year: int = DEFAULT_YEAR
    top_health: int = TOP_HEALTH_CHART
    top_state_types: int = TOP_STATE_TYPES
    top_seasonal_types: int = TOP_SEASONAL_TYPES
    top_damage: int = TOP_DAMAGE_CHART
    show: bool = False                   # open charts on screen instead of only saving


@dataclass
class CleanStats:
    """Counts of non-fatal data problems found while cleaning."""
    rows: int = 0
    unparseable_timestamps: int = 0
    unparseable_damage: int = 0
    unhandled_damage_units: int = 0
    missing_categories: int = 0

    def warnings(self) -> list[str]:
        out = []
        if self.unparseable_timestamps:
            out.append(f"{self.unparseable_timestamps:,} rows with unparseable begin_date_time (month left blank)")
        if self.unparseable_damage:
            out.append(f"{self.unparseable_damage:,} damage_property values with no numeric amount (counted as $0)")
        if self.unhandled_damage_units:
            out.append(f"{self.unhandled_damage_units:,} damage_property values with an unhandled unit suffix (counted at x1)")
        if self.missing_categories:
            out.append(f"{self.missing_categories:,} events with a blank event_type (reported as '{MISSING_CATEGORY_LABEL}')")
        return out


@dataclass
class StormSummaries:
    """The four aggregation results plus headline totals."""
    health: pd.DataFrame
    by_state: pd.DataFrame
    monthly: pd.DataFrame
    damage: pd.DataFrame
    options: ReportOptions = field(default_factory=ReportOptions)
    total_events: int = 0
    total_injuries: int = 0
    total_deaths: int = 0
    total_damage: float = 0.0
    date_range: Optional[str] = None
