"""
Storm Events Summary — JSON and Excel renditions of the four summaries.
"""
from __future__ import annotations

from pathlib import Path

from storm_analytics.analytics.common import pct_of_total, sanitize_for_json
from storm_analytics.data.schemas import CleanStats, StormSummaries
from storm_analytics.excel.writer import SummaryWorkbook


HEALTH_COLS = [
    ("event_type", "text", "Event Type"),
    ("injuries", "number", "Injuries"),
    ("deaths", "number", "Deaths"),
    ("total_health", "number", "Injuries + Deaths"),
    ("share_pct", "percent", "Share %"),
]

STATE_COLS = [
    ("state", "text", "State"),
    ("event_type", "text", "Event Type"),
    ("n", "number", "Events"),
]

MONTHLY_COLS = [
    ("month", "text", "Month"),
    ("event_type", "text", "Event Type"),
    ("n", "number", "Events"),
]

DAMAGE_COLS = [
    ("event_type", "text", "Event Type"),
    ("total_damage", "currency", "Property Damage"),
    ("share_pct", "percent", "Share %"),
]


def _kpis(summaries: StormSummaries) -> dict:
    return {
        "total_events": summaries.total_events,
        "total_injuries": summaries.total_injuries,
        "total_deaths": summaries.total_deaths,
        "total_damage": summaries.total_damage,
    }


def _with_share(df, value_col: str, total: float):
    out = df.copy()
    out["share_pct"] = [pct_of_total(v, total) for v in out[value_col]]
    return out


def generate_json(summaries: StormSummaries, stats: CleanStats | None = None) -> dict:
    """Plain-data rendition of the summaries, safe for json.dump."""
    monthly = summaries.monthly.copy()
    monthly["month"] = monthly["month"].astype(str)
    return sanitize_for_json({
        "year": summaries.options.year,
        "date_range": summaries.date_range,
        "summary": _kpis(summaries),
        "health": summaries.health,
        "by_state": summaries.by_state,
        "monthly": monthly,
        "damage": summaries.damage,
        "data_quality": stats.warnings() if stats else [],
    })


def generate_excel(
    summaries: StormSummaries,
    output_path: str | Path,
    stats: CleanStats | None = None,
) -> Path:
    year = summaries.options.year
    k = _kpis(summaries)
    health = _with_share(summaries.health, "total_health", k["total_injuries"] + k["total_deaths"])
    damage = _with_share(summaries.damage, "total_damage", k["total_damage"])

    book = SummaryWorkbook()

    overview = book.sheet("Executive Summary")
    overview.heading("NOAA STORM EVENTS", f"{year} Storm Events Summary  |  {summaries.date_range or 'N/A'}")
    overview.section("OVERVIEW").kpis([
        (k["total_events"], "EVENTS", "number"),
        (k["total_injuries"], "INJURIES", "number"),
        (k["total_deaths"], "DEATHS", "number"),
        (k["total_damage"], "PROPERTY DAMAGE", "millions"),
    ])
    for msg in (stats.warnings() if stats is not None else []):
        overview.note("Data quality", msg)
    overview.section("MOST HARMFUL EVENT TYPES").table(HEALTH_COLS[:4], health.head(5), freeze=False)

    book.sheet("Health Impact").table(HEALTH_COLS, health, highlight="gold", highlight_top=3, total=True)
    book.sheet("Events by State").table(STATE_COLS, summaries.by_state)
    book.sheet("Seasonality").table(MONTHLY_COLS, summaries.monthly)
    book.sheet("Property Damage").table(DAMAGE_COLS, damage, highlight="warning", highlight_top=3, total=True)

    return book.save(output_path)
