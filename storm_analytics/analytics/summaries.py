"""
Run all four summaries over a loaded StormStore.
"""
from __future__ import annotations

from storm_analytics.data.schemas import ReportOptions, StormSummaries
from storm_analytics.data.store import StormStore
from storm_analytics.analytics.damage import damage_summary
from storm_analytics.analytics.frequency import events_by_state, monthly_frequency
from storm_analytics.analytics.health import health_summary


def build_summaries(store: StormStore, options: ReportOptions | None = None) -> StormSummaries:
    """Health, state frequency, monthly frequency and damage for one run."""
    options = options or ReportOptions()
    df = store.df

    health = health_summary(df)
    damage = damage_summary(df)

    return StormSummaries(
        health=health,
        by_state=events_by_state(df, options.top_state_types),
        monthly=monthly_frequency(df, options.top_seasonal_types),
        damage=damage,
        options=options,
        total_events=store.row_count(),
        total_injuries=int(health["injuries"].sum()),
        total_deaths=int(health["deaths"].sum()),
        total_damage=float(damage["total_damage"].sum()),
        date_range=store.date_range(),
    )
