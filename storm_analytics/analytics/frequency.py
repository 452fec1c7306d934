"""
Event frequency — top event types per state and per calendar month.
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.config import TOP_STATE_TYPES, TOP_SEASONAL_TYPES
from storm_analytics.analytics.common import top_n


def top_event_types(df: pd.DataFrame, n: int) -> list[str]:
    """The n most frequent event types; ties keep first-appearance order."""
    return top_n(df["event_type"], n)


def events_by_state(df: pd.DataFrame, n: int = TOP_STATE_TYPES) -> pd.DataFrame:
    """Event counts per (state, event_type) for the top-n event types."""
    top = top_event_types(df, n)
    subset = df[df["event_type"].isin(top)]
    return (
        subset.groupby(["state", "event_type"], sort=True, dropna=False)
        .size()
        .reset_index(name="n")
    )


def monthly_frequency(df: pd.DataFrame, n: int = TOP_SEASONAL_TYPES) -> pd.DataFrame:
    """Event counts per (month, event_type) for the top-n event types.

    The top-n is taken over every event; events without a month are then
    left out of the counts.
    """
    top = top_event_types(df, n)
    subset = df[df["event_type"].isin(top) & df["month"].notna()]
    return (
        subset.groupby(["month", "event_type"], sort=True, observed=True)
        .size()
        .reset_index(name="n")
    )


def state_matrix(by_state: pd.DataFrame) -> pd.DataFrame:
    """state × event_type grid of counts (NaN where a pair never occurs)."""
    return by_state.pivot(index="state", columns="event_type", values="n")


def monthly_matrix(monthly: pd.DataFrame) -> pd.DataFrame:
    """month × event_type grid of counts in calendar order (NaN where absent)."""
    grid = monthly.pivot(index="month", columns="event_type", values="n")
    return grid.sort_index()
