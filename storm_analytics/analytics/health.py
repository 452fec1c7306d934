"""
Health impact — injuries and deaths per event type.
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.config import INJURY_COLS, DEATH_COLS
from storm_analytics.analytics.common import fillna_numeric


def health_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Injuries, deaths and their total per event type, highest total first.

    Direct and indirect counts are added per event with absent values as 0,
    so one missing column never hides the other.
    """
    cols = INJURY_COLS + DEATH_COLS
    work = df[["event_type"]].copy()
    work[cols] = df.reindex(columns=cols).apply(pd.to_numeric, errors="coerce")
    work = fillna_numeric(work, 0)

    work["injuries"] = work[INJURY_COLS].sum(axis=1)
    work["deaths"] = work[DEATH_COLS].sum(axis=1)

    out = (
        work.groupby("event_type", sort=False, dropna=False)
        .agg(injuries=("injuries", "sum"), deaths=("deaths", "sum"))
        .reset_index()
    )
    out["injuries"] = out["injuries"].astype("int64")
    out["deaths"] = out["deaths"].astype("int64")
    out["total_health"] = out["injuries"] + out["deaths"]
    return out.sort_values("total_health", ascending=False, kind="stable").reset_index(drop=True)
