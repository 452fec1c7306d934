"""
Column normalisation, per-event enrichment summaries, the left join, and
field cleaning (timestamps, month, event type, damage text).
"""
from __future__ import annotations

import pandas as pd

from storm_analytics.config import (
    JOIN_KEY, TIMESTAMP_FORMATS, MONTH_ORDER, DAMAGE_DEFAULT_TEXT,
    INJURY_COLS, DEATH_COLS, MISSING_CATEGORY_LABEL,
)
from storm_analytics.data.schemas import CleanStats


# ---------------------------------------------------------------------------
# Column normalisation
# ---------------------------------------------------------------------------

def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase and strip column identifiers."""
    return df.rename(columns=lambda c: str(c).strip().lower())


# ---------------------------------------------------------------------------
# Enrichment summaries (one row per event)
# ---------------------------------------------------------------------------

def summarize_locations(locations: pd.DataFrame) -> pd.DataFrame:
    """Collapse location points to one row per event_id."""
    grouped = locations.groupby(JOIN_KEY, sort=False)
    out = grouped.size().rename("location_count").to_frame()

    for src, dest in [("latitude", "latitude"), ("longitude", "longitude")]:
        if src in locations.columns:
            coords = pd.to_numeric(locations[src], errors="coerce")
            out[dest] = coords.groupby(locations[JOIN_KEY], sort=False).mean()
    if "location" in locations.columns:
        out["location_name"] = grouped["location"].first()

    return out.reset_index()


def summarize_fatalities(fatalities: pd.DataFrame) -> pd.DataFrame:
    """Collapse fatality records to per-event counts.

    fatality_type is "D" (direct) or "I" (indirect) in NOAA extracts.
    """
    key = fatalities[JOIN_KEY]
    out = fatalities.groupby(JOIN_KEY, sort=False).size().rename("fatality_count").to_frame()

    if "fatality_type" in fatalities.columns:
        ftype = fatalities["fatality_type"].astype("string").str.strip().str.upper()
        out["fatalities_direct"] = (ftype == "D").fillna(False).astype(int).groupby(key, sort=False).sum()
        out["fatalities_indirect"] = (ftype == "I").fillna(False).astype(int).groupby(key, sort=False).sum()
    if "fatality_age" in fatalities.columns:
        ages = pd.to_numeric(fatalities["fatality_age"], errors="coerce")
        out["fatality_age_mean"] = ages.groupby(key, sort=False).mean()

    return out.reset_index()


# ---------------------------------------------------------------------------
# Join
# ---------------------------------------------------------------------------

def join_tables(
    details: pd.DataFrame,
    locations: pd.DataFrame,
    fatalities: pd.DataFrame,
) -> pd.DataFrame:
    """Left-join details with per-event location and fatality summaries.

    The result has exactly one row per details row. Unmatched enrichment
    fields stay NaN.
    """
    loc_summary = summarize_locations(locations)
    fat_summary = summarize_fatalities(fatalities)

    df = details.merge(loc_summary, on=JOIN_KEY, how="left", validate="many_to_one")
    df = df.merge(fat_summary, on=JOIN_KEY, how="left", validate="many_to_one")
    return df


# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------

def parse_timestamps(values: pd.Series) -> pd.Series:
    """Parse date-time text using TIMESTAMP_FORMATS in order; NaT if none match."""
    text = values.astype("string").str.strip()
    parsed = pd.Series(pd.NaT, index=values.index, dtype="datetime64[ns]")
    for fmt in TIMESTAMP_FORMATS:
        missing = parsed.isna() & text.notna()
        if not missing.any():
            break
        parsed[missing] = pd.to_datetime(text[missing], format=fmt, errors="coerce")
    return parsed


def month_labels(timestamps: pd.Series) -> pd.Series:
    """Full month names as an ordered categorical in calendar order."""
    names = timestamps.dt.month_name()
    return pd.Series(
        pd.Categorical(names, categories=MONTH_ORDER, ordered=True),
        index=timestamps.index,
        name="month",
    )


def title_case(values: pd.Series) -> pd.Series:
    """Uniform event type labels: "TORNADO" / "tornado" → "Tornado"."""
    return values.astype("string").str.strip().str.title()


def default_damage_text(values: pd.Series) -> pd.Series:
    """Missing or blank damage text becomes "0"."""
    text = values.astype("string").fillna("").str.strip()
    return text.where(text != "", DAMAGE_DEFAULT_TEXT)


def label_missing(values: pd.Series) -> pd.Series:
    """Blank or absent category values become MISSING_CATEGORY_LABEL."""
    text = values.astype("string").fillna("").str.strip()
    return text.where(text != "", MISSING_CATEGORY_LABEL)


def clean_events(df: pd.DataFrame) -> tuple[pd.DataFrame, CleanStats]:
    """Parse timestamps, derive month, normalise event type and damage text.

    Expects the details columns checked by the loader.
    """
    df = df.copy()
    stats = CleanStats(rows=len(df))

    df["begin_dt"] = parse_timestamps(df["begin_date_time"])
    stats.unparseable_timestamps = int(df["begin_dt"].isna().sum())

    if "end_date_time" in df.columns:
        df["end_dt"] = parse_timestamps(df["end_date_time"])

    df["month"] = month_labels(df["begin_dt"])

    stats.missing_categories = int(
        (df["event_type"].astype("string").fillna("").str.strip() == "").sum()
    )
    df["event_type"] = label_missing(title_case(df["event_type"]))
    df["state"] = label_missing(df["state"])

    for col in ["damage_property", "damage_crops"]:
        if col in df.columns:
            df[col] = default_damage_text(df[col])

    # Health counts stay NaN when blank; aggregation treats NaN as 0
    for col in INJURY_COLS + DEATH_COLS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    return df, stats
