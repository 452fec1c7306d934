"""
StormStore — the joined, cleaned Storm Events table held in memory for one run.

Loaded once, queried by the four summaries, then discarded.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from storm_analytics.config import INBOX_FOLDER
from storm_analytics.analytics.damage import damage_parse_stats
from storm_analytics.data.loader import load_all, resolve_inputs
from storm_analytics.data.normalize import join_tables, clean_events
from storm_analytics.data.schemas import CleanStats, InputFiles


class StormStore:
    """In-memory storm events with summary-friendly accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = pd.DataFrame()
        self.files: Optional[InputFiles] = None
        self.stats: CleanStats = CleanStats()
        self.base_rows = 0

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(
        self,
        inbox: Path = INBOX_FOLDER,
        year: int | None = None,
        files: InputFiles | None = None,
    ) -> "StormStore":
        """Resolve and load the three extracts, join them and clean the result."""
        print("Loading storm events data...")
        if files is None:
            files = resolve_inputs(inbox, year)
        self.files = files

        details, locations, fatalities = load_all(files)
        return self.load_frames(details, locations, fatalities)

    def load_frames(
        self,
        details: pd.DataFrame,
        locations: pd.DataFrame,
        fatalities: pd.DataFrame,
    ) -> "StormStore":
        """Join and clean already-loaded tables (column names lowercased)."""
        self.base_rows = len(details)
        joined = join_tables(details, locations, fatalities)
        self.df, self.stats = clean_events(joined)

        unparseable, unhandled = damage_parse_stats(self.df["damage_property"])
        self.stats.unparseable_damage = unparseable
        self.stats.unhandled_damage_units = unhandled

        print(f"  Joined: {len(self.df):,} events ({self.base_rows:,} detail rows)")
        for msg in self.stats.warnings():
            print(f"  Warning: {msg}")
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def event_types(self) -> list[str]:
        """Unique event types sorted alphabetically."""
        if self.df.empty:
            return []
        return sorted(self.df["event_type"].dropna().unique().tolist())

    def states(self) -> list[str]:
        if self.df.empty or "state" not in self.df.columns:
            return []
        return sorted(self.df["state"].dropna().astype(str).unique().tolist())

    def date_range(self) -> str:
        """Human-readable range of begin timestamps."""
        if self.df.empty:
            return "N/A"
        dates = self.df["begin_dt"].dropna()
        if dates.empty:
            return "N/A"
        return f"{dates.min():%Y-%m-%d} to {dates.max():%Y-%m-%d}"

    def months_available(self) -> list[str]:
        """Months with at least one event, calendar order."""
        if self.df.empty:
            return []
        present = set(self.df["month"].dropna().astype(str))
        return [m for m in self.df["month"].cat.categories if m in present]

    def row_count(self) -> int:
        return len(self.df)
