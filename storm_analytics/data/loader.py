"""
Storm Events CSV discovery and loading.
"""
from __future__ import annotations

import re
from pathlib import Path

import pandas as pd

from storm_analytics.config import (
    INBOX_FOLDER, DETAILS_KEYWORDS, LOCATIONS_KEYWORDS, FATALITIES_KEYWORDS, JOIN_KEY,
    REQUIRED_DETAILS_COLUMNS,
)
from storm_analytics.data.normalize import normalize_columns
from storm_analytics.data.schemas import InputFiles


class InputNotFound(FileNotFoundError):
    """A required input file is missing."""


class ParseError(ValueError):
    """An input file could not be read as a Storm Events table."""


# ---------------------------------------------------------------------------
# Year / creation-date extraction from filenames
# ---------------------------------------------------------------------------

_DATA_YEAR_RE = re.compile(r"_d(\d{4})")
_CREATED_RE = re.compile(r"_c(\d{8})")


def _parse_file_stamps(filepath: Path) -> tuple[int | None, str | None]:
    """Extract (data_year, created_yyyymmdd) from a filename like
    "StormEvents_details-ftp_v1.0_d2024_c20250401.csv"
    """
    name = filepath.name
    y = _DATA_YEAR_RE.search(name)
    c = _CREATED_RE.search(name)
    return (int(y.group(1)) if y else None), (c.group(1) if c else None)


# ---------------------------------------------------------------------------
# CSV discovery
# ---------------------------------------------------------------------------

def discover_csvs(
    inbox: Path = INBOX_FOLDER,
    keywords: list[str] | None = None,
    year: int | None = None,
) -> list[Path]:
    """Recursively find CSVs (plain or gzipped) in inbox matching keywords."""
    if keywords is None:
        keywords = DETAILS_KEYWORDS

    matches: list[Path] = []
    if not inbox.exists():
        return matches

    candidates = list(inbox.rglob("*.csv")) + list(inbox.rglob("*.csv.gz"))
    for csv_file in candidates:
        filename_lower = csv_file.name.lower()
        if not any(kw in filename_lower for kw in keywords):
            continue
        if year is not None:
            file_year, _ = _parse_file_stamps(csv_file)
            if file_year is not None and file_year != year:
                continue
        matches.append(csv_file)

    # Most recent NOAA creation stamp first
    def _sort_key(p: Path) -> str:
        _, created = _parse_file_stamps(p)
        return created or "00000000"

    matches.sort(key=_sort_key, reverse=True)
    return matches


def resolve_inputs(
    inbox: Path = INBOX_FOLDER,
    year: int | None = None,
    details: Path | None = None,
    locations: Path | None = None,
    fatalities: Path | None = None,
) -> InputFiles:
    """Pick the three input files: explicit paths win, else newest discovered.

    Raises InputNotFound for any table that cannot be located.
    """
    explicit = {"details": details, "locations": locations, "fatalities": fatalities}
    keywords = {
        "details": DETAILS_KEYWORDS,
        "locations": LOCATIONS_KEYWORDS,
        "fatalities": FATALITIES_KEYWORDS,
    }

    resolved: dict[str, Path] = {}
    for name, path in explicit.items():
        if path is not None:
            path = Path(path)
            if not path.is_file():
                raise InputNotFound(f"{name} file not found: {path}")
            resolved[name] = path
            continue
        found = discover_csvs(Path(inbox), keywords[name], year)
        if not found:
            suffix = f" for {year}" if year is not None else ""
            raise InputNotFound(f"No {name} CSV found in {inbox}{suffix}")
        resolved[name] = found[0]

    return InputFiles(**resolved)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_table(filepath: Path, name: str = "table", required: list[str] | None = None) -> pd.DataFrame:
    """Load one CSV and lowercase its column names.

    Raises InputNotFound if the file is absent and ParseError if it cannot be
    tokenised, lacks the event_id join key or lacks any of the required columns.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise InputNotFound(f"{name} file not found: {filepath}")

    try:
        df = pd.read_csv(filepath, low_memory=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise ParseError(f"Could not parse {name} file {filepath.name}: {exc}") from exc

    df = normalize_columns(df)
    if JOIN_KEY not in df.columns:
        raise ParseError(f"{name} file {filepath.name} has no '{JOIN_KEY}' column")

    ids = pd.to_numeric(df[JOIN_KEY], errors="coerce")
    bad = int(ids.isna().sum())
    if bad:
        raise ParseError(f"{name} file {filepath.name}: {bad:,} rows with a missing or non-numeric {JOIN_KEY}")
    df[JOIN_KEY] = ids.astype("int64")

    missing = [c for c in (required or []) if c not in df.columns]
    if missing:
        raise ParseError(f"{name} file {filepath.name} missing columns: {', '.join(missing)}")

    print(f"  {name}: {filepath.name} ({len(df):,} rows)")
    return df


def load_all(files: InputFiles) -> tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """Load details, locations and fatalities. Any failure aborts the run."""
    details = load_table(files.details, "details", REQUIRED_DETAILS_COLUMNS)
    locations = load_table(files.locations, "locations")
    fatalities = load_table(files.fatalities, "fatalities")
    return details, locations, fatalities
