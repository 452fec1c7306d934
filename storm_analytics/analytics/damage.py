"""
Property damage — parse NOAA damage text ("10.5K", "2M") into dollars and
total it per event type.
"""
from __future__ import annotations

import re

import pandas as pd

from storm_analytics.config import DAMAGE_UNIT_MULTIPLIERS

# First number in the text; commas are thousands separators. No sign: amounts
# are never negative.
_AMOUNT_PATTERN = r"(\d[\d,]*\.?\d*|\.\d+)"
_UNIT_PATTERN = r"([A-Z])\s*$"
_AMOUNT_RE = re.compile(_AMOUNT_PATTERN)


def parse_damage(text) -> float:
    """Dollar value of one damage_property string; 0.0 when there is no number."""
    if text is None or (not isinstance(text, str) and pd.isna(text)):
        return 0.0
    s = str(text).strip().upper()
    m = _AMOUNT_RE.search(s)
    if not m:
        return 0.0
    amount = float(m.group(1).replace(",", ""))
    unit = s[-1] if s[-1].isalpha() else ""
    return amount * DAMAGE_UNIT_MULTIPLIERS.get(unit, 1.0)


def _normalized_text(values: pd.Series) -> pd.Series:
    return values.astype("string").fillna("").str.strip().str.upper()


def _amounts(text: pd.Series) -> pd.Series:
    raw = text.str.extract(_AMOUNT_PATTERN, expand=False).str.replace(",", "", regex=False)
    return pd.to_numeric(raw, errors="coerce")


def _units(text: pd.Series) -> pd.Series:
    return text.str.extract(_UNIT_PATTERN, expand=False).fillna("")


def damage_usd(values: pd.Series) -> pd.Series:
    """Vectorised parse_damage."""
    text = _normalized_text(values)
    amount = _amounts(text).fillna(0.0)
    multiplier = _units(text).map(lambda u: DAMAGE_UNIT_MULTIPLIERS.get(u, 1.0))
    return (amount.astype(float) * multiplier.astype(float)).rename("damage_usd")


def damage_parse_stats(values: pd.Series) -> tuple[int, int]:
    """(values with no numeric amount, values with an unknown unit suffix)."""
    text = _normalized_text(values)
    amounts = _amounts(text)
    unparseable = int(amounts.isna().sum())
    units = _units(text)
    unknown_unit = (units != "") & ~units.isin(list(DAMAGE_UNIT_MULTIPLIERS))
    unhandled = int((unknown_unit & amounts.notna()).sum())
    return unparseable, unhandled


def damage_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Total property damage per event type, largest first."""
    work = df[["event_type", "damage_property"]].copy()
    work["damage_usd"] = damage_usd(work["damage_property"])
    out = (
        work.groupby("event_type", sort=False, dropna=False)
        .agg(total_damage=("damage_usd", "sum"))
        .reset_index()
    )
    return out.sort_values("total_damage", ascending=False, kind="stable").reset_index(drop=True)
