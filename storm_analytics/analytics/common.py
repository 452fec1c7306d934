"""
Shared helpers used across all analytics modules.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total."""
    return safe_divide(part, total) * 100


def fillna_numeric(df: pd.DataFrame, value=0) -> pd.DataFrame:
    """Fill NaN with value for numeric columns only.

    Safe to use when df contains categorical columns; avoids
    TypeError from pandas when calling df.fillna(0) with mixed dtypes.
    """
    num_cols = df.select_dtypes(include="number").columns
    if len(num_cols):
        df = df.copy()
        df[num_cols] = df[num_cols].fillna(value)
    return df


def stable_counts(values: pd.Series) -> pd.Series:
    """Occurrences per value, highest first; ties keep first-appearance order."""
    counts = values.groupby(values, sort=False, observed=True).size()
    return counts.sort_values(ascending=False, kind="stable")


def top_n(values: pd.Series, n: int) -> list:
    """The n most frequent values (ties broken by first appearance)."""
    return stable_counts(values.dropna()).head(n).index.tolist()


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, pd.DataFrame):
        return sanitize_for_json(obj.to_dict("records"))
    if isinstance(obj, dict):
        clean = {}
        for k, v in obj.items():
            if k is None:
                continue
            if isinstance(k, float) and (math.isnan(k) or math.isinf(k)):
                continue
            clean[str(k) if not isinstance(k, str) else k] = sanitize_for_json(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if isinstance(obj, pd.Timestamp):
        return obj.isoformat()
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
