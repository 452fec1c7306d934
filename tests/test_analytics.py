"""
Tests for the four summaries and their helpers.
"""
import numpy as np
import pandas as pd
import pytest

from storm_analytics.analytics.common import stable_counts, top_n, safe_divide, sanitize_for_json
from storm_analytics.analytics.damage import parse_damage, damage_usd, damage_parse_stats, damage_summary
from storm_analytics.analytics.frequency import (
    top_event_types, events_by_state, monthly_frequency, state_matrix, monthly_matrix,
)
from storm_analytics.analytics.health import health_summary
from storm_analytics.analytics.summaries import build_summaries
from storm_analytics.data.schemas import ReportOptions
from storm_analytics.data.store import StormStore


class TestParseDamage:

    @pytest.mark.parametrize("text, expected", [
        ("10.5K", 10_500.0),
        ("2M", 2_000_000.0),
        ("0", 0.0),
        ("0.00K", 0.0),
        ("250", 250.0),
        ("1,500K", 1_500_000.0),
        ("2.5k", 2_500.0),
    ])
    def test_examples(self, text, expected):
        assert parse_damage(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [None, np.nan, "", "K", "unknown"])
    def test_no_amount_is_zero(self, text):
        assert parse_damage(text) == 0.0

    def test_billion_suffix_not_scaled(self):
        assert parse_damage("1.5B") == pytest.approx(1.5)

    def test_never_negative(self):
        assert parse_damage("-5K") == pytest.approx(5_000.0)

    def test_repeatable(self):
        assert parse_damage("10.5K") == parse_damage("10.5K")

    def test_vectorised_matches_scalar(self):
        values = pd.Series(["10.5K", "2M", None, "", "1.5B", "abc", "3.25M", ".5K"])
        expected = [parse_damage(v) for v in values]
        assert damage_usd(values).tolist() == pytest.approx(expected)

    def test_parse_stats(self):
        unparseable, unhandled = damage_parse_stats(pd.Series(["10.5K", "abc", "1.5B", "0"]))
        assert unparseable == 1
        assert unhandled == 1


class TestDamageSummary:

    def test_totals_sorted(self, store):
        summary = damage_summary(store.df)
        assert summary["event_type"].tolist() == ["Tornado", "Hail", "Flash Flood"]
        totals = dict(zip(summary["event_type"], summary["total_damage"]))
        assert totals["Tornado"] == pytest.approx(2_010_500.0)
        assert totals["Hail"] == pytest.approx(5_000.0)
        assert totals["Flash Flood"] == pytest.approx(1.5)

    def test_input_untouched(self, store):
        before = store.df.copy()
        damage_summary(store.df)
        assert "damage_usd" not in store.df.columns
        pd.testing.assert_frame_equal(store.df, before)


class TestHealthSummary:

    def test_totals(self, store):
        summary = health_summary(store.df).set_index("event_type")
        assert summary.loc["Tornado", "injuries"] == 6
        assert summary.loc["Tornado", "deaths"] == 2
        assert summary.loc["Flash Flood", "deaths"] == 2
        assert summary.loc["Hail", "injuries"] == 1

    def test_total_is_sum_and_non_negative(self, store):
        summary = health_summary(store.df)
        assert (summary["total_health"] == summary["injuries"] + summary["deaths"]).all()
        assert (summary["injuries"] >= 0).all()
        assert (summary["deaths"] >= 0).all()

    def test_sorted_descending(self, store):
        summary = health_summary(store.df)
        assert summary["event_type"].tolist() == ["Tornado", "Flash Flood", "Hail"]

    def test_missing_component_counts_as_zero(self):
        df = pd.DataFrame({
            "event_type": ["Hail"],
            "injuries_direct": [2],
            "injuries_indirect": [np.nan],
            "deaths_direct": [0],
            "deaths_indirect": [1],
        })
        row = health_summary(df).iloc[0]
        assert row["injuries"] == 2
        assert row["deaths"] == 1
        assert row["total_health"] == 3

    def test_ties_keep_first_appearance(self):
        df = pd.DataFrame({
            "event_type": ["Wind", "Hail", "Flood"],
            "injuries_direct": [1, 1, 5],
            "injuries_indirect": [0, 0, 0],
            "deaths_direct": [0, 0, 0],
            "deaths_indirect": [0, 0, 0],
        })
        assert health_summary(df)["event_type"].tolist() == ["Flood", "Wind", "Hail"]


class TestTopN:

    def test_ties_broken_by_first_appearance(self):
        values = pd.Series(["b", "a", "a", "b", "c"])
        assert top_n(values, 2) == ["b", "a"]
        assert stable_counts(values).tolist() == [2, 2, 1]

    def test_stable_across_runs(self, store):
        assert top_event_types(store.df, 10) == top_event_types(store.df.copy(), 10)

    def test_event_type_ranking(self, store):
        assert top_event_types(store.df, 10) == ["Tornado", "Hail", "Flash Flood"]
        assert top_event_types(store.df, 1) == ["Tornado"]


class TestFrequency:

    def test_events_by_state(self, store):
        out = events_by_state(store.df, 10)
        assert list(out.columns) == ["state", "event_type", "n"]
        counts = {(r.state, r.event_type): r.n for r in out.itertuples()}
        assert counts == {
            ("KANSAS", "Hail"): 1,
            ("OKLAHOMA", "Hail"): 1,
            ("OKLAHOMA", "Tornado"): 1,
            ("TEXAS", "Flash Flood"): 1,
            ("TEXAS", "Tornado"): 2,
        }

    def test_events_by_state_restricted_to_top(self, store):
        out = events_by_state(store.df, 1)
        assert set(out["event_type"]) == {"Tornado"}
        assert out["n"].sum() == 3

    def test_monthly_frequency_calendar_order(self, store):
        out = monthly_frequency(store.df, 8)
        assert out["month"].astype(str).tolist() == ["April", "May", "May", "June"]
        assert out["event_type"].tolist() == ["Tornado", "Hail", "Tornado", "Flash Flood"]
        assert out["n"].tolist() == [2, 1, 1, 1]

    def test_monthly_excludes_missing_month(self, store):
        out = monthly_frequency(store.df, 8)
        hail = out[out["event_type"] == "Hail"]
        # the second Hail event has an unparseable timestamp
        assert hail["n"].sum() == 1

    def test_matrices(self, store):
        grid = state_matrix(events_by_state(store.df, 10))
        assert grid.loc["TEXAS", "Tornado"] == 2
        assert pd.isna(grid.loc["KANSAS", "Tornado"])

        months = monthly_matrix(monthly_frequency(store.df, 8))
        assert [str(m) for m in months.index][:3] == ["April", "May", "June"]


class TestBuildSummaries:

    def test_kpis(self, store):
        s = build_summaries(store, ReportOptions(year=2024))
        assert s.total_events == 6
        assert s.total_injuries == 7
        assert s.total_deaths == 4
        assert s.total_damage == pytest.approx(2_015_501.5)
        assert s.date_range == "2024-04-28 to 2024-06-10"

    def test_options_limit_top_types(self, store):
        s = build_summaries(store, ReportOptions(top_state_types=2, top_seasonal_types=1))
        assert set(s.by_state["event_type"]) == {"Tornado", "Hail"}
        assert set(s.monthly["event_type"]) == {"Tornado"}


class TestCommon:

    def test_safe_divide(self):
        assert safe_divide(1, 0) == 0.0
        assert safe_divide(1, 4) == 0.25

    def test_sanitize_for_json(self):
        out = sanitize_for_json({"a": np.int64(3), "b": np.float64("nan"), "c": [np.bool_(True)],
                                 "df": pd.DataFrame({"x": [1]})})
        assert out == {"a": 3, "b": 0.0, "c": [True], "df": [{"x": 1}]}


class TestBlankCategories:

    @pytest.fixture
    def blank_store(self):
        details = pd.DataFrame({
            "event_id": [1, 2],
            "state": ["TEXAS", None],
            "event_type": [None, "Hail"],
            "begin_date_time": ["2024-05-01 10:00:00", "2024-05-02 11:00:00"],
            "damage_property": ["2K", "1K"],
            "injuries_direct": [5, 1],
            "injuries_indirect": [0, 0],
            "deaths_direct": [0, 0],
            "deaths_indirect": [0, 0],
        })
        empty = pd.DataFrame({"event_id": pd.Series([], dtype="int64")})
        return StormStore().load_frames(details, empty, empty.copy())

    def test_blank_event_type_counts_toward_totals(self, blank_store):
        s = build_summaries(blank_store, ReportOptions(year=2024))
        assert s.total_events == 2
        assert s.total_injuries == 6
        assert s.total_damage == pytest.approx(3000.0)
        assert s.health["injuries"].sum() == s.total_injuries
        assert s.damage["total_damage"].sum() == pytest.approx(s.total_damage)

    def test_blank_event_type_reported_as_unknown(self, blank_store):
        s = build_summaries(blank_store, ReportOptions(year=2024))
        assert s.health.iloc[0]["event_type"] == "Unknown"
        assert s.health.iloc[0]["injuries"] == 5
        assert "Unknown" in s.by_state["state"].tolist()

    def test_groupby_keeps_unlabelled_rows(self):
        df = pd.DataFrame({
            "event_type": [np.nan, "Hail"],
            "damage_property": ["1K", "2K"],
        })
        assert damage_summary(df)["total_damage"].sum() == pytest.approx(3000.0)
