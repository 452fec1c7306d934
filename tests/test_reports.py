"""
Tests for the JSON and Excel summary outputs.
"""
import json

import pandas as pd
import pytest
from openpyxl import load_workbook

from storm_analytics.analytics.summaries import build_summaries
from storm_analytics.data.schemas import ReportOptions
from storm_analytics.excel.styles import GOLD_FILL
from storm_analytics.excel.writer import SummaryWorkbook
from storm_analytics.reports.summary_report import generate_json, generate_excel


@pytest.fixture
def summaries(store):
    return build_summaries(store, ReportOptions(year=2024))


class TestGenerateJson:

    def test_serializable(self, summaries, store):
        data = generate_json(summaries, store.stats)
        text = json.dumps(data)
        assert "Tornado" in text

    def test_contents(self, summaries, store):
        data = generate_json(summaries, store.stats)
        assert data["year"] == 2024
        assert data["summary"]["total_events"] == 6
        assert data["health"][0] == {"event_type": "Tornado", "injuries": 6, "deaths": 2, "total_health": 8}
        assert data["monthly"][0]["month"] == "April"
        assert len(data["data_quality"]) == 2

    def test_without_stats(self, summaries):
        assert generate_json(summaries)["data_quality"] == []


class TestGenerateExcel:

    def test_sheets(self, summaries, store, tmp_path):
        path = generate_excel(summaries, tmp_path / "out" / "summary.xlsx", store.stats)
        wb = load_workbook(path)
        assert wb.sheetnames == [
            "Executive Summary", "Health Impact", "Events by State", "Seasonality", "Property Damage",
        ]
        assert wb["Executive Summary"]["A1"].value == "NOAA STORM EVENTS"

    def test_health_sheet_rows(self, summaries, tmp_path):
        wb = load_workbook(generate_excel(summaries, tmp_path / "summary.xlsx"))
        ws = wb["Health Impact"]
        assert ws["A1"].value == "Event Type"
        assert ws["A2"].value == "Tornado"
        assert ws["D2"].value == 8
        # three event types + total row
        assert ws["A5"].value == "TOTAL"
        assert ws["D5"].value == 11

    def test_damage_sheet(self, summaries, tmp_path):
        wb = load_workbook(generate_excel(summaries, tmp_path / "summary.xlsx"))
        ws = wb["Property Damage"]
        assert ws["A2"].value == "Tornado"
        assert ws["B2"].value == pytest.approx(2_010_500.0)

    def test_health_share_total_left_blank(self, summaries, tmp_path):
        ws = load_workbook(generate_excel(summaries, tmp_path / "summary.xlsx"))["Health Impact"]
        assert ws["E1"].value == "Share %"
        assert ws["E5"].value in ("", None)


class TestSummaryWorkbook:

    COLS = [("name", "text", "Name"), ("n", "number", "Count"), ("pct", "percent", "Share %")]

    def test_table_rows_highlight_and_total(self, tmp_path):
        df = pd.DataFrame({"name": ["a", "b", None], "n": [3, 2, None], "pct": [50.0, 33.3, 16.7]})
        book = SummaryWorkbook()
        book.sheet("Data").table(self.COLS, df, highlight="gold", highlight_top=1, total=True)
        ws = load_workbook(book.save(tmp_path / "t.xlsx"))["Data"]

        assert [c.value for c in ws[1]] == ["Name", "Count", "Share %"]
        assert ws["A2"].fill.fgColor.rgb.endswith(GOLD_FILL.fgColor.rgb[-6:])
        assert ws["A4"].value in ("", None)
        assert ws["B4"].value == 0
        assert ws["A5"].value == "TOTAL"
        assert ws["B5"].value == 5
        assert ws.freeze_panes == "A2"

    def test_cursor_advances_past_blocks(self):
        sheet = SummaryWorkbook().sheet("Summary")
        sheet.heading("TITLE", "subtitle")
        assert sheet.row == 4
        sheet.section("S").kpis([(1, "ONE", "number")])
        assert sheet.row == 9
        sheet.note("Data quality", "message")
        assert sheet.row == 12

    def test_sheets_in_request_order(self):
        book = SummaryWorkbook()
        book.sheet("First")
        book.sheet("Second")
        assert book.wb.sheetnames == ["First", "Second"]
