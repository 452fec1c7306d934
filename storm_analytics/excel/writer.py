"""
SummaryWorkbook — one openpyxl workbook, each sheet written top to bottom.

A SheetWriter keeps its own row cursor, so report code lists blocks in order
(heading, section, KPI cards, notes, tables) without tracking row numbers.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from storm_analytics.excel.styles import (
    TITLE_FONT, SUBTITLE_FONT, SECTION_FONT, NOTE_TITLE_FONT, NOTE_BODY_FONT,
)
from storm_analytics.excel.formatters import (
    NUMBER_FORMATS,
    format_header_row,
    format_data_cell,
    auto_column_width,
    add_kpi_card,
)


ColSpec = tuple[str, str, str]  # (key, col_type, label)

SHEET_WIDTH = 8  # columns spanned by merged heading and note cells


def _cell_value(value, col_type: str):
    if pd.isna(value):
        return "" if col_type == "text" else 0
    return str(value) if col_type == "text" else value


class SheetWriter:
    """Appends styled blocks to one worksheet."""

    def __init__(self, ws: Worksheet) -> None:
        self.ws = ws
        self.row = 1

    def _merged(self, text: str, font) -> None:
        cell = self.ws.cell(row=self.row, column=1)
        cell.value = text
        cell.font = font
        self.ws.merge_cells(start_row=self.row, start_column=1, end_row=self.row, end_column=SHEET_WIDTH)

    def heading(self, title: str, subtitle: str) -> "SheetWriter":
        self._merged(title, TITLE_FONT)
        self.row += 1
        self._merged(subtitle, SUBTITLE_FONT)
        for col in range(1, SHEET_WIDTH + 1):
            self.ws.column_dimensions[get_column_letter(col)].width = 18
        self.row += 2
        return self

    def section(self, title: str) -> "SheetWriter":
        cell = self.ws.cell(row=self.row, column=1)
        cell.value = title
        cell.font = SECTION_FONT
        self.row += 2
        return self

    def kpis(self, cards: list[tuple]) -> "SheetWriter":
        """cards: [(value, label, format_type), ...], laid out every other column."""
        for i, (value, label, fmt) in enumerate(cards):
            add_kpi_card(self.ws, self.row, 1 + 2 * i, value, label, fmt)
        self.row += 3
        return self

    def note(self, title: str, body: str) -> "SheetWriter":
        cell = self.ws.cell(row=self.row, column=1)
        cell.value = title
        cell.font = NOTE_TITLE_FONT
        self.row += 1
        self._merged(body, NOTE_BODY_FONT)
        self.row += 2
        return self

    def table(
        self,
        columns: list[ColSpec],
        df: pd.DataFrame,
        highlight: str | None = None,
        highlight_top: int = 0,
        total: bool = False,
        freeze: bool = True,
    ) -> "SheetWriter":
        """Header row, one row per DataFrame record, optional TOTAL row.

        The first highlight_top records get the named highlight fill. The
        TOTAL row sums every numeric column except percentages.
        """
        header_row = self.row
        for col_num, (_, _, label) in enumerate(columns, 1):
            self.ws.cell(row=header_row, column=col_num).value = label
        format_header_row(self.ws, header_row, len(columns))
        self.row += 1

        for idx, record in enumerate(df.to_dict("records")):
            fill = highlight if idx < highlight_top else None
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                value = _cell_value(record.get(key), col_type)
                format_data_cell(self.ws, self.row, col_num, value, col_type, highlight=fill)
            self.row += 1

        if total and not df.empty:
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                if col_num == 1:
                    value, col_type = "TOTAL", "text"
                elif col_type in NUMBER_FORMATS and col_type != "percent":
                    value = df[key].sum()
                else:
                    value, col_type = "", "text"
                format_data_cell(self.ws, self.row, col_num, value, col_type, is_total=True)
            self.row += 1

        auto_column_width(self.ws)
        if freeze:
            self.ws.freeze_panes = f"A{header_row + 1}"
        return self


class SummaryWorkbook:
    """Workbook whose sheets are created in the order they are requested."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self.wb.remove(self.wb.active)

    def sheet(self, title: str) -> SheetWriter:
        return SheetWriter(self.wb.create_sheet(title=title))

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
