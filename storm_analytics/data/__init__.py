"""Data loading, joining, cleaning, and in-memory holder."""
from .loader import discover_csvs, resolve_inputs, load_table, load_all, InputNotFound, ParseError
from .store import StormStore
from .schemas import InputFiles, ReportOptions, StormSummaries, ChartKind
from .normalize import normalize_columns, join_tables, clean_events, parse_timestamps
