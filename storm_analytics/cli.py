#!/usr/bin/env python3
"""
Storm Analytics CLI — summaries and charts for one year of NOAA Storm Events.

USAGE:
  python -m storm_analytics.cli report                         # Charts + workbook + JSON
  python -m storm_analytics.cli report --year 2024 --data-dir ./data
  python -m storm_analytics.cli charts --show                  # Charts only, on screen too
  python -m storm_analytics.cli inspect                        # Dimensions + first rows
  python -m storm_analytics.cli export --output summary.json   # Summaries as JSON

  Explicit inputs instead of inbox discovery:
  python -m storm_analytics.cli report --details d.csv --locations l.csv --fatalities f.csv
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd

from storm_analytics.config import INBOX_FOLDER, REPORTS_FOLDER, DEFAULT_YEAR
from storm_analytics.data.loader import InputNotFound, ParseError, resolve_inputs
from storm_analytics.data.schemas import ReportOptions
from storm_analytics.data.store import StormStore


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  STORM ANALYTICS — {title}")
    print("=" * 70)


def _build_options(args) -> ReportOptions:
    """Build ReportOptions from CLI args."""
    return ReportOptions(year=args.year, show=getattr(args, "show", False))


def _load_store(args) -> StormStore:
    files = resolve_inputs(
        Path(args.data_dir),
        args.year,
        details=args.details,
        locations=args.locations,
        fatalities=args.fatalities,
    )
    return StormStore().load(files=files)


def _write_json(path: Path, data) -> Path:
    """Write JSON to path, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return path


def cmd_report(args):
    """Charts, summary workbook and JSON into one timestamped folder."""
    from storm_analytics.analytics.summaries import build_summaries
    from storm_analytics.charts.renderer import render_all
    from storm_analytics.reports.summary_report import generate_excel, generate_json

    _banner("ANNUAL REPORT")
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")

    store = _load_store(args)
    options = _build_options(args)
    summaries = build_summaries(store, options)

    if args.output:
        output_folder = Path(args.output)
    else:
        output_folder = REPORTS_FOLDER / datetime.now().strftime("%Y%m%d_%H%M%S")
    output_folder.mkdir(parents=True, exist_ok=True)

    print(f"\n  Period: {summaries.date_range}")
    print("  Generating outputs...\n")

    for path in render_all(summaries, output_folder, show=options.show):
        print(f"   {path.name}")

    generate_excel(summaries, output_folder / f"Storm_Events_Summary_{options.year}.xlsx", store.stats)
    print(f"   Storm_Events_Summary_{options.year}.xlsx")

    _write_json(output_folder / f"storm_events_summary_{options.year}.json", generate_json(summaries, store.stats))
    print(f"   storm_events_summary_{options.year}.json")

    print(f"\n  Reports saved to: {output_folder}")
    print("=" * 70 + "\n")


def cmd_charts(args):
    """Render the four charts only."""
    from storm_analytics.analytics.summaries import build_summaries
    from storm_analytics.charts.renderer import render_all

    _banner("CHARTS")
    store = _load_store(args)
    summaries = build_summaries(store, _build_options(args))

    output_folder = Path(args.output) if args.output else REPORTS_FOLDER / "charts"
    paths = render_all(summaries, output_folder, show=args.show)
    print(f"\n  {len(paths)} charts saved to: {output_folder}\n")


def cmd_inspect(args):
    """Print the cleaned table's dimensions and first rows."""
    _banner("INSPECT")
    store = _load_store(args)
    df = store.df

    rows, cols = df.shape
    print(f"\n  Dimensions: {rows:,} rows x {cols} columns")
    print(f"  Date range: {store.date_range()}")
    print(f"  Event types: {len(store.event_types())}  |  States: {len(store.states())}")
    print(f"  Months with events: {', '.join(store.months_available()) or 'none'}\n")

    with pd.option_context("display.max_columns", 12, "display.width", 160):
        print(df.head(args.rows))
    print()


def cmd_export(args):
    """Write the summaries as JSON."""
    from storm_analytics.analytics.summaries import build_summaries
    from storm_analytics.reports.summary_report import generate_json

    _banner("JSON EXPORT")
    store = _load_store(args)
    summaries = build_summaries(store, _build_options(args))

    out = Path(args.output) if args.output else REPORTS_FOLDER / f"storm_events_summary_{args.year}.json"
    _write_json(out, generate_json(summaries, store.stats))
    print(f"\n  Saved: {out.resolve()}\n")


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--data-dir", default=str(INBOX_FOLDER), help="Folder searched for the three CSVs")
    p.add_argument("--year", type=int, default=DEFAULT_YEAR, help=f"Data year (default {DEFAULT_YEAR})")
    p.add_argument("--details", type=Path, help="Explicit details CSV")
    p.add_argument("--locations", type=Path, help="Explicit locations CSV")
    p.add_argument("--fatalities", type=Path, help="Explicit fatalities CSV")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storm-analytics",
        description="Storm Analytics — NOAA Storm Events annual summaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    report_parser = subparsers.add_parser("report", help="Charts + workbook + JSON")
    _add_input_args(report_parser)
    report_parser.add_argument("--output", help="Output folder (default: timestamped folder under reports/)")
    report_parser.add_argument("--show", action="store_true", help="Also display the charts")
    report_parser.set_defaults(func=cmd_report)

    charts_parser = subparsers.add_parser("charts", help="Render the four charts")
    _add_input_args(charts_parser)
    charts_parser.add_argument("--output", help="Output folder (default: reports/charts)")
    charts_parser.add_argument("--show", action="store_true", help="Also display the charts")
    charts_parser.set_defaults(func=cmd_charts)

    inspect_parser = subparsers.add_parser("inspect", help="Dimensions and first rows of the cleaned table")
    _add_input_args(inspect_parser)
    inspect_parser.add_argument("--rows", type=int, default=3, help="Rows to show (default 3)")
    inspect_parser.set_defaults(func=cmd_inspect)

    export_parser = subparsers.add_parser("export", help="Summaries as JSON")
    _add_input_args(export_parser)
    export_parser.add_argument("--output", help="Output JSON file")
    export_parser.set_defaults(func=cmd_export)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (InputNotFound, ParseError) as exc:
        print(f"\n  Error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
