"""
Chart rendering for the four summaries.

Every renderer reads its summary and builds new frames for plotting; the
summary passed in is never modified.
"""
from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.figure import Figure

from storm_analytics.config import MONTH_ORDER, TOP_HEALTH_CHART, TOP_DAMAGE_CHART
from storm_analytics.analytics.frequency import state_matrix, monthly_matrix
from storm_analytics.charts.styles import (
    HEALTH_BAR, DAMAGE_BAR, HEATMAP_CMAP, GRID_LINE, TITLE_COLOR, AXIS_COLOR,
    FIG_DPI, BAR_FIGSIZE, HEATMAP_FIGSIZE, LINE_FIGSIZE,
    TITLE_FONTSIZE, LABEL_FONTSIZE, HEATMAP_X_FONTSIZE, HEATMAP_Y_FONTSIZE, LINE_WIDTH,
    COMMA_FORMAT, DOLLAR_FORMAT,
)
from storm_analytics.data.schemas import ChartKind, StormSummaries


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _style_axes(ax, title: str, xlabel: str, ylabel: str) -> None:
    ax.set_title(title, fontsize=TITLE_FONTSIZE, color=TITLE_COLOR, loc="left")
    ax.set_xlabel(xlabel, fontsize=LABEL_FONTSIZE, color=AXIS_COLOR)
    ax.set_ylabel(ylabel, fontsize=LABEL_FONTSIZE, color=AXIS_COLOR)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)


def _no_data(ax, title: str) -> None:
    ax.set_title(title, fontsize=TITLE_FONTSIZE, color=TITLE_COLOR, loc="left")
    ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes, color=AXIS_COLOR)
    ax.set_axis_off()


def _finish(fig: Figure, path: Path | None, close: bool = True) -> Path | Figure:
    """Save to path (closing the figure) or hand the figure back."""
    fig.tight_layout()
    if path is None:
        return fig
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=FIG_DPI, bbox_inches="tight")
    if close:
        plt.close(fig)
    return path


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def render_health_chart(health, year: int, path: Path | None = None,
                        top_n: int = TOP_HEALTH_CHART, close: bool = True):
    """Horizontal bars of injuries + deaths for the top event types."""
    title = f"Top {top_n} Storm Event Types by Combined Injuries and Fatalities ({year})"
    fig, ax = plt.subplots(figsize=BAR_FIGSIZE)
    if health.empty:
        _no_data(ax, title)
        return _finish(fig, path, close)

    # Largest at the top
    top = health.head(top_n).iloc[::-1]
    ax.barh(top["event_type"].astype(str).tolist(), top["total_health"].tolist(), color=HEALTH_BAR)
    ax.xaxis.set_major_formatter(COMMA_FORMAT)
    _style_axes(ax, title, "Total Injuries + Deaths", "Event Type")
    return _finish(fig, path, close)


def render_state_heatmap(by_state, year: int, path: Path | None = None, close: bool = True):
    """Heat map of event counts, event type across, state down."""
    n_types = by_state["event_type"].nunique() if not by_state.empty else 0
    title = f"Frequency of Top {n_types} Storm Event Types by State ({year})"
    fig, ax = plt.subplots(figsize=HEATMAP_FIGSIZE)
    if by_state.empty:
        _no_data(ax, title)
        return _finish(fig, path, close)

    grid = state_matrix(by_state)
    grid.index = grid.index.astype(str)
    grid.columns = grid.columns.astype(str)
    sns.heatmap(
        grid,
        cmap=HEATMAP_CMAP,
        linewidths=0.5,
        linecolor=GRID_LINE,
        cbar_kws={"label": "Count"},
        ax=ax,
    )
    _style_axes(ax, title, "Event Type", "State")
    ax.tick_params(axis="x", labelsize=HEATMAP_X_FONTSIZE, labelrotation=45)
    for label in ax.get_xticklabels():
        label.set_horizontalalignment("right")
    ax.tick_params(axis="y", labelsize=HEATMAP_Y_FONTSIZE)
    return _finish(fig, path, close)


def render_seasonal_chart(monthly, year: int, path: Path | None = None, close: bool = True):
    """One line per event type across the calendar months."""
    n_types = monthly["event_type"].nunique() if not monthly.empty else 0
    title = f"Seasonal Trends for Top {n_types} Storm Event Types ({year})"
    fig, ax = plt.subplots(figsize=LINE_FIGSIZE)
    if monthly.empty:
        _no_data(ax, title)
        return _finish(fig, path, close)

    grid = monthly_matrix(monthly)
    months = [str(m) for m in grid.index]
    for event_type in grid.columns:
        series = grid[event_type].dropna()
        xs = [MONTH_ORDER.index(str(m)) for m in series.index]
        ax.plot(xs, series.tolist(), linewidth=LINE_WIDTH, marker="o", markersize=3, label=str(event_type))

    ax.set_xticks([MONTH_ORDER.index(m) for m in months])
    ax.set_xticklabels(months, rotation=30, ha="right")
    ax.yaxis.set_major_formatter(COMMA_FORMAT)
    ax.legend(title="Event Type", frameon=False, bbox_to_anchor=(1.01, 1), loc="upper left")
    _style_axes(ax, title, "Month", "Number of Events")
    return _finish(fig, path, close)


def render_damage_chart(damage, year: int, path: Path | None = None,
                        top_n: int = TOP_DAMAGE_CHART, close: bool = True):
    """Horizontal bars of property damage (million USD) for the top event types."""
    title = f"Top {top_n} Event Types by Total Property Damage ({year})"
    fig, ax = plt.subplots(figsize=BAR_FIGSIZE)
    if damage.empty:
        _no_data(ax, title)
        return _finish(fig, path, close)

    top = damage.head(top_n).iloc[::-1]
    millions = (top["total_damage"] / 1e6).tolist()
    ax.barh(top["event_type"].astype(str).tolist(), millions, color=DAMAGE_BAR)
    ax.xaxis.set_major_formatter(DOLLAR_FORMAT)
    _style_axes(ax, title, "Damage (Million USD)", "Event Type")
    return _finish(fig, path, close)


# ---------------------------------------------------------------------------
# All charts
# ---------------------------------------------------------------------------

def render_all(summaries: StormSummaries, output_dir: Path, show: bool = False) -> list[Path]:
    """Write the four chart PNGs to output_dir; optionally display them."""
    if not show:
        plt.switch_backend("Agg")

    opts = summaries.options
    output_dir = Path(output_dir)
    close = not show
    paths = [
        render_health_chart(summaries.health, opts.year, output_dir / ChartKind.HEALTH.filename,
                            top_n=opts.top_health, close=close),
        render_state_heatmap(summaries.by_state, opts.year, output_dir / ChartKind.STATE.filename,
                             close=close),
        render_seasonal_chart(summaries.monthly, opts.year, output_dir / ChartKind.SEASONAL.filename,
                              close=close),
        render_damage_chart(summaries.damage, opts.year, output_dir / ChartKind.DAMAGE.filename,
                            top_n=opts.top_damage, close=close),
    ]
    if show:
        plt.show()
    return paths
