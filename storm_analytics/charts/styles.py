"""
Single source of truth for chart colors, sizes and axis formatters.
"""
from matplotlib.ticker import FuncFormatter

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
HEALTH_BAR = "steelblue"
DAMAGE_BAR = "purple"
HEATMAP_CMAP = "plasma"
GRID_LINE = "white"
TITLE_COLOR = "#222222"
AXIS_COLOR = "#666666"

# ---------------------------------------------------------------------------
# Figure settings
# ---------------------------------------------------------------------------
FIG_DPI = 150
BAR_FIGSIZE = (10, 6)
HEATMAP_FIGSIZE = (12, 14)
LINE_FIGSIZE = (12, 6)
TITLE_FONTSIZE = 13
LABEL_FONTSIZE = 11
HEATMAP_X_FONTSIZE = 9
HEATMAP_Y_FONTSIZE = 6
LINE_WIDTH = 1.8

# ---------------------------------------------------------------------------
# Tick formatters
# ---------------------------------------------------------------------------
COMMA_FORMAT = FuncFormatter(lambda v, _: f"{v:,.0f}")
DOLLAR_FORMAT = FuncFormatter(lambda v, _: f"${v:,.0f}")
