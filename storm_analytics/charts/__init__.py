"""Static charts for the storm summaries."""
from .renderer import (
    render_health_chart, render_state_heatmap, render_seasonal_chart, render_damage_chart, render_all,
)
