"""Grouped summaries: health, frequency, seasonality, property damage."""
