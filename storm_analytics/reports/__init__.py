"""Report outputs built from the storm summaries."""
