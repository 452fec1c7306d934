"""Storm Analytics — NOAA Storm Events summaries and charts."""
__version__ = "0.1.0"
