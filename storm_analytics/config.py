"""
Storm Analytics — Configuration: paths, constants, file patterns.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with STORM_DATA_DIR env var
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("STORM_DATA_DIR", str(Path.home() / "Desktop" / "Storm Analytics")))
BASE_FOLDER = _data_dir
INBOX_FOLDER = _data_dir / "inbox"
REPORTS_FOLDER = _data_dir / "reports"

DEFAULT_YEAR = int(os.environ.get("STORM_YEAR", "2024"))

# ---------------------------------------------------------------------------
# File-discovery patterns (keywords matched case-insensitively in filename)
#   StormEvents_details-ftp_v1.0_d2024_c20250401.csv
# ---------------------------------------------------------------------------
DETAILS_KEYWORDS = ["details"]
LOCATIONS_KEYWORDS = ["locations"]
FATALITIES_KEYWORDS = ["fatalities"]

# ---------------------------------------------------------------------------
# Column names (after lowercasing)
# ---------------------------------------------------------------------------
JOIN_KEY = "event_id"

INJURY_COLS = ["injuries_direct", "injuries_indirect"]
DEATH_COLS = ["deaths_direct", "deaths_indirect"]

# Details columns every summary reads; a details file without one is rejected
REQUIRED_DETAILS_COLUMNS = [
    "state", "event_type", "begin_date_time", "damage_property",
    *INJURY_COLS, *DEATH_COLS,
]

# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------
# Tried in order; NOAA's own exports use "28-APR-24 15:32:00"
TIMESTAMP_FORMATS = ["%Y-%m-%d %H:%M:%S", "%d-%b-%y %H:%M:%S"]

MONTH_ORDER = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DAMAGE_DEFAULT_TEXT = "0"

# Blank state or event type is reported under this label instead of being dropped
MISSING_CATEGORY_LABEL = "Unknown"

# Trailing unit marker → multiplier. "B" is deliberately absent and falls
# through to ×1; see DESIGN.md.
DAMAGE_UNIT_MULTIPLIERS = {
    "K": 1e3,
    "M": 1e6,
}

# ---------------------------------------------------------------------------
# Top-N sizes for the four summaries
# ---------------------------------------------------------------------------
TOP_HEALTH_CHART = 10
TOP_STATE_TYPES = 10
TOP_SEASONAL_TYPES = 8
TOP_DAMAGE_CHART = 6
