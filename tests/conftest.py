"""
Shared fixtures: small NOAA-shaped Storm Events extracts written to tmp_path.
"""
import matplotlib

matplotlib.use("Agg")

import pytest

from storm_analytics.data.loader import load_all
from storm_analytics.data.schemas import InputFiles
from storm_analytics.data.store import StormStore
from tests.samples import (
    DETAILS_CSV, LOCATIONS_CSV, FATALITIES_CSV, DETAILS_NAME, LOCATIONS_NAME, FATALITIES_NAME,
)


@pytest.fixture
def inbox(tmp_path):
    """Inbox folder holding one year of extracts."""
    folder = tmp_path / "inbox"
    folder.mkdir()
    (folder / DETAILS_NAME).write_text(DETAILS_CSV)
    (folder / LOCATIONS_NAME).write_text(LOCATIONS_CSV)
    (folder / FATALITIES_NAME).write_text(FATALITIES_CSV)
    return folder


@pytest.fixture
def input_files(inbox):
    return InputFiles(
        details=inbox / DETAILS_NAME,
        locations=inbox / LOCATIONS_NAME,
        fatalities=inbox / FATALITIES_NAME,
    )


@pytest.fixture
def tables(input_files):
    """(details, locations, fatalities) with lowercased columns."""
    return load_all(input_files)


@pytest.fixture
def store(input_files):
    return StormStore().load(files=input_files)
