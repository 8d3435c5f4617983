"""Shared fixtures for tests."""

from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def sample_record():
    """Create a sample WorkDayRecord for testing."""
    from models import WorkDayRecord

    return WorkDayRecord(
        date=date(2024, 6, 10),
        category_id=2,
        category_name="Skördare",
        project="LG456",
        hours_worked="7.5",
        travel_hours="0",
        location_from="Depot",
        location_to="Site A",
        notes="",
    )


@pytest.fixture
def training_record():
    """Create a record in a category with only hours and notes."""
    from models import WorkDayRecord

    return WorkDayRecord(
        date=date(2024, 6, 3),
        category_id=4,
        category_name="Utbildning",
        project="INTERN",
        hours_worked="4",
        notes="Motorsågskurs",
    )


@pytest.fixture
def empty_store():
    from storage import RecordStore

    return RecordStore()


@pytest.fixture
def store(sample_record, training_record):
    """A store with two June 2024 records."""
    from storage import RecordStore

    return RecordStore([training_record, sample_record])


@pytest.fixture
def sample_config():
    """Create a sample Config for testing."""
    from models import Config

    return Config(start_view="summary", notes_width=20, log_level="DEBUG")
