"""Shared test fixtures and helpers."""

import pytest

from happyhearts.schemas.booking_schema import BookingRecord, Decoration, Occasion


@pytest.fixture
def empty_record():
    return BookingRecord()


def make_record(**overrides) -> BookingRecord:
    """Helper to create a BookingRecord with only the given fields set."""
    return BookingRecord(**overrides)


def make_full_record(**overrides) -> BookingRecord:
    """Helper to create a record with every slot filled and sensible defaults."""
    values = {
        "name": "Rohan Mehta",
        "occasion": Occasion.BIRTHDAY,
        "date_time": "2024-12-05 evening",
        "guest_count": 80,
        "decoration": Decoration.YES,
        "contact": "+919876543210",
    }
    values.update(overrides)
    return BookingRecord(**values)


@pytest.fixture
def full_record():
    return make_full_record()


@pytest.fixture
def completed_record():
    return make_full_record(booking_complete=True)
