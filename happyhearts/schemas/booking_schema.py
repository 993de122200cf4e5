"""Booking record and turn result data models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingField(str, Enum):
    """Slots collected for a booking, declared in the order they are asked."""

    NAME = "name"
    OCCASION = "occasion"
    DATE_TIME = "date_time"
    GUEST_COUNT = "guest_count"
    DECORATION = "decoration"
    CONTACT = "contact"


# Explicit ask order; never derived from model field iteration.
FIELD_PRIORITY: tuple[BookingField, ...] = (
    BookingField.NAME,
    BookingField.OCCASION,
    BookingField.DATE_TIME,
    BookingField.GUEST_COUNT,
    BookingField.DECORATION,
    BookingField.CONTACT,
)


class Occasion(str, Enum):
    """Kinds of event the venue hosts. Values are the display text."""

    BIRTHDAY = "Birthday"
    BABY_SHOWER = "Baby Shower"
    ENGAGEMENT = "Engagement"
    ANNIVERSARY = "Anniversary"
    CORPORATE = "Corporate"
    OTHER = "Other"


class Decoration(str, Enum):
    YES = "yes"
    NO = "no"


class BookingRecord(BaseModel):
    """
    Accumulated booking details for one conversation.

    Immutable: every update returns a new record. A field moves from unset
    to set at most once, and nothing changes after ``booking_complete``.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    occasion: Optional[Occasion] = None
    date_time: Optional[str] = None
    guest_count: Optional[int] = Field(default=None, gt=0)
    decoration: Optional[Decoration] = None
    contact: Optional[str] = None
    booking_complete: bool = False

    def get(self, field: BookingField) -> Any:
        return getattr(self, field.value)

    def is_set(self, field: BookingField) -> bool:
        return self.get(field) is not None

    def filled_fields(self) -> list[BookingField]:
        return [f for f in FIELD_PRIORITY if self.is_set(f)]

    def with_field(self, field: BookingField, value: Any) -> "BookingRecord":
        """Return a copy with ``field`` set, or this record if it may not change."""
        if self.booking_complete or self.is_set(field) or value is None:
            return self
        return self.model_copy(update={field.value: value})

    def mark_complete(self) -> "BookingRecord":
        if self.booking_complete:
            return self
        return self.model_copy(update={"booking_complete": True})


class AssistantTurnResult(BaseModel):
    """Ordered assistant replies for one turn plus the record to carry forward."""

    responses: list[str] = Field(default_factory=list)
    state: BookingRecord
