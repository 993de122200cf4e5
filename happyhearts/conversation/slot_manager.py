"""
Slot ordering and next-question selection for the booking conversation.

Slots are asked in a fixed order. The next question always targets the
earliest unset slot, whatever order the caller volunteered details in.

Usage:
    field = get_next_missing_field(record)
    if field is not None:
        question = personalized_prompt(field, record)
"""

from dataclasses import dataclass
from typing import Any, Optional

from happyhearts.prompts.messages import (
    DATE_TIME_OCCASION_LEAD,
    DECORATION_FOR_OCCASION,
    FIELD_QUESTIONS,
    GUEST_COUNT_THANKS,
)
from happyhearts.schemas.booking_schema import FIELD_PRIORITY, BookingField, BookingRecord
from happyhearts.utils import first_name


@dataclass(frozen=True)
class SlotDefinition:
    """Schema for a single slot to collect."""

    field: BookingField
    display_name: str
    question: str


SLOT_DEFINITIONS: list[SlotDefinition] = [
    SlotDefinition(BookingField.NAME, "name", FIELD_QUESTIONS[BookingField.NAME]),
    SlotDefinition(BookingField.OCCASION, "occasion", FIELD_QUESTIONS[BookingField.OCCASION]),
    SlotDefinition(BookingField.DATE_TIME, "date & time", FIELD_QUESTIONS[BookingField.DATE_TIME]),
    SlotDefinition(
        BookingField.GUEST_COUNT, "guest count", FIELD_QUESTIONS[BookingField.GUEST_COUNT]
    ),
    SlotDefinition(
        BookingField.DECORATION, "decoration", FIELD_QUESTIONS[BookingField.DECORATION]
    ),
    SlotDefinition(BookingField.CONTACT, "contact number", FIELD_QUESTIONS[BookingField.CONTACT]),
]


def get_definition(field: BookingField) -> SlotDefinition:
    for defn in SLOT_DEFINITIONS:
        if defn.field == field:
            return defn
    raise ValueError(f"Unknown slot: {field}")


def get_next_missing_field(record: BookingRecord) -> Optional[BookingField]:
    """Get the earliest slot in ask order that hasn't been filled."""
    for field in FIELD_PRIORITY:
        if not record.is_set(field):
            return field
    return None


def get_missing_fields(record: BookingRecord) -> list[BookingField]:
    """Get all slots still unfilled, in ask order."""
    return [field for field in FIELD_PRIORITY if not record.is_set(field)]


def personalized_prompt(field: BookingField, record: BookingRecord) -> str:
    """
    Question for ``field``, warmed up with details already known.

    The guest count question thanks the caller by first name and the
    date question acknowledges the occasion. The decoration question is
    rephrased around the occasion when it is known.
    """
    question = get_definition(field).question
    if field == BookingField.GUEST_COUNT and record.name:
        return GUEST_COUNT_THANKS.format(first_name=first_name(record.name), question=question)
    if field == BookingField.DATE_TIME and record.occasion:
        return DATE_TIME_OCCASION_LEAD.format(occasion=record.occasion.value, question=question)
    if field == BookingField.DECORATION and record.occasion:
        return DECORATION_FOR_OCCASION.format(occasion=record.occasion.value.lower())
    return question


def get_stats(record: BookingRecord) -> dict[str, Any]:
    """Slot collection statistics for the end-of-chat summary."""
    filled = len(record.filled_fields())
    required = len(FIELD_PRIORITY)
    return {
        "slots_filled": filled,
        "slots_required": required,
        "fill_rate": filled / required,
        "booking_complete": record.booking_complete,
    }


def get_summary(record: BookingRecord) -> str:
    """Read-back of collected slots, one per line."""
    lines = []
    for defn in SLOT_DEFINITIONS:
        value = record.get(defn.field)
        if value is None:
            continue
        if hasattr(value, "value"):
            value = value.value
        lines.append(f"  {defn.display_name}: {value}")
    return "Here's what I have:\n" + "\n".join(lines)
