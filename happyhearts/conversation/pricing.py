"""Price band estimation and the booking confirmation message."""

from happyhearts.prompts.messages import (
    ADVANCE_PAYMENT_LINE,
    CLOSING_LINE,
    CONFIRMATION_OPENING,
    CURRENCY_PREFIX,
    DECOR_BRIEFING_LINE,
    FLEXIBLE_PRICE_LINE,
    INCLUSIONS_LINE,
    OWN_DECOR_LINE,
    PRICE_BAND_LINE,
)
from happyhearts.schemas.booking_schema import BookingRecord, Decoration
from happyhearts.utils import first_name, format_amount

BASE_PRICE = 18000
INCLUDED_GUESTS = 40
PER_GUEST_ABOVE_INCLUDED = 150
LARGE_PARTY_THRESHOLD = 60
PER_GUEST_ABOVE_LARGE_PARTY = 250
SETUP_MARGIN = 6000


def estimate_price_band(guest_count: int) -> tuple[int, int]:
    """
    Return the (low, high) package estimate for a guest count.

    >>> estimate_price_band(80)
    (24000, 35000)
    """
    low = BASE_PRICE + max(guest_count - INCLUDED_GUESTS, 0) * PER_GUEST_ABOVE_INCLUDED
    high = (
        low
        + max(guest_count - LARGE_PARTY_THRESHOLD, 0) * PER_GUEST_ABOVE_LARGE_PARTY
        + SETUP_MARGIN
    )
    return low, high


def build_price_line(guest_count: int) -> str:
    if not guest_count:
        return FLEXIBLE_PRICE_LINE
    low, high = estimate_price_band(guest_count)
    return PRICE_BAND_LINE.format(
        guest_count=guest_count,
        currency=CURRENCY_PREFIX,
        low=format_amount(low),
        high=format_amount(high),
    )


def build_confirmation_message(record: BookingRecord) -> str:
    """Compose the multi-paragraph confirmation sent once all slots are filled."""
    decor_line = (
        DECOR_BRIEFING_LINE if record.decoration == Decoration.YES else OWN_DECOR_LINE
    )
    paragraphs = [
        CONFIRMATION_OPENING.format(
            first_name=first_name(record.name) if record.name else "there",
            date_time=record.date_time,
        ),
        build_price_line(record.guest_count or 0),
        INCLUSIONS_LINE,
        decor_line,
        ADVANCE_PAYMENT_LINE,
        CLOSING_LINE,
    ]
    return "\n\n".join(paragraphs)
