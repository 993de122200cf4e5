"""
Turn orchestration for the booking assistant.

One call handles one user message: extract whatever fields it carries,
answer side requests (venue media, pricing), then either ask for the next
missing slot or, once every slot is filled, send the confirmation.

The engine keeps no state between calls. Everything it needs arrives as
arguments and the updated record is handed back to the caller.

Usage:
    result = handle_assistant_turn(BookingRecord(), "I am Rohan", GREETING)
    for text in result.responses:
        print(text)
    record = result.state
"""

import logging

from happyhearts.conversation.extractors import extract_booking_details
from happyhearts.conversation.intents import contains_media_request, contains_price_question
from happyhearts.conversation.pricing import build_confirmation_message
from happyhearts.conversation.slot_manager import get_next_missing_field, personalized_prompt
from happyhearts.prompts.messages import (
    FILLER_ALREADY_COMPLETE,
    FILLER_FOLLOW_UP,
    FILLER_KEEP_GOING,
    FOLLOW_UP_CUE,
    PRICE_DISCLAIMER,
    VENUE_PREVIEW,
)
from happyhearts.schemas.booking_schema import AssistantTurnResult, BookingRecord

logger = logging.getLogger(__name__)


def handle_assistant_turn(
    previous_state: BookingRecord,
    message: str,
    last_assistant_text: str,
) -> AssistantTurnResult:
    """
    Run one conversation turn.

    Args:
        previous_state: Record carried over from the previous turn.
        message: Trimmed, non-empty user message.
        last_assistant_text: Text of the most recent assistant message.

    Returns:
        Replies in display order (venue link, pricing note, next question
        or confirmation, filler) and the updated record.
    """
    normalized = message.lower()
    updated = extract_booking_details(message, previous_state)
    responses: list[str] = []

    if contains_media_request(normalized):
        responses.append(VENUE_PREVIEW)

    missing_field = get_next_missing_field(updated)

    if contains_price_question(normalized) and (
        updated.date_time is None or updated.guest_count is None
    ):
        responses.append(PRICE_DISCLAIMER)
        if missing_field is not None:
            responses.append(personalized_prompt(missing_field, updated))
        return AssistantTurnResult(
            responses=ensure_minimum_response(responses, updated, last_assistant_text),
            state=updated,
        )

    if missing_field is None and not updated.booking_complete:
        responses.append(build_confirmation_message(updated))
        updated = updated.mark_complete()
        logger.info("Booking details complete; confirmation sent")
        return AssistantTurnResult(responses=responses, state=updated)

    if missing_field is not None:
        responses.append(personalized_prompt(missing_field, updated))

    return AssistantTurnResult(
        responses=ensure_minimum_response(responses, updated, last_assistant_text),
        state=updated,
    )


def ensure_minimum_response(
    responses: list[str],
    state: BookingRecord,
    last_assistant_text: str,
) -> list[str]:
    """Return ``responses`` unchanged, or a single filler line when it is empty."""
    if responses:
        return responses

    if state.booking_complete:
        return [FILLER_ALREADY_COMPLETE]

    if FOLLOW_UP_CUE in last_assistant_text:
        return [FILLER_FOLLOW_UP]

    logger.debug("No slot progress this turn; sending keep-going filler")
    return [FILLER_KEEP_GOING]
