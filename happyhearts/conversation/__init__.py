from happyhearts.conversation.engine import ensure_minimum_response, handle_assistant_turn
from happyhearts.conversation.extractors import extract_booking_details
from happyhearts.conversation.pricing import build_confirmation_message, estimate_price_band
from happyhearts.conversation.slot_manager import get_next_missing_field, personalized_prompt

__all__ = [
    "handle_assistant_turn",
    "ensure_minimum_response",
    "extract_booking_details",
    "get_next_missing_field",
    "personalized_prompt",
    "build_confirmation_message",
    "estimate_price_band",
]
