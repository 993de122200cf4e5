"""Tests for turn orchestration: branches, ordering and conversation scenarios."""

import pytest

from happyhearts.conversation.engine import ensure_minimum_response, handle_assistant_turn
from happyhearts.conversation.pricing import build_confirmation_message
from happyhearts.prompts.messages import (
    FIELD_QUESTIONS,
    FILLER_ALREADY_COMPLETE,
    FILLER_FOLLOW_UP,
    FILLER_KEEP_GOING,
    GREETING,
    PRICE_DISCLAIMER,
    VENUE_PREVIEW,
)
from happyhearts.schemas.booking_schema import BookingField, Decoration, Occasion
from tests.conftest import make_full_record, make_record


class TestScenarios:
    def test_introduction_sets_name_and_asks_occasion(self, empty_record):
        result = handle_assistant_turn(empty_record, "I am Rohan", GREETING)
        assert result.state.name == "Rohan"
        assert result.responses == [FIELD_QUESTIONS[BookingField.OCCASION]]

    def test_iso_date_with_time_of_day(self):
        record = make_record(name="Rohan", occasion=Occasion.BIRTHDAY)
        result = handle_assistant_turn(record, "we need it on 2024-12-05 evening", "")
        assert result.state.date_time == "2024-12-05 evening"
        assert result.responses == ["Thanks, Rohan! How many guests are you expecting?"]

    def test_guest_count_then_occasion_decor_question(self):
        record = make_record(
            name="Rohan", occasion=Occasion.BIRTHDAY, date_time="2024-12-05 evening"
        )
        result = handle_assistant_turn(record, "around 75 guests", "")
        assert result.state.guest_count == 75
        assert result.responses == [
            "Would you like us to style birthday decor? Please let me know Yes or No."
        ]

    def test_contact_completes_booking(self):
        record = make_full_record(contact=None)
        result = handle_assistant_turn(record, "+91 98765 43210", "")
        assert result.state.contact == "+919876543210"
        assert result.state.booking_complete is True
        assert result.responses == [build_confirmation_message(result.state)]

    def test_price_question_after_completion(self, completed_record):
        result = handle_assistant_turn(completed_record, "what's the price?", "")
        assert result.responses == [FILLER_ALREADY_COMPLETE]
        assert result.state == completed_record


class TestSideRequests:
    def test_media_request_comes_first(self):
        record = make_record(name="Arjun")
        result = handle_assistant_turn(record, "can I see some photos?", "")
        assert result.responses == [VENUE_PREVIEW, FIELD_QUESTIONS[BookingField.OCCASION]]

    def test_price_question_with_missing_details(self):
        record = make_record(name="Priya")
        result = handle_assistant_turn(record, "what's the price for a baby shower?", "")
        assert result.state.occasion == Occasion.BABY_SHOWER
        assert result.responses == [
            PRICE_DISCLAIMER,
            "Baby Shower sounds lovely! Which date and preferred time slot would you like?",
        ]

    def test_media_and_price_together(self):
        record = make_record(name="Priya")
        result = handle_assistant_turn(record, "photos and cost please", "")
        assert result.responses[:2] == [VENUE_PREVIEW, PRICE_DISCLAIMER]
        assert len(result.responses) == 3

    def test_price_question_with_details_known_completes(self):
        # Only the contact is missing, so the date and guest count are known:
        # the price question does not trigger the disclaimer.
        record = make_full_record(contact=None)
        result = handle_assistant_turn(record, "what are the charges? 9876543210", "")
        assert result.state.booking_complete is True
        assert PRICE_DISCLAIMER not in result.responses

    def test_price_disclaimer_when_guest_count_missing_even_if_rest_filled(self):
        record = make_full_record(guest_count=None, contact=None)
        result = handle_assistant_turn(record, "what is the rate? 9876543210", "")
        assert result.state.contact == "9876543210"
        assert result.state.booking_complete is False
        assert result.responses == [
            PRICE_DISCLAIMER,
            "Thanks, Rohan! How many guests are you expecting?",
        ]

    def test_media_after_completion_has_no_filler(self, completed_record):
        result = handle_assistant_turn(completed_record, "send videos", "")
        assert result.responses == [VENUE_PREVIEW]


class TestFallback:
    def test_keep_going_filler(self):
        responses = ensure_minimum_response([], make_record(name="Rohan"), "")
        assert responses == [FILLER_KEEP_GOING]

    def test_follow_up_filler(self):
        responses = ensure_minimum_response(
            [], make_record(), "Is there something else you need?"
        )
        assert responses == [FILLER_FOLLOW_UP]

    def test_complete_filler_takes_precedence(self, completed_record):
        responses = ensure_minimum_response(
            [], completed_record, "something else you need"
        )
        assert responses == [FILLER_ALREADY_COMPLETE]

    def test_existing_responses_untouched(self):
        responses = ensure_minimum_response(["hello"], make_record(), "")
        assert responses == ["hello"]

    @pytest.mark.parametrize("message", ["ok", "thanks!", "sure thing", "123"])
    def test_turn_never_silent(self, completed_record, message):
        result = handle_assistant_turn(completed_record, message, "")
        assert result.responses


class TestCompletion:
    def test_confirmation_sent_once(self):
        record = make_full_record(contact=None)
        first = handle_assistant_turn(record, "9876543210", "")
        second = handle_assistant_turn(first.state, "thanks!", first.responses[-1])
        assert first.state.booking_complete is True
        assert second.responses == [FILLER_ALREADY_COMPLETE]

    def test_completed_record_never_mutates(self, completed_record):
        result = handle_assistant_turn(
            completed_record, "I am Vikram, 2025-01-01 morning for 20 guests no decor", ""
        )
        assert result.state == completed_record

    def test_previous_state_not_modified(self):
        record = make_full_record(contact=None)
        handle_assistant_turn(record, "9876543210", "")
        assert record.contact is None
        assert record.booking_complete is False

    def test_full_conversation(self, empty_record):
        turns = [
            "I am Rohan Mehta",
            "It's my daughter's birthday",
            "we need it on 2024-12-05 evening",
            "around 75 guests",
            "decor yes please",
            "+91 98765 43210",
        ]
        state = empty_record
        last = GREETING
        for text in turns:
            result = handle_assistant_turn(state, text, last)
            state, last = result.state, result.responses[-1]

        assert state.booking_complete is True
        assert state.name == "Rohan Mehta"
        assert state.occasion == Occasion.BIRTHDAY
        assert state.decoration == Decoration.YES
        assert last.startswith("Wonderful, Rohan! HAPPY HEARTS is available on 2024-12-05 evening.")
        assert "Rs. 23,250 and Rs. 33,000" in last
