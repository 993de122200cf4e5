"""Tests for the console chat session that drives the engine."""

from console_demo import ChatMessage, ConsoleSession
from happyhearts.prompts.messages import FIELD_QUESTIONS, FILLER_ALREADY_COMPLETE, GREETING
from happyhearts.schemas.booking_schema import BookingField


class TestConsoleSession:
    def test_starts_with_greeting(self):
        session = ConsoleSession()
        assert session.messages == [ChatMessage("assistant", GREETING)]
        assert session.last_assistant_text == GREETING

    def test_blank_input_is_ignored(self):
        session = ConsoleSession()
        assert session.submit("   ") == []
        assert len(session.messages) == 1

    def test_input_is_trimmed_before_the_engine(self):
        session = ConsoleSession()
        replies = session.submit("   I am Rohan   ")
        assert session.state.name == "Rohan"
        assert replies == [FIELD_QUESTIONS[BookingField.OCCASION]]
        assert session.messages[1] == ChatMessage("user", "I am Rohan")

    def test_overlong_input_is_not_processed(self):
        session = ConsoleSession()
        replies = session.submit("I am Rohan " + "x" * 400)
        assert "400" in replies[0]
        assert session.state.name is None

    def test_replies_become_separate_messages(self):
        session = ConsoleSession()
        session.submit("Arjun")
        replies = session.submit("can I see pics?")
        assert len(replies) == 2
        assert [m.text for m in session.messages[-2:]] == replies
        assert session.last_assistant_text == replies[-1]

    def test_booking_scenario_completes(self, capsys):
        session = ConsoleSession(conversation_id="CHAT-test")
        session.run_scenario("booking")
        assert session.state.booking_complete is True
        assert session.last_assistant_text == FILLER_ALREADY_COMPLETE
        assert "Wonderful, Rohan!" in capsys.readouterr().out

    def test_pricing_scenario_completes(self, capsys):
        session = ConsoleSession()
        session.run_scenario("pricing")
        assert session.state.booking_complete is True
        assert session.state.contact == "9876543210"

    def test_unknown_scenario(self, capsys):
        session = ConsoleSession()
        session.run_scenario("nope")
        assert "Unknown scenario" in capsys.readouterr().out
