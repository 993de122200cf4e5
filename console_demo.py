"""
Offline console demo — chat with the HAPPY HEARTS booking assistant.

Plays the part of the chat window: keeps the message history, trims and
length-checks input, passes each message to the turn engine together with
the last assistant message, and stores the record it returns.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario pricing
"""

import argparse
import uuid
from dataclasses import dataclass
from typing import Optional

from happyhearts.config import settings
from happyhearts.conversation.engine import handle_assistant_turn
from happyhearts.conversation.slot_manager import get_stats, get_summary
from happyhearts.logging_context import conversation_context
from happyhearts.prompts.messages import GREETING, MESSAGE_TOO_LONG
from happyhearts.schemas.booking_schema import BookingRecord

GREEN = "\033[92m"
BLUE = "\033[94m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


@dataclass(frozen=True)
class ChatMessage:
    sender: str  # "assistant" | "user"
    text: str


class ConsoleSession:
    """Holds one chat's history and booking record between turns."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "booking": [
            "I am Rohan Mehta",
            "It's my daughter's birthday",
            "we need it on 2024-12-05 evening",
            "around 75 guests",
            "yes, a jungle theme decor please",
            "+91 98765 43210",
            "thanks!",
        ],
        "pricing": [
            "Priya",
            "what's the price for a baby shower?",
            "12/01 7pm",
            "for 45 people",
            "no decoration needed",
            "9876543210",
            "what's the price?",
        ],
        "media": [
            "Hi, can you send photos of the venue?",
            "Arjun",
            "team offsite, can I see pics?",
        ],
    }

    def __init__(self, conversation_id: Optional[str] = None) -> None:
        self.conversation_id = conversation_id or f"CHAT-{uuid.uuid4().hex[:8]}"
        self.state = BookingRecord()
        self.messages: list[ChatMessage] = [ChatMessage("assistant", GREETING)]
        self.max_length = settings.chat.max_message_length

    @property
    def last_assistant_text(self) -> str:
        for message in reversed(self.messages):
            if message.sender == "assistant":
                return message.text
        return ""

    def submit(self, text: str) -> list[str]:
        """Process one user message and return the assistant replies for it."""
        trimmed = text.strip()
        if not trimmed:
            return []

        if len(trimmed) > self.max_length:
            reply = MESSAGE_TOO_LONG.format(limit=self.max_length)
            self.messages.append(ChatMessage("assistant", reply))
            return [reply]

        with conversation_context(self.conversation_id):
            result = handle_assistant_turn(self.state, trimmed, self.last_assistant_text)

        self.messages.append(ChatMessage("user", trimmed))
        self.messages.extend(ChatMessage("assistant", reply) for reply in result.responses)
        self.state = result.state
        return result.responses

    def agent_say(self, text: str) -> None:
        print(f"{GREEN}{BOLD}[{settings.business.assistant_name}]{RESET} {GREEN}{text}{RESET}")

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {title}{RESET}")
        print(f"{BOLD}  {settings.business.tagline}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _footer(self) -> None:
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{DIM}{get_summary(self.state)}{RESET}")
        print(f"{DIM}  Slot stats: {get_stats(self.state)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def _say_all(self, replies: list[str]) -> None:
        for reply in replies:
            self.agent_say(reply)

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"Unknown scenario: {scenario}")
            return

        self._banner(f"{settings.business.assistant_name} - Scenario: {scenario}")
        self.agent_say(GREETING)
        for step in steps:
            print(f"\n{BLUE}[You] {RESET}{step}")
            self._say_all(self.submit(step))
        self._footer()

    def run(self) -> None:
        self._banner(f"{settings.business.assistant_name} - type 'quit' to exit")
        self.agent_say(GREETING)
        while True:
            user_input = input(f"\n{BLUE}[You] {RESET}")
            if user_input.strip().lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                break
            self._say_all(self.submit(user_input))
        self._footer()


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline booking assistant console")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
