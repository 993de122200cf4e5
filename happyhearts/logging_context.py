"""Conversation-scoped log correlation.

Every record that reaches the console handler is tagged with the id of the
chat being processed, so the turns of one conversation can be picked out
of interleaved output:

    2026-10-18 10:02:11 [happyhearts.conversation.engine] INFO [CHAT-1a2b3c4d]: ...

Usage:
    from happyhearts.logging_context import conversation_context

    with conversation_context("CHAT-1a2b3c4d"):
        handle_assistant_turn(record, message, last_text)
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, TextIO

NO_CONVERSATION = "-"

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s [%(conversation_id)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_conversation_id: ContextVar[str] = ContextVar("conversation_id", default=NO_CONVERSATION)


def set_conversation_id(conversation_id: str) -> None:
    _conversation_id.set(conversation_id)


def get_conversation_id() -> str:
    return _conversation_id.get()


@contextmanager
def conversation_context(conversation_id: str) -> Iterator[str]:
    """Tag log records with ``conversation_id`` for the duration of the block."""
    token = _conversation_id.set(conversation_id)
    try:
        yield conversation_id
    finally:
        _conversation_id.reset(token)


class ConversationIdFilter(logging.Filter):
    """Adds ``conversation_id`` to records that don't already carry one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "conversation_id"):
            record.conversation_id = _conversation_id.get()  # type: ignore[attr-defined]
        return True


def build_log_handler(stream: Optional[TextIO] = None) -> logging.Handler:
    """Stream handler whose format includes the conversation id.

    The filter sits on the handler, so records from any logger, including
    third-party ones, can be formatted.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(ConversationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, handlers=[build_log_handler()])
