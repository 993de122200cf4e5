"""
Rule-based field extraction from free-text chat messages.

Each booking field has its own small extractor. Extractors receive the
original message (for captured values) and its lowercased form (for
keyword matching), and return the field value or ``None``. Patterns are
tried in table order and the first hit wins.

    name        "name is X" / "this is X" / "I am X" / "I'm X",
                else the whole message when it is a short alphabetic phrase
    occasion    first keyword group found in the text, else "other"
    date_time   date pattern + optional time-of-day, else the full message
                when it mentions "tomorrow" or "weekend"
    guest_count 2-3 digit number followed by a guest unit word
    decoration  "no decor", explicit "decor yes|no", then any decor/theme mention
    contact     phone-like token with at least 9 digits

Usage:
    record = extract_booking_details("I am Rohan", BookingRecord())
    assert record.name == "Rohan"
"""

import logging
import re
from typing import Callable, Optional

from happyhearts.schemas.booking_schema import (
    FIELD_PRIORITY,
    BookingField,
    BookingRecord,
    Decoration,
    Occasion,
)
from happyhearts.utils import count_digits, format_name, normalize_phone

logger = logging.getLogger(__name__)

MIN_PHONE_DIGITS = 9

NAME_INTRO_PATTERN = re.compile(r"(?ai:name is|this is|i am|i'm)\s+([a-zA-Z\s]+)")
BARE_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z\s]{1,30}")

OCCASION_KEYWORDS: list[tuple[Occasion, tuple[str, ...]]] = [
    (Occasion.BIRTHDAY, ("birthday", "bday", "turning")),
    (Occasion.BABY_SHOWER, ("baby shower", "shower")),
    (Occasion.ENGAGEMENT, ("engagement",)),
    (Occasion.ANNIVERSARY, ("anniversary",)),
    (Occasion.CORPORATE, ("corporate", "office", "team", "offsite")),
    (Occasion.OTHER, ("wedding", "farewell", "meet", "gathering")),
]

# Digits and word edges are ASCII only; whitespace includes Unicode spaces
# such as the non-breaking space pasted from phone contacts.
_WORD_START = r"(?<![A-Za-z0-9_])"
_WORD_END = r"(?![A-Za-z0-9_])"

_MONTHS = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
DATE_PATTERN = re.compile(
    _WORD_START
    + r"([0-9]{1,2}(?:st|nd|rd|th)?\s+(?:" + _MONTHS + r")"
    r"|[0-9]{1,2}[/-][0-9]{1,2}(?:[/-][0-9]{2,4})?"
    r"|[0-9]{4}-[0-9]{2}-[0-9]{2})"
    + _WORD_END
)
TIME_OF_DAY_WORDS = ("morning", "evening", "night", "afternoon", "noon", "slot")
TIME_PATTERN = re.compile(
    _WORD_START
    + r"([0-9]{1,2}(:[0-9]{2})?\s*(?:am|pm))"
    + _WORD_END
    + "|"
    + "|".join(TIME_OF_DAY_WORDS)
)
RELATIVE_DATE_WORDS = ("tomorrow", "weekend")

GUEST_COUNT_PATTERN = re.compile(
    r"(?:for|about|around)?\s*([0-9]{2,3})\s*(?:guests?|people|pax|heads|persons?)"
)

DECORATION_ANSWER_PATTERN = re.compile(r"decor(?:ation)?\s*(yes|no)")

PHONE_PATTERN = re.compile(r"\+?[0-9][0-9\s-]{8,}")


def extract_name(message: str, normalized: str) -> Optional[str]:
    match = NAME_INTRO_PATTERN.search(message)
    if match:
        raw = match.group(1)
    else:
        bare = BARE_NAME_PATTERN.fullmatch(message)
        if not bare:
            return None
        raw = bare.group(0)
    return format_name(raw) or None


def extract_occasion(message: str, normalized: str) -> Optional[Occasion]:
    for occasion, keywords in OCCASION_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return occasion
    if "other" in normalized:
        return Occasion.OTHER
    return None


def extract_date_time(message: str, normalized: str) -> Optional[str]:
    date_match = DATE_PATTERN.search(message)
    if date_match:
        time_part = ""
        time_match = TIME_PATTERN.search(message)
        if time_match:
            raw = time_match.group(0)
            if raw.lower() in TIME_OF_DAY_WORDS and not re.search(r"[0-9]", raw):
                time_part = raw.lower()
            else:
                time_part = raw
        return " ".join(part for part in (date_match.group(0), time_part) if part).strip()

    # Relative dates are stored as the whole message.
    if any(word in normalized for word in RELATIVE_DATE_WORDS):
        return message.strip()
    return None


def extract_guest_count(message: str, normalized: str) -> Optional[int]:
    match = GUEST_COUNT_PATTERN.search(normalized)
    if not match:
        return None
    count = int(match.group(1))
    return count if count > 0 else None


def extract_decoration(message: str, normalized: str) -> Optional[Decoration]:
    if "no decor" in normalized or "no decoration" in normalized:
        return Decoration.NO
    if "decor" in normalized:
        answer = DECORATION_ANSWER_PATTERN.search(normalized)
        if answer:
            return Decoration.YES if answer.group(1) == "yes" else Decoration.NO
    if "decor" in normalized or "theme" in normalized:
        return Decoration.YES
    # Never reached while the branch above catches every "decor" mention.
    if "yes decoration" in normalized:
        return Decoration.YES
    return None


def extract_contact(message: str, normalized: str) -> Optional[str]:
    match = PHONE_PATTERN.search(message)
    if not match:
        return None
    compact = normalize_phone(match.group(0))
    if count_digits(compact) < MIN_PHONE_DIGITS:
        return None
    return compact


FIELD_EXTRACTORS: dict[BookingField, Callable[[str, str], object]] = {
    BookingField.NAME: extract_name,
    BookingField.OCCASION: extract_occasion,
    BookingField.DATE_TIME: extract_date_time,
    BookingField.GUEST_COUNT: extract_guest_count,
    BookingField.DECORATION: extract_decoration,
    BookingField.CONTACT: extract_contact,
}


def extract_booking_details(message: str, record: BookingRecord) -> BookingRecord:
    """
    Fill any unset fields of ``record`` that ``message`` provides.

    Fields that are already set are never re-extracted or overwritten,
    and a completed record is returned unchanged.
    """
    if record.booking_complete:
        return record

    normalized = message.lower()
    updated = record
    for field in FIELD_PRIORITY:
        if updated.is_set(field):
            continue
        value = FIELD_EXTRACTORS[field](message, normalized)
        if value is not None:
            updated = updated.with_field(field, value)
            logger.debug("Extracted %s", field.value)
    return updated
