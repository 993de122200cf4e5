"""Keyword matchers for side requests that ride along with slot answers."""

MEDIA_KEYWORDS = ("photo", "video", "pictures", "pics", "images")
PRICE_KEYWORDS = ("price", "charges", "rate", "cost")


def contains_media_request(normalized: str) -> bool:
    """True when the caller asks to see photos or videos of the venue."""
    return any(keyword in normalized for keyword in MEDIA_KEYWORDS)


def contains_price_question(normalized: str) -> bool:
    """True when the caller asks about pricing."""
    return any(keyword in normalized for keyword in PRICE_KEYWORDS)
