"""Shared formatting helpers used across the booking assistant."""

import re


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and plus signs.

    Examples:
        >>> normalize_phone("+91 98765 43210")
        '+919876543210'
        >>> normalize_phone("98765-43210")
        '9876543210'
    """
    return re.sub(r"[^\d+]", "", value)


def count_digits(value: str) -> int:
    return len(re.sub(r"\D", "", value))


def format_name(value: str) -> str:
    """Capitalize each whitespace-separated token and rejoin with single spaces.

    Examples:
        >>> format_name("  priya   SHARMA ")
        'Priya Sharma'
    """
    return " ".join(part[0].upper() + part[1:].lower() for part in value.split())


def first_name(value: str) -> str:
    return value.split(" ")[0]


def format_amount(value: int) -> str:
    """Group digits the Indian way: last three, then pairs.

    Examples:
        >>> format_amount(18000)
        '18,000'
        >>> format_amount(150000)
        '1,50,000'
    """
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])
