"""
Helper Utility Module

This module provides the text and timestamp helpers used to turn a
Statuspage incident into a BlueSky post.
"""

import re
from datetime import datetime, timedelta
from typing import Optional

_WORD_SEPARATORS = re.compile(r"[\s_\-]+|(?<=[a-z0-9])(?=[A-Z])")
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def truncate_text(text: str, max_length: int = 250, suffix: str = "...") -> str:
    """
    Truncate text to a maximum number of characters.

    Length is counted in code points, so multi-byte characters are never
    split. Text already within the limit is returned unchanged.

    Args:
        text: The text to truncate
        max_length: Maximum number of characters kept
        suffix: Marker appended when the text was cut

    Returns:
        str: Truncated text
    """
    if len(text) <= max_length:
        return text

    return text[:max_length] + suffix


def title_case(text: str) -> str:
    """
    Convert a status token to title case.

    Words are split on whitespace, underscores, hyphens and lower-to-upper
    case changes, so "in_progress" and "inProgress" both become
    "In Progress".

    Args:
        text: The text to convert

    Returns:
        str: Title-cased text
    """
    words = [word for word in _WORD_SEPARATORS.split(text) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def _six_digit_fraction(match: re.Match) -> str:
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into a timezone-aware datetime.

    Args:
        value: The timestamp string, e.g. "2024-01-01T00:00:00.000Z"

    Returns:
        datetime: The parsed timestamp, or None if it could not be parsed
            or carries no timezone
    """
    try:
        normalized = _FRACTION.sub(_six_digit_fraction, value.replace('Z', '+00:00'))
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return None
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format a timezone-aware datetime as an RFC 3339 string, using Z for UTC."""
    if value.utcoffset() == timedelta(0):
        return value.isoformat().replace('+00:00', 'Z')
    return value.isoformat()
