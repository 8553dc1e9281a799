"""Defensive parsing of free-text exercise targets.

Plan targets come from generators and hand edits, so "3", "3-4", "30s",
"12/side" and "AMRAP" all occur. Only the leading integer is read; anything
else fails closed to a default.
"""

import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str | None) -> int | None:
    """Read the leading integer of a string.

    Args:
        text: Free-text target

    Returns:
        Parsed integer, or None if the text does not start with one
    """
    if text is None:
        return None
    match = _LEADING_INT.match(str(text))
    if match is None:
        return None
    return int(match.group(1))


def parse_positive_int(text: str | None, default: int) -> int:
    """Parse a leading integer, falling back to default when missing or <= 0."""
    value = parse_leading_int(text)
    if value is None or value <= 0:
        return default
    return value


def parse_target_sets(text: str | None, default: int = 3) -> int:
    return parse_positive_int(text, default)


def parse_target_reps(text: str | None, default: int = 10) -> int:
    return parse_positive_int(text, default)
