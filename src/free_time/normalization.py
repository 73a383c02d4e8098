"""Utilities to normalize hour and minute text."""

from __future__ import annotations

import re
from typing import Optional

MINUTES_IN_HOUR = 60

_DIGITS_PATTERN = re.compile(r"\d+")
_CLOCK_PATTERN = re.compile(r"(?P<hours>\d+):(?P<minutes>\d{1,2})")
_UNITS_PATTERN = re.compile(
    r"(?:(?P<hours>\d+)\s*h)?\s*(?:(?P<minutes>\d+)\s*m)?",
    re.IGNORECASE,
)


def parse_int_or_zero(text: Optional[str]) -> int:
    """Parse typed digits, treating empty or partial input as zero."""
    if not text:
        return 0
    stripped = text.strip()
    if not _DIGITS_PATTERN.fullmatch(stripped):
        return 0
    return int(stripped)


def split_minutes(total: int) -> tuple[int, int]:
    return divmod(total, MINUTES_IN_HOUR)


def fold_minutes_text(hours_text: str, minutes_text: str) -> tuple[str, str]:
    """Apply a minutes edit, folding 60 or more minutes into the hours box.

    An empty minutes box is left empty so the user can retype it. Overflow
    replaces the previous hours value rather than adding to it.
    """
    if minutes_text == "":
        return hours_text, ""
    minutes = parse_int_or_zero(minutes_text)
    if minutes < MINUTES_IN_HOUR:
        return hours_text, minutes_text
    hours, remainder = split_minutes(minutes)
    return str(hours), str(remainder)


def parse_duration_text(text: str) -> int:
    """Parse ``H:MM``, ``1h30m`` or a bare minute count into minutes.

    Used for configuration and command-line values, where a typo should fail
    loudly instead of silently becoming zero.
    """
    value = text.strip()
    if not value:
        raise ValueError("duration must not be empty")
    if _DIGITS_PATTERN.fullmatch(value):
        return int(value)

    clock = _CLOCK_PATTERN.fullmatch(value)
    if clock:
        minutes = int(clock.group("minutes"))
        if minutes >= MINUTES_IN_HOUR:
            raise ValueError(f"invalid duration {text!r}: minutes must be below 60")
        return int(clock.group("hours")) * MINUTES_IN_HOUR + minutes

    units = _UNITS_PATTERN.fullmatch(value)
    if units and (units.group("hours") or units.group("minutes")):
        hours = int(units.group("hours") or 0)
        minutes = int(units.group("minutes") or 0)
        return hours * MINUTES_IN_HOUR + minutes

    raise ValueError(f"invalid duration {text!r}")


def format_minutes(total: int) -> str:
    sign = "-" if total < 0 else ""
    hours, minutes = split_minutes(abs(total))
    return f"{sign}{hours}:{minutes:02d}"
