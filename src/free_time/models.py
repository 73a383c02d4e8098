"""Domain models for editable durations."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .normalization import (
    MINUTES_IN_HOUR,
    fold_minutes_text,
    parse_int_or_zero,
    split_minutes,
)


@dataclass(frozen=True, slots=True)
class DurationField:
    """Hours and minutes text as typed, convertible to total minutes.

    The raw text is kept for display; totals coerce anything non-numeric to
    zero. Updates return a new field and never raise.
    """

    hours_text: str = "0"
    minutes_text: str = "0"

    @classmethod
    def from_minutes(cls, total: int) -> "DurationField":
        if total < 0:
            raise ValueError("total minutes must be non-negative")
        hours, minutes = split_minutes(total)
        return cls(hours_text=str(hours), minutes_text=str(minutes))

    @property
    def total_minutes(self) -> int:
        return (
            parse_int_or_zero(self.hours_text) * MINUTES_IN_HOUR
            + parse_int_or_zero(self.minutes_text)
        )

    def update_hours(self, text: str) -> "DurationField":
        return replace(self, hours_text=text)

    def update_minutes(self, text: str) -> "DurationField":
        hours_text, minutes_text = fold_minutes_text(self.hours_text, text)
        return DurationField(hours_text=hours_text, minutes_text=minutes_text)

    def display(self) -> tuple[str, str]:
        return self.hours_text, self.minutes_text
