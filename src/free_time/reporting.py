"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from typing import Callable

from .budget import (
    ScheduleBudget,
    effective_months,
    free_minutes_per_day,
    free_minutes_with_activities,
)
from .config import FIXED_FIELD_NAMES
from .normalization import MINUTES_IN_HOUR, format_minutes


class SummaryPrinter:
    """Render human-readable budget summaries in the console."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write

    def print_budget_summary(
        self, budget: ScheduleBudget, include_activities: bool = False
    ) -> None:
        self.write("Daily time budget")
        self.write("-" * 40)
        for name in FIXED_FIELD_NAMES:
            self._write_field(name, budget.fields[name])
        activities = budget.additional_field_order
        if activities:
            self.write("")
            self.write("Other activities:")
            for name in activities:
                self._write_field(name, budget.fields[name])
        self.write("")

        self.write(f"Weekdays: {_join_labels(budget.week_days.labels())}")
        if effective_months(budget) is None:
            self.write("Months:   (no month filter)")
        else:
            self.write(f"Months:   {_join_labels(budget.months.labels())}")
        self.write("")

        free_minutes = free_minutes_per_day(budget)
        self.write(f"Free time per day: {format_free(free_minutes)}")
        if include_activities:
            free_minutes = free_minutes_with_activities(budget)
            self.write(f"After activities:  {format_free(free_minutes)}")
        if free_minutes < 0:
            self.write("Your day is over-committed.")

    def _write_field(self, name: str, minutes: int) -> None:
        self.write(f"  {name:<24} {format_minutes(minutes):>8}")


def format_free(minutes: int) -> str:
    hours = minutes / MINUTES_IN_HOUR
    return f"{format_minutes(minutes)} ({hours:g} h)"


def _join_labels(labels: list[str]) -> str:
    return ", ".join(labels) if labels else "(none)"
