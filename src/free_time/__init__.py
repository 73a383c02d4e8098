"""Daily free-time budget model."""

from .budget import (
    ScheduleBudget,
    add_activity,
    default_budget,
    free_hours_per_day,
    free_minutes_per_day,
    set_every_month,
    set_field,
    toggle_month,
    toggle_week_day,
)
from .errors import DuplicateNameError, IndexOutOfRangeError
from .models import DurationField

__all__ = [
    "DuplicateNameError",
    "DurationField",
    "IndexOutOfRangeError",
    "ScheduleBudget",
    "add_activity",
    "default_budget",
    "free_hours_per_day",
    "free_minutes_per_day",
    "set_every_month",
    "set_field",
    "toggle_month",
    "toggle_week_day",
]
