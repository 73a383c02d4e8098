"""Schedule budget aggregate and free-time derivation.

Every operation is a pure function from an old budget to a new one; nothing
here mutates a budget in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from .config import (
    ACTUAL_WORK_TIME,
    FIXED_FIELD_NAMES,
    LUNCH_TIME,
    MINUTES_IN_DAY,
    MONTH_NAMES,
    SLEEPING_TIME,
    WAY_TO_HOME,
    WAY_TO_JOB,
    WEEKDAY_NAMES,
    BudgetDefaults,
)
from .errors import DuplicateNameError
from .models import DurationField
from .normalization import MINUTES_IN_HOUR
from .selection import Selection


@dataclass(frozen=True, slots=True)
class ScheduleBudget:
    """Named durations in minutes plus the weekday/month selections."""

    fields: Mapping[str, int] = field(
        default_factory=lambda: BudgetDefaults().fixed_minutes(), hash=False
    )
    additional_field_order: tuple[str, ...] = ()
    is_every_month: bool = False
    week_days: Selection = field(default_factory=lambda: Selection(WEEKDAY_NAMES))
    months: Selection = field(default_factory=lambda: Selection(MONTH_NAMES))

    def __post_init__(self) -> None:
        # Snapshots never share a writable mapping.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def week_day_selection(self) -> frozenset[int]:
        return self.week_days.indices

    @property
    def month_selection(self) -> frozenset[int]:
        return self.months.indices


def default_budget(defaults: Optional[BudgetDefaults] = None) -> ScheduleBudget:
    defaults = defaults or BudgetDefaults()
    budget = ScheduleBudget(fields=defaults.fixed_minutes())
    for name, minutes in defaults.activities.items():
        budget = add_activity(budget, name)
        budget = set_minutes(budget, budget.additional_field_order[-1], minutes)
    return budget


def set_minutes(budget: ScheduleBudget, name: str, minutes: int) -> ScheduleBudget:
    fields = dict(budget.fields)
    order = budget.additional_field_order
    if name not in fields:
        order = order + (name,)
    fields[name] = minutes
    return replace(budget, fields=fields, additional_field_order=order)


def set_field(budget: ScheduleBudget, name: str, value: DurationField) -> ScheduleBudget:
    """Store the total of ``value`` under ``name``, appending new names."""
    return set_minutes(budget, name, value.total_minutes)


def add_activity(budget: ScheduleBudget, name: str) -> ScheduleBudget:
    cleaned = name.strip()
    if not cleaned or cleaned in budget.fields:
        raise DuplicateNameError(name)
    return set_minutes(budget, cleaned, 0)


def clear_activities(budget: ScheduleBudget) -> ScheduleBudget:
    fields = {
        name: minutes
        for name, minutes in budget.fields.items()
        if name not in budget.additional_field_order
    }
    return replace(budget, fields=fields, additional_field_order=())


def toggle_week_day(budget: ScheduleBudget, index: int) -> ScheduleBudget:
    return replace(budget, week_days=budget.week_days.toggle(index))


def toggle_month(budget: ScheduleBudget, index: int) -> ScheduleBudget:
    return replace(budget, months=budget.months.toggle(index))


def set_every_month(budget: ScheduleBudget, flag: bool) -> ScheduleBudget:
    # The month selection survives switching the filter off.
    return replace(budget, is_every_month=bool(flag))


def effective_months(budget: ScheduleBudget) -> Optional[frozenset[int]]:
    """Return the month filter, or ``None`` when no filter is active."""
    if not budget.is_every_month:
        return None
    return budget.month_selection


def ordered_field_names(budget: ScheduleBudget) -> list[str]:
    return [*FIXED_FIELD_NAMES, *budget.additional_field_order]


def activity_minutes(budget: ScheduleBudget) -> int:
    return sum(budget.fields[name] for name in budget.additional_field_order)


def free_minutes_per_day(budget: ScheduleBudget) -> int:
    """Minutes left after sleep, work with lunch, and both commutes.

    User-added activities are not subtracted here; see
    :func:`free_minutes_with_activities`. The result is negative for an
    over-committed day.
    """
    fields = budget.fields
    time_on_work = fields[ACTUAL_WORK_TIME] + fields[LUNCH_TIME]
    way_to_work_and_home = fields[WAY_TO_JOB] + fields[WAY_TO_HOME]
    return MINUTES_IN_DAY - fields[SLEEPING_TIME] - time_on_work - way_to_work_and_home


def free_hours_per_day(budget: ScheduleBudget) -> float:
    return free_minutes_per_day(budget) / MINUTES_IN_HOUR


def free_minutes_with_activities(budget: ScheduleBudget) -> int:
    return free_minutes_per_day(budget) - activity_minutes(budget)


def free_hours_with_activities(budget: ScheduleBudget) -> float:
    return free_minutes_with_activities(budget) / MINUTES_IN_HOUR
