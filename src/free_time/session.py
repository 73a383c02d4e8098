"""Editing session that owns the current budget and its input fields."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from . import budget as ops
from .budget import ScheduleBudget
from .config import FIXED_FIELD_NAMES, BudgetDefaults, field_label
from .models import DurationField

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FieldRow:
    name: str
    label: str
    hours_text: str
    minutes_text: str
    total_minutes: int
    is_fixed: bool


@dataclass(slots=True)
class BudgetView:
    """Everything a front end needs to render the current state."""

    rows: list[FieldRow]
    week_days: list[int]
    week_day_labels: list[str]
    months: list[int]
    month_labels: list[str]
    is_every_month: bool
    free_minutes: int
    free_hours: float
    includes_activities: bool


class BudgetSession:
    """Hold the current budget and replace it atomically on every edit.

    Budget values are immutable; each edit computes a new snapshot under the
    lock and swaps it in. The hours/minutes text of every slot is kept next to
    the budget so partially typed input survives between edits.
    """

    def __init__(self, defaults: Optional[BudgetDefaults] = None) -> None:
        self._defaults = defaults or BudgetDefaults()
        self._lock = threading.Lock()
        self._budget = ops.default_budget(self._defaults)
        self._inputs = _inputs_for(self._budget)

    @property
    def budget(self) -> ScheduleBudget:
        with self._lock:
            return self._budget

    def field(self, name: str) -> DurationField:
        with self._lock:
            return self._inputs[name]

    def edit_hours(self, name: str, text: str) -> DurationField:
        with self._lock:
            updated = self._inputs[name].update_hours(text)
            self._store(name, updated)
        return updated

    def edit_minutes(self, name: str, text: str) -> DurationField:
        with self._lock:
            updated = self._inputs[name].update_minutes(text)
            self._store(name, updated)
        return updated

    def add_activity(self, name: str) -> ScheduleBudget:
        with self._lock:
            new_budget = ops.add_activity(self._budget, name)
            added = new_budget.additional_field_order[-1]
            self._inputs = {**self._inputs, added: DurationField.from_minutes(0)}
            self._budget = new_budget
        logger.info("Added activity %r", added)
        return new_budget

    def clear_activities(self) -> ScheduleBudget:
        with self._lock:
            self._budget = ops.clear_activities(self._budget)
            self._inputs = {name: self._inputs[name] for name in FIXED_FIELD_NAMES}
            return self._budget

    def toggle_week_day(self, index: int) -> ScheduleBudget:
        with self._lock:
            self._budget = ops.toggle_week_day(self._budget, index)
            return self._budget

    def toggle_month(self, index: int) -> ScheduleBudget:
        with self._lock:
            self._budget = ops.toggle_month(self._budget, index)
            return self._budget

    def set_every_month(self, flag: bool) -> ScheduleBudget:
        with self._lock:
            self._budget = ops.set_every_month(self._budget, flag)
            return self._budget

    def reset(self) -> ScheduleBudget:
        with self._lock:
            self._budget = ops.default_budget(self._defaults)
            self._inputs = _inputs_for(self._budget)
            logger.info("Budget session reset to defaults.")
            return self._budget

    def view(self, include_activities: bool = False) -> BudgetView:
        with self._lock:
            budget = self._budget
            inputs = self._inputs

        rows = []
        for name in ops.ordered_field_names(budget):
            hours_text, minutes_text = inputs[name].display()
            rows.append(
                FieldRow(
                    name=name,
                    label=field_label(name),
                    hours_text=hours_text,
                    minutes_text=minutes_text,
                    total_minutes=budget.fields[name],
                    is_fixed=name in FIXED_FIELD_NAMES,
                )
            )

        if include_activities:
            free_minutes = ops.free_minutes_with_activities(budget)
            free_hours = ops.free_hours_with_activities(budget)
        else:
            free_minutes = ops.free_minutes_per_day(budget)
            free_hours = ops.free_hours_per_day(budget)

        return BudgetView(
            rows=rows,
            week_days=list(budget.week_days),
            week_day_labels=budget.week_days.labels(),
            months=list(budget.months),
            month_labels=budget.months.labels(),
            is_every_month=budget.is_every_month,
            free_minutes=free_minutes,
            free_hours=free_hours,
            includes_activities=include_activities,
        )

    def _store(self, name: str, value: DurationField) -> None:
        # Caller holds the lock. The total comes from the new field, not the
        # one it replaced.
        self._inputs = {**self._inputs, name: value}
        self._budget = ops.set_field(self._budget, name, value)
        logger.debug("%s set to %d minutes", name, value.total_minutes)


def _inputs_for(budget: ScheduleBudget) -> dict[str, DurationField]:
    return {
        name: DurationField.from_minutes(minutes)
        for name, minutes in budget.fields.items()
    }
