"""Configuration constants and defaults for the budget model."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError
from .normalization import MINUTES_IN_HOUR, parse_duration_text

logger = logging.getLogger(__name__)

MINUTES_IN_DAY = 24 * MINUTES_IN_HOUR

WEEKDAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar",
    "Apr", "May", "Jun",
    "Jul", "Aug", "Sep",
    "Oct", "Nov", "Dec",
)

SLEEPING_TIME = "sleepingTime"
ACTUAL_WORK_TIME = "actualWorkTime"
WORK_TIME = "workTime"
LUNCH_TIME = "lunchTime"
WAY_TO_JOB = "wayToJob"
WAY_TO_HOME = "wayToHome"

FIXED_FIELD_NAMES: tuple[str, ...] = (
    SLEEPING_TIME,
    ACTUAL_WORK_TIME,
    WORK_TIME,
    LUNCH_TIME,
    WAY_TO_JOB,
    WAY_TO_HOME,
)

FIELD_LABELS: dict[str, str] = {
    SLEEPING_TIME: "How long do you sleep?",
    ACTUAL_WORK_TIME: "How long do you work (exclude the lunch time)?",
    WORK_TIME: "How long do you have to work by law (exclude the lunch time)?",
    LUNCH_TIME: "How long do you have lunch during the working day?",
    WAY_TO_JOB: "How much does it take to get to your job?",
    WAY_TO_HOME: "How much does it take to get to your home?",
}


def field_label(name: str) -> str:
    return FIELD_LABELS.get(name, f'How much do you spend for "{name}"?')


@dataclass(slots=True)
class BudgetDefaults:
    """Starting durations, in minutes, for a new editing session."""

    sleeping_time: int = 480
    actual_work_time: int = 480
    work_time: int = 480
    lunch_time: int = 60
    way_to_job: int = 30
    way_to_home: int = 30
    activities: dict[str, int] = field(default_factory=dict)

    def fixed_minutes(self) -> dict[str, int]:
        return {
            SLEEPING_TIME: self.sleeping_time,
            ACTUAL_WORK_TIME: self.actual_work_time,
            WORK_TIME: self.work_time,
            LUNCH_TIME: self.lunch_time,
            WAY_TO_JOB: self.way_to_job,
            WAY_TO_HOME: self.way_to_home,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BudgetDefaults":
        """Build defaults from a ``durations``/``activities`` mapping.

        Duration keys use the field names (``sleepingTime`` ...); values are
        minute counts or duration strings such as ``"7:30"`` or ``"1h"``.
        """
        unknown = set(data) - {"durations", "activities"}
        if unknown:
            raise ConfigError(f"unknown sections: {', '.join(sorted(unknown))}")

        values: dict[str, Any] = {}
        for key, raw in _section(data, "durations").items():
            attr = _FIELD_ATTRIBUTES.get(key)
            if attr is None:
                raise ConfigError(f"unknown duration {key!r}")
            values[attr] = _to_minutes(key, raw)

        activities: dict[str, int] = {}
        for key, raw in _section(data, "activities").items():
            name = str(key).strip()
            if not name or name in FIXED_FIELD_NAMES:
                raise ConfigError(f"invalid activity name {key!r}")
            activities[name] = _to_minutes(name, raw)

        return cls(**values, activities=activities)

    @classmethod
    def load(cls, path: Path) -> "BudgetDefaults":
        path = Path(path)
        if not path.exists():
            logger.debug("No defaults file at %s; using built-in defaults.", path)
            return cls()
        try:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
        defaults = cls.from_mapping(data)
        logger.info("Loaded budget defaults from %s", path)
        return defaults


_FIELD_ATTRIBUTES: dict[str, str] = {
    SLEEPING_TIME: "sleeping_time",
    ACTUAL_WORK_TIME: "actual_work_time",
    WORK_TIME: "work_time",
    LUNCH_TIME: "lunch_time",
    WAY_TO_JOB: "way_to_job",
    WAY_TO_HOME: "way_to_home",
}


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _to_minutes(key: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"{key}: expected a duration, got {raw!r}")
    if isinstance(raw, int):
        if raw < 0:
            raise ConfigError(f"{key}: duration must be non-negative")
        return raw
    if isinstance(raw, str):
        try:
            return parse_duration_text(raw)
        except ValueError as exc:
            raise ConfigError(f"{key}: {exc}") from exc
    raise ConfigError(f"{key}: expected a duration, got {raw!r}")
