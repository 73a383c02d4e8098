"""Exceptions raised by the budget model."""

from __future__ import annotations


class ScheduleError(ValueError):
    """Base class for budget errors."""


class DuplicateNameError(ScheduleError):
    """An activity name is empty or already used by another field."""

    def __init__(self, name: str) -> None:
        self.name = name
        if name.strip():
            message = f"a field named {name!r} already exists"
        else:
            message = "activity name must not be empty"
        super().__init__(message)


class IndexOutOfRangeError(ScheduleError, IndexError):
    """A selection index falls outside its vocabulary."""

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index!r} is outside [0, {size - 1}]")


class ConfigError(ScheduleError):
    """The defaults file could not be read."""
