"""Command-line interface for the free-time budget."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from .budget import (
    ScheduleBudget,
    add_activity,
    default_budget,
    set_every_month,
    set_minutes,
    toggle_month,
    toggle_week_day,
)
from .config import (
    ACTUAL_WORK_TIME,
    LUNCH_TIME,
    MONTH_NAMES,
    SLEEPING_TIME,
    WAY_TO_HOME,
    WAY_TO_JOB,
    WEEKDAY_NAMES,
    WORK_TIME,
    BudgetDefaults,
)
from .errors import ConfigError, DuplicateNameError, IndexOutOfRangeError
from .normalization import format_minutes, parse_duration_text
from .paths import get_config_path
from .reporting import SummaryPrinter
from .selection import Selection

app = typer.Typer(help="Work out how much free time your day leaves.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def summary(
    sleep: Optional[str] = typer.Option(None, "--sleep", help="Time asleep, e.g. 8h or 7:30."),
    work: Optional[str] = typer.Option(
        None, "--work", help="Time actually worked, excluding lunch."
    ),
    required_work: Optional[str] = typer.Option(
        None, "--required-work", help="Time you have to work by law, excluding lunch."
    ),
    lunch: Optional[str] = typer.Option(None, "--lunch", help="Lunch break length."),
    way_to_job: Optional[str] = typer.Option(None, "--way-to-job", help="Commute to work."),
    way_to_home: Optional[str] = typer.Option(None, "--way-to-home", help="Commute home."),
    activities: Optional[List[str]] = typer.Option(
        None,
        "--activity",
        help="Extra activity as NAME=DURATION. May be repeated.",
    ),
    weekdays: Optional[List[str]] = typer.Option(
        None, "--weekday", help="Working weekday (Mon..Sun). May be repeated."
    ),
    months: Optional[List[str]] = typer.Option(
        None,
        "--month",
        help="Working month (Jan..Dec). May be repeated; enables the month filter.",
    ),
    include_activities: bool = typer.Option(
        False,
        "--include-activities",
        help="Also subtract extra activities from the free time.",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        path_type=Path,
        help="Location of the defaults TOML file.",
    ),
) -> None:
    """Print the daily budget and the free time it leaves."""
    budget = default_budget(_load_defaults(config_path))

    overrides = {
        SLEEPING_TIME: ("--sleep", sleep),
        ACTUAL_WORK_TIME: ("--work", work),
        WORK_TIME: ("--required-work", required_work),
        LUNCH_TIME: ("--lunch", lunch),
        WAY_TO_JOB: ("--way-to-job", way_to_job),
        WAY_TO_HOME: ("--way-to-home", way_to_home),
    }
    for name, (option, value) in overrides.items():
        if value is not None:
            budget = set_minutes(budget, name, _parse_duration(value, option))

    for entry in activities or []:
        budget = _apply_activity(budget, entry)

    for index in _selection(WEEKDAY_NAMES, weekdays, "--weekday"):
        budget = toggle_week_day(budget, index)

    if months:
        budget = set_every_month(budget, True)
        for index in _selection(MONTH_NAMES, months, "--month"):
            budget = toggle_month(budget, index)

    SummaryPrinter(write=typer.echo).print_budget_summary(
        budget, include_activities=include_activities
    )


@app.command()
def defaults(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        path_type=Path,
        help="Location of the defaults TOML file.",
    ),
) -> None:
    """Show where defaults are read from and their current values."""
    path = config_path or get_config_path()
    loaded = _load_defaults(path)
    state = "found" if path.exists() else "not found, using built-in values"
    typer.echo(f"Defaults file: {path} ({state})")
    for name, minutes in loaded.fixed_minutes().items():
        typer.echo(f"  {name:<24} {format_minutes(minutes):>8}")
    for name, minutes in loaded.activities.items():
        typer.echo(f"  {name:<24} {format_minutes(minutes):>8}  (activity)")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the dashboard."),
    port: int = typer.Option(
        8766, "--port", min=1, max=65535, help="TCP port for the dashboard."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", path_type=Path, help="Location of the defaults TOML file."
    ),
    open_browser: bool = typer.Option(
        True,
        "--open-browser/--no-open-browser",
        help="Automatically launch the API docs in your default browser.",
    ),
) -> None:
    """Serve the budget editing API locally."""
    from .server_runner import run_dashboard

    run_dashboard(
        host=host,
        port=port,
        defaults=_load_defaults(config_path),
        open_browser=open_browser,
    )


def _load_defaults(path: Optional[Path]) -> BudgetDefaults:
    try:
        return BudgetDefaults.load(path or get_config_path())
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _parse_duration(value: str, option: str) -> int:
    try:
        return parse_duration_text(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=option) from exc


def _apply_activity(budget: ScheduleBudget, entry: str) -> ScheduleBudget:
    name, sep, duration = entry.partition("=")
    if not sep:
        raise typer.BadParameter(
            f"expected NAME=DURATION, got {entry!r}", param_hint="--activity"
        )
    try:
        budget = add_activity(budget, name)
    except DuplicateNameError as exc:
        raise typer.BadParameter(str(exc), param_hint="--activity") from exc
    return set_minutes(budget, name.strip(), _parse_duration(duration, "--activity"))


def _selection(names: tuple[str, ...], labels: Optional[List[str]], option: str) -> Selection:
    try:
        return Selection.from_labels(names, labels or [])
    except IndexOutOfRangeError as exc:
        raise typer.BadParameter(
            f"unknown name {exc.index!r}; choose from {', '.join(names)}",
            param_hint=option,
        ) from exc
