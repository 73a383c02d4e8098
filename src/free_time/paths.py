"""Where the budget defaults file lives."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "FreeTime"
CONFIG_FILENAME = "defaults.toml"


def get_config_dir() -> Path:
    # Only read from here, so the directory is not created on lookup.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False, roaming=True)
    return Path(dirs.user_config_path)


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME
