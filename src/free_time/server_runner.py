"""Serve the budget editing API with uvicorn."""

from __future__ import annotations

import logging
import threading
import time
import webbrowser
from typing import Optional

import uvicorn

from .budget import default_budget, free_minutes_per_day
from .config import BudgetDefaults
from .normalization import format_minutes
from .webapp import create_app

logger = logging.getLogger(__name__)


def run_dashboard(
    *,
    host: str = "127.0.0.1",
    port: int = 8766,
    defaults: Optional[BudgetDefaults] = None,
    open_browser: bool = True,
    log_level: str = "info",
) -> None:
    """Serve a fresh editing session seeded from ``defaults``."""
    defaults = defaults or BudgetDefaults()
    app = create_app(defaults=defaults)

    url = f"http://{host}:{port}"
    starting_free = free_minutes_per_day(default_budget(defaults))
    logger.info(
        "Serving budget API at %s (session starts with %s free per day, %d activities)",
        url,
        format_minutes(starting_free),
        len(defaults.activities),
    )
    if open_browser:
        threading.Thread(
            target=_open_docs_after_delay, args=(f"{url}/docs",), daemon=True
        ).start()

    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def _open_docs_after_delay(url: str, delay: float = 1.0) -> None:
    time.sleep(delay)
    try:
        webbrowser.open(url)
    except Exception:
        logger.exception("Failed to open API docs at %s", url)
