"""FastAPI application that exposes the budget editing session as a local API."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from .config import MONTH_NAMES, WEEKDAY_NAMES, BudgetDefaults
from .errors import DuplicateNameError, IndexOutOfRangeError
from .session import BudgetSession

logger = logging.getLogger(__name__)


class FieldUpdate(BaseModel):
    hours: Optional[str] = None
    minutes: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ActivityPayload(BaseModel):
    name: str

    model_config = ConfigDict(extra="forbid")


class EveryMonthPayload(BaseModel):
    enabled: bool

    model_config = ConfigDict(extra="forbid")


def create_app(*, defaults: Optional[BudgetDefaults] = None) -> FastAPI:
    """Instantiate the FastAPI application."""
    session = BudgetSession(defaults)

    app = FastAPI(title="Free Time", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.session = session

    @app.on_event("startup")
    async def _startup() -> None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        budget = request.app.state.session.budget
        return {
            "fields": len(budget.fields),
            "activities": len(budget.additional_field_order),
        }

    @app.get("/api/vocabularies")
    def vocabularies() -> Dict[str, Any]:
        return {
            "week_days": list(WEEKDAY_NAMES),
            "months": list(MONTH_NAMES),
        }

    @app.get("/api/budget")
    def budget_view(
        request: Request,
        include_activities: bool = Query(
            default=False,
            description="Also subtract user-added activities from the free time.",
        ),
    ) -> Dict[str, Any]:
        return _view_payload(request.app.state.session, include_activities)

    @app.put("/api/fields/{name:path}")
    def update_field(name: str, payload: FieldUpdate, request: Request) -> Dict[str, Any]:
        if payload.hours is None and payload.minutes is None:
            raise HTTPException(status_code=400, detail="hours or minutes is required")
        session: BudgetSession = request.app.state.session
        try:
            if payload.hours is not None:
                updated = session.edit_hours(name, payload.hours)
            if payload.minutes is not None:
                updated = session.edit_minutes(name, payload.minutes)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Field not found") from exc
        return {
            "name": name,
            "hours": updated.hours_text,
            "minutes": updated.minutes_text,
            "total_minutes": updated.total_minutes,
        }

    @app.post("/api/activities")
    def create_activity(payload: ActivityPayload, request: Request) -> Dict[str, Any]:
        session: BudgetSession = request.app.state.session
        try:
            session.add_activity(payload.name)
        except DuplicateNameError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _view_payload(session, False)

    @app.delete("/api/activities")
    def delete_activities(request: Request) -> Dict[str, Any]:
        session: BudgetSession = request.app.state.session
        session.clear_activities()
        return _view_payload(session, False)

    @app.post("/api/weekdays/{index}/toggle")
    def toggle_week_day(index: int, request: Request) -> Dict[str, Any]:
        session: BudgetSession = request.app.state.session
        try:
            budget = session.toggle_week_day(index)
        except IndexOutOfRangeError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {
            "week_days": sorted(budget.week_day_selection),
            "labels": budget.week_days.labels(),
        }

    @app.post("/api/months/{index}/toggle")
    def toggle_month(index: int, request: Request) -> Dict[str, Any]:
        session: BudgetSession = request.app.state.session
        try:
            budget = session.toggle_month(index)
        except IndexOutOfRangeError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {
            "months": sorted(budget.month_selection),
            "labels": budget.months.labels(),
        }

    @app.put("/api/every-month")
    def every_month(payload: EveryMonthPayload, request: Request) -> Dict[str, Any]:
        budget = request.app.state.session.set_every_month(payload.enabled)
        return {
            "is_every_month": budget.is_every_month,
            "months": sorted(budget.month_selection),
        }

    @app.post("/api/reset")
    def reset(request: Request) -> Dict[str, Any]:
        session: BudgetSession = request.app.state.session
        session.reset()
        return _view_payload(session, False)

    return app


def _view_payload(session: BudgetSession, include_activities: bool) -> Dict[str, Any]:
    return asdict(session.view(include_activities=include_activities))
