"""Shared fixtures: isolated settings, stub content providers and plan builders."""

from __future__ import annotations

import asyncio
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from study_sprout.config import AppSettings, LlmSettings, PlannerSettings, StorageSettings
from study_sprout.data import PlanStore
from study_sprout.domain import StudyPlan, StudyTask, WeekStart
from study_sprout.providers import PlanRequest
from study_sprout.services import PlannerService, ServiceContext

TODAY = date(2024, 1, 1)


def make_entries(count: int) -> List[Dict[str, Any]]:
    return [
        {
            "day": f"Day {index + 1}",
            "topic": f"Topic {index + 1}",
            "focus": f"Focus {index + 1}",
            "strategy": f"Strategy {index + 1}",
        }
        for index in range(count)
    ]


def make_plan(length: int, *, exam_date: date = date(2024, 3, 10), completed: Optional[List[int]] = None) -> StudyPlan:
    done = set(completed or [])
    return StudyPlan(
        exam_name="Biology Finals",
        exam_date=exam_date,
        plan=[
            StudyTask(
                day=f"Day {index + 1}",
                topic=f"Topic {index + 1}",
                focus=f"Focus {index + 1}",
                strategy=f"Strategy {index + 1}",
                completed=index in done,
            )
            for index in range(length)
        ],
    )


class StubProvider:
    """Answers with ``day_count + count_offset`` entries, or a fixed payload or error."""

    def __init__(self, *, count_offset: int = 0, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.count_offset = count_offset
        self.payload = payload
        self.error = error
        self.requests: List[PlanRequest] = []

    async def generate(self, request: PlanRequest) -> Any:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            return self.payload
        return {
            "examName": request.exam_name,
            "examDate": request.exam_date.isoformat(),
            "plan": make_entries(request.day_count + self.count_offset),
        }


class GatedProvider(StubProvider):
    """Holds each response until ``release`` is set, to simulate a slow model."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def generate(self, request: PlanRequest) -> Any:
        self.started.set()
        await self.release.wait()
        return await super().generate(request)


class RoutingProvider:
    """Dispatches to a provider chosen by exam name."""

    def __init__(self, routes: Dict[str, StubProvider]) -> None:
        self.routes = routes

    async def generate(self, request: PlanRequest) -> Any:
        return await self.routes[request.exam_name].generate(request)


@pytest.fixture
def settings_factory(tmp_path: Path) -> Callable[..., AppSettings]:
    def factory(*, week_start: WeekStart = WeekStart.SUNDAY, max_plan_days: int = 60) -> AppSettings:
        return AppSettings(
            llm=LlmSettings(
                api_key=None,
                model="test-model",
                base_url=None,
                organization=None,
                project=None,
                timeout_seconds=5.0,
            ),
            planner=PlannerSettings(max_plan_days=max_plan_days, week_start=week_start),
            storage=StorageSettings(data_dir=tmp_path, plan_file=tmp_path / "plan.json"),
            log_level="DEBUG",
        )

    return factory


@pytest.fixture
def settings(settings_factory: Callable[..., AppSettings]) -> AppSettings:
    return settings_factory()


@pytest.fixture
def store(settings: AppSettings) -> PlanStore:
    return PlanStore(settings.storage.plan_file)


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def planner(settings: AppSettings, store: PlanStore, stub_provider: StubProvider) -> PlannerService:
    context = ServiceContext(settings=settings, store=store, provider=stub_provider)
    return PlannerService(context=context, clock=lambda: TODAY)


def exam_in(days: int, *, today: date = TODAY) -> str:
    return (today + timedelta(days=days)).isoformat()
