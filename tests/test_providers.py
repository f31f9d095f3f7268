"""Tests for the plan content providers."""

import json
from dataclasses import replace
from datetime import date
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from conftest import TODAY, make_entries
from study_sprout.core import build_plan
from study_sprout.domain import ProviderError
from study_sprout.providers import (
    OpenAIPlanProvider,
    OutlinePlanProvider,
    PlanContentProvider,
    PlanRequest,
    build_provider,
)
from study_sprout.providers.outline import _chunk_outline, _normalize_outline


def _request(day_count: int, syllabus: str = "Cells\nGenetics\nEvolution") -> PlanRequest:
    return PlanRequest(exam_name="Biology", exam_date=date(2024, 3, 10), syllabus=syllabus, day_count=day_count)


def test_outline_is_split_on_lines_and_separators() -> None:
    syllabus = "- Algebra - Geometry\n\n* Calculus | Statistics; Probability\n"
    assert _chunk_outline(_normalize_outline(syllabus)) == [
        "Algebra",
        "Geometry",
        "Calculus",
        "Statistics",
        "Probability",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("day_count", [1, 2, 3, 10, 60])
async def test_outline_provider_returns_exactly_the_requested_days(day_count: int) -> None:
    response = await OutlinePlanProvider().generate(_request(day_count))

    assert len(response.plan) == day_count
    assert [entry.day for entry in response.plan] == [f"Day {index}" for index in range(1, day_count + 1)]


@pytest.mark.asyncio
async def test_outline_provider_reserves_a_review_day() -> None:
    response = await OutlinePlanProvider().generate(_request(5))
    assert response.plan[-1].topic == "Full review"
    assert [entry.topic for entry in response.plan[:-1]] == ["Cells", "Cells", "Genetics", "Evolution"]


@pytest.mark.asyncio
async def test_outline_provider_packs_many_topics_into_few_days() -> None:
    syllabus = "\n".join(f"Chapter {index}" for index in range(1, 13))
    response = await OutlinePlanProvider().generate(_request(4, syllabus))

    covered = ", ".join(entry.topic for entry in response.plan[:-1])
    assert all(f"Chapter {index}" in covered for index in range(1, 13))
    assert len(response.plan) == 4


@pytest.mark.asyncio
async def test_outline_provider_builds_a_valid_plan() -> None:
    plan = await build_plan("Biology", "2024-01-21", "Cells\nGenetics", TODAY, OutlinePlanProvider())
    assert len(plan.plan) == 20
    assert isinstance(OutlinePlanProvider(), PlanContentProvider)


def test_build_provider_falls_back_without_credentials(settings) -> None:
    assert isinstance(build_provider(settings), OutlinePlanProvider)


def test_build_provider_uses_openai_when_configured(settings) -> None:
    configured = replace(settings, llm=replace(settings.llm, api_key="sk-test"))
    assert isinstance(build_provider(configured), OpenAIPlanProvider)


class _FakeCompletions:
    def __init__(self, content: str) -> None:
        self.content = content
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))])


@pytest.mark.asyncio
async def test_openai_provider_asks_for_exact_day_count(settings) -> None:
    body = json.dumps({"examName": "Chemistry", "examDate": "2024-01-05", "plan": make_entries(4)})
    completions = _FakeCompletions(body)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    provider = OpenAIPlanProvider(settings.llm, client=client)

    plan = await build_plan("Chemistry", "2024-01-05", "Atoms\nBonds", TODAY, provider)

    assert len(plan.plan) == 4
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"] == {"type": "json_object"}
    prompt = call["messages"][-1]["content"]
    assert "exactly 4 days" in prompt
    assert "Atoms\nBonds" in prompt


@pytest.mark.asyncio
async def test_openai_provider_garbage_content_is_a_provider_error(settings) -> None:
    client = SimpleNamespace(chat=SimpleNamespace(completions=_FakeCompletions("Sure! Here is your plan:")))
    provider = OpenAIPlanProvider(settings.llm, client=client)
    with pytest.raises(ProviderError):
        await build_plan("Chemistry", "2024-01-05", "Atoms", TODAY, provider)


@pytest.mark.asyncio
async def test_openai_provider_without_credentials_fails_cleanly(settings) -> None:
    with pytest.raises(ProviderError, match="OPENAI_API_KEY"):
        await OpenAIPlanProvider(settings.llm).generate(_request(3))
