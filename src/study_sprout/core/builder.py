from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from pydantic import ValidationError

from ..domain import (
    HorizonExceededError,
    InvalidRequestError,
    PastOrPresentExamError,
    ProviderError,
    StudyPlan,
    StudyTask,
)
from ..providers.base import PlanContentProvider, PlanRequest, PlanResponse, ProviderPayload
from .dates import DateLike, days_between, parse_date

logger = logging.getLogger(__name__)

MAX_PLAN_DAYS = 60


def count_study_days(today: DateLike, exam_date: DateLike, *, max_days: int = MAX_PLAN_DAYS) -> int:
    """Return the number of study days before the exam, enforcing the horizon."""

    day_count = days_between(today, exam_date)
    if day_count <= 0:
        raise PastOrPresentExamError(
            f"Exam date {parse_date(exam_date).isoformat()} is not after {parse_date(today).isoformat()}."
        )
    if day_count > max_days:
        raise HorizonExceededError(f"Exam is {day_count} days away; plans are limited to {max_days} days.")
    return day_count


def prepare_request(
    exam_name: str,
    exam_date: DateLike,
    syllabus: str,
    today: DateLike,
    *,
    max_days: Optional[int] = None,
) -> PlanRequest:
    if not exam_name or not exam_name.strip():
        raise InvalidRequestError("Exam name is required.")
    if not syllabus or not syllabus.strip():
        raise InvalidRequestError("Syllabus is required.")

    exam_day = parse_date(exam_date)
    day_count = count_study_days(today, exam_day, max_days=MAX_PLAN_DAYS if max_days is None else max_days)
    return PlanRequest(
        exam_name=exam_name.strip(),
        exam_date=exam_day,
        syllabus=syllabus,
        day_count=day_count,
    )


def _coerce_response(payload: ProviderPayload) -> PlanResponse:
    try:
        if isinstance(payload, PlanResponse):
            return payload
        if isinstance(payload, (str, bytes, bytearray)):
            return PlanResponse.model_validate_json(payload)
        if isinstance(payload, Mapping):
            return PlanResponse.model_validate(dict(payload))
    except ValidationError as exc:
        raise ProviderError(f"Provider returned a malformed plan: {exc.error_count()} validation error(s).") from exc
    raise ProviderError(f"Provider returned an unsupported payload type: {type(payload).__name__}.")


async def request_plan(request: PlanRequest, provider: PlanContentProvider) -> StudyPlan:
    """Ask ``provider`` for the plan described by ``request`` and validate the answer.

    A response with any entry count other than ``request.day_count``, or one
    that cannot be parsed, raises :class:`ProviderError` rather than being
    truncated or padded. Every accepted entry starts out not completed.
    """

    logger.info(
        "Requesting %d-day plan for %s on %s",
        request.day_count,
        request.exam_name,
        request.exam_date.isoformat(),
    )
    try:
        payload = await provider.generate(request)
    except ProviderError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ProviderError(f"Plan content provider failed: {exc}") from exc

    response = _coerce_response(payload)
    if len(response.plan) != request.day_count:
        logger.warning("Provider returned %d entries, expected %d", len(response.plan), request.day_count)
        raise ProviderError(f"Provider returned {len(response.plan)} days but {request.day_count} were requested.")

    return StudyPlan(
        exam_name=request.exam_name,
        exam_date=request.exam_date,
        plan=[
            StudyTask(
                day=entry.day,
                topic=entry.topic,
                focus=entry.focus,
                strategy=entry.strategy,
                completed=False,
            )
            for entry in response.plan
        ],
    )


async def build_plan(
    exam_name: str,
    exam_date: DateLike,
    syllabus: str,
    today: DateLike,
    provider: PlanContentProvider,
    *,
    max_days: Optional[int] = None,
) -> StudyPlan:
    """Create a fresh plan with one entry per day from ``today`` until the exam."""

    request = prepare_request(exam_name, exam_date, syllabus, today, max_days=max_days)
    return await request_plan(request, provider)
