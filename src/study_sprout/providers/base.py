from __future__ import annotations

from datetime import date
from typing import Any, List, Mapping, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    exam_name: str = Field(alias="examName")
    exam_date: date = Field(alias="examDate")
    syllabus: str
    day_count: int = Field(alias="dayCount", gt=0)


class PlanEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: str
    topic: str
    focus: str
    strategy: str

    @field_validator("day", "topic", "focus", "strategy", mode="before")
    @classmethod
    def _stringify_numbers(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class PlanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exam_name: str = Field(default="", alias="examName")
    exam_date: str = Field(default="", alias="examDate")
    plan: List[PlanEntry]


ProviderPayload = Union[PlanResponse, Mapping[str, Any], str, bytes]


@runtime_checkable
class PlanContentProvider(Protocol):
    """Produces day entries for an exam; the engine validates whatever comes back."""

    async def generate(self, request: PlanRequest) -> ProviderPayload: ...
