from __future__ import annotations

from typing import Dict, List

from .base import PlanEntry, PlanRequest, PlanResponse

_SEPARATORS = (" - ", "|", ";")


def _normalize_outline(syllabus: str) -> List[str]:
    lines = [line.strip().lstrip("-*• ").strip() for line in syllabus.splitlines()]
    return [line for line in lines if line]


def _chunk_outline(outline: List[str]) -> List[str]:
    chunks: List[str] = []
    for item in outline:
        normalized = item
        for separator in _SEPARATORS:
            normalized = normalized.replace(separator, "|")
        parts = [part.strip() for part in normalized.split("|") if part.strip()]
        if parts:
            chunks.extend(parts)
        else:
            chunks.append(item)
    return chunks


def _distribute(topics: List[str], day_count: int) -> List[List[str]]:
    """Spread ``topics`` over ``day_count`` days, keeping their order.

    With more topics than days each day takes a contiguous slice; with fewer,
    consecutive days revisit the same topic.
    """

    total = len(topics)
    if total >= day_count:
        return [topics[index * total // day_count : (index + 1) * total // day_count] for index in range(day_count)]
    return [[topics[index * total // day_count]] for index in range(day_count)]


class OutlinePlanProvider:
    """Offline provider that builds day entries straight from the syllabus outline."""

    async def generate(self, request: PlanRequest) -> PlanResponse:
        day_count = request.day_count
        topics = _chunk_outline(_normalize_outline(request.syllabus)) or [request.exam_name]
        study_days = day_count - 1 if day_count >= 3 else day_count

        visits: Dict[str, int] = {}
        entries: List[PlanEntry] = []
        for index, day_topics in enumerate(_distribute(topics, study_days), start=1):
            title = ", ".join(day_topics)
            visits[title] = visits.get(title, 0) + 1
            first_pass = visits[title] == 1
            entries.append(
                PlanEntry(
                    day=f"Day {index}",
                    topic=title,
                    focus=f"Core concepts of {title}" if first_pass else f"Practice problems on {title}",
                    strategy=(
                        f"Read through {title}, then summarize each idea in your own words."
                        if first_pass
                        else f"Work timed exercises on {title} and review every mistake."
                    ),
                )
            )

        if study_days < day_count:
            entries.append(
                PlanEntry(
                    day=f"Day {day_count}",
                    topic="Full review",
                    focus=f"Everything on the {request.exam_name} syllabus",
                    strategy="Skim your summaries, redo the hardest exercises and rest well before the exam.",
                )
            )

        return PlanResponse(
            exam_name=request.exam_name,
            exam_date=request.exam_date.isoformat(),
            plan=entries,
        )
