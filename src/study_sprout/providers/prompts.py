from __future__ import annotations

SYSTEM_PROMPT = """You are Study Sprout, an exam preparation coach.
- Always answer with a single JSON object and nothing else. No code fences.
- The object has the keys "examName", "examDate" and "plan".
- "plan" is an array with one object per study day, each with the string keys
  "day", "topic", "focus" and "strategy"."""

PLAN_PROMPT_TEMPLATE = (
    'Create a highly detailed, day-by-day study plan for the exam "{exam_name}" which is on {exam_date}.\n'
    "There are exactly {day_count} days remaining until the exam.\n"
    "Based on the syllabus below, break the content into manageable daily goals for ALL {day_count} days.\n"
    "The plan must cover the entire period from today until the day before the exam.\n"
    "For each day provide:\n"
    "1) a clear 'topic',\n"
    "2) a specific 'focus',\n"
    "3) a 'strategy' explaining in detail HOW to study it.\n"
    "Label the days 'Day 1' to 'Day {day_count}' in the 'day' field.\n"
    "The 'plan' array must contain exactly {day_count} items.\n\n"
    "Syllabus:\n{syllabus}"
)


def render_plan_prompt(*, exam_name: str, exam_date: str, day_count: int, syllabus: str) -> str:
    return PLAN_PROMPT_TEMPLATE.format(
        exam_name=exam_name,
        exam_date=exam_date,
        day_count=day_count,
        syllabus=syllabus.strip(),
    )
