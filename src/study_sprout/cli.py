from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import orjson

from .api import api_state, call_api_async
from .domain import CalendarMonth, PlannerError, WeekStart
from .logging import configure_logging

logger = logging.getLogger(__name__)

_WEEKDAYS_FROM_SUNDAY = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Study Sprout exam study planner.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate a new plan, replacing the current one.")
    generate_parser.add_argument("--exam-name", required=True)
    generate_parser.add_argument("--exam-date", required=True, help="Exam day as YYYY-MM-DD.")
    syllabus_group = generate_parser.add_mutually_exclusive_group(required=True)
    syllabus_group.add_argument("--syllabus", help="Topics to cover, as free text.")
    syllabus_group.add_argument("--syllabus-file", type=Path, help="Text file holding the syllabus.")
    generate_parser.add_argument("--today", help="Planning day as YYYY-MM-DD (defaults to the local date).")

    subparsers.add_parser("show", help="Print the current plan as JSON.")

    toggle_parser = subparsers.add_parser("toggle", help="Mark a study day done or not done.")
    toggle_parser.add_argument("index", type=int, help="Zero-based day index.")

    subparsers.add_parser("progress", help="Print completion statistics.")

    calendar_parser = subparsers.add_parser("calendar", help="Print the plan as a month grid.")
    calendar_parser.add_argument("--all-months", action="store_true", help="Grid every month the plan spans.")

    subparsers.add_parser("reset", help="Discard the current plan.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the study plan tools.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the study plan tools.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    return parser


def render_month(month: CalendarMonth, week_start: WeekStart = WeekStart.SUNDAY) -> str:
    """Render a month grid as text; ``*`` marks a study day and ``+`` a completed one."""

    offset = 0 if week_start is WeekStart.SUNDAY else 1
    headers = _WEEKDAYS_FROM_SUNDAY[offset:] + _WEEKDAYS_FROM_SUNDAY[:offset]
    lines = [f"{month.month_name} {month.year}".center(7 * 5 - 1), " ".join(f"{name:>4}" for name in headers)]
    for week in month.weeks():
        row = []
        for cell in week:
            if cell.is_blank:
                row.append("    ")
                continue
            mark = " "
            if cell.task is not None:
                mark = "+" if cell.task.completed else "*"
            row.append(f" {cell.day_of_month:>2}{mark}")
        lines.append(" ".join(row))
    if month.unmatched_count:
        lines.append(
            f"{month.unmatched_count} study day(s) fall outside {month.month_name} {month.year}; use --all-months."
        )
    return "\n".join(lines)


def _print_json(payload: Any) -> None:
    print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


async def _run_planner_command(args: argparse.Namespace) -> None:
    if args.command == "generate":
        syllabus = args.syllabus
        if args.syllabus_file is not None:
            syllabus = args.syllabus_file.expanduser().read_text(encoding="utf-8")
        _print_json(
            await call_api_async(
                "generate_study_plan",
                exam_name=args.exam_name,
                exam_date=args.exam_date,
                syllabus=syllabus,
                today=args.today,
            )
        )
    elif args.command == "show":
        _print_json(await call_api_async("get_study_plan"))
    elif args.command == "toggle":
        _print_json(await call_api_async("toggle_study_day", index=args.index))
    elif args.command == "progress":
        stats = await call_api_async("study_plan_progress")
        print(f"{stats['percent']}% complete ({stats['completed']}/{stats['total']} days)")
    elif args.command == "calendar":
        planner = api_state.planner
        week_start = planner.context.settings.planner.week_start
        months: List[CalendarMonth] = planner.calendar_months() if args.all_months else [planner.calendar()]
        print("\n\n".join(render_month(month, week_start) for month in months))
    elif args.command == "reset":
        _print_json(await call_api_async("reset_study_plan"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    logger.info("Study Sprout CLI starting (%s)", args.command)

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
        return 0
    if args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
        return 0

    try:
        asyncio.run(_run_planner_command(args))
    except PlannerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
