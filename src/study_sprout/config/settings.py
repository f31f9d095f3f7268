from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

from ..domain.enums import WeekStart

load_dotenv()

APP_NAME = "Study Sprout"
APP_AUTHOR = "StudySprout"


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class PlannerSettings:
    max_plan_days: int
    week_start: WeekStart


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    plan_file: Path


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    planner: PlannerSettings
    storage: StorageSettings
    log_level: str


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _week_start_from_env(name: str) -> WeekStart:
    raw = (os.getenv(name) or WeekStart.SUNDAY.value).strip().lower()
    try:
        return WeekStart(raw)
    except ValueError:
        return WeekStart.SUNDAY


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        base_url=os.getenv("OPENAI_BASE_URL"),
        organization=os.getenv("OPENAI_ORG"),
        project=os.getenv("OPENAI_PROJECT"),
        timeout_seconds=_float_from_env("OPENAI_TIMEOUT_SECONDS", 60.0),
    )

    planner = PlannerSettings(
        max_plan_days=_int_from_env("STUDY_SPROUT_MAX_PLAN_DAYS", 60),
        week_start=_week_start_from_env("STUDY_SPROUT_WEEK_START"),
    )

    data_dir = Path(os.getenv("STUDY_SPROUT_DATA_DIR") or user_data_dir(APP_NAME, APP_AUTHOR)).expanduser()
    plan_file = Path(os.getenv("STUDY_SPROUT_PLAN_FILE") or data_dir / "plan.json").expanduser()
    storage = StorageSettings(data_dir=data_dir, plan_file=plan_file)

    return AppSettings(
        llm=llm,
        planner=planner,
        storage=storage,
        log_level=os.getenv("STUDY_SPROUT_LOG_LEVEL", "INFO").upper(),
    )
