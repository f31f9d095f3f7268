from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from ..core import compute_stats, prepare_request, project, project_months, request_plan, toggle_task
from ..core.dates import DateLike
from ..data import PlanStoreError
from ..domain import CalendarMonth, NoActivePlanError, PlanState, PlanStats, StudyPlan
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlannerService:
    """Owns the current plan and walks it through its lifecycle.

    ``no_plan -> generating -> active``; toggles keep it ``active``, a reset
    or a failed generation returns to ``no_plan``. Each generation carries a
    request token and only the most recent request may install its result.
    """

    context: ServiceContext = field(default_factory=ServiceContext)
    clock: Callable[[], date] = date.today
    _plan: Optional[StudyPlan] = field(default=None, init=False)
    _state: PlanState = field(default=PlanState.NO_PLAN, init=False)
    _latest_token: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.restore()

    @property
    def plan(self) -> Optional[StudyPlan]:
        return self._plan

    @property
    def state(self) -> PlanState:
        return self._state

    def restore(self) -> Optional[StudyPlan]:
        try:
            plan = self.context.store.load()
        except PlanStoreError:
            logger.warning("Ignoring unreadable plan at %s", self.context.store.path, exc_info=True)
            plan = None
        self._plan = plan
        self._state = PlanState.ACTIVE if plan is not None else PlanState.NO_PLAN
        return plan

    def _install(self, plan: StudyPlan) -> None:
        self._plan = plan
        self._state = PlanState.ACTIVE
        self.context.store.save(plan)

    def _discard(self) -> None:
        self._plan = None
        self.context.store.clear()

    def _require_plan(self) -> StudyPlan:
        if self._plan is None or self._state is not PlanState.ACTIVE:
            raise NoActivePlanError("No active study plan. Generate one first.")
        return self._plan

    async def generate(
        self,
        exam_name: str,
        exam_date: DateLike,
        syllabus: str,
        *,
        today: Optional[DateLike] = None,
    ) -> Optional[StudyPlan]:
        """Build and install a new plan, replacing any current one.

        Returns ``None`` when a newer request (or a reset) superseded this one
        while the provider was working; the stale result is dropped.
        """

        request = prepare_request(
            exam_name,
            exam_date,
            syllabus,
            today if today is not None else self.clock(),
            max_days=self.context.settings.planner.max_plan_days,
        )

        self._latest_token += 1
        token = self._latest_token
        self._discard()
        self._state = PlanState.GENERATING
        logger.info("Generating plan (request %d)", token)

        try:
            plan = await request_plan(request, self.context.provider)
        except BaseException:
            if token == self._latest_token:
                self._state = PlanState.NO_PLAN
                logger.warning("Plan generation failed (request %d)", token)
            raise

        if token != self._latest_token:
            logger.info("Dropping superseded plan response (request %d, latest %d)", token, self._latest_token)
            return None

        self._install(plan)
        logger.info("Plan for %s is active with %d days", plan.exam_name, len(plan.plan))
        return plan

    def toggle(self, index: int) -> StudyPlan:
        plan = toggle_task(self._require_plan(), index)
        self._install(plan)
        return plan

    def stats(self) -> PlanStats:
        return compute_stats(self._plan)

    def calendar(self) -> CalendarMonth:
        return project(self._require_plan(), week_start=self.context.settings.planner.week_start)

    def calendar_months(self) -> List[CalendarMonth]:
        return project_months(self._require_plan(), week_start=self.context.settings.planner.week_start)

    def reset(self) -> None:
        self._latest_token += 1
        self._discard()
        self._state = PlanState.NO_PLAN
        logger.info("Plan reset")
