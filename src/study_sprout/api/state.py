from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..services import PlannerService


@dataclass(slots=True)
class ApiState:
    _planner: Optional[PlannerService] = None

    @property
    def planner(self) -> PlannerService:
        if self._planner is None:
            self._planner = PlannerService()
        return self._planner

    @planner.setter
    def planner(self, service: Optional[PlannerService]) -> None:
        self._planner = service


api_state = ApiState()
