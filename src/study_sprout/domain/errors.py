from __future__ import annotations


class PlannerError(Exception):
    """Base class for study plan engine failures."""


class InvalidDateError(PlannerError, ValueError):
    """Raised when a value does not represent a valid calendar date."""


class InvalidRequestError(PlannerError, ValueError):
    """Raised when plan inputs are blank or otherwise unusable."""


class PastOrPresentExamError(PlannerError, ValueError):
    """Raised when the exam is not strictly after the planning day."""


class HorizonExceededError(PlannerError, ValueError):
    """Raised when the exam is further away than the planning horizon."""


class ProviderError(PlannerError):
    """Raised when the plan content provider fails or breaks its contract."""


class IndexOutOfRangeError(PlannerError, IndexError):
    """Raised when a day index does not address an entry of the plan."""


class EmptyPlanError(PlannerError, ValueError):
    """Raised when projecting a plan that has no study days."""


class NoActivePlanError(PlannerError):
    """Raised when an operation needs an active plan and there is none."""
