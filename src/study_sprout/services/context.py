from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import PlanStore
from ..providers import PlanContentProvider, build_provider


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, storage and the content provider."""

    settings: AppSettings = field(default_factory=get_settings)
    store: Optional[PlanStore] = None
    provider: Optional[PlanContentProvider] = None

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = PlanStore(self.settings.storage.plan_file)
        if self.provider is None:
            self.provider = build_provider(self.settings)
