"""Per-lifetime progression counters."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_activity.types import ActivityType


@dataclass
class ProgressionState:
    """Apprenticeship slots and usage counters owned by the ActivityManager.

    ``completed_apprenticeships`` outlives reincarnation; everything else is
    reset at the start of each lifetime.
    """

    open_apprenticeships: int = 1
    completed_apprenticeships: list[ActivityType] = field(default_factory=list)
    odd_job_days: int = 0
    begging_days: int = 0

    def has_completed(self, activity_type: ActivityType) -> bool:
        return activity_type in self.completed_apprenticeships

    def record_completion(self, activity_type: ActivityType) -> bool:
        """Record a finished apprenticeship. Returns False if already recorded."""
        if activity_type in self.completed_apprenticeships:
            return False
        self.completed_apprenticeships.append(activity_type)
        return True

    def start_lifetime(self, open_apprenticeships: int) -> None:
        self.open_apprenticeships = open_apprenticeships
        self.odd_job_days = 0
        self.begging_days = 0
