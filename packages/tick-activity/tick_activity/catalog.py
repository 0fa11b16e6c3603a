"""ActivityCatalog and the per-mode catalog builders."""
from __future__ import annotations

from collections.abc import Iterator
from typing import Callable

from tick_activity.challenges import build_raise_island_activities, build_swim_activities
from tick_activity.trades import build_normal_activities
from tick_activity.types import Activity, ActivityNotFoundError, ActivityType, GameMode

CatalogBuilder = Callable[[], list[Activity]]

_BUILDERS: dict[GameMode, CatalogBuilder] = {
    GameMode.NORMAL: build_normal_activities,
    GameMode.SWIM: build_swim_activities,
    GameMode.RAISE_ISLAND: build_raise_island_activities,
}


class ActivityCatalog:
    """Ordered collection of the activities that exist in one game mode."""

    def __init__(self, activities: list[Activity], mode: GameMode = GameMode.NORMAL) -> None:
        self._mode = mode
        self._order: list[ActivityType] = []
        self._activities: dict[ActivityType, Activity] = {}
        for activity in activities:
            if activity.activity_type in self._activities:
                raise ValueError(f"duplicate activity {activity.activity_type.value}")
            self._order.append(activity.activity_type)
            self._activities[activity.activity_type] = activity

    @property
    def mode(self) -> GameMode:
        return self._mode

    def get(self, activity_type: ActivityType) -> Activity:
        """Look up an activity. Raises ActivityNotFoundError if absent."""
        activity = self._activities.get(activity_type)
        if activity is None:
            raise ActivityNotFoundError(
                activity_type,
                f"Activity {activity_type.value!r} is not in the {self._mode.value} catalog",
            )
        return activity

    def has(self, activity_type: ActivityType) -> bool:
        return activity_type in self._activities

    def is_unlocked(self, activity_type: ActivityType) -> bool:
        """Unlock flag of a catalog activity. Raises ActivityNotFoundError."""
        return self.get(activity_type).unlocked

    def activities(self) -> list[Activity]:
        return [self._activities[t] for t in self._order]

    def types(self) -> list[ActivityType]:
        return list(self._order)

    def baseline(self) -> list[Activity]:
        return [a for a in self.activities() if a.baseline]

    def unlocked(self) -> list[Activity]:
        return [a for a in self.activities() if a.unlocked]

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.activities())

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, activity_type: object) -> bool:
        return activity_type in self._activities


def build_catalog(mode: GameMode = GameMode.NORMAL) -> ActivityCatalog:
    """Build a fresh catalog for *mode*: every level 0, mode-default unlocks."""
    return ActivityCatalog(_BUILDERS[mode](), mode=mode)
