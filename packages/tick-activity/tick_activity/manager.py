"""ActivityManager: owns the catalog, the activity loop, and progression state."""
from __future__ import annotations

import functools
import logging
import os
import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from tick_activity.apprenticeship import claim_apprenticeship
from tick_activity.catalog import ActivityCatalog, build_catalog
from tick_activity.collaborators import Collaborators, EffectContext
from tick_activity.config import ProgressionConfig
from tick_activity.loop import ActivityLoop
from tick_activity.progression import unlock_activities, upgrade_activities
from tick_activity.requirements import meets_unlock_requirement
from tick_activity.state import ProgressionState
from tick_activity.types import Activity, ActivityType, GameMode, LoopEntry

logger = logging.getLogger(__name__)


@dataclass
class ProgressReport:
    """What one long tick changed."""

    unlocked: list[ActivityType] = field(default_factory=list)
    leveled: list[tuple[ActivityType, int]] = field(default_factory=list)
    completed: list[ActivityType] = field(default_factory=list)
    pruned: list[LoopEntry] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.unlocked or self.leveled or self.completed or self.pruned)


class ActivityManager:
    """Progression engine for one save.

    The scheduler drives it: ``long_tick`` on every coarse tick, ``reset`` on
    reincarnation, ``switch_mode`` when a challenge starts or ends, and
    ``perform`` (or the callable from ``effect_for``) when it runs a loop entry.
    """

    def __init__(
        self,
        config: ProgressionConfig | None = None,
        mode: GameMode = GameMode.NORMAL,
        collaborators: Collaborators | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config if config is not None else ProgressionConfig()
        self._catalog = build_catalog(mode)
        self._loop = ActivityLoop()
        self._state = ProgressionState(open_apprenticeships=self._config.initial_apprenticeships)
        self._spirit_activity: ActivityType | None = None
        self._collaborators = collaborators
        self.auto_restart = self._config.auto_restart
        self.pause_on_death = self._config.pause_on_death

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    # --- Accessors ---

    @property
    def config(self) -> ProgressionConfig:
        return self._config

    @property
    def catalog(self) -> ActivityCatalog:
        return self._catalog

    @property
    def loop(self) -> ActivityLoop:
        return self._loop

    @property
    def state(self) -> ProgressionState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._catalog.mode

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def spirit_activity(self) -> ActivityType | None:
        return self._spirit_activity

    @property
    def collaborators(self) -> Collaborators:
        """The bound external systems. Raises RuntimeError if none are bound."""
        if self._collaborators is None:
            raise RuntimeError("ActivityManager has no collaborators bound")
        return self._collaborators

    def bind(self, collaborators: Collaborators) -> None:
        """Attach the external systems effects run against."""
        self._collaborators = collaborators

    def get(self, activity_type: ActivityType) -> Activity:
        """Look up a catalog activity. Raises ActivityNotFoundError."""
        return self._catalog.get(activity_type)

    def set_spirit_activity(self, activity_type: ActivityType | None) -> None:
        if activity_type is not None:
            self._catalog.get(activity_type)
        self._spirit_activity = activity_type

    # --- Progression ---

    def meets_requirements(self, activity: Activity, attributes: Mapping[str, float]) -> bool:
        """Unlock check for a single activity. Unlocks it on success."""
        if meets_unlock_requirement(
            activity,
            attributes,
            self._state.open_apprenticeships,
            self._state.completed_apprenticeships,
        ):
            activity.unlocked = True
            return True
        return False

    def check_requirements(
        self, attributes: Mapping[str, float]
    ) -> tuple[list[ActivityType], list[LoopEntry]]:
        """Unlock what qualifies, then prune the loop. Returns (unlocked, pruned)."""
        unlocked = unlock_activities(self._catalog, attributes, self._state)
        return unlocked, self.prune_loop()

    def long_tick(self, attributes: Mapping[str, float]) -> ProgressReport:
        """Unlock pass, one level-up pass, then loop pruning."""
        unlocked = unlock_activities(self._catalog, attributes, self._state)
        leveled, completed = upgrade_activities(self._catalog, attributes, self._state)
        pruned = self.prune_loop()
        return ProgressReport(unlocked=unlocked, leveled=leveled, completed=completed, pruned=pruned)

    def prune_loop(self) -> list[LoopEntry]:
        """Drop loop entries for locked activities.

        Raises ActivityNotFoundError if an entry names an activity outside the
        current catalog.
        """
        return self._loop.prune(self._catalog.is_unlocked)

    def claim_apprenticeship(self, activity_type: ActivityType) -> list[ActivityType]:
        return claim_apprenticeship(self._catalog, self._loop, self._state, activity_type)

    # --- Effects ---

    def effect_context(self) -> EffectContext:
        return EffectContext.bind(
            self.collaborators, self._state, self._rng, self.claim_apprenticeship
        )

    def effect_for(self, activity_type: ActivityType) -> Callable[[], None]:
        """Zero-argument callable running the activity's current-level effect.

        The level is resolved now; a later level-up needs a fresh callable.
        """
        effect = self._catalog.get(activity_type).effect
        if effect is None:
            return lambda: None
        return functools.partial(effect, self.effect_context())

    def perform(self, activity_type: ActivityType) -> None:
        self.effect_for(activity_type)()

    # --- Lifetime and mode ---

    def reset(
        self,
        attributes: Mapping[str, float],
        request_pause: Callable[[], None] | None = None,
    ) -> None:
        """Start a new lifetime after reincarnation.

        Completed apprenticeships survive. Levels are fast-forwarded with a
        fixed number of upgrade passes over the attributes that carried over.
        """
        self._state.start_lifetime(self._config.initial_apprenticeships)
        for activity in self._catalog.activities():
            activity.level = 0
            activity.unlocked = False
        for _ in range(self._config.reset_upgrade_passes):
            upgrade_activities(self._catalog, attributes, self._state)
        for activity in self._catalog.baseline():
            activity.unlocked = True

        if self.auto_restart:
            self.check_requirements(attributes)
            if self.pause_on_death and request_pause is not None:
                request_pause()
        else:
            self._loop.clear()
        logger.info(
            "reincarnation reset: %d unlocked, loop of %d kept",
            len(self._catalog.unlocked()),
            len(self._loop),
        )

    def switch_mode(self, mode: GameMode) -> None:
        """Rebuild the catalog for *mode*. Clears the loop and spirit activity."""
        self._loop.clear()
        self._spirit_activity = None
        self._catalog = build_catalog(mode)
        logger.info("switched to %s catalog (%d activities)", mode.value, len(self._catalog))

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize the persisted progression properties."""
        return {
            "auto_restart": self.auto_restart,
            "pause_on_death": self.pause_on_death,
            "activity_loop": self._loop.snapshot(),
            "unlocked_activities": [a.activity_type.value for a in self._catalog.unlocked()],
            "open_apprenticeships": self._state.open_apprenticeships,
            "spirit_activity": (
                self._spirit_activity.value if self._spirit_activity is not None else None
            ),
            "completed_apprenticeships": [
                t.value for t in self._state.completed_apprenticeships
            ],
        }

    def restore(self, data: Mapping[str, Any]) -> None:
        """Restore persisted properties onto the current catalog.

        Missing fields take their defaults and unreadable values are skipped,
        so older saves load without raising. The loop is not pruned; call
        ``prune_loop`` if the catalog may have changed since the save.
        """
        completed: list[ActivityType] = []
        for activity_type in _activity_types(data.get("completed_apprenticeships")):
            if activity_type not in completed:
                completed.append(activity_type)
        self._state.completed_apprenticeships = completed

        unlocked_data = data.get("unlocked_activities")
        if isinstance(unlocked_data, (list, tuple)):
            unlocked = set(_activity_types(unlocked_data))
        else:
            if unlocked_data is not None:
                logger.warning("expected a list of activity types, got %r", unlocked_data)
            unlocked = {a.activity_type for a in self._catalog.baseline()}
        for activity in self._catalog.activities():
            activity.unlocked = activity.activity_type in unlocked

        self.auto_restart = _flag(data, "auto_restart", self._config.auto_restart)
        self.pause_on_death = _flag(data, "pause_on_death", self._config.pause_on_death)

        loop_data = data.get("activity_loop")
        self._loop.restore(loop_data if isinstance(loop_data, list) else [])

        spirit = _activity_types([data["spirit_activity"]]) if data.get("spirit_activity") else []
        self._spirit_activity = spirit[0] if spirit else None

        open_slots = data.get("open_apprenticeships")
        if isinstance(open_slots, int) and not isinstance(open_slots, bool) and open_slots >= 0:
            self._state.open_apprenticeships = open_slots
        else:
            self._state.open_apprenticeships = 0


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        logger.warning("expected a bool for %s, got %r", key, value)
        return default
    return value


def _activity_types(values: Any) -> list[ActivityType]:
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        logger.warning("expected a list of activity types, got %r", values)
        return []
    result: list[ActivityType] = []
    for value in values:
        try:
            result.append(ActivityType(value))
        except (ValueError, TypeError):
            logger.warning("skipping unknown activity type %r", value)
    return result
