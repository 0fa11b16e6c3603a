"""Unlock and level progression passes."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from tick_activity.requirements import meets_level_requirement, meets_unlock_requirement
from tick_activity.types import ActivityType

if TYPE_CHECKING:
    from tick_activity.catalog import ActivityCatalog
    from tick_activity.state import ProgressionState

logger = logging.getLogger(__name__)


def unlock_activities(
    catalog: ActivityCatalog,
    attributes: Mapping[str, float],
    state: ProgressionState,
) -> list[ActivityType]:
    """Unlock every locked activity that passes the unlock gate. Returns them."""
    unlocked: list[ActivityType] = []
    for activity in catalog.activities():
        if activity.unlocked:
            continue
        if meets_unlock_requirement(
            activity, attributes, state.open_apprenticeships, state.completed_apprenticeships
        ):
            activity.unlocked = True
            unlocked.append(activity.activity_type)
            logger.debug("unlocked %s", activity.activity_type.value)
    return unlocked


def upgrade_activities(
    catalog: ActivityCatalog,
    attributes: Mapping[str, float],
    state: ProgressionState,
) -> tuple[list[tuple[ActivityType, int]], list[ActivityType]]:
    """Advance each activity by at most one level.

    Returns ``(leveled, completed)``: ``(type, new_level)`` pairs and the
    trades whose apprenticeship was completed by this pass.
    """
    leveled: list[tuple[ActivityType, int]] = []
    completed: list[ActivityType] = []
    for activity in catalog.activities():
        if not activity.has_next_level:
            continue
        if not meets_level_requirement(attributes, activity.levels[activity.level + 1].requirements):
            continue
        activity.level += 1
        leveled.append((activity.activity_type, activity.level))
        logger.debug("%s reached level %d", activity.activity_type.value, activity.level)
        if (
            activity.unlocked
            and activity.level == activity.skip_apprenticeship_level
            and state.record_completion(activity.activity_type)
        ):
            completed.append(activity.activity_type)
    return leveled, completed
