"""Apprenticeship slot allocation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_activity.types import ActivityType

if TYPE_CHECKING:
    from tick_activity.catalog import ActivityCatalog
    from tick_activity.loop import ActivityLoop
    from tick_activity.state import ProgressionState

logger = logging.getLogger(__name__)


def claim_apprenticeship(
    catalog: ActivityCatalog,
    loop: ActivityLoop,
    state: ProgressionState,
    activity_type: ActivityType,
) -> list[ActivityType]:
    """Spend an open slot on *activity_type* and relock competing apprenticeships.

    No-op when no slot is open. Otherwise the slot count drops by one and
    every other activity still below its own ``skip_apprenticeship_level``
    is locked and dropped from the loop. Returns the relocked types.

    The slot is spent on every call, not once per trade; effects call this
    from each gated grade.
    """
    if state.open_apprenticeships <= 0:
        return []
    state.open_apprenticeships -= 1

    relocked: list[ActivityType] = []
    for activity in catalog.activities():
        if activity.activity_type == activity_type:
            continue
        if not activity.in_apprenticeship:
            continue
        activity.unlocked = False
        loop.remove_activity(activity.activity_type)
        relocked.append(activity.activity_type)

    logger.debug(
        "apprenticeship claimed for %s, %d open, relocked %s",
        activity_type.value,
        state.open_apprenticeships,
        [t.value for t in relocked],
    )
    return relocked
