"""Requirement predicates for unlocking and leveling activities."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from tick_activity.types import Activity, ActivityType


def meets_level_requirement(
    attributes: Mapping[str, float], requirements: Mapping[str, float]
) -> bool:
    """True if every listed attribute is strictly above its threshold.

    Attributes absent from ``requirements`` are unconstrained; attributes
    absent from ``attributes`` count as 0.
    """
    for name, threshold in requirements.items():
        if attributes.get(name, 0.0) <= threshold:
            return False
    return True


def meets_unlock_requirement(
    activity: Activity,
    attributes: Mapping[str, float],
    open_apprenticeships: int,
    completed_apprenticeships: Iterable[ActivityType],
) -> bool:
    """Level-0 requirement plus the apprenticeship gate.

    With no open apprenticeship slots, a locked trade that still needs an
    apprenticeship cannot unlock unless it was completed in some lifetime.
    """
    if (
        not activity.unlocked
        and open_apprenticeships <= 0
        and activity.skip_apprenticeship_level > 0
        and activity.in_apprenticeship
        and activity.activity_type not in completed_apprenticeships
    ):
        return False
    return meets_level_requirement(attributes, activity.levels[0].requirements)
