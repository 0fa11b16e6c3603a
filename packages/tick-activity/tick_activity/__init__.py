"""Activity catalog, apprenticeships and loop progression for idle games on the tick engine."""
from tick_activity.apprenticeship import claim_apprenticeship
from tick_activity.catalog import ActivityCatalog, build_catalog
from tick_activity.collaborators import Collaborators, EffectContext
from tick_activity.config import ProgressionConfig
from tick_activity.loop import ActivityLoop
from tick_activity.manager import ActivityManager, ProgressReport
from tick_activity.progression import unlock_activities, upgrade_activities
from tick_activity.requirements import meets_level_requirement, meets_unlock_requirement
from tick_activity.state import ProgressionState
from tick_activity.systems import (
    make_activity_tick_system,
    make_progression_system,
    make_reincarnation_system,
)
from tick_activity.types import (
    Activity,
    ActivityLevel,
    ActivityNotFoundError,
    ActivityType,
    GameMode,
    LoopEntry,
)

__all__ = [
    "Activity",
    "ActivityCatalog",
    "ActivityLevel",
    "ActivityLoop",
    "ActivityManager",
    "ActivityNotFoundError",
    "ActivityType",
    "Collaborators",
    "EffectContext",
    "GameMode",
    "LoopEntry",
    "ProgressReport",
    "ProgressionConfig",
    "ProgressionState",
    "build_catalog",
    "claim_apprenticeship",
    "make_activity_tick_system",
    "make_progression_system",
    "make_reincarnation_system",
    "meets_level_requirement",
    "meets_unlock_requirement",
    "unlock_activities",
    "upgrade_activities",
]
