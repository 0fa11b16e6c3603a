"""Core data types for activity progression."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_activity.collaborators import EffectContext

Effect = Callable[["EffectContext"], None]


class ActivityType(Enum):
    """Stable identity of an activity. Values are used in saves."""

    ODD_JOBS = "odd_jobs"
    RESTING = "resting"
    BEGGING = "begging"
    BLACKSMITHING = "blacksmithing"
    GATHER_HERBS = "gather_herbs"
    ALCHEMY = "alchemy"
    CHOP_WOOD = "chop_wood"
    WOODWORKING = "woodworking"
    LEATHERWORKING = "leatherworking"
    FARMING = "farming"
    MINING = "mining"
    SMELTING = "smelting"
    HUNTING = "hunting"
    FISHING = "fishing"
    BURNING = "burning"
    BODY_CULTIVATION = "body_cultivation"
    MIND_CULTIVATION = "mind_cultivation"
    CORE_CULTIVATION = "core_cultivation"
    RECRUITING = "recruiting"
    SWIM = "swim"
    FORGE_CHAINS = "forge_chains"
    ATTACH_CHAINS = "attach_chains"


class GameMode(Enum):
    """Which rule set is active. Each impossible task replaces the catalog."""

    NORMAL = "normal"
    SWIM = "swim"
    RAISE_ISLAND = "raise_island"


@dataclass(frozen=True)
class ActivityLevel:
    """One grade of an activity. Not serialized.

    Attributes:
        name: Display name at this grade.
        description: Flavor text.
        consequence_description: What performing the activity does.
        requirements: attribute -> threshold; the attribute must be strictly greater.
        effect: Consequence run by the scheduler when the activity is performed.
    """

    name: str
    description: str
    consequence_description: str
    requirements: dict[str, float] = field(default_factory=dict)
    effect: Effect | None = None


@dataclass
class Activity:
    """Runtime record of one activity. ``level`` and ``unlocked`` are mutable."""

    activity_type: ActivityType
    levels: list[ActivityLevel]
    skip_apprenticeship_level: int = 0  # 0 = never needed an apprenticeship
    baseline: bool = False  # always unlocked after a reset
    unlocked: bool = False
    level: int = 0

    def __post_init__(self) -> None:
        if not self.levels:
            raise ValueError(f"{self.activity_type.value} must define at least one level")
        if not 0 <= self.skip_apprenticeship_level < len(self.levels):
            raise ValueError(
                f"skip_apprenticeship_level must be in [0, {len(self.levels) - 1}], "
                f"got {self.skip_apprenticeship_level}"
            )

    @property
    def current(self) -> ActivityLevel:
        return self.levels[self.level]

    @property
    def name(self) -> str:
        return self.current.name

    @property
    def description(self) -> str:
        return self.current.description

    @property
    def consequence_description(self) -> str:
        return self.current.consequence_description

    @property
    def effect(self) -> Effect | None:
        return self.current.effect

    @property
    def max_level(self) -> int:
        return len(self.levels) - 1

    @property
    def has_next_level(self) -> bool:
        return self.level < self.max_level

    @property
    def in_apprenticeship(self) -> bool:
        """True while the activity is below the grade that ends its apprenticeship."""
        return self.level < self.skip_apprenticeship_level


@dataclass
class LoopEntry:
    """One step of the activity loop. ``repeat_times`` belongs to the scheduler."""

    activity: ActivityType
    repeat_times: int = 1

    def __post_init__(self) -> None:
        if self.repeat_times < 1:
            raise ValueError(f"repeat_times must be >= 1, got {self.repeat_times}")


class ActivityNotFoundError(KeyError):
    """Raised when an activity type is not part of the current catalog."""

    def __init__(self, activity_type: ActivityType, message: str) -> None:
        self.activity_type = activity_type
        super().__init__(message)
