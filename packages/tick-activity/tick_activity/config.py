"""Progression configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressionConfig:
    """Immutable tuning for the progression engine.

    Attributes:
        initial_apprenticeships: Open apprenticeship slots at the start of each lifetime.
        reset_upgrade_passes: Upgrade passes run after a reincarnation to
            fast-forward levels from the attributes that carried over.
        auto_restart: Default for keeping the activity loop across reincarnation.
        pause_on_death: Default for asking the scheduler to pause after an
            auto-restarted reincarnation.
    """

    initial_apprenticeships: int = 1
    reset_upgrade_passes: int = 5
    auto_restart: bool = False
    pause_on_death: bool = True

    def __post_init__(self) -> None:
        if self.initial_apprenticeships < 0:
            raise ValueError(
                f"initial_apprenticeships must be >= 0, got {self.initial_apprenticeships}"
            )
        if self.reset_upgrade_passes < 0:
            raise ValueError(
                f"reset_upgrade_passes must be >= 0, got {self.reset_upgrade_passes}"
            )
