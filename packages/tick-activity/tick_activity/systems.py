"""System factories for activity ticks, progression and reincarnation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_activity.manager import ActivityManager

if TYPE_CHECKING:
    from tick import TickContext, World

    from tick_activity.types import ActivityType, LoopEntry


def make_activity_tick_system(
    manager: ActivityManager,
    on_tick: Callable[[World, TickContext, ActivityManager], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system for the fine-grained tick.

    Does nothing while the bound character is dead; otherwise forwards to
    ``on_tick(world, ctx, manager)``.
    """

    def activity_tick_system(world: World, ctx: TickContext) -> None:
        if manager.collaborators.character.dead:
            return
        if on_tick is not None:
            on_tick(world, ctx, manager)

    return activity_tick_system


def make_progression_system(
    manager: ActivityManager,
    interval: int = 1,
    on_unlock: Callable[[World, TickContext, ActivityType], None] | None = None,
    on_level_up: Callable[[World, TickContext, ActivityType, int], None] | None = None,
    on_apprenticeship_complete: Callable[[World, TickContext, ActivityType], None]
    | None = None,
    on_prune: Callable[[World, TickContext, LoopEntry], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that runs the long tick every *interval* ticks.

    Tick execution order:
    1. Unlock activities whose requirements are met (on_unlock)
    2. Advance levels by at most one (on_level_up, on_apprenticeship_complete)
    3. Prune loop entries of locked activities (on_prune)

    Callbacks fire after the whole pass, in that order.
    """
    if interval < 1:
        raise ValueError(f"interval must be >= 1, got {interval}")

    def progression_system(world: World, ctx: TickContext) -> None:
        if ctx.tick_number % interval != 0:
            return
        attributes = manager.collaborators.character.attribute_values()
        report = manager.long_tick(attributes)
        if on_unlock is not None:
            for activity_type in report.unlocked:
                on_unlock(world, ctx, activity_type)
        if on_level_up is not None:
            for activity_type, level in report.leveled:
                on_level_up(world, ctx, activity_type, level)
        if on_apprenticeship_complete is not None:
            for activity_type in report.completed:
                on_apprenticeship_complete(world, ctx, activity_type)
        if on_prune is not None:
            for entry in report.pruned:
                on_prune(world, ctx, entry)

    return progression_system


def make_reincarnation_system(
    manager: ActivityManager,
    request_pause: Callable[[], None] | None = None,
    on_reset: Callable[[World, TickContext, ActivityManager], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that resets the manager when the character comes back.

    The reset runs on the first tick the bound character is alive after
    having been seen dead, using the attributes that carried over.
    ``request_pause`` is handed to ``reset``; it defaults to the engine's
    ``ctx.request_stop``.
    """
    # Whether the character was dead on an earlier tick.
    _was_dead: list[bool] = [False]

    def reincarnation_system(world: World, ctx: TickContext) -> None:
        character = manager.collaborators.character
        if character.dead:
            _was_dead[0] = True
            return
        if not _was_dead[0]:
            return
        _was_dead[0] = False
        pause = request_pause if request_pause is not None else ctx.request_stop
        manager.reset(character.attribute_values(), request_pause=pause)
        if on_reset is not None:
            on_reset(world, ctx, manager)

    return reincarnation_system
