"""Activity tables for the impossible-task challenge modes.

A challenge mode replaces the whole normal catalog. Its activities are
baseline and start unlocked.
"""
from __future__ import annotations

from tick_activity.collaborators import EffectContext
from tick_activity.types import Activity, ActivityLevel, ActivityType, Effect, GameMode


def _hurt(ctx: EffectContext, message: str) -> None:
    ctx.log.add(message, "INJURY", "EVENT")
    ctx.character.adjust_status("health", -ctx.character.status_max("health") * 0.05)


def _swim_deeper(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -20)
    ctx.character.adjust_status("health", -100)
    ctx.tasks.advance(GameMode.SWIM)
    ctx.tasks.check_completion()
    if ctx.tasks.is_complete(GameMode.SWIM):
        ctx.log.add(
            "You have achieved the impossible and dived all the way to the bottom of the ocean.",
            "STANDARD",
            "STORY",
        )


def _forge_chains(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -100)
    metal = ctx.inventory.consume("metal")
    if ctx.workbench_is("anvil") and metal >= 150:
        if ctx.random.random() > 0.01:
            ctx.log.add("Your anvil rings with power, a new chain is forged!", "STANDARD", "EVENT")
            ctx.inventory.add_item(ctx.items.get("unbreakableChain"))
    else:
        _hurt(ctx, "You fumble with the wrong tools and materials and hurt yourself.")


def _attach_chains(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -1000)
    if ctx.inventory.consume("chain") > 0:
        ctx.log.add(
            "You attach a chain to the island, and give your chains a tug.", "STANDARD", "EVENT"
        )
        ctx.tasks.advance(GameMode.RAISE_ISLAND)
        ctx.tasks.check_completion()
        if ctx.tasks.is_complete(GameMode.RAISE_ISLAND):
            ctx.log.add(
                "With a mighty pull, the island comes loose. You haul it to the surface.",
                "STANDARD",
                "STORY",
            )
    else:
        _hurt(
            ctx,
            "You fumble around in the depths without a chain until a shark comes by "
            "and takes a bite.",
        )


def _challenge(
    activity_type: ActivityType, name: str, description: str, consequence: str, effect: Effect
) -> Activity:
    return Activity(
        activity_type=activity_type,
        levels=[ActivityLevel(name, description, consequence, {}, effect)],
        baseline=True,
        unlocked=True,
    )


def build_swim_activities() -> list[Activity]:
    return [
        _challenge(
            ActivityType.SWIM,
            "Swim Deeper",
            "Swim down further into the depths.",
            "Reduce Stamina by 20. Reduce health by 100.",
            _swim_deeper,
        ),
    ]


def build_raise_island_activities() -> list[Activity]:
    return [
        _challenge(
            ActivityType.FORGE_CHAINS,
            "Forge Unbreakable Chain",
            "Forge a chain strong enough to pull the island from the depths.",
            "Reduce Stamina by 100. If you have the right facilities and materials you "
            "might be able to create an unbreakable chain.",
            _forge_chains,
        ),
        _challenge(
            ActivityType.ATTACH_CHAINS,
            "Attach Chains to the Island",
            "Swim deep and attach one of your chains to the island.",
            "Reduce Stamina by 1000. Requires an unbreakable chain.",
            _attach_chains,
        ),
    ]
