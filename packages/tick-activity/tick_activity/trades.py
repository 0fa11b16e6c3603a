"""Normal-mode activity table.

Each grade's effect is a plain function of an EffectContext. Trades with a
``skip_apprenticeship_level`` claim an apprenticeship slot from every
effect below that grade.
"""
from __future__ import annotations

import math
from typing import Callable

from tick_activity.collaborators import EffectContext
from tick_activity.types import Activity, ActivityLevel, ActivityType, Effect

BASE_ATTRIBUTES = ("strength", "toughness", "speed", "intelligence", "charisma")


def _log2(value: float) -> float:
    return math.log2(value) if value > 0 else 0.0


def _floor_log2(value: float) -> int:
    return math.floor(_log2(value))


# --- Simple jobs ---


def _odd_jobs(ctx: EffectContext) -> None:
    ctx.character.increase_attribute(ctx.random.choice(BASE_ATTRIBUTES), 0.1)
    ctx.character.adjust_status("stamina", -5)
    ctx.character.money += 3
    ctx.state.odd_job_days += 1


def _rest(ctx: EffectContext) -> None:
    c = ctx.character
    c.adjust_status("stamina", c.status_max("stamina") / 2)
    c.adjust_status("health", 2)
    c.check_overage()


def _meditate(ctx: EffectContext) -> None:
    c = ctx.character
    c.fill_status("stamina")
    c.adjust_status("health", 10)
    if ctx.random.random() < 0.01:
        c.increase_attribute("spirituality", 0.1)
    if c.mana_unlocked:
        c.adjust_status("mana", 1)
    c.check_overage()


def _commune(ctx: EffectContext) -> None:
    c = ctx.character
    c.fill_status("stamina")
    c.fill_status("health")
    c.fill_status("mana")
    c.increase_attribute("spirituality", 0.1)
    c.check_overage()


def _begging(gain: float, base_money: float, charisma_factor: float) -> Effect:
    def effect(ctx: EffectContext) -> None:
        c = ctx.character
        c.increase_attribute("charisma", gain)
        c.adjust_status("stamina", -5)
        c.money += base_money + _log2(c.attribute("charisma") * charisma_factor)
        ctx.state.begging_days += 1

    return effect


def _gather_herbs(ctx: EffectContext) -> None:
    ctx.character.increase_attribute("intelligence", 0.1)
    ctx.character.increase_attribute("speed", 0.1)
    ctx.character.adjust_status("stamina", -10)
    ctx.inventory.generate_herb()
    if ctx.workbench_is("herbGarden"):
        ctx.inventory.generate_herb()
    if ctx.random.random() < 0.01:
        ctx.character.increase_attribute("wood_lore", 0.1)


def _chop_wood(ctx: EffectContext) -> None:
    ctx.character.increase_attribute("strength", 0.1)
    ctx.character.adjust_status("stamina", -10)
    ctx.inventory.add_item(ctx.inventory.get_wood())
    if ctx.random.random() < 0.01:
        ctx.character.increase_attribute("wood_lore", 0.1)


def _farming(ctx: EffectContext) -> None:
    c = ctx.character
    c.adjust_status("stamina", -20)
    lore = c.attribute("wood_lore") + c.attribute("earth_lore")
    power = math.floor(math.log10(lore)) if lore > 0 else 1
    ctx.home.work_fields(max(power, 1))
    c.increase_attribute("strength", 0.1)
    c.increase_attribute("speed", 0.1)
    if ctx.random.random() < 0.01:
        c.increase_attribute("wood_lore", 0.1)
        c.increase_attribute("earth_lore", 0.1)


def _mining(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -20)
    ctx.character.increase_attribute("strength", 0.1)
    if ctx.random.random() < 0.5:
        ctx.character.increase_attribute("earth_lore", 0.1)
        ctx.inventory.add_item(ctx.inventory.get_ore())


def _smelting(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -30)
    ctx.character.increase_attribute("toughness", 0.1)
    ctx.character.increase_attribute("intelligence", 0.1)
    if ctx.inventory.open_slots() > 0:
        grade = ctx.inventory.consume("ore")
        if grade >= 1:
            ctx.inventory.add_item(ctx.inventory.get_bar(grade))


def _hunting(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -50)
    ctx.character.increase_attribute("speed", 0.1)
    chance = 0.1
    if ctx.workbench_is("dogKennel"):
        chance += 0.4
    if ctx.random.random() < chance:
        ctx.character.increase_attribute("animal_handling", 0.1)
        ctx.inventory.add_item(ctx.items.get("meat"))
        ctx.inventory.add_item(ctx.items.get("hide"))
    if ctx.random.random() < 0.01:
        ctx.battle.add_enemy("wolf")


def _fishing(ctx: EffectContext) -> None:
    ctx.character.adjust_status("stamina", -50)
    ctx.character.increase_attribute("strength", 0.1)
    ctx.character.increase_attribute("intelligence", 0.1)
    if ctx.random.random() < 0.2:
        ctx.character.increase_attribute("animal_handling", 0.1)
        ctx.character.increase_attribute("water_lore", 0.05)
        ctx.inventory.add_item(ctx.items.get("carp"))


def _burning(ctx: EffectContext) -> None:
    c = ctx.character
    c.adjust_status("stamina", -5)
    cost = c.increase_attribute("fire_lore", 0.1)
    c.money = max(0.0, c.money - cost)


# --- Cultivation ---


def _cultivation(attributes: tuple[str, ...]) -> Effect:
    def effect(ctx: EffectContext) -> None:
        c = ctx.character
        c.adjust_status("stamina", -100)
        for name in attributes:
            c.increase_attribute(name, 1)
        for name in attributes:
            c.increase_aptitude(name, 0.1)
        if ctx.random.random() < 0.01:
            c.increase_attribute("spirituality", 0.1)

    return effect


def _injure(ctx: EffectContext, fraction: float, message: str) -> None:
    ctx.character.adjust_status("health", -ctx.character.status_max("health") * fraction)
    ctx.log.add(message, "INJURY", "EVENT")


def _core_cultivation(ctx: EffectContext) -> None:
    c = ctx.character
    c.adjust_status("stamina", -200)
    if c.mana_unlocked:
        if ctx.random.random() < 0.01:
            c.raise_status_max("mana", 1)
            c.adjust_status("mana", 1)
    else:
        _injure(ctx, 0.1, "You fail miserably at cultivating your core and hurt yourself badly.")


def _recruiting(ctx: EffectContext) -> None:
    c = ctx.character
    c.adjust_status("stamina", -100)
    c.money = max(0.0, c.money - 1_000_000)
    if ctx.followers.unlocked and c.money > 0:
        if ctx.random.random() < 0.01:
            ctx.followers.generate_follower()
    else:
        _injure(
            ctx,
            0.1,
            "You fail miserably at your attempt to recruit followers. An angry mob "
            "chases you down and gives you a beating for your arrogance.",
        )


# --- Skilled trades ---


def _craft_weapon(ctx: EffectContext, material: str, lore: str, divisor: float) -> None:
    if ctx.inventory.open_slots() <= 0:
        return
    grade = ctx.inventory.consume(material)
    if grade >= 1:
        power = grade / divisor + _floor_log2(ctx.character.attribute(lore))
        ctx.inventory.add_item(ctx.inventory.generate_weapon(power, material))


def _craft_armor(ctx: EffectContext) -> None:
    if ctx.inventory.open_slots() <= 0:
        return
    grade = ctx.inventory.consume("hide")
    if grade >= 1:
        power = grade + _floor_log2(ctx.character.attribute("animal_handling"))
        slot = ctx.inventory.random_armor_slot()
        ctx.inventory.add_item(ctx.inventory.generate_armor(power, "leather", slot))


def _blacksmithing(
    apprentice: bool,
    gain: float,
    stamina: float,
    metal_factor: float,
    fire_lore: bool,
    chance: float,
    anvil_bonus: float,
    lore_gain: float,
    weapon_divisor: float | None,
) -> Effect:
    def effect(ctx: EffectContext) -> None:
        if apprentice:
            ctx.claim_apprenticeship(ActivityType.BLACKSMITHING)
        c = ctx.character
        c.increase_attribute("strength", gain)
        c.increase_attribute("toughness", gain)
        c.adjust_status("stamina", -stamina)
        money = _log2(c.attribute("strength") + c.attribute("toughness"))
        money += c.attribute("metal_lore") * metal_factor
        if fire_lore:
            money += c.attribute("fire_lore")
        c.money += money
        success = chance + (anvil_bonus if ctx.workbench_is("anvil") else 0.0)
        if ctx.random.random() < success:
            if weapon_divisor is None:
                ctx.inventory.add_item(ctx.items.get("junk"))
                c.increase_attribute("metal_lore", lore_gain)
            else:
                c.increase_attribute("metal_lore", lore_gain)
                _craft_weapon(ctx, "metal", "metal_lore", weapon_divisor)

    return effect


def _brew(ctx: EffectContext, offset: int, masterpiece: bool) -> None:
    if ctx.inventory.open_slots() <= 0:
        return
    grade = ctx.inventory.consume("ingredient")
    if grade >= 1:
        grade += _floor_log2(ctx.character.attribute("water_lore"))
        ctx.inventory.generate_potion(grade + offset, masterpiece)


def _alchemy_chance(ctx: EffectContext) -> float:
    water = ctx.character.attribute("water_lore")
    ln = math.log(water) if water > 0 else 0.0
    return 1 - math.exp(-0.025 * ln)


def _alchemy(
    apprentice: bool,
    gain: float,
    stamina: float,
    water_factor: float,
    chance: float | Callable[[EffectContext], float] | None,
    wood_gain: float,
    water_gain: float,
    potion_offset: int | None,
    masterpiece: bool = False,
) -> Effect:
    """``chance`` of None means the brew always succeeds."""

    def effect(ctx: EffectContext) -> None:
        if apprentice:
            ctx.claim_apprenticeship(ActivityType.ALCHEMY)
        c = ctx.character
        c.increase_attribute("intelligence", gain)
        c.adjust_status("stamina", -stamina)
        c.money += _log2(c.attribute("intelligence")) + c.attribute("water_lore") * water_factor
        if chance is not None:
            success = chance(ctx) if callable(chance) else chance
            if ctx.workbench_is("cauldron"):
                success += 0.05
            if ctx.random.random() >= success:
                return
        c.increase_attribute("wood_lore", wood_gain)
        c.increase_attribute("water_lore", water_gain)
        if potion_offset is not None:
            _brew(ctx, potion_offset, masterpiece)

    return effect


def _workshop(
    activity_type: ActivityType,
    attributes: tuple[str, str],
    lore: str,
    gain: float,
    lore_factor: float,
    lore_gain: float,
    apprentice: bool,
    make_item: Callable[[EffectContext], None] | None,
) -> Effect:
    """Woodworking and leatherworking share one shape per grade."""

    def effect(ctx: EffectContext) -> None:
        if apprentice:
            ctx.claim_apprenticeship(activity_type)
        c = ctx.character
        first, second = attributes
        c.increase_attribute(first, gain)
        c.increase_attribute(second, gain)
        c.adjust_status("stamina", -20)
        c.money += _log2(c.attribute(first) + c.attribute(second)) + c.attribute(lore) * lore_factor
        if ctx.random.random() < 0.01:
            c.increase_attribute(lore, lore_gain)
            if make_item is not None:
                make_item(ctx)

    return effect


def _carve(ctx: EffectContext) -> None:
    _craft_weapon(ctx, "wood", "wood_lore", 1)


# --- Catalog ---


def _single(
    activity_type: ActivityType,
    name: str,
    description: str,
    consequence: str,
    requirements: dict[str, float],
    effect: Effect,
    baseline: bool = False,
) -> Activity:
    return Activity(
        activity_type=activity_type,
        levels=[ActivityLevel(name, description, consequence, requirements, effect)],
        baseline=baseline,
        unlocked=baseline,
    )


_ELEMENTAL_LORE = ("fire_lore", "water_lore", "earth_lore", "metal_lore", "wood_lore")


def build_normal_activities() -> list[Activity]:
    """Fresh normal-mode activities. Odd jobs and resting are the baseline pair."""
    return [
        _single(
            ActivityType.ODD_JOBS,
            "Odd Jobs",
            "Run errands, pull weeds, clean toilet pits, or do whatever else you can "
            "to earn a coin. Undignified work for a future immortal, but you have to "
            "eat to live.",
            "Uses 5 stamina. Increases a random attribute and provides a little money.",
            {},
            _odd_jobs,
            baseline=True,
        ),
        Activity(
            activity_type=ActivityType.RESTING,
            levels=[
                ActivityLevel(
                    "Resting",
                    "Take a break and get some sleep. Good sleeping habits are essential "
                    "for cultivating immortal attributes.",
                    "Restores half your stamina and a little health.",
                    {},
                    _rest,
                ),
                ActivityLevel(
                    "Meditation",
                    "Enter a meditative state and begin your journey toward spiritual "
                    "enlightenment.",
                    "Restores all your stamina and some health.",
                    {name: 1000 for name in BASE_ATTRIBUTES},
                    _meditate,
                ),
                ActivityLevel(
                    "Communing With Divinity",
                    "Extend your senses beyond the mortal realm and connect to deeper realities.",
                    "Restores all your stamina, health, and mana.",
                    {
                        **{name: 1_000_000 for name in BASE_ATTRIBUTES},
                        "spirituality": 100_000,
                        **{name: 10_000 for name in _ELEMENTAL_LORE},
                    },
                    _commune,
                ),
            ],
            baseline=True,
            unlocked=True,
        ),
        Activity(
            activity_type=ActivityType.BEGGING,
            levels=[
                ActivityLevel(
                    "Begging",
                    "Find a nice spot on the side of the street, look sad, and put your "
                    "hand out. Someone might put a coin in it if you are charismatic enough.",
                    "Uses 5 stamina. Increases charisma and provides a little money.",
                    {"charisma": 3},
                    _begging(0.1, 3, 1),
                ),
                ActivityLevel(
                    "Street Performing",
                    "Add some musical flair to your begging.",
                    "Uses 5 stamina. Increases charisma and provides some money.",
                    {"charisma": 100},
                    _begging(0.2, 10, 1),
                ),
                ActivityLevel(
                    "Oration",
                    "Move the crowds with your stirring speeches.",
                    "Uses 5 stamina. Increases charisma and provides money.",
                    {"charisma": 5000},
                    _begging(0.3, 20, 2),
                ),
                ActivityLevel(
                    "Politics",
                    "Charm your way into civic leadership.",
                    "Uses 5 stamina. Increases charisma, provides money, and makes you "
                    "wonder what any of this means for your immortal progression.",
                    {"charisma": 10_000},
                    _begging(0.5, 30, 10),
                ),
            ],
        ),
        Activity(
            activity_type=ActivityType.BLACKSMITHING,
            levels=[
                ActivityLevel(
                    "Apprentice Blacksmithing",
                    "Work for the local blacksmith. You mostly pump the bellows, but at "
                    "least you're learning a trade.",
                    "Uses 25 stamina. Increases strength and toughness and provides a little money.",
                    {"strength": 50, "toughness": 50},
                    _blacksmithing(True, 0.1, 25, 1, False, 0.01, 0.05, 0.1, None),
                ),
                ActivityLevel(
                    "Journeyman Blacksmithing",
                    "Mold metal into useful things. You might even produce something you "
                    "want to keep now and then.",
                    "Uses 25 stamina. Increases strength, toughness, and money.",
                    {"strength": 400, "toughness": 400, "metal_lore": 1},
                    _blacksmithing(True, 0.2, 25, 2, False, 0.02, 0.05, 0.2, 10),
                ),
                ActivityLevel(
                    "Blacksmithing",
                    "Create useful and beautiful metal objects. You might produce a decent "
                    "weapon occasionally.",
                    "Uses 25 stamina. Build your physical power, master your craft, and "
                    "create weapons.",
                    {"strength": 2000, "toughness": 2000, "metal_lore": 10},
                    _blacksmithing(False, 0.5, 25, 5, True, 0.05, 0.05, 0.3, 10),
                ),
                ActivityLevel(
                    "Master Blacksmithing",
                    "Work the forges like a true master.",
                    "Uses 50 stamina. Bring down your mighty hammer and create works of "
                    "metal wonder.",
                    {"strength": 10_000, "toughness": 10_000, "metal_lore": 100, "fire_lore": 10},
                    _blacksmithing(False, 1, 50, 10, True, 0.2, 0.2, 0.5, 5),
                ),
            ],
            skip_apprenticeship_level=2,
        ),
        _single(
            ActivityType.GATHER_HERBS,
            "Gathering Herbs",
            "Search the natural world for useful herbs.",
            "Uses 10 stamina. Find herbs and learn about plants.",
            {"speed": 20, "intelligence": 20},
            _gather_herbs,
        ),
        Activity(
            activity_type=ActivityType.ALCHEMY,
            levels=[
                ActivityLevel(
                    "Apprentice Alchemy",
                    "Get a job at the alchemist's workshop. It smells awful but you might "
                    "learn a few things.",
                    "Uses 10 stamina. Get smarter, make a few taels, and learn the secrets "
                    "of alchemy.",
                    {"intelligence": 200},
                    _alchemy(True, 0.1, 10, 1, 0.01, 0.05, 0.1, None),
                ),
                ActivityLevel(
                    "Journeyman Alchemy",
                    "Get a cauldron and do a little brewing of your own.",
                    "Uses 10 stamina. Get smarter, make money, practice your craft. If you "
                    "have some herbs, you might make a usable potion or pill.",
                    {"intelligence": 1000, "water_lore": 10, "wood_lore": 1},
                    _alchemy(True, 0.2, 10, 2, 0.02, 0.1, 0.2, 0),
                ),
                ActivityLevel(
                    "Alchemy",
                    "Open up your own alchemy shop.",
                    "Uses 10 stamina. Get smarter, make money, and make some decent potions "
                    "or pills.",
                    {"intelligence": 8000, "water_lore": 100, "wood_lore": 10},
                    _alchemy(False, 0.5, 10, 5, _alchemy_chance, 0.2, 0.3, 1),
                ),
                ActivityLevel(
                    "Master Alchemy",
                    "Brew power, precipitate life, stir in some magic, and create consumable "
                    "miracles.",
                    "Uses 20 stamina. Create amazing potions and pills.",
                    {"intelligence": 100_000, "water_lore": 1000, "wood_lore": 100},
                    _alchemy(False, 1, 20, 10, None, 0.3, 0.6, 1, masterpiece=True),
                ),
            ],
            skip_apprenticeship_level=2,
        ),
        _single(
            ActivityType.CHOP_WOOD,
            "Chopping Wood",
            "Work as a woodcutter, cutting logs in the forest.",
            "Uses 10 stamina. Get a log and learn about plants.",
            {"strength": 100},
            _chop_wood,
        ),
        Activity(
            activity_type=ActivityType.WOODWORKING,
            levels=[
                ActivityLevel(
                    "Apprentice Woodworking",
                    "Work in a woodcarver's shop.",
                    "Uses 20 stamina. Increases strength and intelligence and provides a "
                    "little money.",
                    {"strength": 100, "intelligence": 100},
                    _workshop(ActivityType.WOODWORKING, ("strength", "intelligence"),
                              "wood_lore", 0.1, 1, 0.1, True, None),
                ),
                ActivityLevel(
                    "Journeyman Woodworking",
                    "Carve wood into useful items.",
                    "Uses 20 stamina. Increases strength and intelligence and provides a "
                    "little money. You may make something you want to keep now and then.",
                    {"strength": 800, "intelligence": 800, "wood_lore": 1},
                    _workshop(ActivityType.WOODWORKING, ("strength", "intelligence"),
                              "wood_lore", 0.2, 2, 0.2, True, _carve),
                ),
                ActivityLevel(
                    "Woodworking",
                    "Open your own woodworking shop.",
                    "Uses 20 stamina. Increases strength and intelligence, earn some money, "
                    "create wooden equipment.",
                    {"strength": 2000, "intelligence": 2000, "wood_lore": 10},
                    _workshop(ActivityType.WOODWORKING, ("strength", "intelligence"),
                              "wood_lore", 0.5, 5, 0.3, False, _carve),
                ),
            ],
            skip_apprenticeship_level=2,
        ),
        Activity(
            activity_type=ActivityType.LEATHERWORKING,
            levels=[
                ActivityLevel(
                    "Apprentice Leatherworking",
                    "Work in a tannery, where hides are turned into leather items.",
                    "Uses 20 stamina. Increases speed and toughness and provides a little money.",
                    {"speed": 100, "toughness": 100},
                    _workshop(ActivityType.LEATHERWORKING, ("speed", "toughness"),
                              "animal_handling", 0.1, 1, 0.1, True, None),
                ),
                ActivityLevel(
                    "Journeyman Leatherworking",
                    "Convert hides into leather items.",
                    "Uses 20 stamina. Increases speed and toughness and provides a little "
                    "money. You may make something you want to keep now and then.",
                    {"speed": 800, "toughness": 800, "animal_handling": 1},
                    _workshop(ActivityType.LEATHERWORKING, ("speed", "toughness"),
                              "animal_handling", 0.2, 2, 0.2, True, _craft_armor),
                ),
                ActivityLevel(
                    "Leatherworking",
                    "Open your own tannery.",
                    "Uses 20 stamina. Increases speed and toughness, earn some money, "
                    "create leather equipment.",
                    {"speed": 2000, "toughness": 2000, "animal_handling": 10},
                    _workshop(ActivityType.LEATHERWORKING, ("speed", "toughness"),
                              "animal_handling", 0.5, 5, 0.3, False, _craft_armor),
                ),
            ],
            skip_apprenticeship_level=2,
        ),
        _single(
            ActivityType.FARMING,
            "Farming",
            "Plant crops in your fields. This is a waste of time if you don't have some "
            "fields ready to work.",
            "Uses 20 stamina. Increases strength and speed and helps your fields to "
            "produce more food.",
            {"strength": 10, "speed": 10},
            _farming,
        ),
        _single(
            ActivityType.MINING,
            "Mining",
            "Dig in the ground for useable minerals.",
            "Uses 20 stamina. Increases strength and sometimes finds something useful.",
            {"strength": 70},
            _mining,
        ),
        _single(
            ActivityType.SMELTING,
            "Smelting",
            "Smelt metal ores into usable metal.",
            "Uses 30 stamina. Increases toughness and intelligence. If you have metal "
            "ores, you can make them into bars.",
            {"toughness": 100, "intelligence": 100},
            _smelting,
        ),
        _single(
            ActivityType.HUNTING,
            "Hunting",
            "Hunt for animals in the nearby woods.",
            "Uses 50 stamina. Increases speed and a good hunt provides some meat. It "
            "might draw unwanted attention to yourself.",
            {"speed": 200},
            _hunting,
        ),
        _single(
            ActivityType.FISHING,
            "Fishing",
            "Grab your net and see if you can catch some fish.",
            "Uses 50 stamina. Increases intelligence and strength and you might catch a fish.",
            {"strength": 15, "intelligence": 15},
            _fishing,
        ),
        _single(
            ActivityType.BURNING,
            "Burning Things",
            "Light things on fire and watch them burn.",
            "Uses 5 stamina. You will be charged for what you burn. Teaches you to love fire.",
            {"intelligence": 10},
            _burning,
        ),
        _single(
            ActivityType.BODY_CULTIVATION,
            "Body Cultivation",
            "Focus on the development of your body. Unblock your meridians, let your chi "
            "flow, and prepare your body for immortality.",
            "Uses 100 stamina. Increases your physical abilities and strengthen your "
            "aptitudes in them.",
            {"strength": 5000, "speed": 5000, "toughness": 5000, "spirituality": 1},
            _cultivation(("strength", "speed", "toughness")),
        ),
        _single(
            ActivityType.MIND_CULTIVATION,
            "Mind Cultivation",
            "Focus on the development of your mind. Unblock your meridians, let your chi "
            "flow, and prepare your mind for immortality.",
            "Uses 100 stamina. Increases your mental abilities and strengthen your "
            "aptitudes in them.",
            {"charisma": 5000, "intelligence": 5000, "spirituality": 1},
            _cultivation(("intelligence", "charisma")),
        ),
        _single(
            ActivityType.CORE_CULTIVATION,
            "Core Cultivation",
            "Focus on the development of your soul core.",
            "A very advanced cultivation technique. Make sure you have achieved a deep "
            "understanding of elemental balance before attempting this. Uses 200 "
            "stamina. Gives you a small chance of increasing your mana capabilities.",
            {**{name: 1000 for name in _ELEMENTAL_LORE}, "spirituality": 1000},
            _core_cultivation,
        ),
        _single(
            ActivityType.RECRUITING,
            "Recruit Followers",
            "Look for followers willing to serve you.",
            "Costs 100 stamina and 1M taels. Gives you a small chance of finding a "
            "follower, if you are powerful enough to attract any.",
            {"charisma": 1_000_000_000},
            _recruiting,
        ),
    ]
