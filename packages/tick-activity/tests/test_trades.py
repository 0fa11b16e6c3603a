"""Tests for tick_activity.trades: normal-mode activity effects."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from tick_activity.catalog import build_catalog
from tick_activity.collaborators import Collaborators, EffectContext
from tick_activity.state import ProgressionState
from tick_activity.types import ActivityType


class FixedRandom:
    """Random stand-in that always rolls the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[0]


def _run(
    collaborators: Collaborators,
    activity_type: ActivityType,
    level: int = 0,
    roll: float = 0.5,
) -> tuple[ProgressionState, list[ActivityType]]:
    """Run one grade's effect; return the state and the apprenticeship claims."""
    state = ProgressionState()
    claims: list[ActivityType] = []
    ctx = EffectContext.bind(collaborators, state, FixedRandom(roll), claims.append)  # type: ignore[arg-type]
    effect = build_catalog().get(activity_type).levels[level].effect
    assert effect is not None
    effect(ctx)
    return state, claims


class TestSimpleJobs:
    def test_odd_jobs(self, collaborators: Collaborators) -> None:
        state, _ = _run(collaborators, ActivityType.ODD_JOBS)
        c = collaborators.character
        assert c.attribute("strength") == pytest.approx(0.1)
        assert c.money == 3
        assert c.status("stamina") == 95
        assert state.odd_job_days == 1

    def test_oration_money_scales_with_charisma(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["charisma"] = 7.7
        state, _ = _run(collaborators, ActivityType.BEGGING, level=2)
        assert c.attribute("charisma") == pytest.approx(8.0)
        assert c.money == pytest.approx(20 + 4)
        assert state.begging_days == 1

    def test_meditation_restores_stamina(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.statuses["stamina"] = 10
        _run(collaborators, ActivityType.RESTING, level=1, roll=0.0)
        assert c.status("stamina") == 100
        assert c.attribute("spirituality") == pytest.approx(0.1)

    def test_gather_herbs_with_garden(self, collaborators: Collaborators) -> None:
        collaborators.home.workbench = "herbGarden"
        _run(collaborators, ActivityType.GATHER_HERBS)
        assert collaborators.inventory.herbs == 2

    def test_farming_power_from_lore(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes.update({"wood_lore": 60, "earth_lore": 50})
        _run(collaborators, ActivityType.FARMING)
        assert collaborators.home.worked == [2]

    def test_farming_without_lore(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.FARMING)
        assert collaborators.home.worked == [1]

    def test_mining_finds_ore(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.MINING, roll=0.4)
        assert collaborators.inventory.items == ["ore"]

    def test_smelting_makes_bar(self, collaborators: Collaborators) -> None:
        collaborators.inventory.stock_item("ore", 2)
        _run(collaborators, ActivityType.SMELTING)
        assert collaborators.inventory.items == [("bar", 2)]
        assert collaborators.character.status("stamina") == 70

    def test_smelting_without_slots(self, collaborators: Collaborators) -> None:
        collaborators.inventory.slots = 0
        collaborators.inventory.stock_item("ore", 2)
        _run(collaborators, ActivityType.SMELTING)
        assert collaborators.inventory.items == []
        assert collaborators.inventory.stock["ore"] == [2]

    def test_hunting_with_kennel(self, collaborators: Collaborators) -> None:
        collaborators.home.workbench = "dogKennel"
        _run(collaborators, ActivityType.HUNTING, roll=0.3)
        assert collaborators.inventory.items == ["meat", "hide"]
        assert collaborators.battle.enemies == []

    def test_hunting_draws_a_wolf(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.HUNTING, roll=0.005)
        assert collaborators.battle.enemies == ["wolf"]

    def test_fishing(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.FISHING, roll=0.1)
        assert collaborators.inventory.items == ["carp"]

    def test_burning_costs_money(self, collaborators: Collaborators) -> None:
        collaborators.character.money = 5
        _run(collaborators, ActivityType.BURNING)
        assert collaborators.character.money == pytest.approx(4.9)
        assert collaborators.character.attribute("fire_lore") == pytest.approx(0.1)


class TestCultivation:
    def test_body_cultivation(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.BODY_CULTIVATION)
        c = collaborators.character
        assert c.status("stamina") == 0
        for name in ("strength", "speed", "toughness"):
            assert c.attribute(name) == 1
            assert c.aptitudes[name] == pytest.approx(0.1)

    def test_core_cultivation_without_mana_hurts(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.CORE_CULTIVATION)
        assert collaborators.character.status("health") == 90
        assert collaborators.log.messages[0][1] == "INJURY"

    def test_core_cultivation_with_mana(self, collaborators: Collaborators) -> None:
        collaborators.character.mana_unlocked = True
        _run(collaborators, ActivityType.CORE_CULTIVATION, roll=0.0)
        assert collaborators.character.status_max("mana") == 1
        assert collaborators.log.messages == []

    def test_recruiting_with_followers(self, collaborators: Collaborators) -> None:
        collaborators.followers.unlocked = True
        collaborators.character.money = 2_000_000
        _run(collaborators, ActivityType.RECRUITING, roll=0.0)
        assert collaborators.followers.recruited == 1
        assert collaborators.character.money == 1_000_000

    def test_recruiting_while_broke_hurts(self, collaborators: Collaborators) -> None:
        collaborators.followers.unlocked = True
        _run(collaborators, ActivityType.RECRUITING, roll=0.0)
        assert collaborators.followers.recruited == 0
        assert collaborators.character.money == 0
        assert collaborators.log.messages[0][1] == "INJURY"


class TestSkilledTrades:
    def test_apprentice_smith_claims_slot(self, collaborators: Collaborators) -> None:
        _, claims = _run(collaborators, ActivityType.BLACKSMITHING, roll=0.0)
        assert claims == [ActivityType.BLACKSMITHING]
        assert collaborators.inventory.items == ["junk"]
        assert collaborators.character.attribute("metal_lore") == pytest.approx(0.1)

    def test_apprentice_smith_unlucky(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.BLACKSMITHING, roll=0.99)
        assert collaborators.inventory.items == []

    def test_anvil_improves_odds(self, collaborators: Collaborators) -> None:
        collaborators.home.workbench = "anvil"
        _run(collaborators, ActivityType.BLACKSMITHING, roll=0.04)
        assert collaborators.inventory.items == ["junk"]

    def test_journeyman_smith_forges_weapon(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["metal_lore"] = 5
        collaborators.inventory.stock_item("metal", 20)
        _, claims = _run(collaborators, ActivityType.BLACKSMITHING, level=1, roll=0.0)
        assert claims == [ActivityType.BLACKSMITHING]
        assert collaborators.inventory.items == [("weapon", "metal", 4.0)]

    def test_smith_past_apprenticeship_does_not_claim(self, collaborators: Collaborators) -> None:
        _, claims = _run(collaborators, ActivityType.BLACKSMITHING, level=2, roll=0.99)
        assert claims == []

    def test_journeyman_alchemy_brews(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["water_lore"] = 4
        collaborators.inventory.stock_item("ingredient", 3)
        _, claims = _run(collaborators, ActivityType.ALCHEMY, level=1, roll=0.0)
        assert claims == [ActivityType.ALCHEMY]
        assert collaborators.inventory.potions == [(5, False)]

    def test_alchemy_failed_brew_learns_nothing(self, collaborators: Collaborators) -> None:
        _run(collaborators, ActivityType.ALCHEMY, roll=0.99)
        assert collaborators.character.attribute("wood_lore") == 0
        assert collaborators.character.attribute("water_lore") == 0

    def test_master_alchemy_always_brews(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["water_lore"] = 10
        collaborators.inventory.stock_item("ingredient", 3)
        _, claims = _run(collaborators, ActivityType.ALCHEMY, level=3, roll=0.99)
        assert claims == []
        assert collaborators.inventory.potions == [(7, True)]

    def test_journeyman_woodworking_carves(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["wood_lore"] = 4
        collaborators.inventory.stock_item("wood", 3)
        _, claims = _run(collaborators, ActivityType.WOODWORKING, level=1, roll=0.0)
        assert claims == [ActivityType.WOODWORKING]
        assert collaborators.inventory.items == [("weapon", "wood", 5)]

    def test_leatherworking_makes_armor(self, collaborators: Collaborators) -> None:
        c = collaborators.character
        c.attributes["animal_handling"] = 10
        collaborators.inventory.stock_item("hide", 2)
        _, claims = _run(collaborators, ActivityType.LEATHERWORKING, level=2, roll=0.0)
        assert claims == []
        assert collaborators.inventory.items == [("armor", "leather", "head", 5)]
        assert c.status("stamina") == 80
