"""Collaborator protocols used by activity effects.

The progression engine does not own the character, inventory, home, combat,
follower or impossible-task systems. Effects reach them only through these
interfaces, bundled into an EffectContext when an activity is performed.
"""
from __future__ import annotations

import random as _random_mod
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from tick_activity.state import ProgressionState
from tick_activity.types import ActivityType, GameMode


class Character(Protocol):
    """Attribute and status model of the player character."""

    dead: bool
    money: float
    mana_unlocked: bool

    def attribute(self, name: str) -> float: ...
    def attribute_values(self) -> dict[str, float]: ...
    def increase_attribute(self, name: str, amount: float) -> float: ...
    def increase_aptitude(self, name: str, amount: float) -> None: ...
    def status(self, name: str) -> float: ...
    def status_max(self, name: str) -> float: ...
    def adjust_status(self, name: str, amount: float) -> None: ...
    def fill_status(self, name: str) -> None: ...
    def raise_status_max(self, name: str, amount: float) -> None: ...
    def check_overage(self) -> None: ...


class Inventory(Protocol):
    def add_item(self, item: Any) -> None: ...
    def consume(self, kind: str) -> float: ...
    def open_slots(self) -> int: ...
    def generate_weapon(self, grade: float, material: str) -> Any: ...
    def generate_armor(self, grade: float, material: str, slot: str) -> Any: ...
    def random_armor_slot(self) -> str: ...
    def generate_potion(self, grade: float, masterpiece: bool) -> None: ...
    def generate_herb(self) -> None: ...
    def get_wood(self) -> Any: ...
    def get_ore(self) -> Any: ...
    def get_bar(self, grade: float) -> Any: ...


class ItemRepository(Protocol):
    def get(self, name: str) -> Any: ...


class Home(Protocol):
    workbench: str | None

    def work_fields(self, power: int) -> None: ...


class Battle(Protocol):
    def add_enemy(self, name: str) -> None: ...


class Followers(Protocol):
    unlocked: bool

    def generate_follower(self) -> None: ...


class ImpossibleTasks(Protocol):
    def advance(self, task: GameMode) -> None: ...
    def check_completion(self) -> None: ...
    def is_complete(self, task: GameMode) -> bool: ...


class GameLog(Protocol):
    """Player-facing message log (not diagnostics logging)."""

    def add(self, message: str, kind: str = "STANDARD", category: str = "EVENT") -> None: ...


@dataclass
class Collaborators:
    """The external systems an ActivityManager hands to effects."""

    character: Character
    inventory: Inventory
    items: ItemRepository
    home: Home
    battle: Battle
    followers: Followers
    tasks: ImpossibleTasks
    log: GameLog


@dataclass
class EffectContext:
    """Everything an activity effect may touch while it runs."""

    character: Character
    inventory: Inventory
    items: ItemRepository
    home: Home
    battle: Battle
    followers: Followers
    tasks: ImpossibleTasks
    log: GameLog
    state: ProgressionState
    random: _random_mod.Random
    claim_apprenticeship: Callable[[ActivityType], None]

    @classmethod
    def bind(
        cls,
        collaborators: Collaborators,
        state: ProgressionState,
        rng: _random_mod.Random,
        claim_apprenticeship: Callable[[ActivityType], None],
    ) -> EffectContext:
        return cls(
            character=collaborators.character,
            inventory=collaborators.inventory,
            items=collaborators.items,
            home=collaborators.home,
            battle=collaborators.battle,
            followers=collaborators.followers,
            tasks=collaborators.tasks,
            log=collaborators.log,
            state=state,
            random=rng,
            claim_apprenticeship=claim_apprenticeship,
        )

    def workbench_is(self, workbench_id: str) -> bool:
        return self.home.workbench == workbench_id
