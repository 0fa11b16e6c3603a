"""In-memory collaborators for tick_activity tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from tick_activity.collaborators import Collaborators
from tick_activity.types import GameMode


class FakeCharacter:
    def __init__(self, **attributes: float) -> None:
        self.dead = False
        self.money = 0.0
        self.mana_unlocked = False
        self.attributes: dict[str, float] = dict(attributes)
        self.aptitudes: dict[str, float] = {}
        self.statuses: dict[str, float] = {"health": 100.0, "stamina": 100.0, "mana": 0.0}
        self.maxima: dict[str, float] = {"health": 100.0, "stamina": 100.0, "mana": 0.0}
        self.overage_checks = 0

    def attribute(self, name: str) -> float:
        return self.attributes.get(name, 0.0)

    def attribute_values(self) -> dict[str, float]:
        return dict(self.attributes)

    def increase_attribute(self, name: str, amount: float) -> float:
        self.attributes[name] = self.attributes.get(name, 0.0) + amount
        return amount

    def increase_aptitude(self, name: str, amount: float) -> None:
        self.aptitudes[name] = self.aptitudes.get(name, 0.0) + amount

    def status(self, name: str) -> float:
        return self.statuses[name]

    def status_max(self, name: str) -> float:
        return self.maxima[name]

    def adjust_status(self, name: str, amount: float) -> None:
        self.statuses[name] = self.statuses.get(name, 0.0) + amount

    def fill_status(self, name: str) -> None:
        self.statuses[name] = self.maxima[name]

    def raise_status_max(self, name: str, amount: float) -> None:
        self.maxima[name] = self.maxima.get(name, 0.0) + amount

    def check_overage(self) -> None:
        self.overage_checks += 1
        for name, value in self.statuses.items():
            self.statuses[name] = min(value, self.maxima[name])


class FakeInventory:
    def __init__(self, slots: int = 10) -> None:
        self.items: list[Any] = []
        self.slots = slots
        self.stock: dict[str, list[float]] = {}
        self.potions: list[tuple[float, bool]] = []
        self.herbs = 0

    def stock_item(self, kind: str, grade: float) -> None:
        self.stock.setdefault(kind, []).append(grade)

    def add_item(self, item: Any) -> None:
        self.items.append(item)

    def consume(self, kind: str) -> float:
        grades = self.stock.get(kind)
        if not grades:
            return 0.0
        return grades.pop(0)

    def open_slots(self) -> int:
        return self.slots - len(self.items)

    def generate_weapon(self, grade: float, material: str) -> Any:
        return ("weapon", material, grade)

    def generate_armor(self, grade: float, material: str, slot: str) -> Any:
        return ("armor", material, slot, grade)

    def random_armor_slot(self) -> str:
        return "head"

    def generate_potion(self, grade: float, masterpiece: bool) -> None:
        self.potions.append((grade, masterpiece))

    def generate_herb(self) -> None:
        self.herbs += 1

    def get_wood(self) -> Any:
        return "log"

    def get_ore(self) -> Any:
        return "ore"

    def get_bar(self, grade: float) -> Any:
        return ("bar", grade)


class FakeItems:
    def get(self, name: str) -> Any:
        return name


@dataclass
class FakeHome:
    workbench: str | None = None
    worked: list[int] = field(default_factory=list)

    def work_fields(self, power: int) -> None:
        self.worked.append(power)


@dataclass
class FakeBattle:
    enemies: list[str] = field(default_factory=list)

    def add_enemy(self, name: str) -> None:
        self.enemies.append(name)


@dataclass
class FakeFollowers:
    unlocked: bool = False
    recruited: int = 0

    def generate_follower(self) -> None:
        self.recruited += 1


class FakeTasks:
    def __init__(self, goal: int = 3) -> None:
        self.goal = goal
        self.progress: dict[GameMode, int] = {}
        self.completion_checks = 0

    def advance(self, task: GameMode) -> None:
        self.progress[task] = self.progress.get(task, 0) + 1

    def check_completion(self) -> None:
        self.completion_checks += 1

    def is_complete(self, task: GameMode) -> bool:
        return self.progress.get(task, 0) >= self.goal


@dataclass
class FakeLog:
    messages: list[tuple[str, str, str]] = field(default_factory=list)

    def add(self, message: str, kind: str = "STANDARD", category: str = "EVENT") -> None:
        self.messages.append((message, kind, category))


@pytest.fixture
def character() -> FakeCharacter:
    return FakeCharacter()


@pytest.fixture
def collaborators(character: FakeCharacter) -> Collaborators:
    return Collaborators(
        character=character,
        inventory=FakeInventory(),
        items=FakeItems(),
        home=FakeHome(),
        battle=FakeBattle(),
        followers=FakeFollowers(),
        tasks=FakeTasks(),
        log=FakeLog(),
    )
