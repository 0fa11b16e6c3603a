"""tick - A minimal, general-purpose tick engine in Python."""

from tick.clock import Clock
from tick.engine import Engine
from tick.types import DeadEntityError, EntityId, SnapshotError, TickContext
from tick.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
    "SnapshotError",
]
