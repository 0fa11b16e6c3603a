"""ActivityLoop: the player's ordered, repeating plan of activities."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable

from tick_activity.types import ActivityType, LoopEntry

logger = logging.getLogger(__name__)


class ActivityLoop:
    """Ordered loop entries. Order is the scheduler's execution order.

    The loop does not know whether an activity is unlocked; callers pass a
    predicate to ``prune`` after anything that can relock activities.
    """

    def __init__(self, entries: list[LoopEntry] | None = None) -> None:
        self._entries: list[LoopEntry] = list(entries) if entries else []

    # --- Editing ---

    def append(self, activity: ActivityType, repeat_times: int = 1) -> LoopEntry:
        entry = LoopEntry(activity=activity, repeat_times=repeat_times)
        self._entries.append(entry)
        return entry

    def insert(self, index: int, entry: LoopEntry) -> None:
        self._entries.insert(index, entry)

    def move(self, index: int, new_index: int) -> None:
        """Move the entry at *index* so it ends up at *new_index*. Raises IndexError."""
        entry = self._entries.pop(index)
        self._entries.insert(new_index, entry)

    def remove(self, index: int) -> LoopEntry:
        """Remove and return the entry at *index*. Raises IndexError."""
        return self._entries.pop(index)

    def remove_activity(self, activity: ActivityType) -> int:
        """Remove every entry for *activity*. Returns how many were removed."""
        removed = 0
        for i in range(len(self._entries) - 1, -1, -1):
            if self._entries[i].activity == activity:
                del self._entries[i]
                removed += 1
        return removed

    def clear(self) -> None:
        self._entries.clear()

    def prune(self, is_unlocked: Callable[[ActivityType], bool]) -> list[LoopEntry]:
        """Delete entries whose activity is locked, walking from the end.

        Surviving entries keep their relative order. Returns the removed
        entries in their original order.
        """
        removed: list[LoopEntry] = []
        for i in range(len(self._entries) - 1, -1, -1):
            entry = self._entries[i]
            if not is_unlocked(entry.activity):
                del self._entries[i]
                removed.append(entry)
        removed.reverse()
        if removed:
            logger.debug("pruned %d loop entries", len(removed))
        return removed

    # --- Queries ---

    def entries(self) -> list[LoopEntry]:
        return list(self._entries)

    def activities(self) -> list[ActivityType]:
        return [e.activity for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LoopEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> LoopEntry:
        return self._entries[index]

    # --- Serialization ---

    def snapshot(self) -> list[dict[str, Any]]:
        return [
            {"activity": e.activity.value, "repeat_times": e.repeat_times}
            for e in self._entries
        ]

    def restore(self, data: list[dict[str, Any]]) -> None:
        """Replace entries from snapshot data. Unknown activities are skipped."""
        self._entries.clear()
        for entry_data in data:
            try:
                activity = ActivityType(entry_data["activity"])
            except (KeyError, ValueError, TypeError):
                logger.warning("skipping unreadable loop entry %r", entry_data)
                continue
            repeat_times = entry_data.get("repeat_times", 1)
            if not isinstance(repeat_times, int) or repeat_times < 1:
                repeat_times = 1
            self._entries.append(LoopEntry(activity=activity, repeat_times=repeat_times))
