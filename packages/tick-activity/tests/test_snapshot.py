"""Tests for ActivityManager snapshot/restore."""
from __future__ import annotations

import json
import logging

import pytest

from tick_activity.config import ProgressionConfig
from tick_activity.manager import ActivityManager
from tick_activity.types import ActivityNotFoundError, ActivityType, GameMode, LoopEntry


def _played_manager() -> ActivityManager:
    manager = ActivityManager(ProgressionConfig(auto_restart=True, pause_on_death=False))
    manager.long_tick({"charisma": 101, "strength": 101})
    manager.loop.append(ActivityType.BEGGING, 3)
    manager.loop.append(ActivityType.MINING)
    manager.set_spirit_activity(ActivityType.CHOP_WOOD)
    manager.state.open_apprenticeships = 0
    manager.state.record_completion(ActivityType.ALCHEMY)
    return manager


class TestSnapshot:
    def test_snapshot_keys_and_values(self) -> None:
        data = _played_manager().snapshot()
        assert data["auto_restart"] is True
        assert data["pause_on_death"] is False
        assert data["activity_loop"] == [
            {"activity": "begging", "repeat_times": 3},
            {"activity": "mining", "repeat_times": 1},
        ]
        assert "begging" in data["unlocked_activities"]
        assert data["open_apprenticeships"] == 0
        assert data["spirit_activity"] == "chop_wood"
        assert data["completed_apprenticeships"] == ["alchemy"]

    def test_snapshot_is_json_serializable(self) -> None:
        data = _played_manager().snapshot()
        assert json.loads(json.dumps(data)) == data

    def test_round_trip(self) -> None:
        original = _played_manager()
        restored = ActivityManager()
        restored.restore(original.snapshot())

        assert [a.activity_type for a in restored.catalog.unlocked()] == [
            a.activity_type for a in original.catalog.unlocked()
        ]
        assert restored.loop.entries() == original.loop.entries()
        assert restored.auto_restart is True
        assert restored.pause_on_death is False
        assert restored.spirit_activity is ActivityType.CHOP_WOOD
        assert restored.state.open_apprenticeships == 0
        assert restored.state.completed_apprenticeships == [ActivityType.ALCHEMY]
        assert restored.snapshot() == original.snapshot()

    def test_levels_are_not_persisted(self) -> None:
        restored = ActivityManager()
        restored.restore(_played_manager().snapshot())
        assert restored.get(ActivityType.BEGGING).level == 0


class TestRestoreDefaults:
    def test_empty_save(self) -> None:
        manager = ActivityManager()
        manager.restore({})
        assert [a.activity_type for a in manager.catalog.unlocked()] == [
            ActivityType.ODD_JOBS,
            ActivityType.RESTING,
        ]
        assert len(manager.loop) == 0
        assert manager.state.open_apprenticeships == 0
        assert manager.state.completed_apprenticeships == []
        assert manager.spirit_activity is None
        assert manager.auto_restart is False
        assert manager.pause_on_death is True

    def test_flags_default_from_config(self) -> None:
        manager = ActivityManager(ProgressionConfig(auto_restart=True))
        manager.restore({"unlocked_activities": []})
        assert manager.auto_restart is True
        assert manager.catalog.unlocked() == []

    def test_bad_slot_count_defaults_to_zero(self) -> None:
        manager = ActivityManager()
        manager.restore({"open_apprenticeships": "two"})
        assert manager.state.open_apprenticeships == 0
        manager.restore({"open_apprenticeships": -3})
        assert manager.state.open_apprenticeships == 0
        manager.restore({"open_apprenticeships": 2})
        assert manager.state.open_apprenticeships == 2

    def test_unknown_activity_strings_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        manager = ActivityManager()
        with caplog.at_level(logging.WARNING, logger="tick_activity"):
            manager.restore({
                "unlocked_activities": ["odd_jobs", "teleporting", 7],
                "completed_apprenticeships": ["alchemy", "alchemy", "necromancy"],
                "spirit_activity": "levitating",
                "activity_loop": [{"activity": "teleporting"}, {"activity": "odd_jobs"}],
            })
        assert [a.activity_type for a in manager.catalog.unlocked()] == [ActivityType.ODD_JOBS]
        assert manager.state.completed_apprenticeships == [ActivityType.ALCHEMY]
        assert manager.spirit_activity is None
        assert manager.loop.entries() == [LoopEntry(ActivityType.ODD_JOBS)]
        assert "teleporting" in caplog.text

    def test_malformed_containers_ignored(self) -> None:
        manager = ActivityManager()
        manager.restore({
            "unlocked_activities": "odd_jobs",
            "completed_apprenticeships": 5,
            "activity_loop": "mining",
        })
        assert [a.activity_type for a in manager.catalog.unlocked()] == [
            ActivityType.ODD_JOBS,
            ActivityType.RESTING,
        ]
        assert manager.state.completed_apprenticeships == []
        assert len(manager.loop) == 0

    def test_non_list_unlocked_activities_unlock_baseline(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        manager = ActivityManager()
        manager.long_tick({"strength": 71})
        assert manager.catalog.is_unlocked(ActivityType.MINING)
        with caplog.at_level(logging.WARNING, logger="tick_activity.manager"):
            manager.restore({"unlocked_activities": {"mining": True}})
        assert manager.catalog.is_unlocked(ActivityType.ODD_JOBS)
        assert manager.catalog.is_unlocked(ActivityType.RESTING)
        assert not manager.catalog.is_unlocked(ActivityType.MINING)
        assert "expected a list of activity types" in caplog.text

    def test_non_bool_flags_fall_back_to_config(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        manager = ActivityManager()
        with caplog.at_level(logging.WARNING, logger="tick_activity.manager"):
            manager.restore({"auto_restart": "false", "pause_on_death": 1})
        assert manager.auto_restart is False
        assert manager.pause_on_death is True
        assert "expected a bool for auto_restart" in caplog.text

    def test_non_bool_flag_keeps_configured_default(self) -> None:
        manager = ActivityManager(ProgressionConfig(auto_restart=True, pause_on_death=False))
        manager.restore({"auto_restart": "no", "pause_on_death": "yes"})
        assert manager.auto_restart is True
        assert manager.pause_on_death is False

    def test_bool_flags_restored(self) -> None:
        manager = ActivityManager()
        manager.restore({"auto_restart": True, "pause_on_death": False})
        assert manager.auto_restart is True
        assert manager.pause_on_death is False

    def test_restore_does_not_prune(self) -> None:
        manager = ActivityManager()
        manager.restore({
            "unlocked_activities": ["odd_jobs"],
            "activity_loop": [{"activity": "mining", "repeat_times": 2}],
        })
        assert manager.loop.activities() == [ActivityType.MINING]
        assert [e.activity for e in manager.prune_loop()] == [ActivityType.MINING]

    def test_challenge_types_in_normal_loop_fail_on_prune(self) -> None:
        manager = ActivityManager()
        manager.restore({"activity_loop": [{"activity": "swim"}]})
        with pytest.raises(ActivityNotFoundError):
            manager.prune_loop()

    def test_restore_into_challenge_catalog(self) -> None:
        manager = ActivityManager(mode=GameMode.SWIM)
        manager.restore({"unlocked_activities": ["swim", "odd_jobs"]})
        assert manager.catalog.is_unlocked(ActivityType.SWIM)
