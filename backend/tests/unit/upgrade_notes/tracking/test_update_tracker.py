"""Unit tests for UpdateTracker."""

from upgrade_notes.configs.constants import UpdateDirection
from upgrade_notes.tracking.update_tracker import UpdateTracker


class TestRecord:
    def test_tracker_starts_empty(self, tracker: UpdateTracker) -> None:
        assert len(tracker) == 0
        assert tracker.get("denisok94/helper") is None

    def test_upgrade_direction(self, tracker: UpdateTracker) -> None:
        update = tracker.record("denisok94/helper", "1.0.0.0", "1.0.0", "2.0.0.0", "2.0.0")

        assert update.direction == UpdateDirection.UPGRADE
        assert update.is_upgrade is True
        assert tracker.get("denisok94/helper") == update

    def test_downgrade_direction(self, tracker: UpdateTracker) -> None:
        update = tracker.record("denisok94/helper", "2.0.0.0", "2.0.0", "1.5.0.0", "1.5.0")
        assert update.direction == UpdateDirection.DOWNGRADE

    def test_equal_versions_are_downgrade(self, tracker: UpdateTracker) -> None:
        """A no-op update does not crash and is deterministic."""
        update = tracker.record(
            "denisok94/helper", "dev-master", "dev-master", "dev-master", "dev-master"
        )
        assert update.direction == UpdateDirection.DOWNGRADE

    def test_record_overwrites(self, tracker: UpdateTracker) -> None:
        tracker.record("denisok94/helper", "1.0.0.0", "1.0.0", "2.0.0.0", "2.0.0")
        tracker.record("denisok94/helper", "2.0.0.0", "2.0.0", "1.0.0.0", "1.0.0")

        update = tracker.get("denisok94/helper")
        assert update is not None
        assert update.from_pretty == "2.0.0"
        assert update.direction == UpdateDirection.DOWNGRADE
        assert len(tracker) == 1

    def test_package_names_keep_recording_order(self, tracker: UpdateTracker) -> None:
        tracker.record("b/second", "1.0", "1.0", "1.1", "1.1")
        tracker.record("a/first", "1.0", "1.0", "1.1", "1.1")

        assert tracker.package_names() == ["b/second", "a/first"]
        assert "a/first" in tracker
        assert "c/missing" not in tracker
