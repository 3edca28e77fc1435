# Area: Leaderboard Tests
"""Tests for LogManager."""

from decimal import Decimal

from tron_racing._leaderboard.log_manager import LogManager
from tron_racing._leaderboard.map_log import MapLog


class TestLogManager:
    """Tests for LogManager class."""

    def test_no_current_log_initially(self):
        """Test no leaderboard is selected before any map."""
        assert LogManager().current_log is None

    def test_select_creates_empty_log(self):
        """Test selecting an unseen map creates an empty MapLog."""
        manager = LogManager()
        log = manager.select("track1")
        assert isinstance(log, MapLog)
        assert log.map_name == "track1"
        assert log.count() == 0
        assert manager.current_log is log

    def test_select_returns_same_log(self):
        """Test records survive switching maps and back."""
        manager = LogManager()
        manager.select("track1").update_record("A", Decimal("10"))
        manager.select("track2")
        log = manager.select("track1")
        assert log.get_time("A") == Decimal("10")

    def test_has_log(self):
        """Test has_log only reports maps that were used."""
        manager = LogManager()
        manager.get_log("track1")
        assert manager.has_log("track1") is True
        assert manager.has_log("track2") is False

    def test_rename_player_across_maps(self):
        """Test a rename moves records on every map that has one."""
        manager = LogManager()
        manager.get_log("one").update_record("A", Decimal("1"))
        manager.get_log("two").update_record("A", Decimal("2"))
        manager.get_log("three").update_record("B", Decimal("3"))

        assert manager.rename_player("A", "A@login") == 2
        assert manager.get_log("one").get_rank("A@login") == 1
        assert manager.get_log("two").get_time("A@login") == Decimal("2")
        assert manager.get_log("three").get_rank("A@login") is None
