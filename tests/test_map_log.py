# Area: Leaderboard Tests
"""Tests for MapLog."""

import pytest
from decimal import Decimal
from unittest.mock import patch

from tron_racing._leaderboard.map_log import MapLog, PlayerRecord, to_decimal


def assert_ranks_consistent(log: MapLog):
    """Records are ascending by time and rank equals 1-based position."""
    records = log.records
    for position, record in enumerate(records, start=1):
        assert record.rank == position
        assert log.get_rank(record.player) == position
    times = [r.time for r in records]
    assert times == sorted(times)
    assert log.count() == len(records)


class TestMapLogExampleTrace:
    """Walks the two-player example on track1."""

    def test_trace(self):
        """Test inserts, an improvement and a slower run."""
        log = MapLog("track1")

        assert log.update_record("A", Decimal("10.5")) == Decimal("0")
        assert log.get_rank("A") == 1

        assert log.update_record("B", Decimal("9.2")) == Decimal("0")
        assert log.get_rank("B") == 1
        assert log.get_rank("A") == 2

        assert log.update_record("A", Decimal("8.0")) == Decimal("-2.5")
        assert log.get_rank("A") == 1
        assert log.get_rank("B") == 2

        assert log.update_record("B", Decimal("9.5")) == Decimal("0.3")
        assert log.get_rank("A") == 1
        assert log.get_rank("B") == 2
        assert log.get_time("B") == Decimal("9.2")
        assert_ranks_consistent(log)


class TestMapLogUpdateRecord:
    """Tests for update_record."""

    def test_first_entry_returns_zero_delta(self):
        """Test a first time is inserted with a zero delta."""
        log = MapLog("m")
        delta = log.update_record("A", Decimal("42.1"))
        assert delta == 0
        assert log.count() == 1
        assert log.get_time("A") == Decimal("42.1")

    def test_improvement_returns_negative_delta(self):
        """Test a faster time is stored and reported as negative."""
        log = MapLog("m")
        log.update_record("A", Decimal("20"))
        delta = log.update_record("A", Decimal("18.75"))
        assert delta == Decimal("-1.25")
        assert log.get_time("A") == Decimal("18.75")

    def test_equal_time_keeps_record(self):
        """Test an equal time returns zero and changes nothing."""
        log = MapLog("m")
        log.update_record("A", Decimal("5"))
        log.update_record("B", Decimal("5"))
        before = [(r.player, r.rank) for r in log.records]

        assert log.update_record("B", Decimal("5")) == 0
        assert [(r.player, r.rank) for r in log.records] == before

    def test_slower_time_does_not_resort(self):
        """Test a slower attempt never overwrites a personal best."""
        log = MapLog("m")
        log.update_record("A", Decimal("10"))
        with patch.object(log, "sort") as mock_sort:
            delta = log.update_record("A", Decimal("11"))
        assert delta == Decimal("1")
        mock_sort.assert_not_called()
        assert log.get_time("A") == Decimal("10")

    def test_accepts_float_and_str_times(self):
        """Test non-Decimal times are converted exactly."""
        log = MapLog("m")
        log.update_record("A", 12.3)
        log.update_record("B", "12.29")
        assert log.get_time("A") == Decimal("12.3")
        assert log.get_rank("B") == 1

    def test_many_updates_keep_invariant(self):
        """Test ordering and ranks stay consistent over many updates."""
        log = MapLog("m")
        times = {"A": "30", "B": "25.5", "C": "40", "D": "25.4", "E": "33"}
        for player, time in times.items():
            log.update_record(player, Decimal(time))
            assert_ranks_consistent(log)
        log.update_record("C", Decimal("1"))
        assert_ranks_consistent(log)
        log.update_record("D", Decimal("99"))
        assert_ranks_consistent(log)
        assert [r.player for r in log.records] == ["C", "D", "B", "A", "E"]

    def test_equal_times_keep_arrival_order(self):
        """Test the earlier of two equal times ranks higher."""
        log = MapLog("m")
        log.update_record("first", Decimal("7"))
        log.update_record("second", Decimal("7"))
        assert log.get_rank("first") == 1
        assert log.get_rank("second") == 2


class TestMapLogLookups:
    """Tests for rank, time and rank-position lookups."""

    def test_unknown_player_rank_is_none(self):
        """Test get_rank on an unknown player returns None."""
        log = MapLog("m")
        log.update_record("A", Decimal("1"))
        assert log.get_rank("nobody") is None

    def test_unknown_player_time_is_none(self):
        """Test get_time on an unknown player returns None."""
        assert MapLog("m").get_time("nobody") is None

    def test_rank_one_is_fastest(self):
        """Test get_player_from_rank(1) returns the fastest record."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        log.update_record("B", Decimal("2"))
        log.update_record("C", Decimal("4"))
        record = log.get_player_from_rank(1)
        assert isinstance(record, PlayerRecord)
        assert record.player == "B"
        assert record.time == Decimal("2")

    @pytest.mark.parametrize("rank", [0, -1, 3, 100])
    def test_out_of_range_rank_is_none(self, rank):
        """Test ranks outside 1..count() return None."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        log.update_record("B", Decimal("2"))
        assert log.get_player_from_rank(rank) is None

    def test_empty_log(self):
        """Test an empty log has no ranks."""
        log = MapLog("m")
        assert log.count() == 0
        assert len(log) == 0
        assert log.get_player_from_rank(1) is None


class TestMapLogRename:
    """Tests for rename_record."""

    def test_rename_unknown_fails(self):
        """Test renaming an unknown id fails and leaves the log unchanged."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        assert log.rename_record("ghost", "B") is False
        assert log.count() == 1
        assert log.get_rank("A") == 1
        assert log.get_rank("B") is None

    def test_rename_preserves_rank_and_time(self):
        """Test a renamed record keeps its rank and time."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        log.update_record("B", Decimal("2"))

        assert log.rename_record("A", "A@forums") is True

        assert log.get_rank("A") is None
        assert log.get_rank("A@forums") == 2
        assert log.get_time("A@forums") == Decimal("3")
        assert log.get_player_from_rank(2).player == "A@forums"
        assert_ranks_consistent(log)

    def test_renamed_record_can_improve(self):
        """Test updates after a rename go to the moved record."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        log.rename_record("A", "Z")
        assert log.update_record("Z", Decimal("1")) == Decimal("-2")
        assert log.count() == 1

    def test_rename_onto_existing_record_fails(self):
        """Test renaming onto an id that already has a record fails."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        log.update_record("B", Decimal("2"))
        assert log.rename_record("A", "B") is False
        assert log.get_time("A") == Decimal("3")
        assert log.get_time("B") == Decimal("2")

    def test_rename_to_same_id(self):
        """Test renaming to the same id succeeds without change."""
        log = MapLog("m")
        log.update_record("A", Decimal("3"))
        assert log.rename_record("A", "A") is True
        assert log.get_rank("A") == 1


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_uses_short_repr(self):
        """Test floats do not carry binary rounding noise."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passthrough(self):
        """Test Decimals are returned unchanged."""
        value = Decimal("1.50")
        assert to_decimal(value) is value
