# Area: Maps Tests
"""Tests for MapManager and RacingMap."""

import pytest

from tron_racing._maps.map_manager import MapManager, RacingMap


class TestRacingMap:
    """Tests for RacingMap."""

    @pytest.mark.parametrize("resource,name", [
        ("Author/race/track1-1.0.aamap.xml", "track1"),
        ("Author/race/long-name-2.aamap.xml", "long-name"),
        ("Author/race/no-version.aamap.xml", "no-version"),
        ("plain", "plain"),
    ])
    def test_from_resource(self, resource, name):
        """Test map names are derived from resource file names."""
        racing_map = RacingMap.from_resource(resource)
        assert racing_map.name == name
        assert racing_map.resource == resource

    def test_frozen(self):
        """Test RacingMap is immutable."""
        racing_map = RacingMap("a")
        with pytest.raises(AttributeError):
            racing_map.name = "b"


class TestMapManager:
    """Tests for MapManager."""

    def test_insertion_order(self):
        """Test get_maps keeps insertion order."""
        manager = MapManager([RacingMap("z"), RacingMap("a"), RacingMap("m")])
        assert list(manager.get_maps()) == ["z", "a", "m"]

    def test_from_resources(self):
        """Test building a manager from resource paths."""
        manager = MapManager.from_resources([
            "x/race/b-1.aamap.xml",
            "x/race/a-1.aamap.xml",
        ])
        assert len(manager) == 2
        assert manager.get_map("a").resource == "x/race/a-1.aamap.xml"

    def test_same_name_replaces(self):
        """Test adding a map with a known name replaces it."""
        manager = MapManager([RacingMap("a", "old")])
        manager.add_map(RacingMap("a", "new"))
        assert len(manager) == 1
        assert manager.get_map("a").resource == "new"

    def test_remove_map(self):
        """Test removing a known and an unknown map."""
        manager = MapManager([RacingMap("a")])
        assert manager.remove_map("a") is True
        assert manager.remove_map("a") is False
        assert manager.get_map("a") is None

    def test_get_maps_is_a_copy(self):
        """Test callers cannot mutate the manager through get_maps."""
        manager = MapManager([RacingMap("a")])
        manager.get_maps().clear()
        assert len(manager) == 1
