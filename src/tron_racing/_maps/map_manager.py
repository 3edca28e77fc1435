# Area: Maps
"""
tron_racing._maps.map_manager — Known racing maps
=================================================

Holds the maps the server knows about, in insertion order.
Only the name is used by the rotation; the resource path is what the
host needs to actually load the map.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable

logger = logging.getLogger("tron_racing.maps")


@dataclass(frozen=True)
class RacingMap:
    """
    Metadata for one racing map.

    Attributes:
        name: Map name used for ordering and leaderboard selection
        resource: Host resource path, e.g. "Author/race/track1-1.0.aamap.xml"
    """

    name: str
    resource: str = ""

    @classmethod
    def from_resource(cls, resource: str) -> "RacingMap":
        """Build a map whose name is the resource file stem (no version)."""
        stem = resource.rsplit("/", 1)[-1]
        stem = stem.split(".aamap", 1)[0]
        name, _, version = stem.rpartition("-")
        if not name or not version[:1].isdigit():
            name = stem
        return cls(name=name, resource=resource)


class MapManager:
    """Insertion-ordered mapping from map name to RacingMap."""

    def __init__(self, maps: Iterable[RacingMap] = ()):
        self._maps: Dict[str, RacingMap] = {}
        for racing_map in maps:
            self.add_map(racing_map)

    @classmethod
    def from_resources(cls, resources: Iterable[str]) -> "MapManager":
        return cls(RacingMap.from_resource(r) for r in resources)

    def add_map(self, racing_map: RacingMap) -> None:
        if racing_map.name in self._maps:
            logger.debug(f"Replacing map {racing_map.name}")
        self._maps[racing_map.name] = racing_map

    def remove_map(self, name: str) -> bool:
        return self._maps.pop(name, None) is not None

    def get_map(self, name: str):
        return self._maps.get(name)

    def get_maps(self) -> Dict[str, RacingMap]:
        """Copy of the name → map mapping, in insertion order."""
        return dict(self._maps)

    def __len__(self) -> int:
        return len(self._maps)
