# Area: Maps
"""
Known maps and the map rotation.

This package contains:
- RacingMap / MapManager: the maps the server knows about
- Rotation: cyclic sequencing with index jumps
"""

from .map_manager import RacingMap, MapManager
from .rotation import Rotation

__all__ = [
    "RacingMap",
    "MapManager",
    "Rotation",
]
