"""
Hit regions for rendered controls.

Every render pass starts with begin_pass(), which drops all zones from the
previous pass. Pointer hit-tests only ever see the latest pass.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Zone:
    """Inclusive cell rectangle for one control."""
    zone_id: str
    x0: int
    y0: int
    x1: int
    y1: int
    generation: int

    def contains(self, x, y):
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1


class ZoneMap:
    def __init__(self):
        self.generation = 0
        self._zones: Dict[str, Zone] = {}

    def begin_pass(self):
        """Invalidate every zone and start a new render generation."""
        self.generation += 1
        self._zones = {}
        return self.generation

    def mark(self, zone_id, x0, y0, x1, y1):
        zone = Zone(zone_id, x0, y0, x1, y1, self.generation)
        self._zones[zone_id] = zone
        return zone

    def get(self, zone_id) -> Optional[Zone]:
        zone = self._zones.get(zone_id)
        if zone is None or zone.generation != self.generation:
            return None
        return zone

    def hit(self, zone_id, x, y):
        zone = self.get(zone_id)
        return zone is not None and zone.contains(x, y)

    def __len__(self):
        return len(self._zones)


def item_zone_id(page_index, item_index):
    return f"item:{page_index}:{item_index}"


BTN_PREV = "btn-prev"
BTN_NEXT = "btn-next"
BTN_OK = "btn-ok"
