"""
Location registry — the named points of the three-level house.

Every place the inhabitant can walk to is a Location with a pixel position
on the 640x400 canvas and a floor number. Rooms sit on integer floors
(1 = kitchen, 2 = living room, 3 = bedroom). Stair steps carry fractional
floors so the renderer and the pathfinder can tell how far up a flight
someone is; they are never decision targets.

The registry is built once at import and never mutated by the simulation.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

ROOM = "room"
STAIR = "stair"
PET = "pet"


@dataclass(frozen=True)
class Location:
    name: str
    x: float
    y: float
    floor: float
    kind: str = ROOM


def _loc(name: str, x: float, y: float, floor: float, kind: str = ROOM) -> Location:
    return Location(name, float(x), float(y), floor, kind)


# ============================================================
# Rooms and furniture
# ============================================================

_ROOMS: List[Location] = [
    # Floor 3: bedroom (y=90-130)
    _loc("bed", 120, 110, 3),
    _loc("nightstand", 200, 110, 3),
    _loc("bedroom_center", 320, 110, 3),
    _loc("desk", 450, 110, 3),

    # Floor 2: living room (y=200-240)
    _loc("chair", 120, 220, 2),
    _loc("table", 250, 220, 2),
    _loc("living_center", 320, 220, 2),
    _loc("tv", 500, 220, 2),

    # Floor 1: kitchen (y=310-350)
    _loc("counter", 150, 330, 1),
    _loc("sink", 250, 330, 1),
    _loc("kitchen_center", 320, 330, 1),
    _loc("fridge", 500, 330, 1),

    # The dog's spots, also on floor 1
    _loc("water_bowl", 400, 340, 1, PET),
    _loc("dog_bed", 575, 340, 1, PET),
]


# ============================================================
# Stairwells, ordered bottom to top
# ============================================================

def _stairwell(prefix: str, x: float, top_y: float, bottom_y: float,
               bottom_floor: int) -> List[Location]:
    """Six evenly spaced waypoints from the foot of a flight to its head."""
    points: List[Location] = []
    steps = 5
    for i in range(steps + 1):
        if i == 0:
            name = f"{prefix}_bottom"
        elif i == steps:
            name = f"{prefix}_top"
        else:
            name = f"{prefix}_step{i}"
        y = bottom_y - (bottom_y - top_y) * i / steps
        floor = bottom_floor if i == 0 else (
            bottom_floor + 1 if i == steps else round(bottom_floor + i * 0.2, 1)
        )
        points.append(_loc(name, x, y, floor, STAIR))
    return points


LOWER_STAIRS: List[Location] = _stairwell("stairs_1", 320, 250, 280, 1)
UPPER_STAIRS: List[Location] = _stairwell("stairs_2", 320, 140, 170, 2)

LOCATIONS: Dict[str, Location] = {
    loc.name: loc for loc in _ROOMS + LOWER_STAIRS + UPPER_STAIRS
}

WATER_LOCATION = LOCATIONS["water_bowl"]
REST_LOCATION = LOCATIONS["dog_bed"]


def get_location(name: str,
                 registry: Optional[Mapping[str, Location]] = None) -> Optional[Location]:
    """Look up a Location by name. Returns None for unknown keys."""
    return (registry if registry is not None else LOCATIONS).get(name)


def room_names(registry: Optional[Mapping[str, Location]] = None) -> List[str]:
    """Names the inhabitant may wander to: rooms only, no stairs or pet spots."""
    reg = registry if registry is not None else LOCATIONS
    return [name for name, loc in reg.items() if loc.kind == ROOM]


def random_location(rng: random.Random,
                    registry: Optional[Mapping[str, Location]] = None) -> str:
    """Pick a random non-stair room name."""
    names: Sequence[str] = room_names(registry)
    return names[int(rng.random() * len(names)) % len(names)]
