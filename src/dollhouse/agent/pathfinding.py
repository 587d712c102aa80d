"""
Pathfinder — Stair routing between the three floors.

The house has exactly two flights of stairs stacked in the middle, so a
route between floors is a fixed concatenation of stair waypoints rather
than a graph search. Walking within a floor is a straight line, so the
same-floor route is empty and the caller only appends the destination.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dollhouse.world.locations import Location, LOWER_STAIRS, UPPER_STAIRS

VALID_FLOORS = (1, 2, 3)


class Pathfinder:
    """Static stair-routing utilities."""

    @staticmethod
    def build_path(current_floor: int, target_floor: int,
                   lower: Sequence[Location] = LOWER_STAIRS,
                   upper: Sequence[Location] = UPPER_STAIRS) -> List[Location]:
        """Stair waypoints leading from current_floor to target_floor.

        Both floors must be room floors (1, 2 or 3). Returns [] when they are
        equal. The destination itself is never included.
        """
        for floor in (current_floor, target_floor):
            if floor not in VALID_FLOORS:
                raise ValueError(f"Not a room floor: {floor!r}")

        path: List[Location] = []
        if current_floor == target_floor:
            return path

        # Crossing floor 2 without stopping: the head of the lower flight is
        # the landing, so the upper flight's foot is skipped.
        through_landing = {current_floor, target_floor} == {1, 3}
        upper_flight = list(upper[1:] if through_landing else upper)

        if target_floor > current_floor:
            # Going up: each flight bottom to top
            if current_floor == 1:
                path.extend(lower)
            if target_floor == 3:
                path.extend(upper_flight)
        else:
            # Going down: each flight top to bottom
            if current_floor == 3:
                path.extend(reversed(upper_flight))
            if target_floor == 1:
                path.extend(reversed(lower))

        return path


@dataclass
class Path:
    """Waypoints being walked plus a cursor to the current leg."""
    waypoints: List[Location] = field(default_factory=list)
    index: int = 0

    @classmethod
    def to(cls, current_floor: int, destination: Location) -> "Path":
        """Stairs (if any) followed by the destination."""
        waypoints = Pathfinder.build_path(current_floor, int(round(destination.floor)))
        waypoints.append(destination)
        return cls(waypoints)

    @property
    def current(self) -> Optional[Location]:
        if 0 <= self.index < len(self.waypoints):
            return self.waypoints[self.index]
        return None

    def advance(self) -> Optional[Location]:
        """Move the cursor to the next leg and return it (None when exhausted)."""
        self.index += 1
        return self.current

    @property
    def is_exhausted(self) -> bool:
        return self.index >= len(self.waypoints)

    @property
    def destination(self) -> Optional[Location]:
        return self.waypoints[-1] if self.waypoints else None

    def clear(self) -> None:
        self.waypoints = []
        self.index = 0
