"""
Agent — The little person who lives in the house.

AgentState is plain data. The components that drive it (needs, autopilot,
movement, actions) are module-level functions that take the simulation
context, so every mutation happens in one visible place per tick. The
renderer and the HUD only ever read these fields.
"""

from typing import Any, Optional

from .needs import Needs
from .mood import classify_mood, classify_emotion
from .personality import Personality


class AgentState:
    """Position, movement and activity of the inhabitant."""

    def __init__(self, name: str, x: float, y: float, floor: int = 1,
                 personality: Optional[Personality] = None,
                 needs: Optional[Needs] = None) -> None:
        self.name: str = name
        self.personality: Personality = personality or Personality()
        self.needs: Needs = needs or Needs()

        # --- Position ---
        self.x: float = float(x)
        self.y: float = float(y)
        self.floor: float = floor
        self.target_x: float = self.x
        self.target_y: float = self.y
        self.target_floor: float = floor
        self.direction: int = 1             # 1 = facing right, -1 = left

        # --- Activity ---
        self.is_walking: bool = False
        self.current_action: Optional[Any] = None   # ActionKind
        self.action_timer: int = 0
        self.is_sleeping: bool = False

        # --- Published for observers ---
        self.mood: str = "Content"
        self.emotional_state: str = "content"
        self.activity: str = "Idle"
        self.message: str = ""

        # --- Animation ---
        self.walk_frame: int = 0
        self.anim_tick: int = 0

        self.refresh_mood()

    @property
    def is_idle(self) -> bool:
        """Free to pick a new activity."""
        return (not self.is_walking
                and self.current_action is None
                and not self.is_sleeping)

    @property
    def room_floor(self) -> int:
        """Integer floor for path planning (stair floors round to the nearest room)."""
        return int(round(self.floor))

    def refresh_mood(self) -> None:
        """Re-derive mood and emotional state from the current needs."""
        self.mood = classify_mood(self.needs.hunger, self.needs.energy)
        self.emotional_state = classify_emotion(self.needs.hunger, self.needs.energy)

    def set_activity(self, activity: str) -> None:
        self.activity = activity

    def __repr__(self) -> str:
        action = getattr(self.current_action, "value", self.current_action)
        return (f"AgentState({self.name!r}, x={self.x:.1f}, y={self.y:.1f}, "
                f"floor={self.floor}, action={action}, "
                f"hunger={self.needs.hunger:.1f}, energy={self.needs.energy:.1f})")
