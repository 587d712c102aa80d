"""
Companion — The household dog.

The dog is not an Agent: it has no needs and never uses the autopilot or
the stairs. Each animation tick it looks at where the inhabitant is (after
the inhabitant has moved) and picks one of four behaviours:

  following  keep up with the agent, faster the further behind it is
  resting    curl up on the dog bed until someone comes close
  playing    run circles around the agent for a little while
  drinking   lap at the water bowl

Its emotional label is derived from the behaviour and from recent
attention by the player; nothing decides it separately.
"""

import math
from enum import Enum
from typing import Any, Callable, Dict, Optional

from dollhouse.config import (
    DOG_WATER_RADIUS, DOG_REST_RADIUS, DOG_DRINK_CHANCE, DOG_DRINK_EXIT_CHANCE,
    DOG_WAKE_RADIUS, DOG_WAKE_WALKING_RADIUS, DOG_REST_COOLDOWN, DOG_DRINK_COOLDOWN,
    DOG_CATCHUP_DISTANCE, DOG_TROT_DISTANCE, DOG_WALK_DISTANCE, DOG_IDLE_DISTANCE,
    DOG_CATCHUP_SPEED, DOG_TROT_SPEED, DOG_WALK_SPEED, DOG_IDLE_CHANCE,
    DOG_PLAY_TICKS, DOG_PLAY_RADIUS, DOG_HAPPY_TICKS,
    HOUSE_MIN_X, HOUSE_MAX_X, HOUSE_MIN_Y, HOUSE_MAX_Y,
)
from dollhouse.core.events import Event, EventType
from dollhouse.world.locations import Location, WATER_LOCATION, REST_LOCATION


class CompanionBehavior(Enum):
    FOLLOWING = "following"
    RESTING = "resting"
    PLAYING = "playing"
    DRINKING = "drinking"


def _dist(a: Any, b: Any) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class CompanionState:
    """The dog's position, behaviour and animation counters."""

    def __init__(self, name: str, x: float, y: float,
                 water: Location = WATER_LOCATION,
                 rest: Location = REST_LOCATION) -> None:
        self.name: str = name
        self.x: float = float(x)
        self.y: float = float(y)
        self.direction: int = 1
        self.behavior: CompanionBehavior = CompanionBehavior.FOLLOWING

        self.water: Location = water
        self.rest: Location = rest

        self.tick_count: int = 0
        self.heading_to_rest: bool = False
        self._play_ticks: int = 0
        self._play_angle: float = 0.0
        self._happy_ticks: int = 0
        self._rest_cooldown: int = 0
        self._drink_cooldown: int = 0

    # ================================================================
    # DERIVED STATE
    # ================================================================

    @property
    def emotional(self) -> str:
        if self.behavior is CompanionBehavior.PLAYING:
            return "playful"
        if self.behavior is CompanionBehavior.RESTING:
            return "sleepy"
        if self._happy_ticks > 0:
            return "happy"
        return "alert"

    @property
    def tail_wag(self) -> float:
        """Vertical tail offset in pixels, from the tick counter."""
        rate = 0.35 if self.emotional in ("happy", "playful") else 0.17
        if self.behavior is CompanionBehavior.RESTING:
            return 0.0
        return math.sin(self.tick_count * rate) * 2

    def cheer_up(self) -> None:
        """Player attention: the dog stays happy for a while."""
        self._happy_ticks = DOG_HAPPY_TICKS

    # ================================================================
    # TICK
    # ================================================================

    def tick(self, agent: Any, rng: Any) -> Optional[CompanionBehavior]:
        """Advance one animation tick. Returns the new behaviour if it changed."""
        self.tick_count += 1
        if self._happy_ticks > 0:
            self._happy_ticks -= 1
        if self._rest_cooldown > 0:
            self._rest_cooldown -= 1
        if self._drink_cooldown > 0:
            self._drink_cooldown -= 1

        before = self.behavior
        dispatch: Dict[CompanionBehavior, Callable] = {
            CompanionBehavior.FOLLOWING: self._following_tick,
            CompanionBehavior.RESTING: self._resting_tick,
            CompanionBehavior.PLAYING: self._playing_tick,
            CompanionBehavior.DRINKING: self._drinking_tick,
        }
        dispatch[self.behavior](agent, rng)
        self._clamp_to_house()
        return self.behavior if self.behavior is not before else None

    # ================================================================
    # BEHAVIOURS
    # ================================================================

    def _following_tick(self, agent: Any, rng: Any) -> None:
        if (self._drink_cooldown == 0
                and _dist(self, self.water) < DOG_WATER_RADIUS
                and rng.random() < DOG_DRINK_CHANCE):
            self.behavior = CompanionBehavior.DRINKING
            self.heading_to_rest = False
            return

        if self._rest_cooldown == 0 and _dist(self, self.rest) < DOG_REST_RADIUS:
            self.behavior = CompanionBehavior.RESTING
            self.heading_to_rest = False
            return

        if self.heading_to_rest:
            self._move_toward(self.rest.x, self.rest.y, DOG_TROT_SPEED)
            return

        d = _dist(self, agent)
        if d > DOG_CATCHUP_DISTANCE:
            self._move_toward(agent.x, agent.y, DOG_CATCHUP_SPEED)
        elif d > DOG_TROT_DISTANCE:
            self._move_toward(agent.x, agent.y, DOG_TROT_SPEED)
        elif d > DOG_WALK_DISTANCE:
            self._move_toward(agent.x, agent.y, DOG_WALK_SPEED)
            self._jitter(rng, 0.5)
        elif d <= DOG_IDLE_DISTANCE and rng.random() < DOG_IDLE_CHANCE:
            roll = rng.random()
            if roll < 0.4:
                self.behavior = CompanionBehavior.PLAYING
                self._play_ticks = DOG_PLAY_TICKS
                self._play_angle = math.atan2(self.y - agent.y, self.x - agent.x)
            elif roll < 0.6 and self._rest_cooldown == 0:
                self.heading_to_rest = True
            else:
                self._jitter(rng, 1.0)

    def _resting_tick(self, agent: Any, rng: Any) -> None:
        d = _dist(self, agent)
        if d < DOG_WAKE_RADIUS or (agent.is_walking and d < DOG_WAKE_WALKING_RADIUS):
            self.behavior = CompanionBehavior.FOLLOWING
            self._rest_cooldown = DOG_REST_COOLDOWN

    def _playing_tick(self, agent: Any, rng: Any) -> None:
        self._play_angle += 0.12
        new_x = agent.x + math.cos(self._play_angle) * DOG_PLAY_RADIUS
        new_y = agent.y + math.sin(self._play_angle) * DOG_PLAY_RADIUS * 0.4
        if abs(new_x - self.x) > 0.5:
            self.direction = 1 if new_x > self.x else -1
        self.x, self.y = new_x, new_y

        self._play_ticks -= 1
        if self._play_ticks <= 0:
            self.behavior = CompanionBehavior.FOLLOWING

    def _drinking_tick(self, agent: Any, rng: Any) -> None:
        if rng.random() < DOG_DRINK_EXIT_CHANCE:
            self.behavior = CompanionBehavior.FOLLOWING
            self._drink_cooldown = DOG_DRINK_COOLDOWN
            return
        if _dist(self, self.water) > 4.0:
            self._move_toward(self.water.x, self.water.y, DOG_WALK_SPEED)

    # ================================================================
    # MOVEMENT HELPERS
    # ================================================================

    def _move_toward(self, tx: float, ty: float, speed: float) -> None:
        dx, dy = tx - self.x, ty - self.y
        d = math.sqrt(dx * dx + dy * dy)
        if d == 0:
            return
        step = min(speed, d)
        self.x += dx / d * step
        self.y += dy / d * step
        if abs(dx) > 0.5:
            self.direction = 1 if dx > 0 else -1

    def _jitter(self, rng: Any, amount: float) -> None:
        self.x += (rng.random() - 0.5) * 2 * amount
        self.y += (rng.random() - 0.5) * 2 * amount

    def _clamp_to_house(self) -> None:
        self.x = _clamp(self.x, HOUSE_MIN_X, HOUSE_MAX_X)
        self.y = _clamp(self.y, HOUSE_MIN_Y, HOUSE_MAX_Y)


def update_companion(ctx: Any) -> None:
    """Animation-tick entry point. Reads the agent, never writes it."""
    changed = ctx.companion.tick(ctx.agent, ctx.rng)
    if changed is not None:
        ctx.event_bus.emit(Event(
            EventType.COMPANION_BEHAVIOR.value,
            data={"behavior": changed.value, "emotional": ctx.companion.emotional},
        ))
