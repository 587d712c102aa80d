"""
Simulation context — the one mutable object the core works on.

Every component's update function takes the context instead of reaching for
module globals. Observers (renderer, HUD, diagnostics) read from it and
never write to it.
"""

import random
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dollhouse.agent.actions import ActionKind
from dollhouse.agent.animal import CompanionState
from dollhouse.agent.autopilot import Autopilot
from dollhouse.agent.base import AgentState
from dollhouse.agent.needs import Needs
from dollhouse.agent.pathfinding import Path
from dollhouse.agent.personality import Personality
from dollhouse.config import (
    RANDOM_SEED, DEFAULT_SPEED_MULTIPLIER, START_MINUTE,
    BEDTIME_MINUTE, WAKETIME_MINUTE,
)
from dollhouse.core.events import EventBus
from dollhouse.engine.clock import SimClock
from dollhouse.world.locations import LOCATIONS, Location


@dataclass
class SimulationContext:
    clock: SimClock
    agent: AgentState
    companion: CompanionState
    rng: random.Random
    locations: Mapping[str, Location] = field(default_factory=lambda: LOCATIONS)
    event_bus: EventBus = field(default_factory=EventBus)
    autopilot: Autopilot = field(default_factory=Autopilot)
    path: Path = field(default_factory=Path)
    pending_action: Optional[ActionKind] = None
    frame: int = 0                      # Animation ticks since start


def create_context(seed: Optional[int] = RANDOM_SEED,
                   personality: Optional[Personality] = None,
                   needs: Optional[Needs] = None,
                   speed_multiplier: float = DEFAULT_SPEED_MULTIPLIER,
                   start_minute: float = START_MINUTE,
                   bedtime_minute: int = BEDTIME_MINUTE,
                   waketime_minute: int = WAKETIME_MINUTE,
                   rng: Optional[random.Random] = None,
                   agent_name: str = "Sam") -> SimulationContext:
    """A fresh household: the agent in the kitchen, the dog beside them."""
    kitchen = LOCATIONS["kitchen_center"]
    agent = AgentState(agent_name, kitchen.x, kitchen.y, int(kitchen.floor),
                       personality=personality, needs=needs)
    companion = CompanionState("Rex", kitchen.x - 40, kitchen.y)
    clock = SimClock(
        elapsed_minutes=start_minute,
        speed_multiplier=speed_multiplier,
        bedtime_minute_of_day=bedtime_minute,
        waketime_minute_of_day=waketime_minute,
    )
    return SimulationContext(
        clock=clock,
        agent=agent,
        companion=companion,
        rng=rng if rng is not None else random.Random(seed),
    )
