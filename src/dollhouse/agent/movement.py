"""
Movement Controller — Continuous walking along a stair-aware path.

walk_to() turns a location name into a Path and arms the context's
pending action. step() runs once per animation tick: it eases the agent
toward the current waypoint, snaps on arrival, moves the cursor along,
and when the last leg is done it clears the pending action *before*
starting it, so one walk can never trigger its action twice.
"""

import math
from typing import Any, Optional

from dollhouse.config import (
    ARRIVAL_THRESHOLD, BASE_WALK_SPEED, EASE_OUT_DISTANCE,
    DIRECTION_DEAD_ZONE, URGENT_HUNGER, URGENCY_SPEED_BONUS,
)
from dollhouse.core.events import Event, EventType
from dollhouse.core.logger import SimLogger
from dollhouse.world.locations import Location, get_location
from .actions import ActionKind, perform_action
from .pathfinding import Path


def walk_speed(hunger: float, energy: float, distance: float) -> float:
    """Pixels per tick: quicker when rested or hungry, easing out near the target."""
    speed = BASE_WALK_SPEED * (0.7 + 0.6 * energy / 100.0)
    if hunger < URGENT_HUNGER:
        speed *= URGENCY_SPEED_BONUS
    if distance < EASE_OUT_DISTANCE:
        speed *= distance / EASE_OUT_DISTANCE
    return speed


def walk_to(ctx: Any, location_key: str,
            action: Optional[ActionKind] = None) -> bool:
    """Start walking to a named location. Unknown names are ignored."""
    destination = get_location(location_key, ctx.locations)
    if destination is None:
        SimLogger().warn("MOVE", f"Unknown location '{location_key}', walk ignored")
        return False

    agent = ctx.agent
    ctx.path = Path.to(agent.room_floor, destination)
    _set_target(agent, ctx.path.current)
    agent.is_walking = True
    ctx.pending_action = action

    SimLogger().log_event(
        "MOVE",
        f"{agent.name} heading to {location_key} "
        f"(floor {agent.room_floor} -> {destination.floor}, "
        f"{len(ctx.path.waypoints)} legs)",
    )
    return True


def step(ctx: Any) -> bool:
    """Advance one animation tick. Returns True if a waypoint was reached."""
    agent = ctx.agent
    if not agent.is_walking:
        return False

    dx = agent.target_x - agent.x
    dy = agent.target_y - agent.y
    distance = math.sqrt(dx * dx + dy * dy)

    if distance < ARRIVAL_THRESHOLD:
        agent.x = agent.target_x
        agent.y = agent.target_y
        agent.floor = agent.target_floor

        upcoming = ctx.path.advance()
        if upcoming is not None:
            _set_target(agent, upcoming)
        else:
            _finish_walk(ctx)
        return True

    speed = walk_speed(agent.needs.hunger, agent.needs.energy, distance)
    agent.x += dx / distance * speed
    agent.y += dy / distance * speed

    # Keep facing while climbing (almost no horizontal motion on stairs)
    if abs(dx) > DIRECTION_DEAD_ZONE:
        agent.direction = 1 if dx > 0 else -1
    agent.walk_frame += 1
    return False


def _set_target(agent: Any, waypoint: Location) -> None:
    agent.target_x = waypoint.x
    agent.target_y = waypoint.y
    agent.target_floor = waypoint.floor


def _finish_walk(ctx: Any) -> None:
    agent = ctx.agent
    destination = ctx.path.destination
    agent.is_walking = False
    ctx.path.clear()

    action = ctx.pending_action
    ctx.pending_action = None

    ctx.event_bus.emit(Event(
        EventType.ARRIVED.value,
        data={"location": destination.name if destination else None},
    ))
    if action is not None:
        perform_action(ctx, action)
