"""
Action Executor — What happens once the inhabitant reaches a spot.

Each ActionKind maps to an ActionSpec: how many animation ticks it keeps
the agent busy, the need deltas applied once when it starts, the HUD label
and a pool of flavour messages. Sleep is the exception: it has no timer
of its own, restores energy a little every needs tick, and only ends when
the clock says it is time to get up.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from dollhouse.core.events import Event, EventType
from dollhouse.core.logger import SimLogger

SLEEP_ACTION_TIMER: int = 10 ** 9   # Never counted down
IDLE = "Idle"


class ActionKind(Enum):
    EAT = "eat"
    COOK = "cook"
    SLEEP = "sleep"
    NAP = "nap"
    REST = "rest"
    WATCH_TV = "watch_tv"
    READ = "read"
    BROWSE = "browse"
    WANDER = "wander"


@dataclass(frozen=True)
class ActionSpec:
    duration: int                       # Animation ticks
    label: str
    hunger: float = 0.0                 # Applied once on start
    energy: float = 0.0
    messages: List[str] = field(default_factory=list)


ACTION_TABLE: Dict[ActionKind, ActionSpec] = {
    ActionKind.EAT: ActionSpec(
        180, "Eating", hunger=35,
        messages=["ENJOYING A MEAL!", "MMM, LEFTOVERS!", "A SANDWICH HITS THE SPOT"],
    ),
    ActionKind.COOK: ActionSpec(
        240, "Cooking", hunger=25, energy=-5,
        messages=["COOKING SOMETHING TASTY", "BREAKFAST IS SIZZLING!"],
    ),
    ActionKind.SLEEP: ActionSpec(
        SLEEP_ACTION_TIMER, "Sleeping",
        messages=["GOOD NIGHT!", "ZZZ..."],
    ),
    ActionKind.NAP: ActionSpec(
        300, "Napping", energy=50,
        messages=["TAKING A NAP...", "JUST RESTING MY EYES"],
    ),
    ActionKind.REST: ActionSpec(
        200, "Resting", energy=20,
        messages=["RELAXING IN CHAIR", "PUTTING MY FEET UP"],
    ),
    ActionKind.WATCH_TV: ActionSpec(
        250, "Watching TV", energy=5,
        messages=["WATCHING TV", "MY FAVOURITE SHOW IS ON!"],
    ),
    ActionKind.READ: ActionSpec(
        220, "Reading", energy=5,
        messages=["READING A GOOD BOOK", "JUST ONE MORE CHAPTER..."],
    ),
    ActionKind.BROWSE: ActionSpec(
        200, "Browsing", energy=-3,
        messages=["CHECKING MY MESSAGES", "TYPING AWAY..."],
    ),
    ActionKind.WANDER: ActionSpec(120, "Wandering"),
}


# ================================================================
# MESSAGES
# ================================================================

def publish_message(ctx: Any, text: str) -> None:
    """Put a line on the message box and tell observers."""
    ctx.agent.message = text
    ctx.event_bus.emit(Event(EventType.MESSAGE.value, data={"text": text}))


# ================================================================
# LIFECYCLE
# ================================================================

def perform_action(ctx: Any, action: ActionKind) -> None:
    """Start an action on arrival: apply its deltas, label and message."""
    agent = ctx.agent
    spec = ACTION_TABLE[action]

    agent.current_action = action
    agent.action_timer = spec.duration
    if spec.hunger or spec.energy:
        agent.needs.adjust(hunger=spec.hunger, energy=spec.energy)
    if action is ActionKind.SLEEP:
        agent.is_sleeping = True

    agent.set_activity(spec.label)
    if spec.messages:
        publish_message(ctx, ctx.rng.choice(spec.messages))
    agent.refresh_mood()

    ctx.event_bus.emit(Event(
        EventType.ACTION_STARTED.value,
        data={"action": action.value, "activity": spec.label},
    ))
    SimLogger().log_event(
        "ACTION",
        f"{agent.name} started {action.value} "
        f"(hunger={agent.needs.hunger:.1f}, energy={agent.needs.energy:.1f})",
    )


def tick_action(ctx: Any) -> None:
    """Count the running action down by one animation tick."""
    agent = ctx.agent
    if agent.current_action is None or agent.is_walking:
        return
    if agent.current_action is ActionKind.SLEEP:
        return  # Only the wake-up check ends sleep

    if agent.action_timer > 0:
        agent.action_timer -= 1
    if agent.action_timer == 0:
        complete_action(ctx)


def complete_action(ctx: Any) -> None:
    agent = ctx.agent
    finished = agent.current_action
    agent.current_action = None
    agent.action_timer = 0
    agent.set_activity(IDLE)
    agent.refresh_mood()

    if finished is not None:
        ctx.event_bus.emit(Event(
            EventType.ACTION_COMPLETED.value, data={"action": finished.value},
        ))


def wake_up(ctx: Any) -> None:
    """End the night: clear sleep and whatever action was holding the agent."""
    agent = ctx.agent
    agent.is_sleeping = False
    agent.action_timer = 0
    agent.current_action = None
    agent.set_activity(IDLE)
    agent.refresh_mood()
    publish_message(ctx, "GOOD MORNING!")

    ctx.event_bus.emit(Event(
        EventType.WOKE_UP.value, data={"time": ctx.clock.time_label()},
    ))
    SimLogger().log_event("CLOCK", f"{agent.name} woke up at {ctx.clock.time_label()}")
