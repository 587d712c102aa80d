"""
Simulation Engine — The tick orchestrator.

Three independent timers share one context:

  1. NEEDS tick (slow): advance the clock, decay needs, wake the agent
     in the morning, ask for bed at night.
  2. DECISION tick (medium): if the agent is idle, the autopilot commits
     exactly one new activity.
  3. ANIMATION tick (fast): walk along the path (arrival starts the
     pending action), count the running action down, then move the dog,
     which therefore always sees the agent's post-movement position.

Real time is fed in through update(dt); each timer fires as many ticks as
have accumulated. Events queued during a tick are dispatched at its end.
Nothing blocks and nothing runs in parallel.
"""

from typing import Any, Callable, Dict, Optional

from dollhouse.agent import actions, interactions, movement
from dollhouse.agent.animal import update_companion
from dollhouse.agent.needs import decay_needs, should_wake, wants_bedtime
from dollhouse.agent.actions import ActionKind
from dollhouse.config import (
    NEEDS_TICK_SECONDS, DECISION_TICK_SECONDS, ANIMATION_TICK_SECONDS,
)
from dollhouse.core.logger import SimLogger
from .context import SimulationContext

MAX_ANIMATION_STEPS_PER_UPDATE: int = 30   # Drop frames rather than spiral after a stall


class SimulationEngine:
    """Top-level simulation coordinator."""

    def __init__(self, ctx: SimulationContext) -> None:
        self.ctx = ctx
        self.logger = SimLogger()

        self.needs_ticks: int = 0
        self.decision_ticks: int = 0
        self.paused: bool = False
        self.running: bool = True

        self._needs_acc: float = 0.0
        self._decision_acc: float = 0.0
        self._anim_acc: float = 0.0

        self.logger.log_event(
            "SYSTEM",
            f"{ctx.agent.name} has moved in ({ctx.clock.time_label()}, "
            f"mood {ctx.agent.mood})",
        )
        actions.publish_message(ctx, "YOUR LITTLE COMPUTER PERSON HAS MOVED IN!")

    # ================================================================
    # MAIN UPDATE
    # ================================================================

    def update(self, dt: float) -> None:
        """Feed dt real seconds into the three timers."""
        if self.paused:
            return

        self._needs_acc += dt
        while self._needs_acc >= NEEDS_TICK_SECONDS:
            self._needs_acc -= NEEDS_TICK_SECONDS
            self.tick_needs()

        self._decision_acc += dt
        while self._decision_acc >= DECISION_TICK_SECONDS:
            self._decision_acc -= DECISION_TICK_SECONDS
            self.tick_decision()

        self._anim_acc += dt
        steps = 0
        while self._anim_acc >= ANIMATION_TICK_SECONDS:
            self._anim_acc -= ANIMATION_TICK_SECONDS
            if steps < MAX_ANIMATION_STEPS_PER_UPDATE:
                self.tick_animation()
                steps += 1

    def tick_needs(self) -> None:
        ctx = self.ctx
        agent = ctx.agent
        self.needs_ticks += 1

        ctx.clock.advance()
        asleep = agent.is_sleeping and agent.current_action is ActionKind.SLEEP
        decay_needs(agent.needs, ctx.clock.night_multiplier, asleep)

        if should_wake(agent, ctx.clock):
            actions.wake_up(ctx)
        elif wants_bedtime(agent, ctx.clock):
            ctx.autopilot.request_bedtime(ctx)

        agent.refresh_mood()
        self._flush()

    def tick_decision(self) -> None:
        self.decision_ticks += 1
        self.ctx.autopilot.run(self.ctx)
        self._flush()

    def tick_animation(self) -> None:
        ctx = self.ctx
        movement.step(ctx)
        actions.tick_action(ctx)
        update_companion(ctx)

        ctx.frame += 1
        ctx.agent.anim_tick += 1
        self._flush()

    def _flush(self) -> None:
        self.ctx.event_bus.process(self.ctx.frame)

    # ================================================================
    # PLAYER INTERACTIONS
    # ================================================================

    def interact(self, kind: str) -> str:
        """Run a player interaction by name: feed, letter, music or greet."""
        message = interactions.INTERACTIONS[kind](self.ctx)
        self._flush()
        return message

    def feed(self) -> str:
        return self.interact("feed")

    def give_letter(self) -> str:
        return self.interact("letter")

    def play_music(self) -> str:
        return self.interact("music")

    def greet(self) -> str:
        return self.interact("greet")

    # ================================================================
    # HEADLESS
    # ================================================================

    def run_for(self, seconds: float,
                on_tick: Optional[Callable[["SimulationEngine"], None]] = None) -> None:
        """Drive the timers for a stretch of simulated real time."""
        elapsed = 0.0
        while elapsed < seconds and self.running:
            self.update(ANIMATION_TICK_SECONDS)
            elapsed += ANIMATION_TICK_SECONDS
            if on_tick is not None:
                on_tick(self)

    def shutdown(self) -> None:
        self.running = False
        self.logger.log_event(
            "SYSTEM",
            f"Shutting down after {self.needs_ticks} needs ticks "
            f"({self.ctx.clock.time_label()}, day {self.ctx.clock.day})",
        )

    # ================================================================
    # QUERY METHODS
    # ================================================================

    def get_time_info(self) -> Dict[str, Any]:
        clock = self.ctx.clock
        return {
            "frame": self.ctx.frame,
            "day": clock.day,
            "weekday": clock.weekday_name,
            "time": clock.time_label(),
            "time_of_day": clock.time_of_day.value,
            "is_night": clock.is_night,
        }

    def get_status(self) -> Dict[str, Any]:
        """What the HUD shows."""
        agent = self.ctx.agent
        return {
            "mood": agent.mood,
            "activity": agent.activity,
            "hunger": agent.needs.hunger,
            "energy": agent.needs.energy,
            "message": agent.message,
        }
