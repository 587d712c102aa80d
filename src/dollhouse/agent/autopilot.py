"""
Autopilot — Priority-weighted decision making for the inhabitant.

Whenever the agent is idle (not walking, no action running, not asleep)
the autopilot collects every candidate activity whose guard passes:

  - CRITICAL: starving or exhausted, scaled up further when stressed
  - PERSONALITY: hunger/energy below the agent's own thresholds
  - ROUTINE: meals, cooking, the chair, TV, books, the computer,
    each gated by needs, time of day and a random draw
  - FALLBACK: wander somewhere, so there is always a candidate

Candidates are never de-duplicated: two "eat" rules can both be in the
list and the higher one simply wins. Selection is a stable sort by
priority, so ties go to whichever rule was added first. All randomness
comes from the context's random source.

Committing a decision sets current_action and starts the walk; the action's
effects wait for arrival (see movement.py).
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from dollhouse.config import (
    CRITICAL_HUNGER, CRITICAL_ENERGY, NIGHT_SLEEP_ENERGY, CRITICAL_PRIORITY,
    BEDTIME_PRIORITY, STRESS_MULTIPLIER,
    HUNGER_THRESHOLD_BASE, HUNGER_THRESHOLD_SPREAD,
    ENERGY_THRESHOLD_BASE, ENERGY_THRESHOLD_SPREAD,
    WANDER_PRIORITY_SPREAD,
)
from dollhouse.core.events import Event, EventType
from dollhouse.core.logger import SimLogger
from dollhouse.world.locations import Location, random_location
from .actions import ActionKind
from .mood import STRESSED, classify_emotion
from .movement import walk_to
from .needs import wants_bedtime


@dataclass
class Decision:
    """A scored candidate activity and where to do it."""
    action: ActionKind
    priority: float
    location_key: str


def select_decision(candidates: List[Decision]) -> Decision:
    """Highest priority wins; ties keep insertion order."""
    return sorted(candidates, key=lambda d: -d.priority)[0]


class Autopilot:
    """Decision engine for the single inhabitant."""

    def __init__(self) -> None:
        self.last_decision: Optional[Decision] = None
        self.decisions_made: int = 0
        self.bedtime_requested: bool = False

    # ================================================================
    # ENTRY POINTS
    # ================================================================

    def run(self, ctx: Any) -> Optional[Decision]:
        """Decision tick: commit exactly one decision if the agent is idle."""
        if not ctx.agent.is_idle:
            return None

        if self.bedtime_requested:
            self.bedtime_requested = False
            if wants_bedtime(ctx.agent, ctx.clock):
                decision = self._bedtime_decision()
                if self.commit(ctx, decision):
                    return decision

        decision = self.decide(ctx)
        if decision is not None and self.commit(ctx, decision):
            return decision
        return None

    def decide(self, ctx: Any) -> Optional[Decision]:
        """Pick the best candidate without committing. None when busy."""
        if not ctx.agent.is_idle:
            return None
        candidates = self.build_candidates(ctx.agent, ctx.clock, ctx.rng, ctx.locations)
        return select_decision(candidates)

    def commit(self, ctx: Any, decision: Decision) -> bool:
        """Start walking toward the decision's location.

        Returns False (and changes nothing) if the location is unknown.
        """
        agent = ctx.agent
        if not walk_to(ctx, decision.location_key, decision.action):
            return False

        agent.current_action = decision.action
        agent.set_activity("Walking")
        self.last_decision = decision
        self.decisions_made += 1

        ctx.event_bus.emit(Event(
            EventType.DECISION.value,
            data={
                "action": decision.action.value,
                "priority": round(decision.priority, 2),
                "location": decision.location_key,
            },
        ))
        SimLogger().log_event(
            "DECISION",
            f"{agent.name} -> {decision.action.value} at {decision.location_key} "
            f"(priority {decision.priority:.1f})",
        )
        return True

    def request_bedtime(self, ctx: Any) -> bool:
        """Ask for bed. Walks there now if idle, otherwise on the next idle tick."""
        agent = ctx.agent
        if ctx.pending_action is ActionKind.SLEEP or agent.is_sleeping:
            return False
        if not agent.is_idle:
            self.bedtime_requested = True
            return False

        self.bedtime_requested = False
        committed = self.commit(ctx, self._bedtime_decision())
        if committed:
            ctx.event_bus.emit(Event(
                EventType.BEDTIME.value, data={"time": ctx.clock.time_label()},
            ))
        return committed

    # ================================================================
    # CANDIDATES
    # ================================================================

    def build_candidates(self, agent: Any, clock: Any, rng: Any,
                         locations: Optional[Mapping[str, Location]] = None) -> List[Decision]:
        """Every eligible candidate, in rule order."""
        needs = agent.needs
        emotion = classify_emotion(needs.hunger, needs.energy)
        stress = STRESS_MULTIPLIER if emotion == STRESSED else 1.0

        decisions: List[Decision] = []
        decisions.extend(self._check_critical(needs, clock, stress))
        decisions.extend(self._check_personality(needs, agent.personality, clock))
        decisions.extend(self._check_routine(needs, agent.personality, clock, rng))
        decisions.append(Decision(
            ActionKind.WANDER,
            rng.random() * WANDER_PRIORITY_SPREAD,
            random_location(rng, locations),
        ))
        return decisions

    def _check_critical(self, needs: Any, clock: Any, stress: float) -> List[Decision]:
        found: List[Decision] = []
        if needs.hunger < CRITICAL_HUNGER:
            found.append(Decision(ActionKind.EAT, CRITICAL_PRIORITY * stress, "fridge"))
        if needs.energy < CRITICAL_ENERGY or (clock.is_night and needs.energy < NIGHT_SLEEP_ENERGY):
            kind = ActionKind.SLEEP if clock.is_night else ActionKind.NAP
            found.append(Decision(kind, CRITICAL_PRIORITY * stress, "bed"))
        return found

    def _check_personality(self, needs: Any, personality: Any,
                           clock: Any) -> List[Decision]:
        found: List[Decision] = []
        hunger_threshold = (HUNGER_THRESHOLD_BASE
                            + personality.hunger_tolerance * HUNGER_THRESHOLD_SPREAD)
        energy_threshold = (ENERGY_THRESHOLD_BASE
                            + personality.energy_need * ENERGY_THRESHOLD_SPREAD)

        if needs.hunger < hunger_threshold:
            found.append(Decision(ActionKind.EAT, 80 + (70 - needs.hunger), "fridge"))
        if needs.energy < energy_threshold:
            if clock.is_night:
                found.append(Decision(ActionKind.SLEEP, 70 + (60 - needs.energy), "bed"))
            else:
                found.append(Decision(ActionKind.REST, 70 + (60 - needs.energy), "chair"))
        return found

    def _check_routine(self, needs: Any, personality: Any, clock: Any,
                       rng: Any) -> List[Decision]:
        found: List[Decision] = []

        # Sit down for a proper meal
        if needs.hunger < 60 and rng.random() < 0.5:
            found.append(Decision(ActionKind.EAT, 40 + rng.random() * 20, "table"))

        # Breakfast
        if clock.is_morning and needs.hunger < 80 and rng.random() < 0.6:
            found.append(Decision(ActionKind.COOK, 30 + rng.random() * 20, "counter"))

        if needs.energy < 50:
            found.append(Decision(ActionKind.REST, 35 + rng.random() * 15, "chair"))

        if clock.is_day and needs.energy > 20:
            base = 10 + personality.tv_preference * 30
            if clock.is_evening:
                base += 15
            found.append(Decision(ActionKind.WATCH_TV, base + rng.random() * 20, "tv"))

        if needs.energy > 25 and (clock.is_evening or rng.random() < 0.4):
            base = 25 if clock.is_evening else 15
            found.append(Decision(ActionKind.READ, base + rng.random() * 20, "nightstand"))

        if needs.energy > 30 and rng.random() < 0.3 + personality.social_need * 0.5:
            found.append(Decision(
                ActionKind.BROWSE, 10 + personality.social_need * 25 + rng.random() * 15, "desk",
            ))

        return found

    @staticmethod
    def _bedtime_decision() -> Decision:
        return Decision(ActionKind.SLEEP, BEDTIME_PRIORITY, "bed")
