"""
Needs — Hunger and energy, the two drives behind every decision.

Both run from 0 (starving / exhausted) to 100 (full / rested) and are
clamped on every mutation. They decay once per needs tick; the rate halves
at night, and sleeping reverses the energy drain.
"""

from dataclasses import dataclass
from typing import Any

from dollhouse.config import (
    INITIAL_HUNGER, INITIAL_ENERGY, HUNGER_DECAY, ENERGY_DECAY,
    SLEEP_ENERGY_GAIN, SLEEP_HUNGER_DECAY, BEDTIME_ENERGY_THRESHOLD,
)

NEED_MIN: float = 0.0
NEED_MAX: float = 100.0


def clamp_need(value: float) -> float:
    return max(NEED_MIN, min(NEED_MAX, value))


@dataclass
class Needs:
    hunger: float = INITIAL_HUNGER
    energy: float = INITIAL_ENERGY

    def __post_init__(self) -> None:
        self.hunger = clamp_need(self.hunger)
        self.energy = clamp_need(self.energy)

    def adjust(self, hunger: float = 0.0, energy: float = 0.0) -> None:
        """Apply deltas, clamping both needs to [0, 100]."""
        self.hunger = clamp_need(self.hunger + hunger)
        self.energy = clamp_need(self.energy + energy)

    @property
    def average(self) -> float:
        return (self.hunger + self.energy) / 2.0


def decay_needs(needs: Needs, night_multiplier: float, asleep: bool) -> None:
    """One needs tick of drift.

    `asleep` means the agent is in bed on a sleep action: energy comes back
    and hunger drains slowly. Otherwise both drain, scaled by the night
    multiplier.
    """
    if asleep:
        needs.adjust(hunger=-SLEEP_HUNGER_DECAY, energy=SLEEP_ENERGY_GAIN)
    else:
        needs.adjust(hunger=-HUNGER_DECAY * night_multiplier,
                     energy=-ENERGY_DECAY * night_multiplier)


def wants_bedtime(agent: Any, clock: Any) -> bool:
    """Past bedtime, tired enough, and not already asleep."""
    return (clock.is_past_bedtime()
            and agent.needs.energy < BEDTIME_ENERGY_THRESHOLD
            and not agent.is_sleeping)


def should_wake(agent: Any, clock: Any) -> bool:
    return agent.is_sleeping and clock.is_wake_time()
