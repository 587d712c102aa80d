"""
Personality archetypes for the inhabitant.

Traits are fixed at creation and only bend the thresholds and priorities
the decision engine uses; they never change while the simulation runs.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Personality:
    """Fixed traits in [0, 1]."""
    hunger_tolerance: float = 0.5   # Higher = starts thinking about food sooner
    energy_need: float = 0.5        # Higher = wants rest sooner
    tv_preference: float = 0.5
    social_need: float = 0.5        # Drives time at the computer

    def __post_init__(self) -> None:
        for name in ("hunger_tolerance", "energy_need", "tv_preference", "social_need"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")


# ============================================================
# Archetypes
# ============================================================

PERSONALITY_TEMPLATES: Dict[str, Personality] = {
    "homebody": Personality(hunger_tolerance=0.5, energy_need=0.6,
                            tv_preference=0.7, social_need=0.3),
    "snacker": Personality(hunger_tolerance=0.9, energy_need=0.4,
                           tv_preference=0.5, social_need=0.4),
    "night_owl": Personality(hunger_tolerance=0.4, energy_need=0.2,
                             tv_preference=0.8, social_need=0.6),
    "bookworm": Personality(hunger_tolerance=0.3, energy_need=0.5,
                            tv_preference=0.1, social_need=0.2),
    "chatterbox": Personality(hunger_tolerance=0.5, energy_need=0.5,
                              tv_preference=0.3, social_need=0.9),
}

DEFAULT_PERSONALITY = "homebody"


def assign_personality(archetype: str = DEFAULT_PERSONALITY) -> Personality:
    """Return the named archetype. Unknown names raise KeyError."""
    return PERSONALITY_TEMPLATES[archetype]
