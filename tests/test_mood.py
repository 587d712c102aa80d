import pytest

from dollhouse.agent.mood import (
    CONTENT, HAPPY, NEUTRAL, STRESSED, TIRED, classify_emotion, classify_mood,
)
from dollhouse.agent.personality import Personality, assign_personality


@pytest.mark.parametrize("hunger,energy,mood", [
    (100, 100, "Very Happy"),
    (80, 82, "Very Happy"),
    (80, 80, "Happy"),
    (60, 62, "Happy"),
    (60, 60, "Content"),
    (40, 42, "Content"),
    (40, 40, "Tired"),
    (26, 26, "Tired"),
    (25, 25, "Unhappy"),
    (0, 0, "Unhappy"),
])
def test_mood_bands(hunger, energy, mood):
    assert classify_mood(hunger, energy) == mood


@pytest.mark.parametrize("avg,emotion", [
    (90, HAPPY),
    (75, CONTENT),
    (51, CONTENT),
    (50, NEUTRAL),
    (31, NEUTRAL),
    (30, TIRED),
    (16, TIRED),
    (15, STRESSED),
])
def test_emotion_bands(avg, emotion):
    assert classify_emotion(avg, avg) == emotion


def test_agent_mood_follows_needs(ctx):
    ctx.agent.needs.hunger = 10
    ctx.agent.needs.energy = 10
    ctx.agent.refresh_mood()
    assert ctx.agent.mood == "Unhappy"
    assert ctx.agent.emotional_state == STRESSED


def test_personality_archetypes():
    assert assign_personality("snacker").hunger_tolerance == 0.9
    with pytest.raises(KeyError):
        assign_personality("grump")
    with pytest.raises(ValueError):
        Personality(tv_preference=1.5)
