"""
Mood and emotion labels derived from the needs.

`mood` is what the HUD prints. `emotional_state` is finer grained and only
feeds the decision engine's stress multiplier and the walk animation.
"""

HAPPY = "happy"
CONTENT = "content"
NEUTRAL = "neutral"
TIRED = "tired"
STRESSED = "stressed"


def classify_mood(hunger: float, energy: float) -> str:
    avg = (hunger + energy) / 2
    if avg > 80:
        return "Very Happy"
    if avg > 60:
        return "Happy"
    if avg > 40:
        return "Content"
    if avg > 25:
        return "Tired"
    return "Unhappy"


def classify_emotion(hunger: float, energy: float) -> str:
    avg = (hunger + energy) / 2
    if avg > 75:
        return HAPPY
    if avg > 50:
        return CONTENT
    if avg > 30:
        return NEUTRAL
    if avg > 15:
        return TIRED
    return STRESSED
