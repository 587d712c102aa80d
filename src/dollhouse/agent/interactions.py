"""
Player interactions — things the person at the keyboard can do.

These are immediate: they adjust needs directly, cheer up the dog, and
refresh the mood label on the spot. They never go through the autopilot
and never touch current_action, so whatever the agent is doing carries on.
"""

from typing import Any

from dollhouse.core.events import Event, EventType
from dollhouse.core.logger import SimLogger
from .actions import publish_message


def _interact(ctx: Any, kind: str, message: str,
              hunger: float = 0.0, energy: float = 0.0) -> str:
    agent = ctx.agent
    agent.needs.adjust(hunger=hunger, energy=energy)
    agent.refresh_mood()
    ctx.companion.cheer_up()
    publish_message(ctx, message)

    ctx.event_bus.emit(Event(
        EventType.INTERACTION.value,
        data={"kind": kind, "mood": agent.mood},
    ))
    SimLogger().log_event(
        "PLAYER",
        f"{kind}: hunger={agent.needs.hunger:.1f}, energy={agent.needs.energy:.1f}, "
        f"mood={agent.mood}",
    )
    return message


def feed(ctx: Any) -> str:
    return _interact(ctx, "feed", "DELICIOUS! THANK YOU!", hunger=40)


def give_letter(ctx: Any) -> str:
    return _interact(ctx, "letter", "READING YOUR LETTER!", energy=15)


def play_music(ctx: Any) -> str:
    return _interact(ctx, "music", "ENJOYING THE MUSIC!", energy=12)


def greet(ctx: Any) -> str:
    return _interact(ctx, "greet", "WAVES AT YOU!", energy=8)


INTERACTIONS = {
    "feed": feed,
    "letter": give_letter,
    "music": play_music,
    "greet": greet,
}
