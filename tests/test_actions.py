from dollhouse.agent.actions import (
    ACTION_TABLE, SLEEP_ACTION_TIMER, ActionKind, perform_action, tick_action, wake_up,
)
from dollhouse.agent.needs import Needs
from dollhouse.core.events import EventType
from dollhouse.engine.context import create_context


def test_perform_action_applies_deltas_and_label():
    ctx = create_context(needs=Needs(hunger=50, energy=50))
    perform_action(ctx, ActionKind.COOK)

    agent = ctx.agent
    assert agent.current_action is ActionKind.COOK
    assert agent.action_timer == 240
    assert agent.needs.hunger == 75
    assert agent.needs.energy == 45
    assert agent.activity == "Cooking"
    assert agent.message in ACTION_TABLE[ActionKind.COOK].messages
    assert agent.mood == "Content"


def test_action_completes_after_its_duration(ctx):
    completed = []
    ctx.event_bus.subscribe(EventType.ACTION_COMPLETED.value, completed.append)
    perform_action(ctx, ActionKind.EAT)

    for _ in range(179):
        tick_action(ctx)
    assert ctx.agent.current_action is ActionKind.EAT
    assert ctx.agent.action_timer == 1

    tick_action(ctx)
    ctx.event_bus.process(0)
    assert ctx.agent.current_action is None
    assert ctx.agent.activity == "Idle"
    assert ctx.agent.is_idle
    assert [e.data["action"] for e in completed] == ["eat"]


def test_sleep_timer_is_never_counted_down(ctx):
    perform_action(ctx, ActionKind.SLEEP)
    for _ in range(1000):
        tick_action(ctx)
    assert ctx.agent.is_sleeping
    assert ctx.agent.current_action is ActionKind.SLEEP
    assert ctx.agent.action_timer == SLEEP_ACTION_TIMER


def test_nap_is_timed_and_does_not_sleep(ctx):
    ctx.agent.needs.energy = 10
    perform_action(ctx, ActionKind.NAP)
    assert not ctx.agent.is_sleeping
    assert ctx.agent.needs.energy == 60
    for _ in range(300):
        tick_action(ctx)
    assert ctx.agent.current_action is None


def test_timer_waits_while_walking(ctx):
    perform_action(ctx, ActionKind.READ)
    ctx.agent.is_walking = True
    for _ in range(10):
        tick_action(ctx)
    assert ctx.agent.action_timer == 220


def test_wander_has_no_message_or_deltas(ctx):
    before = (ctx.agent.needs.hunger, ctx.agent.needs.energy)
    ctx.agent.message = ""
    perform_action(ctx, ActionKind.WANDER)
    assert (ctx.agent.needs.hunger, ctx.agent.needs.energy) == before
    assert ctx.agent.message == ""
    assert ctx.agent.activity == "Wandering"


def test_wake_up_clears_sleep(ctx):
    perform_action(ctx, ActionKind.SLEEP)
    wake_up(ctx)
    assert not ctx.agent.is_sleeping
    assert ctx.agent.current_action is None
    assert ctx.agent.action_timer == 0
    assert ctx.agent.message == "GOOD MORNING!"
    assert ctx.agent.is_idle
