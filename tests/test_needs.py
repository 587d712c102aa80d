import pytest

from dollhouse.agent.actions import ActionKind
from dollhouse.agent.needs import Needs, decay_needs, should_wake, wants_bedtime
from dollhouse.engine.context import create_context
from dollhouse.engine.loop import SimulationEngine


def test_needs_clamp_on_creation_and_adjust():
    needs = Needs(hunger=150, energy=-5)
    assert needs.hunger == 100 and needs.energy == 0

    needs.adjust(hunger=-300, energy=40)
    assert needs.hunger == 0
    assert needs.energy == 40


def test_awake_decay_by_day_and_night():
    day = Needs(hunger=75, energy=85)
    decay_needs(day, night_multiplier=1.0, asleep=False)
    assert day.hunger == pytest.approx(73.5)
    assert day.energy == pytest.approx(84.2)

    night = Needs(hunger=75, energy=85)
    decay_needs(night, night_multiplier=0.5, asleep=False)
    assert night.hunger == pytest.approx(74.25)
    assert night.energy == pytest.approx(84.6)


def test_sleep_restores_energy():
    needs = Needs(hunger=75, energy=85)
    decay_needs(needs, night_multiplier=0.5, asleep=True)
    assert needs.hunger == pytest.approx(74.5)
    assert needs.energy == pytest.approx(86.5)


def test_decay_never_leaves_range():
    needs = Needs(hunger=0.5, energy=99.9)
    for _ in range(200):
        decay_needs(needs, 1.0, asleep=False)
    assert needs.hunger == 0 and needs.energy == 0
    for _ in range(200):
        decay_needs(needs, 1.0, asleep=True)
    assert needs.energy == 100 and needs.hunger == 0


def test_wants_bedtime_requires_late_and_tired_and_awake():
    ctx = create_context(start_minute=22 * 60 + 30, needs=Needs(hunger=80, energy=60))
    assert wants_bedtime(ctx.agent, ctx.clock)

    ctx.agent.needs.energy = 80
    assert not wants_bedtime(ctx.agent, ctx.clock)

    ctx.agent.needs.energy = 60
    ctx.agent.is_sleeping = True
    assert not wants_bedtime(ctx.agent, ctx.clock)


def test_sleeper_wakes_on_first_tick_after_waketime():
    ctx = create_context(start_minute=6 * 60 + 55)
    ctx.agent.is_sleeping = True
    ctx.agent.current_action = ActionKind.SLEEP
    assert not should_wake(ctx.agent, ctx.clock)

    engine = SimulationEngine(ctx)
    engine.tick_needs()

    assert ctx.clock.time_label() == "Mon 07:05"
    assert not ctx.agent.is_sleeping
    assert ctx.agent.current_action is None
    assert ctx.agent.activity == "Idle"
    assert ctx.agent.message == "GOOD MORNING!"
