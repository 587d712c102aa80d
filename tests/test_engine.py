import pytest

from dollhouse.agent.actions import ActionKind
from dollhouse.agent.needs import Needs
from dollhouse.core.events import EventType
from dollhouse.engine.context import create_context
from dollhouse.engine.loop import MAX_ANIMATION_STEPS_PER_UPDATE, SimulationEngine


def test_timers_fire_on_their_own_intervals(engine):
    engine.update(4.0)
    assert engine.decision_ticks == 1
    assert engine.needs_ticks == 0

    engine.update(1.0)
    assert engine.needs_ticks == 1
    assert engine.ctx.clock.time_label() == "Mon 08:10"


def test_animation_catch_up_is_bounded(engine):
    engine.update(5.0)
    assert engine.ctx.frame == MAX_ANIMATION_STEPS_PER_UPDATE
    assert engine.ctx.agent.anim_tick == engine.ctx.frame


def test_paused_engine_does_nothing(engine):
    engine.paused = True
    engine.update(60.0)
    assert engine.needs_ticks == 0
    assert engine.ctx.frame == 0


def test_needs_stay_in_range_over_a_long_run():
    ctx = create_context(seed=3, speed_multiplier=3600)
    engine = SimulationEngine(ctx)
    samples = []

    def check(e):
        needs = e.ctx.agent.needs
        assert 0 <= needs.hunger <= 100
        assert 0 <= needs.energy <= 100
        if e.ctx.agent.is_walking:
            assert e.ctx.agent.current_action is not None
        samples.append(needs.average)

    engine.run_for(240, on_tick=check)

    assert engine.needs_ticks >= 47
    assert ctx.autopilot.decisions_made > 0
    assert ctx.clock.day >= 2
    assert samples


def test_committed_action_runs_after_arrival(engine):
    ctx = engine.ctx
    engine.tick_decision()
    committed = ctx.autopilot.last_decision
    for _ in range(3000):
        engine.tick_animation()
        if not ctx.agent.is_walking:
            break

    started = ctx.event_bus.get_recent_events(5, EventType.ACTION_STARTED.value)
    assert [e.data["action"] for e in started] == [committed.action.value]


def test_a_night_in_bed():
    ctx = create_context(start_minute=21 * 60 + 50, needs=Needs(hunger=80, energy=60))
    engine = SimulationEngine(ctx)

    engine.tick_needs()
    assert ctx.agent.current_action is ActionKind.SLEEP
    assert ctx.agent.is_walking

    for _ in range(3000):
        engine.tick_animation()
        if not ctx.agent.is_walking:
            break
    assert ctx.agent.is_sleeping
    assert ctx.agent.floor == 3
    assert ctx.agent.activity == "Sleeping"

    energy = ctx.agent.needs.energy
    engine.tick_needs()
    assert ctx.agent.needs.energy == pytest.approx(energy + 1.5)
    assert engine.decision_ticks == 0
    assert ctx.autopilot.run(ctx) is None

    ctx.clock.elapsed_minutes = 1440 + 6 * 60 + 55
    engine.tick_needs()
    assert not ctx.agent.is_sleeping
    assert ctx.agent.is_idle
    woke = ctx.event_bus.get_recent_events(1, EventType.WOKE_UP.value)
    assert woke[0].data["time"] == "Tue 07:05"


def test_time_info_and_status(engine):
    info = engine.get_time_info()
    assert info["time"] == "Mon 08:00"
    assert info["time_of_day"] == "morning"
    assert not info["is_night"]

    status = engine.get_status()
    assert status["message"] == "YOUR LITTLE COMPUTER PERSON HAS MOVED IN!"
    assert set(status) == {"mood", "activity", "hunger", "energy", "message"}


def test_shutdown_stops_headless_run(engine):
    engine.shutdown()
    engine.run_for(10)
    assert engine.ctx.frame == 0
