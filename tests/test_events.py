from dollhouse.core.events import Event, EventBus, EventType


def test_events_wait_for_process():
    bus = EventBus()
    seen = []
    bus.subscribe(EventType.MESSAGE.value, seen.append)

    bus.emit(Event(EventType.MESSAGE.value, data={"text": "HELLO!"}))
    assert seen == []

    assert bus.process(tick=12) == 1
    assert seen[0].data["text"] == "HELLO!"
    assert seen[0].tick == 12
    assert bus.pending == []


def test_broken_listener_does_not_stop_others():
    bus = EventBus()
    seen = []

    def broken(event):
        raise RuntimeError("observer bug")

    bus.subscribe(EventType.ARRIVED.value, broken)
    bus.subscribe(EventType.ARRIVED.value, seen.append)
    bus.emit(Event(EventType.ARRIVED.value, data={"location": "bed"}))
    bus.process(0)

    assert len(seen) == 1
    assert len(bus.history) == 1


def test_history_is_capped_and_filterable():
    bus = EventBus()
    for i in range(250):
        kind = EventType.DECISION if i % 2 else EventType.MESSAGE
        bus.emit(Event(kind.value, data={"i": i}))
    bus.process(0)

    assert len(bus.history) == 200
    assert bus.history[-1].data["i"] == 249

    decisions = bus.get_recent_events(5, EventType.DECISION.value)
    assert [e.data["i"] for e in decisions] == [241, 243, 245, 247, 249]
    assert len(bus.get_recent_events(3)) == 3
