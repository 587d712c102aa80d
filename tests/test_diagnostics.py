import json

from dollhouse.core.logger import SimLogger
from dollhouse.main import build_parser, main
from dollhouse.tools.diagnostics import HouseholdDiagnostics
from dollhouse.world.locations import (
    LOCATIONS, ROOM, get_location, random_location, room_names,
)

from conftest import ScriptedRandom


def test_dump_all_covers_agent_dog_and_events(engine):
    engine.tick_decision()
    report = HouseholdDiagnostics(engine).dump_all()
    assert "DOLLHOUSE DIAGNOSTIC: Mon 08:00" in report
    assert "Name: Sam" in report
    assert "Rex: following (alert)" in report
    assert "Last decision:" in report
    assert "message: text=YOUR LITTLE COMPUTER PERSON HAS MOVED IN!" in report
    assert "No issues detected." in report


def test_issues_flag_starvation(engine):
    engine.ctx.agent.needs.hunger = 0
    issues = HouseholdDiagnostics(engine).find_issues()
    assert issues == ["Sam is starving (hunger 0)"]


def test_export_json(engine, tmp_path):
    path = tmp_path / "snapshot.json"
    HouseholdDiagnostics(engine).export_json(str(path))
    data = json.loads(path.read_text())
    assert data["agent"]["name"] == "Sam"
    assert data["companion"]["behavior"] == "following"
    assert data["time"]["day"] == 1


def test_registry_lookups():
    assert get_location("attic") is None
    assert get_location("bed").floor == 3
    names = room_names()
    assert "kitchen_center" in names
    assert not any(name.startswith("stairs") for name in names)
    assert "dog_bed" not in names


def test_random_location_only_picks_rooms():
    for value in (0.0, 0.3, 0.7, 0.999):
        name = random_location(ScriptedRandom([value]))
        assert LOCATIONS[name].kind == ROOM


def test_cli_choices():
    args = build_parser().parse_args(["--seed", "5", "--personality", "night_owl"])
    assert args.seed == 5
    assert args.personality == "night_owl"
    assert args.headless is None
    assert not args.echo
    assert build_parser().parse_args(["--echo"]).echo


def test_headless_run_prints_report(tmp_path, capsys):
    main(["--headless", "1", "--log-dir", str(tmp_path), "--speed", "60"])
    out = capsys.readouterr().out
    assert "DOLLHOUSE DIAGNOSTIC" in out


def test_headless_run_closes_its_log_file(tmp_path, capsys):
    main(["--headless", "1", "--log-dir", str(tmp_path), "--speed", "60", "--echo"])
    capsys.readouterr()

    logger = SimLogger()
    assert logger.log_path is None
    assert not logger.echo
    assert logger.sim_logger.handlers == []
    logs = list(tmp_path.glob("sim_*.log"))
    assert len(logs) == 1
    assert "Headless run for 1s" in logs[0].read_text()

    logger.log_event("SYSTEM", "after the run")
    assert "after the run" not in logs[0].read_text()
    assert capsys.readouterr().out == ""
