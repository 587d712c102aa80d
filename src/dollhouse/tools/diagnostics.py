"""
Dollhouse — Household Diagnostic Report
========================================

Reads a running (or headless) engine and produces a plain-text view of:

  1. The clock and the inhabitant's needs, mood and current activity
  2. The walk in progress, if any
  3. The dog's behaviour and emotional label
  4. The most recent events on the bus

Usage:
    from dollhouse.tools.diagnostics import HouseholdDiagnostics
    diag = HouseholdDiagnostics(engine)
    print(diag.dump_all())
    diag.export_json("household.json")
"""

import json
from typing import Any, Dict, List, Optional


class HouseholdDiagnostics:
    """Diagnostic viewer for the inhabitant and the dog."""

    def __init__(self, engine: Any) -> None:
        self.engine = engine

    @staticmethod
    def _bar(value: float) -> str:
        filled = int(value / 5)
        return "#" * filled + "." * (20 - filled)

    def dump_agent(self) -> str:
        ctx = self.engine.ctx
        agent = ctx.agent
        action = agent.current_action.value if agent.current_action else "-"

        lines = []
        lines.append("--- INHABITANT ---")
        lines.append(f"  Name: {agent.name}  |  Mood: {agent.mood}  |  Feeling: {agent.emotional_state}")
        lines.append(f"  Position: ({agent.x:.1f}, {agent.y:.1f})  floor {agent.floor}")
        lines.append(f"  Activity: {agent.activity}  |  Action: {action}  |  Timer: {agent.action_timer}")
        lines.append(f"  Sleeping: {agent.is_sleeping}  |  Walking: {agent.is_walking}")
        lines.append(f"      hunger: [{self._bar(agent.needs.hunger)}] {agent.needs.hunger:.1f}%")
        lines.append(f"      energy: [{self._bar(agent.needs.energy)}] {agent.needs.energy:.1f}%")

        if agent.is_walking and not ctx.path.is_exhausted:
            remaining = [loc.name for loc in ctx.path.waypoints[ctx.path.index:]]
            lines.append(f"  Path: {' -> '.join(remaining)}")

        decision = ctx.autopilot.last_decision
        if decision is not None:
            lines.append(
                f"  Last decision: {decision.action.value} at {decision.location_key} "
                f"(priority {decision.priority:.1f}, {ctx.autopilot.decisions_made} total)"
            )
        return "\n".join(lines)

    def dump_companion(self) -> str:
        dog = self.engine.ctx.companion
        lines = ["--- COMPANION ---"]
        lines.append(f"  {dog.name}: {dog.behavior.value} ({dog.emotional})")
        lines.append(f"  Position: ({dog.x:.1f}, {dog.y:.1f})  facing {'right' if dog.direction > 0 else 'left'}")
        return "\n".join(lines)

    def dump_events(self, n: int = 10, event_type: Optional[str] = None) -> str:
        events = self.engine.ctx.event_bus.get_recent_events(n, event_type)
        if not events:
            return "--- EVENTS ---\n  (none)"
        lines = ["--- EVENTS ---"]
        for e in events:
            details = ", ".join(f"{k}={v}" for k, v in e.data.items())
            lines.append(f"  [frame {e.tick}] {e.event_type}: {details}")
        return "\n".join(lines)

    def find_issues(self) -> List[str]:
        """Conditions worth a second look in a long headless run."""
        agent = self.engine.ctx.agent
        issues = []
        if agent.needs.hunger <= 0:
            issues.append(f"{agent.name} is starving (hunger 0)")
        if agent.needs.energy <= 0:
            issues.append(f"{agent.name} is exhausted (energy 0)")
        if self.engine.decision_ticks > 10 and self.engine.ctx.autopilot.decisions_made == 0:
            issues.append("No decisions committed after 10 decision ticks")
        return issues

    def dump_all(self) -> str:
        info = self.engine.get_time_info()
        lines = []
        lines.append("=" * 72)
        lines.append(f"  DOLLHOUSE DIAGNOSTIC: {info['time']}  day {info['day']}  ({info['time_of_day']})")
        lines.append(f"  Frames: {info['frame']}  |  Needs ticks: {self.engine.needs_ticks}"
                     f"  |  Decision ticks: {self.engine.decision_ticks}")
        lines.append("=" * 72)
        lines.append(self.dump_agent())
        lines.append("")
        lines.append(self.dump_companion())
        lines.append("")
        lines.append(self.dump_events())
        lines.append("")

        issues = self.find_issues()
        if issues:
            lines.append("  ISSUES DETECTED:")
            lines.extend(f"  ! {issue}" for issue in issues)
        else:
            lines.append("  No issues detected.")
        return "\n".join(lines)

    def snapshot(self) -> Dict[str, Any]:
        ctx = self.engine.ctx
        agent = ctx.agent
        return {
            "time": self.engine.get_time_info(),
            "agent": {
                "name": agent.name,
                "x": agent.x,
                "y": agent.y,
                "floor": agent.floor,
                "hunger": agent.needs.hunger,
                "energy": agent.needs.energy,
                "mood": agent.mood,
                "emotional_state": agent.emotional_state,
                "activity": agent.activity,
                "current_action": agent.current_action.value if agent.current_action else None,
                "is_sleeping": agent.is_sleeping,
            },
            "companion": {
                "behavior": ctx.companion.behavior.value,
                "emotional": ctx.companion.emotional,
                "x": ctx.companion.x,
                "y": ctx.companion.y,
            },
        }

    def export_json(self, filepath: str = "household_diagnostics.json") -> None:
        """Write the current snapshot as JSON for external analysis."""
        with open(filepath, "w") as f:
            json.dump(self.snapshot(), f, indent=2)
        print(f"[Diagnostics] Exported to {filepath}")
