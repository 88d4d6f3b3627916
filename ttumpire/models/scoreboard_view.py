"""Dataclass describing what the host renders for the current match phase."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ScoreboardView:
    """Snapshot of the display for one frame."""

    phase: str
    title: str
    time_text: str
    expired: bool
    needs_redraw: bool
    counting_down: bool
    running: bool
    set_time_text: Optional[str] = None
    available_actions: List[str] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "phase": self.phase,
            "title": self.title,
            "time_text": self.time_text,
            "expired": self.expired,
            "needs_redraw": self.needs_redraw,
            "counting_down": self.counting_down,
            "running": self.running,
            "set_time_text": self.set_time_text,
            "available_actions": list(self.available_actions),
        }
