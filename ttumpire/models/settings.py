"""
DisplaySettings model for the TT Umpire application.

Holds the host configuration that survives a restart. Match phase and timers
are deliberately not part of it: every launch starts awaiting players.
"""
from dataclasses import dataclass
from typing import Any, Dict

from ..utils import DEFAULT_REDRAW_INTERVAL_MS


@dataclass
class DisplaySettings:
    """
    Persisted host settings.

    Attributes:
        redraw_interval_ms: Delay between periodic redraws while a clock is shown
    """
    redraw_interval_ms: int = DEFAULT_REDRAW_INTERVAL_MS

    def to_json(self) -> Dict[str, Any]:
        return {"redraw_interval_ms": self.redraw_interval_ms}

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "DisplaySettings":
        """
        Create DisplaySettings from a JSON dictionary.

        Missing keys fall back to defaults; values are not range-checked here.
        """
        return DisplaySettings(
            redraw_interval_ms=data.get("redraw_interval_ms", DEFAULT_REDRAW_INTERVAL_MS),
        )
