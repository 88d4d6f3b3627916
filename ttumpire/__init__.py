"""
TT Umpire

Timer and phase tracking for officiating a table-tennis match on a single
scoreboard display: warm-up, play, pause, time-outs and breaks between sets.

This package provides both desktop (Tkinter) and web (Flask) displays driven
by the same match phase machine.
"""
from .models import Timer, Action, MatchTimings, transition
from .services import MatchService, SettingsService
from .utils import fmt_clock, now_ts, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "Timer", "Action", "MatchTimings", "transition", "MatchService",
    "SettingsService", "fmt_clock", "now_ts", "APP_TITLE"
]
