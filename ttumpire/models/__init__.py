"""
Models package for TT Umpire.

This package contains the timer, the match phase union and the data objects
exchanged with the hosts.
"""
from .timer import Timer
from .match_state import (
    Phase, Action, TimeOutKind, MatchTimings, DEFAULT_TIMINGS, ACTION_PRIORITY,
    AwaitingPlayers, WarmUp, Playing, Paused, TimeOut, BetweenSets, MatchState,
    transition, available_actions, resolve_action, clock_toggle_action,
    phase_title, display_timer, needs_redraw
)
from .scoreboard_view import ScoreboardView
from .settings import DisplaySettings

__all__ = [
    "Timer", "Phase", "Action", "TimeOutKind", "MatchTimings", "DEFAULT_TIMINGS",
    "ACTION_PRIORITY", "AwaitingPlayers", "WarmUp", "Playing", "Paused",
    "TimeOut", "BetweenSets", "MatchState", "transition", "available_actions",
    "resolve_action", "clock_toggle_action", "phase_title", "display_timer",
    "needs_redraw", "ScoreboardView", "DisplaySettings"
]
