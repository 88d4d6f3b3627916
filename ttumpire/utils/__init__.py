"""
Utilities package for TT Umpire.

This package contains the clock source, formatting helpers and constants
used throughout the application.
"""
from .time_utils import fmt_clock, now_ts, round_half_away
from .log_utils import setup_logging
from .constants import (
    APP_TITLE, WARM_UP_SECONDS, TACTICAL_TIME_OUT_SECONDS,
    MEDICAL_TIME_OUT_SECONDS, BETWEEN_SETS_SECONDS,
    DEFAULT_REDRAW_INTERVAL_MS, MIN_REDRAW_INTERVAL_MS,
    MAX_REDRAW_INTERVAL_MS, REDRAW_INTERVAL_STEP_MS,
    PHASE_TITLES, TIME_OUT_TITLES, CLOCK_COLOR, CLOCK_EXPIRED_COLOR
)

__all__ = [
    "fmt_clock", "now_ts", "round_half_away", "setup_logging", "APP_TITLE",
    "WARM_UP_SECONDS", "TACTICAL_TIME_OUT_SECONDS", "MEDICAL_TIME_OUT_SECONDS",
    "BETWEEN_SETS_SECONDS", "DEFAULT_REDRAW_INTERVAL_MS",
    "MIN_REDRAW_INTERVAL_MS", "MAX_REDRAW_INTERVAL_MS",
    "REDRAW_INTERVAL_STEP_MS", "PHASE_TITLES", "TIME_OUT_TITLES",
    "CLOCK_COLOR", "CLOCK_EXPIRED_COLOR"
]
