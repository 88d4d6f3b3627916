"""
Constants for the TT Umpire application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "TT Umpire"

# Phase durations (seconds)
WARM_UP_SECONDS = 120
TACTICAL_TIME_OUT_SECONDS = 60
MEDICAL_TIME_OUT_SECONDS = 600
BETWEEN_SETS_SECONDS = 60

# Redraw cadence owned by the host (milliseconds)
DEFAULT_REDRAW_INTERVAL_MS = 270
MIN_REDRAW_INTERVAL_MS = 10
MAX_REDRAW_INTERVAL_MS = 1000
REDRAW_INTERVAL_STEP_MS = 10

# Settings file location
SETTINGS_ENV_VAR = "TTUMPIRE_SETTINGS"
DEFAULT_SETTINGS_DIR = ".ttumpire"
SETTINGS_FILENAME = "settings.json"

# Phase titles shown above the clock
PHASE_TITLES = {
    "awaiting_players": "Awaiting Players",
    "warm_up": "Warm-Up",
    "playing": "Playing",
    "paused": "Paused",
    "time_out": "Time-Out",
    "between_sets": "Between Sets",
}

TIME_OUT_TITLES = {
    "tactical": "Tactical Time-Out",
    "medical": "Medical Time-Out",
}

# Clock colours used by the hosts
CLOCK_COLOR = "#202020"
CLOCK_EXPIRED_COLOR = "#c62828"
