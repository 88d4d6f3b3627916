"""
Services package for TT Umpire.

This package contains service classes that drive the match and persist host
settings.
"""
from .display_service import build_view
from .match_service import MatchService
from .settings_service import (
    SettingsService, SettingsValidationError, validate_redraw_interval,
    default_settings_path
)

__all__ = [
    "build_view", "MatchService", "SettingsService", "SettingsValidationError",
    "validate_redraw_interval", "default_settings_path"
]
