"""
Settings service for the TT Umpire application.

This module handles saving and loading the persisted host settings to and
from a JSON file.
"""
import json
import logging
import os
from typing import Optional

from ..models import DisplaySettings
from ..utils import MIN_REDRAW_INTERVAL_MS, MAX_REDRAW_INTERVAL_MS
from ..utils.constants import SETTINGS_ENV_VAR, DEFAULT_SETTINGS_DIR, SETTINGS_FILENAME

logger = logging.getLogger(__name__)


class SettingsValidationError(ValueError):
    """Raised when settings are malformed or out of range."""
    pass


def default_settings_path() -> str:
    """
    Location of the settings file.

    Uses the ``TTUMPIRE_SETTINGS`` environment variable when set, otherwise
    ``~/.ttumpire/settings.json``.
    """
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return override
    return os.path.join(os.path.expanduser("~"), DEFAULT_SETTINGS_DIR, SETTINGS_FILENAME)


def validate_redraw_interval(value) -> int:
    """
    Check a redraw interval in milliseconds.

    Returns:
        The interval as an int

    Raises:
        SettingsValidationError: If it is not an integer within the allowed bounds
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsValidationError("redraw_interval_ms must be an integer")
    if not MIN_REDRAW_INTERVAL_MS <= value <= MAX_REDRAW_INTERVAL_MS:
        raise SettingsValidationError(
            f"redraw_interval_ms must be between {MIN_REDRAW_INTERVAL_MS} "
            f"and {MAX_REDRAW_INTERVAL_MS}"
        )
    return value


class SettingsService:
    """Service for persisting DisplaySettings to a JSON file."""

    def __init__(self, file_path: Optional[str] = None):
        self.file_path = file_path or default_settings_path()
        self.settings = DisplaySettings()

    def load(self) -> DisplaySettings:
        """
        Load settings from disk.

        A missing file yields defaults.

        Raises:
            SettingsValidationError: If the file is not valid UTF-8 JSON or holds
                out-of-range values
        """
        if not os.path.exists(self.file_path):
            logger.info("No settings file at %s, using defaults", self.file_path)
            self.settings = DisplaySettings()
            return self.settings

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Settings file %s is not valid JSON: %s", self.file_path, e)
            raise SettingsValidationError(f"Invalid settings file: {e}") from e

        if not isinstance(data, dict):
            raise SettingsValidationError("Settings file must contain a JSON object")

        settings = DisplaySettings.from_json(data)
        validate_redraw_interval(settings.redraw_interval_ms)
        self.settings = settings
        logger.info("Loaded settings from %s", self.file_path)
        return self.settings

    def save(self, settings: Optional[DisplaySettings] = None) -> None:
        """
        Write settings to disk, creating the directory if needed.

        Raises:
            OSError: If the file cannot be written
        """
        if settings is not None:
            self.settings = settings

        directory = os.path.dirname(self.file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(self.settings.to_json(), f, indent=2)
        logger.info("Saved settings to %s", self.file_path)

    def update_redraw_interval(self, value) -> DisplaySettings:
        """Validate and apply a new redraw interval (not yet saved)."""
        self.settings.redraw_interval_ms = validate_redraw_interval(value)
        return self.settings
