"""
Web application module for TT Umpire.

This module contains the Flask web server that serves the scoreboard page and
provides JSON API endpoints for match actions and display settings.
"""
import logging
import os
from typing import Callable, Optional

from flask import Flask, send_from_directory, jsonify, request

from ..models import Action, MatchTimings
from ..services import MatchService, SettingsService, SettingsValidationError
from ..utils import setup_logging

logger = logging.getLogger(__name__)

STATIC_FOLDER = os.path.join(os.path.dirname(__file__), "static")


class WebAppState:
    """State holder for one web umpiring session."""

    def __init__(
        self,
        settings_path: Optional[str] = None,
        clock: Optional[Callable[[], float]] = None,
        timings: Optional[MatchTimings] = None,
    ):
        self.match_service = MatchService(clock=clock, timings=timings)
        self.settings_service = SettingsService(settings_path)
        try:
            self.settings_service.load()
        except SettingsValidationError as e:
            logger.warning("Ignoring unreadable settings: %s", e)


def create_app(
    static_folder: Optional[str] = None,
    settings_path: Optional[str] = None,
    clock: Optional[Callable[[], float]] = None,
    timings: Optional[MatchTimings] = None,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        static_folder: Directory to serve index.html from
        settings_path: Settings JSON file, defaults to the user settings file
        clock: Clock source, defaults to the monotonic clock
        timings: Phase durations, defaults to the named constants

    Returns:
        Configured Flask application instance
    """
    static_folder = static_folder or STATIC_FOLDER
    app = Flask(__name__, static_folder=static_folder, static_url_path="")
    app_state = WebAppState(settings_path=settings_path, clock=clock, timings=timings)
    app.extensions["ttumpire"] = app_state

    @app.route("/")
    def index():
        """Serve the scoreboard page."""
        response = send_from_directory(static_folder, "index.html")
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        return response

    # ==================== API Endpoints ==================== #

    def _state_payload() -> dict:
        return {
            "success": True,
            "state": app_state.match_service.get_view().to_json(),
            "redraw_interval_ms": app_state.settings_service.settings.redraw_interval_ms,
        }

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Current phase, clock text and flags for rendering."""
        return jsonify(_state_payload())

    @app.route("/api/action", methods=["POST"])
    def apply_action():
        """Apply one action: {"action": name} or simultaneous {"actions": [names]}."""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "error": "JSON object required"}), 400
        try:
            if "actions" in data:
                triggers = data["actions"]
                if not isinstance(triggers, list):
                    return jsonify({"success": False, "error": "actions must be a list"}), 400
                applied = app_state.match_service.dispatch_triggers(triggers)
                applied_name = applied.value if applied else None
            elif "action" in data:
                changed = app_state.match_service.dispatch(data["action"])
                applied_name = Action.parse(data["action"]).value if changed else None
            else:
                return jsonify({"success": False, "error": "action is required"}), 400
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        payload = _state_payload()
        payload["applied"] = applied_name
        return jsonify(payload)

    @app.route("/api/clock/toggle", methods=["POST"])
    def toggle_clock():
        """Pause or resume play, as when the clock is clicked."""
        changed = app_state.match_service.toggle_clock()
        payload = _state_payload()
        payload["toggled"] = changed
        return jsonify(payload)

    @app.route("/api/settings", methods=["GET"])
    def get_settings():
        return jsonify({"success": True, "settings": app_state.settings_service.settings.to_json()})

    @app.route("/api/settings", methods=["POST"])
    def update_settings():
        """Update and persist the redraw interval."""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "error": "JSON object required"}), 400
        if "redraw_interval_ms" not in data:
            return jsonify({"success": False, "error": "redraw_interval_ms is required"}), 400
        try:
            settings = app_state.settings_service.update_redraw_interval(data["redraw_interval_ms"])
            app_state.settings_service.save()
        except SettingsValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
            return jsonify({"success": False, "error": str(e)}), 500
        return jsonify({"success": True, "settings": settings.to_json()})

    return app


def run_web_app(host: str = "127.0.0.1", port: int = 7123) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
    """
    app = create_app()
    # One session, one request at a time
    app.run(host=host, port=port, debug=False, threaded=False)


def main() -> None:
    """Console entry point: configure logging and serve on localhost."""
    setup_logging()
    run_web_app()


if __name__ == "__main__":
    main()
