"""
Tkinter application module for TT Umpire.

This module contains the desktop scoreboard window: phase title, clock and one
button per action available in the current phase.
"""
import logging
import tkinter as tk
from tkinter import ttk, messagebox, simpledialog
from typing import Optional

from ..models import Action
from ..services import MatchService, SettingsService, SettingsValidationError
from ..utils import (
    setup_logging,
    APP_TITLE,
    CLOCK_COLOR,
    CLOCK_EXPIRED_COLOR,
    MIN_REDRAW_INTERVAL_MS,
    MAX_REDRAW_INTERVAL_MS,
)

logger = logging.getLogger(__name__)

ACTION_LABELS = {
    Action.START_WARM_UP: "Start Warm-Up",
    Action.START_MATCH: "Start Match",
    Action.PAUSE: "Pause",
    Action.PLAY: "Play",
    Action.TIME_OUT: "Time-Out",
    Action.MEDICAL_TIME_OUT: "Medical Time-Out",
    Action.SET_FINISHED: "Set Finished",
    Action.MATCH_FINISHED: "Match Finished",
}


class ScoreboardApp(tk.Tk):
    """Main application window for TT Umpire."""

    def __init__(self, match_service: Optional[MatchService] = None,
                 settings_service: Optional[SettingsService] = None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry("560x360")
        self.match_service = match_service or MatchService()
        self.settings_service = settings_service or SettingsService()
        self.after_timer = None
        self._shown_actions = None

        self._load_settings()
        self._build_menu()
        self._build_ui()
        self.protocol("WM_DELETE_WINDOW", self.quit_app)
        self.refresh()

    # ---------- UI Scaffolding ---------- #
    def _load_settings(self):
        try:
            self.settings_service.load()
        except SettingsValidationError as e:
            logger.warning("Using default settings: %s", e)

    def _build_menu(self):
        mbar = tk.Menu(self)
        filem = tk.Menu(mbar, tearoff=0)
        filem.add_command(label="Quit", command=self.quit_app)
        mbar.add_cascade(label="File", menu=filem)

        viewm = tk.Menu(mbar, tearoff=0)
        viewm.add_command(label="Redraw Interval…", command=self.configure_redraw_interval)
        mbar.add_cascade(label="View", menu=viewm)

        self.config(menu=mbar)

    def _build_ui(self):
        body = ttk.Frame(self, padding=20)
        body.pack(fill="both", expand=True)

        self.title_label = ttk.Label(body, text="", font=("Arial", 18))
        self.title_label.pack()

        # Clicking the clock pauses or resumes play
        self.clock_label = tk.Label(body, text="0:00", font=("Arial", 72, "bold"),
                                    fg=CLOCK_COLOR, cursor="hand2")
        self.clock_label.pack(pady=10)
        self.clock_label.bind("<Button-1>", lambda _event: self.toggle_clock())

        self.set_clock_label = ttk.Label(body, text="", foreground="gray")
        self.set_clock_label.pack()

        self.actions_frame = ttk.Frame(body)
        self.actions_frame.pack(pady=15)

    def _rebuild_actions(self, actions):
        if actions == self._shown_actions:
            return
        for child in self.actions_frame.winfo_children():
            child.destroy()
        for name in actions:
            action = Action(name)
            ttk.Button(self.actions_frame, text=ACTION_LABELS[action],
                       command=lambda a=action: self.apply_action(a)).pack(side="left", padx=3)
        self._shown_actions = actions

    # ---------- Match Control ---------- #
    def apply_action(self, action: Action):
        self.match_service.dispatch(action)
        self.refresh()

    def toggle_clock(self):
        if self.match_service.toggle_clock():
            self.refresh()

    def configure_redraw_interval(self):
        current = self.settings_service.settings.redraw_interval_ms
        value = simpledialog.askinteger(
            APP_TITLE,
            "Redraw interval (ms):",
            initialvalue=current,
            minvalue=MIN_REDRAW_INTERVAL_MS,
            maxvalue=MAX_REDRAW_INTERVAL_MS,
            parent=self,
        )
        if value is None:
            return
        try:
            self.settings_service.update_redraw_interval(value)
        except SettingsValidationError as exc:
            messagebox.showerror(APP_TITLE, str(exc))
            return
        self.refresh()

    def quit_app(self):
        """Save settings and close. Match state is not kept."""
        try:
            self.settings_service.save()
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
        self.destroy()

    # ---------- UI Updates ---------- #
    def refresh(self):
        """Redraw from the current view and schedule the next redraw if the clock runs."""
        view = self.match_service.get_view()
        self.title_label.config(text=view.title)
        self.clock_label.config(
            text=view.time_text,
            fg=CLOCK_EXPIRED_COLOR if view.expired else CLOCK_COLOR,
        )
        self.set_clock_label.config(
            text=f"Set {view.set_time_text}" if view.set_time_text else ""
        )
        self._rebuild_actions(view.available_actions)

        if self.after_timer:
            self.after_cancel(self.after_timer)
            self.after_timer = None
        if view.needs_redraw:
            self.after_timer = self.after(
                self.settings_service.settings.redraw_interval_ms, self.refresh
            )


def create_tkinter_app() -> ScoreboardApp:
    """
    Create and return the main Tkinter application.

    Returns:
        Configured ScoreboardApp instance
    """
    return ScoreboardApp()


def run_tkinter_app() -> None:
    """Run the Tkinter application."""
    app = create_tkinter_app()
    app.mainloop()


def main() -> None:
    """Console entry point: configure logging and open the window."""
    setup_logging()
    run_tkinter_app()


if __name__ == "__main__":
    main()
