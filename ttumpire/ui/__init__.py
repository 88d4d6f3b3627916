"""
UI package for TT Umpire.

This package contains the Flask web server and the Tkinter desktop window.
The Tkinter module is not imported here so the web server runs on machines
without Tk; import ``ttumpire.ui.tkinter_app`` directly for the desktop app.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
