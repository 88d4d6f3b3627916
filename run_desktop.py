#!/usr/bin/env python3
"""
Main entry point for the TT Umpire desktop scoreboard.

This script launches the Tkinter-based desktop interface.
"""
import sys
import os

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ttumpire.ui.tkinter_app import main

if __name__ == "__main__":
    main()
