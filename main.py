#!/usr/bin/env python3
"""Roth Pomodoro entry point.

Run with:
    python main.py
    python -m roth_pomodoro
"""

from roth_pomodoro.__main__ import main


if __name__ == "__main__":
    main()
