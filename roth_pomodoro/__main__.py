"""Allow running Roth Pomodoro as a module: python -m roth_pomodoro."""

from __future__ import annotations

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level(value: str | None) -> int:
    """Level from a name like ``debug``; unknown names mean INFO."""
    level = logging.getLevelName((value or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> None:
    logging.basicConfig(
        level=log_level(os.environ.get("ROTH_POMODORO_LOG_LEVEL")),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info("Roth Pomodoro starting")

    app = QApplication(sys.argv)
    app.setApplicationName("Roth Pomodoro")
    app.setOrganizationName("Roth Pomodoro")

    # Window icon (generated placeholder, tomato-red circle)
    from PyQt6.QtGui import QIcon, QPixmap, QPainter, QColor
    icon = QPixmap(256, 256)
    icon.fill(QColor(0, 0, 0, 0))
    p = QPainter(icon)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor("#FF6B6B"))
    p.setPen(QColor("#FF6B6B").darker(120))
    p.drawEllipse(16, 16, 224, 224)
    p.end()
    app.setWindowIcon(QIcon(icon))

    window = PomodoroWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
