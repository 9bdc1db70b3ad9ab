"""QSS stylesheet and period colours."""

from __future__ import annotations

from ..timer.engine import PeriodKind

# Header and clock colour per period.
PERIOD_COLORS: dict[PeriodKind, str] = {
    PeriodKind.WORK:        "#FF6B6B",   # tomato red
    PeriodKind.SHORT_BREAK: "#4ECCC4",   # light teal
    PeriodKind.LONG_BREAK:  "#94E0D4",   # pale teal
}

ERROR_COLOR = "#FF4D4D"

PALETTE: dict[str, str] = {
    "bg":        "#EFF1F5",
    "text":      "#4C4F69",
    "button":    "#069494",
    "hover":     "#067A7A",
    "pressed":   "#066B6B",
    "button_fg": "#4D4D4D",
    "input_bg":  "#FFFFFF",
    "border":    "#BCC0CC",
}


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QPushButton, QToolButton {{
        background-color: {p['button']};
        color: {p['button_fg']};
        border: none;
        border-radius: 4px;
        padding: 10px;
    }}

    QPushButton:hover, QToolButton:hover {{
        background-color: {p['hover']};
    }}

    QPushButton:pressed, QToolButton:pressed {{
        background-color: {p['pressed']};
    }}

    QPushButton#startButton {{
        font-size: 28px;
        padding: 20px 40px;
    }}

    QLineEdit {{
        background-color: {p['input_bg']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 12px;
        font-size: 16px;
    }}
    """
