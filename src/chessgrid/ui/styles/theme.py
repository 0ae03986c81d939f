"""Visual theme constants and QSS styles for chessgrid."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    grid_line: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_target: QColor  # quiet-move dots and capture rings
    highlight_check: QColor  # king in check
    highlight_last_move: QColor  # last move origin and destination
    coord_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(211, 211, 211),  # light gray
            dark_square=QColor(105, 105, 105),  # dim gray
            grid_line=QColor(80, 80, 80),
            highlight_selected=QColor(255, 255, 0, 128),  # yellow, half opacity
            highlight_target=QColor(255, 255, 0, 128),
            highlight_check=QColor(255, 0, 0, 204),  # red
            highlight_last_move=QColor(255, 255, 0, 128),
            coord_text=QColor(169, 169, 169),  # dark gray
        )

    @classmethod
    def brown(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),
            dark_square=QColor(181, 136, 99),
            grid_line=QColor(120, 90, 60),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 180),
            highlight_last_move=QColor(155, 199, 0, 105),
            coord_text=QColor(120, 90, 60),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            grid_line=QColor(110, 130, 140),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 180),
            highlight_last_move=QColor(155, 199, 0, 105),
            coord_text=QColor(110, 130, 140),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name; unknown names give the default."""
        presets = {
            "Classic": cls.default,
            "Brown": cls.brown,
            "Blue": cls.blue,
        }
        return presets.get(name, cls.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

_PANEL = "#262626"
_SURFACE = "#333333"
_TEXT = "#dedede"
_ACCENT = "#3d6b99"

APP_STYLE = f"""
QMainWindow, QDialog {{
    background: {_PANEL};
}}

QLabel {{
    color: {_TEXT};
}}

QListWidget {{
    background: #1c1c1c;
    color: {_TEXT};
    border: 1px solid {_SURFACE};
    font-family: "Consolas", monospace;
    font-size: 13px;
}}

QToolButton {{
    background: {_SURFACE};
    color: {_TEXT};
    border: 1px solid #4a4a4a;
    border-radius: 4px;
    padding: 4px;
}}
QToolButton:hover {{
    border-color: {_ACCENT};
}}

QMenuBar, QMenu {{
    background: {_PANEL};
    color: {_TEXT};
}}
QMenuBar::item:selected, QMenu::item:selected {{
    background: {_ACCENT};
}}
"""
