"""Board colour presets and the application style sheet."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from PyQt6.QtGui import QColor


def _rgba(*components: int) -> Callable[[], QColor]:
    return lambda: QColor(*components)


@dataclass(frozen=True)
class BoardTheme:
    """Colours used by :class:`~kingside.ui.board.board_scene.BoardScene`."""

    light_square: QColor
    dark_square: QColor
    # Overlays are translucent so every preset can share them.
    highlight_from: QColor = field(default_factory=_rgba(246, 246, 105, 110))
    highlight_to: QColor = field(default_factory=_rgba(0, 0, 0, 45))
    highlight_drag: QColor = field(default_factory=_rgba(20, 85, 30, 90))
    highlight_check: QColor = field(default_factory=_rgba(220, 30, 30, 130))
    last_move: QColor = field(default_factory=_rgba(170, 162, 58, 110))
    piece_white: QColor = field(default_factory=_rgba(250, 250, 250))
    piece_black: QColor = field(default_factory=_rgba(25, 25, 25))

    # Coordinates are drawn in the colour of the opposite square.
    @property
    def coord_light(self) -> QColor:
        """Coordinate text on dark squares."""
        return self.light_square

    @property
    def coord_dark(self) -> QColor:
        """Coordinate text on light squares."""
        return self.dark_square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.named("Classic")

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Preset by display name; unknown names give the classic board."""
        light, dark = _PRESETS.get(name, _PRESETS["Classic"])
        return cls(QColor(*light), QColor(*dark))


# Display name -> (light square RGB, dark square RGB)
_PRESETS: dict[str, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    "Classic": ((240, 217, 181), (181, 136, 99)),
    "Blue": ((222, 227, 230), (140, 162, 173)),
    "Green": ((238, 238, 210), (118, 150, 86)),
}

THEME_NAMES: list[str] = list(_PRESETS)


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QDialog {
    background: #262522;
}

QLabel, QCheckBox {
    color: #dedcd8;
    font-size: 13px;
}

QLabel#turnIndicator {
    font-size: 16px;
    font-weight: bold;
}

QLabel#message {
    color: #e8b85c;
    font-size: 15px;
}

QPushButton, QComboBox {
    background: #3a3835;
    color: #dedcd8;
    border: 1px solid #54524e;
    border-radius: 4px;
    padding: 4px 10px;
}
QPushButton:hover {
    background: #4a4743;
}

QMenuBar, QMenu {
    background: #262522;
    color: #dedcd8;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #5d7a3a;
}
"""
