"""Internationalisation strings for the Kingside UI.

Usage::

    from kingside.ui.i18n import set_language, status_message, t

    set_language("Indonesian")
    print(t().msg_check)                      # "Skak!"
    print(status_message(GameStatus.CHECKMATE, Color.WHITE))
"""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import Color, GameStatus


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    turn_indicator: str  # "Turn: {color}"
    color_white: str
    color_black: str

    # Status messages shown after each move
    msg_check: str
    msg_checkmate: str  # "Checkmate! {color} loses."
    msg_stalemate: str

    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board_theme: str
    settings_show_coords: str
    settings_show_legal: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Kingside",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    turn_indicator="Turn: {color}",
    color_white="White",
    color_black="Black",
    msg_check="Check!",
    msg_checkmate="Checkmate! {color} loses.",
    msg_stalemate="Stalemate! The game is drawn.",
    promote_title="Promotion",
    promote_label="Promote to (Q, R, B, N):",
    settings_title="Settings",
    settings_language="Language",
    settings_board_theme="Board theme",
    settings_show_coords="Show coordinates",
    settings_show_legal="Show legal moves",
)

_ID = Strings(
    window_title="Kingside",
    menu_game="&Permainan",
    menu_new_game="Permainan &Baru",
    menu_flip_board="&Balik Papan",
    menu_quit="&Keluar",
    menu_settings="&Pengaturan",
    menu_settings_action="&Pengaturan...",
    turn_indicator="Giliran: {color}",
    color_white="Putih",
    color_black="Hitam",
    msg_check="Skak!",
    msg_checkmate="Skakmat! {color} kalah.",
    msg_stalemate="Stalemate! Permainan seri.",
    promote_title="Promosi",
    promote_label="Promosi ke (Q, R, B, N):",
    settings_title="Pengaturan",
    settings_language="Bahasa",
    settings_board_theme="Tema papan",
    settings_show_coords="Tampilkan koordinat",
    settings_show_legal="Tampilkan langkah legal",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Indonesian": _ID,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def turn_text(color: Color) -> str:
    s = t()
    return s.turn_indicator.format(color=s.color_name(color))


def status_message(status: GameStatus, side_to_move: Color) -> str:
    """User-facing message for *status*; empty when there is nothing to say.

    On checkmate the side to move is the one that lost.
    """
    s = t()
    if status == GameStatus.CHECKMATE:
        return s.msg_checkmate.format(color=s.color_name(side_to_move))
    if status == GameStatus.STALEMATE:
        return s.msg_stalemate
    if status == GameStatus.CHECK:
        return s.msg_check
    return ""
