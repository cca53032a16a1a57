"""Tests for locale switching and status message formatting."""

from __future__ import annotations

from kingside.core.enums import Color, GameStatus
from kingside.ui.i18n import LANGUAGES, set_language, status_message, t, turn_text


def test_languages_listed() -> None:
    assert LANGUAGES == ["English", "Indonesian"]


def test_english_messages() -> None:
    assert turn_text(Color.WHITE) == "Turn: White"
    assert status_message(GameStatus.CHECK, Color.BLACK) == "Check!"
    assert status_message(GameStatus.NONE, Color.BLACK) == ""


def test_checkmate_names_the_losing_side() -> None:
    assert (
        status_message(GameStatus.CHECKMATE, Color.WHITE)
        == "Checkmate! White loses."
    )


def test_indonesian_messages() -> None:
    set_language("Indonesian")
    assert turn_text(Color.BLACK) == "Giliran: Hitam"
    assert status_message(GameStatus.CHECK, Color.WHITE) == "Skak!"
    assert status_message(GameStatus.CHECKMATE, Color.BLACK) == "Skakmat! Hitam kalah."
    assert status_message(GameStatus.STALEMATE, Color.WHITE) == (
        "Stalemate! Permainan seri."
    )


def test_unknown_language_falls_back_to_english() -> None:
    set_language("Indonesian")
    set_language("Klingon")
    assert t().msg_check == "Check!"
