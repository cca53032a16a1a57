"""Tests for MainWindow wiring between the board, controller and labels."""

from __future__ import annotations

import pytest

from kingside.core.enums import Color, GameStatus, MoveFlag
from kingside.core.move import Move
from kingside.core.types import E2, E4, parse_square
from kingside.game.controller import GameController
from kingside.ui.main_window import MainWindow


def _fools_mate(win: MainWindow) -> None:
    for from_name, to_name in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
        win._on_move_made(Move(parse_square(from_name), parse_square(to_name)))


def test_initial_labels() -> None:
    win = MainWindow()
    assert win._turn_label.text() == "Turn: White"
    assert win._message_label.text() == ""
    assert win.windowTitle() == "Kingside"


def test_move_updates_turn_and_board() -> None:
    ctrl = GameController()
    win = MainWindow(ctrl)
    win._on_move_made(Move(E2, E4, MoveFlag.DOUBLE_PAWN))

    assert ctrl.side_to_move == Color.BLACK
    assert win._turn_label.text() == "Turn: Black"
    scene = win._board_view.board_scene
    assert E4 in scene._piece_items
    assert E2 not in scene._piece_items
    assert len(scene._overlays["last_move"]) == 2


def test_refused_move_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    win = MainWindow()
    win._on_move_made(Move(E2, parse_square("e5")))
    assert "refused" in caplog.text
    assert win._turn_label.text() == "Turn: White"


def test_checkmate_message_and_board_locked() -> None:
    ctrl = GameController()
    win = MainWindow(ctrl)
    _fools_mate(win)

    assert ctrl.status == GameStatus.CHECKMATE
    assert win._message_label.text() == "Checkmate! White loses."
    scene = win._board_view.board_scene
    assert not scene._interactive
    assert len(scene._overlays["check"]) == 1


def test_new_game_resets() -> None:
    ctrl = GameController()
    win = MainWindow(ctrl)
    _fools_mate(win)
    win.new_game()
    assert not ctrl.is_game_over
    assert win._message_label.text() == ""
    assert win._board_view.board_scene._interactive


def test_apply_settings_switches_language() -> None:
    win = MainWindow()
    win.settings.language = "Indonesian"
    win.settings.show_coordinates = False
    win.apply_settings()

    assert win._turn_label.text() == "Giliran: Putih"
    scene = win._board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)


def test_flip_keeps_pieces() -> None:
    win = MainWindow()
    win._on_flip()
    scene = win._board_view.board_scene
    assert scene.is_flipped()
    assert len(scene._piece_items) == 32
