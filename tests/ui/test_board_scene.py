"""Tests for BoardScene helpers, mouse input and promotion move resolution."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtTest import QTest

from kingside.core.enums import Color, MoveFlag, PieceType
from kingside.core.move import Move
from kingside.core.position import Position
from kingside.core.types import parse_square
from kingside.ui.board.board_scene import BoardScene
from kingside.ui.board.board_view import BoardView

_PROMO_PIECES = {"b8": "k", "a7": "P", "a1": "K"}


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_pos_to_square_outside_board() -> None:
    scene = BoardScene()
    corner = scene.sceneRect().bottomRight()
    assert scene._pos_to_square(corner) is None


def test_a1_is_dark() -> None:
    scene = BoardScene()
    a1 = scene._square_items[parse_square("a1")]
    h1 = scene._square_items[parse_square("h1")]
    assert a1.brush().color() == scene._theme.dark_square
    assert h1.brush().color() == scene._theme.light_square


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_show_legal_moves_false_clears_existing_dots() -> None:
    scene = BoardScene()
    scene._overlay("targets", parse_square("e4"), scene._theme.highlight_to)

    scene.set_show_legal_moves(False)

    assert scene._overlays["targets"] == []


def test_select_square_shows_legal_dots() -> None:
    scene = BoardScene()
    scene.set_position(Position.initial(), Color.WHITE)
    scene._select_square(parse_square("g1"))
    assert scene.selected_square == parse_square("g1")
    assert len(scene._overlays["targets"]) == 2

    scene.set_show_legal_moves(False)
    scene._select_square(parse_square("g1"))
    assert scene._overlays["targets"] == []


def test_find_legal_move_promotion_cancel_returns_none(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    scene = BoardScene()
    scene.set_position(Position.from_pieces(_PROMO_PIECES), Color.WHITE)

    monkeypatch.setattr(
        "kingside.ui.board.board_scene.PromotionDialog.ask",
        lambda _color, _parent: None,
    )

    move = scene._find_legal_move(parse_square("a7"), parse_square("a8"))
    assert move is None


def test_find_legal_move_promotion_uses_selected_piece(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    scene = BoardScene()
    scene.set_position(Position.from_pieces(_PROMO_PIECES), Color.WHITE)

    monkeypatch.setattr(
        "kingside.ui.board.board_scene.PromotionDialog.ask",
        lambda _color, _parent: PieceType.KNIGHT,
    )

    move = scene._find_legal_move(parse_square("a7"), parse_square("a8"))
    assert move is not None
    assert move.promotion == PieceType.KNIGHT


def test_find_legal_move_single_and_missing_candidate() -> None:
    scene = BoardScene()
    scene.set_position(Position.initial(), Color.WHITE)

    move = scene._find_legal_move(parse_square("e2"), parse_square("e4"))
    assert move is not None and move.flag == MoveFlag.DOUBLE_PAWN
    assert scene._find_legal_move(parse_square("e2"), parse_square("e5")) is None


def test_set_position_syncs_piece_items_count() -> None:
    scene = BoardScene()
    scene.set_position(Position.initial(), Color.WHITE)
    assert len(scene._piece_items) == 32


def test_highlight_last_move_adds_and_clears() -> None:
    scene = BoardScene()
    scene.highlight_last_move(Move(parse_square("e2"), parse_square("e4")))
    assert len(scene._overlays["last_move"]) == 2

    scene.highlight_last_move(None)
    assert scene._overlays["last_move"] == []


def test_highlight_check_marks_king_in_check() -> None:
    scene = BoardScene()
    pos = Position.from_pieces({"e8": "k", "e2": "R", "e1": "K"})
    scene.set_position(pos, Color.BLACK)

    scene.highlight_check()
    assert len(scene._overlays["check"]) == 1

    scene.set_position(pos, Color.WHITE)
    scene.highlight_check()
    assert scene._overlays["check"] == []


# ── Mouse input on a shown view ──────────────────────────────────────────

_LEFT = Qt.MouseButton.LeftButton
_NO_MOD = Qt.KeyboardModifier.NoModifier


@pytest.fixture
def board_view(qapp: object) -> BoardView:
    view = BoardView()
    view.resize(640, 640)
    view.show()
    QTest.qWaitForWindowExposed(view)
    return view


def _point(view: BoardView, name: str) -> QPoint:
    rect = view.board_scene._tile_rect(parse_square(name))
    return view.mapFromScene(rect.center())


def _click(view: BoardView, name: str) -> None:
    QTest.mouseClick(view.viewport(), _LEFT, _NO_MOD, _point(view, name))


def _collect(view: BoardView) -> list[Move]:
    received: list[Move] = []
    view.move_made.connect(received.append)
    return received


def test_click_click_emits_move(board_view: BoardView) -> None:
    board_view.board_scene.set_position(Position.initial(), Color.WHITE)
    received = _collect(board_view)

    _click(board_view, "e2")
    assert received == []
    assert board_view.board_scene.selected_square == parse_square("e2")

    _click(board_view, "e4")
    assert [str(m) for m in received] == ["e2e4"]
    assert received[0].flag == MoveFlag.DOUBLE_PAWN
    assert board_view.board_scene.selected_square is None


def test_drag_and_drop_emits_move(board_view: BoardView) -> None:
    board_view.board_scene.set_position(Position.initial(), Color.WHITE)
    received = _collect(board_view)
    viewport = board_view.viewport()

    QTest.mousePress(viewport, _LEFT, _NO_MOD, _point(board_view, "g1"))
    QTest.mouseMove(viewport, _point(board_view, "f3"))
    QTest.mouseRelease(viewport, _LEFT, _NO_MOD, _point(board_view, "f3"))

    assert [str(m) for m in received] == ["g1f3"]


def test_cancelled_promotion_keeps_selection(
    board_view: BoardView, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        "kingside.ui.board.board_scene.PromotionDialog.ask",
        lambda _color, _parent: None,
    )
    board_view.board_scene.set_position(
        Position.from_pieces(_PROMO_PIECES), Color.WHITE
    )
    received = _collect(board_view)

    _click(board_view, "a7")
    _click(board_view, "a8")

    assert received == []
    assert board_view.board_scene.selected_square == parse_square("a7")
