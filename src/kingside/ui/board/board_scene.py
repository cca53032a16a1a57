"""BoardScene — draws the board and turns mouse input into moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from kingside.core.enums import Color
from kingside.core.move import Move
from kingside.core.rules import Rules
from kingside.core.types import ALL_SQUARES, BOARD_SIZE, Square, in_bounds
from kingside.ui.board.piece_item import PieceItem
from kingside.ui.dialogs.promotion_dialog import PromotionDialog
from kingside.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from kingside.core.position import Position

# Overlay layers and their z-value; squares sit at 0 and pieces at 1.
_OVERLAYS: dict[str, float] = {
    "last_move": 0.5,
    "check": 0.6,
    "selected": 0.8,
    "targets": 0.8,
    "drag": 0.9,
}
_COORD_Z = 0.3


def _is_light(sq: Square) -> bool:
    return (sq.rank + sq.file) % 2 == 1


class BoardScene(QGraphicsScene):
    """Renders a :class:`Position` and reports the moves the user makes.

    The scene never changes the position it shows. A finished click-click or
    drag-and-drop move is emitted through :attr:`move_made`; the owner
    decides whether to play it.

    Signals:
        move_made(Move): A legal move chosen on the board.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.setSceneRect(0, 0, BOARD_SIZE * self.TILE, BOARD_SIZE * self.TILE)

        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._side_to_move = Color.WHITE
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        self._selected_sq: Square | None = None
        self._legal_moves: list[Move] = []
        self._drag_item: PieceItem | None = None

        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._overlays: dict[str, list[QGraphicsRectItem]] = {
            layer: [] for layer in _OVERLAYS
        }

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position, side_to_move: Color) -> None:
        """Show *position*; only *side_to_move*'s pieces can be picked up."""
        self._position = position
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Show the board from Black's side when *flipped*."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        self._clear_selection()
        self._clear_overlays("last_move", "check")
        self._draw_board()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        if not visible:
            self._clear_overlays("targets")

    def highlight_last_move(self, move: Move | None) -> None:
        self._clear_overlays("last_move")
        if move is not None:
            self._overlay("last_move", move.from_sq, self._theme.last_move)
            self._overlay("last_move", move.to_sq, self._theme.last_move)

    def highlight_check(self) -> None:
        """Mark the side to move's king when it is in check."""
        self._clear_overlays("check")
        pos, color = self._position, self._side_to_move
        if pos is None or not Rules.is_in_check(pos, color):
            return
        king_sq = pos.find_king(color)
        if king_sq is not None:
            self._overlay("check", king_sq, self._theme.highlight_check)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        for item in [*self._square_items.values(), *self._coord_items]:
            self.removeItem(item)
        self._square_items.clear()
        self._coord_items.clear()

        theme = self._theme
        for sq in ALL_SQUARES:
            rect = QGraphicsRectItem(self._tile_rect(sq))
            color = theme.light_square if _is_light(sq) else theme.dark_square
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            self.addItem(rect)
            self._square_items[sq] = rect

        self._draw_coordinates()

    def _draw_coordinates(self) -> None:
        """Rank digits down the left edge, file letters along the bottom."""
        t = self.TILE
        font = QFont()
        font.setPointSize(max(9, t // 8))
        for i in range(BOARD_SIZE):
            left = self._square_at_visual(0, i)
            self._add_coord(str(left.rank + 1), left, font, QPointF(2, 1))
            bottom = self._square_at_visual(i, BOARD_SIZE - 1)
            letter = "abcdefgh"[bottom.file]
            self._add_coord(letter, bottom, font, QPointF(t - 12, t - 16))

    def _add_coord(self, label: str, sq: Square, font: QFont, offset: QPointF) -> None:
        theme = self._theme
        text = QGraphicsSimpleTextItem(label)
        text.setFont(font)
        text.setBrush(QBrush(theme.coord_dark if _is_light(sq) else theme.coord_light))
        text.setPos(self._tile_rect(sq).topLeft() + offset)
        text.setZValue(_COORD_Z)
        text.setVisible(self._show_coordinates)
        self.addItem(text)
        self._coord_items.append(text)

    def _sync_pieces(self) -> None:
        """Rebuild every piece item from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._drag_item = None
        if self._position is None:
            return

        theme = self._theme
        for color in (Color.WHITE, Color.BLACK):
            fill = theme.piece_white if color == Color.WHITE else theme.piece_black
            for sq, piece in self._position.pieces(color):
                item = PieceItem(piece, sq, self.TILE, fill, theme.piece_black)
                item.place(self._tile_rect(sq).topLeft())
                self.addItem(item)
                self._piece_items[sq] = item

    # ── Mouse input ──────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        sq = self._event_square(event)
        if sq is None or self._position is None:
            if self._interactive:
                self._clear_selection()
            return super().mousePressEvent(event)

        # Second click on a target completes the move.
        if self._selected_sq is not None and self._selected_sq != sq:
            move = self._find_legal_move(self._selected_sq, sq)
            if move is not None:
                self._emit_move(move)
                return
            if any(m.to_sq == sq for m in self._legal_moves):
                return  # promotion cancelled, keep the selection

        piece = self._position.get(sq)
        if piece is not None and piece.color == self._side_to_move:
            self._select_square(sq)
            self._begin_drag(sq)
        else:
            self._clear_selection()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._drag_item is not None and event is not None:
            self._clear_overlays("drag")
            sq = self._pos_to_square(event.scenePos())
            if sq is not None and any(m.to_sq == sq for m in self._legal_moves):
                self._overlay("drag", sq, self._theme.highlight_drag)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        self._clear_overlays("drag")
        item, self._drag_item = self._drag_item, None
        if item is not None and event is not None:
            drop_sq = self._pos_to_square(event.scenePos())
            move = None
            if drop_sq is not None and drop_sq != item.square:
                move = self._find_legal_move(item.square, drop_sq)
            if move is not None:
                item.settle()
                self._emit_move(move)
                return
            # The selection stays, so a click can still finish the move.
            item.return_home()
        super().mouseReleaseEvent(event)

    def _event_square(self, event: QGraphicsSceneMouseEvent | None) -> Square | None:
        if event is None or not self._interactive or self._position is None:
            return None
        return self._pos_to_square(event.scenePos())

    def _begin_drag(self, sq: Square) -> None:
        item = self._piece_items.get(sq)
        if item is not None:
            item.lift()
            self._drag_item = item

    def _emit_move(self, move: Move) -> None:
        self._clear_selection()
        self.move_made.emit(move)

    # ── Selection and overlays ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        self._overlay("selected", sq, self._theme.highlight_from)
        if self._position is None:
            return
        self._legal_moves = Rules.legal_moves(self._position, sq)
        if self._show_legal_moves:
            for move in self._legal_moves:
                self._overlay("targets", move.to_sq, self._theme.highlight_to)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_moves = []
        self._clear_overlays("selected", "targets", "drag")

    def _overlay(self, layer: str, sq: Square, color: QColor) -> QGraphicsRectItem:
        rect = QGraphicsRectItem(self._tile_rect(sq))
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(_OVERLAYS[layer])
        self.addItem(rect)
        self._overlays[layer].append(rect)
        return rect

    def _clear_overlays(self, *layers: str) -> None:
        for layer in layers:
            items = self._overlays[layer]
            for item in items:
                self.removeItem(item)
            items.clear()

    # ── Move resolution ──────────────────────────────────────────────────

    def _find_legal_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """Legal move from *from_sq* to *to_sq*, or ``None``.

        A promotion asks the user for the piece; a cancelled dialog means no
        move at all.
        """
        pos = self._position
        if pos is None:
            return None
        if from_sq == self._selected_sq:
            candidates = self._legal_moves
        else:
            candidates = Rules.legal_moves(pos, from_sq)

        move = next((m for m in candidates if m.to_sq == to_sq), None)
        if move is None or not Rules.is_promotion(pos, move):
            return move

        piece = pos.get(from_sq)
        if piece is None:
            return None
        views = self.views()
        choice = PromotionDialog.ask(piece.color, views[0] if views else None)
        return None if choice is None else move.with_promotion(choice)

    # ── Geometry ─────────────────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → (column, row) on screen, row 0 at the top."""
        if self._flipped:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _square_at_visual(self, col: int, row: int) -> Square:
        if self._flipped:
            return Square(row, 7 - col)
        return Square(7 - row, col)

    def _tile_rect(self, sq: Square) -> QRectF:
        col, row = self._visual_coords(sq)
        t = self.TILE
        return QRectF(col * t, row * t, t, t)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square, ``None`` off the board."""
        col, row = int(pos.x() // self.TILE), int(pos.y() // self.TILE)
        if not in_bounds(row, col):
            return None
        return self._square_at_visual(col, row)
