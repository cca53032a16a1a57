"""PieceItem — a piece drawn as its Unicode glyph."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from kingside.core.piece import Piece
from kingside.core.types import Square

_MOVABLE = QGraphicsItem.GraphicsItemFlag.ItemIsMovable


class PieceItem(QGraphicsSimpleTextItem):
    """Glyph for one piece. Remembers its square so a drop can be resolved."""

    GLYPH_SCALE = 0.72  # glyph height relative to the tile

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._home: QPointF | None = None

        font = QFont()
        font.setPixelSize(round(tile_size * self.GLYPH_SCALE))
        self.setFont(font)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def place(self, tile_origin: QPointF) -> None:
        """Centre the glyph in the tile whose top-left corner is *tile_origin*."""
        bounds = self.boundingRect()
        margin = QPointF(
            (self._tile_size - bounds.width()) / 2,
            (self._tile_size - bounds.height()) / 2,
        )
        self.setPos(tile_origin + margin)

    def lift(self) -> None:
        """Pick the piece up; it follows the mouse until dropped."""
        self._home = self.pos()
        self.setFlag(_MOVABLE, True)
        self.setZValue(10)
        self.setOpacity(0.85)
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))

    def settle(self) -> None:
        """End the drag where the piece currently is."""
        self._home = None
        self.setFlag(_MOVABLE, False)
        self.setZValue(1)
        self.setOpacity(1.0)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def return_home(self) -> None:
        """Abandon the drag and put the piece back on its square."""
        if self._home is not None:
            self.setPos(self._home)
        self.settle()
