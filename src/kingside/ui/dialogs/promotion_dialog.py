"""PromotionDialog — asks which piece a promoting pawn becomes."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.rules import PROMOTION_TYPES
from kingside.ui.i18n import t


class PromotionDialog(QDialog):
    """One glyph button per promotion piece; Cancel abandons the move."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self._selected = PieceType.QUEEN

        s = t()
        self.setWindowTitle(s.promote_title)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(s.promote_label))

        glyph_font = QFont()
        glyph_font.setPixelSize(44)
        row = QHBoxLayout()
        self._buttons: dict[PieceType, QPushButton] = {}
        for ptype in PROMOTION_TYPES:
            button = QPushButton(Piece(color, ptype).symbol)
            button.setFont(glyph_font)
            button.setMinimumSize(64, 64)
            button.setToolTip(ptype.name.title())
            button.clicked.connect(lambda _checked, p=ptype: self._choose(p))
            row.addWidget(button)
            self._buttons[ptype] = button
        layout.addLayout(row)

        cancel = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        cancel.rejected.connect(self.reject)
        layout.addWidget(cancel)

    @property
    def selected(self) -> PieceType:
        return self._selected

    def _choose(self, ptype: PieceType) -> None:
        self._selected = ptype
        self.accept()

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Run the dialog modally; ``None`` when the user cancels."""
        dialog = PromotionDialog(color, parent)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            return dialog.selected
        return None
