"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import MoveFlag, PieceType
from kingside.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Squares are coordinates only, so a move generated on one position can be
    applied to any copy of it.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def with_promotion(self, promotion: PieceType | None) -> Move:
        """Same move with *promotion* attached."""
        return Move(self.from_sq, self.to_sq, self.flag, promotion)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
