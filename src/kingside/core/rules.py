"""High-level chess rules: the entry points used by the game and UI layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, GameStatus, PieceType
from kingside.core.move_generator import MoveGenerator, promotion_rank

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.piece import Piece
    from kingside.core.position import Position
    from kingside.core.types import Square

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_PROMOTION_NAMES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "queen": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "rook": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "bishop": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "knight": PieceType.KNIGHT,
}


def resolve_promotion(choice: PieceType | str | None) -> PieceType:
    """Map a user's promotion choice to a piece type, defaulting to queen."""
    if isinstance(choice, PieceType):
        return choice if choice in PROMOTION_TYPES else PieceType.QUEEN
    if isinstance(choice, str):
        return _PROMOTION_NAMES.get(choice.strip().lower(), PieceType.QUEEN)
    return PieceType.QUEEN


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def piece_at(position: Position, sq: Square) -> Piece | None:
        return position.get(sq)

    @staticmethod
    def legal_moves(position: Position, sq: Square) -> list[Move]:
        return MoveGenerator(position).legal_moves(sq)

    @staticmethod
    def is_promotion(position: Position, move: Move) -> bool:
        """Whether *move* takes a pawn onto its last rank."""
        piece = position.get(move.from_sq)
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and move.to_sq.rank == promotion_rank(piece.color)
        )

    @staticmethod
    def apply_move(
        position: Position,
        move: Move,
        promotion: PieceType | str | None = None,
    ) -> bool:
        """Play *move* on the live *position*.

        A pawn reaching its last rank always promotes; a missing or
        unrecognised *promotion* becomes a queen. Returns ``False`` when the
        source square is empty.
        """
        if Rules.is_promotion(position, move):
            move = move.with_promotion(resolve_promotion(promotion or move.promotion))
        return position.apply_move(move)

    @staticmethod
    def is_in_check(position: Position, color: Color) -> bool:
        king_sq = position.find_king(color)
        return king_sq is not None and position.is_attacked(king_sq, color.opposite)

    @staticmethod
    def status(position: Position, side_to_move: Color) -> GameStatus:
        """Classify *position* for *side_to_move*."""
        in_check = Rules.is_in_check(position, side_to_move)
        any_legal = MoveGenerator(position).has_legal_move(side_to_move)

        if not any_legal:
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if in_check:
            return GameStatus.CHECK
        return GameStatus.NONE

    @staticmethod
    def is_checkmate(position: Position, side_to_move: Color) -> bool:
        return Rules.status(position, side_to_move) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position, side_to_move: Color) -> bool:
        return Rules.status(position, side_to_move) == GameStatus.STALEMATE
