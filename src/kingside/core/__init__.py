"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from kingside.core import Color, Position, Rules, parse_square

    pos = Position.initial()
    for move in Rules.legal_moves(pos, parse_square("g1")):
        print(move)
    Rules.apply_move(pos, Rules.legal_moves(pos, parse_square("e2"))[-1])
    print(Rules.status(pos, Color.BLACK))
"""

from kingside.core.enums import Color, GameStatus, MoveFlag, PieceType
from kingside.core.move import Move
from kingside.core.move_generator import MoveGenerator
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.rules import PROMOTION_TYPES, Rules, resolve_promotion
from kingside.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "PROMOTION_TYPES",
    "Square",
    "parse_square",
    "resolve_promotion",
    "square_name",
    # Domain objects
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
]
