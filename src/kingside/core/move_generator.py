"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from kingside.core.enums import Color, MoveFlag, PieceType
from kingside.core.move import Move
from kingside.core.types import ALL_SQUARES, Square, in_bounds

if TYPE_CHECKING:
    from kingside.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Per color: (forward rank step, starting rank, back rank)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 1, 0),
    Color.BLACK: (-1, 6, 7),
}


def pawn_direction(color: Color) -> int:
    """Rank step of a forward pawn move for *color*."""
    return _PAWN_GEOMETRY[color][0]


def back_rank(color: Color) -> int:
    """Home rank of *color*'s king and rooks."""
    return _PAWN_GEOMETRY[color][2]


def promotion_rank(color: Color) -> int:
    """Last rank for *color*'s pawns."""
    return back_rank(color.opposite)


class MoveGenerator:
    """Generates moves for pieces of a given :class:`Position`.

    Legality probing never touches the wrapped position: every candidate move
    is tried on a private clone.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Moves of the piece on *sq* that do not leave its own king attacked."""
        piece = self._pos.get(sq)
        if piece is None:
            return []

        legal: list[Move] = []
        opponent = piece.color.opposite
        for move in self.raw_moves(sq):
            probe = self._pos.clone()
            probe.apply_move(move, update_flags=False)
            king_sq = probe.find_king(piece.color)
            if king_sq is not None and not probe.is_attacked(king_sq, opponent):
                legal.append(move)
        return legal

    def legal_moves_for(self, color: Color) -> Iterator[Move]:
        """Lazily yield every legal move of *color*."""
        for sq in ALL_SQUARES:
            piece = self._pos.get(sq)
            if piece is not None and piece.color == color:
                yield from self.legal_moves(sq)

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        return next(self.legal_moves_for(color), None) is not None

    def raw_moves(self, sq: Square, for_attack: bool = False) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq*.

        With *for_attack* only capture-capable threats are produced: pawn
        pushes and castling are dropped, and pawns report both forward
        diagonals.
        """
        piece = self._pos.get(sq)
        if piece is None:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, for_attack, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
            if not for_attack and not piece.has_moved:
                self._gen_castling(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_DIRS[ptype], moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(
        self, sq: Square, color: Color, for_attack: bool, moves: list[Move]
    ) -> None:
        pos = self._pos
        step = pawn_direction(color)
        start_rank = _PAWN_GEOMETRY[color][1]
        ahead = sq.rank + step

        if not for_attack and in_bounds(ahead, sq.file):
            one_step = Square(ahead, sq.file)
            if pos.get(one_step) is None:
                moves.append(Move(sq, one_step))
                two_step = Square(ahead + step, sq.file)
                if sq.rank == start_rank and pos.get(two_step) is None:
                    moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        for df in (-1, 1):
            if not in_bounds(ahead, sq.file + df):
                continue
            cap_sq = Square(ahead, sq.file + df)
            target = pos.get(cap_sq)
            if target is not None:
                if target.color != color:
                    moves.append(Move(sq, cap_sq))
            elif cap_sq == pos.en_passant:
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))
            elif for_attack:
                moves.append(Move(sq, cap_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        pos = self._pos
        for dr, df in offsets:
            if not in_bounds(sq.rank + dr, sq.file + df):
                continue
            to_sq = sq.offset(dr, df)
            target = pos.get(to_sq)
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        pos = self._pos
        for dr, df in directions:
            rank, file = sq.rank + dr, sq.file + df
            while in_bounds(rank, file):
                to_sq = Square(rank, file)
                target = pos.get(to_sq)
                if target is None:
                    moves.append(Move(sq, to_sq))
                else:
                    if target.color != color:
                        moves.append(Move(sq, to_sq))
                    break
                rank += dr
                file += df

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        rank = back_rank(color)
        if king_sq != Square(rank, 4):
            return

        # (rook file, files that must be empty, files the king crosses, flag)
        sides = (
            (7, (5, 6), (4, 5, 6), MoveFlag.CASTLE_KINGSIDE),
            (0, (1, 2, 3), (2, 3, 4), MoveFlag.CASTLE_QUEENSIDE),
        )
        for rook_file, between, path, flag in sides:
            if self._can_castle(color, rank, rook_file, between, path):
                to_file = 6 if flag == MoveFlag.CASTLE_KINGSIDE else 2
                moves.append(Move(king_sq, Square(rank, to_file), flag))

    def _can_castle(
        self,
        color: Color,
        rank: int,
        rook_file: int,
        between: tuple[int, ...],
        path: tuple[int, ...],
    ) -> bool:
        pos = self._pos
        rook = pos.get(Square(rank, rook_file))
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
            or rook.has_moved
        ):
            return False
        if any(pos.get(Square(rank, f)) is not None for f in between):
            return False
        opponent = color.opposite
        return not any(pos.is_attacked(Square(rank, f), opponent) for f in path)
