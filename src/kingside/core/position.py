"""Position — board grid plus en-passant square and move counters."""

from __future__ import annotations

from collections.abc import Mapping

from kingside.core.enums import Color, MoveFlag, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    Square,
    in_bounds,
    parse_square,
)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Position:
    """Full chess position: 8×8 grid, en-passant square and clocks.

    Whose turn it is lives with the caller, not here. Pieces are owned by
    the square that holds them; :meth:`clone` never shares a :class:`Piece`
    between two positions.
    """

    __slots__ = ("_grid", "en_passant", "halfmove_clock", "fullmove_number")

    def __init__(
        self,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Position:
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        pos = cls()
        for file, ptype in enumerate(_BACK_RANK):
            pos._grid[0][file] = Piece(Color.WHITE, ptype)
            pos._grid[1][file] = Piece(Color.WHITE, PieceType.PAWN)
            pos._grid[6][file] = Piece(Color.BLACK, PieceType.PAWN)
            pos._grid[7][file] = Piece(Color.BLACK, ptype)
        return pos

    @classmethod
    def from_pieces(
        cls, pieces: Mapping[str, str], en_passant: str | None = None
    ) -> Position:
        """Build a position from ``{"e1": "K", "e8": "k", ...}``.

        Letters follow the uppercase-white convention of :meth:`Piece.from_char`.
        """
        pos = cls(en_passant=parse_square(en_passant) if en_passant else None)
        for name, char in pieces.items():
            pos.set(parse_square(name), Piece.from_char(char))
        return pos

    # ── Element access ───────────────────────────────────────────────────

    def get(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` for an empty or off-board square."""
        rank, file = sq
        if not in_bounds(rank, file):
            return None
        return self._grid[rank][file]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq.rank][sq.file] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set(sq, piece)

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs of *color*."""
        return [
            (sq, piece)
            for sq in ALL_SQUARES
            if (piece := self._grid[sq.rank][sq.file]) is not None
            and piece.color == color
        ]

    # ── Queries ──────────────────────────────────────────────────────────

    def find_king(self, color: Color) -> Square | None:
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    def is_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        from kingside.core.move_generator import MoveGenerator

        gen = MoveGenerator(self)
        for from_sq, _ in self.pieces(by_color):
            for move in gen.raw_moves(from_sq, for_attack=True):
                if move.to_sq == sq:
                    return True
        return False

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move, *, update_flags: bool = True) -> bool:
        """Apply *move* in place. Returns ``False`` if the source square is empty.

        With *update_flags* unset (legality probing) only the pieces move:
        has-moved flags of the mover, the en-passant square and the clocks
        are left alone.
        """
        piece = self.get(move.from_sq)
        if piece is None:
            return False

        from_sq, to_sq = move.from_sq, move.to_sq
        is_capture = self.get(to_sq) is not None

        placed = piece
        if (
            piece.piece_type == PieceType.PAWN
            and move.promotion is not None
            and to_sq.rank in (0, BOARD_SIZE - 1)
        ):
            placed = Piece(piece.color, move.promotion, has_moved=True)

        if move.flag == MoveFlag.EN_PASSANT:
            # The captured pawn sits beside the mover, behind the target square.
            self.set(Square(from_sq.rank, to_sq.file), None)
            is_capture = True
        elif move.flag == MoveFlag.CASTLE_KINGSIDE:
            self._slide_rook(to_sq.rank, 7, to_sq.file - 1)
        elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
            self._slide_rook(to_sq.rank, 0, to_sq.file + 1)

        self.set(from_sq, None)
        self.set(to_sq, placed)

        if update_flags:
            placed.has_moved = True

            self.en_passant = None
            is_pawn = piece.piece_type == PieceType.PAWN
            if is_pawn and abs(to_sq.rank - from_sq.rank) == 2:
                mid_rank = (from_sq.rank + to_sq.rank) // 2
                self.en_passant = Square(mid_rank, from_sq.file)

            if is_pawn or is_capture:
                self.halfmove_clock = 0
            else:
                self.halfmove_clock += 1

            if piece.color == Color.BLACK:
                self.fullmove_number += 1
        return True

    def _slide_rook(self, rank: int, from_file: int, to_file: int) -> None:
        rook = self.get(Square(rank, from_file))
        self.set(Square(rank, from_file), None)
        self.set(Square(rank, to_file), rook)
        if rook is not None:
            rook.has_moved = True

    # ── Utilities ────────────────────────────────────────────────────────

    def clone(self) -> Position:
        """Deep copy: every piece is a fresh object."""
        pos = Position(
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
        pos._grid = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]
        return pos

    def _snapshot(self) -> tuple[object, ...]:
        cells = tuple(
            (str(piece), piece.has_moved) if piece is not None else None
            for row in self._grid
            for piece in row
        )
        return (cells, self.en_passant, self.halfmove_clock, self.fullmove_number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._snapshot() == other._snapshot()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
