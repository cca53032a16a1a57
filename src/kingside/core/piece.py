"""Piece record: fixed identity plus the has-moved flag."""

from __future__ import annotations

from kingside.core.enums import Color, PieceType

# Indexed by PieceType - 1 (pawn .. king)
_LETTERS = "PNBRQK"
_GLYPHS: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}


class Piece:
    """A chess piece.

    ``color`` and ``piece_type`` are read-only; a promoted pawn is replaced
    by a new instance. ``has_moved`` drives the castling rules and is left
    out of equality and hashing.
    """

    __slots__ = ("_color", "_piece_type", "has_moved")

    def __init__(
        self, color: Color, piece_type: PieceType, has_moved: bool = False
    ) -> None:
        self._color = color
        self._piece_type = piece_type
        self.has_moved = has_moved

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (self._color, self._piece_type) == (other._color, other._piece_type)

    def __hash__(self) -> int:
        return hash((self._color, self._piece_type))

    def __repr__(self) -> str:
        return (
            f"Piece({self._color.name}, {self._piece_type.name}, "
            f"has_moved={self.has_moved})"
        )

    def __str__(self) -> str:
        """Piece letter, uppercase for white."""
        letter = _LETTERS[self._piece_type - 1]
        return letter if self._color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a piece letter: ``"N"`` is a white knight, ``"q"`` a black queen."""
        if len(char) != 1 or char.upper() not in _LETTERS:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(_LETTERS.index(char.upper()) + 1))

    @property
    def symbol(self) -> str:
        """Unicode glyph used on the board."""
        return _GLYPHS[self._color][self._piece_type - 1]

    def copy(self) -> Piece:
        return Piece(self._color, self._piece_type, self.has_moved)
