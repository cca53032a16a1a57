"""Square type and coordinate helpers.

Board layout: ``Square(rank, file)`` with both indexes in ``0..7``.
Rank 0 is White's back rank ("1"), file 0 is the a-file::

    Square(0, 0) = a1, Square(0, 7) = h1
    Square(7, 0) = a8, Square(7, 7) = h8
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board coordinate."""

    rank: int
    file: int

    def offset(self, dr: int, df: int) -> Square:
        """Square shifted by *dr* ranks and *df* files (may be off-board)."""
        return Square(self.rank + dr, self.file + df)

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(rank: int, file: int) -> bool:
    """Whether (*rank*, *file*) lies on the board."""
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(0, 0)`` → ``'a1'``."""
    return chr(ord("a") + sq.file) + str(sq.rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(3, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(int(name[1]) - 1, ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, f) for f in range(8))
