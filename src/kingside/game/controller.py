"""GameController — owns the live position and whose turn it is.

Coordinates: Position, Rules. Emits events via simple callbacks so the UI /
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.enums import Color, GameStatus, PieceType
from kingside.core.move import Move
from kingside.core.position import Position
from kingside.core.rules import Rules
from kingside.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Color], None]  # move, color that moved
StatusCallback = Callable[[GameStatus, Color], None]  # status, side to move
GameOverCallback = Callable[[GameStatus, Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game: validates moves, applies them to the live
    position, switches turns, notifies listeners.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_position", "_side_to_move", "_status", "_last_move", "events")

    def __init__(self) -> None:
        self._position = Position.initial()
        self._side_to_move = Color.WHITE
        self._status = GameStatus.NONE
        self._last_move: Move | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        position: Position | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Reset to *position* (the standard start by default)."""
        self._position = position if position is not None else Position.initial()
        self._side_to_move = side_to_move
        self._last_move = None
        self._status = Rules.status(self._position, side_to_move)
        self._emit_status()

    # ── Move selection / submission ──────────────────────────────────────

    def select(self, sq: Square) -> list[Move]:
        """Legal moves of the side to move's piece on *sq*."""
        if self.is_game_over:
            return []
        piece = self._position.get(sq)
        if piece is None or piece.color != self._side_to_move:
            return []
        return Rules.legal_moves(self._position, sq)

    def find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move from *from_sq* to *to_sq*, if there is one."""
        for move in self.select(from_sq):
            if move.to_sq == to_sq:
                return move
        return None

    def needs_promotion(self, move: Move) -> bool:
        return Rules.is_promotion(self._position, move)

    def submit_move(
        self, move: Move, promotion: PieceType | str | None = None
    ) -> bool:
        """Submit a move. Returns True if legal and applied.

        Only the squares of *move* are matched against the legal moves; the
        special-move flag is taken from the generator.
        """
        if self.is_game_over:
            _LOGGER.debug("Rejected %s: game is over", move)
            return False

        legal = self.find_move(move.from_sq, move.to_sq)
        if legal is None:
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        mover = self._side_to_move
        if not Rules.apply_move(self._position, legal, promotion or move.promotion):
            return False

        self._last_move = legal
        self._side_to_move = mover.opposite
        self._status = Rules.status(self._position, self._side_to_move)
        _LOGGER.debug("%s played %s -> %s", mover, legal, self._status.name)

        self._emit_move(legal, mover)
        self._emit_status()
        if self.is_game_over:
            _LOGGER.info(
                "Game over: %s with %s to move", self._status.name, self._side_to_move
            )
            self._emit_game_over()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, mover: Color) -> None:
        for cb in self.events.on_move:
            cb(move, mover)

    def _emit_status(self) -> None:
        for cb in self.events.on_status:
            cb(self._status, self._side_to_move)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._status, self._side_to_move)
