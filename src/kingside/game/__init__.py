"""Game management layer — turn ownership and move submission.

Quick start::

    from kingside.game import GameController

    ctrl = GameController()
    move = ctrl.find_move(parse_square("e2"), parse_square("e4"))
    ctrl.submit_move(move)
"""

from kingside.game.controller import GameController, GameEvents

__all__ = [
    "GameController",
    "GameEvents",
]
