"""Core domain layer — value objects and the python-chess backed board model.

Quick start::

    from chessgrid.core import BoardModel, Position

    model = BoardModel()
    for move in model.legal_moves(Position.parse("e2")):
        print(move)
"""

from chessgrid.core.board_model import BoardModel, EndgameInfo, ModelEvents
from chessgrid.core.enums import Color, EndgameType, PieceType
from chessgrid.core.move import Move
from chessgrid.core.piece import Piece
from chessgrid.core.types import ALL_POSITIONS, Position

__all__ = [
    # Enums
    "Color",
    "EndgameType",
    "PieceType",
    # Value objects
    "ALL_POSITIONS",
    "Move",
    "Piece",
    "Position",
    # Model
    "BoardModel",
    "EndgameInfo",
    "ModelEvents",
]
