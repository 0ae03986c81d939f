"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types; values match python-chess piece type constants."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class EndgameType(IntEnum):
    """Reason a game ended."""

    CHECKMATE = auto()
    STALEMATE = auto()
    INSUFFICIENT_MATERIAL = auto()
    SEVENTYFIVE_MOVES = auto()
    FIVEFOLD_REPETITION = auto()
    FIFTY_MOVES = auto()
    THREEFOLD_REPETITION = auto()

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"threefold repetition"``."""
        return self.name.replace("_", " ").lower()
