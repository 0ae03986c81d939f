"""Move value object produced by the rules engine."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessgrid.core.enums import PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A single legal move as offered to the board controller.

    *captured* is the piece removed by the move (the passed pawn for en
    passant); *promotion* is set for pawn promotions.
    """

    origin: Position
    destination: Position
    captured: Piece | None = None
    is_castling: bool = False
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    def with_promotion(self, piece_type: PieceType) -> Move:
        """Return the same move promoting to *piece_type*."""
        if piece_type not in _PROMO_CHARS:
            raise ValueError(f"Cannot promote to {piece_type.name}")
        return replace(self, promotion=piece_type)

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        base = f"{self.origin}{self.destination}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    def __str__(self) -> str:
        return self.uci
