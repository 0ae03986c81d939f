"""BoardModel — authoritative game state backed by python-chess.

The board controller never touches ``chess.Board`` directly; it reads and
mutates the game through this adapter only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import chess
import chess.pgn

from chessgrid.core.enums import Color, EndgameType, PieceType
from chessgrid.core.move import Move
from chessgrid.core.piece import Piece
from chessgrid.core.types import Position

_LOGGER = logging.getLogger(__name__)

_TERMINATIONS: dict[chess.Termination, EndgameType] = {
    chess.Termination.CHECKMATE: EndgameType.CHECKMATE,
    chess.Termination.STALEMATE: EndgameType.STALEMATE,
    chess.Termination.INSUFFICIENT_MATERIAL: EndgameType.INSUFFICIENT_MATERIAL,
    chess.Termination.SEVENTYFIVE_MOVES: EndgameType.SEVENTYFIVE_MOVES,
    chess.Termination.FIVEFOLD_REPETITION: EndgameType.FIVEFOLD_REPETITION,
}


# ── Conversions ──────────────────────────────────────────────────────────────


def _to_square(pos: Position) -> chess.Square:
    return chess.square(pos.file, pos.rank)


def _to_position(square: chess.Square) -> Position:
    return Position(chess.square_file(square), chess.square_rank(square))


def _to_chess_color(color: Color) -> chess.Color:
    return color == Color.WHITE


def _to_color(color: chess.Color) -> Color:
    return Color.WHITE if color else Color.BLACK


def _to_piece(piece: chess.Piece | None) -> Piece | None:
    if piece is None:
        return None
    return Piece(_to_color(piece.color), PieceType(piece.piece_type))


# ── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class EndgameInfo:
    """Terminal state of a game; *winner* is ``None`` for draws."""

    classification: EndgameType
    winner: Color | None = None


GameOverCallback = Callable[[EndgameInfo], None]


@dataclass
class ModelEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Model ────────────────────────────────────────────────────────────────────


class BoardModel:
    """Authoritative chess position with automatic endgame detection.

    Threefold repetition and the fifty-move rule end the game once the
    position has actually occurred a third time or the hundredth quiet
    half-move has been played; nobody has to claim the draw.
    ``events.on_game_over`` fires at most once per model instance.
    """

    __slots__ = ("_board", "_endgame", "events")

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)
        self._endgame: EndgameInfo | None = None
        self.events = ModelEvents()

    @classmethod
    def from_fen(cls, fen: str) -> BoardModel:
        return cls(fen)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return _to_color(self._board.turn)

    @property
    def endgame(self) -> EndgameInfo | None:
        """Terminal state once the game is over, else ``None``."""
        return self._endgame

    @property
    def is_game_over(self) -> bool:
        return self._endgame is not None

    def piece_at(self, pos: Position) -> Piece | None:
        return _to_piece(self._board.piece_at(_to_square(pos)))

    def king_position(self, color: Color) -> Position | None:
        square = self._board.king(_to_chess_color(color))
        return None if square is None else _to_position(square)

    def is_in_check(self, color: Color) -> bool:
        """Whether *color*'s king is attacked, regardless of side to move."""
        square = self._board.king(_to_chess_color(color))
        if square is None:
            return False
        return self._board.is_attacked_by(_to_chess_color(color.opposite), square)

    def legal_moves(self, pos: Position) -> list[Move]:
        """Legal moves starting on *pos*, one per destination.

        Promotions collapse into a single queen promotion; callers pick the
        final piece with :meth:`Move.with_promotion`.
        """
        if self._endgame is not None:
            return []
        origin = _to_square(pos)
        moves: list[Move] = []
        seen: set[chess.Square] = set()
        for cm in self._board.legal_moves:
            if cm.from_square != origin or cm.to_square in seen:
                continue
            seen.add(cm.to_square)
            moves.append(self._wrap(cm))
        return moves

    def is_legal(self, move: Move) -> bool:
        """Whether *move* can be played now; always ``False`` once the game is over."""
        return self._endgame is None and self._board.is_legal(self._unwrap(move))

    def san(self, move: Move) -> str:
        """Standard algebraic notation of *move*, which must be legal."""
        return self._board.san(self._unwrap(move))

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply(self, move: Move) -> bool:
        """Play *move*. Returns ``False`` (and changes nothing) if illegal."""
        if not self.is_legal(move):
            return False
        self._board.push(self._unwrap(move))
        self._check_endgame()
        return True

    # ── Serialization ────────────────────────────────────────────────────

    def to_fen(self) -> str:
        return self._board.fen()

    def to_pgn(self) -> str:
        game = chess.pgn.Game.from_board(self._board)
        return str(game)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _wrap(self, cm: chess.Move) -> Move:
        board = self._board
        if board.is_en_passant(cm):
            captured = Piece(self.side_to_move.opposite, PieceType.PAWN)
        else:
            captured = _to_piece(board.piece_at(cm.to_square))
        return Move(
            origin=_to_position(cm.from_square),
            destination=_to_position(cm.to_square),
            captured=captured,
            is_castling=board.is_castling(cm),
            promotion=PieceType.QUEEN if cm.promotion is not None else None,
        )

    @staticmethod
    def _unwrap(move: Move) -> chess.Move:
        promotion = None if move.promotion is None else int(move.promotion)
        return chess.Move(
            _to_square(move.origin),
            _to_square(move.destination),
            promotion=promotion,
        )

    def _check_endgame(self) -> None:
        board = self._board
        outcome = board.outcome()
        if outcome is not None:
            winner = None if outcome.winner is None else _to_color(outcome.winner)
            self._endgame = EndgameInfo(_TERMINATIONS[outcome.termination], winner)
        elif board.is_repetition(3):
            self._endgame = EndgameInfo(EndgameType.THREEFOLD_REPETITION)
        elif board.is_fifty_moves():
            self._endgame = EndgameInfo(EndgameType.FIFTY_MOVES)
        else:
            return
        winner = self._endgame.winner
        _LOGGER.info(
            "Game over: %s (winner: %s)",
            self._endgame.classification.label,
            winner if winner is not None else "none",
        )
        for cb in self.events.on_game_over:
            cb(self._endgame)
