"""SelectionController — click-driven piece selection and move targeting."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

from chessgrid.core.board_model import BoardModel
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move import Move
from chessgrid.core.types import Position
from chessgrid.ui.board.highlights import HighlightKind, make_highlight
from chessgrid.ui.board.square_grid import SquareGrid
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

CommitCallback = Callable[[Move], None]
PromotionChooser = Callable[[Color], PieceType | None]


def _always_queen(_color: Color) -> PieceType | None:
    return PieceType.QUEEN


@dataclass
class Selection:
    """A live selection: the origin square and the move bound to each destination."""

    origin: Position
    destinations: dict[Position, Move] = field(default_factory=dict)


class SelectionController:
    """Two-state machine: Idle (no selection) or Selected.

    * Idle + click on a piece of the side to move with legal moves → Selected.
    * Selected + click on the origin → Idle.
    * Selected + click on another non-destination square → drop the
      selection, then treat the click as a fresh selection attempt.
    * Selected + click on a destination → the square's transient handler
      hands the bound move to *on_commit*. Highlights and handlers stay in
      place until the commit completes and calls :meth:`clear`.
    """

    def __init__(
        self,
        grid: SquareGrid,
        theme: BoardTheme,
        *,
        on_commit: CommitCallback,
        promotion_chooser: PromotionChooser | None = None,
    ) -> None:
        self._grid = grid
        self._theme = theme
        self._on_commit = on_commit
        self._choose_promotion = promotion_chooser or _always_queen
        self._model: BoardModel | None = None
        self._selection: Selection | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def selection(self) -> Selection | None:
        return self._selection

    @property
    def is_selected(self) -> bool:
        return self._selection is not None

    def set_model(self, model: BoardModel) -> None:
        self._model = model

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme

    def set_promotion_chooser(self, chooser: PromotionChooser) -> None:
        self._choose_promotion = chooser

    # ── Input ────────────────────────────────────────────────────────────

    def handle_click(self, pos: Position) -> None:
        square = self._grid.square_at(pos)
        if square.handler is not None:
            square.handler()
            return

        if self._selection is not None:
            if pos == self._selection.origin:
                _LOGGER.debug("Deselected %s", pos)
                self.clear()
                return
            self.clear()

        self._try_select(pos)

    def _try_select(self, pos: Position) -> None:
        model = self._model
        if model is None:
            return
        piece = model.piece_at(pos)
        if piece is None or piece.color != model.side_to_move:
            return
        moves = model.legal_moves(pos)
        if not moves:
            return

        tile = self._grid.tile
        self._grid.set_highlight(
            pos, make_highlight(HighlightKind.SELECTED, tile, self._theme)
        )
        selection = Selection(pos)
        for move in moves:
            kind = (
                HighlightKind.CAPTURE_TARGET
                if move.is_capture
                else HighlightKind.QUIET_TARGET
            )
            self._grid.set_highlight(
                move.destination, make_highlight(kind, tile, self._theme)
            )
            self._grid.square_at(move.destination).bind(
                partial(self._on_destination_clicked, move)
            )
            selection.destinations[move.destination] = move
        self._selection = selection
        _LOGGER.debug("Selected %s with %d legal moves", pos, len(moves))

    def _on_destination_clicked(self, move: Move) -> None:
        if move.is_promotion and self._model is not None:
            piece_type = self._choose_promotion(self._model.side_to_move)
            if piece_type is None:
                return
            move = move.with_promotion(piece_type)
        self._on_commit(move)

    # ── Highlights ───────────────────────────────────────────────────────

    def clear(self) -> None:
        """Drop the selection: remove every highlight and transient handler.

        The check indicator is redrawn afterwards.
        """
        self._grid.clear_highlights()
        for square in self._grid.bound_squares():
            square.unbind()
        self._selection = None
        self.draw_check()

    def show_last_move(self, move: Move) -> None:
        """Mark both ends of *move*; a check marker drawn afterwards wins."""
        tile = self._grid.tile
        for pos in (move.origin, move.destination):
            self._grid.set_highlight(
                pos, make_highlight(HighlightKind.LAST_MOVE, tile, self._theme)
            )
        self.draw_check()

    def draw_check(self) -> None:
        model = self._model
        if model is None:
            return
        for color in Color:
            if not model.is_in_check(color):
                continue
            king = model.king_position(color)
            if king is not None:
                self._grid.set_highlight(
                    king,
                    make_highlight(HighlightKind.CHECK, self._grid.tile, self._theme),
                )
