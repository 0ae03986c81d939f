"""BoardStateSync — projects the board model onto the grid's piece layer."""

from __future__ import annotations

from chessgrid.core.board_model import BoardModel
from chessgrid.core.types import ALL_POSITIONS
from chessgrid.ui.board.piece_item import make_piece_item
from chessgrid.ui.board.square_grid import SquareGrid


class BoardStateSync:
    """Full-refresh renderer for piece visuals.

    Every refresh clears all 64 piece layers and rebuilds them from the
    model. A piece whose asset is missing leaves its square empty.
    """

    def __init__(self, grid: SquareGrid) -> None:
        self._grid = grid

    def refresh(self, model: BoardModel) -> None:
        grid = self._grid
        grid.clear_pieces()
        for pos in ALL_POSITIONS:
            piece = model.piece_at(pos)
            if piece is None:
                continue
            grid.set_piece(pos, make_piece_item(piece, grid.tile))
