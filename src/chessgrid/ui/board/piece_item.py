"""PieceItem — SVG chess piece shown in a square's piece layer."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem

from chessgrid.core.piece import Piece
from chessgrid.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single chess piece scaled to fit one tile.

    Create instances through :func:`make_piece_item`, which returns ``None``
    when the piece's asset cannot be loaded.
    """

    _MARGIN_RATIO = 0.03

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__()
        self.piece = piece
        self._margin = 0.0

        renderer = piece_renderer(piece)
        if renderer is not None:
            self.setSharedRenderer(renderer)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self._update_size(tile_size)
        self.setPos(self._margin, self._margin)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    def _update_size(self, size: int) -> None:
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)

        renderer = self.renderer()
        if renderer is None or not renderer.isValid():
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        self.setScale(min(draw_size / width, draw_size / height))


def make_piece_item(piece: Piece, tile_size: int) -> PieceItem | None:
    """Build the visual for *piece*, or ``None`` if its asset is missing."""
    if piece_renderer(piece) is None:
        return None
    return PieceItem(piece, tile_size)
