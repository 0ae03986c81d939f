"""Piece rendering helpers for chess SVG assets."""

from __future__ import annotations

import logging
from functools import lru_cache

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QImage, QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.runtime_assets import asset_path

_LOGGER = logging.getLogger(__name__)

_ASSETS_DIR = asset_path("pieces")

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}

_COLOR_SUFFIX: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}

# One file per piece; built from the full enums so every piece has an entry.
PIECE_FILES: dict[Piece, str] = {
    piece: f"{_PIECE_NAMES[piece.piece_type]}-{_COLOR_SUFFIX[piece.color]}.svg"
    for piece in Piece.all()
}

# Cache SVG renderers (one per piece); ``None`` marks an asset that failed to load
_renderers: dict[Piece, QSvgRenderer | None] = {}


def piece_renderer(piece: Piece) -> QSvgRenderer | None:
    """Return a cached SVG renderer for *piece*, or ``None`` if the asset is missing."""
    if piece not in _renderers:
        path = _ASSETS_DIR / PIECE_FILES[piece]
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            _LOGGER.warning("SVG asset not found or invalid: %s", path)
            _renderers[piece] = None
        else:
            _renderers[piece] = renderer
    return _renderers[piece]


@lru_cache(maxsize=64)
def piece_pixmap(piece: Piece, size: int) -> QPixmap:
    """Render *piece* as a *size* × *size* QPixmap (transparent if the asset is missing)."""
    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    renderer = piece_renderer(piece)
    if renderer is not None:
        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        margin = int(size * 0.03)
        target = QRectF(margin, margin, size - 2 * margin, size - 2 * margin)
        renderer.render(painter, target)
        painter.end()

    return QPixmap.fromImage(image)
