"""Highlight visuals placed in a square's highlight layer."""

from __future__ import annotations

from enum import IntEnum, auto

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPen, QRadialGradient
from PyQt6.QtWidgets import (
    QAbstractGraphicsShapeItem,
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
)

from chessgrid.ui.styles.theme import BoardTheme

_KIND_ROLE = 0  # QGraphicsItem.data() key holding the HighlightKind


class HighlightKind(IntEnum):
    """What a highlight marks."""

    SELECTED = auto()  # origin of the current selection
    QUIET_TARGET = auto()  # legal non-capturing destination
    CAPTURE_TARGET = auto()  # legal capturing destination
    LAST_MOVE = auto()  # origin / destination of the last move
    CHECK = auto()  # king in check


def _ring_brush(color: QColor, tile: float) -> QBrush:
    """Radial fade: clear centre, solid *color* toward the tile edge."""
    centre = QPointF(tile / 2, tile / 2)
    gradient = QRadialGradient(centre, tile / 2, centre)
    clear = QColor(color)
    clear.setAlpha(0)
    half = QColor(color)
    half.setAlpha(color.alpha() // 2)
    gradient.setColorAt(0.0, clear)
    gradient.setColorAt(0.2, clear)
    gradient.setColorAt(0.7, half)
    gradient.setColorAt(1.0, color)
    return QBrush(gradient)


def make_highlight(kind: HighlightKind, tile: int, theme: BoardTheme) -> QGraphicsItem:
    """Create the overlay item for *kind*, in tile-local coordinates."""
    t = float(tile)
    item: QAbstractGraphicsShapeItem
    if kind == HighlightKind.QUIET_TARGET:
        item = QGraphicsEllipseItem(QRectF(t / 4, t / 4, t / 2, t / 2))
        item.setBrush(QBrush(theme.highlight_target))
    elif kind == HighlightKind.CAPTURE_TARGET:
        item = QGraphicsRectItem(QRectF(0, 0, t, t))
        item.setBrush(_ring_brush(theme.highlight_target, t))
    elif kind == HighlightKind.CHECK:
        item = QGraphicsRectItem(QRectF(0, 0, t, t))
        item.setBrush(_ring_brush(theme.highlight_check, t))
    elif kind == HighlightKind.LAST_MOVE:
        item = QGraphicsRectItem(QRectF(0, 0, t, t))
        item.setBrush(QBrush(theme.highlight_last_move))
    else:
        item = QGraphicsRectItem(QRectF(0, 0, t, t))
        item.setBrush(QBrush(theme.highlight_selected))
    item.setPen(QPen(Qt.PenStyle.NoPen))
    item.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
    item.setData(_KIND_ROLE, int(kind))
    return item


def highlight_kind(item: QGraphicsItem | None) -> HighlightKind | None:
    """Read back the kind stored by :func:`make_highlight`."""
    if item is None:
        return None
    value = item.data(_KIND_ROLE)
    if value is None:
        return None
    return HighlightKind(value)
