"""SquareGrid — the 64 board cells and their highlight / piece layers."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QFont, QPainterPath, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsPathItem,
    QGraphicsScene,
    QGraphicsSceneHoverEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.types import ALL_POSITIONS, Position
from chessgrid.ui.styles.theme import BoardTheme

ClickHandler = Callable[[], None]

_CORNER_RADIUS = 5.0
_HOVER_OPACITY = 0.82

# Board corners in white's orientation (rank 8 at the top)
_CORNERS: dict[Position, Qt.Corner] = {
    Position(0, 7): Qt.Corner.TopLeftCorner,
    Position(7, 7): Qt.Corner.TopRightCorner,
    Position(0, 0): Qt.Corner.BottomLeftCorner,
    Position(7, 0): Qt.Corner.BottomRightCorner,
}


def _square_path(tile: float, corner: Qt.Corner | None) -> QPainterPath:
    """Tile outline, rounded only at *corner*."""
    rect = QRectF(0, 0, tile, tile)
    path = QPainterPath()
    if corner is None:
        path.addRect(rect)
        return path

    path.addRoundedRect(rect, _CORNER_RADIUS, _CORNER_RADIUS)
    r = _CORNER_RADIUS
    fills = {
        Qt.Corner.TopLeftCorner: QRectF(0, 0, r, r),
        Qt.Corner.TopRightCorner: QRectF(tile - r, 0, r, r),
        Qt.Corner.BottomLeftCorner: QRectF(0, tile - r, r, r),
        Qt.Corner.BottomRightCorner: QRectF(tile - r, tile - r, r, r),
    }
    squared = QPainterPath()
    for which, fill in fills.items():
        if which != corner:
            squared.addRect(fill)
    return path.united(squared)


class SquareItem(QGraphicsPathItem):
    """One board cell bound to a fixed Position.

    Owns two independent child slots, *highlight* (below) and *piece*
    (above), plus at most one transient click handler.
    """

    _HIGHLIGHT_Z = 0.5
    _PIECE_Z = 1.0

    def __init__(self, position: Position, tile: int, theme: BoardTheme) -> None:
        super().__init__(_square_path(float(tile), _CORNERS.get(position)))
        self.position = position
        self._highlight: QGraphicsItem | None = None
        self._piece: QGraphicsItem | None = None
        self._handler: ClickHandler | None = None

        self.setAcceptHoverEvents(True)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.apply_theme(theme)

    def apply_theme(self, theme: BoardTheme) -> None:
        color = theme.light_square if self.position.is_light else theme.dark_square
        self.setBrush(QBrush(color))
        pen = QPen(theme.grid_line)
        pen.setWidthF(0.3)
        self.setPen(pen)

    # ── Layers ───────────────────────────────────────────────────────────

    @property
    def highlight(self) -> QGraphicsItem | None:
        return self._highlight

    @property
    def piece(self) -> QGraphicsItem | None:
        return self._piece

    def set_highlight(self, visual: QGraphicsItem | None) -> None:
        self._detach(self._highlight)
        self._highlight = visual
        if visual is not None:
            visual.setParentItem(self)
            visual.setZValue(self._HIGHLIGHT_Z)

    def set_piece(self, visual: QGraphicsItem | None) -> None:
        self._detach(self._piece)
        self._piece = visual
        if visual is not None:
            visual.setParentItem(self)
            visual.setZValue(self._PIECE_Z)

    def _detach(self, visual: QGraphicsItem | None) -> None:
        if visual is None:
            return
        scene = visual.scene()
        if scene is not None:
            scene.removeItem(visual)
        else:
            visual.setParentItem(None)

    # ── Transient click handler ──────────────────────────────────────────

    @property
    def handler(self) -> ClickHandler | None:
        return self._handler

    def bind(self, handler: ClickHandler) -> None:
        self._handler = handler

    def unbind(self) -> None:
        self._handler = None

    # ── Hover feedback ───────────────────────────────────────────────────

    def hoverEnterEvent(self, event: QGraphicsSceneHoverEvent | None) -> None:
        self.setOpacity(_HOVER_OPACITY)
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event: QGraphicsSceneHoverEvent | None) -> None:
        self.setOpacity(1.0)
        super().hoverLeaveEvent(event)


class SquareGrid:
    """Fixed 8×8 arrangement of :class:`SquareItem` s inside a scene.

    Squares are stored row-major from a8, so ``Position.index`` addresses
    them directly. The grid carries no game semantics.
    """

    def __init__(self, scene: QGraphicsScene, tile: int, theme: BoardTheme) -> None:
        self._scene = scene
        self._tile = tile
        self._theme = theme
        self._squares: list[SquareItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._show_coordinates = True

        for pos in ALL_POSITIONS:
            square = SquareItem(pos, tile, theme)
            row, col = divmod(pos.index, 8)
            square.setPos(col * tile, row * tile)
            square.setZValue(0)
            scene.addItem(square)
            self._squares.append(square)

        self._draw_coordinates()
        scene.setSceneRect(0, 0, 8 * tile, 8 * tile)

    # ── Lookup ───────────────────────────────────────────────────────────

    @property
    def tile(self) -> int:
        return self._tile

    def square_at(self, pos: Position) -> SquareItem:
        return self._squares[pos.index]

    def __iter__(self) -> Iterator[SquareItem]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def position_at(self, point: QPointF) -> Position | None:
        """Scene point → board position, or ``None`` off the board."""
        t = self._tile
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return Position.from_index(row * 8 + col)

    def scene_pos(self, pos: Position) -> QPointF:
        """Top-left scene coordinates of the square at *pos*."""
        return self.square_at(pos).scenePos()

    # ── Layers ───────────────────────────────────────────────────────────

    def set_highlight(self, pos: Position, visual: QGraphicsItem | None) -> None:
        self.square_at(pos).set_highlight(visual)

    def set_piece(self, pos: Position, visual: QGraphicsItem | None) -> None:
        self.square_at(pos).set_piece(visual)

    def clear_highlights(self) -> None:
        for square in self._squares:
            square.set_highlight(None)

    def clear_pieces(self) -> None:
        for square in self._squares:
            square.set_piece(None)

    def highlighted(self) -> list[SquareItem]:
        return [sq for sq in self._squares if sq.highlight is not None]

    def occupied(self) -> list[SquareItem]:
        return [sq for sq in self._squares if sq.piece is not None]

    def bound_squares(self) -> list[SquareItem]:
        return [sq for sq in self._squares if sq.handler is not None]

    # ── Appearance ───────────────────────────────────────────────────────

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        for square in self._squares:
            square.apply_theme(theme)
        for item in self._coord_items:
            item.setBrush(QBrush(theme.coord_text))

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def _draw_coordinates(self) -> None:
        t = self._tile
        font = QFont("Segoe UI", max(7, t // 8))

        for pos in ALL_POSITIONS:
            row, col = divmod(pos.index, 8)
            labels: list[tuple[str, float, float]] = []
            # File letters (bottom edge)
            if pos.rank == 0:
                labels.append((pos.name[0], col * t + 2, row * t + t - 16))
            # Rank numbers (right edge)
            if pos.file == 7:
                labels.append((pos.name[1], col * t + t - 10, row * t + 1))
            for text, x, y in labels:
                txt = QGraphicsSimpleTextItem(text)
                txt.setFont(font)
                txt.setBrush(QBrush(self._theme.coord_text))
                txt.setPos(x, y)
                txt.setZValue(0.3)
                txt.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
                txt.setVisible(self._show_coordinates)
                self._scene.addItem(txt)
                self._coord_items.append(txt)
