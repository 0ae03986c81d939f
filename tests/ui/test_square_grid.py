"""Tests for SquareGrid layout, layers and transient handlers."""

from __future__ import annotations

from PyQt6.QtCore import QPointF
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene

from chessgrid.core.types import ALL_POSITIONS, Position
from chessgrid.ui.board.square_grid import SquareGrid
from chessgrid.ui.styles.theme import BoardTheme

TILE = 64


def _grid() -> tuple[QGraphicsScene, SquareGrid]:
    scene = QGraphicsScene()
    return scene, SquareGrid(scene, TILE, BoardTheme.default())


def test_grid_has_one_square_per_position_in_index_order() -> None:
    _scene, grid = _grid()
    assert len(grid) == 64
    assert [sq.position for sq in grid] == list(ALL_POSITIONS)
    for pos in ALL_POSITIONS:
        assert grid.square_at(pos).position == pos


def test_squares_laid_out_with_a8_top_left() -> None:
    scene, grid = _grid()
    assert grid.scene_pos(Position.parse("a8")) == QPointF(0, 0)
    assert grid.scene_pos(Position.parse("h1")) == QPointF(7 * TILE, 7 * TILE)
    assert grid.scene_pos(Position.parse("e2")) == QPointF(4 * TILE, 6 * TILE)
    assert scene.sceneRect().width() == 8 * TILE


def test_position_at_maps_scene_points() -> None:
    _scene, grid = _grid()
    assert grid.position_at(QPointF(1, 1)) == Position.parse("a8")
    assert grid.position_at(QPointF(4 * TILE + 10, 6 * TILE + 10)) == Position.parse(
        "e2"
    )
    assert grid.position_at(QPointF(-1, 5)) is None
    assert grid.position_at(QPointF(8 * TILE, 5)) is None


def test_square_colours_follow_theme() -> None:
    _scene, grid = _grid()
    theme = BoardTheme.default()
    a1 = grid.square_at(Position.parse("a1"))
    h1 = grid.square_at(Position.parse("h1"))
    assert a1.brush().color() == theme.dark_square
    assert h1.brush().color() == theme.light_square


def test_layers_are_independent() -> None:
    scene, grid = _grid()
    pos = Position.parse("d4")
    highlight = QGraphicsRectItem(0, 0, TILE, TILE)
    piece = QGraphicsRectItem(0, 0, 10, 10)

    grid.set_highlight(pos, highlight)
    grid.set_piece(pos, piece)
    square = grid.square_at(pos)
    assert square.highlight is highlight
    assert square.piece is piece
    assert highlight.zValue() < piece.zValue()

    grid.set_highlight(pos, None)
    assert square.highlight is None
    assert square.piece is piece
    assert highlight.scene() is None
    assert piece.scene() is scene


def test_set_replaces_previous_visual() -> None:
    _scene, grid = _grid()
    pos = Position.parse("a1")
    first = QGraphicsRectItem(0, 0, 1, 1)
    second = QGraphicsRectItem(0, 0, 1, 1)

    grid.set_piece(pos, first)
    grid.set_piece(pos, second)

    assert grid.square_at(pos).piece is second
    assert first.scene() is None
    assert len(grid.occupied()) == 1


def test_clear_helpers_reset_every_square() -> None:
    _scene, grid = _grid()
    for name in ("a1", "b2", "c3"):
        pos = Position.parse(name)
        grid.set_highlight(pos, QGraphicsRectItem(0, 0, 1, 1))
        grid.set_piece(pos, QGraphicsRectItem(0, 0, 1, 1))
    assert len(grid.highlighted()) == 3

    grid.clear_highlights()
    assert grid.highlighted() == []
    assert len(grid.occupied()) == 3

    grid.clear_pieces()
    assert grid.occupied() == []


def test_bind_and_unbind_handler() -> None:
    _scene, grid = _grid()
    square = grid.square_at(Position.parse("e4"))
    calls: list[str] = []

    square.bind(lambda: calls.append("first"))
    square.bind(lambda: calls.append("second"))
    assert grid.bound_squares() == [square]
    assert square.handler is not None
    square.handler()
    assert calls == ["second"]

    square.unbind()
    assert square.handler is None
    assert grid.bound_squares() == []


def test_show_coordinates_toggles_labels() -> None:
    _scene, grid = _grid()
    assert len(grid._coord_items) == 16

    grid.set_show_coordinates(False)
    assert all(not item.isVisible() for item in grid._coord_items)

    grid.set_show_coordinates(True)
    assert all(item.isVisible() for item in grid._coord_items)


def test_set_theme_recolours_squares() -> None:
    _scene, grid = _grid()
    blue = BoardTheme.blue()
    grid.set_theme(blue)
    assert grid.square_at(Position.parse("a1")).brush().color() == blue.dark_square
