"""Tests for the click-driven SelectionController."""

from __future__ import annotations

from PyQt6.QtWidgets import QGraphicsScene

from chessgrid.core.board_model import BoardModel
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move import Move
from chessgrid.core.types import Position
from chessgrid.ui.board.highlights import HighlightKind, highlight_kind
from chessgrid.ui.board.selection import SelectionController
from chessgrid.ui.board.square_grid import SquareGrid
from chessgrid.ui.styles.theme import BoardTheme


def P(name: str) -> Position:
    return Position.parse(name)


class _Harness:
    def __init__(self, fen: str | None = None) -> None:
        self.scene = QGraphicsScene()
        self.grid = SquareGrid(self.scene, 64, BoardTheme.default())
        self.commits: list[Move] = []
        self.model = BoardModel(fen)
        self.controller = SelectionController(
            self.grid, BoardTheme.default(), on_commit=self.commits.append
        )
        self.controller.set_model(self.model)

    def kinds(self) -> dict[str, HighlightKind | None]:
        return {
            sq.position.name: highlight_kind(sq.highlight)
            for sq in self.grid.highlighted()
        }


def test_selecting_pawn_marks_origin_and_destinations() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))

    assert h.controller.is_selected
    assert h.kinds() == {
        "e2": HighlightKind.SELECTED,
        "e3": HighlightKind.QUIET_TARGET,
        "e4": HighlightKind.QUIET_TARGET,
    }
    assert {sq.position for sq in h.grid.bound_squares()} == {P("e3"), P("e4")}


def test_capture_destination_uses_capture_marker() -> None:
    h = _Harness("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
    h.controller.handle_click(P("e4"))
    assert h.kinds()["d5"] == HighlightKind.CAPTURE_TARGET
    assert h.kinds()["e5"] == HighlightKind.QUIET_TARGET


def test_clicking_empty_or_enemy_square_selects_nothing() -> None:
    h = _Harness()
    h.controller.handle_click(P("e4"))
    h.controller.handle_click(P("e7"))
    assert not h.controller.is_selected
    assert h.grid.highlighted() == []


def test_piece_without_moves_is_not_selectable() -> None:
    h = _Harness()
    h.controller.handle_click(P("a1"))
    assert not h.controller.is_selected
    assert h.grid.bound_squares() == []


def test_clicking_origin_again_deselects() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))
    h.controller.handle_click(P("e2"))
    assert not h.controller.is_selected
    assert h.grid.highlighted() == []
    assert h.grid.bound_squares() == []


def test_clicking_another_own_piece_switches_selection() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))
    h.controller.handle_click(P("g1"))

    assert h.controller.selection is not None
    assert h.controller.selection.origin == P("g1")
    assert set(h.kinds()) == {"g1", "f3", "h3"}
    assert {sq.position for sq in h.grid.bound_squares()} == {P("f3"), P("h3")}


def test_clicking_unrelated_square_clears_selection() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))
    h.controller.handle_click(P("a5"))
    assert not h.controller.is_selected
    assert h.grid.highlighted() == []


def test_destination_click_commits_bound_move() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))
    h.controller.handle_click(P("e4"))

    assert h.commits == [Move(P("e2"), P("e4"))]
    # Highlights stay until the commit completes
    assert h.controller.is_selected
    assert h.model.piece_at(P("e2")) is not None


def test_clear_removes_highlights_and_handlers() -> None:
    h = _Harness()
    h.controller.handle_click(P("e2"))
    h.controller.clear()
    assert h.grid.highlighted() == []
    assert h.grid.bound_squares() == []
    assert h.controller.selection is None


def test_promotion_uses_chooser_result() -> None:
    h = _Harness("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
    asked: list[Color] = []

    def choose(color: Color) -> PieceType | None:
        asked.append(color)
        return PieceType.ROOK

    h.controller.set_promotion_chooser(choose)
    h.controller.handle_click(P("a7"))
    h.controller.handle_click(P("a8"))

    assert asked == [Color.WHITE]
    assert len(h.commits) == 1
    assert h.commits[0].promotion == PieceType.ROOK


def test_promotion_cancel_keeps_selection() -> None:
    h = _Harness("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
    h.controller.set_promotion_chooser(lambda _color: None)
    h.controller.handle_click(P("a7"))
    h.controller.handle_click(P("a8"))

    assert h.commits == []
    assert h.controller.is_selected


def test_default_promotion_is_queen() -> None:
    h = _Harness("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
    h.controller.handle_click(P("a7"))
    h.controller.handle_click(P("a8"))
    assert h.commits[0].promotion == PieceType.QUEEN


def test_check_marker_redrawn_after_clear() -> None:
    h = _Harness("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")
    h.controller.clear()
    assert h.kinds() == {"e8": HighlightKind.CHECK}

    h.controller.handle_click(P("e8"))
    h.controller.handle_click(P("e8"))
    assert h.kinds() == {"e8": HighlightKind.CHECK}


def test_show_last_move_marks_both_squares() -> None:
    h = _Harness()
    h.controller.show_last_move(Move(P("e2"), P("e4")))
    assert h.kinds() == {
        "e2": HighlightKind.LAST_MOVE,
        "e4": HighlightKind.LAST_MOVE,
    }


def test_without_model_clicks_are_ignored() -> None:
    scene = QGraphicsScene()
    grid = SquareGrid(scene, 64, BoardTheme.default())
    controller = SelectionController(grid, BoardTheme.default(), on_commit=lambda _move: None)
    controller.handle_click(P("e2"))
    assert not controller.is_selected
