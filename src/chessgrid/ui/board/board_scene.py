"""BoardScene — QGraphicsScene owning the board grid and its controllers."""

from __future__ import annotations

import logging
from enum import IntEnum, auto

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QGraphicsScene, QGraphicsSceneMouseEvent

from chessgrid.core.board_model import BoardModel, EndgameInfo
from chessgrid.core.move import Move
from chessgrid.core.types import Position
from chessgrid.ui.board.animator import AnimationJob, MoveAnimator
from chessgrid.ui.board.board_sync import BoardStateSync
from chessgrid.ui.board.selection import PromotionChooser, SelectionController
from chessgrid.ui.board.square_grid import SquareGrid
from chessgrid.ui.sounds import SoundPlayer
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardPhase(IntEnum):
    """States of the board controller."""

    IDLE = auto()
    SELECTED = auto()
    ANIMATING = auto()


class BoardScene(QGraphicsScene):
    """Interactive chessboard.

    Transitions:
        IDLE / SELECTED --click--> IDLE / SELECTED   (SelectionController)
        SELECTED --destination click--> ANIMATING    (MoveAnimator.commit)
        ANIMATING --animation complete--> IDLE       (_on_animation_complete)

    Clicks are ignored while ANIMATING. :meth:`replace_model` resets the
    board from any phase.

    Signals:
        move_committed(Move, str): A move was applied; carries its SAN.
        game_ended(EndgameInfo): The current model reached a terminal state.
        phase_changed(BoardPhase): The controller changed phase.
    """

    move_committed = pyqtSignal(object, str)
    game_ended = pyqtSignal(object)
    phase_changed = pyqtSignal(object)

    DEFAULT_TILE = 64

    def __init__(
        self,
        model: BoardModel | None = None,
        *,
        tile: int = DEFAULT_TILE,
        theme: BoardTheme | None = None,
        sounds: SoundPlayer | None = None,
        animation_ms: int = MoveAnimator.DEFAULT_DURATION_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or BoardTheme.default()
        self._interactive = True
        self._phase = BoardPhase.IDLE
        self._pending_endgame: EndgameInfo | None = None

        self._grid = SquareGrid(self, tile, self._theme)
        self._sync = BoardStateSync(self._grid)
        self._selection = SelectionController(
            self._grid, self._theme, on_commit=self._on_commit
        )
        self._animator = MoveAnimator(
            self,
            self._grid,
            self._sync,
            self._selection,
            sounds,
            input_gate=self.set_interactive,
            on_complete=self._on_animation_complete,
            duration_ms=animation_ms,
            parent=self,
        )
        self._animator.committed.connect(self.move_committed.emit)

        self._model = model if model is not None else BoardModel()
        self._attach(self._model)
        self._selection.clear()
        self._sync.refresh(self._model)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def model(self) -> BoardModel:
        """The authoritative board model; change it with :meth:`replace_model`."""
        return self._model

    @property
    def phase(self) -> BoardPhase:
        return self._phase

    @property
    def grid(self) -> SquareGrid:
        return self._grid

    @property
    def selection(self) -> SelectionController:
        return self._selection

    @property
    def animator(self) -> MoveAnimator:
        return self._animator

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    # ── Public API ───────────────────────────────────────────────────────

    def replace_model(self, model: BoardModel) -> None:
        """Swap in a new board model; this is a full board reset.

        Any in-flight animation loses its effects, every highlight and
        transient handler is removed, and the pieces are redrawn from
        *model*. The phase becomes IDLE unless a stale animation is still
        running, in which case it returns to IDLE when that animation ends.
        """
        _LOGGER.debug("Replacing board model")
        self._animator.invalidate()
        self._detach(self._model)
        self._pending_endgame = None
        self._model = model
        self._attach(model)
        self._selection.clear()
        self._sync.refresh(model)
        if not self._animator.is_animating:
            self._set_phase(BoardPhase.IDLE)

    def handle_click(self, pos: Position) -> None:
        """Route a click on *pos* to the selection state machine."""
        if not self._interactive or self._phase == BoardPhase.ANIMATING:
            return
        self._selection.handle_click(pos)
        if self._phase != BoardPhase.ANIMATING:
            self._set_phase(
                BoardPhase.SELECTED if self._selection.is_selected else BoardPhase.IDLE
            )

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable board input."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._grid.set_theme(theme)
        self._selection.set_theme(theme)

    def set_show_coordinates(self, visible: bool) -> None:
        self._grid.set_show_coordinates(visible)

    def set_animation_duration(self, duration_ms: int) -> None:
        self._animator.set_duration(duration_ms)

    def set_promotion_chooser(self, chooser: PromotionChooser) -> None:
        self._selection.set_promotion_chooser(chooser)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or not self._interactive:
            return super().mousePressEvent(event)
        pos = self._grid.position_at(event.scenePos())
        if pos is None:
            return super().mousePressEvent(event)
        self.handle_click(pos)
        event.accept()

    # ── Transitions ──────────────────────────────────────────────────────

    def _on_commit(self, move: Move) -> None:
        previous = self._phase
        # Entered before commit(): a zero-length animation may complete inside it.
        self._set_phase(BoardPhase.ANIMATING)
        if not self._animator.commit(move, self._model):
            self._set_phase(previous)

    def _on_animation_complete(self, job: AnimationJob) -> None:
        self._set_phase(BoardPhase.IDLE)
        if job.applied and self._pending_endgame is not None:
            info, self._pending_endgame = self._pending_endgame, None
            self.game_ended.emit(info)

    def _on_game_over(self, info: EndgameInfo) -> None:
        # Raised from inside the model mutation; surfaced once visuals settle.
        if self._phase == BoardPhase.ANIMATING:
            self._pending_endgame = info
        else:
            self.game_ended.emit(info)

    def _set_phase(self, phase: BoardPhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        self.phase_changed.emit(phase)

    # ── Model subscription ───────────────────────────────────────────────

    def _attach(self, model: BoardModel) -> None:
        model.events.on_game_over.append(self._on_game_over)
        self._selection.set_model(model)

    def _detach(self, model: BoardModel) -> None:
        if self._on_game_over in model.events.on_game_over:
            model.events.on_game_over.remove(self._on_game_over)
