"""MoveAnimator — slides a moving piece, then commits the move to the model."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QPointF,
    QVariantAnimation,
    pyqtSignal,
)
from PyQt6.QtWidgets import QGraphicsScene

from chessgrid.core.board_model import BoardModel
from chessgrid.core.move import Move
from chessgrid.ui.board.board_sync import BoardStateSync
from chessgrid.ui.board.piece_item import PieceItem, make_piece_item
from chessgrid.ui.board.selection import SelectionController
from chessgrid.ui.board.square_grid import SquareGrid
from chessgrid.ui.sounds import SoundPlayer

_LOGGER = logging.getLogger(__name__)

InputGate = Callable[[bool], None]
CompletionCallback = Callable[["AnimationJob"], None]

_OVERLAY_Z = 10


@dataclass(eq=False)
class AnimationJob:
    """One in-flight move transition."""

    move: Move
    model: BoardModel
    source: QPointF
    destination: QPointF
    duration_ms: int
    generation: int
    overlay: PieceItem | None = None
    animation: QVariantAnimation | None = None
    completed: bool = False
    applied: bool = False


class MoveAnimator(QObject):
    """Runs at most one :class:`AnimationJob` at a time.

    The completion handler is the only place in the application where the
    board model is mutated. Board input is disabled through *input_gate*
    from :meth:`commit` until that handler runs.

    Signals:
        committed(Move, str): A move was applied; carries its SAN.
    """

    committed = pyqtSignal(object, str)

    DEFAULT_DURATION_MS = 300

    def __init__(
        self,
        scene: QGraphicsScene,
        grid: SquareGrid,
        sync: BoardStateSync,
        selection: SelectionController,
        sounds: SoundPlayer | None,
        *,
        input_gate: InputGate,
        on_complete: CompletionCallback | None = None,
        duration_ms: int = DEFAULT_DURATION_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._scene = scene
        self._grid = grid
        self._sync = sync
        self._selection = selection
        self._sounds = sounds
        self._input_gate = input_gate
        self._on_complete = on_complete
        self._duration_ms = duration_ms
        self._generation = 0
        self._job: AnimationJob | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def active_job(self) -> AnimationJob | None:
        return self._job

    @property
    def is_animating(self) -> bool:
        return self._job is not None

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def set_duration(self, duration_ms: int) -> None:
        self._duration_ms = max(0, duration_ms)

    # ── Public API ───────────────────────────────────────────────────────

    def commit(self, move: Move, model: BoardModel) -> bool:
        """Start animating *move*; the model is updated when the slide ends.

        Returns ``False`` if another move is still animating.
        """
        if self._job is not None:
            _LOGGER.warning("Commit of %s refused: animation in progress", move)
            return False

        self._input_gate(False)

        grid = self._grid
        grid.set_piece(move.origin, None)
        source = grid.scene_pos(move.origin)
        destination = grid.scene_pos(move.destination)

        overlay: PieceItem | None = None
        piece = model.piece_at(move.origin)
        if piece is not None:
            overlay = make_piece_item(piece, grid.tile)
        if overlay is not None:
            overlay.setPos(source + QPointF(overlay.margin, overlay.margin))
            overlay.setZValue(_OVERLAY_Z)
            self._scene.addItem(overlay)

        job = AnimationJob(
            move=move,
            model=model,
            source=source,
            destination=destination,
            duration_ms=self._duration_ms,
            generation=self._generation,
            overlay=overlay,
        )

        anim = QVariantAnimation(self)
        anim.setDuration(job.duration_ms)
        anim.setStartValue(source)
        anim.setEndValue(destination)
        anim.setEasingCurve(QEasingCurve.Type.InOutCubic)
        anim.valueChanged.connect(lambda value: self._on_step(job, value))
        anim.finished.connect(lambda: self._on_finished(job))
        job.animation = anim
        self._job = job

        _LOGGER.debug("Animating %s over %d ms", move, job.duration_ms)
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)
        return True

    def invalidate(self) -> None:
        """Discard the effects of any in-flight job.

        Its completion still fires later but no longer touches the model or
        the board visuals.
        """
        self._generation += 1
        job = self._job
        if job is not None:
            _LOGGER.debug("Invalidated in-flight animation of %s", job.move)
            self._remove_overlay(job)

    # ── Animation callbacks ──────────────────────────────────────────────

    def _on_step(self, job: AnimationJob, value: object) -> None:
        overlay = job.overlay
        if overlay is None or overlay.scene() is None or not isinstance(value, QPointF):
            return
        overlay.setPos(value + QPointF(overlay.margin, overlay.margin))

    def _on_finished(self, job: AnimationJob) -> None:
        if job.completed:
            return
        job.completed = True
        if self._job is job:
            self._job = None

        self._input_gate(True)

        if job.generation != self._generation:
            _LOGGER.debug("Dropped stale completion of %s", job.move)
            self._remove_overlay(job)
            self._notify(job)
            return

        model = job.model
        move = job.move
        san = model.san(move) if model.is_legal(move) else None
        if san is None or not model.apply(move):
            _LOGGER.error("Model rejected move %s", move)
            self._sync.refresh(model)
            self._selection.clear()
            self._remove_overlay(job)
            self._notify(job)
            return
        job.applied = True

        self._sync.refresh(model)
        self._selection.clear()
        self._selection.show_last_move(move)
        self._remove_overlay(job)
        if self._sounds is not None:
            self._sounds.play_move_cue(model)

        _LOGGER.debug("Committed %s (%s)", move, san)
        self.committed.emit(move, san)
        self._notify(job)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _remove_overlay(self, job: AnimationJob) -> None:
        overlay = job.overlay
        if overlay is not None and overlay.scene() is not None:
            overlay.scene().removeItem(overlay)
        job.overlay = None

    def _notify(self, job: AnimationJob) -> None:
        if self._on_complete is not None:
            self._on_complete(job)
