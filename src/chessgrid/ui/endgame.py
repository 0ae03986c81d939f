"""EndgameNotifier — asks the user what to do once a game is over."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtWidgets import QMessageBox, QWidget

from chessgrid.core.board_model import BoardModel, EndgameInfo
from chessgrid.core.enums import EndgameType
from chessgrid.ui.board.board_scene import BoardScene

_LOGGER = logging.getLogger(__name__)

# Returns True when the user asks for a new game.
EndgamePrompt = Callable[[EndgameInfo, QWidget | None], bool]


def describe_endgame(info: EndgameInfo) -> str:
    """Dialog text for *info*."""
    if info.classification == EndgameType.CHECKMATE and info.winner is not None:
        return f"Checkmate! {info.winner.name.capitalize()} won."
    return f"Game ended due to {info.classification.label}."


def ask_new_game(info: EndgameInfo, parent: QWidget | None = None) -> bool:
    """Show the end-of-game message box; ``True`` means "New Game"."""
    box = QMessageBox(parent)
    box.setWindowTitle("Game Ended")
    box.setText(describe_endgame(info))
    new_game = box.addButton("New Game", QMessageBox.ButtonRole.AcceptRole)
    box.addButton("Close", QMessageBox.ButtonRole.RejectRole)
    box.exec()
    return box.clickedButton() is new_game


class EndgameNotifier(QObject):
    """Bridges the board's terminal-state signal to a single modal decision.

    The decision is shown from the event loop, after the triggering move
    has finished drawing, and only one can be pending at a time.

    Signals:
        new_game_started(): The board was reset to the starting position.
    """

    new_game_started = pyqtSignal()

    def __init__(
        self,
        scene: BoardScene,
        parent_widget: QWidget | None = None,
        *,
        prompt: EndgamePrompt = ask_new_game,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._scene = scene
        self._parent_widget = parent_widget
        self._prompt = prompt
        self._pending = False
        scene.game_ended.connect(self._on_game_ended)

    @property
    def is_pending(self) -> bool:
        return self._pending

    def start_new_game(self) -> None:
        """Reset the board to a fresh standard starting position."""
        _LOGGER.info("Starting a new game")
        self._scene.replace_model(BoardModel())
        self.new_game_started.emit()

    def _on_game_ended(self, info: EndgameInfo) -> None:
        if self._pending:
            _LOGGER.debug("End-of-game decision already pending; ignoring %s", info)
            return
        self._pending = True
        QTimer.singleShot(0, lambda: self._decide(info))

    def _decide(self, info: EndgameInfo) -> None:
        try:
            wants_new_game = self._prompt(info, self._parent_widget)
        finally:
            self._pending = False
        if wants_new_game:
            self.start_new_game()
