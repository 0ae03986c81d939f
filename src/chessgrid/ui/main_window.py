"""MainWindow — top-level window assembling the board and its side panel."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QFont
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from chessgrid.core.board_model import EndgameInfo
from chessgrid.core.enums import Color
from chessgrid.core.move import Move
from chessgrid.ui.board.board_scene import BoardScene
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.dialogs.promotion_dialog import PromotionDialog
from chessgrid.ui.endgame import EndgameNotifier, describe_endgame
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.sounds import SoundPlayer
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

STATUS_IN_PROGRESS = "Game status: in progress"
STATUS_ENDED = "Game status: ended"


class MainWindow(QMainWindow):
    """Main application window: board, move list and game menu."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chessgrid")
        self.setMinimumSize(640, 480)
        self.resize(820, 600)

        self._settings = settings or AppSettings()
        self._sound_player = SoundPlayer()
        self._scene = BoardScene(
            tile=self._settings.tile_size,
            theme=BoardTheme.named(self._settings.board_theme),
            sounds=self._sound_player,
            animation_ms=self._settings.animation_ms,
            parent=self,
        )
        self._scene.set_promotion_chooser(
            lambda color: PromotionDialog.ask(color, self)
        )
        self._notifier = EndgameNotifier(self._scene, self, parent=self)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self.apply_settings()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView(self._scene)
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        header = QLabel("Moves")
        header.setFont(QFont("Segoe UI", 12, QFont.Weight.Bold))
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        right.addWidget(header)

        self._move_list = QListWidget()
        self._move_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        right.addWidget(self._move_list, stretch=1)

        self._status_label = QLabel(STATUS_IN_PROGRESS)
        right.addWidget(self._status_label)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(220)
        root.addWidget(right_widget)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._notifier.start_new_game)
        menu_game.addAction(self._act_new_game)

        menu_game.addSeparator()

        self._act_copy_fen = QAction("Copy FEN", self)
        self._act_copy_fen.triggered.connect(self._on_copy_fen)
        menu_game.addAction(self._act_copy_fen)

        self._act_copy_pgn = QAction("Copy PGN", self)
        self._act_copy_pgn.triggered.connect(self._on_copy_pgn)
        menu_game.addAction(self._act_copy_pgn)

    def _connect_signals(self) -> None:
        self._scene.move_committed.connect(self._on_move_committed)
        self._scene.game_ended.connect(self._on_game_ended)
        self._notifier.new_game_started.connect(self._on_new_game_started)

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self) -> None:
        s = self._settings
        self._scene.set_theme(BoardTheme.named(s.board_theme))
        self._scene.set_show_coordinates(s.show_coordinates)
        self._scene.set_animation_duration(s.animation_ms)
        self._sound_player.set_enabled(s.sound_enabled)
        self._sound_player.set_volume(s.sound_volume)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_committed(self, move: Move, san: str) -> None:
        # Side to move has already switched, so the mover is its opposite.
        mover = self._scene.model.side_to_move.opposite
        ply = self._move_list.count()
        if mover == Color.WHITE:
            self._move_list.addItem(f"{ply // 2 + 1}. {san}")
        else:
            self._move_list.addItem(f"{ply // 2 + 1}... {san}")
        self._move_list.scrollToBottom()

    def _on_game_ended(self, info: EndgameInfo) -> None:
        _LOGGER.info("Game ended: %s", describe_endgame(info))
        self._status_label.setText(STATUS_ENDED)

    def _on_new_game_started(self) -> None:
        self._move_list.clear()
        self._status_label.setText(STATUS_IN_PROGRESS)

    def _on_copy_fen(self) -> None:
        clipboard = QApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(self._scene.model.to_fen())

    def _on_copy_pgn(self) -> None:
        clipboard = QApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(self._scene.model.to_pgn())
