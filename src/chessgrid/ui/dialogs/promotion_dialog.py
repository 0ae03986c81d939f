"""PromotionDialog — modal chooser for the piece a pawn promotes to."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QGridLayout,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.ui.resources import piece_pixmap

# Offered in this order; each has a one-letter shortcut.
PROMOTION_CHOICES: tuple[tuple[PieceType, str], ...] = (
    (PieceType.QUEEN, "Q"),
    (PieceType.ROOK, "R"),
    (PieceType.BISHOP, "B"),
    (PieceType.KNIGHT, "N"),
)

_ICON_SIZE = 52


class PromotionDialog(QDialog):
    """One button per promotion piece, drawn in the promoting side's colour.

    Escape or *Cancel* rejects the dialog, which leaves the move unplayed.
    """

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promote pawn")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._choice: PieceType | None = None
        self.buttons: dict[PieceType, QToolButton] = {}

        grid = QGridLayout()
        for column, (piece_type, key) in enumerate(PROMOTION_CHOICES):
            button = QToolButton()
            button.setIcon(QIcon(piece_pixmap(Piece(color, piece_type), _ICON_SIZE)))
            button.setIconSize(QSize(_ICON_SIZE, _ICON_SIZE))
            button.setText(f"{piece_type.name.capitalize()} ({key})")
            button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextUnderIcon)
            button.setShortcut(QKeySequence(key))
            button.clicked.connect(
                lambda _checked=False, pt=piece_type: self.choose(pt)
            )
            grid.addWidget(button, 0, column)
            self.buttons[piece_type] = button

        cancel = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        cancel.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(grid)
        layout.addWidget(cancel)

    @property
    def choice(self) -> PieceType | None:
        """The accepted piece type; ``None`` until a button is pressed."""
        return self._choice

    def choose(self, piece_type: PieceType) -> None:
        self._choice = piece_type
        self.accept()

    @classmethod
    def ask(cls, color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Run the dialog; returns ``None`` when the user backs out."""
        dialog = cls(color, parent)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return dialog.choice
