"""Tests for the promotion chooser dialog."""

from __future__ import annotations

from chessgrid.core.enums import Color, PieceType
from chessgrid.ui.dialogs.promotion_dialog import PROMOTION_CHOICES, PromotionDialog


def test_offers_four_pieces() -> None:
    dialog = PromotionDialog(Color.BLACK)
    assert list(dialog.buttons) == [pt for pt, _key in PROMOTION_CHOICES]
    assert PieceType.KING not in dialog.buttons
    assert dialog.choice is None


def test_button_click_accepts_with_choice() -> None:
    dialog = PromotionDialog(Color.WHITE)
    dialog.buttons[PieceType.KNIGHT].click()
    assert dialog.result() == PromotionDialog.DialogCode.Accepted
    assert dialog.choice == PieceType.KNIGHT


def test_reject_leaves_no_choice() -> None:
    dialog = PromotionDialog(Color.WHITE)
    dialog.reject()
    assert dialog.result() == PromotionDialog.DialogCode.Rejected
    assert dialog.choice is None
