"""Tests for sound cue selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from chessgrid.core.board_model import BoardModel
from chessgrid.core.move import Move
from chessgrid.core.types import Position
from chessgrid.ui import sounds
from chessgrid.ui.sounds import SoundPlayer, cue_for


def test_cue_after_white_move_is_black_cue() -> None:
    model = BoardModel()
    model.apply(Move(Position.parse("e2"), Position.parse("e4")))
    assert cue_for(model) == "move_black"


def test_cue_with_white_to_move() -> None:
    assert cue_for(BoardModel()) == "move_white"


def test_check_cue_wins() -> None:
    assert cue_for(BoardModel("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")) == "check"


def test_bundled_cues_are_loaded() -> None:
    for filename in SoundPlayer._NAMES.values():
        assert (sounds._SOUNDS_DIR / filename).is_file()

    player = SoundPlayer()
    assert set(player._effects) == set(SoundPlayer._NAMES)


def test_player_tolerates_missing_files(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(sounds, "_SOUNDS_DIR", tmp_path)
    player = SoundPlayer()
    assert player._effects == {}
    player.set_volume(150)
    assert player._volume == 1.0
    assert player.play_move_cue(BoardModel()) == "move_white"

    player.set_enabled(False)
    assert player.play_move_cue(BoardModel()) == "move_white"
