"""Move and check cues using Qt multimedia."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QSoundEffect

from chessgrid.core.board_model import BoardModel
from chessgrid.core.enums import Color
from chessgrid.runtime_assets import asset_path

_LOGGER = logging.getLogger(__name__)

_SOUNDS_DIR = asset_path("sounds")


def cue_for(model: BoardModel) -> str:
    """Pick the cue for the position reached after a move.

    "check" when either king is attacked, otherwise one of two move cues
    keyed by the side now to move.
    """
    if model.is_in_check(Color.WHITE) or model.is_in_check(Color.BLACK):
        return "check"
    if model.side_to_move == Color.WHITE:
        return "move_white"
    return "move_black"


class SoundPlayer:
    """Plays board sound cues (WAV via QSoundEffect).

    Each cue uses a dedicated QSoundEffect pre-loaded at startup. A new cue
    always interrupts the previous one. Missing files are skipped.
    """

    _NAMES: dict[str, str] = {
        "check": "check.wav",
        "move_white": "move2.wav",
        "move_black": "move1.wav",
    }

    def __init__(self) -> None:
        self._enabled = True
        self._volume = 0.8
        self._effects: dict[str, QSoundEffect] = {}
        self._current: QSoundEffect | None = None

        for name, filename in self._NAMES.items():
            path = _SOUNDS_DIR / filename
            if not path.exists():
                _LOGGER.debug("Sound cue %r not found at %s", name, path)
                continue
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[name] = effect

    # ── Public API ────────────────────────────────────────────────────────

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def set_volume(self, volume: int) -> None:
        """Set volume in range 0–100."""
        self._volume = max(0, min(100, volume)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def play_move_cue(self, model: BoardModel) -> str:
        """Play the cue for the move just applied to *model*; returns its name."""
        name = cue_for(model)
        self._play(name)
        return name

    # ── Internal helpers ──────────────────────────────────────────────────

    def _play(self, name: str) -> None:
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            return
        if self._current is not None and self._current.isPlaying():
            self._current.stop()
        self._current = effect
        effect.play()
