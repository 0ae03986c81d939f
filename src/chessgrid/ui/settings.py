"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 64  # px per square
    show_coordinates: bool = True
    animation_ms: int = 300

    # Sound
    sound_enabled: bool = True
    sound_volume: int = 80  # 0–100

    # Diagnostics
    log_level: str = "WARNING"
