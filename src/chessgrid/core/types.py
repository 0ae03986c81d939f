"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board coordinate: *file* 0–7 (a–h), *rank* 0–7 (1–8)."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Position out of range: ({self.file}, {self.rank})")

    # ── Grid addressing ──────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Row-major grid index; a8 is 0, h1 is 63."""
        return (7 - self.rank) * 8 + self.file

    @classmethod
    def from_index(cls, index: int) -> Position:
        if not 0 <= index < 64:
            raise ValueError(f"Grid index out of range: {index}")
        row, col = divmod(index, 8)
        return cls(col, 7 - row)

    # ── Notation ─────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Position:
        """``"e4"`` → Position(4, 3)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), int(name[1]) - 1)

    @property
    def name(self) -> str:
        return f"{_FILES[self.file]}{self.rank + 1}"

    @property
    def is_light(self) -> bool:
        """True for light squares (a1 is dark)."""
        return (self.file + self.rank) % 2 == 1

    def __str__(self) -> str:
        return self.name


ALL_POSITIONS: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))
