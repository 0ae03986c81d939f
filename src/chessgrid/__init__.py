"""chessgrid — interactive two-player chessboard built on PyQt6 and python-chess."""

__version__ = "0.1.0"
