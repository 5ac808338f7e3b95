"""
TicTacToe
=========
A two-player TicTacToe game on a 3x3 board.
The game engine lives in `logic`; `ui` and `main` are thin front-ends
that only forward moves to the engine and draw what it returns.

X always moves first.
"""

__version__ = "1.0.0"
